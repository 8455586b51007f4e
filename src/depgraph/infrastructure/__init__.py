"""Infrastructure layer — edge-list files and the NetworkX adapter.

This layer depends on stdlib, the domain layer, and third-party libs (NetworkX).
It must never import from services, commands, or output.
"""
