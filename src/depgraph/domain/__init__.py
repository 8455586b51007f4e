"""Domain layer — the dependency graph and edge values.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
