"""depgraph — track which cells depend on which."""

from depgraph.domain.graph import DependencyGraph

__version__ = "0.1.0"

__all__ = ["DependencyGraph", "__version__"]
