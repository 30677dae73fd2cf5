from ._version import version as __version__
from .error import BiconError
from .graph import Graph, Vertex
from .dfs import DFS

__all__ = ["Graph", "Vertex", "DFS", "BiconError", "__version__"]
