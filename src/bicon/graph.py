"""
Undirected graph over integer vertex indices chosen by the caller
"""
import logging
from collections import OrderedDict
from typing import Dict, Iterable, Iterator, List, Tuple

from pydantic import ValidationError

from .dfs import DFS
from .error import (
    BiconError,
    InvalidIndexError,
    VertexNotFoundError,
    DuplicateVertexError,
    SelfLoopError,
    DuplicateEdgeError,
    MissingEdgeError,
    DuplicateConnectionError,
    MissingConnectionError,
    NotationError,
)
from .notation import GraphNotation

logger = logging.getLogger(__name__)


class Vertex:
    """
    Graph node without payload. It only knows its neighbors, which are other
    Vertex instances kept in insertion order.
    """

    def __init__(self):
        # Used as an ordered set; values are unused
        self._neighbors: Dict["Vertex", None] = OrderedDict()

    def __repr__(self):
        return f"<Vertex at {id(self):#x} with degree {self.degree}>"

    @staticmethod
    def connect(vertex1: "Vertex", vertex2: "Vertex") -> None:
        if vertex1 is vertex2:
            raise DuplicateConnectionError("A vertex cannot be connected to itself")
        if vertex1.is_neighbor(vertex2) or vertex2.is_neighbor(vertex1):
            raise DuplicateConnectionError(
                f"{vertex1!r} and {vertex2!r} are already connected"
            )
        vertex1._neighbors[vertex2] = None
        vertex2._neighbors[vertex1] = None

    @staticmethod
    def disconnect(vertex1: "Vertex", vertex2: "Vertex") -> None:
        if not (vertex1.is_neighbor(vertex2) and vertex2.is_neighbor(vertex1)):
            raise MissingConnectionError(
                f"{vertex1!r} and {vertex2!r} are not connected"
            )
        del vertex1._neighbors[vertex2]
        del vertex2._neighbors[vertex1]

    def is_neighbor(self, vertex: "Vertex") -> bool:
        return vertex in self._neighbors

    @property
    def neighbors(self) -> List["Vertex"]:
        """Return all neighbors as a list, in the order they were connected"""
        return list(self._neighbors)

    @property
    def degree(self) -> int:
        return len(self._neighbors)


def check_index(index, name="index") -> int:
    # bool is a subclass of int but never a meaningful index
    if not isinstance(index, int) or isinstance(index, bool):
        raise InvalidIndexError(index, name)
    return index


class Graph:
    """
    Undirected graph without self-loops or multi-edges.

    Vertices are addressed by integer indices that the caller chooses; they
    need not be contiguous or start at zero. The graph owns one Vertex per
    index and keeps the index <-> Vertex mapping bijective.
    """

    DFS = DFS

    def __init__(self, indices: Iterable[int] = ()):
        self._vertices: Dict[int, Vertex] = OrderedDict()
        self._indices: Dict[Vertex, int] = dict()
        for index in indices:
            self.add_vertex(index)

    def __repr__(self):
        return f"Graph(vertices={len(self)}, edges={self.count_edges()})"

    def __len__(self):
        return len(self._vertices)

    def __contains__(self, index):
        return index in self._vertices

    def _vertex(self, index, name="index") -> Vertex:
        check_index(index, name)
        try:
            return self._vertices[index]
        except KeyError:
            raise VertexNotFoundError(index) from None

    def add_vertex(self, index: int) -> Vertex:
        check_index(index)
        if index in self._vertices:
            raise DuplicateVertexError(index)
        vertex = Vertex()
        self._vertices[index] = vertex
        self._indices[vertex] = index
        return vertex

    def remove_vertex(self, index: int) -> None:
        """Remove a vertex and all edges incident to it"""
        vertex = self._vertex(index)
        for neighbor in vertex.neighbors:
            Vertex.disconnect(vertex, neighbor)
        del self._vertices[index]
        del self._indices[vertex]

    def _endpoints(self, from_, to) -> Tuple[int, int, Vertex, Vertex]:
        """
        Validate an unordered pair of indices. Return it sorted, together with
        the two vertices.
        """
        check_index(from_, "from")
        check_index(to, "to")
        from_, to = sorted((from_, to))
        if from_ == to:
            raise SelfLoopError(f"Edge from {from_} to itself is not allowed")
        return from_, to, self._vertex(from_, "from"), self._vertex(to, "to")

    def add_edge(self, from_: int, to: int) -> None:
        from_, to, vertex_from, vertex_to = self._endpoints(from_, to)
        if vertex_from.is_neighbor(vertex_to):
            raise DuplicateEdgeError(from_, to)
        Vertex.connect(vertex_from, vertex_to)

    def remove_edge(self, from_: int, to: int) -> None:
        from_, to, vertex_from, vertex_to = self._endpoints(from_, to)
        if not vertex_from.is_neighbor(vertex_to):
            raise MissingEdgeError(from_, to)
        Vertex.disconnect(vertex_from, vertex_to)

    @property
    def vertices(self) -> List[int]:
        """Return all vertex indices as a list, in insertion order"""
        return list(self._vertices)

    def has_vertex(self, index: int) -> bool:
        return check_index(index) in self._vertices

    def has_edge(self, from_: int, to: int) -> bool:
        return self._vertex(from_, "from").is_neighbor(self._vertex(to, "to"))

    def neighbors(self, index: int) -> List[int]:
        """Return the indices of all neighbors of a vertex"""
        return [self._indices[vertex] for vertex in self._vertex(index).neighbors]

    def degree(self, index: int) -> int:
        return self._vertex(index).degree

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield all edges as pair (index1, index2)"""
        seen = set()
        for index1, vertex in self._vertices.items():
            seen.add(vertex)
            for neighbor in vertex.neighbors:
                if neighbor in seen:
                    continue
                yield index1, self._indices[neighbor]

    def count_edges(self) -> int:
        """Return number of edges"""
        return sum(vertex.degree for vertex in self._vertices.values()) // 2

    def induced_subgraph(self, indices: Iterable[int]) -> "Graph":
        """
        Return a new graph that has exactly the given vertices and all edges
        of this graph between them
        """
        indices = list(OrderedDict.fromkeys(indices))
        for index in indices:
            self._vertex(index)
        subgraph = Graph(indices)
        for index in indices:
            for neighbor in self.neighbors(index):
                if neighbor in subgraph and not subgraph.has_edge(index, neighbor):
                    subgraph.add_edge(index, neighbor)
        return subgraph

    def connected_components(self) -> List["Graph"]:
        """Return a list of connected components."""
        visited = set()
        components = []
        for index in self._vertices:
            if index in visited:
                continue
            # Start a new component
            to_visit = [index]
            component = []
            while to_visit:
                i = to_visit.pop()
                if i in visited:
                    continue
                visited.add(i)
                component.append(i)
                for neighbor in self.neighbors(i):
                    if neighbor not in visited:
                        to_visit.append(neighbor)
            components.append(self.induced_subgraph(component))
        return components

    def articulation_points(self) -> List[int]:
        """
        Return all vertices that, when removed, would split their connected
        component. These are exactly the vertices shared by two or more
        biconnected components.
        """
        counts: Dict[int, int] = dict()
        for component in self.DFS.biconnected_components(self):
            for index in component.vertices:
                counts[index] = counts.get(index, 0) + 1
        return [index for index in self._vertices if counts.get(index, 0) > 1]

    @classmethod
    def from_notation(cls, source, name="source") -> "Graph":
        """
        Build a graph from its notation
        {"vertices": [...], "connections": [{"from": ..., "to": ...}, ...]}.

        Vertices are added first, in the listed order and with the listed
        indices, then the edges. Raise NotationError if the notation is
        malformed or inconsistent.
        """
        try:
            notation = GraphNotation.model_validate(source)
            graph = cls(notation.vertices)
            for connection in notation.connections:
                graph.add_edge(connection.from_, connection.to)
        except (ValidationError, BiconError) as e:
            raise NotationError(
                f"Unable to import {name} due to its {type(source).__name__} type"
            ) from e
        logger.debug(
            "Imported %s with %d vertices and %d edges",
            name,
            len(graph),
            graph.count_edges(),
        )
        return graph

    def to_notation(self) -> dict:
        """
        Return the notation of this graph. Connections are listed in the
        order in which a depth-first search visits them.
        """
        return {
            "vertices": self.vertices,
            "connections": [
                {"from": from_, "to": to}
                for from_, to in self.DFS.walk_depth_first(self)
            ],
        }
