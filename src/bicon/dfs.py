"""
Depth-first traversal and decomposition into biconnected components
"""
import logging
from collections import OrderedDict
from typing import List, Tuple

logger = logging.getLogger(__name__)

UNVISITED = -1


class _Frame:
    """A vertex on the traversal stack, with the neighbors still to look at"""

    def __init__(self, slot, neighbors):
        self.slot = slot
        self.neighbors = iter(neighbors)
        self.children = 0


class DFS:
    """
    State of one depth-first search over a graph.

    The vertices are copied into a dense arena (slot i holds vertex index
    self._indices[i]); discovery times, low-links and tree parents are lists
    parallel to it. Every edge is pushed onto the edge stack exactly once:
    tree edges when descending into an unvisited neighbor, back edges when
    they lead to an ancestor that is not the parent. Whenever a vertex turns
    out to separate the subtree just finished from the rest, the edges down
    to the tree edge into that subtree are popped as one biconnected
    component.

    Neighbors are visited in the order in which the edges were added, so the
    result is reproducible for the same sequence of add_edge calls.
    """

    def __init__(self, graph):
        self._indices: List[int] = graph.vertices
        slots = {index: slot for slot, index in enumerate(self._indices)}
        self._adjacency = [
            [slots[neighbor] for neighbor in graph.neighbors(index)]
            for index in self._indices
        ]
        n = len(self._indices)
        self._time = 0
        self._discovery = [UNVISITED] * n
        self._low = [UNVISITED] * n
        self._parent = [UNVISITED] * n
        self._edge_stack: List[Tuple[int, int]] = []
        self._trail: List[Tuple[int, int]] = []
        self._components: List[List[Tuple[int, int]]] = []
        self._done = False

    def run(self) -> "DFS":
        """Traverse all connected components, starting at each unvisited vertex"""
        if self._done:
            return self
        for slot in range(len(self._indices)):
            if self._discovery[slot] == UNVISITED:
                self._visit(slot)
                # The block containing the root is still on the stack. An
                # isolated vertex leaves nothing.
                if self._edge_stack:
                    self._components.append(list(self._edge_stack))
                    self._edge_stack.clear()
        self._done = True
        return self

    def _discover(self, slot):
        self._time += 1
        self._discovery[slot] = self._time
        self._low[slot] = self._time

    def _push_edge(self, v, w):
        self._edge_stack.append((v, w))
        self._trail.append((v, w))

    def _visit(self, root):
        self._discover(root)
        stack = [_Frame(root, self._adjacency[root])]
        while stack:
            frame = stack[-1]
            v = frame.slot
            for w in frame.neighbors:
                if self._discovery[w] == UNVISITED:
                    frame.children += 1
                    self._parent[w] = v
                    self._push_edge(v, w)
                    self._discover(w)
                    stack.append(_Frame(w, self._adjacency[w]))
                    break
                if w != self._parent[v] and self._discovery[w] < self._discovery[v]:
                    self._low[v] = min(self._low[v], self._discovery[w])
                    self._push_edge(v, w)
            else:
                # All neighbors of v are done; return to its parent u
                stack.pop()
                if not stack:
                    continue
                parent_frame = stack[-1]
                u = parent_frame.slot
                self._low[u] = min(self._low[u], self._low[v])
                if parent_frame.slot == root:
                    separates = parent_frame.children > 1
                else:
                    separates = self._low[v] >= self._discovery[u]
                if separates:
                    self._pop_component((u, v))

    def _pop_component(self, edge):
        component = []
        while True:
            popped = self._edge_stack.pop()
            component.append(popped)
            if popped == edge:
                break
        component.reverse()
        self._components.append(component)

    def _to_indices(self, edges) -> List[Tuple[int, int]]:
        return [(self._indices[v], self._indices[w]) for v, w in edges]

    def trail(self) -> List[Tuple[int, int]]:
        """Return all edges as (from, to) index pairs in the order they were visited"""
        return self._to_indices(self._trail)

    def component_edges(self) -> List[List[Tuple[int, int]]]:
        """Return the edges of each biconnected component as (from, to) index pairs"""
        return [self._to_indices(edges) for edges in self._components]

    @staticmethod
    def walk_depth_first(graph) -> List[Tuple[int, int]]:
        """
        Return all edges of the graph as (from, to) index pairs, in the order
        in which a depth-first search over all its connected components visits
        them. Both tree edges and back edges are included, each exactly once.
        """
        return DFS(graph).run().trail()

    @staticmethod
    def biconnected_components(graph) -> list:
        """
        Decompose the graph into its biconnected components. Return one
        induced subgraph per component. Vertices without edges belong to no
        component.
        """
        search = DFS(graph).run()
        components = []
        for edges in search.component_edges():
            indices = OrderedDict.fromkeys(index for edge in edges for index in edge)
            components.append(graph.induced_subgraph(indices))
        logger.debug(
            "Found %d biconnected components in a graph with %d vertices",
            len(components),
            len(graph),
        )
        return components
