"""
Exceptions raised by graph operations.

Every error is also an instance of the closest builtin exception, so callers
can catch either ``BiconError`` or, for example, ``LookupError``.
"""


class BiconError(Exception):
    pass


class InvalidIndexError(BiconError, TypeError):
    """A vertex index is not an integer"""

    def __init__(self, index, name="index"):
        super().__init__(
            f"Vertex {name} must be an integer, got {type(index).__name__} {index!r}"
        )
        self.index = index


class VertexNotFoundError(BiconError, LookupError):
    def __init__(self, index):
        super().__init__(f"Vertex {index} does not exist")
        self.index = index


class DuplicateVertexError(BiconError, ValueError):
    def __init__(self, index):
        super().__init__(f"Vertex {index} already exists")
        self.index = index


class SelfLoopError(BiconError, ValueError):
    pass


class DuplicateEdgeError(BiconError, ValueError):
    def __init__(self, from_, to):
        super().__init__(f"Edge from {from_} to {to} already exists")
        self.edge = (from_, to)


class MissingEdgeError(BiconError, LookupError):
    def __init__(self, from_, to):
        super().__init__(f"Unable to find edge from {from_} to {to}")
        self.edge = (from_, to)


class DuplicateConnectionError(BiconError, ValueError):
    pass


class MissingConnectionError(BiconError, LookupError):
    pass


class NotationError(BiconError, TypeError):
    """A graph notation could not be imported. The cause is chained."""
