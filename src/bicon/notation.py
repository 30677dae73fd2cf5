"""
Graph notation: the JSON format in which graphs are imported and exported

    {
      "vertices": [0, 1, 2],
      "connections": [{"from": 0, "to": 1}, {"from": 1, "to": 2}]
    }
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, StrictInt
from xopen import xopen

from .error import NotationError

logger = logging.getLogger(__name__)


class EdgeNotation(BaseModel):
    from_: StrictInt = Field(..., alias="from", description="Index of one endpoint")
    to: StrictInt = Field(..., description="Index of the other endpoint")


class GraphNotation(BaseModel):
    vertices: List[StrictInt] = Field(..., description="Unique vertex indices")
    connections: List[EdgeNotation] = Field(..., description="Undirected edges")


def load_notation(path: Union[str, Path]):
    """
    Read a graph notation from a JSON file, which may be compressed.
    The result is not validated; pass it to Graph.from_notation.
    """
    with xopen(path) as f:
        try:
            source = json.load(f)
        except json.JSONDecodeError as e:
            raise NotationError(f"Unable to read '{path}': not valid JSON") from e
    logger.debug("Read notation from %s", path)
    return source


def dump_notation(path: Union[str, Path], notation) -> None:
    """Write a notation (or a list of notations) as JSON. Compress depending on the extension."""
    with xopen(path, "w") as f:
        json.dump(notation, f, indent=2)
        f.write("\n")
