"""
Re-export a graph notation with connections in depth-first order

The vertices and edges are unchanged. Writing the result again produces the
same file, so this can be used to bring notation files into a canonical form.
"""
import sys
import json
import logging
from pathlib import Path

from . import CommandLineError, add_graph_argument
from ..error import BiconError
from ..graph import Graph
from ..notation import load_notation, dump_notation

logger = logging.getLogger(__name__)


def main(args):
    try:
        notation = export_graph(args.graph)
    except (BiconError, OSError) as e:
        raise CommandLineError(e)

    if args.output is None:
        json.dump(notation, sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        dump_notation(args.output, notation)
        logger.info(f"Wrote {args.output}")


def add_arguments(parser):
    add_graph_argument(parser)
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        type=Path,
        help="Write the notation to FILE. Default: standard output",
        default=None,
    )


def export_graph(graph_path: Path) -> dict:
    graph = Graph.from_notation(load_notation(graph_path), name=str(graph_path))
    notation = graph.to_notation()
    logger.debug(
        "Exported %d vertices and %d connections",
        len(notation["vertices"]),
        len(notation["connections"]),
    )
    return notation
