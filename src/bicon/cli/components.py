"""
Decompose a graph into its biconnected components

Writes into the output directory:
- components.tsv: one row per edge with the number of its component
- components.json: the notation of each component
- graph.gv: the graph for Graphviz, with components colored
- log.txt
"""
import sys
import logging
from pathlib import Path
from typing import List

from . import CommandLineError, log_to_file, create_output_dir, add_graph_argument
from .. import __version__
from ..error import BiconError
from ..graph import Graph
from ..notation import load_notation
from ..writers import write_components_table, write_components_notation, dot, plot

logger = logging.getLogger(__name__)


def main(args):
    output_dir = args.output
    create_output_dir(output_dir, args.delete)
    log_to_file(output_dir / "log.txt")
    logger.info(f"bicon {__version__}")
    logger.info("Command line arguments: %s", " ".join(sys.argv[1:]))

    try:
        run_components(args.graph, output_dir, should_plot=args.plot)
    except (BiconError, OSError) as e:
        raise CommandLineError(e)


def add_arguments(parser):
    add_graph_argument(parser)
    parser.add_argument(
        "--output",
        "-o",
        metavar="DIRECTORY",
        type=Path,
        help="Name of the output directory to be created. Default: %(default)s",
        default=Path("bicon_run"),
    )
    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete the output directory if it already exists",
    )
    parser.add_argument(
        "--plot",
        default=False,
        action="store_true",
        help="Render the graph to graph.pdf. This requires GraphViz to be installed.",
    )


def run_components(
    graph_path: Path, output_dir: Path, should_plot: bool = False
) -> List[Graph]:
    graph = Graph.from_notation(load_notation(graph_path), name=str(graph_path))
    logger.info(
        f"Read graph with {len(graph)} vertices and {graph.count_edges()} edges"
    )

    components = Graph.DFS.biconnected_components(graph)
    logger.info(f"Detected {len(components)} biconnected components")
    articulation_points = graph.articulation_points()
    logger.info(f"Detected {len(articulation_points)} articulation points")
    isolated = sum(1 for index in graph.vertices if graph.degree(index) == 0)
    if isolated:
        logger.info(f"{isolated} isolated vertices belong to no component")

    write_components_table(output_dir / "components.tsv", components)
    write_components_notation(output_dir / "components.json", components)
    if should_plot:
        logger.info("Plotting graph")
        plot(output_dir / "graph.pdf", graph, components)
    else:
        with open(output_dir / "graph.gv", "w") as f:
            print(dot(graph, components), file=f, end="")

    return components
