import subprocess
from io import StringIO
from pathlib import Path
from typing import List

import pandas as pd

from .graph import Graph
from .notation import dump_notation

# Edge colors for components, cycled if there are more components
COLORS = [
    "blue",
    "red",
    "darkgreen",
    "purple",
    "darkorange",
    "brown",
    "deeppink",
    "darkcyan",
]


def components_dataframe(components: List[Graph]) -> pd.DataFrame:
    """One row per edge, numbering components from 1"""
    component_dict = {"component": [], "from": [], "to": []}
    for number, component in enumerate(components, start=1):
        for from_, to in component.edges():
            component_dict["component"].append(number)
            component_dict["from"].append(from_)
            component_dict["to"].append(to)

    return pd.DataFrame(component_dict, columns=["component", "from", "to"])


def write_components_table(path: Path, components: List[Graph]) -> None:
    """Write component edges to a tab-separated file"""
    components_dataframe(components).to_csv(path, sep="\t", index=False)


def read_components_table(path: Path) -> pd.DataFrame:
    return pd.read_csv(path, sep="\t")


def write_components_notation(path: Path, components: List[Graph]) -> None:
    """Write the notation of each component, as a JSON list"""
    dump_notation(path, [component.to_notation() for component in components])


def dot(graph: Graph, components: List[Graph]) -> str:
    """
    Return a Graphviz description of the graph in which each biconnected
    component has its own edge color and articulation points are highlighted
    """
    membership = dict()
    for number, component in enumerate(components):
        for from_, to in component.edges():
            membership[frozenset((from_, to))] = number
    articulation_points = set(graph.articulation_points())

    s = StringIO()
    print("graph g {", file=s)
    print("  graph [outputorder=edgesfirst];", file=s)
    print('  node [style=filled, fillcolor=white, fontname="Roboto"];', file=s)
    for index in graph.vertices:
        hl = ",fillcolor=orange" if index in articulation_points else ""
        print(f'  "{index}" [label="{index}"{hl}];', file=s)
    for from_, to in graph.edges():
        number = membership.get(frozenset((from_, to)))
        color = COLORS[number % len(COLORS)] if number is not None else "gray"
        print(f'  "{from_}" -- "{to}" [color={color}];', file=s)
    print("}", file=s)

    return s.getvalue()


def plot(path: Path, graph: Graph, components: List[Graph]) -> None:
    """Write the Graphviz file and render it to PDF. This requires GraphViz."""
    graphviz_path = path.with_suffix(".gv")
    with open(graphviz_path, "w") as f:
        print(dot(graph, components), file=f, end="")
    pdf_path = str(path.with_suffix(".pdf"))
    subprocess.run(["sfdp", "-Tpdf", "-o", pdf_path, graphviz_path], check=True)
