import json

from bicon.graph import Graph
from bicon.writers import (
    components_dataframe,
    write_components_table,
    read_components_table,
    write_components_notation,
    dot,
    plot,
)

import pytest


@pytest.fixture
def bowtie():
    graph = Graph(range(6))
    for from_, to in [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)]:
        graph.add_edge(from_, to)
    return graph


@pytest.fixture
def components(bowtie):
    return Graph.DFS.biconnected_components(bowtie)


def test_components_dataframe(components):
    df = components_dataframe(components)
    assert list(df.columns) == ["component", "from", "to"]
    assert len(df) == 6
    assert sorted(df.groupby("component").size().tolist()) == [3, 3]


def test_components_dataframe_empty():
    df = components_dataframe([])
    assert list(df.columns) == ["component", "from", "to"]
    assert df.empty


def test_write_components_table(tmp_path, components):
    path = tmp_path / "components.tsv"
    write_components_table(path, components)
    assert path.read_text().splitlines()[0] == "component\tfrom\tto"
    df = read_components_table(path)
    first = df[df.component == 1]
    assert set(first["from"]) | set(first["to"]) == {2, 3, 4}


def test_write_components_notation(tmp_path, components):
    path = tmp_path / "components.json"
    write_components_notation(path, components)
    with open(path) as f:
        notations = json.load(f)
    assert len(notations) == 2
    for notation in notations:
        assert len(notation["vertices"]) == 3
        assert len(notation["connections"]) == 3
        Graph.from_notation(notation)


def test_dot(bowtie, components):
    s = dot(bowtie, components)
    assert s.startswith("graph g {\n")
    assert s.endswith("}\n")
    assert '"2" [label="2",fillcolor=orange];' in s
    assert '"0" [label="0"];' in s
    # Isolated vertex is drawn, but has no edges
    assert '"5" [label="5"];' in s
    assert s.count(" -- ") == 6
    assert s.count("color=blue") == 3
    assert s.count("color=red") == 3


def test_dot_edges_outside_components_are_gray(bowtie, components):
    s = dot(bowtie, components[:1])
    assert s.count("color=blue") == 3
    assert s.count("color=gray") == 3
    assert '"0" -- "1" [color=gray];' in s


def test_plot(tmp_path, monkeypatch, bowtie, components):
    calls = []
    monkeypatch.setattr(
        "bicon.writers.subprocess.run", lambda args, check: calls.append(args)
    )
    plot(tmp_path / "graph.pdf", bowtie, components)
    assert (tmp_path / "graph.gv").read_text() == dot(bowtie, components)
    assert calls == [
        ["sfdp", "-Tpdf", "-o", str(tmp_path / "graph.pdf"), tmp_path / "graph.gv"]
    ]
