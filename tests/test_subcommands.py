import json
import logging

from bicon.__main__ import main, build_parser
from bicon.cli import LevelPrefixFormatter
from bicon.cli.components import run_components
from bicon.cli.export import export_graph
from bicon.notation import dump_notation

import pytest

NOTATION = {
    "vertices": [0, 1, 2, 3, 4, 7],
    "connections": [
        {"from": 0, "to": 1},
        {"from": 1, "to": 2},
        {"from": 2, "to": 0},
        {"from": 2, "to": 3},
        {"from": 3, "to": 4},
        {"from": 4, "to": 2},
    ],
}


@pytest.fixture
def graph_path(tmp_path):
    path = tmp_path / "graph.json"
    dump_notation(path, NOTATION)
    return path


def test_run_components(tmp_path, graph_path):
    output_dir = tmp_path / "out"
    output_dir.mkdir()
    components = run_components(graph_path, output_dir)
    assert len(components) == 2
    assert (output_dir / "components.tsv").exists()
    assert (output_dir / "graph.gv").exists()
    with open(output_dir / "components.json") as f:
        assert len(json.load(f)) == 2


def test_components_subcommand(tmp_path, graph_path):
    output_dir = tmp_path / "run"
    main(["components", str(graph_path), "-o", str(output_dir)])
    for name in ["components.tsv", "components.json", "graph.gv", "log.txt"]:
        assert (output_dir / name).exists()
    log = (output_dir / "log.txt").read_text()
    assert "Detected 2 biconnected components" in log
    assert "Detected 1 articulation points" in log


def test_components_existing_output_dir(tmp_path, graph_path):
    output_dir = tmp_path / "run"
    output_dir.mkdir()
    with pytest.raises(SystemExit) as error:
        main(["components", str(graph_path), "-o", str(output_dir)])
    assert error.value.code == 1

    main(["components", str(graph_path), "-o", str(output_dir), "--delete"])
    assert (output_dir / "components.tsv").exists()


def test_components_invalid_graph(tmp_path, caplog):
    path = tmp_path / "graph.json"
    dump_notation(path, {"vertices": [1], "connections": [{"from": 1, "to": 2}]})
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as error:
            main(["components", str(path), "-o", str(tmp_path / "run")])
    assert error.value.code == 1
    assert "bicon error: Unable to import" in caplog.text


def test_export_graph(graph_path):
    notation = export_graph(graph_path)
    assert notation["vertices"] == NOTATION["vertices"]
    assert len(notation["connections"]) == 6


def test_export_subcommand_stdout(graph_path, capsys):
    main(["export", str(graph_path)])
    notation = json.loads(capsys.readouterr().out)
    assert notation == export_graph(graph_path)


def test_export_subcommand_file(tmp_path, graph_path):
    output = tmp_path / "canonical.json.gz"
    main(["export", str(graph_path), "-o", str(output)])
    main(["export", str(output), "-o", str(tmp_path / "again.json.gz")])
    assert export_graph(output) == export_graph(tmp_path / "again.json.gz")


def test_missing_subcommand():
    with pytest.raises(SystemExit) as error:
        main([])
    assert error.value.code == 2


def test_help_lists_subcommands(capsys):
    with pytest.raises(SystemExit) as error:
        main(["--help"])
    assert error.value.code == 0
    out = capsys.readouterr().out
    assert "components" in out
    assert "Decompose a graph into its biconnected components" in out
    assert "Re-export a graph notation" in out


def test_subcommand_dispatch(graph_path):
    args = build_parser().parse_args(["export", str(graph_path)])
    assert args.subcommand == "export"
    assert args.run.__module__ == "bicon.cli.export"
    assert args.graph == graph_path


@pytest.mark.parametrize(
    "level,expected",
    [
        (logging.INFO, "3 components"),
        (logging.WARNING, "WARNING: 3 components"),
        (logging.DEBUG, "DEBUG: 3 components"),
    ],
)
def test_level_prefix_formatter(level, expected):
    record = logging.LogRecord("bicon", level, __file__, 1, "%d components", (3,), None)
    assert LevelPrefixFormatter().format(record) == expected
    # The record itself is left unchanged for other handlers
    assert record.msg == "%d components"
