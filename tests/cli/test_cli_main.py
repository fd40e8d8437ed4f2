import json

import pytest
import yaml

from oodnotes.cli.formatters import format_output
from oodnotes.cli.main import main, parse_args


def run_cli(capsys, *argv):
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
        raise SystemExit(0)
    captured = capsys.readouterr()
    return exc_info.value.code, captured.out


def test_parse_args_run():
    args = parse_args(["--format", "table", "run", "strategy"])

    assert args.command == "run"
    assert args.name == "strategy"
    assert args.format == "table"


def test_list_json(capsys):
    code, out = run_cli(capsys, "list", "--category", "solid")

    data = json.loads(out)
    assert code == 0
    assert data["count"] == 5
    assert {e["name"] for e in data["examples"]} == {"srp", "ocp", "lsp", "isp", "dip"}


def test_run_yaml(capsys):
    code, out = run_cli(capsys, "--format", "yaml", "run", "decorator")

    data = yaml.safe_load(out)
    assert code == 0
    assert data["result"]["trace"][0] == "Base, Extra shot, Oat milk = 160"


def test_show_list_format(capsys):
    code, out = run_cli(capsys, "--format", "list", "show", "observer")

    assert code == 0
    assert out.splitlines()[0] == "Name: observer"
    assert "  Category: patterns" in out


def test_run_table_format(capsys):
    code, out = run_cli(capsys, "--format", "table", "run", "adapter")

    assert code == 0
    assert "Gobble gobble" in out


def test_default_format_comes_from_config(capsys, write_config):
    path = write_config({"output": {"format": "list"}})

    code, out = run_cli(capsys, "--config", path, "run", "inheritance")

    assert code == 0
    assert out.splitlines()[0] == "inheritance (relationships)"
    assert "  Rex says Woof!" in out.splitlines()


def test_unknown_example_exits_with_error(capsys):
    code, out = run_cli(capsys, "run", "visitor")

    assert code == 1
    assert "Error: Example 'visitor' not found" in out


def test_bad_config_exits_with_error(capsys):
    code, out = run_cli(capsys, "--config", "/nonexistent.json", "list")

    assert code == 1
    assert "Configuration file not found" in out


def test_directory_config_exits_with_error(capsys, tmp_path):
    code, out = run_cli(capsys, "--config", str(tmp_path), "list")

    assert code == 1
    assert "Error: Cannot read configuration file" in out


def test_missing_command(capsys):
    code, out = run_cli(capsys)

    assert code == 1
    assert "No command specified" in out


def test_output_file(capsys, tmp_path):
    target = tmp_path / "out.json"

    code, out = run_cli(capsys, "--output", str(target), "show", "facade")

    assert code == 0
    assert json.loads(target.read_text())["example"]["name"] == "facade"
    assert "Output written to" in out


def test_format_output_unknown_structure_falls_back_to_json():
    assert json.loads(format_output({"other": 1}, "table")) == {"other": 1}


def test_format_output_empty_examples():
    assert format_output({"examples": [], "count": 0}, "table") == "No examples found."
