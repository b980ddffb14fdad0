"""Typer CLI: local sort, bench and serve wiring."""

import json

import pytest
from typer.testing import CliRunner

from batch_sort import cli
from batch_sort.commands.bench import make_batch

runner = CliRunner()


@pytest.fixture
def batch_file(tmp_path):
    path = tmp_path / "batch.json"
    path.write_text(json.dumps({"to_sort": [[3, 1, 2], [5, -1, 0], []]}))
    return path


@pytest.mark.parametrize("mode", ["single", "concurrent"])
def test_sort_prints_response_json(batch_file, mode):
    result = runner.invoke(cli.app, ["sort", str(batch_file), "--mode", mode])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output.strip().splitlines()[-1])
    assert data["sorted_arrays"] == [[1, 2, 3], [-1, 0, 5], []]
    assert data["time_ns"] >= 0


def test_sort_table_output(batch_file):
    result = runner.invoke(cli.app, ["sort", str(batch_file), "--table"])

    assert result.exit_code == 0, result.output
    assert "1, 2, 3" in result.output


def test_sort_missing_file(tmp_path):
    result = runner.invoke(cli.app, ["sort", str(tmp_path / "nope.json")])
    assert result.exit_code == 2


def test_sort_malformed_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"to_sort": "3,1,2"}')

    result = runner.invoke(cli.app, ["sort", str(path)])

    assert result.exit_code == 2


def test_bench_runs_both_modes():
    result = runner.invoke(
        cli.app, ["bench", "--arrays", "5", "--size", "20", "--repeat", "2", "--seed", "7"]
    )

    assert result.exit_code == 0, result.output
    assert "single" in result.output
    assert "concurrent" in result.output


def test_make_batch_is_seeded():
    assert make_batch(3, 4, seed=1) == make_batch(3, 4, seed=1)
    assert [len(a) for a in make_batch(3, 4, seed=1)] == [4, 4, 4]
    assert make_batch(0, 4) == []


def test_serve_prints_listening_message(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
    monkeypatch.delenv("BATCH_SORT_PORT", raising=False)

    result = runner.invoke(cli.app, ["serve"])

    assert result.exit_code == 0, result.output
    assert "Server listening on port 8000..." in result.output
    (args, kwargs), = calls
    assert args == ("batch_sort.api.main:app",)
    assert kwargs["port"] == 8000


def test_serve_port_override(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: calls.append(kw))

    result = runner.invoke(cli.app, ["serve", "--port", "9100"])

    assert result.exit_code == 0, result.output
    assert "Server listening on port 9100..." in result.output
    assert calls[0]["port"] == 9100


def test_version_command():
    result = runner.invoke(cli.app, ["version"])

    assert result.exit_code == 0
    assert result.output.strip()
