"""
Unit tests for the 'validate' command.
"""

import json

import pytest
from click.testing import CliRunner

from cloudgraph.cli.commands.validate import validate


@pytest.fixture
def broken_graph(tmp_path):
    f = tmp_path / "broken.json"
    f.write_text(json.dumps({
        "nodes": [
            {"id": "root", "label": "Root", "type": "cloud"},
            {"id": "x", "label": "X", "type": "aws"},
            {"id": "y", "label": "Y", "type": "aws"},
        ],
        "edges": [
            {"source": "x", "target": "y"},
            {"source": "y", "target": "x"},
            {"source": "root", "target": "ghost"},
        ],
    }))
    return f


class TestValidateCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_sample_is_clean(self, runner):
        result = runner.invoke(validate, ["--strict"])
        assert result.exit_code == 0
        assert "No issues found" in result.output

    def test_reports_issues(self, runner, broken_graph):
        result = runner.invoke(validate, ["-i", str(broken_graph)])

        assert result.exit_code == 0
        assert "dangling edge" in result.output
        assert "cycle: x -> y" in result.output

    def test_strict_fails(self, runner, broken_graph):
        result = runner.invoke(validate, ["-i", str(broken_graph), "--strict"])
        assert result.exit_code == 1

    def test_json(self, runner, broken_graph):
        result = runner.invoke(validate, ["-i", str(broken_graph), "--json"])

        data = json.loads(result.output)["data"]
        assert data["roots"] == ["root"]
        assert data["unreachable_ids"] == ["x", "y"]
        assert data["dangling_edges"] == [{"source": "root", "target": "ghost"}]
