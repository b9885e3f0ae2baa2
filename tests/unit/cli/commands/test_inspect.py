"""
Unit tests for the 'inspect' command.
"""

import json

import pytest
from click.testing import CliRunner

from cloudgraph.cli.commands.inspect import inspect


class TestInspectCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_panel(self, runner):
        result = runner.invoke(inspect, ["aws2"])

        assert result.exit_code == 0
        assert "AWS 2" in result.output
        assert "Critical" in result.output
        assert "aws-2" in result.output

    def test_json(self, runner):
        result = runner.invoke(inspect, ["aws1", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["severity"] == "Warning"
        assert data["children"] == ["s3"]
        assert data["is_expanded"] is True
        assert data["breadcrumb"] == ["cloud", "aws1"]
        assert data["ancestors"] == ["cloud"]

    def test_resolves_label(self, runner):
        result = runner.invoke(inspect, ["GCP", "--json"])
        data = json.loads(result.output)["data"]
        assert data["id"] == "gcp"
        assert data["severity"] == "Normal"

    def test_unknown_node(self, runner):
        result = runner.invoke(inspect, ["azure"])
        assert result.exit_code == 1
        assert "Node not found: azure" in result.output

    def test_unknown_node_json(self, runner):
        result = runner.invoke(inspect, ["azure", "--json"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "error"

    def test_shared_node_lists_other_parents(self, runner, tmp_path):
        f = tmp_path / "graph.json"
        f.write_text(json.dumps({
            "nodes": [
                {"id": "r", "label": "Root", "type": "cloud"},
                {"id": "a", "label": "Prod", "type": "aws"},
                {"id": "b", "label": "Dev", "type": "aws"},
                {"id": "db", "label": "Shared DB", "type": "service"},
            ],
            "edges": [
                {"source": "r", "target": "a"},
                {"source": "r", "target": "b"},
                {"source": "a", "target": "db"},
                {"source": "b", "target": "db"},
            ],
        }))

        result = runner.invoke(inspect, ["db", "-i", str(f)])

        assert result.exit_code == 0
        assert "Root / Prod / Shared DB" in result.output
        assert "Also under: b" in result.output
