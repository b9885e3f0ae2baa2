"""
Unit tests for topology loading.
"""

import json

import yaml

from cloudgraph.core.fixtures import SAMPLE_DOCUMENT
from cloudgraph.core.loader import load_graph_data, parse_graph_data
from cloudgraph.core.result import Err, Ok


class TestParseGraphData:
    def test_valid_document(self):
        result = parse_graph_data(SAMPLE_DOCUMENT)
        assert isinstance(result, Ok)
        assert len(result.unwrap().node_ids) == 7

    def test_non_mapping(self):
        result = parse_graph_data([1, 2, 3])
        assert isinstance(result, Err)
        assert "mapping" in result.error

    def test_huge_integer_counts(self):
        result = parse_graph_data({
            "nodes": [{"id": "a", "label": "A", "type": "aws", "alerts": 10**400}],
            "edges": [],
        })
        assert result.is_ok()
        assert result.unwrap().get_node("a").alerts == 10**400

    def test_schema_errors(self):
        result = parse_graph_data({"nodes": [{"label": "no id"}], "edges": []})
        assert result.is_err()
        assert "Invalid graph document" in result.error


class TestLoadGraphData:
    def test_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(SAMPLE_DOCUMENT))

        data = load_graph_data(path).unwrap()
        assert data.get_node("aws2").alerts == 124

    def test_yaml(self, tmp_path):
        path = tmp_path / "graph.yml"
        path.write_text(yaml.dump(SAMPLE_DOCUMENT))

        data = load_graph_data(str(path)).unwrap()
        assert [e.target for e in data.edges][:2] == ["aws1", "aws2"]

    def test_missing_file(self, tmp_path):
        result = load_graph_data(tmp_path / "missing.json")
        assert result.is_err()
        assert "not found" in result.error

    def test_directory(self, tmp_path):
        result = load_graph_data(tmp_path)
        assert result.is_err()
        assert "directory" in result.error

    def test_bad_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text("{not json")

        result = load_graph_data(path)
        assert result.is_err()
        assert "Failed to parse" in result.error

    def test_json_with_huge_integer_literal(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(
            '{"nodes": [{"id": "a", "label": "A", "type": "aws", "alerts": 1' + "0" * 400 + "}],"
            ' "edges": []}'
        )

        data = load_graph_data(path).unwrap()
        assert data.get_node("a").alerts == 10**400

    def test_unwrap_or_on_failure(self, tmp_path):
        assert load_graph_data(tmp_path / "missing.json").unwrap_or(None) is None
