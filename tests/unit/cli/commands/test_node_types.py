"""
Unit tests for the 'types' command.
"""

import json

from click.testing import CliRunner

from cloudgraph.cli.commands.node_types import types


def test_types_json():
    result = CliRunner().invoke(types, ["--json"])

    assert result.exit_code == 0
    rows = json.loads(result.output)["data"]["types"]
    assert [(r["key"], r["label"], r["count"]) for r in rows] == [
        ("cloud", "Cloud", 1),
        ("aws", "Aws", 2),
        ("gcp", "Gcp", 1),
        ("saas", "Saas", 1),
        ("service", "Service", 2),
    ]


def test_types_table():
    result = CliRunner().invoke(types)
    assert result.exit_code == 0
    assert "Service" in result.output


def test_types_counts_follow_input_file(tmp_path):
    f = tmp_path / "graph.json"
    f.write_text(json.dumps({
        "nodes": [
            {"id": "k1", "label": "K1", "type": "kubernetes"},
            {"id": "k2", "label": "K2", "type": "kubernetes"},
            {"id": "a", "label": "A", "type": "aws"},
        ],
        "edges": [{"source": "a", "target": "k1"}],
    }))

    result = CliRunner().invoke(types, ["-i", str(f), "--json"])

    rows = json.loads(result.output)["data"]["types"]
    assert [(r["key"], r["count"]) for r in rows] == [("kubernetes", 2), ("aws", 1)]
