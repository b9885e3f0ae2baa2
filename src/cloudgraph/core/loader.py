"""
Topology loading.

Reads GraphData from a JSON or YAML document shaped like
``{"nodes": [...], "edges": [...]}``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from .result import Err, Ok, Result
from .types import GraphData

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_graph_data(payload: Any) -> Result[GraphData, str]:
    """Validate an already-decoded document."""
    if not isinstance(payload, dict):
        return Err("Graph document must be a mapping with 'nodes' and 'edges'")
    try:
        return Ok(GraphData.model_validate(payload))
    except ValidationError as e:
        return Err(f"Invalid graph document: {e.error_count()} validation error(s)\n{e}")


def load_graph_data(path: Union[str, Path]) -> Result[GraphData, str]:
    """
    Load GraphData from disk.

    Args:
        path: A .json, .yaml or .yml file.

    Returns:
        Ok(GraphData) or Err(message).
    """
    graph_path = Path(path)
    if not graph_path.exists():
        return Err(f"Graph file not found: {graph_path}")
    if graph_path.is_dir():
        return Err(f"Expected a file, got a directory: {graph_path}")

    try:
        text = graph_path.read_text()
    except OSError as e:
        return Err(f"Failed to read {graph_path}: {e}")

    try:
        if graph_path.suffix.lower() in YAML_SUFFIXES:
            payload = yaml.safe_load(text)
        else:
            payload = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        return Err(f"Failed to parse {graph_path}: {e}")

    result = parse_graph_data(payload)
    if result.is_ok():
        data = result.unwrap()
        logger.debug(f"Loaded {len(data.node_ids)} nodes, {len(data.edges)} edges from {graph_path}")
    return result
