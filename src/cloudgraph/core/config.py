"""
Dashboard configuration.

Settings live in ``.cloudgraph/config.yaml``. Every section is optional;
anything missing or invalid falls back to the defaults below.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".cloudgraph/config.yaml")


class LayoutConfig(BaseModel):
    """
    Spacing for the column layout, in presentation pixels.

    Levels are laid out along x and rows along y. Both spacings must be
    positive so neither levels nor same-level nodes overlap; the defaults
    keep a 280:180 column-to-row ratio.
    """
    level_spacing: float = Field(default=280, gt=0)
    row_spacing: float = Field(default=180, gt=0)
    margin: float = Field(default=50, ge=0)


class SeverityConfig(BaseModel):
    """Alert counts above which a node is flagged Warning or Critical."""
    critical_alerts: int = Field(default=100, ge=0)
    warning_alerts: int = Field(default=50, ge=0)


class DashboardConfig(BaseModel):
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    severity: SeverityConfig = Field(default_factory=SeverityConfig)
    data_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def load_config(path: Optional[Path] = None) -> DashboardConfig:
    """
    Load configuration from YAML.

    Missing files yield defaults silently; unreadable or invalid files are
    logged and also yield defaults.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        return DashboardConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read config {config_path}: {e}")
        return DashboardConfig()

    if not isinstance(data, dict):
        logger.warning(f"Config {config_path} is not a mapping, using defaults")
        return DashboardConfig()

    try:
        return DashboardConfig.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Invalid config {config_path}, using defaults: {e}")
        return DashboardConfig()
