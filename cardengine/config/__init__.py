"""Configuration module with strict validation and Hydra integration.

This module provides:
- StrictBaseModel: Base class for all configs with extra='forbid'
- load_config(): Hydra-based config loading with Pydantic validation
- format_config_summary(): Readable run summaries
"""

from __future__ import annotations

from cardengine.config.base import StrictBaseModel
from cardengine.config.display import format_config_summary
from cardengine.config.loader import load_config, load_raw_config, split_config_path

__all__ = [
    "StrictBaseModel",
    "format_config_summary",
    "load_config",
    "load_raw_config",
    "split_config_path",
]
