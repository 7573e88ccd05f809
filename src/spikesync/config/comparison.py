"""Comparison Configuration."""

import logging
from pathlib import Path

import pydantic

from spikesync.config.comparison_model import ComparisonConfig
from spikesync.utils import resolve_path
from spikesync.validation import ValidationError, read_schema, validate_config

L = logging.getLogger(__name__)


def _resolve_paths(config: ComparisonConfig, base_path: Path) -> None:
    """Resolve any relative path, without resolving symlinks."""
    base_path = base_path or Path()
    config.trains.first = resolve_path(base_path, config.trains.first)
    config.trains.second = resolve_path(base_path, config.trains.second)
    if config.output is not None:
        config.output = resolve_path(base_path, config.output)


def init_comparison_configuration(config: dict, base_path: Path) -> ComparisonConfig:
    """Return a config object from a config dict."""
    validate_config(config, schema=read_schema("comparison_config"))
    try:
        result = ComparisonConfig(**config)
    except pydantic.ValidationError as ex:
        L.error("Invalid configuration:\n%s", ex)
        raise ValidationError("Invalid configuration") from ex
    _resolve_paths(result, base_path=base_path)
    L.debug("Comparison configuration: %s", result)
    return result
