"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from openml_datarobot.config.domain.config import LoaderConfig
from openml_datarobot.config.domain.observer import ConfigObserver
from openml_datarobot.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)


class YamlConfigLoader:
    """Loads, validates, and returns a LoaderConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> LoaderConfig:
        """
        Load and validate a LoaderConfig from a YAML file.

        An empty file yields the default config.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            ConfigValidationError: if the content does not describe a LoaderConfig.
        """
        raw = _parse_yaml(path=path)
        if raw is None:
            self._observer.config_defaults_used(path=str(path))
            return LoaderConfig()

        cfg = _build_config(raw=raw)
        self._observer.config_loaded(
            path=str(path), archive_extension=cfg.archive_extension
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc


def _build_config(raw: Any) -> LoaderConfig:
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    try:
        return LoaderConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
