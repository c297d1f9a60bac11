"""Error types raised by config infrastructure."""

from pathlib import Path

from openml_datarobot.core.errors import ModelLoadingError


class ConfigValidationError(ModelLoadingError):
    """Raised when the loaded config fails validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(ModelLoadingError):
    """Raised when the config file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        super().__init__(f"Failed to load config: {reason}: {path}")
