"""Error types raised by schema infrastructure."""

from openml_datarobot.core.errors import ModelLoadingError


class SchemaLoadError(ModelLoadingError):
    """Raised when the schema file is missing or does not describe a valid schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load schema: {reason}")
