"""SchemaLoader Protocol — structural interface for reading a model's dataset schema."""

from pathlib import Path
from typing import Protocol

from openml_datarobot.schema.domain.schema import DatasetSchema


class SchemaLoader(Protocol):
    """Reads the DatasetSchema that accompanies a model directory."""

    def load(self, model_path: Path) -> DatasetSchema: ...
