"""JSON schema loader — reads the schema file stored next to a model artifact."""

from pathlib import Path

from pydantic import ValidationError

from openml_datarobot.schema.domain.schema import DatasetSchema
from openml_datarobot.schema.infrastructure.errors import SchemaLoadError

DEFAULT_SCHEMA_FILE_NAME = "schema.json"


class JsonSchemaLoader:
    """Loads a DatasetSchema from ``<model_path>/<schema_file_name>``.

    Satisfies the SchemaLoader protocol structurally.
    """

    def __init__(self, schema_file_name: str = DEFAULT_SCHEMA_FILE_NAME) -> None:
        self._schema_file_name = schema_file_name

    def load(self, model_path: Path) -> DatasetSchema:
        """
        Read and validate the schema file of the model directory.

        Raises:
            SchemaLoadError: if the file cannot be read or its content is not a
                valid DatasetSchema.
        """
        schema_path = model_path / self._schema_file_name
        try:
            raw = schema_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SchemaLoadError(f"file not found: {schema_path}") from exc
        except OSError as exc:
            raise SchemaLoadError(f"cannot read {schema_path}: {exc}") from exc

        try:
            return DatasetSchema.model_validate_json(raw)
        except ValidationError as exc:
            raise SchemaLoadError(f"invalid schema in {schema_path}: {exc}") from exc
