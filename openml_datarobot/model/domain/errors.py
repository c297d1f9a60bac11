"""Error types raised when a loaded model does not fit the dataset schema."""

from openml_datarobot.core.errors import ModelLoadingError
from openml_datarobot.validation.domain.error import ParamValidationError


class ModelParamsValidationError(ModelLoadingError):
    """Raised when the pre-flight validations of a load request report problems."""

    def __init__(self, errors: list[ParamValidationError]) -> None:
        self.errors = errors
        detail = "; ".join(error.message for error in errors)
        super().__init__(f"Failed to validate model parameters: {detail}")


class SchemaFieldCountMismatchError(ModelLoadingError):
    """Raised when the model's feature count differs from the schema's."""

    def __init__(self, model_feature_count: int, schema_field_count: int) -> None:
        self.model_feature_count = model_feature_count
        self.schema_field_count = schema_field_count
        super().__init__(
            "Failed to match schema: wrong number of fields in the given schema."
            f" The model expected {model_feature_count} feature fields + 1 target"
            f" field, but the schema had {schema_field_count - 1} feature fields"
            f" ({schema_field_count} fields in total, encompassing both features"
            " and target)."
        )


class UnsupportedModelVersionError(ModelLoadingError):
    """Raised when a model export is too old to report its target classes."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to read target values: the DataRobot model file is not"
            " supported. The model might be too old, lacking the labels of the"
            " target classes; if so, create a new project on DataRobot and train"
            " new models."
        )


class TargetValuesMismatchError(ModelLoadingError):
    """Raised when the schema's target vocabulary is incompatible with the model's classes."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to match target values: {reason}")
