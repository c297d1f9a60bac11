"""Pre-flight checks shared by model providers.

Every check returns the problems it found instead of raising, so callers can
report all of them at once before attempting a load.
"""

from collections.abc import Collection, Mapping
from pathlib import Path

from openml_datarobot.schema.domain.schema import CategoricalValueSchema, DatasetSchema
from openml_datarobot.validation.domain.error import ParamValidationError


def base_load_validations(
    schema: DatasetSchema,
    params: Mapping[str, str],
    supported_params: Collection[str] = (),
) -> list[ParamValidationError]:
    """Check that the schema declares a target and that every param is supported."""
    errors: list[ParamValidationError] = []

    if schema.target_field_schema is None:
        errors.append(
            ParamValidationError(message="The schema does not define a target field.")
        )

    for name in sorted(params):
        if name not in supported_params:
            errors.append(ParamValidationError(message=f"Unknown parameter [{name}]."))

    return errors


def validate_model_in_dir(model_path: Path) -> list[ParamValidationError]:
    """Check that model_path exists and is a directory."""
    if not model_path.exists():
        return [ParamValidationError(message=f"Model path [{model_path}] does not exist.")]
    if not model_path.is_dir():
        return [
            ParamValidationError(message=f"Model path [{model_path}] is not a directory.")
        ]
    return []


def validate_categorical_schema(schema: DatasetSchema) -> ParamValidationError | None:
    """Return an error unless the target field is categorical."""
    target = schema.target_field_schema
    if target is None:
        # Reported by base_load_validations.
        return None
    if not isinstance(target.value_schema, CategoricalValueSchema):
        return ParamValidationError(
            message=f"Target field [{target.field_name}] must be categorical,"
            f" got [{target.value_schema.type}]."
        )
    return None
