"""Reconciliation of a model's target classes with the schema's target vocabulary."""

from collections.abc import Collection, Sequence

from pydantic import BaseModel

from openml_datarobot.model.domain.errors import TargetValuesMismatchError

# DataRobot labels boolean targets with these literals regardless of the casing
# found in the training data ("true" and "TRUE" both become "True").
BOOLEAN_VALUES: frozenset[str] = frozenset({"True", "False"})

_DELIMITER = ","


class TargetReconciliation(BaseModel, frozen=True):
    """Canonical target vocabulary agreed between a model and a schema."""

    nominal_values: tuple[str, ...]

    @property
    def first_value(self) -> str:
        """The sorted-first label, used as the reference class."""
        return self.nominal_values[0]


def is_boolean_model(target_model_values: Sequence[str]) -> bool:
    """Return True when the model's classes are exactly DataRobot's boolean literals."""
    return set(target_model_values) == BOOLEAN_VALUES


def reconcile_target_values(
    schema_nominal_values: Collection[str],
    target_model_values: Sequence[str],
) -> TargetReconciliation:
    """
    Check that the schema's target vocabulary can describe the model's classes.

    Boolean models are matched case-insensitively and always yield the
    canonical DataRobot literals; every other model needs the exact same set
    of labels in the schema.

    Raises:
        TargetValuesMismatchError: if the two vocabularies are incompatible.
    """
    schema_values = sorted(set(schema_nominal_values))

    if is_boolean_model(target_model_values):
        if {v.lower() for v in schema_values} == {v.lower() for v in BOOLEAN_VALUES}:
            return TargetReconciliation(nominal_values=tuple(sorted(BOOLEAN_VALUES)))
        raise TargetValuesMismatchError(
            "the model is binary and thus expects some form of:"
            f" [{_DELIMITER.join(target_model_values)}],"
            f" but the schema had: {_DELIMITER.join(schema_values)}"
        )

    if len(schema_values) != len(target_model_values) or not set(
        target_model_values
    ).issubset(schema_values):
        raise TargetValuesMismatchError(
            f"model: [{_DELIMITER.join(target_model_values)}],"
            f" schema: {_DELIMITER.join(schema_values)}"
        )

    return TargetReconciliation(nominal_values=tuple(schema_values))
