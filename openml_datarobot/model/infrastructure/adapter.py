"""DataRobotPredictorAdapter — exposes a vendor DRModel through the Predictor port."""

from collections.abc import Sequence
from typing import Any

# Attribute holding the target class labels; exports predating it are unsupported.
_CLASS_LABELS_ATTRIBUTE = "class_labels"


class DataRobotPredictorAdapter:
    """Wraps the DRModel instance found in a model archive.

    Satisfies the Predictor protocol structurally. The vendor object is kept
    untouched and remains reachable through ``vendor_model``.
    """

    def __init__(self, vendor_model: Any) -> None:
        self._vendor_model = vendor_model

    @property
    def vendor_model(self) -> Any:
        return self._vendor_model

    def get_double_predictors(self) -> list[str]:
        return [str(name) for name in self._vendor_model.get_double_predictors()]

    def get_string_predictors(self) -> list[str]:
        return [str(name) for name in self._vendor_model.get_string_predictors()]

    def has_target_labels(self) -> bool:
        labels = getattr(self._vendor_model, _CLASS_LABELS_ATTRIBUTE, None)
        return (
            isinstance(labels, Sequence)
            and not isinstance(labels, (str, bytes))
            and len(labels) > 0
        )

    def get_target_labels(self) -> list[str]:
        return [str(label) for label in getattr(self._vendor_model, _CLASS_LABELS_ATTRIBUTE)]
