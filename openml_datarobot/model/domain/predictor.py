"""Predictor Protocol — the capabilities the loader needs from a vendor model."""

from typing import Protocol


class Predictor(Protocol):
    """Structural interface satisfied by any loaded DataRobot predictor.

    Older model exports do not carry the labels of the target classes, so
    ``get_target_labels`` may only be called when ``has_target_labels`` is True.
    """

    def get_double_predictors(self) -> list[str]: ...

    def get_string_predictors(self) -> list[str]: ...

    def has_target_labels(self) -> bool: ...

    def get_target_labels(self) -> list[str]: ...
