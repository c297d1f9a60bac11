"""Observer port for the model domain — defines loading events in domain language."""

from typing import Protocol


class ModelLoadingObserver(Protocol):
    def model_loading_started(self, model_path: str) -> None: ...

    def model_predictor_created(
        self, model_path: str, model_file: str, feature_count: int
    ) -> None: ...

    def model_field_count_mismatched(
        self,
        model_path: str,
        expected_fields: list[str],
        provided_schema: str,
    ) -> None: ...

    def model_loading_completed(
        self, model_path: str, first_class_is_positive: bool
    ) -> None: ...

    def model_loading_failed(self, model_path: str, reason: str) -> None: ...
