"""Fake ModelLoadingObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PredictorCreatedEvent:
    model_path: str
    model_file: str
    feature_count: int


@dataclass(frozen=True)
class FieldCountMismatchedEvent:
    model_path: str
    expected_fields: list[str]
    provided_schema: str


@dataclass(frozen=True)
class LoadingCompletedEvent:
    model_path: str
    first_class_is_positive: bool


@dataclass(frozen=True)
class LoadingFailedEvent:
    model_path: str
    reason: str


class FakeModelLoadingObserver:
    def __init__(self) -> None:
        self.loading_started: list[str] = []
        self.predictors_created: list[PredictorCreatedEvent] = []
        self.field_count_mismatches: list[FieldCountMismatchedEvent] = []
        self.loading_completed: list[LoadingCompletedEvent] = []
        self.loading_failed: list[LoadingFailedEvent] = []

    def model_loading_started(self, model_path: str) -> None:
        self.loading_started.append(model_path)

    def model_predictor_created(
        self, model_path: str, model_file: str, feature_count: int
    ) -> None:
        self.predictors_created.append(
            PredictorCreatedEvent(
                model_path=model_path, model_file=model_file, feature_count=feature_count
            )
        )

    def model_field_count_mismatched(
        self,
        model_path: str,
        expected_fields: list[str],
        provided_schema: str,
    ) -> None:
        self.field_count_mismatches.append(
            FieldCountMismatchedEvent(
                model_path=model_path,
                expected_fields=expected_fields,
                provided_schema=provided_schema,
            )
        )

    def model_loading_completed(
        self, model_path: str, first_class_is_positive: bool
    ) -> None:
        self.loading_completed.append(
            LoadingCompletedEvent(
                model_path=model_path, first_class_is_positive=first_class_is_positive
            )
        )

    def model_loading_failed(self, model_path: str, reason: str) -> None:
        self.loading_failed.append(LoadingFailedEvent(model_path=model_path, reason=reason))
