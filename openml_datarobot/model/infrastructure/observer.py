"""Structlog implementation of the ModelLoadingObserver port."""

import structlog


class StructlogModelLoadingObserver:
    """Delegates model loading events to structlog.

    Satisfies the ModelLoadingObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def model_loading_started(self, model_path: str) -> None:
        self._log.info("model.loading_started", model_path=model_path)

    def model_predictor_created(
        self, model_path: str, model_file: str, feature_count: int
    ) -> None:
        self._log.debug(
            "model.predictor_created",
            model_path=model_path,
            model_file=model_file,
            feature_count=feature_count,
        )

    def model_field_count_mismatched(
        self,
        model_path: str,
        expected_fields: list[str],
        provided_schema: str,
    ) -> None:
        self._log.error(
            "model.field_count_mismatched",
            model_path=model_path,
            expected_fields=expected_fields,
            provided_schema=provided_schema,
        )

    def model_loading_completed(
        self, model_path: str, first_class_is_positive: bool
    ) -> None:
        self._log.info(
            "model.loading_completed",
            model_path=model_path,
            first_class_is_positive=first_class_is_positive,
        )

    def model_loading_failed(self, model_path: str, reason: str) -> None:
        self._log.error("model.loading_failed", model_path=model_path, reason=reason)
