"""ClassificationBinaryDataRobotModel — a validated DataRobot model ready to be served."""

from pathlib import Path
from types import TracebackType

from openml_datarobot.model.domain.factory import LoaderResource
from openml_datarobot.model.domain.predictor import Predictor
from openml_datarobot.model.domain.target_values import TargetReconciliation
from openml_datarobot.schema.domain.schema import DatasetSchema


class ClassificationBinaryDataRobotModel:
    """Binary classifier whose features and classes were checked against a schema.

    Owns the loader resource of its predictor: closing the model releases the
    code loaded from the model file.
    """

    def __init__(
        self,
        predictor: Predictor,
        first_class_is_positive: bool,
        model_path: Path,
        schema: DatasetSchema,
        target_values: TargetReconciliation,
        resource: LoaderResource,
    ) -> None:
        self._predictor = predictor
        self._first_class_is_positive = first_class_is_positive
        self._model_path = model_path
        self._schema = schema
        self._target_values = target_values
        self._resource = resource

    @property
    def predictor(self) -> Predictor:
        return self._predictor

    @property
    def first_class_is_positive(self) -> bool:
        """Whether the model's first class is the schema's sorted-first label."""
        return self._first_class_is_positive

    @property
    def model_path(self) -> Path:
        return self._model_path

    @property
    def schema(self) -> DatasetSchema:
        return self._schema

    @property
    def target_values(self) -> TargetReconciliation:
        return self._target_values

    @property
    def closed(self) -> bool:
        return self._resource.closed

    def close(self) -> None:
        if not self._resource.closed:
            self._resource.close()

    def __enter__(self) -> "ClassificationBinaryDataRobotModel":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
