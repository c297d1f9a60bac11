"""PredictorFactory Protocol and the handles it returns."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from openml_datarobot.model.domain.predictor import Predictor


class LoaderResource(Protocol):
    """Whatever keeps a loaded predictor's code alive; released exactly once."""

    @property
    def closed(self) -> bool: ...

    def close(self) -> None: ...


@dataclass(frozen=True)
class LoadedPredictor:
    """A freshly instantiated predictor and the resource that owns its code."""

    predictor: Predictor
    resource: LoaderResource


class PredictorFactory(Protocol):
    """Instantiates the vendor predictor packaged in a model file."""

    def create(self, model_file: Path) -> LoadedPredictor: ...
