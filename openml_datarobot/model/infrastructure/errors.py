"""Error types raised by model infrastructure."""

from pathlib import Path

from openml_datarobot.core.errors import ModelLoadingError


class ModelFileResolutionError(ModelLoadingError):
    """Raised when no single model file can be found at the given path."""

    def __init__(self, model_path: Path, reason: str) -> None:
        self.model_path = model_path
        super().__init__(f"Failed to find model file in [{model_path}]: {reason}")


class PredictorInstantiationError(ModelLoadingError):
    """Raised when the predictor packaged in a model file cannot be instantiated."""

    def __init__(self, model_file: Path, reason: str) -> None:
        self.model_file = model_file
        super().__init__(f"Failed to instantiate predictor from [{model_file}]: {reason}")
