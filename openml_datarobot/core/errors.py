"""Base exception class for all model loading errors."""


class ModelLoadingError(Exception):
    """Base class for every failure that aborts loading a DataRobot model.

    Callers of the provider only need to catch this type; the subclasses exist
    so that tests and logs can tell the failure modes apart.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
