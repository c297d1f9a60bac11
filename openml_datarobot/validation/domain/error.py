"""ParamValidationError — one problem found while checking a model before loading."""

from pydantic import BaseModel, Field


class ParamValidationError(BaseModel, frozen=True):
    """Immutable, non-raising description of a pre-flight validation failure."""

    message: str = Field(min_length=1)
