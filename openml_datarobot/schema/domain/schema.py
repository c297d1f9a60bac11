"""DatasetSchema aggregate — the fields a model consumes and the target it predicts."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class NumericValueSchema(BaseModel, frozen=True):
    type: Literal["numeric"] = "numeric"
    allow_missing: bool = False


class StringValueSchema(BaseModel, frozen=True):
    type: Literal["string"] = "string"
    allow_missing: bool = False


class CategoricalValueSchema(BaseModel, frozen=True):
    """A field restricted to a fixed vocabulary of labels.

    ``nominal_values`` is normalised to a sorted, duplicate-free tuple so the
    first element is always the same reference label for a given vocabulary.
    """

    type: Literal["categorical"] = "categorical"
    allow_missing: bool = False
    nominal_values: tuple[str, ...]

    @field_validator("nominal_values", mode="before")
    @classmethod
    def _sort_and_dedupe(cls, values: object) -> tuple[str, ...]:
        if isinstance(values, str) or not hasattr(values, "__iter__"):
            raise ValueError("nominal_values must be a collection of labels")
        normalised = tuple(sorted({str(v) for v in values}))
        if not normalised:
            raise ValueError("nominal_values must not be empty")
        return normalised


ValueSchema = Annotated[
    NumericValueSchema | StringValueSchema | CategoricalValueSchema,
    Field(discriminator="type"),
]


class FieldSchema(BaseModel, frozen=True):
    field_name: str = Field(min_length=1)
    field_index: int = Field(ge=0)
    value_schema: ValueSchema


class DatasetSchema(BaseModel, frozen=True):
    """Ordered field schemas, one of which may be designated the target."""

    target_index: int | None = None
    field_schemas: tuple[FieldSchema, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_indices(self) -> "DatasetSchema":
        for position, field in enumerate(self.field_schemas):
            if field.field_index != position:
                raise ValueError(
                    f"field '{field.field_name}' has index {field.field_index}"
                    f" but is at position {position}"
                )
        if self.target_index is not None and not (
            0 <= self.target_index < len(self.field_schemas)
        ):
            raise ValueError(
                f"target_index {self.target_index} is out of range for"
                f" {len(self.field_schemas)} fields"
            )
        return self

    @property
    def target_field_schema(self) -> FieldSchema | None:
        if self.target_index is None:
            return None
        return self.field_schemas[self.target_index]

    @property
    def feature_schemas(self) -> list[FieldSchema]:
        """All non-target fields, in schema order."""
        return [f for f in self.field_schemas if f.field_index != self.target_index]

    def describe(self) -> str:
        """Render the fields as ``name:type`` pairs, marking the target."""
        parts = []
        for field in self.field_schemas:
            marker = " (target)" if field.field_index == self.target_index else ""
            parts.append(f"{field.field_name}:{field.value_schema.type}{marker}")
        return ", ".join(parts)
