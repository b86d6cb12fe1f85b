"""Shared pydantic base for analysis models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    """Immutable model that reads and writes the document store's camelCase keys.

    Fields are declared in snake_case; ``patientId`` and ``patient_id`` are
    both accepted on input, and ``model_dump(by_alias=True)`` emits camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
