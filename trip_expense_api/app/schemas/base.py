"""Shared pydantic base class and type aliases for the schemas."""

from typing import Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel

# Only JSON numbers are accepted; numeric strings and booleans are
# rejected rather than converted, and ints stay ints.
Number = Union[StrictInt, StrictFloat]


class CamelModel(BaseModel):
    """Base model exchanging camelCase keys, e.g. ``employeeName``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Return the JSON-ready dict stored in the data file."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
