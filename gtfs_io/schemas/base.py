"""Common base for GTFS entities"""

from typing import Any, ClassVar, Optional, Tuple, TypeVar
from pydantic import BaseModel, ConfigDict

E = TypeVar("E", bound="GTFSEntity")


class GTFSEntity(BaseModel):
    """One row of one GTFS file

    Attributes are named after the GTFS columns. Entities are created
    empty and filled field by field by the reader, so every field is
    optional. Equality and hashing cover every field; an empty string
    and a missing value are treated as the same value.
    """

    model_config = ConfigDict(validate_assignment=False)

    # name of the file (without .txt) this entity is read from
    file_name: ClassVar[str] = ""
    # natural key column, None when rows have no identity of their own
    key_field: ClassVar[Optional[str]] = None
    # True when rows of this type are sorted before being added to a feed
    natural_order: ClassVar[bool] = False

    @property
    def key(self) -> Optional[str]:
        if self.key_field is None:
            return None
        return getattr(self, self.key_field)

    @classmethod
    def from_entity(cls: type[E], other: E) -> E:
        """Independent copy of another entity of the same type"""
        return other.model_copy(deep=True)

    def sort_key(self) -> Tuple[Any, ...]:
        raise TypeError(f"{type(self).__name__} has no natural ordering")

    def field_values(self) -> Tuple[Any, ...]:
        values = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value == "":
                value = None
            values.append(value)
        return tuple(values)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GTFSEntity):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return self.field_values() == other.field_values()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self.field_values())
