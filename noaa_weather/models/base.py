"""Base model shared by every api.weather.gov payload."""

from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel


class FieldState(str, Enum):
    """Presence of a nullable field in the payload it was read from."""
    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


class NwsModel(BaseModel):
    """Common config for NWS response models.

    Attributes are snake_case, wire names are camelCase. Optional fields
    default to ``None`` so a missing key never turns into a made-up value.

    Fields named in ``nullable_fields`` are "nullable but required key" on
    the upstream schema: for those a key sent as ``null`` is kept apart from
    a key that was never sent, both on read (``field_state``) and on dump.
    Every other ``None`` field is left out of the dumped payload.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    def field_state(self, name: str) -> FieldState:
        if name not in type(self).model_fields:
            raise AttributeError(f"{type(self).__name__} has no field {name!r}")
        if name not in self.model_fields_set:
            return FieldState.ABSENT
        if getattr(self, name) is None:
            return FieldState.NULL
        return FieldState.VALUE

    @model_serializer(mode="wrap")
    def _drop_absent(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            key = field.alias if info.by_alias and field.alias else name
            if key not in data or data[key] is not None:
                continue
            if name in self.nullable_fields and name in self.model_fields_set:
                continue
            del data[key]
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Dump to JSON-compatible data using wire names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, **kwargs: Any) -> str:
        return self.model_dump_json(by_alias=True, **kwargs)
