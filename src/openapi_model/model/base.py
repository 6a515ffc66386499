"""Shared base for document records.

Every record decodes missing optional keys to ``None`` (or an empty
container) and leaves them out again on encode, so a document survives a
load/dump cycle without gaining fields it never had.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializationInfo, model_serializer, model_validator

EXTENSION_PREFIX = "x-"


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (list, dict)) and not value)


class DocumentModel(BaseModel):
    """Base record with alias handling, empty-field omission and ``x-`` extensions."""

    model_config = ConfigDict(populate_by_name=True)

    extensions: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _collect_extensions(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        found = {k: v for k, v in data.items() if isinstance(k, str) and k.startswith(EXTENSION_PREFIX)}
        rest = cls._unflatten({k: v for k, v in data.items() if k not in found})
        rest["extensions"] = found
        return rest

    @classmethod
    def _unflatten(cls, data: dict[Any, Any]) -> dict[Any, Any]:
        """Hook for records whose document layout differs from their fields.

        A document key named ``extensions`` is not a field; extensions only
        ever come from ``x-`` keys.
        """
        data.pop("extensions", None)
        return data

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if field.is_required():
                continue
            key = field.alias if info.by_alias and field.alias else name
            if key in data and _is_empty(data[key]):
                del data[key]
        data = self._flatten(data)
        data.update(self.extensions)
        return data

    def _flatten(self, data: dict[str, Any]) -> dict[str, Any]:
        """Hook for records whose encoded form differs from their field layout."""
        return data
