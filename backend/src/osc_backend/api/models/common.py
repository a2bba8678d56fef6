"""Payload helpers shared by every API resource."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class PartialUpdateModel(CamelModel):
    """Base model for partial updates where omitted fields stay untouched.

    Subclasses list the fields that accept an explicit ``null`` in
    ``NULLABLE_FIELDS``; ``null`` for any other field is rejected.
    """

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        """Return the explicitly supplied fields keyed by attribute name."""
        return self.model_dump(exclude_unset=True)

    def _reject_nulls(self) -> None:
        for name in self.model_fields_set:
            if name in self.NULLABLE_FIELDS:
                continue
            if getattr(self, name) is None:
                msg = f"{to_camel(name)} must not be null"
                raise ValueError(msg)


_DATETIME_ADAPTER = TypeAdapter(datetime)


def calendar_day(value: Any) -> Any:
    """Reduce ISO timestamps to their calendar day in UTC.

    Plain dates pass through untouched for the field type to validate.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str) and "T" in value:
        try:
            moment = _DATETIME_ADAPTER.validate_python(value)
        except ValidationError as exc:
            msg = f"invalid timestamp: {value}"
            raise ValueError(msg) from exc
    else:
        return value
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return moment.date()


def reject_blank(value: str, *, field: str) -> str:
    """Return ``value`` stripped, refusing strings made only of whitespace."""
    stripped = value.strip()
    if not stripped:
        msg = f"{field} must not be empty"
        raise ValueError(msg)
    return stripped


class ErrorResponse(BaseModel):
    """Structured error payload returned for non-2xx responses."""

    detail: str
    errors: list[dict[str, Any]] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: Literal["ok"] = "ok"
