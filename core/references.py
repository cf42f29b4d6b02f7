"""
References to other records that the API returns either as a bare id
string or as an embedded (populated) object.

Every place that needs the id or a display name of a referenced record
goes through reference_id() / resolve_name() instead of checking types.
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Id:
    value: str


@dataclass(frozen=True)
class Resolved(Generic[T]):
    id: str
    record: T


Reference = Union[Id, Resolved]


def parse_reference(raw: Any, parse: Callable[[dict], T]) -> Optional[Reference]:
    """Build a Reference from a wire value (id string, embedded dict or None)."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, Mapping):
        record = parse(dict(raw))
        return Resolved(id=str(raw.get("_id", "")), record=record)
    return Id(str(raw))


def reference_id(ref: Optional[Reference]) -> str:
    if ref is None:
        return ""
    if isinstance(ref, Resolved):
        return ref.id
    return ref.value


def resolve_name(ref: Optional[Reference], lookup: Optional[Mapping[str, Any]] = None, default: str = "Unknown") -> str:
    """
    Display name of a referenced record.

    Resolved references use the embedded record; bare ids are looked up in
    `lookup` (id -> record). Records are expected to expose `.name`.
    """
    if ref is None:
        return default
    if isinstance(ref, Resolved):
        return getattr(ref.record, "name", None) or default
    record = (lookup or {}).get(ref.value)
    if record is None:
        return default
    return getattr(record, "name", None) or default
