"""
Back Office Backend — Service Outcome Types
=============================================

What:  The four outcomes every service operation can produce.
Why:   Services report "not found", "invalid input" and "store failed"
       as values instead of exceptions, so the endpoint layer can map
       them to status codes with a single `match` statement.
How:   Frozen dataclasses joined in the `Result` union.

    Ok(value)                    → 200 / 201 / 204
    NotFound(resource, id)       → 404
    Invalid(message, fields)     → 400
    Unexpected(operation, detail)→ 500 (detail is logged, never returned)

Exceptions are still used for programming defects: anything a service does
not expect propagates to the global handler registered in main.py.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T = None


@dataclass(frozen=True)
class NotFound:
    resource: str
    resource_id: Any = None


@dataclass(frozen=True)
class Invalid:
    """Input rejected by a business rule; `fields` maps field name to reason."""
    message: str
    fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Unexpected:
    """The store failed. `detail` stays server-side."""
    operation: str
    detail: str = ""


Result = Union[Ok, NotFound, Invalid, Unexpected]
