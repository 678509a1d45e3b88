"""Value Objects are compared based on their properties (values) rather than
identity. Two VOs are considered equal if all their attributes are the same."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ResponseVO:
    code: int
    raw_body: str
    headers: dict = field(default_factory=dict)
    body: Optional[Any] = None  # None for raw or non-JSON responses
