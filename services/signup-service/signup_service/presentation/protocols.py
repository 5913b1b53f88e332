"""Transport-agnostic request/response contracts used by controllers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(slots=True)
class HttpRequest:
    """Generic inbound request; ``body`` is ``None`` when nothing was sent."""

    body: dict[str, Any] | None = None


@dataclass(slots=True)
class HttpResponse:
    """Status code plus either an error value or a payload."""

    status_code: int
    body: Any


class Controller(Protocol):
    def handle(self, request: HttpRequest) -> HttpResponse:
        ...


class EmailValidator(Protocol):
    """Capability answering whether a string is a well-formed email address."""

    def is_valid(self, email: str) -> bool:
        ...
