"""Errors returned in response bodies by presentation-layer controllers."""

from __future__ import annotations


class PresentationError(Exception):
    """Base class; two errors are equal when their type and message match."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PresentationError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MissingParamError(PresentationError):
    """A required request field was absent or empty."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(PresentationError):
    """A request field failed a semantic check."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class ServerError(PresentationError):
    def __init__(self) -> None:
        super().__init__("Internal server error")
