"""Domain-level request contracts shared by multiple layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .account import Account


@dataclass(slots=True, frozen=True)
class AddAccountModel:
    """Validated inputs required to create an account."""

    name: str
    email: str
    password: str


class AddAccount(Protocol):
    """Capability that persists a new account and returns the stored record."""

    def add(self, account: AddAccountModel) -> Account:
        ...
