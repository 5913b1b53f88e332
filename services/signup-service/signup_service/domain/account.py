from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Account:
    """Account record returned once a sign up has been persisted."""

    id: str
    name: str
    email: str
    password: str
