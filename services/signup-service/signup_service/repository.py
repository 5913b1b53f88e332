"""In-process account storage backing the sign up workflow."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from threading import Lock

from .domain.account import Account
from .domain.contracts import AddAccountModel


class DuplicateAccountError(ValueError):
    """Raised when an account already exists for the normalised email."""


@dataclass(slots=True)
class AccountRecord:
    """Stored projection of an account keyed by its identifier."""

    account_id: str
    name: str
    email: str
    password: str


class InMemoryAccountRepository:
    """Thread-safe account store with case-insensitive email uniqueness."""

    def __init__(self) -> None:
        """Initialise the record map and the email index."""
        self._records: dict[str, AccountRecord] = {}
        self._email_index: dict[str, str] = {}
        self._lock = Lock()

    def _normalise_email(self, email: str) -> str:
        return email.strip().lower()

    def add(self, payload: AddAccountModel) -> Account:
        """Persist a new account and return it with its assigned identifier."""
        email_key = self._normalise_email(payload.email)
        with self._lock:
            if email_key in self._email_index:
                raise DuplicateAccountError("email already registered")
            record = AccountRecord(
                account_id=str(uuid.uuid4()),
                name=payload.name,
                email=payload.email,
                password=payload.password,
            )
            self._records[record.account_id] = record
            self._email_index[email_key] = record.account_id
        return self._map_record(record)

    def get(self, account_id: str) -> Account | None:
        """Fetch an account by identifier or return ``None``."""
        with self._lock:
            record = self._records.get(account_id)
        if record is None:
            return None
        return self._map_record(record)

    def _map_record(self, record: AccountRecord) -> Account:
        """Convert a stored record into the domain ``Account`` dataclass."""
        return Account(
            id=record.account_id,
            name=record.name,
            email=record.email,
            password=record.password,
        )
