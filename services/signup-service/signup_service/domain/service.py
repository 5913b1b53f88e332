"""Account service orchestrating persistence for new sign ups."""

from __future__ import annotations

import logging
from typing import Protocol

from .account import Account
from .contracts import AddAccountModel

logger = logging.getLogger(__name__)


class AccountRepository(Protocol):
    def add(self, payload: AddAccountModel) -> Account:
        ...

    def get(self, account_id: str) -> Account | None:
        ...


class AccountService:
    """Account workflows backed by an account repository."""

    def __init__(self, repository: AccountRepository) -> None:
        """Store the repository used to persist accounts."""
        self._repository = repository

    def add(self, account: AddAccountModel) -> Account:
        """Persist the account and return the stored record.

        Repository failures propagate unchanged; callers decide how to surface them.
        """
        created = self._repository.add(account)
        logger.info("account created id=%s email=%s", created.id, created.email)
        return created

    def get_account(self, account_id: str) -> Account | None:
        """Retrieve an account by identifier."""
        return self._repository.get(account_id)
