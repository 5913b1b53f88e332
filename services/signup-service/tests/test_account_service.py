"""Tests for the in-memory repository and the account service on top of it."""

from __future__ import annotations

import logging

import pytest

from signup_service.domain.contracts import AddAccountModel
from signup_service.domain.service import AccountService
from signup_service.repository import DuplicateAccountError, InMemoryAccountRepository


@pytest.fixture()
def service() -> AccountService:
    return AccountService(InMemoryAccountRepository())


def test_add_assigns_distinct_identifiers(service):
    first = service.add(AddAccountModel(name="Ana", email="ana@gmail.com", password="secret"))
    second = service.add(AddAccountModel(name="Bia", email="bia@gmail.com", password="secret"))

    assert first.id != second.id
    assert service.get_account(first.id) == first
    assert service.get_account(second.id) == second


def test_add_stores_password_as_received(service):
    account = service.add(AddAccountModel(name="Ana", email="ana@gmail.com", password="teste@123"))

    assert account.password == "teste@123"


def test_add_rejects_duplicate_email_case_insensitively(service):
    service.add(AddAccountModel(name="Ana", email="ana@gmail.com", password="secret"))

    with pytest.raises(DuplicateAccountError):
        service.add(AddAccountModel(name="Ana", email="ANA@gmail.com", password="secret"))


def test_get_account_returns_none_for_unknown_id(service):
    assert service.get_account("missing") is None


def test_add_logs_creation_without_password(service, caplog):
    with caplog.at_level(logging.INFO, logger="signup_service.domain.service"):
        service.add(AddAccountModel(name="Ana", email="ana@gmail.com", password="teste@123"))

    assert "account created" in caplog.text
    assert "teste@123" not in caplog.text
