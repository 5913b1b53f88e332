"""Composition root wiring controllers to their collaborators."""

from __future__ import annotations

from .config import Settings, get_settings
from .domain.service import AccountService
from .presentation.controllers.signup import SignUpController
from .repository import InMemoryAccountRepository
from .utils.email_validator_adapter import EmailValidatorAdapter


def make_signup_controller(settings: Settings | None = None) -> SignUpController:
    """Build a ``SignUpController`` backed by the in-memory account store."""
    settings = settings or get_settings()
    email_validator = EmailValidatorAdapter(
        check_deliverability=settings.email_check_deliverability
    )
    account_service = AccountService(InMemoryAccountRepository())
    return SignUpController(email_validator, account_service)
