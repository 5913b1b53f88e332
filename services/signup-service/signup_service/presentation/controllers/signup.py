"""Sign up controller validating account-creation requests."""

from __future__ import annotations

import logging

from ...domain.contracts import AddAccount, AddAccountModel
from ..errors import InvalidParamError, MissingParamError
from ..helpers import bad_request, ok, server_error
from ..protocols import EmailValidator, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("name", "email", "password", "passwordConfirmation")


class SignUpController:
    """Validate a sign up request and delegate account creation.

    Checks run in a fixed order and stop at the first failure: field presence
    (in ``REQUIRED_FIELDS`` order), password confirmation, email format, then
    account creation. Collaborator exceptions become a generic ``ServerError``.
    The controller keeps no per-request state and may be shared across requests.
    """

    def __init__(self, email_validator: EmailValidator, add_account: AddAccount) -> None:
        self._email_validator = email_validator
        self._add_account = add_account

    def handle(self, request: HttpRequest) -> HttpResponse:
        body = request.body or {}
        for field in REQUIRED_FIELDS:
            if not body.get(field):
                return bad_request(MissingParamError(field))

        name = body["name"]
        email = body["email"]
        password = body["password"]
        if password != body["passwordConfirmation"]:
            return bad_request(InvalidParamError("passwordConfirmation"))

        try:
            is_valid = self._email_validator.is_valid(email)
        except Exception:
            logger.exception("email validator failed")
            return server_error()
        if not is_valid:
            return bad_request(InvalidParamError("email"))

        try:
            account = self._add_account.add(
                AddAccountModel(name=name, email=email, password=password)
            )
        except Exception:
            logger.exception("account creation failed")
            return server_error()
        return ok(account)
