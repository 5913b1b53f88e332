"""EmailValidator implementation backed by the ``email-validator`` package."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """Answer ``is_valid`` using the same rules pydantic's ``EmailStr`` applies."""

    def __init__(self, *, check_deliverability: bool = False) -> None:
        """Configure whether the domain must resolve to a mail server."""
        self._check_deliverability = check_deliverability

    def is_valid(self, email: str) -> bool:
        """Return ``True`` when the address is well formed.

        Parameters
        ----------
        email:
            Raw address as submitted by the client.

        Returns
        -------
        bool
            ``False`` when the address is rejected by the validator.

        Raises
        ------
        Exception
            Anything other than ``EmailNotValidError`` (DNS failures, for
            instance) propagates to the caller.
        """
        try:
            validate_email(email, check_deliverability=self._check_deliverability)
        except EmailNotValidError:
            return False
        return True
