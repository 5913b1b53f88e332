"""HTTP route definitions for the signup service."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse
from prometheus_client import Counter
from pydantic import BaseModel, Field

from ..domain.account import Account
from ..presentation.protocols import Controller, HttpRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1")

SIGNUP_RESPONSES = Counter(
    "signup_responses_total",
    "Sign up responses grouped by HTTP status code.",
    ["status_code"],
)


class AccountResponse(BaseModel):
    """Serialised representation of an `Account`; the password is never echoed."""

    id: str
    name: str
    email: str

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        """Build a response model from the domain record."""
        return cls(id=account.id, name=account.name, email=account.email)


class SignUpRequest(BaseModel):
    """Payload accepted by the sign up endpoint.

    Every field, and the body itself, is optional here so that presence checks
    stay with the controller. Only the camelCase wire names are accepted.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None
    password_confirmation: str | None = Field(default=None, alias="passwordConfirmation")


class ErrorResponse(BaseModel):
    error: str


def get_signup_controller(request: Request) -> Controller:
    """Resolve the sign up controller stored on the FastAPI application state."""
    controller: Controller = request.app.state.signup_controller
    return controller


def adapt_route(controller: Controller, http_request: HttpRequest) -> JSONResponse:
    """Run a controller and translate its ``HttpResponse`` into a JSON response."""
    http_response = controller.handle(http_request)
    SIGNUP_RESPONSES.labels(status_code=str(http_response.status_code)).inc()
    if http_response.status_code == status.HTTP_200_OK:
        content = AccountResponse.from_domain(http_response.body).model_dump()
    else:
        logger.info(
            "sign up rejected status=%s error=%s",
            http_response.status_code,
            http_response.body,
        )
        content = ErrorResponse(error=str(http_response.body)).model_dump()
    return JSONResponse(status_code=http_response.status_code, content=content)


@router.post(
    "/signup",
    response_model=AccountResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def signup(
    payload: SignUpRequest | None = Body(default=None),
    controller: Controller = Depends(get_signup_controller),
) -> JSONResponse:
    """Create an account from a sign up form."""
    body = payload.model_dump(by_alias=True, exclude_none=True) if payload is not None else None
    return adapt_route(controller, HttpRequest(body=body))
