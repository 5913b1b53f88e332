from __future__ import annotations

from typing import Any

from fastapi import status

from .errors import PresentationError, ServerError
from .protocols import HttpResponse


def bad_request(error: PresentationError) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_400_BAD_REQUEST, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, body=ServerError())


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_200_OK, body=data)
