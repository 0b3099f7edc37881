import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from user_account_svc.exceptions import (
    AccountError,
    ForbiddenError,
    InvalidCredentialsError,
    MalformedHashError,
    StoreError,
    UserNotFoundError,
)

EXCEPTION_STATUS_MAP = {
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    MalformedHashError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_ERROR_MESSAGE = "Something went wrong"


def _status_for(exc: AccountError) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in EXCEPTION_STATUS_MAP:
            return EXCEPTION_STATUS_MAP[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    content = {"message": exc.message}
    if isinstance(exc, StoreError):
        content["error"] = exc.error
    return JSONResponse(status_code=_status_for(exc), content=content)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.error(exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountError, account_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
