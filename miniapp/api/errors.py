"""Translation of session errors into HTTP errors."""
from fastapi import HTTPException

from miniapp.services.session.errors import (
    AdminModeError,
    AdminRequiredError,
    InvalidOptionError,
    InvalidPasswordError,
    NoProductSelectedError,
    OptionNotApplicableError,
    ProductNotFoundError,
    ProductUnavailableError,
    SessionError,
    SessionNotFoundError,
)

_STATUS_CODES = {
    SessionNotFoundError: 404,
    ProductNotFoundError: 404,
    ProductUnavailableError: 409,
    NoProductSelectedError: 409,
    OptionNotApplicableError: 400,
    InvalidOptionError: 400,
    AdminRequiredError: 403,
    AdminModeError: 409,
    InvalidPasswordError: 401,
}


def to_http_exception(error: SessionError) -> HTTPException:
    """Map a session error to the HTTP status the client sees."""
    status_code = _STATUS_CODES.get(type(error), 400)
    return HTTPException(status_code=status_code, detail=str(error))
