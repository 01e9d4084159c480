# tagcontent/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import HTTPException

from tagcontent.domain.errors import (
    ContentError,
    DuplicateKey,
    MediaNotFound,
    ProtectedTag,
    ProviderUnavailable,
    TagNotFound,
    TagValidationError,
    TextNotFound,
)

# first match wins, so subclasses go before their bases
_STATUS = (
    (DuplicateKey, HTTPStatus.CONFLICT),
    (TagValidationError, HTTPStatus.UNPROCESSABLE_ENTITY),
    (ProtectedTag, HTTPStatus.FORBIDDEN),
    (TagNotFound, HTTPStatus.NOT_FOUND),
    (MediaNotFound, HTTPStatus.NOT_FOUND),
    (TextNotFound, HTTPStatus.NOT_FOUND),
    (ProviderUnavailable, HTTPStatus.SERVICE_UNAVAILABLE),
)


def status_for(e: ContentError) -> HTTPStatus:
    for exc_type, status in _STATUS:
        if isinstance(e, exc_type):
            return status
    return HTTPStatus.BAD_REQUEST


def http_error(e: ContentError) -> HTTPException:
    return HTTPException(status_code=status_for(e), detail=e.to_dict())
