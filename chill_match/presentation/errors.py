from http import HTTPStatus

from fastapi import HTTPException

from chill_match.domain.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)

_STATUS_BY_ERROR = {
    NotFoundError: HTTPStatus.NOT_FOUND,
    ValidationError: HTTPStatus.BAD_REQUEST,
    ConflictError: HTTPStatus.CONFLICT,
    RepositoryError: HTTPStatus.SERVICE_UNAVAILABLE,
}


def to_http_exception(error: DomainError) -> HTTPException:
    for error_type, status in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            detail = "Service unavailable" if error_type is RepositoryError else str(error)
            return HTTPException(status_code=status, detail=detail)
    return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="Internal server error")
