from fastapi import HTTPException, status

from application.dtos.errors import AppError

_STATUS_BY_CATEGORY = {
    "validation": status.HTTP_400_BAD_REQUEST,
    "unauthorized": status.HTTP_401_UNAUTHORIZED,
    "forbidden": status.HTTP_403_FORBIDDEN,
    "not_found": status.HTTP_404_NOT_FOUND,
    "conflict": status.HTTP_409_CONFLICT,
}


def status_code_for(error: AppError) -> int:
    """Return the HTTP status code of an application error category."""
    return _STATUS_BY_CATEGORY.get(error.category, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _map_app_error_to_http_exception(error: AppError) -> HTTPException:
    """Map application layer errors to appropriate HTTP exceptions."""
    status_code = status_code_for(error)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        detail = error.message or "Internal server error"
        return HTTPException(status_code=status_code, detail=detail)
    return HTTPException(status_code=status_code, detail=error.message)
