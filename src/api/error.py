from fastapi import status
from libs.result import Error
from src.app.use_cases.sessions import errors as codes

# Business error code -> HTTP status; unknown codes are server errors
ERROR_STATUS = {
    codes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    codes.NOT_COLLABORATORS: status.HTTP_403_FORBIDDEN,
    codes.NOT_A_PARTICIPANT: status.HTTP_403_FORBIDDEN,
    codes.CONFIRM_NOT_ALLOWED: status.HTTP_403_FORBIDDEN,
    codes.SESSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    codes.INVALID_STATE_TRANSITION: status.HTTP_409_CONFLICT,
    codes.DEPENDENCY_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Translate a use case Error into the matching HTTP error"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
