from fastapi import status
from straysense.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# One status per error code, whichever endpoint reports it.
ERROR_STATUS = {
    # Validation
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_STATUS": status.HTTP_400_BAD_REQUEST,
    "SHELTER_HAS_ANIMALS": status.HTTP_400_BAD_REQUEST,
    "VACCINE_TYPE_IN_USE": status.HTTP_400_BAD_REQUEST,
    "ANIMAL_IN_USE": status.HTTP_400_BAD_REQUEST,
    "REPORT_ALREADY_PROCESSED": status.HTTP_400_BAD_REQUEST,
    # Authentication
    "MISSING_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "SESSION_EXPIRED_OR_MISSING": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_ADMIN_PASSWORD": status.HTTP_401_UNAUTHORIZED,
    # Authorization
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    # Not found
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ANIMAL_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "SHELTER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "REPORT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ADOPTION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VACCINE_TYPE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VACCINATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    # Conflict
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "DUPLICATE_REQUEST": status.HTTP_409_CONFLICT,
    "ANIMAL_NOT_AVAILABLE": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error):
    """Raise the HTTP error registered for error.code (ServerError when unknown)."""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
