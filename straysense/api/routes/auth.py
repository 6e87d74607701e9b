from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, EmailStr, Field

from straysense.api.error import raise_for_error
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.auth import (
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    SignupCommand,
    SignupResponse,
    SignupUseCase,
)
from straysense.depends import get_bearer_token, get_client_info, get_config, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    camelCase names are accepted for the web client.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password (min 6 chars)")
    first_name: str = Field(
        ..., min_length=1, max_length=100,
        validation_alias=AliasChoices("first_name", "firstName"),
    )
    last_name: str = Field(
        ..., min_length=1, max_length=100,
        validation_alias=AliasChoices("last_name", "lastName"),
    )
    phone: Optional[str] = None
    address_line1: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("address_line1", "addressLine1")
    )
    address_line2: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("address_line2", "addressLine2")
    )
    city: Optional[str] = None
    country: Optional[str] = None
    role: Optional[str] = None


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Signup

    Creates a user account and its contact profile.

    Raises:
        - 400 Bad Request: Missing or malformed fields
        - 409 Conflict: Email already registered
    """
    command = SignupCommand(**request.model_dump())

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    client: dict = Depends(get_client_info),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    User Login

    Opens a 24h server-side session and returns a bearer credential for it.

    Raises:
        - 401 Unauthorized: Invalid credentials
    """
    command = LoginCommand(email=request.email, password=request.password, **client)

    use_case = LoginUseCase(uow, config)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    User Logout

    Deletes the session behind the credential. Repeating the call with the
    same credential succeeds as a no-op.

    Raises:
        - 401 Unauthorized: Missing or undecodable credential
    """
    use_case = LogoutUseCase(uow, config)
    result = await use_case.execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
