from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from user_account_svc.dependencies import get_account_service
from user_account_svc.exceptions import StoreError
from user_account_svc.services.account_service import AccountService

router = APIRouter()


class RegisterRequest(BaseModel):
    """
    Pydantic model for registration containing email, login name and password.
    """
    email: EmailStr
    login: str = Field(min_length=1)
    password: str = Field(min_length=1)


class MessageResponse(BaseModel):
    message: str


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, service: AccountService = Depends(get_account_service)):
    """
    Register a new user. The password is stored only as a bcrypt hash.
    """
    try:
        await service.register(request.email, request.login, request.password)
    except StoreError as e:
        raise StoreError("Error registering user", error=e.error) from e
    return MessageResponse(message="User registered successfully")
