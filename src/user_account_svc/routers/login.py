from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from user_account_svc.dependencies import get_account_service
from user_account_svc.services.account_service import AccountService

router = APIRouter()


class LoginRequest(BaseModel):
    """
    Pydantic model for login request containing login name and password.
    """
    login: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """
    Pydantic model for login response containing a bearer token.
    """
    token: str


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, service: AccountService = Depends(get_account_service)):
    """
    Login endpoint to authenticate a user with login name and password.

    On successful authentication, returns a signed bearer token valid for the
    configured window. An unknown login and a wrong password both produce the
    same 401 response.
    """
    result = await service.login(request.login, request.password)
    return LoginResponse(token=result.token)
