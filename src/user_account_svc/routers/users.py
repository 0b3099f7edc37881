from typing import Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from user_account_svc.dependencies import authorize_target, get_account_service, require_subject
from user_account_svc.exceptions import StoreError
from user_account_svc.routers.register import MessageResponse
from user_account_svc.services.account_service import AccountService

router = APIRouter(prefix="/users")


class UpdateUserRequest(BaseModel):
    """
    Fields left out of the body are not changed.
    """
    email: Optional[EmailStr] = None
    login: Optional[str] = Field(default=None, min_length=1)


class UserResponse(BaseModel):
    """
    Public projection of a user record. The password hash is never included.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    login: str


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UpdateUserRequest,
    request: Request,
    subject: str = Depends(require_subject),
    service: AccountService = Depends(get_account_service),
):
    """
    Update the email and/or login of a user. Requires a valid bearer token.

    Returns the public projection of the updated record, without the
    password hash. Raises 404 if the user does not exist.
    """
    authorize_target(request, subject, user_id)
    try:
        result = await service.update(user_id, email=body.email, login=body.login)
    except StoreError as e:
        raise StoreError("Error updating user", error=e.error) from e
    return UserResponse.model_validate(result.user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int,
    request: Request,
    subject: str = Depends(require_subject),
    service: AccountService = Depends(get_account_service),
):
    """
    Delete a user. Requires a valid bearer token; 404 if the user does not exist.
    """
    authorize_target(request, subject, user_id)
    try:
        await service.delete(user_id)
    except StoreError as e:
        raise StoreError("Error deleting user", error=e.error) from e
    return MessageResponse(message="User deleted successfully")
