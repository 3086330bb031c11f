"""
Auth Router - registration, login and password reset.
"""
from fastapi import APIRouter, Depends

from ..credential_manager import CredentialManager
from ..dependencies import get_credential_manager, get_current_user
from ..models import User
from ..schemas import PasswordResetRequest, ServiceResult, UserLogin, UserRegister
from .common import service_response

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ServiceResult[int])
def register(payload: UserRegister, manager: CredentialManager = Depends(get_credential_manager)):
    return service_response(manager.register(payload.username, payload.password))


@router.post("/login", response_model=ServiceResult[str])
def login(payload: UserLogin, manager: CredentialManager = Depends(get_credential_manager)):
    return service_response(manager.login(payload.username, payload.password))


@router.post("/reset-password", response_model=ServiceResult[int])
def reset_password(
    payload: PasswordResetRequest,
    user: User = Depends(get_current_user),
    manager: CredentialManager = Depends(get_credential_manager),
):
    """Change the authenticated user's password. Requires the current password."""
    return service_response(
        manager.reset_password(user.username, payload.old_password, payload.new_password)
    )
