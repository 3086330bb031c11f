"""
FastAPI dependencies wiring the services to the database session and settings.
"""
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session
import jwt

from .auth import NAME_IDENTIFIER_CLAIM, TokenIssuer
from .character_service import CharacterService
from .config import settings
from .credential_manager import CredentialManager
from .db import get_db
from .models import User
from .stores import UserStore


def get_token_issuer() -> TokenIssuer:
    """Build the token issuer from settings. Raises ConfigurationError without a secret."""
    return TokenIssuer(settings.APP_SETTINGS_TOKEN, settings.TOKEN_EXPIRE_MINUTES)


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_credential_manager(
    users: UserStore = Depends(get_user_store),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> CredentialManager:
    return CredentialManager(users, tokens)


def get_current_user(
    users: UserStore = Depends(get_user_store),
    tokens: TokenIssuer = Depends(get_token_issuer),
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> User:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    token = authorization.split(" ", 1)[1].strip()
    try:
        claims = tokens.decode_token(token)
        user_id = int(claims[NAME_IDENTIFIER_CLAIM])
    except (jwt.InvalidTokenError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc

    user = users.get(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def get_character_service(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> CharacterService:
    return CharacterService(db, owner_id=user.id)
