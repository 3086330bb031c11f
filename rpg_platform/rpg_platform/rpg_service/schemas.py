from pydantic import BaseModel, ConfigDict, Field

from enum import Enum
from typing import Generic, List, Optional, TypeVar

from .models import RpgClass

T = TypeVar("T")


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID_PASSWORD = "invalid_password"
    DUPLICATE = "duplicate"


class ServiceResult(BaseModel, Generic[T]):
    """
    Envelope returned by every service operation.

    Expected failures (missing user, wrong password, duplicate username,
    missing character) are reported here instead of being raised.
    """
    data: Optional[T] = None
    success: bool = True
    message: str = ""
    outcome: Outcome = Outcome.OK

    @classmethod
    def ok(cls, data=None, message: str = ""):
        return cls(data=data, success=True, message=message, outcome=Outcome.OK)

    @classmethod
    def fail(cls, message: str, outcome: Outcome):
        return cls(data=None, success=False, message=message, outcome=outcome)


# Auth
class UserRegister(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserLogin(BaseModel):
    username: str
    password: str


class PasswordResetRequest(BaseModel):
    old_password: str
    new_password: str = Field(..., min_length=1)


# Characters
class AddCharacterDto(BaseModel):
    name: str = "Frodo"
    hit_points: int = 100
    strength: int = 10
    defense: int = 10
    intelligence: int = 10
    rpg_class: RpgClass = RpgClass.KNIGHT


class UpdateCharacterDto(BaseModel):
    id: int
    name: str = "Frodo"
    hit_points: int = 100
    strength: int = 10
    defense: int = 10
    intelligence: int = 10
    rpg_class: RpgClass = RpgClass.KNIGHT


class GetCharacterDto(BaseModel):
    id: int
    name: str
    hit_points: int
    strength: int
    defense: int
    intelligence: int
    rpg_class: RpgClass

    model_config = ConfigDict(from_attributes=True)


CharacterList = List[GetCharacterDto]
