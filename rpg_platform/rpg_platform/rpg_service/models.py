from sqlalchemy import Column, Integer, String, ForeignKey, LargeBinary, Enum, Index, func
from sqlalchemy.orm import relationship
import enum

from .db import Base


class RpgClass(str, enum.Enum):
    KNIGHT = "Knight"
    MAGE = "Mage"
    CLERIC = "Cleric"


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    # HMAC-SHA512 of the password keyed with password_salt
    password_hash = Column(LargeBinary, nullable=False)
    password_salt = Column(LargeBinary, nullable=False)

    characters = relationship("Character", back_populates="user")


# Usernames are unique regardless of case
Index("ux_users_username_lower", func.lower(User.__table__.c.username), unique=True)


class Character(Base):
    __tablename__ = "characters"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, default="Frodo")
    hit_points = Column(Integer, nullable=False, default=100)
    strength = Column(Integer, nullable=False, default=10)
    defense = Column(Integer, nullable=False, default=10)
    intelligence = Column(Integer, nullable=False, default=10)
    rpg_class = Column(
        Enum(RpgClass, name="rpg_class", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=RpgClass.KNIGHT
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    user = relationship("User", back_populates="characters")
