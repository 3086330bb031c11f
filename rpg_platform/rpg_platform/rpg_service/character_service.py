"""
Character CRUD over the shared database.
"""
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from .models import Character
from .schemas import (
    AddCharacterDto,
    GetCharacterDto,
    Outcome,
    ServiceResult,
    UpdateCharacterDto,
)

logger = logging.getLogger(__name__)


def not_found_message(character_id: int) -> str:
    return f"Character with Id '{character_id}' not Found"


class CharacterService:
    """
    Create, read, update and delete characters.

    When owner_id is given, every operation only sees that user's
    characters and new characters are assigned to that user.
    """

    def __init__(self, db: Session, owner_id: Optional[int] = None):
        self.db = db
        self.owner_id = owner_id

    def _query(self):
        query = self.db.query(Character)
        if self.owner_id is not None:
            query = query.filter(Character.user_id == self.owner_id)
        return query

    def _find(self, character_id: int) -> Optional[Character]:
        return self._query().filter(Character.id == character_id).first()

    def _all(self) -> List[GetCharacterDto]:
        characters = self._query().order_by(Character.id).all()
        return [GetCharacterDto.model_validate(c) for c in characters]

    def add_character(self, new_character: AddCharacterDto) -> ServiceResult[List[GetCharacterDto]]:
        character = Character(**new_character.model_dump(), user_id=self.owner_id)
        self.db.add(character)
        self.db.commit()
        logger.info("Created character id=%s owner=%s", character.id, self.owner_id)
        return ServiceResult[List[GetCharacterDto]].ok(self._all())

    def get_all_characters(self) -> ServiceResult[List[GetCharacterDto]]:
        return ServiceResult[List[GetCharacterDto]].ok(self._all())

    def get_character_by_id(self, character_id: int) -> ServiceResult[GetCharacterDto]:
        character = self._find(character_id)
        if character is None:
            logger.warning("Character lookup missed id=%s owner=%s", character_id, self.owner_id)
            return ServiceResult[GetCharacterDto].fail(not_found_message(character_id), Outcome.NOT_FOUND)
        return ServiceResult[GetCharacterDto].ok(GetCharacterDto.model_validate(character))

    def update_character(self, updated_character: UpdateCharacterDto) -> ServiceResult[GetCharacterDto]:
        character = self._find(updated_character.id)
        if character is None:
            logger.warning("Character update missed id=%s owner=%s", updated_character.id, self.owner_id)
            return ServiceResult[GetCharacterDto].fail(
                not_found_message(updated_character.id), Outcome.NOT_FOUND
            )

        for field, value in updated_character.model_dump(exclude={"id"}).items():
            setattr(character, field, value)
        self.db.commit()
        self.db.refresh(character)
        return ServiceResult[GetCharacterDto].ok(GetCharacterDto.model_validate(character))

    def delete_character(self, character_id: int) -> ServiceResult[List[GetCharacterDto]]:
        character = self._find(character_id)
        if character is None:
            logger.warning("Character delete missed id=%s owner=%s", character_id, self.owner_id)
            return ServiceResult[List[GetCharacterDto]].fail(not_found_message(character_id), Outcome.NOT_FOUND)

        self.db.delete(character)
        self.db.commit()
        logger.info("Deleted character id=%s owner=%s", character_id, self.owner_id)
        return ServiceResult[List[GetCharacterDto]].ok(self._all())
