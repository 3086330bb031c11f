"""
Character Router - CRUD for the authenticated user's characters.
"""
from typing import List

from fastapi import APIRouter, Depends

from ..character_service import CharacterService
from ..dependencies import get_character_service
from ..schemas import AddCharacterDto, GetCharacterDto, ServiceResult, UpdateCharacterDto
from .common import service_response

router = APIRouter(prefix="/characters", tags=["characters"])


@router.get("", response_model=ServiceResult[List[GetCharacterDto]])
def get_all(service: CharacterService = Depends(get_character_service)):
    return service_response(service.get_all_characters())


@router.get("/{character_id}", response_model=ServiceResult[GetCharacterDto])
def get_single(character_id: int, service: CharacterService = Depends(get_character_service)):
    return service_response(service.get_character_by_id(character_id))


@router.post("", response_model=ServiceResult[List[GetCharacterDto]])
def add_character(payload: AddCharacterDto, service: CharacterService = Depends(get_character_service)):
    return service_response(service.add_character(payload))


@router.put("", response_model=ServiceResult[GetCharacterDto])
def update_character(payload: UpdateCharacterDto, service: CharacterService = Depends(get_character_service)):
    return service_response(service.update_character(payload))


@router.delete("/{character_id}", response_model=ServiceResult[List[GetCharacterDto]])
def delete_character(character_id: int, service: CharacterService = Depends(get_character_service)):
    return service_response(service.delete_character(character_id))
