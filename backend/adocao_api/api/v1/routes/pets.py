"""Module: pets."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from adocao_api.api.v1.routes.deps import EntityId, get_db
from adocao_api.core.errors import ConflictError, InternalError, NotFoundError
from adocao_api.db.lookups import pet_lookup
from adocao_api.db.models.adocao import Adocao
from adocao_api.db.models.pet import STATUS_DISPONIVEL, Pet
from adocao_api.schemas.pet import PetPayload, as_pet_payload

logger = logging.getLogger(__name__)

router = APIRouter()

PET_NOT_FOUND = "Pet não encontrado."


class PetCreate(BaseModel):
    nome: str = Field(min_length=1, max_length=120)
    especie: str = Field(min_length=1, max_length=60)
    raca: str | None = None
    idade: int | None = Field(default=None, ge=0)
    descricao: str | None = None


class PetUpdate(PetCreate):
    status: Literal["0", "1"] | None = None


# -------------------------
# Helpers
# -------------------------
def _normalize_optional(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned if cleaned else None


def _get_pet_or_404(db: Session, pet_id: int) -> Pet:
    pet = pet_lookup.get(db, pet_id)
    if not pet:
        raise NotFoundError(PET_NOT_FOUND)
    return pet


# -------------------------
# Endpoints
# -------------------------

@router.post("", summary="Create pet", status_code=status.HTTP_201_CREATED, response_model=PetPayload)
def create_pet(payload: PetCreate, db: Session = Depends(get_db)):
    pet = Pet(
        nome=payload.nome.strip(),
        especie=payload.especie.strip(),
        raca=_normalize_optional(payload.raca),
        idade=payload.idade,
        descricao=_normalize_optional(payload.descricao),
        status=STATUS_DISPONIVEL,
    )
    try:
        db.add(pet)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create pet")
        raise InternalError("Erro ao criar o pet.")

    db.refresh(pet)
    return as_pet_payload(pet)


@router.get("", summary="List pets", response_model=list[PetPayload])
def list_pets(
    status_filter: Literal["0", "1"] | None = Query(default=None, alias="status"),
    limit: int = Query(default=200, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    stmt = select(Pet).order_by(Pet.id)
    if status_filter is not None:
        stmt = stmt.where(Pet.status == status_filter)
    stmt = stmt.offset(offset).limit(limit)

    try:
        pets = db.execute(stmt).scalars().all()
    except SQLAlchemyError:
        logger.exception("Failed to list pets")
        raise InternalError("Erro ao buscar os pets.")

    return [as_pet_payload(p) for p in pets]


@router.get("/{pet_id}", summary="Get pet detail", response_model=PetPayload)
def get_pet(pet_id: EntityId, db: Session = Depends(get_db)):
    try:
        pet = _get_pet_or_404(db, pet_id)
    except SQLAlchemyError:
        logger.exception("Failed to load pet %s", pet_id)
        raise InternalError("Erro ao buscar o pet.")

    return as_pet_payload(pet)


@router.put("/{pet_id}", summary="Update pet details", response_model=PetPayload)
def update_pet(pet_id: EntityId, payload: PetUpdate, db: Session = Depends(get_db)):
    try:
        pet = _get_pet_or_404(db, pet_id)

        pet.nome = payload.nome.strip()
        pet.especie = payload.especie.strip()
        pet.raca = _normalize_optional(payload.raca)
        pet.idade = payload.idade
        pet.descricao = _normalize_optional(payload.descricao)
        if payload.status is not None:
            pet.status = payload.status

        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update pet %s", pet_id)
        raise InternalError("Erro ao atualizar o pet.")

    db.refresh(pet)
    logger.info("Pet %s updated (status=%s)", pet.id, pet.status)
    return as_pet_payload(pet)


@router.delete("/{pet_id}", summary="Delete pet", status_code=status.HTTP_204_NO_CONTENT)
def delete_pet(pet_id: EntityId, db: Session = Depends(get_db)):
    try:
        pet = _get_pet_or_404(db, pet_id)

        # adocoes.pet_id references pets.id; refuse instead of orphaning the row.
        adotado = db.execute(select(Adocao.id).where(Adocao.pet_id == pet_id)).first()
        if adotado:
            raise ConflictError("Pet possui adoção registrada.")

        db.delete(pet)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete pet %s", pet_id)
        raise InternalError("Erro ao excluir o pet.")

    logger.info("Pet %s deleted", pet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
