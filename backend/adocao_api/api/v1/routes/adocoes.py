"""Module: adocoes.

Adoption endpoints. Creating an adoption validates both foreign keys, refuses
a pet that already has an adoption, and flips the pet to adopted in the same
transaction as the insert. The one-adoption-per-pet rule is also enforced by
the UNIQUE constraint on adocoes.pet_id, so a request that loses a race with
another one is rejected at commit time.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from adocao_api.api.v1.routes.deps import MAX_ID, EntityId, get_db
from adocao_api.core.errors import ConflictError, InternalError, NotFoundError
from adocao_api.db.lookups import Lookup, adocao_lookup, adotante_lookup, pet_lookup
from adocao_api.db.models.adocao import Adocao
from adocao_api.db.models.adotante import Adotante
from adocao_api.db.models.pet import STATUS_ADOTADO, Pet
from adocao_api.schemas.adocao import AdocaoPayload, as_adocao_payload

logger = logging.getLogger(__name__)

router = APIRouter()

PET_NOT_FOUND = "Pet não encontrado."
ADOTANTE_NOT_FOUND = "Adotante não encontrado."
ADOCAO_NOT_FOUND = "Adoção não encontrada."
PET_JA_ADOTADO = "Este pet já foi adotado."


class AdocaoCreate(BaseModel):
    adotanteId: int = Field(ge=1, le=MAX_ID)
    petId: int = Field(ge=1, le=MAX_ID)


class AdocaoUpdate(AdocaoCreate):
    pass


# -------------------------
# Helpers
# -------------------------
def _ensure_references(
    db: Session,
    adotante_id: int,
    pet_id: int,
    pets: Lookup[Pet] = pet_lookup,
    adotantes: Lookup[Adotante] = adotante_lookup,
) -> None:
    # Both lookups run before either result is reported; pet is reported first.
    pet_exists = pets.exists(db, pet_id)
    adotante_exists = adotantes.exists(db, adotante_id)

    if not pet_exists:
        raise NotFoundError(PET_NOT_FOUND)
    if not adotante_exists:
        raise NotFoundError(ADOTANTE_NOT_FOUND)


def _with_relations():
    return select(Adocao).options(joinedload(Adocao.adotante), joinedload(Adocao.pet))


def create_adocao_record(db: Session, adotante_id: int, pet_id: int) -> Adocao:
    """
    Insert an adoption and mark its pet as adopted, all-or-nothing.

    Raises NotFoundError / ConflictError for rule violations. Persistence
    errors other than the pet_id UNIQUE violation propagate to the caller.
    """
    _ensure_references(db, adotante_id, pet_id)

    ja_adotado = db.execute(select(Adocao.id).where(Adocao.pet_id == pet_id)).first()
    if ja_adotado:
        raise ConflictError(PET_JA_ADOTADO)

    adocao = Adocao(adotante_id=adotante_id, pet_id=pet_id)
    db.add(adocao)

    pet = pet_lookup.get(db, pet_id)
    pet.status = STATUS_ADOTADO

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Concurrent adoption rejected for pet %s", pet_id)
        raise ConflictError(PET_JA_ADOTADO)

    db.refresh(adocao)
    return adocao


# -------------------------
# Endpoints
# -------------------------

@router.post(
    "/adocoes",
    summary="Create an adoption",
    status_code=status.HTTP_201_CREATED,
    response_model=AdocaoPayload,
    response_model_exclude_none=True,
)
def create_adocao(payload: AdocaoCreate, db: Session = Depends(get_db)):
    try:
        adocao = create_adocao_record(db, payload.adotanteId, payload.petId)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create adoption (adotante=%s, pet=%s)", payload.adotanteId, payload.petId)
        raise InternalError("Erro ao criar a adoção.")

    logger.info("Adoption %s created: adotante=%s pet=%s", adocao.id, adocao.adotante_id, adocao.pet_id)
    return as_adocao_payload(adocao)


@router.get("/adocoes", summary="List adoptions", response_model=list[AdocaoPayload])
def list_adocoes(db: Session = Depends(get_db)):
    try:
        rows = db.execute(_with_relations().order_by(Adocao.id)).scalars().all()
    except SQLAlchemyError:
        logger.exception("Failed to list adoptions")
        raise InternalError("Erro ao buscar as adoções. Verifique se pet ou adotante existe.")

    return [as_adocao_payload(a, include_relations=True) for a in rows]


@router.get("/adocoes/{adocao_id}", summary="Get adoption detail", response_model=AdocaoPayload)
def get_adocao(adocao_id: EntityId, db: Session = Depends(get_db)):
    try:
        adocao = db.execute(_with_relations().where(Adocao.id == adocao_id)).scalar_one_or_none()
    except SQLAlchemyError:
        logger.exception("Failed to load adoption %s", adocao_id)
        raise InternalError("Erro ao buscar a adoção.")

    if not adocao:
        raise NotFoundError(ADOCAO_NOT_FOUND)

    return as_adocao_payload(adocao, include_relations=True)


@router.put(
    "/adocoes/{adocao_id}",
    summary="Reassign an adoption",
    response_model=AdocaoPayload,
    response_model_exclude_none=True,
)
def update_adocao(adocao_id: EntityId, payload: AdocaoUpdate, db: Session = Depends(get_db)):
    # Pet statuses are left as they are on reassignment.
    try:
        _ensure_references(db, payload.adotanteId, payload.petId)

        adocao = adocao_lookup.get(db, adocao_id)
        if not adocao:
            raise NotFoundError(ADOCAO_NOT_FOUND)

        adocao.adotante_id = payload.adotanteId
        adocao.pet_id = payload.petId
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Reassignment of adoption %s rejected: pet %s already adopted", adocao_id, payload.petId)
        raise ConflictError(PET_JA_ADOTADO)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update adoption %s", adocao_id)
        raise InternalError("Erro ao atualizar a adoção.")

    db.refresh(adocao)
    logger.info("Adoption %s updated: adotante=%s pet=%s", adocao.id, adocao.adotante_id, adocao.pet_id)
    return as_adocao_payload(adocao)


@router.delete("/adocoes/{adocao_id}", summary="Delete an adoption", status_code=status.HTTP_204_NO_CONTENT)
def delete_adocao(adocao_id: EntityId, db: Session = Depends(get_db)):
    # No existence pre-check: a missing row is reported as a failed delete (500).
    # The pet keeps its adopted status.
    try:
        result = db.execute(delete(Adocao).where(Adocao.id == adocao_id))
        if result.rowcount == 0:
            db.rollback()
            logger.error("Delete of adoption %s matched no rows", adocao_id)
            raise InternalError("Erro ao excluir a adoção.")
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete adoption %s", adocao_id)
        raise InternalError("Erro ao excluir a adoção.")

    logger.info("Adoption %s deleted", adocao_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/adotantes/{adotante_id}/adocoes",
    summary="List adoptions made by one adopter",
    response_model=list[AdocaoPayload],
)
def list_adocoes_by_adotante(adotante_id: EntityId, db: Session = Depends(get_db)):
    try:
        rows = db.execute(
            _with_relations().where(Adocao.adotante_id == adotante_id).order_by(Adocao.id)
        ).scalars().all()
    except SQLAlchemyError:
        logger.exception("Failed to list adoptions for adotante %s", adotante_id)
        raise InternalError("Erro ao buscar adoções para o adotante especificado.")

    return [as_adocao_payload(a, include_relations=True) for a in rows]
