"""Module: adotantes."""

import logging

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from adocao_api.api.v1.routes.deps import EntityId, get_db
from adocao_api.core.errors import ConflictError, InternalError, NotFoundError
from adocao_api.db.lookups import adotante_lookup
from adocao_api.db.models.adocao import Adocao
from adocao_api.db.models.adotante import Adotante
from adocao_api.schemas.adotante import AdotantePayload, as_adotante_payload

logger = logging.getLogger(__name__)

router = APIRouter()

ADOTANTE_NOT_FOUND = "Adotante não encontrado."
EMAIL_DUPLICADO = "E-mail já cadastrado."


class AdotanteCreate(BaseModel):
    nome: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=3, max_length=254)
    telefone: str | None = None
    endereco: str | None = None


def _normalize_email(value: str) -> str:
    return value.strip().lower()


def _get_adotante_or_404(db: Session, adotante_id: int) -> Adotante:
    adotante = adotante_lookup.get(db, adotante_id)
    if not adotante:
        raise NotFoundError(ADOTANTE_NOT_FOUND)
    return adotante


def _ensure_email_free(db: Session, email: str, current_id: int | None = None) -> None:
    stmt = select(Adotante.id).where(func.lower(Adotante.email) == email)
    if current_id is not None:
        stmt = stmt.where(Adotante.id != current_id)
    if db.execute(stmt).first():
        raise ConflictError(EMAIL_DUPLICADO)


# Endpoint: handles HTTP request/response mapping for this route.
@router.post("", summary="Create adopter", status_code=status.HTTP_201_CREATED, response_model=AdotantePayload)
def create_adotante(payload: AdotanteCreate, db: Session = Depends(get_db)):
    email = _normalize_email(payload.email)
    try:
        _ensure_email_free(db, email)

        adotante = Adotante(
            nome=payload.nome.strip(),
            email=email,
            telefone=payload.telefone,
            endereco=payload.endereco,
        )
        db.add(adotante)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create adopter")
        raise InternalError("Erro ao criar o adotante.")

    db.refresh(adotante)
    return as_adotante_payload(adotante)


@router.get("", summary="List adopters", response_model=list[AdotantePayload])
def list_adotantes(limit: int = 200, offset: int = 0, db: Session = Depends(get_db)):
    try:
        rows = db.execute(
            select(Adotante).order_by(Adotante.id).offset(offset).limit(limit)
        ).scalars().all()
    except SQLAlchemyError:
        logger.exception("Failed to list adopters")
        raise InternalError("Erro ao buscar os adotantes.")

    return [as_adotante_payload(a) for a in rows]


@router.get("/{adotante_id}", summary="Get adopter detail", response_model=AdotantePayload)
def get_adotante(adotante_id: EntityId, db: Session = Depends(get_db)):
    try:
        adotante = _get_adotante_or_404(db, adotante_id)
    except SQLAlchemyError:
        logger.exception("Failed to load adopter %s", adotante_id)
        raise InternalError("Erro ao buscar o adotante.")

    return as_adotante_payload(adotante)


@router.put("/{adotante_id}", summary="Update adopter", response_model=AdotantePayload)
def update_adotante(adotante_id: EntityId, payload: AdotanteCreate, db: Session = Depends(get_db)):
    email = _normalize_email(payload.email)
    try:
        adotante = _get_adotante_or_404(db, adotante_id)
        _ensure_email_free(db, email, current_id=adotante_id)

        adotante.nome = payload.nome.strip()
        adotante.email = email
        adotante.telefone = payload.telefone
        adotante.endereco = payload.endereco
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update adopter %s", adotante_id)
        raise InternalError("Erro ao atualizar o adotante.")

    db.refresh(adotante)
    return as_adotante_payload(adotante)


@router.delete("/{adotante_id}", summary="Delete adopter", status_code=status.HTTP_204_NO_CONTENT)
def delete_adotante(adotante_id: EntityId, db: Session = Depends(get_db)):
    try:
        adotante = _get_adotante_or_404(db, adotante_id)

        has_adocoes = db.execute(select(Adocao.id).where(Adocao.adotante_id == adotante_id)).first()
        if has_adocoes:
            raise ConflictError("Adotante possui adoções registradas.")

        db.delete(adotante)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete adopter %s", adotante_id)
        raise InternalError("Erro ao excluir o adotante.")

    logger.info("Adopter %s deleted", adotante_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
