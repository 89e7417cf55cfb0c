import logging
from typing import Dict

from fastapi import APIRouter, Depends, Header, status
from pydantic import BaseModel, Field
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from adocao_api.api.v1.routes.deps import get_db
from adocao_api.core.errors import ConflictError, InternalError, UnauthorizedError
from adocao_api.core.security import hash_password, new_access_token, verify_password
from adocao_api.db.models.usuario import Usuario

logger = logging.getLogger(__name__)

router = APIRouter()

# token -> usuario id; process-local, cleared on restart.
TOKENS: Dict[str, int] = {}


class SignupRequest(BaseModel):
    nome: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=3, max_length=254)
    senha: str = Field(min_length=6, max_length=128)


class LoginRequest(BaseModel):
    email: str
    senha: str


class UsuarioPayload(BaseModel):
    id: int
    nome: str
    email: str


class LoginResponse(BaseModel):
    token: str
    tokenType: str = "bearer"
    usuario: UsuarioPayload


def _normalize_email(value: str) -> str:
    return value.strip().lower()


def _as_usuario_payload(usuario: Usuario) -> UsuarioPayload:
    return UsuarioPayload(id=usuario.id, nome=usuario.nome, email=usuario.email)


def _get_token_value(authorization: str | None) -> str:
    if not authorization:
        raise UnauthorizedError("Cabeçalho Authorization ausente.")

    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise UnauthorizedError("Cabeçalho Authorization inválido.")

    return parts[1].strip()


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=UsuarioPayload)
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    normalized_email = _normalize_email(payload.email)

    try:
        exists = db.execute(
            select(Usuario.id).where(func.lower(Usuario.email) == normalized_email)
        ).first()
        if exists:
            raise ConflictError("E-mail já cadastrado.")

        usuario = Usuario(
            nome=payload.nome.strip(),
            email=normalized_email,
            senha=hash_password(payload.senha),
        )
        db.add(usuario)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to register user %s", normalized_email)
        raise InternalError("Erro ao cadastrar o usuário.")

    db.refresh(usuario)
    logger.info("User %s registered", usuario.id)
    return _as_usuario_payload(usuario)


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    normalized_email = _normalize_email(payload.email)
    try:
        usuario = db.execute(
            select(Usuario).where(func.lower(Usuario.email) == normalized_email)
        ).scalar_one_or_none()
    except SQLAlchemyError:
        logger.exception("Failed to look up user %s", normalized_email)
        raise InternalError("Erro ao realizar login.")

    if not usuario or not verify_password(payload.senha, usuario.senha):
        raise UnauthorizedError("Credenciais inválidas.")

    token = new_access_token()
    TOKENS[token] = usuario.id

    return LoginResponse(token=token, usuario=_as_usuario_payload(usuario))


@router.get("/me", response_model=UsuarioPayload)
def me(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
):
    token = _get_token_value(authorization)
    usuario_id = TOKENS.get(token)
    if usuario_id is None:
        raise UnauthorizedError("Token inválido ou expirado.")

    usuario = db.get(Usuario, usuario_id)
    if not usuario:
        raise UnauthorizedError("Usuário não encontrado.")

    return _as_usuario_payload(usuario)
