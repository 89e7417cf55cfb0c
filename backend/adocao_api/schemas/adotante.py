"""Module: adotante."""

from pydantic import BaseModel

from adocao_api.db.models.adotante import Adotante


class AdotantePayload(BaseModel):
    id: int
    nome: str
    email: str
    telefone: str | None = None
    endereco: str | None = None


def as_adotante_payload(adotante: Adotante) -> AdotantePayload:
    return AdotantePayload(
        id=adotante.id,
        nome=adotante.nome,
        email=adotante.email,
        telefone=adotante.telefone,
        endereco=adotante.endereco,
    )
