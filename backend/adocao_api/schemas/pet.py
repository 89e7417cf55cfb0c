"""Module: pet."""

from pydantic import BaseModel

from adocao_api.db.models.pet import Pet


class PetPayload(BaseModel):
    id: int
    nome: str
    especie: str
    raca: str | None = None
    idade: int | None = None
    descricao: str | None = None
    status: str


def as_pet_payload(pet: Pet) -> PetPayload:
    return PetPayload(
        id=pet.id,
        nome=pet.nome,
        especie=pet.especie,
        raca=pet.raca,
        idade=pet.idade,
        descricao=pet.descricao,
        status=pet.status,
    )
