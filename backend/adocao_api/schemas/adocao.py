"""Module: adocao.

Response shape for adoptions. Field names are camelCase on the wire and
``dataAdocao`` always carries the display-formatted timestamp.
"""

from pydantic import BaseModel

from adocao_api.core.dates import format_date
from adocao_api.db.models.adocao import Adocao
from adocao_api.schemas.adotante import AdotantePayload, as_adotante_payload
from adocao_api.schemas.pet import PetPayload, as_pet_payload


class AdocaoPayload(BaseModel):
    id: int
    adotanteId: int
    petId: int
    dataAdocao: str
    # Embedded only by the read endpoints.
    adotante: AdotantePayload | None = None
    pet: PetPayload | None = None


def as_adocao_payload(adocao: Adocao, include_relations: bool = False) -> AdocaoPayload:
    payload = AdocaoPayload(
        id=adocao.id,
        adotanteId=adocao.adotante_id,
        petId=adocao.pet_id,
        dataAdocao=format_date(adocao.data_adocao),
    )
    if include_relations:
        payload.adotante = as_adotante_payload(adocao.adotante)
        payload.pet = as_pet_payload(adocao.pet)
    return payload
