"""Module: lookups.

Primary-key lookups bound to a mapped class. Routes validate foreign keys
through these instead of dispatching on a table name.
"""

from typing import Generic, Protocol, TypeVar

from sqlalchemy.orm import Session

from adocao_api.db.models.adocao import Adocao
from adocao_api.db.models.adotante import Adotante
from adocao_api.db.models.pet import Pet

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Lookup(Protocol[T_co]):
    def get(self, db: Session, entity_id: int) -> T_co | None: ...

    def exists(self, db: Session, entity_id: int) -> bool: ...


class EntityLookup(Generic[T]):
    def __init__(self, model: type[T]):
        self.model = model

    def get(self, db: Session, entity_id: int) -> T | None:
        return db.get(self.model, entity_id)

    def exists(self, db: Session, entity_id: int) -> bool:
        # SQLAlchemyError is not caught here; callers turn it into a 500.
        return self.get(db, entity_id) is not None


pet_lookup: Lookup[Pet] = EntityLookup(Pet)
adotante_lookup: Lookup[Adotante] = EntityLookup(Adotante)
adocao_lookup: Lookup[Adocao] = EntityLookup(Adocao)
