"""Module: adocao."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from adocao_api.core.dates import utcnow
from adocao_api.db.base import Base
from adocao_api.db.models.adotante import Adotante
from adocao_api.db.models.pet import Pet


# Links one adopter to one pet. pet_id is UNIQUE: a pet is adopted at most once.
class Adocao(Base):
    __tablename__ = "adocoes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    adotante_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("adotantes.id"),
        nullable=False,
        index=True,
    )
    pet_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pets.id"),
        unique=True,
        nullable=False,
    )

    # Audit
    data_adocao: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow
    )

    adotante: Mapped[Adotante] = relationship(back_populates="adocoes")
    pet: Mapped[Pet] = relationship()
