"""Module: pet."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from adocao_api.db.base import Base

# Status flag values stored in pets.status.
STATUS_DISPONIVEL = "0"
STATUS_ADOTADO = "1"


# Animal available for (or already placed through) adoption.
class Pet(Base):
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Basic Info
    nome: Mapped[str] = mapped_column(String, nullable=False)
    especie: Mapped[str] = mapped_column(String, nullable=False)
    raca: Mapped[str | None] = mapped_column(String, nullable=True)
    idade: Mapped[int | None] = mapped_column(Integer, nullable=True)
    descricao: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Flipped to STATUS_ADOTADO when an adoption is created.
    status: Mapped[str] = mapped_column(String(1), nullable=False, default=STATUS_DISPONIVEL)
