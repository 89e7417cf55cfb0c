"""Module: adotante."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from adocao_api.db.base import Base


class Adotante(Base):
    __tablename__ = "adotantes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    telefone: Mapped[str | None] = mapped_column(String, nullable=True)
    endereco: Mapped[str | None] = mapped_column(String, nullable=True)

    adocoes: Mapped[list["Adocao"]] = relationship(back_populates="adotante")  # noqa: F821
