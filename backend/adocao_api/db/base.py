"""Module: base."""

from sqlalchemy.orm import DeclarativeBase

# Declarative base shared by pets, adotantes, adocoes and usuarios.
# init_db() creates every table registered on Base.metadata.
class Base(DeclarativeBase):
    pass
