import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from adocao_api.api.v1.routes import auth as auth_routes
from adocao_api.api.v1.routes.deps import get_db
from adocao_api.db.base import Base
from adocao_api.db.init_db import init_db
from adocao_api.db.models.adotante import Adotante
from adocao_api.db.models.pet import Pet
from adocao_api.db.session import build_engine
from adocao_api.main import app


@pytest.fixture()
def engine():
    # One shared in-memory connection so every session sees the same tables.
    eng = build_engine("sqlite://", poolclass=StaticPool)
    init_db(eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        auth_routes.TOKENS.clear()


def make_pet(db, nome="Rex", especie="Cachorro", status="0", **kwargs) -> Pet:
    pet = Pet(nome=nome, especie=especie, status=status, **kwargs)
    db.add(pet)
    db.commit()
    return pet


def make_adotante(db, nome="Maria Silva", email=None, **kwargs) -> Adotante:
    adotante = Adotante(nome=nome, email=email or f"{nome.split()[0].lower()}@example.com", **kwargs)
    db.add(adotante)
    db.commit()
    return adotante


@pytest.fixture()
def five_pets_one_adotante(db_session):
    pets = [make_pet(db_session, nome=f"Pet {i}") for i in range(1, 6)]
    adotante = make_adotante(db_session)
    return pets, adotante
