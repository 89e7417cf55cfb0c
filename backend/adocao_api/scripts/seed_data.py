"""Module: seed_data."""

import random

from faker import Faker
from sqlalchemy import delete, select

from adocao_api.api.v1.routes.adocoes import create_adocao_record
from adocao_api.core.security import hash_password
from adocao_api.db.init_db import init_db
from adocao_api.db.models.adocao import Adocao
from adocao_api.db.models.adotante import Adotante
from adocao_api.db.models.pet import STATUS_DISPONIVEL, Pet
from adocao_api.db.models.usuario import Usuario
from adocao_api.db.session import SessionLocal

fake = Faker("pt_BR")

ESPECIES = {
    "Cachorro": ["SRD", "Labrador", "Poodle", "Vira-lata caramelo", "Shih Tzu"],
    "Gato": ["SRD", "Siamês", "Persa", "Maine Coon"],
}


def reset_db(session) -> None:
    # Children first: adocoes references pets and adotantes.
    session.execute(delete(Adocao))
    session.execute(delete(Pet))
    session.execute(delete(Adotante))
    session.execute(delete(Usuario))
    session.commit()


def seed_adotantes(session, n: int = 30) -> list[Adotante]:
    adotantes = []
    used_emails: set[str] = set()
    while len(adotantes) < n:
        email = fake.email().lower()
        if email in used_emails:
            continue
        used_emails.add(email)
        adotantes.append(
            Adotante(
                nome=fake.name(),
                email=email,
                telefone=fake.phone_number(),
                endereco=fake.address().replace("\n", ", "),
            )
        )
    session.add_all(adotantes)
    session.commit()
    return adotantes


def seed_pets(session, n: int = 60) -> list[Pet]:
    pets = []
    for _ in range(n):
        especie = random.choice(list(ESPECIES))
        pets.append(
            Pet(
                nome=fake.first_name(),
                especie=especie,
                raca=random.choice(ESPECIES[especie]),
                idade=random.randint(0, 15),
                descricao=fake.sentence(nb_words=10),
                status=STATUS_DISPONIVEL,
            )
        )
    session.add_all(pets)
    session.commit()
    return pets


def seed_adocoes(session, adotantes: list[Adotante], pets: list[Pet], ratio: float = 0.3) -> int:
    # Goes through the same transactional path as POST /adocoes.
    adotados = random.sample(pets, k=int(len(pets) * ratio))
    for pet in adotados:
        create_adocao_record(session, random.choice(adotantes).id, pet.id)
    return len(adotados)


def seed_usuarios(session) -> None:
    session.add(Usuario(nome="Administrador", email="admin@adocao.local", senha=hash_password("admin123")))
    session.commit()


if __name__ == "__main__":
    init_db()
    session = SessionLocal()
    try:
        print("Resetting tables...")
        reset_db(session)

        print("Seeding adotantes (30)...")
        adotantes = seed_adotantes(session)

        print("Seeding pets (60)...")
        pets = seed_pets(session)

        print("Seeding adocoes...")
        adocao_n = seed_adocoes(session, adotantes, pets)

        seed_usuarios(session)

        disponiveis = len(
            session.execute(select(Pet.id).where(Pet.status == STATUS_DISPONIVEL)).all()
        )
        print(f"Done. adotantes={len(adotantes)}, pets={len(pets)}, adocoes={adocao_n}, disponiveis={disponiveis}")
        print("Login: admin@adocao.local / admin123")
    finally:
        session.close()
