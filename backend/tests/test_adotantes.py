from conftest import make_adotante, make_pet


def test_create_adotante_normalizes_email(client):
    resp = client.post("/api/adotantes", json={"nome": "Maria Silva", "email": " Maria@Example.com "})

    assert resp.status_code == 201
    assert resp.json()["email"] == "maria@example.com"


def test_create_adotante_duplicate_email(client, db_session):
    make_adotante(db_session, email="maria@example.com")

    resp = client.post("/api/adotantes", json={"nome": "Outra Maria", "email": "MARIA@example.com"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "E-mail já cadastrado."}


def test_list_and_get_adotantes(client, db_session):
    first = make_adotante(db_session, nome="Ana Lima")
    make_adotante(db_session, nome="Bruno Costa")

    listing = client.get("/api/adotantes").json()
    detail = client.get(f"/api/adotantes/{first.id}").json()

    assert [a["nome"] for a in listing] == ["Ana Lima", "Bruno Costa"]
    assert detail["email"] == "ana@example.com"


def test_get_adotante_missing_returns_404(client):
    resp = client.get("/api/adotantes/5")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Adotante não encontrado."}


def test_update_adotante_keeps_own_email(client, db_session):
    adotante = make_adotante(db_session)

    resp = client.put(
        f"/api/adotantes/{adotante.id}",
        json={"nome": "Maria S. Silva", "email": adotante.email, "telefone": "11 99999-0000"},
    )

    assert resp.status_code == 200
    assert resp.json()["nome"] == "Maria S. Silva"
    assert resp.json()["telefone"] == "11 99999-0000"


def test_update_adotante_to_taken_email(client, db_session):
    make_adotante(db_session, nome="Ana Lima")
    bruno = make_adotante(db_session, nome="Bruno Costa")

    resp = client.put(f"/api/adotantes/{bruno.id}", json={"nome": "Bruno Costa", "email": "ana@example.com"})

    assert resp.status_code == 400


def test_delete_adotante_with_adoptions_is_refused(client, db_session):
    adotante = make_adotante(db_session)
    pet = make_pet(db_session)
    client.post("/api/adocoes", json={"adotanteId": adotante.id, "petId": pet.id})

    resp = client.delete(f"/api/adotantes/{adotante.id}")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Adotante possui adoções registradas."}


def test_delete_adotante(client, db_session):
    adotante = make_adotante(db_session)

    assert client.delete(f"/api/adotantes/{adotante.id}").status_code == 204
    assert client.delete(f"/api/adotantes/{adotante.id}").status_code == 404
