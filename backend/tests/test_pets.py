from conftest import make_adotante, make_pet


def test_create_pet_starts_available(client):
    resp = client.post(
        "/api/pets",
        json={"nome": " Luna ", "especie": "Gato", "raca": "  ", "idade": 2, "descricao": "Dócil"},
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["nome"] == "Luna"
    assert body["raca"] is None
    assert body["status"] == "0"


def test_create_pet_rejects_negative_age(client):
    resp = client.post("/api/pets", json={"nome": "Luna", "especie": "Gato", "idade": -1})

    assert resp.status_code == 400
    assert "idade" in resp.json()["error"]


def test_list_pets_filters_by_status(client, db_session):
    make_pet(db_session, nome="Bidu")
    make_pet(db_session, nome="Mel", status="1")

    everything = client.get("/api/pets").json()
    disponiveis = client.get("/api/pets", params={"status": "0"}).json()

    assert [p["nome"] for p in everything] == ["Bidu", "Mel"]
    assert [p["nome"] for p in disponiveis] == ["Bidu"]


def test_get_pet_missing_returns_404(client):
    resp = client.get("/api/pets/10")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Pet não encontrado."}


def test_update_pet_can_set_status(client, db_session):
    pet = make_pet(db_session)

    resp = client.put(
        f"/api/pets/{pet.id}",
        json={"nome": "Rex", "especie": "Cachorro", "raca": "SRD", "status": "1"},
    )

    assert resp.status_code == 200
    assert resp.json()["status"] == "1"
    assert resp.json()["raca"] == "SRD"


def test_update_pet_rejects_unknown_status(client, db_session):
    pet = make_pet(db_session)

    resp = client.put(f"/api/pets/{pet.id}", json={"nome": "Rex", "especie": "Cachorro", "status": "9"})

    assert resp.status_code == 400


def test_delete_pet(client, db_session):
    pet = make_pet(db_session)

    resp = client.delete(f"/api/pets/{pet.id}")

    assert resp.status_code == 204
    assert client.get(f"/api/pets/{pet.id}").status_code == 404


def test_delete_adopted_pet_is_refused(client, db_session):
    pet = make_pet(db_session)
    adotante = make_adotante(db_session)
    client.post("/api/adocoes", json={"adotanteId": adotante.id, "petId": pet.id})

    resp = client.delete(f"/api/pets/{pet.id}")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Pet possui adoção registrada."}
