from datetime import UTC, datetime

from adocao_api import main
from adocao_api.core.dates import format_date, utcnow
from adocao_api.core.errors import ApiError, ConflictError, InternalError, NotFoundError
from adocao_api.db.lookups import adotante_lookup, pet_lookup
from conftest import make_adotante, make_pet


def test_format_date():
    assert format_date(datetime(2024, 3, 7, 9, 5, 1)) == "07/03/2024 09:05:01"


def test_error_status_codes():
    assert NotFoundError("x").status_code == 404
    assert ConflictError("x").status_code == 400
    assert InternalError("x").status_code == 500
    assert ApiError("x", status_code=418).status_code == 418


def test_lookups_are_bound_to_their_entity(db_session):
    pet = make_pet(db_session)
    adotante = make_adotante(db_session)
    make_pet(db_session, nome="Segundo")

    assert pet_lookup.exists(db_session, pet.id)
    assert adotante_lookup.exists(db_session, adotante.id)
    # Id 2 exists as a pet but not as an adopter.
    assert pet_lookup.exists(db_session, 2)
    assert not adotante_lookup.exists(db_session, 2)
    assert pet_lookup.get(db_session, 3) is None


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_unknown_route_uses_error_body(client):
    resp = client.get("/api/nada")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_utcnow_is_naive_utc():
    before = datetime.now(UTC).replace(tzinfo=None)
    value = utcnow()

    assert value.tzinfo is None
    assert before <= value <= datetime.now(UTC).replace(tzinfo=None)


def test_create_app_configures_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "configure_logging", lambda *args, **kwargs: calls.append(args))

    main.create_app()

    assert calls == [()]
