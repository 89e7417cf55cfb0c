from sqlalchemy.engine import Engine

from adocao_api.db.base import Base
from adocao_api.db.session import engine

# IMPORTANT: import models so they register with Base.metadata
import adocao_api.db.models  # noqa: F401


def init_db(bind: Engine = engine) -> None:
    Base.metadata.create_all(bind=bind)
