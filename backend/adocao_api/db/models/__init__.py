# backend/adocao_api/db/models/__init__.py

from adocao_api.db.models.pet import Pet
from adocao_api.db.models.adotante import Adotante
from adocao_api.db.models.adocao import Adocao
from adocao_api.db.models.usuario import Usuario
