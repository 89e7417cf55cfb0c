"""Module: health."""

from fastapi import APIRouter

router = APIRouter()

# Endpoint: liveness probe, no database access.
@router.get("/health", summary="Service liveness")
def health():
    return {"status": "ok", "service": "adocao-api"}
