from fastapi import APIRouter

from menucost import __version__

router = APIRouter()


@router.get("/health")
def get_health() -> dict:
    return {"status": "ok", "version": __version__}
