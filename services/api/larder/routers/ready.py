from fastapi import APIRouter

from ..services.unit_conversion import UNITS_DB

router = APIRouter()


@router.get("/ready")
def ready():
    return {"ok": True, "units": len(UNITS_DB)}
