from fastapi import APIRouter

from menucost.api.health import router as health_router
from menucost.api.inventory import router as inventory_router
from menucost.api.recipes import router as recipes_router
from menucost.api.templates import router as templates_router
from menucost.api.units import router as units_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(units_router)
router.include_router(inventory_router)
router.include_router(recipes_router)
router.include_router(templates_router)
