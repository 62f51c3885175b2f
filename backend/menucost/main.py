from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from menucost.api.routes import router as api_router
from menucost.config import settings
from menucost.logging import configure_logging, get_logger
from menucost.storage.db import create_db_and_tables

app = FastAPI(title="Menu Cost API")
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def on_startup() -> None:
    configure_logging()
    logger.info("startup: env=%s strict_unit_pairing=%s", settings.env, settings.strict_unit_pairing)
    create_db_and_tables()


app.include_router(api_router)
