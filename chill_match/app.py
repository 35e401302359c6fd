import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from chill_match.applications.interfaces.dtos.message import Message
from chill_match.infrastructure.config.settings import Settings
from chill_match.infrastructure.logging.logger import Logger, setup_logging
from chill_match.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, set_engine
from chill_match.presentation.routers import likes, matches, users

setup_logging(noisy_libs={"sqlalchemy.engine": logging.WARNING})

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    if Settings().CREATE_TABLES:
        logger.info("Creating database tables")
        await create_tables(engine)
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Chill Match", lifespan=lifespan)

app.include_router(users.router)
app.include_router(likes.router)
app.include_router(matches.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Netflix & Chill matching service"}


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "chill-match"}
