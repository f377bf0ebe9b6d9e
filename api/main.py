from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from core import config, db
from core.handlers import register_exception_handlers
from core.logging import setup_logging
from students import router as students_router

logger = logging.getLogger(__name__)

WELCOME_HTML = (
    "<h1>Welcome to the Student Management API!</h1>"
    "<p>Use the /students endpoint to interact with the data.</p>"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to requests through app.state.
    app.state.pool = await db.create_pool()
    logger.info("Connection pool created (max_size=%s).", config.db_pool_max_size())
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None
        logger.info("Connection pool closed.")


def create_app(lifespan=lifespan) -> FastAPI:
    setup_logging(config.log_level())

    app = FastAPI(title="Student Management API", lifespan=lifespan)
    register_exception_handlers(app)

    app.include_router(students_router.router, tags=["students"])

    @app.get("/", response_class=HTMLResponse)
    def root() -> str:
        return WELCOME_HTML

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def main() -> None:
    host, port = config.http_host(), config.http_port()
    logger.info("Server is running and listening on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
