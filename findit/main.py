import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from findit.db import init_db

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Find-it snippet service started")
    yield


app = FastAPI(title="Find-It Snippets", version="0.1.0", lifespan=lifespan)


@app.get("/health")
async def health():
    return {"status": "ok"}


# Import routers after app is created to avoid circular imports
from findit.snippets.router import router as snippets_router  # noqa: E402

app.include_router(snippets_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
