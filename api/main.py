from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from analytics import router as analytics_router
from core import db, settings
from core.log import configure_logging
from releases import router as releases_router
from seeding import seeder
from tasks import router as tasks_router
from users import router as users_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        await db.apply_schema()
        if settings.seed_demo_data():
            await seeder.seed_demo_data()
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="release-promotion-tracker", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router.router, tags=["users"])
app.include_router(releases_router.router, tags=["releases"])
app.include_router(tasks_router.router, tags=["tasks"])
app.include_router(analytics_router.router, tags=["analytics"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "release-promotion-tracker api"}
