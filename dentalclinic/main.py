from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dentalclinic.core.config import settings
from dentalclinic.core.log import configure_logging
from dentalclinic.core.storage import FileBlobStore
from dentalclinic.services.store import ClinicStore
from dentalclinic.api.v1.doctors import router as doctors_router
from dentalclinic.api.v1.patients import router as patients_router
from dentalclinic.api.v1.catalog import router as catalog_router
from dentalclinic.api.v1.visits import router as visits_router
from dentalclinic.api.v1.payments import router as payments_router
from dentalclinic.api.v1.reports import router as reports_router


def build_store() -> ClinicStore:
    return ClinicStore(FileBlobStore(settings.DATA_DIR, settings.DATA_FILE_SUFFIX))


def create_app(store: ClinicStore | None = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = store if store is not None else build_store()
        yield

    app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(doctors_router)
    app.include_router(patients_router)
    app.include_router(catalog_router)
    app.include_router(visits_router)
    app.include_router(payments_router)
    app.include_router(reports_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
