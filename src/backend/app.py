# src/backend/app.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.backend.config import settings
from src.backend.middleware.security_headers import security_headers_middleware
from src.backend.routes.employees_api import router as employees_router
from src.backend.utils.bootstrap import init_db, seed_org_structure
from src.backend.utils.database import AsyncSessionLocal, engine
from src.backend.utils.error_handler import custom_exception_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_INIT_DB:
        await init_db(engine)
    if settings.AUTO_SEED_DB:
        async with AsyncSessionLocal() as db:
            await seed_org_structure(db)
    logger.info("Employee store ready")
    yield
    await engine.dispose()


app = FastAPI(title="employee-records", version="1.0", lifespan=lifespan)

# ----------------------------------------------------------
# CORS (browser consoles run on another origin)
# ----------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)

# ----------------------------------------------------------
# SECURITY HEADERS
# ----------------------------------------------------------
app.middleware("http")(security_headers_middleware)

# ----------------------------------------------------------
# CUSTOM ERROR HANDLERS
# ----------------------------------------------------------
# 1) HTTPException (routing 404 and the ones routes raise)
app.add_exception_handler(StarletteHTTPException, custom_exception_handler)

# 2) Validation errors
app.add_exception_handler(RequestValidationError, custom_exception_handler)

# 3) Catch-all
app.add_exception_handler(Exception, custom_exception_handler)

# ----------------------------------------------------------
# ROUTERS
# ----------------------------------------------------------
app.include_router(employees_router)


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok"}
