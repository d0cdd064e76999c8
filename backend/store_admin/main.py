"""Application entry point for the Store Admin API service."""

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from store_admin.api.routes.billboards import router as billboards_router
from store_admin.api.routes.categories import router as categories_router
from store_admin.api.routes.colors import router as colors_router
from store_admin.api.routes.products import router as products_router
from store_admin.api.routes.sizes import router as sizes_router
from store_admin.api.routes.stores import router as stores_router
from store_admin.core.config import settings
from store_admin.core.db import get_session
from store_admin.core.errors import StoreAdminError
from store_admin.core.logging import setup_logging
from store_admin.core.middleware import BodySizeLimitMiddleware, RequestContextLogMiddleware
from store_admin.core.rate_limit import init_rate_limiter
from store_admin.core.validation import FieldValidator

setup_logging()

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

# Built once here; handlers receive it through deps.get_validator.
app.state.validator = FieldValidator.for_locale(settings.VALIDATION_LOCALE)

init_rate_limiter(app)

app.add_middleware(RequestContextLogMiddleware)


def _cors_origins() -> list[str]:
    if settings.ENV == "prod":
        if not settings.CORS_ALLOWED_ORIGINS:
            raise RuntimeError("CORS_ALLOWED_ORIGINS must be configured for prod")
        return settings.CORS_ALLOWED_ORIGINS
    return settings.CORS_ALLOWED_ORIGINS or ["http://localhost:3000"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)

app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.exception_handler(StoreAdminError)
async def store_admin_error_handler(request: Request, exc: StoreAdminError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    validator: FieldValidator = request.app.state.validator
    message = validator.describe_request_error(errors[0]) if errors else validator.message("body_invalid")
    return PlainTextResponse(message, status_code=400)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.bind(method=request.method, path=str(request.url.path)).exception("unhandled_error")
    return PlainTextResponse("Internal error", status_code=500)


@app.get("/api/healthz", tags=["system"], summary="Liveness probe")
def healthz() -> dict[str, str]:
    """Simple liveness probe that load balancers and monitors can call."""

    return {"status": "ok"}


@app.get("/api/readyz", tags=["system"], summary="Readiness probe")
async def readyz(session: AsyncSession = Depends(get_session)):
    try:
        await session.execute(text("SELECT 1"))
        return {"ready": True}
    except Exception:
        logger.exception("readiness_check_failed")
        return PlainTextResponse("Database not reachable", status_code=503)


# Store routes first so /api/stores/... is never read as a store id.
app.include_router(stores_router, prefix="/api")
app.include_router(billboards_router, prefix="/api")
app.include_router(categories_router, prefix="/api")
app.include_router(sizes_router, prefix="/api")
app.include_router(colors_router, prefix="/api")
app.include_router(products_router, prefix="/api")
