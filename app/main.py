# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.exceptions import ProductNotFoundError
from app.core.logging_config import configure_logging
from app.routes import conflicts, health, products
from app.services.setup import setup_inventory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: seed the in-memory catalog unless one was injected already
    if getattr(app.state, "inventory", None) is None:
        app.state.inventory = setup_inventory(get_settings())
    yield


settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Herd Inventory Dashboard",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ProductNotFoundError)
async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=404, content={"message": "Product not found"})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed payloads are a 400 with field-level errors, not FastAPI's default 422
    message = "Invalid stock update" if request.url.path.endswith("/stock-update") else "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"message": message, "errors": jsonable_encoder(exc.errors())}
    )


app.include_router(products.router)
app.include_router(conflicts.router)
app.include_router(health.router)
