"""FastAPI server implementation for the Storefront Service."""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from logging_utils.config import setup_service_logger

from .config import Settings
from .errors import StorageError, StorefrontError, ValidationError
from .logger import SERVICE_NAME, get_logger
from .providers import CatalogAggregator, ProviderClient
from .purchases import PurchaseRecorder
from .schemas import ErrorResponse, MessageResponse, PurchaseRequest
from .store import PurchaseStore

logger = get_logger("server")

PURCHASE_CREATED_MESSAGE = "Compra registrada com sucesso!"

router = APIRouter()


def get_aggregator(request: Request) -> CatalogAggregator:
    """Return the catalog aggregator attached to the running app."""
    return request.app.state.aggregator


def get_recorder(request: Request) -> PurchaseRecorder:
    """Return the purchase recorder attached to the running app."""
    return request.app.state.recorder


@router.get("/produtos", responses={500: {"model": ErrorResponse}})
async def list_products(aggregator: CatalogAggregator = Depends(get_aggregator)):
    """Return the catalogs of all providers, concatenated in provider order.

    Returns:
        JSONResponse: The merged product list, unmodified.
    """
    products = await aggregator.fetch_catalog()
    return JSONResponse(status_code=200, content=products)


@router.post(
    "/compras",
    status_code=201,
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_purchase(payload: PurchaseRequest, recorder: PurchaseRecorder = Depends(get_recorder)):
    """Record a customer's purchase.

    Args:
        payload (PurchaseRequest): Customer name and selected products.

    Returns:
        MessageResponse: Confirmation message.
    """
    await recorder.record_purchase(payload.customer, payload.items)
    return MessageResponse(message=PURCHASE_CREATED_MESSAGE)


async def handle_storefront_error(request: Request, exc: StorefrontError) -> JSONResponse:
    """Translate a storefront error into its status code and error body."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report an unparseable request body as missing purchase data."""
    return await handle_storefront_error(request, ValidationError(f"Invalid request body: {exc.errors()}"))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the storefront application.

    The store, aggregator and recorder are created here and attached to
    ``app.state``; routes reach them through dependencies.

    Args:
        settings (Settings | None): Configuration, read from the environment when omitted.

    Returns:
        FastAPI: The configured application.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_service_logger(SERVICE_NAME, log_level=settings.log_level, log_file=settings.log_file)
        try:
            await asyncio.to_thread(app.state.store.ensure_schema)
        except StorageError as e:
            logger.error(f"Schema initialization failed: {e}")
        logger.info(f"Storefront service ready on {settings.host}:{settings.port}")
        yield
        logger.info("Storefront service stopped")

    app = FastAPI(title="Storefront Service", lifespan=lifespan)

    store = PurchaseStore(settings.database_path)
    app.state.settings = settings
    app.state.store = store
    app.state.aggregator = CatalogAggregator(
        [ProviderClient.from_settings(p, timeout=settings.provider_timeout) for p in settings.providers]
    )
    app.state.recorder = PurchaseRecorder(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StorefrontError, handle_storefront_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.include_router(router)
    return app

