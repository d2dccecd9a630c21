"""
Storefront API Application

REST backend for the Fatiha's Floral Fantasy online nursery: product
catalog, categories, cart clearing and Stripe payments over MongoDB.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from dotenv import load_dotenv

from .core.config import ENV_FILE

# Export config/.env to the process environment as well
load_dotenv(ENV_FILE)

from .core.config import settings
from .core.errors import NotFoundError, StoreError, PaymentProviderError
from .database import connection
from .routes import products_router, categories_router, cart_router, payments_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Storefront API starting up...")
    # A failed connection is logged inside connect(); the server still starts
    connection.connect(settings)
    logger.info(f"Stripe configured: {settings.stripe_configured}")

    yield

    logger.info("Storefront API shutting down...")
    connection.disconnect()


# Create FastAPI app
app = FastAPI(
    title="Fatihas Floral Fantasy",
    description="Online nursery storefront API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"status": False, "error": str(exc)})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"status": False, "error": str(exc)})


@app.exception_handler(PaymentProviderError)
async def payment_error_handler(request: Request, exc: PaymentProviderError):
    return JSONResponse(status_code=500, content={"error": str(exc)})


# Include API routers
app.include_router(products_router)
app.include_router(categories_router)
app.include_router(cart_router)
app.include_router(payments_router)


@app.get("/", response_class=PlainTextResponse)
async def home():
    """Liveness greeting"""
    return "Hello From Fatihas Floral Fantasy - Online Nursery Website Server"


@app.get("/health")
def health_check():
    """Health check endpoint"""
    mongo = connection.mongo
    return {
        "status": "healthy",
        "service": "nursery-api",
        "database": "connected" if mongo is not None and mongo.ping() else "unavailable",
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"{settings.app_name} listening on port {settings.port}")
    uvicorn.run(
        "nursery_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
