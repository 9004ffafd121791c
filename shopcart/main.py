"""
Shopping Cart Application

Serves in-memory shopping carts over HTTP, one cart per session.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .core.config import settings
from .database.carts import cart_db
from .routes import cart_router

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"Promo codes loaded: {len(settings.promo_codes)}")
    yield
    logger.info(f"{settings.app_name} shutting down, dropping {len(cart_db)} cart(s)...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="In-memory shopping carts with promo code discounts",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Include API routers
app.include_router(cart_router)


@app.get("/")
async def home():
    """API index"""
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "endpoints": {
            "cart": "/api/cart",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "shopcart"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shopcart.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
