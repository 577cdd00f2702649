import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import create_db_and_tables
from app.exceptions import ShoppingCartError
from app.logging_config import configure_logging
from app.routes import (
    cart,
    coupons,
    health,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # Run DB creation ONLY in local
    if settings.env == "local":
        create_db_and_tables()
    yield

app = FastAPI(title="Shopping Cart API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ShoppingCartError)
async def shopping_cart_error_handler(request: Request, exc: ShoppingCartError):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(cart.router, prefix="/cart", tags=["Cart"])
app.include_router(coupons.router, prefix="/coupon", tags=["Coupons"])
app.include_router(health.router, prefix="/health", tags=["Health"])


@app.get("/")
def root():
    return {
        "cart": [
            "/cart", "/cart/{cart_id}", "/cart/{cart_id}/totals",
            "/cart/{cart_id}/items", "/cart/{cart_id}/items/{product_id}"
        ],
        "coupon": [
            "/coupon", "/coupon/{coupon_id}"
        ],
        "health": [
            "/health/check"
        ]
    }
