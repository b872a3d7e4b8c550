"""API v1 router combining all route modules."""

from fastapi import APIRouter

from app.api.v1 import health, inventory, orders, products, profiles

api_router = APIRouter()

# Include health check routes (no prefix)
api_router.include_router(health.router)

# Catalog
api_router.include_router(
    products.router,
    prefix="/products",
    tags=["products"],
)

# Orders
api_router.include_router(
    orders.router,
    prefix="/orders",
    tags=["orders"],
)

# Stock levels
api_router.include_router(
    inventory.router,
    prefix="/inventory",
    tags=["inventory"],
)

# Customer profiles
api_router.include_router(
    profiles.router,
    prefix="/profiles",
    tags=["profiles"],
)
