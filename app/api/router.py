# app/api/router.py
from fastapi import APIRouter

from app.config.settings import settings
from app.modules.empleados import empleados_router
from app.modules.productos import productos_router
from app.modules.ventas import ventas_router
from app.modules.clientes import clientes_router

# Router principal de la API
api_router = APIRouter(prefix="/api")

# ==================== MÓDULOS ====================

api_router.include_router(empleados_router)
api_router.include_router(productos_router)
api_router.include_router(ventas_router)
api_router.include_router(clientes_router)

# ==================== ESTADO ====================

@api_router.get("/health", tags=["Estado"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "modules": {
            "empleado": "/api/empleado",
            "producto": "/api/producto",
            "venta": "/api/venta",
            "cliente": "/api/cliente"
        }
    }
