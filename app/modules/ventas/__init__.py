"""
Módulo de Ventas

- Registro de ventas con sus items (descuenta stock en la misma transacción)
- Consulta de una venta con su detalle
- Listado de ventas y búsqueda entre fechas (sin detalle)
- Resumen diario de ventas: bruto, descuento y neto

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio (armado y validación de la venta)
- repository.py: Acceso a datos
- calculator.py: Subtotales, totales y resumen por fecha
- projection.py: Conversión de entidades a vistas
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as ventas_router
from .service import VentaService
from .repository import VentaRepository

__all__ = [
    "ventas_router",
    "VentaService",
    "VentaRepository"
]
