"""
Módulo de Productos

- Registro de productos con precio y stock inicial
- Consulta por código interno
- Ingreso de mercadería (reposición de stock)
"""

from .router import router as productos_router
from .service import ProductoService
from .repository import ProductoRepository

__all__ = [
    "productos_router",
    "ProductoService",
    "ProductoRepository"
]
