"""
Módulo de Clientes
"""

from .router import router as clientes_router
from .service import ClienteService
from .repository import ClienteRepository

__all__ = [
    "clientes_router",
    "ClienteService",
    "ClienteRepository"
]
