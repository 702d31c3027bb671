"""
Módulo de Empleados

- Registro y consulta de empleados (datos de persona embebidos)
- Horarios de trabajo por empleado

Los empleados se referencian desde las ventas, nunca se crean al vender.
"""

from .router import router as empleados_router
from .service import EmpleadoService
from .repository import EmpleadoRepository

__all__ = [
    "empleados_router",
    "EmpleadoService",
    "EmpleadoRepository"
]
