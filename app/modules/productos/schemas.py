from pydantic import Field
from typing import Optional
from decimal import Decimal

from app.shared.schemas import TiendaBaseModel, AuditoriaResponse, MAX_ENTERO

# ==================== REQUEST SCHEMAS ====================

class ProductoCreateRequest(TiendaBaseModel):
    codigo_producto: str = Field(..., min_length=1, max_length=30, description="Código interno del producto")
    codigo_barra: Optional[str] = Field(None, max_length=50, description="Código de barras")
    nombre: str = Field(..., min_length=1, max_length=100)
    descripcion: Optional[str] = Field(None, max_length=255)
    precio_venta: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Precio unitario de venta")
    cantidad_stock: int = Field(0, ge=0, le=MAX_ENTERO, description="Stock inicial")

class StockIngresoRequest(TiendaBaseModel):
    cantidad: int = Field(..., gt=0, le=MAX_ENTERO, description="Unidades que ingresan al stock")

# ==================== RESPONSE SCHEMAS ====================

class ProductoResponse(TiendaBaseModel):
    codigo_producto: str
    codigo_barra: Optional[str]
    nombre: str
    descripcion: Optional[str]
    precio_venta: Decimal
    cantidad_stock: int
    auditoria: Optional[AuditoriaResponse] = None
