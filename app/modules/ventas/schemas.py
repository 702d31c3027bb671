from pydantic import Field
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal

from app.shared.schemas import TiendaBaseModel, PersonaSchema, MAX_ENTERO

# ==================== REQUEST SCHEMAS ====================

class DetalleVentaRequest(TiendaBaseModel):
    # Opcional a nivel de esquema: el servicio responde 400 si falta
    codigo_producto: Optional[str] = Field(None, description="Código interno del producto")
    cantidad: int = Field(..., gt=0, le=MAX_ENTERO, description="Cantidad; se descuenta del stock del producto")

class VentaCreateRequest(TiendaBaseModel):
    fecha_venta: Optional[datetime] = Field(None, description="Fecha y hora de la venta, por defecto ahora")
    descuento: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2, description="Descuento aplicado al total")
    cliente: Optional[PersonaSchema] = Field(None, description="Cliente; se registra si su ci no existe")
    lista_detalle_venta: List[DetalleVentaRequest] = Field(..., description="Productos a vender")

# ==================== RESPONSE SCHEMAS ====================

class DetalleVentaResponse(TiendaBaseModel):
    id_detalle_venta: int
    codigo_producto: str
    cantidad: int
    precio_unitario: Decimal
    subtotal_detalle: Decimal

class VentaSinDetalleResponse(TiendaBaseModel):
    """Vista resumida: sin el campo listaDetalleVenta"""
    nro_venta: int
    fecha_venta: datetime
    total_venta: Decimal
    descuento: Decimal
    id_empleado: int
    id_cliente: Optional[int] = None

class VentaResponse(VentaSinDetalleResponse):
    """Vista completa con los items de la venta"""
    lista_detalle_venta: List[DetalleVentaResponse]

class ResumenVentaFechaResponse(TiendaBaseModel):
    fecha: date
    venta_total_bruto: Decimal = Field(..., description="Venta sin descuentos")
    descuento_total: Decimal = Field(..., description="Descuentos aplicados esa fecha")
    venta_total_neto: Decimal = Field(..., description="Venta con descuentos aplicados")
