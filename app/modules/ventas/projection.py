"""
Conversión explícita de entidades Venta/DetalleVenta a las vistas de la API.

Ningún detalle expone su venta padre, y el código de producto sale siempre
de la clave foránea del detalle (código interno, nunca el código de barras).
"""

from typing import Any, Dict

from app.shared.database.models import Venta, DetalleVenta
from .calculator import calcular_subtotal, calcular_total
from .schemas import DetalleVentaResponse, VentaResponse, VentaSinDetalleResponse


def detalle_a_vista(detalle: DetalleVenta) -> DetalleVentaResponse:
    return DetalleVentaResponse(
        id_detalle_venta=detalle.id_detalle_venta,
        codigo_producto=detalle.fk_codigo_producto,
        cantidad=detalle.cantidad,
        precio_unitario=detalle.precio_unitario,
        subtotal_detalle=calcular_subtotal(detalle.precio_unitario, detalle.cantidad)
    )


def _cabecera(venta: Venta, detalles) -> Dict[str, Any]:
    return {
        "nro_venta": venta.nro_venta,
        "fecha_venta": venta.fecha_venta,
        "total_venta": calcular_total(d.subtotal_detalle for d in detalles),
        "descuento": venta.descuento,
        "id_empleado": venta.fk_id_empleado,
        "id_cliente": venta.fk_id_cliente,
    }


def venta_a_vista_completa(venta: Venta) -> VentaResponse:
    detalles = [detalle_a_vista(d) for d in venta.lista_detalle_venta]
    return VentaResponse(**_cabecera(venta, detalles), lista_detalle_venta=detalles)


def venta_a_vista_resumida(venta: Venta) -> VentaSinDetalleResponse:
    detalles = [detalle_a_vista(d) for d in venta.lista_detalle_venta]
    return VentaSinDetalleResponse(**_cabecera(venta, detalles))
