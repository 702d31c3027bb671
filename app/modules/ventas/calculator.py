"""
Cálculo de subtotales, totales y resumen diario de ventas
"""

from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List

from app.shared.database.models import Venta
from .schemas import ResumenVentaFechaResponse

CENTAVOS = Decimal("0.01")
CERO = Decimal("0.00")


def redondear(monto) -> Decimal:
    return Decimal(str(monto)).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


def calcular_subtotal(precio_unitario, cantidad: int) -> Decimal:
    """subtotalDetalle = precio de venta del producto × cantidad"""
    return redondear(Decimal(str(precio_unitario)) * cantidad)


def calcular_total(subtotales: Iterable[Decimal]) -> Decimal:
    """totalVenta = suma de los subtotales; 0.00 si no hay items"""
    return redondear(sum(subtotales, CERO))


def total_bruto(venta: Venta) -> Decimal:
    return calcular_total(
        calcular_subtotal(d.precio_unitario, d.cantidad) for d in venta.lista_detalle_venta
    )


def resumir_por_fecha(ventas: Iterable[Venta]) -> List[ResumenVentaFechaResponse]:
    """
    Agrupar ventas por día.

    Solo aparecen las fechas con ventas, ordenadas de forma ascendente.
    Neto = bruto - descuento.
    """
    brutos: Dict = defaultdict(lambda: CERO)
    descuentos: Dict = defaultdict(lambda: CERO)

    for venta in ventas:
        fecha = venta.fecha_venta.date()
        brutos[fecha] += total_bruto(venta)
        descuentos[fecha] += redondear(venta.descuento or 0)

    return [
        ResumenVentaFechaResponse(
            fecha=fecha,
            venta_total_bruto=redondear(brutos[fecha]),
            descuento_total=redondear(descuentos[fecha]),
            venta_total_neto=redondear(brutos[fecha] - descuentos[fecha])
        )
        for fecha in sorted(brutos)
    ]
