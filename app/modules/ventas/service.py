# app/modules/ventas/service.py
import logging
from datetime import date, datetime
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ReferenciaNoEncontradaException, SolicitudInvalidaException, StockInsuficienteException
)
from app.shared.database.models import Venta, DetalleVenta, Cliente, DatosPersona, Producto
from app.shared.schemas import PersonaSchema
from .repository import VentaRepository
from .calculator import calcular_subtotal, calcular_total, resumir_por_fecha
from .projection import venta_a_vista_completa, venta_a_vista_resumida
from .schemas import (
    VentaCreateRequest, VentaResponse, VentaSinDetalleResponse, ResumenVentaFechaResponse
)

logger = logging.getLogger(__name__)

class VentaService:
    """
    Servicio de ventas: registro, consultas y resumen por fechas
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = VentaRepository(db)

    # ==================== CONSULTAS ====================

    def get_venta(self, nro_venta: int) -> VentaResponse:
        venta = self.repository.get_venta_by_nro(nro_venta)
        if not venta:
            raise ReferenciaNoEncontradaException(
                f"Venta no encontrada con el nroVenta: {nro_venta}", nro_venta
            )
        return venta_a_vista_completa(venta)

    def listar_ventas(self) -> List[VentaSinDetalleResponse]:
        return [venta_a_vista_resumida(v) for v in self.repository.get_all_ventas()]

    def listar_ventas_entre_fechas(self, start: date, end: date) -> List[VentaSinDetalleResponse]:
        self._validar_rango(start, end)
        return [venta_a_vista_resumida(v) for v in self.repository.get_ventas_between(start, end)]

    def resumen_entre_fechas(self, start: date, end: date) -> List[ResumenVentaFechaResponse]:
        self._validar_rango(start, end)
        return resumir_por_fecha(self.repository.get_ventas_between(start, end))

    # ==================== REGISTRO DE VENTA ====================

    def crear_venta(self, id_empleado: int, data: VentaCreateRequest) -> VentaResponse:
        """
        Registrar una venta completa.

        1. El empleado debe existir (404).
        2. Todos los items deben traer codigoProducto (400), antes de buscar productos.
        3. Todos los productos deben existir (404 con el primer código faltante).
        4. Cabecera, items y descuento de stock se guardan en una sola transacción;
           si algún producto no tiene stock suficiente no se guarda nada (409).
        """
        # 1. Empleado
        empleado = self.repository.get_empleado_by_id(id_empleado)
        if not empleado:
            logger.warning(f"Venta rechazada: empleado {id_empleado} inexistente")
            raise ReferenciaNoEncontradaException(
                f"Empleado no encontrado con el idEmpleado: {id_empleado}", id_empleado
            )

        # 2. Campos obligatorios de los items
        if not data.lista_detalle_venta:
            raise SolicitudInvalidaException(
                "El campo \"listaDetalleVenta\" debe tener al menos un item"
            )
        for item in data.lista_detalle_venta:
            if item.codigo_producto is None:
                logger.warning("Venta rechazada: item sin codigoProducto")
                raise SolicitudInvalidaException(
                    "Cada item del campo \"listaDetalleVenta\" debe tener un valor para el campo \"codigoProducto\""
                )

        # 3. Productos
        productos: List[Producto] = []
        for item in data.lista_detalle_venta:
            producto = self.repository.get_producto_by_codigo(item.codigo_producto)
            if not producto:
                logger.warning(f"Venta rechazada: producto {item.codigo_producto} inexistente")
                raise ReferenciaNoEncontradaException(
                    f"Producto no encontrado con el codigoProducto: {item.codigo_producto}",
                    item.codigo_producto
                )
            productos.append(producto)

        # 4. Armar la venta con precios y totales
        detalles = [
            DetalleVenta(
                fk_codigo_producto=producto.codigo_producto,
                cantidad=item.cantidad,
                precio_unitario=producto.precio_venta,
                subtotal_detalle=calcular_subtotal(producto.precio_venta, item.cantidad)
            )
            for item, producto in zip(data.lista_detalle_venta, productos)
        ]
        total_venta = calcular_total(d.subtotal_detalle for d in detalles)

        if data.descuento > total_venta:
            raise SolicitudInvalidaException(
                f"El descuento ({data.descuento}) no puede ser mayor al total de la venta ({total_venta})"
            )

        venta = Venta(
            fecha_venta=data.fecha_venta or datetime.now(),
            total_venta=total_venta,
            descuento=data.descuento,
            fk_id_empleado=empleado.id_empleado,
            lista_detalle_venta=detalles
        )
        if data.cliente:
            venta.cliente = self._get_or_build_cliente(data.cliente)

        # 5. Transacción: stock + cabecera + items
        try:
            for detalle in detalles:
                if not self.repository.decrease_product_stock(detalle.fk_codigo_producto, detalle.cantidad):
                    raise StockInsuficienteException(detalle.fk_codigo_producto, detalle.cantidad)
            venta = self.repository.create_venta(venta)
        except StockInsuficienteException as e:
            self.db.rollback()
            logger.warning(f"Venta rechazada: {e.detail}")
            raise
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Error registrando venta del empleado {id_empleado}")
            raise

        logger.info(
            f"Venta {venta.nro_venta} registrada por empleado {id_empleado}: "
            f"{len(detalles)} items, total {total_venta}"
        )
        return venta_a_vista_completa(venta)

    # ==================== AUXILIARES ====================

    def _get_or_build_cliente(self, datos: PersonaSchema) -> Cliente:
        """
        Cliente existente por ci, o uno nuevo que se guarda junto con la venta
        """
        cliente: Optional[Cliente] = self.repository.get_cliente_by_ci(datos.ci)
        if cliente:
            return cliente
        return Cliente(datos_persona=DatosPersona(**datos.model_dump()))

    def _validar_rango(self, start: date, end: date):
        if start > end:
            raise SolicitudInvalidaException(
                f"La fecha de inicio ({start}) no puede ser posterior a la fecha de fin ({end})"
            )
