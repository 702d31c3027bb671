# app/modules/productos/service.py
import logging
from typing import List
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ReferenciaNoEncontradaException, RegistroDuplicadoException, SolicitudInvalidaException
)
from app.shared.database.models import Producto
from app.shared.schemas import MAX_ENTERO
from .repository import ProductoRepository
from .schemas import ProductoCreateRequest, ProductoResponse

logger = logging.getLogger(__name__)

class ProductoService:
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductoRepository(db)
    
    def crear_producto(self, data: ProductoCreateRequest) -> ProductoResponse:
        if self.repository.get_by_codigo(data.codigo_producto):
            raise RegistroDuplicadoException(
                f"Ya existe un producto con el codigoProducto: {data.codigo_producto}"
            )
        if data.codigo_barra and self.repository.get_by_codigo_barra(data.codigo_barra):
            raise RegistroDuplicadoException(
                f"Ya existe un producto con el codigoBarra: {data.codigo_barra}"
            )
        
        producto = self.repository.create(Producto(
            codigo_producto=data.codigo_producto,
            codigo_barra=data.codigo_barra,
            nombre=data.nombre,
            descripcion=data.descripcion,
            precio_venta=data.precio_venta,
            cantidad_stock=data.cantidad_stock
        ))
        logger.info(f"Producto {producto.codigo_producto} registrado con stock {producto.cantidad_stock}")
        return ProductoResponse.model_validate(producto)
    
    def get_producto(self, codigo_producto: str) -> ProductoResponse:
        return ProductoResponse.model_validate(self._get_or_404(codigo_producto))
    
    def listar_productos(self) -> List[ProductoResponse]:
        return [ProductoResponse.model_validate(p) for p in self.repository.get_all()]
    
    def ingresar_stock(self, codigo_producto: str, cantidad: int) -> ProductoResponse:
        self._get_or_404(codigo_producto)
        if not self.repository.increase_stock(codigo_producto, cantidad):
            logger.warning(f"Ingreso de stock rechazado: {codigo_producto} + {cantidad} excede el máximo")
            raise SolicitudInvalidaException(
                f"El stock del producto {codigo_producto} no puede superar {MAX_ENTERO} unidades"
            )
        logger.info(f"Ingreso de {cantidad} unidades al producto {codigo_producto}")
        return ProductoResponse.model_validate(self._get_or_404(codigo_producto))
    
    def _get_or_404(self, codigo_producto: str) -> Producto:
        producto = self.repository.get_by_codigo(codigo_producto)
        if not producto:
            raise ReferenciaNoEncontradaException(
                f"Producto no encontrado con el codigoProducto: {codigo_producto}",
                codigo_producto
            )
        return producto
