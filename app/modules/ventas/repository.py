# app/modules/ventas/repository.py
from datetime import date, datetime, time, timedelta
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import update

from app.shared.database.models import Venta, Empleado, Producto, Cliente

class VentaRepository:
    """
    Repositorio para las operaciones de datos relacionadas con ventas
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    # ==================== REFERENCIAS ====================
    
    def get_empleado_by_id(self, id_empleado: int) -> Optional[Empleado]:
        return self.db.get(Empleado, id_empleado)
    
    def get_producto_by_codigo(self, codigo_producto: str) -> Optional[Producto]:
        return self.db.get(Producto, codigo_producto)
    
    def get_cliente_by_ci(self, ci: str) -> Optional[Cliente]:
        return self.db.query(Cliente).filter(Cliente.ci == ci).first()
    
    # ==================== STOCK ====================
    
    def decrease_product_stock(self, codigo_producto: str, cantidad: int) -> bool:
        """
        Descontar stock solo si alcanza; retorna False si no se actualizó ninguna fila.
        No hace commit: forma parte de la transacción de la venta.
        """
        result = self.db.execute(
            update(Producto)
            .where(
                Producto.codigo_producto == codigo_producto,
                Producto.cantidad_stock >= cantidad
            )
            .values(
                cantidad_stock=Producto.cantidad_stock - cantidad,
                revision=Producto.revision + 1
            )
        )
        return result.rowcount == 1
    
    # ==================== VENTAS ====================
    
    def create_venta(self, venta: Venta) -> Venta:
        """
        Persistir cabecera e items (en cascada) y confirmar la transacción
        """
        self.db.add(venta)
        self.db.commit()
        self.db.refresh(venta)
        return venta
    
    def get_venta_by_nro(self, nro_venta: int) -> Optional[Venta]:
        return self.db.query(Venta).options(
            selectinload(Venta.lista_detalle_venta)
        ).filter(Venta.nro_venta == nro_venta).first()
    
    def get_all_ventas(self) -> List[Venta]:
        return self.db.query(Venta).options(
            selectinload(Venta.lista_detalle_venta)
        ).order_by(Venta.fecha_venta, Venta.nro_venta).all()
    
    def get_ventas_between(self, start: date, end: date) -> List[Venta]:
        """
        Ventas con fecha en [start, end], incluyendo todo el día final
        """
        desde = datetime.combine(start, time.min)
        hasta = datetime.combine(end + timedelta(days=1), time.min)
        
        return self.db.query(Venta).options(
            selectinload(Venta.lista_detalle_venta)
        ).filter(
            Venta.fecha_venta >= desde,
            Venta.fecha_venta < hasta
        ).order_by(Venta.fecha_venta, Venta.nro_venta).all()
