# app/modules/productos/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import update

from app.shared.database.models import Producto
from app.shared.schemas import MAX_ENTERO

class ProductoRepository:
    """
    Repositorio de productos
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_codigo(self, codigo_producto: str) -> Optional[Producto]:
        return self.db.get(Producto, codigo_producto)
    
    def get_by_codigo_barra(self, codigo_barra: str) -> Optional[Producto]:
        return self.db.query(Producto).filter(
            Producto.codigo_barra == codigo_barra
        ).first()
    
    def get_all(self) -> List[Producto]:
        return self.db.query(Producto).order_by(Producto.codigo_producto).all()
    
    def create(self, producto: Producto) -> Producto:
        self.db.add(producto)
        self.db.commit()
        self.db.refresh(producto)
        return producto
    
    def increase_stock(self, codigo_producto: str, cantidad: int) -> bool:
        """
        Ingreso de mercadería en un solo UPDATE atómico que también incrementa
        la revisión. Retorna False si el stock resultante no entra en la columna.
        """
        result = self.db.execute(
            update(Producto)
            .where(
                Producto.codigo_producto == codigo_producto,
                Producto.cantidad_stock <= MAX_ENTERO - cantidad
            )
            .values(
                cantidad_stock=Producto.cantidad_stock + cantidad,
                revision=Producto.revision + 1
            )
        )
        if result.rowcount != 1:
            self.db.rollback()
            return False
        self.db.commit()
        return True
