# app/modules/productos/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from .service import ProductoService
from .schemas import ProductoCreateRequest, ProductoResponse, StockIngresoRequest

router = APIRouter(prefix="/producto", tags=["2. Producto"])

@router.post("", response_model=ProductoResponse, status_code=status.HTTP_201_CREATED)
async def create_producto(
    data: ProductoCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Registrar un producto con su precio de venta y stock inicial.

    - **codigoProducto** es el código interno y la clave usada en las ventas.
    - **codigoBarra** es opcional y único.
    """
    service = ProductoService(db)
    return service.crear_producto(data)

@router.get("", response_model=List[ProductoResponse])
async def list_productos(db: Session = Depends(get_db)):
    """Lista todos los productos"""
    service = ProductoService(db)
    return service.listar_productos()

@router.get(
    "/{codigo_producto}",
    response_model=ProductoResponse,
    responses={404: {"description": "Producto no encontrado con el codigoProducto: {codigoProducto}"}}
)
async def get_producto(codigo_producto: str, db: Session = Depends(get_db)):
    """Buscar un producto dado su {codigoProducto}"""
    service = ProductoService(db)
    return service.get_producto(codigo_producto)

@router.patch("/{codigo_producto}/stock", response_model=ProductoResponse)
async def ingresar_stock(
    codigo_producto: str,
    data: StockIngresoRequest,
    db: Session = Depends(get_db)
):
    """
    Ingreso de mercadería: suma **cantidad** al stock del producto
    """
    service = ProductoService(db)
    return service.ingresar_stock(codigo_producto, data.cantidad)
