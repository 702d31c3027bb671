# app/modules/ventas/router.py
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from typing import List
from datetime import date

from app.config.database import get_db
from .service import VentaService
from .schemas import (
    VentaCreateRequest, VentaResponse, VentaSinDetalleResponse, ResumenVentaFechaResponse
)

router = APIRouter(prefix="/venta", tags=["3. Venta"])

START_QUERY = Query(..., description="Fecha de inicio a filtrar en formato yyyy-MM-dd, ej. 2024-02-01")
END_QUERY = Query(..., description="Fecha de fin a filtrar en formato yyyy-MM-dd, ej. 2024-02-28")

# ==================== CONSULTAS ====================

@router.get("", response_model=List[VentaSinDetalleResponse])
async def list_ventas(db: Session = Depends(get_db)):
    """
    Lista todas las ventas con todos sus campos a excepción del campo "listaDetalleVenta"
    """
    service = VentaService(db)
    return service.listar_ventas()

@router.get("/entre-fechas", response_model=List[VentaSinDetalleResponse])
async def list_ventas_entre_fechas(
    start: date = START_QUERY,
    end: date = END_QUERY,
    db: Session = Depends(get_db)
):
    """
    Retorna las ventas realizadas entre 2 fechas (ambas incluidas), sin "listaDetalleVenta"
    """
    service = VentaService(db)
    return service.listar_ventas_entre_fechas(start, end)

@router.get("/resumen/entre-fechas", response_model=List[ResumenVentaFechaResponse])
async def get_resumen_entre_fechas(
    start: date = START_QUERY,
    end: date = END_QUERY,
    db: Session = Depends(get_db)
):
    """
    Resumen de ventas entre fechas. Un item por fecha con ventas:

    1. **fecha**: fecha de la venta.
    2. **ventaTotalBruto**: venta sin descuentos.
    3. **descuentoTotal**: descuentos aplicados esa fecha.
    4. **ventaTotalNeto**: venta con descuentos aplicados.
    """
    service = VentaService(db)
    return service.resumen_entre_fechas(start, end)

@router.get(
    "/{nro_venta}",
    response_model=VentaResponse,
    responses={404: {"description": "Venta no encontrada con el nroVenta: {nroVenta}"}}
)
async def get_venta(nro_venta: int, db: Session = Depends(get_db)):
    """
    Buscar una venta dado su {nroVenta}, con su lista de detalle
    """
    service = VentaService(db)
    return service.get_venta(nro_venta)

# ==================== REGISTRO DE VENTAS ====================

@router.post(
    "/empleado/{id_empleado}",
    response_model=VentaResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Error en la Request, asegúrese de completar todos los campos"},
        404: {"description": "Empleado no encontrado con el idEmpleado o Producto no encontrado con el codigoProducto"},
        409: {"description": "Stock insuficiente para alguno de los productos"}
    }
)
async def create_venta(
    id_empleado: int,
    data: VentaCreateRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Registrar venta (crear nueva venta) para el empleado {idEmpleado}

    El campo "listaDetalleVenta" establece los productos a vender:

    1. El campo "cantidad" reduce el stock del producto asociado.
    2. El campo "subtotalDetalle" del response es el "precioVenta" del producto multiplicado por la cantidad.
    3. El campo "totalVenta" del response es la sumatoria de "subtotalDetalle".
    """
    service = VentaService(db)
    venta = service.crear_venta(id_empleado, data)
    response.headers["Location"] = request.app.url_path_for("get_venta", nro_venta=venta.nro_venta)
    return venta
