# app/modules/clientes/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from .service import ClienteService
from .schemas import ClienteCreateRequest, ClienteResponse

router = APIRouter(prefix="/cliente", tags=["4. Cliente"])

@router.post("", response_model=ClienteResponse, status_code=status.HTTP_201_CREATED)
async def create_cliente(data: ClienteCreateRequest, db: Session = Depends(get_db)):
    """
    Registrar un cliente. También se registran automáticamente al vender
    si la venta incluye el bloque **cliente**.
    """
    service = ClienteService(db)
    return service.crear_cliente(data)

@router.get("", response_model=List[ClienteResponse])
async def list_clientes(db: Session = Depends(get_db)):
    service = ClienteService(db)
    return service.listar_clientes()

@router.get(
    "/{id_cliente}",
    response_model=ClienteResponse,
    responses={404: {"description": "Cliente no encontrado con el idCliente: {idCliente}"}}
)
async def get_cliente(id_cliente: int, db: Session = Depends(get_db)):
    service = ClienteService(db)
    return service.get_cliente(id_cliente)
