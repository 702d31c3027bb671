# app/modules/empleados/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from .service import EmpleadoService
from .schemas import (
    EmpleadoCreateRequest, EmpleadoResponse, EmpleadoDetalleResponse,
    HorarioCreateRequest, HorarioResponse
)

router = APIRouter(prefix="/empleado", tags=["1. Empleado"])

NOT_FOUND = {404: {"description": "Empleado no encontrado con el idEmpleado: {idEmpleado}"}}

# ==================== EMPLEADOS ====================

@router.post("", response_model=EmpleadoResponse, status_code=status.HTTP_201_CREATED)
async def create_empleado(data: EmpleadoCreateRequest, db: Session = Depends(get_db)):
    """
    Registrar un empleado. El **ci** debe ser único.
    """
    service = EmpleadoService(db)
    return service.crear_empleado(data)

@router.get("", response_model=List[EmpleadoResponse])
async def list_empleados(db: Session = Depends(get_db)):
    """Lista todos los empleados"""
    service = EmpleadoService(db)
    return service.listar_empleados()

@router.get("/{id_empleado}", response_model=EmpleadoDetalleResponse, responses=NOT_FOUND)
async def get_empleado(id_empleado: int, db: Session = Depends(get_db)):
    """Buscar un empleado con sus horarios"""
    service = EmpleadoService(db)
    return service.get_empleado(id_empleado)

# ==================== HORARIOS ====================

@router.post(
    "/{id_empleado}/horario",
    response_model=HorarioResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND
)
async def create_horario(
    id_empleado: int,
    data: HorarioCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Asignar un horario al empleado. **horaSalida** debe ser posterior a **horaIngreso**.
    """
    service = EmpleadoService(db)
    return service.agregar_horario(id_empleado, data)

@router.get("/{id_empleado}/horario", response_model=List[HorarioResponse], responses=NOT_FOUND)
async def list_horarios(id_empleado: int, db: Session = Depends(get_db)):
    """Lista los horarios del empleado"""
    service = EmpleadoService(db)
    return service.listar_horarios(id_empleado)
