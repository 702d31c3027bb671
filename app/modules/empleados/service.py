# app/modules/empleados/service.py
import logging
from typing import List
from sqlalchemy.orm import Session

from app.core.exceptions import ReferenciaNoEncontradaException, RegistroDuplicadoException
from app.shared.database.models import Empleado, Horario, DatosPersona
from .repository import EmpleadoRepository
from .schemas import (
    EmpleadoCreateRequest, EmpleadoResponse, EmpleadoDetalleResponse,
    HorarioCreateRequest, HorarioResponse
)

logger = logging.getLogger(__name__)

class EmpleadoService:
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = EmpleadoRepository(db)
    
    def crear_empleado(self, data: EmpleadoCreateRequest) -> EmpleadoResponse:
        if self.repository.get_by_ci(data.datos_persona.ci):
            raise RegistroDuplicadoException(
                f"Ya existe un empleado con el ci: {data.datos_persona.ci}"
            )
        
        empleado = self.repository.create(Empleado(
            datos_persona=DatosPersona(**data.datos_persona.model_dump()),
            cargo=data.cargo,
            fecha_contratacion=data.fecha_contratacion
        ))
        logger.info(f"Empleado {empleado.id_empleado} registrado: {empleado.nombre_completo}")
        return EmpleadoResponse.model_validate(empleado)
    
    def get_empleado(self, id_empleado: int) -> EmpleadoDetalleResponse:
        return EmpleadoDetalleResponse.model_validate(self._get_or_404(id_empleado))
    
    def listar_empleados(self) -> List[EmpleadoResponse]:
        return [EmpleadoResponse.model_validate(e) for e in self.repository.get_all()]
    
    def agregar_horario(self, id_empleado: int, data: HorarioCreateRequest) -> HorarioResponse:
        empleado = self._get_or_404(id_empleado)
        horario = self.repository.add_horario(empleado, Horario(
            dia=data.dia,
            hora_ingreso=data.hora_ingreso,
            hora_salida=data.hora_salida
        ))
        return HorarioResponse.model_validate(horario)
    
    def listar_horarios(self, id_empleado: int) -> List[HorarioResponse]:
        self._get_or_404(id_empleado)
        return [HorarioResponse.model_validate(h) for h in self.repository.get_horarios(id_empleado)]
    
    def _get_or_404(self, id_empleado: int) -> Empleado:
        empleado = self.repository.get_by_id(id_empleado)
        if not empleado:
            raise ReferenciaNoEncontradaException(
                f"Empleado no encontrado con el idEmpleado: {id_empleado}",
                id_empleado
            )
        return empleado
