from pydantic import AliasChoices, Field, field_validator, ValidationInfo
from typing import List, Optional
from datetime import date, datetime

from app.shared.schemas import TiendaBaseModel, PersonaSchema, AuditoriaResponse

# ==================== REQUEST SCHEMAS ====================

class EmpleadoCreateRequest(TiendaBaseModel):
    datos_persona: PersonaSchema
    cargo: Optional[str] = Field(None, max_length=55, description="Cargo del empleado")
    fecha_contratacion: Optional[date] = None

class HorarioCreateRequest(TiendaBaseModel):
    dia: str = Field(..., min_length=1, max_length=155, description="Día de la semana")
    hora_ingreso: datetime
    hora_salida: datetime
    
    @field_validator('hora_salida')
    @classmethod
    def validate_hora_salida(cls, v: datetime, info: ValidationInfo):
        hora_ingreso = info.data.get('hora_ingreso')
        if hora_ingreso is None:
            return v
        if (v.tzinfo is None) != (hora_ingreso.tzinfo is None):
            raise ValueError('La hora de ingreso y la de salida deben tener ambas zona horaria o ninguna')
        if v <= hora_ingreso:
            raise ValueError('La hora de salida debe ser posterior a la hora de ingreso')
        return v

# ==================== RESPONSE SCHEMAS ====================

class HorarioResponse(TiendaBaseModel):
    id_horario: int
    id_empleado: int = Field(
        ...,
        validation_alias=AliasChoices("fk_id_empleado", "idEmpleado"),
        serialization_alias="idEmpleado"
    )
    dia: str
    hora_ingreso: datetime
    hora_salida: datetime
    auditoria: Optional[AuditoriaResponse] = None

class EmpleadoResponse(TiendaBaseModel):
    id_empleado: int
    datos_persona: PersonaSchema
    cargo: Optional[str]
    fecha_contratacion: Optional[date]
    auditoria: Optional[AuditoriaResponse] = None

class EmpleadoDetalleResponse(EmpleadoResponse):
    horarios: List[HorarioResponse] = []
