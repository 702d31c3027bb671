from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Rango de las columnas Integer
MAX_ENTERO = 2147483647

# ==================== CLASE BASE (Pydantic v2) ====================

class TiendaBaseModel(BaseModel):
    """
    Clase base para todos los esquemas de la API.

    Los campos se exponen en camelCase (``nroVenta``, ``codigoProducto``)
    y se aceptan tanto en camelCase como en snake_case.
    """
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_encoders={
            Decimal: float,
            datetime: lambda v: v.isoformat(),
        }
    )

# ==================== VALORES EMBEBIDOS ====================

class PersonaSchema(TiendaBaseModel):
    ci: str = Field(..., min_length=1, max_length=30, description="Cédula de identidad")
    nombres: str = Field(..., min_length=1, max_length=40)
    apellidos: str = Field(..., min_length=1, max_length=55)
    direccion: Optional[str] = Field(None, max_length=55)
    celular: str = Field(..., min_length=1, max_length=14)
    prefijo_celular: str = Field(..., min_length=1, max_length=6, description="Prefijo de país, ej. +591")

class AuditoriaResponse(TiendaBaseModel):
    fecha_creacion: Optional[datetime] = None
    fecha_modificacion: Optional[datetime] = None
    revision: Optional[int] = None
