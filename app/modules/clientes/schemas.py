from typing import Optional

from app.shared.schemas import TiendaBaseModel, PersonaSchema, AuditoriaResponse

class ClienteCreateRequest(TiendaBaseModel):
    datos_persona: PersonaSchema

class ClienteResponse(TiendaBaseModel):
    id_cliente: int
    datos_persona: PersonaSchema
    auditoria: Optional[AuditoriaResponse] = None
