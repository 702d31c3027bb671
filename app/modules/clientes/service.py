# app/modules/clientes/service.py
import logging
from typing import List
from sqlalchemy.orm import Session

from app.core.exceptions import ReferenciaNoEncontradaException, RegistroDuplicadoException
from app.shared.database.models import Cliente, DatosPersona
from .repository import ClienteRepository
from .schemas import ClienteCreateRequest, ClienteResponse

logger = logging.getLogger(__name__)

class ClienteService:
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = ClienteRepository(db)
    
    def crear_cliente(self, data: ClienteCreateRequest) -> ClienteResponse:
        if self.repository.get_by_ci(data.datos_persona.ci):
            raise RegistroDuplicadoException(
                f"Ya existe un cliente con el ci: {data.datos_persona.ci}"
            )
        cliente = self.repository.create(Cliente(
            datos_persona=DatosPersona(**data.datos_persona.model_dump())
        ))
        logger.info(f"Cliente {cliente.id_cliente} registrado")
        return ClienteResponse.model_validate(cliente)
    
    def get_cliente(self, id_cliente: int) -> ClienteResponse:
        cliente = self.repository.get_by_id(id_cliente)
        if not cliente:
            raise ReferenciaNoEncontradaException(
                f"Cliente no encontrado con el idCliente: {id_cliente}",
                id_cliente
            )
        return ClienteResponse.model_validate(cliente)
    
    def listar_clientes(self) -> List[ClienteResponse]:
        return [ClienteResponse.model_validate(c) for c in self.repository.get_all()]
