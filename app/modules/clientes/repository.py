# app/modules/clientes/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session

from app.shared.database.models import Cliente

class ClienteRepository:
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_id(self, id_cliente: int) -> Optional[Cliente]:
        return self.db.get(Cliente, id_cliente)
    
    def get_by_ci(self, ci: str) -> Optional[Cliente]:
        return self.db.query(Cliente).filter(Cliente.ci == ci).first()
    
    def get_all(self) -> List[Cliente]:
        return self.db.query(Cliente).order_by(Cliente.id_cliente).all()
    
    def create(self, cliente: Cliente) -> Cliente:
        self.db.add(cliente)
        self.db.commit()
        self.db.refresh(cliente)
        return cliente
