# app/modules/empleados/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from app.shared.database.models import Empleado, Horario

class EmpleadoRepository:
    """
    Repositorio de empleados y sus horarios
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_id(self, id_empleado: int) -> Optional[Empleado]:
        return self.db.query(Empleado).options(
            selectinload(Empleado.horarios)
        ).filter(Empleado.id_empleado == id_empleado).first()
    
    def get_by_ci(self, ci: str) -> Optional[Empleado]:
        return self.db.query(Empleado).filter(Empleado.ci == ci).first()
    
    def get_all(self) -> List[Empleado]:
        return self.db.query(Empleado).order_by(Empleado.id_empleado).all()
    
    def create(self, empleado: Empleado) -> Empleado:
        self.db.add(empleado)
        self.db.commit()
        self.db.refresh(empleado)
        return empleado
    
    def add_horario(self, empleado: Empleado, horario: Horario) -> Horario:
        horario.fk_id_empleado = empleado.id_empleado
        self.db.add(horario)
        self.db.commit()
        self.db.refresh(horario)
        return horario
    
    def get_horarios(self, id_empleado: int) -> List[Horario]:
        return self.db.query(Horario).filter(
            Horario.fk_id_empleado == id_empleado
        ).order_by(Horario.id_horario).all()
