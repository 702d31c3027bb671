from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Numeric, CheckConstraint
from sqlalchemy.orm import relationship, composite
from sqlalchemy.sql import func
from app.config.database import Base

# ===== VALORES EMBEBIDOS =====

@dataclass
class Auditoria:
    """Registro de auditoría embebido en cada tabla"""
    fecha_creacion: Optional[datetime] = None
    fecha_modificacion: Optional[datetime] = None
    revision: Optional[int] = None

@dataclass
class DatosPersona:
    """Nombre y contacto de una persona (empleado o cliente)"""
    ci: str
    nombres: str
    apellidos: str
    direccion: Optional[str]
    celular: str
    prefijo_celular: str

def columnas_auditoria():
    """Columnas de auditoría; la revisión la incrementa el ORM en cada UPDATE"""
    return (
        Column("fecha_creacion", DateTime, server_default=func.current_timestamp(), nullable=False),
        Column("fecha_modificacion", DateTime, onupdate=func.current_timestamp()),
        Column("revision", Integer, nullable=False),
    )

def columnas_persona():
    return (
        Column("ci", String(30), nullable=False, unique=True),
        Column("nombres", String(40), nullable=False),
        Column("apellidos", String(55), nullable=False),
        Column("direccion", String(55)),
        Column("celular", String(14), nullable=False),
        Column("prefijo_celular", String(6), nullable=False),
    )

# ===== PERSONAS =====

class Empleado(Base):
    """Empleado que registra ventas"""
    __tablename__ = "empleado"

    id_empleado = Column(Integer, primary_key=True, index=True)
    ci, nombres, apellidos, direccion, celular, prefijo_celular = columnas_persona()
    cargo = Column(String(55))
    fecha_contratacion = Column(Date)
    fecha_creacion, fecha_modificacion, revision = columnas_auditoria()

    datos_persona = composite(DatosPersona, ci, nombres, apellidos, direccion, celular, prefijo_celular)
    auditoria = composite(Auditoria, fecha_creacion, fecha_modificacion, revision)

    # Relationships
    horarios = relationship(
        "Horario", back_populates="empleado",
        cascade="all, delete-orphan", order_by="Horario.id_horario"
    )
    ventas = relationship("Venta", back_populates="empleado")

    __mapper_args__ = {"version_id_col": revision}

    @property
    def nombre_completo(self):
        return f"{self.nombres} {self.apellidos}"

class Horario(Base):
    """Horario de trabajo de un empleado"""
    __tablename__ = "horario"

    id_horario = Column(Integer, primary_key=True, index=True)
    fk_id_empleado = Column(Integer, ForeignKey("empleado.id_empleado", name="horario_pertenece_a_empleado"), nullable=False)
    dia = Column(String(155), nullable=False)
    hora_ingreso = Column(DateTime, nullable=False)
    hora_salida = Column(DateTime, nullable=False)
    fecha_creacion, fecha_modificacion, revision = columnas_auditoria()

    auditoria = composite(Auditoria, fecha_creacion, fecha_modificacion, revision)

    # Relationships
    empleado = relationship("Empleado", back_populates="horarios")

    __mapper_args__ = {"version_id_col": revision}

class Cliente(Base):
    """Cliente de la tienda, se crea al vender si aún no existe"""
    __tablename__ = "cliente"

    id_cliente = Column(Integer, primary_key=True, index=True)
    ci, nombres, apellidos, direccion, celular, prefijo_celular = columnas_persona()
    fecha_creacion, fecha_modificacion, revision = columnas_auditoria()

    datos_persona = composite(DatosPersona, ci, nombres, apellidos, direccion, celular, prefijo_celular)
    auditoria = composite(Auditoria, fecha_creacion, fecha_modificacion, revision)

    # Relationships
    ventas = relationship("Venta", back_populates="cliente")

    __mapper_args__ = {"version_id_col": revision}

# ===== PRODUCTOS =====

class Producto(Base):
    """Producto vendible con precio y stock"""
    __tablename__ = "producto"

    codigo_producto = Column(String(30), primary_key=True)
    codigo_barra = Column(String(50), unique=True)
    nombre = Column(String(100), nullable=False)
    descripcion = Column(String(255))
    precio_venta = Column(Numeric(10, 2), nullable=False)
    cantidad_stock = Column(Integer, nullable=False, default=0)
    fecha_creacion, fecha_modificacion, revision = columnas_auditoria()

    auditoria = composite(Auditoria, fecha_creacion, fecha_modificacion, revision)

    __table_args__ = (
        CheckConstraint("cantidad_stock >= 0", name="producto_stock_no_negativo"),
    )

    __mapper_args__ = {"version_id_col": revision}

# ===== VENTAS =====

class Venta(Base):
    """Cabecera de venta"""
    __tablename__ = "venta"

    nro_venta = Column(Integer, primary_key=True, index=True, autoincrement=True)
    fecha_venta = Column(DateTime, nullable=False, default=datetime.now, index=True)
    total_venta = Column(Numeric(10, 2), nullable=False, default=0)
    descuento = Column(Numeric(10, 2), nullable=False, default=0)
    fk_id_empleado = Column(Integer, ForeignKey("empleado.id_empleado", name="venta_registrada_por_empleado"), nullable=False)
    fk_id_cliente = Column(Integer, ForeignKey("cliente.id_cliente", name="venta_pertenece_a_cliente"))
    fecha_creacion, fecha_modificacion, revision = columnas_auditoria()

    auditoria = composite(Auditoria, fecha_creacion, fecha_modificacion, revision)

    # Relationships
    empleado = relationship("Empleado", back_populates="ventas")
    cliente = relationship("Cliente", back_populates="ventas")
    lista_detalle_venta = relationship(
        "DetalleVenta", back_populates="venta",
        cascade="all, delete-orphan", order_by="DetalleVenta.id_detalle_venta"
    )

    __mapper_args__ = {"version_id_col": revision}

class DetalleVenta(Base):
    """Item de venta: producto, cantidad y precio congelado al vender"""
    __tablename__ = "detalle_venta"

    id_detalle_venta = Column(Integer, primary_key=True, index=True)
    fk_nro_venta = Column(Integer, ForeignKey("venta.nro_venta", name="detalle_pertenece_a_venta"), nullable=False, index=True)
    fk_codigo_producto = Column(String(30), ForeignKey("producto.codigo_producto", name="detalle_referencia_producto"), nullable=False)
    cantidad = Column(Integer, nullable=False)
    precio_unitario = Column(Numeric(10, 2), nullable=False)
    subtotal_detalle = Column(Numeric(10, 2), nullable=False)
    fecha_creacion, fecha_modificacion, revision = columnas_auditoria()

    auditoria = composite(Auditoria, fecha_creacion, fecha_modificacion, revision)

    __table_args__ = (
        CheckConstraint("cantidad > 0", name="detalle_cantidad_positiva"),
    )

    # Relationships
    venta = relationship("Venta", back_populates="lista_detalle_venta")
    producto = relationship("Producto")

    __mapper_args__ = {"version_id_col": revision}
