"""
Fixtures compartidos: base SQLite en memoria y TestClient con get_db sobrescrito
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.config.database import Base, get_db
from app.shared.database.models import Empleado, Producto, DatosPersona


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ===== BASE DE DATOS =====

@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ===== DATOS =====

@pytest.fixture
def empleado(db_session):
    """Empleado con idEmpleado = 1"""
    empleado = Empleado(
        id_empleado=1,
        datos_persona=DatosPersona(
            ci="4567123",
            nombres="Ana María",
            apellidos="Quispe Mamani",
            direccion="Av. Busch 1234",
            celular="71234567",
            prefijo_celular="+591"
        ),
        cargo="Cajera"
    )
    db_session.add(empleado)
    db_session.commit()
    return empleado


@pytest.fixture
def productos(db_session):
    """P1 a 20.00 (stock 10), P2 a 35.50 (stock 5), P3 a 25.00 (stock 10)"""
    items = [
        Producto(codigo_producto="P1", codigo_barra="7750001000011", nombre="Leche entera 1L",
                 precio_venta=Decimal("20.00"), cantidad_stock=10),
        Producto(codigo_producto="P2", codigo_barra="7750001000028", nombre="Café molido 250g",
                 precio_venta=Decimal("35.50"), cantidad_stock=5),
        Producto(codigo_producto="P3", nombre="Pan integral",
                 precio_venta=Decimal("25.00"), cantidad_stock=10),
    ]
    db_session.add_all(items)
    db_session.commit()
    return {p.codigo_producto: p for p in items}


@pytest.fixture
def sample_persona():
    return {
        "ci": "8899001",
        "nombres": "Luis",
        "apellidos": "Choque",
        "direccion": "Calle Sucre 45",
        "celular": "76543210",
        "prefijoCelular": "+591"
    }
