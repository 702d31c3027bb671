from datetime import datetime
from decimal import Decimal

from app.shared.database.models import Venta, DetalleVenta, Producto
from app.modules.ventas.projection import (
    detalle_a_vista, venta_a_vista_completa, venta_a_vista_resumida
)


def _venta():
    producto = Producto(codigo_producto="P1", codigo_barra="7750001000011",
                        nombre="Leche", precio_venta=Decimal("20.00"))
    detalle = DetalleVenta(
        id_detalle_venta=7,
        fk_codigo_producto="P1",
        producto=producto,
        cantidad=3,
        precio_unitario=Decimal("20.00"),
        subtotal_detalle=Decimal("60.00")
    )
    return Venta(
        nro_venta=15,
        fecha_venta=datetime(2024, 2, 5, 10, 30),
        total_venta=Decimal("60.00"),
        descuento=Decimal("0.00"),
        fk_id_empleado=1,
        lista_detalle_venta=[detalle]
    )


def test_detalle_usa_codigo_interno_del_producto():
    venta = _venta()

    vista = detalle_a_vista(venta.lista_detalle_venta[0])

    assert vista.codigo_producto == "P1"
    assert vista.subtotal_detalle == Decimal("60.00")


def test_detalle_no_expone_la_venta_padre():
    vista = detalle_a_vista(_venta().lista_detalle_venta[0])

    assert "venta" not in vista.model_dump()
    assert set(vista.model_dump(by_alias=True)) == {
        "idDetalleVenta", "codigoProducto", "cantidad", "precioUnitario", "subtotalDetalle"
    }


def test_proyectar_no_modifica_la_entidad():
    venta = _venta()

    venta_a_vista_completa(venta)

    assert venta.lista_detalle_venta[0].venta is venta


def test_vista_completa_incluye_detalle_y_total():
    vista = venta_a_vista_completa(_venta())

    data = vista.model_dump(by_alias=True)
    assert data["nroVenta"] == 15
    assert data["totalVenta"] == Decimal("60.00")
    assert len(data["listaDetalleVenta"]) == 1


def test_vista_resumida_no_tiene_lista_detalle():
    data = venta_a_vista_resumida(_venta()).model_dump(by_alias=True)

    assert "listaDetalleVenta" not in data
    assert data["idEmpleado"] == 1
    assert data["idCliente"] is None
