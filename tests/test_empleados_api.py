import pytest


@pytest.fixture
def nuevo_empleado(sample_persona):
    return {"datosPersona": sample_persona, "cargo": "Vendedor", "fechaContratacion": "2023-06-01"}


class TestEmpleados:

    def test_crear_y_buscar(self, client, nuevo_empleado):
        creado = client.post("/api/empleado", json=nuevo_empleado)

        assert creado.status_code == 201
        id_empleado = creado.json()["idEmpleado"]
        body = client.get(f"/api/empleado/{id_empleado}").json()
        assert body["datosPersona"]["nombres"] == "Luis"
        assert body["datosPersona"]["prefijoCelular"] == "+591"
        assert body["fechaContratacion"] == "2023-06-01"
        assert body["horarios"] == []

    def test_ci_duplicado(self, client, nuevo_empleado):
        client.post("/api/empleado", json=nuevo_empleado)

        resp = client.post("/api/empleado", json=nuevo_empleado)

        assert resp.status_code == 409

    def test_faltan_datos_de_persona(self, client, nuevo_empleado):
        del nuevo_empleado["datosPersona"]["celular"]

        resp = client.post("/api/empleado", json=nuevo_empleado)

        assert resp.status_code == 422

    def test_empleado_inexistente(self, client):
        resp = client.get("/api/empleado/42")

        assert resp.status_code == 404
        assert resp.json()["detail"] == "Empleado no encontrado con el idEmpleado: 42"

    def test_listar(self, client, empleado):
        empleados = client.get("/api/empleado").json()

        assert [e["idEmpleado"] for e in empleados] == [1]


class TestHorarios:

    def test_agregar_y_listar(self, client, empleado):
        resp = client.post("/api/empleado/1/horario", json={
            "dia": "Lunes",
            "horaIngreso": "2024-02-05T08:00:00",
            "horaSalida": "2024-02-05T16:00:00"
        })

        assert resp.status_code == 201
        assert resp.json()["idEmpleado"] == 1
        horarios = client.get("/api/empleado/1/horario").json()
        assert [h["dia"] for h in horarios] == ["Lunes"]
        assert client.get("/api/empleado/1").json()["horarios"][0]["dia"] == "Lunes"

    def test_salida_antes_de_ingreso(self, client, empleado):
        resp = client.post("/api/empleado/1/horario", json={
            "dia": "Martes",
            "horaIngreso": "2024-02-06T16:00:00",
            "horaSalida": "2024-02-06T08:00:00"
        })

        assert resp.status_code == 422

    def test_horas_con_y_sin_zona_horaria(self, client, empleado):
        resp = client.post("/api/empleado/1/horario", json={
            "dia": "Lunes",
            "horaIngreso": "2024-02-05T08:00:00Z",
            "horaSalida": "2024-02-05T16:00:00"
        })

        assert resp.status_code == 422
        assert client.get("/api/empleado/1/horario").json() == []

    def test_horario_de_empleado_inexistente(self, client):
        resp = client.get("/api/empleado/5/horario")

        assert resp.status_code == 404
