class TestClientes:

    def test_crear_y_buscar(self, client, sample_persona):
        resp = client.post("/api/cliente", json={"datosPersona": sample_persona})

        assert resp.status_code == 201
        id_cliente = resp.json()["idCliente"]
        body = client.get(f"/api/cliente/{id_cliente}").json()
        assert body["datosPersona"]["apellidos"] == "Choque"
        assert body["auditoria"]["revision"] == 1

    def test_ci_duplicado(self, client, sample_persona):
        client.post("/api/cliente", json={"datosPersona": sample_persona})

        resp = client.post("/api/cliente", json={"datosPersona": sample_persona})

        assert resp.status_code == 409

    def test_cliente_inexistente(self, client):
        resp = client.get("/api/cliente/3")

        assert resp.status_code == 404

    def test_listar_vacio(self, client):
        assert client.get("/api/cliente").json() == []


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
