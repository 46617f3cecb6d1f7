"""
Tests for the clients API.

Tests cover:
- Registration with trimming, empty names and case-insensitive duplicates
- Active vs all listings
- Update and soft delete
"""


class TestCreateClient:
    def test_create_and_list(self, client):
        """A new client shows up in the active listing."""
        response = client.post("/api/clients", json={"name": "Acme"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Acme"}

        listing = client.get("/api/clients")
        assert listing.status_code == 200
        assert listing.json() == [{"id": 1, "name": "Acme"}]

    def test_name_is_trimmed(self, client):
        response = client.post("/api/clients", json={"name": "  Acme  "})
        assert response.json()["name"] == "Acme"

    def test_empty_name_rejected(self, client):
        for body in ({"name": ""}, {"name": "   "}, {}):
            response = client.post("/api/clients", json=body)
            assert response.status_code == 400
            assert response.json() == {"error": "Client name required"}

    def test_duplicate_rejected_case_insensitively(self, client):
        client.post("/api/clients", json={"name": "Acme"})
        response = client.post("/api/clients", json={"name": "ACME"})
        assert response.status_code == 409
        assert response.json() == {"error": "Client already exists"}

    def test_duplicate_of_inactive_client_rejected(self, client):
        client.post("/api/clients", json={"name": "Acme"})
        client.delete("/api/clients/1")
        response = client.post("/api/clients", json={"name": "acme"})
        assert response.status_code == 409

    def test_ids_increase(self, client):
        ids = [client.post("/api/clients", json={"name": n}).json()["id"] for n in ("A", "B", "C")]
        assert ids == [1, 2, 3]

    def test_wrong_type_is_bad_request(self, client):
        response = client.post("/api/clients", json={"name": 42})
        assert response.status_code == 400
        assert "error" in response.json()

    def test_malformed_json_is_bad_request(self, client):
        response = client.post(
            "/api/clients",
            content="{name: nope",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400


class TestListClients:
    def test_active_listing_sorted_by_name(self, client):
        for name in ("zeta", "Alpha", "beta"):
            client.post("/api/clients", json={"name": name})
        names = [c["name"] for c in client.get("/api/clients").json()]
        assert names == ["Alpha", "beta", "zeta"]

    def test_all_listing_has_full_records(self, client):
        client.post("/api/clients", json={"name": "Acme"})
        records = client.get("/api/clients/all").json()
        assert len(records) == 1
        assert records[0]["id"] == 1
        assert records[0]["active"] is True
        assert "created_at" in records[0]


class TestUpdateClient:
    def test_rename(self, client):
        client.post("/api/clients", json={"name": "Acme"})
        response = client.put("/api/clients/1", json={"name": "Acme Ltd"})
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/clients").json() == [{"id": 1, "name": "Acme Ltd"}]

    def test_reactivate(self, client):
        client.post("/api/clients", json={"name": "Acme"})
        client.delete("/api/clients/1")
        client.put("/api/clients/1", json={"active": True})
        assert client.get("/api/clients").json() == [{"id": 1, "name": "Acme"}]

    def test_missing_fields_untouched(self, client):
        client.post("/api/clients", json={"name": "Acme"})
        client.put("/api/clients/1", json={})
        record = client.get("/api/clients/all").json()[0]
        assert record["name"] == "Acme"
        assert record["active"] is True

    def test_no_body(self, client):
        client.post("/api/clients", json={"name": "Acme"})
        response = client.put("/api/clients/1")
        assert response.status_code == 200
        assert response.json() == {"success": True}
        record = client.get("/api/clients/all").json()[0]
        assert record["name"] == "Acme"
        assert record["active"] is True

    def test_no_body_unknown_id(self, client):
        assert client.put("/api/clients/42").status_code == 404

    def test_unknown_id(self, client):
        response = client.put("/api/clients/42", json={"name": "Ghost"})
        assert response.status_code == 404
        assert response.json() == {"error": "Client not found"}


class TestDeleteClient:
    def test_soft_delete(self, client):
        """Removed from the active listing, kept in the admin listing."""
        client.post("/api/clients", json={"name": "Acme"})
        response = client.delete("/api/clients/1")
        assert response.status_code == 200
        assert response.json() == {"success": True}

        assert client.get("/api/clients").json() == []
        records = client.get("/api/clients/all").json()
        assert records[0]["name"] == "Acme"
        assert records[0]["active"] is False

    def test_unknown_id_is_noop(self, client):
        response = client.delete("/api/clients/42")
        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_id_not_reused_after_delete(self, client):
        client.post("/api/clients", json={"name": "A"})
        client.delete("/api/clients/1")
        assert client.post("/api/clients", json={"name": "B"}).json()["id"] == 2
