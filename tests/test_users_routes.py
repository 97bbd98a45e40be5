"""
Tests for the users resource controller
"""


class TestUsersController:

    def test_index(self, client):
        assert client.get("/users").json() == {"controller": "UserController.index"}

    def test_store(self, client):
        response = client.post("/users", json={"name": "ada"})

        assert response.status_code == 200
        assert response.json() == {"name": "ada"}

    def test_store_requires_name(self, client):
        assert client.post("/users", json={}).status_code == 422

    def test_show(self, client):
        assert client.get("/users/grace").json() == {"name": "grace"}

    def test_update_changes_name(self, client):
        response = client.patch("/users/grace", json={"name": "hopper"})

        assert response.json() == {"name": "hopper"}

    def test_update_without_fields_keeps_name(self, client):
        assert client.patch("/users/grace", json={}).json() == {"name": "grace"}

    def test_replace(self, client):
        assert client.put("/users/grace", json={"name": "ada"}).json() == {"name": "ada"}

    def test_replace_with_empty_name(self, client):
        response = client.put("/users/grace", json={"name": ""})

        assert response.status_code == 400
        assert response.json()["message"] == "User name must not be empty"

    def test_destroy(self, client):
        assert client.delete("/users/grace").json() == {"name": "grace"}
