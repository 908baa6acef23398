# =============================================================================
# tests/test_scenarios.py - End-to-End Flows
# =============================================================================
# Full request sequences through the API, checking state between steps.
# =============================================================================


class TestTodoLifecycle:
    """A todo from creation to deletion."""

    def test_create_complete_delete(self, client):
        """Create user, create todo, mark done, delete, list empty."""
        # Arrange: Create the user
        response = client.post("/users", json={"name": "Ana", "username": "ana"})
        assert response.status_code == 201

        headers = {"username": "ana"}

        # Act: Create a todo
        response = client.post(
            "/todos",
            json={"title": "buy milk", "deadline": "2025-01-01"},
            headers=headers,
        )
        assert response.status_code == 201
        todo = response.json()
        assert todo["done"] is False

        # Act: Mark it done
        response = client.patch(f"/todos/{todo['id']}/done", headers=headers)
        assert response.status_code == 200
        assert response.json()["done"] is True

        # Act: Delete it
        response = client.delete(f"/todos/{todo['id']}", headers=headers)
        assert response.status_code == 204

        # Assert: Nothing left
        response = client.get("/todos", headers=headers)
        assert response.status_code == 200
        assert response.json() == []


class TestProUpgrade:
    """Hitting the free limit, then upgrading."""

    def test_upgrade_lifts_limit(self, client, create_user, create_todo):
        user = create_user()
        headers = {"username": "ana"}
        body = {"title": "one more", "deadline": "2025-01-01"}

        for i in range(10):
            create_todo(title=f"todo {i}")

        assert client.post("/todos", json=body, headers=headers).status_code == 403

        response = client.patch(f"/users/{user['id']}/pro")
        assert response.status_code == 200
        assert response.json()["pro"] is True

        assert client.post("/todos", json=body, headers=headers).status_code == 201

        response = client.get(f"/users/{user['id']}")
        assert len(response.json()["todos"]) == 11


class TestIsolation:
    """Two users working side by side."""

    def test_users_do_not_interfere(self, client, create_user, create_todo):
        create_user()
        create_user(name="Bob", username="bob")

        ana_todo = create_todo(username="ana", title="ana's")
        bob_todo = create_todo(username="bob", title="bob's")

        # Bob can't touch Ana's todo
        response = client.patch(f"/todos/{ana_todo['id']}/done", headers={"username": "bob"})
        assert response.status_code == 404

        # Ana deletes her own; Bob's is untouched
        response = client.delete(f"/todos/{ana_todo['id']}", headers={"username": "ana"})
        assert response.status_code == 204

        bob_todos = client.get("/todos", headers={"username": "bob"}).json()
        assert [t["id"] for t in bob_todos] == [bob_todo["id"]]
        assert bob_todos[0]["done"] is False
