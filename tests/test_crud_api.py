from datetime import datetime, timedelta, timezone


def test_current_user_hides_credentials(client):
    response = client.get("/api/user")
    user = response.json()

    assert response.status_code == 200
    assert user["username"] == "demo"
    assert user["fullName"] == "Sarah Johnson"
    assert user["planType"] == "Premium"
    assert "hashedPassword" not in user


def test_current_user_missing_returns_404(client, db_session, demo_user):
    db_session.delete(demo_user)
    db_session.commit()

    response = client.get("/api/user")
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


class TestClients:
    def test_create_list_get(self, client):
        response = client.post("/api/clients", json={"name": "Acme", "contactEmail": "ops@acme.test"})
        created = response.json()

        assert response.status_code == 201
        assert created["status"] == "active"
        assert created["contactEmail"] == "ops@acme.test"
        assert client.get(f"/api/clients/{created['id']}").json()["name"] == "Acme"
        assert [c["name"] for c in client.get("/api/clients").json()] == ["Acme"]

    def test_name_is_required(self, client):
        assert client.post("/api/clients", json={"industry": "Retail"}).status_code == 422

    def test_partial_update(self, client):
        created = client.post("/api/clients", json={"name": "Acme", "industry": "Retail"}).json()

        updated = client.put(f"/api/clients/{created['id']}", json={"status": "inactive"}).json()

        assert updated["status"] == "inactive"
        assert updated["industry"] == "Retail"

    def test_delete_and_missing(self, client):
        created = client.post("/api/clients", json={"name": "Acme"}).json()

        assert client.delete(f"/api/clients/{created['id']}").json() == {"success": True}
        response = client.get(f"/api/clients/{created['id']}")
        assert response.status_code == 404
        assert response.json()["detail"] == "Client not found"

    def test_creation_is_logged(self, client):
        client.post("/api/clients", json={"name": "Acme"})
        activity = client.get("/api/activities").json()[0]

        assert activity["type"] == "client_created"
        assert activity["description"] == "New client added: Acme"
        assert activity["entityType"] == "client"

    def test_name_cannot_be_cleared(self, client):
        created = client.post("/api/clients", json={"name": "Acme"}).json()

        response = client.put(f"/api/clients/{created['id']}", json={"name": None})

        assert response.status_code == 400
        assert client.get(f"/api/clients/{created['id']}").json()["name"] == "Acme"


class TestProjects:
    def test_filter_by_client(self, client):
        first = client.post("/api/clients", json={"name": "First"}).json()
        second = client.post("/api/clients", json={"name": "Second"}).json()
        client.post("/api/projects", json={"name": "Website", "clientId": first["id"]})
        client.post("/api/projects", json={"name": "Logo", "clientId": second["id"]})

        assert len(client.get("/api/projects").json()) == 2
        filtered = client.get("/api/projects", params={"clientId": second["id"]}).json()
        assert [p["name"] for p in filtered] == ["Logo"]

    def test_unknown_client_is_rejected(self, client):
        response = client.post("/api/projects", json={"name": "Orphan", "clientId": 99})
        assert response.status_code == 404

    def test_update_and_delete(self, client):
        owner = client.post("/api/clients", json={"name": "Owner"}).json()
        project = client.post("/api/projects", json={"name": "Website", "clientId": owner["id"]}).json()

        updated = client.put(f"/api/projects/{project['id']}", json={"status": "completed"}).json()
        assert updated["status"] == "completed"

        assert client.delete(f"/api/projects/{project['id']}").status_code == 200
        assert client.get(f"/api/projects/{project['id']}").status_code == 404

    def test_deleting_client_removes_its_projects(self, client):
        owner = client.post("/api/clients", json={"name": "Owner"}).json()
        client.post("/api/projects", json={"name": "Website", "clientId": owner["id"]})

        client.delete(f"/api/clients/{owner['id']}")
        assert client.get("/api/projects").json() == []

    def test_required_fields_cannot_be_cleared(self, client):
        owner = client.post("/api/clients", json={"name": "Owner"}).json()
        project = client.post("/api/projects", json={"name": "Website", "clientId": owner["id"]}).json()

        assert client.put(f"/api/projects/{project['id']}", json={"clientId": None}).status_code == 400
        assert client.put(f"/api/projects/{project['id']}", json={"name": None}).status_code == 400
        assert client.get(f"/api/projects/{project['id']}").json()["clientId"] == owner["id"]


class TestExpenses:
    def test_create_income_and_activity(self, client):
        response = client.post("/api/expenses", json={
            "description": "Invoice #12",
            "amount": 1250.5,
            "date": "2026-10-01T09:00:00",
            "isIncome": True
        })

        assert response.status_code == 201
        assert response.json()["isIncome"] is True
        activity = client.get("/api/activities", params={"limit": 1}).json()
        assert activity[0]["description"] == "New income recorded: $1250.50"

    def test_expense_defaults_to_outgoing(self, client):
        client.post("/api/expenses", json={"description": "Flour", "amount": 12.5, "date": "2026-10-02T00:00:00"})
        activity = client.get("/api/activities").json()[0]
        assert activity["description"] == "New expense recorded: $12.50"

    def test_filters(self, client):
        owner = client.post("/api/clients", json={"name": "Owner"}).json()
        client.post("/api/expenses", json={
            "description": "Linked", "amount": 10, "date": "2026-10-01T00:00:00", "clientId": owner["id"]
        })
        client.post("/api/expenses", json={"description": "Unlinked", "amount": 5, "date": "2026-10-01T00:00:00"})

        linked = client.get("/api/expenses", params={"clientId": owner["id"]}).json()
        assert [e["description"] for e in linked] == ["Linked"]
        assert client.get("/api/expenses", params={"projectId": 5}).json() == []

    def test_missing_amount(self, client):
        response = client.post("/api/expenses", json={"description": "Flour", "date": "2026-10-02T00:00:00"})
        assert response.status_code == 422

    def test_amount_cannot_be_cleared(self, client):
        expense = client.post(
            "/api/expenses", json={"description": "Flour", "amount": 12.5, "date": "2026-10-02T00:00:00"}
        ).json()

        response = client.put(f"/api/expenses/{expense['id']}", json={"amount": None, "description": None})

        assert response.status_code == 400
        assert response.json()["detail"] == "Required fields cannot be null: description, amount"

    def test_unknown_client_is_rejected(self, client):
        response = client.post("/api/expenses", json={
            "description": "Flour", "amount": 12.5, "date": "2026-10-02T00:00:00", "clientId": 999
        })
        assert response.status_code == 404
        assert client.get("/api/expenses").json() == []


class TestTasks:
    def test_completed_filter(self, client):
        client.post("/api/tasks", json={"title": "Open"})
        client.post("/api/tasks", json={"title": "Done", "completed": True})

        assert [t["title"] for t in client.get("/api/tasks", params={"completed": "false"}).json()] == ["Open"]
        assert [t["title"] for t in client.get("/api/tasks", params={"completed": "true"}).json()] == ["Done"]
        assert len(client.get("/api/tasks", params={"completed": "maybe"}).json()) == 2

    def test_completing_a_task_is_logged_once(self, client):
        due = (datetime.now(timezone.utc) + timedelta(days=3)).isoformat()
        task = client.post("/api/tasks", json={"title": "File taxes", "dueDate": due}).json()

        client.put(f"/api/tasks/{task['id']}", json={"completed": True})
        client.put(f"/api/tasks/{task['id']}", json={"completed": True})

        completions = [a for a in client.get("/api/activities").json() if a["type"] == "task_completed"]
        assert len(completions) == 1
        assert completions[0]["description"] == "Task completed: File taxes"

    def test_delete(self, client):
        task = client.post("/api/tasks", json={"title": "Temp"}).json()
        assert client.delete(f"/api/tasks/{task['id']}").json() == {"success": True}
        assert client.get(f"/api/tasks/{task['id']}").status_code == 404

    def test_title_cannot_be_cleared(self, client):
        task = client.post("/api/tasks", json={"title": "Order flour"}).json()

        response = client.put(f"/api/tasks/{task['id']}", json={"title": None})

        assert response.status_code == 400
        assert client.get(f"/api/tasks/{task['id']}").json()["title"] == "Order flour"

    def test_unknown_references_are_rejected(self, client):
        assert client.post("/api/tasks", json={"title": "Call", "clientId": 999}).status_code == 404
        assert client.post("/api/tasks", json={"title": "Call", "projectId": 999}).status_code == 404
        assert client.get("/api/tasks").json() == []

        task = client.post("/api/tasks", json={"title": "Call"}).json()
        assert client.put(f"/api/tasks/{task['id']}", json={"clientId": 999}).status_code == 404


def test_activity_limit(client):
    for name in ("A", "B", "C"):
        client.post("/api/clients", json={"name": name})

    activities = client.get("/api/activities", params={"limit": 2}).json()
    assert [a["description"] for a in activities] == ["New client added: C", "New client added: B"]
