# tests/test_projects_clients.py - Project and client CRUD with delete cascades
from tests.conftest import create_task, get_auth_headers


def _create_client(client, user, **fields):
    res = client.post("/api/clients", json={"name": "Acme", **fields}, headers=get_auth_headers(user))
    assert res.status_code == 201, res.text
    return res.json()


def _create_project(client, user, **fields):
    res = client.post("/api/projects", json={"name": "Website", **fields}, headers=get_auth_headers(user))
    assert res.status_code == 201, res.text
    return res.json()


class TestProjects:
    def test_create_and_get(self, client, test_user):
        project = _create_project(client, test_user, description="New site", startDate="2025-03-01")
        assert project["status"] == "active"
        assert project["createdBy"] == test_user.id
        assert project["assignedUserIds"] == []

        res = client.get(f"/api/projects/{project['id']}", headers=get_auth_headers(test_user))
        assert res.status_code == 200
        assert res.json()["description"] == "New site"

    def test_missing_name(self, client, test_user):
        res = client.post("/api/projects", json={"description": "x"}, headers=get_auth_headers(test_user))
        assert res.status_code == 400

    def test_partial_update(self, client, test_user):
        project = _create_project(client, test_user, description="keep")
        res = client.put(
            f"/api/projects/{project['id']}",
            json={"status": "on-hold"},
            headers=get_auth_headers(test_user),
        )
        assert res.status_code == 200
        assert res.json()["status"] == "on-hold"
        assert res.json()["description"] == "keep"

    def test_update_unknown_field(self, client, test_user):
        project = _create_project(client, test_user)
        res = client.put(f"/api/projects/{project['id']}", json={"owner": "x"}, headers=get_auth_headers(test_user))
        assert res.status_code == 400

    def test_get_unknown_project(self, client, test_user):
        res = client.get("/api/projects/missing", headers=get_auth_headers(test_user))
        assert res.status_code == 404
        assert res.json() == {"message": "Project not found"}

    def test_delete_unlinks_tasks(self, client, test_user):
        project = _create_project(client, test_user)
        task = create_task(client, test_user, projectId=project["id"])
        headers = get_auth_headers(test_user)

        res = client.delete(f"/api/projects/{project['id']}", headers=headers)
        assert res.status_code == 200
        assert res.json() == {"message": "Project deleted successfully"}

        tasks = client.get("/api/tasks", headers=headers).json()
        assert [t["id"] for t in tasks] == [task["id"]]
        assert tasks[0]["projectId"] is None
        assert client.get(f"/api/projects/{project['id']}", headers=headers).status_code == 404
        assert client.delete(f"/api/projects/{project['id']}", headers=headers).status_code == 404

    def test_delete_by_other_user_forbidden(self, client, test_user, other_user):
        project = _create_project(client, test_user)
        res = client.delete(f"/api/projects/{project['id']}", headers=get_auth_headers(other_user))
        assert res.status_code == 403


class TestClients:
    def test_create_and_list(self, client, test_user):
        created = _create_client(client, test_user, contactInfo="ceo@acme.io", links=["https://acme.io"])
        assert created["status"] == "active"
        assert created["links"] == ["https://acme.io"]

        res = client.get("/api/clients", headers=get_auth_headers(test_user))
        assert [c["id"] for c in res.json()] == [created["id"]]

    def test_update_client(self, client, test_user):
        created = _create_client(client, test_user, description="old")
        res = client.put(
            f"/api/clients/{created['id']}",
            json={"status": "inactive", "links": []},
            headers=get_auth_headers(test_user),
        )
        assert res.status_code == 200
        assert res.json()["status"] == "inactive"
        assert res.json()["description"] == "old"

    def test_invalid_status(self, client, test_user):
        created = _create_client(client, test_user)
        res = client.put(f"/api/clients/{created['id']}", json={"status": "gone"}, headers=get_auth_headers(test_user))
        assert res.status_code == 400

    def test_delete_removes_client_tasks(self, client, test_user):
        acme = _create_client(client, test_user)
        other = _create_client(client, test_user, name="Globex")
        create_task(client, test_user, title="Acme work", clientId=acme["id"])
        create_task(client, test_user, title="Globex work", clientId=other["id"])
        headers = get_auth_headers(test_user)

        res = client.delete(f"/api/clients/{acme['id']}", headers=headers)
        assert res.status_code == 200
        assert res.json() == {"message": "Client deleted successfully"}

        titles = [t["title"] for t in client.get("/api/tasks", headers=headers).json()]
        assert titles == ["Globex work"]
        assert client.delete(f"/api/clients/{acme['id']}", headers=headers).status_code == 404

    def test_client_details(self, client, test_user, other_user):
        acme = _create_client(client, test_user)
        project = _create_project(client, test_user, clientId=acme["id"], assignedUserIds=[other_user.id])
        create_task(client, test_user, title="In project", clientId=acme["id"], projectId=project["id"])
        create_task(client, test_user, title="Loose", clientId=acme["id"])
        create_task(client, test_user, title="Unrelated")

        res = client.get(f"/api/clients/{acme['id']}/details", headers=get_auth_headers(test_user))
        assert res.status_code == 200
        data = res.json()
        assert data["client"]["id"] == acme["id"]
        assert [p["id"] for p in data["projects"]] == [project["id"]]
        assert data["projects"][0]["assignees"][0]["id"] == other_user.id
        assert sorted(t["title"] for t in data["tasks"]) == ["In project", "Loose"]
        assert [t["title"] for t in data["tasksByProject"][project["id"]]] == ["In project"]
        assert [t["title"] for t in data["tasksByProject"]["no-project"]] == ["Loose"]

    def test_details_unknown_client(self, client, test_user):
        res = client.get("/api/clients/missing/details", headers=get_auth_headers(test_user))
        assert res.status_code == 404
