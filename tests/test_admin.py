# tests/test_admin.py - Admin panel endpoints
from tests.conftest import TEST_PASSWORD, create_task, get_auth_headers


class TestAdminAccess:
    def test_employee_forbidden(self, client, test_user):
        headers = get_auth_headers(test_user)
        for path in ("/api/admin/users", "/api/admin/projects", "/api/admin/clients"):
            res = client.get(path, headers=headers)
            assert res.status_code == 403
            assert res.json() == {"message": "Admin access required"}

    def test_team_lead_forbidden(self, client, lead_user):
        res = client.get("/api/admin/users", headers=get_auth_headers(lead_user))
        assert res.status_code == 403


class TestAdminUsers:
    def test_list_users_hides_password(self, client, admin_user, test_user):
        res = client.get("/api/admin/users", headers=get_auth_headers(admin_user))
        assert res.status_code == 200
        assert {u["email"] for u in res.json()} >= {"admin@gmail.com", test_user.email}
        assert all("passwordHash" not in u for u in res.json())

    def test_create_user_can_log_in(self, client, admin_user):
        res = client.post("/api/admin/users", json={
            "firstName": "Team",
            "lastName": "Lead",
            "email": "lead@taskpulse.com",
            "password": "lead-pass",
            "role": "team-lead",
        }, headers=get_auth_headers(admin_user))
        assert res.status_code == 201
        assert res.json()["role"] == "team-lead"
        assert res.json()["avatar"] == "https://ui-avatars.com/api/?name=Team+Lead"

        login = client.post("/api/auth/login", json={"email": "lead@taskpulse.com", "password": "lead-pass"})
        assert login.status_code == 200

    def test_create_user_requires_all_fields(self, client, admin_user):
        res = client.post("/api/admin/users", json={
            "firstName": "No",
            "email": "norole@taskpulse.com",
            "password": "x",
        }, headers=get_auth_headers(admin_user))
        assert res.status_code == 400
        assert res.json()["message"] == "All fields are required"

    def test_create_user_duplicate_email(self, client, admin_user, test_user):
        res = client.post("/api/admin/users", json={
            "firstName": "Dup",
            "lastName": "User",
            "email": test_user.email,
            "password": TEST_PASSWORD,
            "role": "employee",
        }, headers=get_auth_headers(admin_user))
        assert res.status_code == 400

    def test_delete_user_removes_notifications_and_notes(self, client, store, admin_user, test_user, other_user):
        create_task(client, other_user, assigneeIds=[test_user.id])
        client.post("/api/notes", json={"title": "Mine", "content": "..."}, headers=get_auth_headers(test_user))
        assert len(store.notifications.list()) == 1
        assert len(store.notes.list()) == 1

        res = client.delete(f"/api/admin/users/{test_user.id}", headers=get_auth_headers(admin_user))
        assert res.status_code == 200
        assert res.json() == {"message": "User deleted successfully"}
        assert store.users.get(test_user.id) is None
        assert store.notifications.list() == []
        assert store.notes.list() == []

    def test_delete_user_drops_them_from_assignee_lists(self, client, store, admin_user, test_user, other_user):
        task = create_task(client, other_user, assigneeIds=[test_user.id, other_user.id])
        project = client.post("/api/projects", json={
            "name": "Shared",
            "assignedUserIds": [test_user.id, other_user.id],
        }, headers=get_auth_headers(other_user)).json()

        res = client.delete(f"/api/admin/users/{test_user.id}", headers=get_auth_headers(admin_user))
        assert res.status_code == 200
        assert store.tasks.get(task["id"]).assignee_ids == [other_user.id]
        assert store.projects.get(project["id"]).assigned_user_ids == [other_user.id]

    def test_delete_unknown_user(self, client, admin_user):
        res = client.delete("/api/admin/users/missing", headers=get_auth_headers(admin_user))
        assert res.status_code == 404


class TestAdminProjectsClients:
    def test_create_project_requires_all_fields(self, client, admin_user):
        res = client.post("/api/admin/projects", json={"name": "Only a name"}, headers=get_auth_headers(admin_user))
        assert res.status_code == 400

    def test_create_and_delete_project(self, client, admin_user):
        headers = get_auth_headers(admin_user)
        res = client.post("/api/admin/projects", json={
            "name": "Internal",
            "description": "Internal tooling",
            "startDate": "2025-01-01",
            "endDate": "2025-06-30",
        }, headers=headers)
        assert res.status_code == 201
        project = res.json()
        assert project["status"] == "active"
        assert project["createdBy"] == admin_user.id

        assert [p["id"] for p in client.get("/api/admin/projects", headers=headers).json()] == [project["id"]]
        assert client.delete(f"/api/admin/projects/{project['id']}", headers=headers).status_code == 200
        assert client.get("/api/admin/projects", headers=headers).json() == []

    def test_admin_deletes_someone_elses_project(self, client, admin_user, test_user):
        project = client.post("/api/projects", json={"name": "Theirs"}, headers=get_auth_headers(test_user)).json()
        res = client.delete(f"/api/admin/projects/{project['id']}", headers=get_auth_headers(admin_user))
        assert res.status_code == 200

    def test_create_and_delete_client(self, client, admin_user):
        headers = get_auth_headers(admin_user)
        res = client.post("/api/admin/clients", json={
            "name": "Initech",
            "contactInfo": "Bill, bill@initech.io",
            "description": "Software company",
            "links": ["https://initech.io"],
        }, headers=headers)
        assert res.status_code == 201
        created = res.json()
        assert created["status"] == "active"

        assert [c["id"] for c in client.get("/api/admin/clients", headers=headers).json()] == [created["id"]]
        assert client.delete(f"/api/admin/clients/{created['id']}", headers=headers).status_code == 200
        assert client.delete(f"/api/admin/clients/{created['id']}", headers=headers).status_code == 404

    def test_create_client_requires_all_fields(self, client, admin_user):
        res = client.post("/api/admin/clients", json={"name": "Initech"}, headers=get_auth_headers(admin_user))
        assert res.status_code == 400
        assert res.json()["message"] == "All fields are required"

    def test_admin_client_always_starts_active(self, client, admin_user):
        res = client.post("/api/admin/clients", json={
            "name": "Umbrella",
            "contactInfo": "Alice, alice@umbrella.io",
            "description": "Pharma",
            "links": [],
            "status": "inactive",
        }, headers=get_auth_headers(admin_user))
        assert res.status_code == 201
        assert res.json()["status"] == "active"
        assert res.json()["createdBy"] == admin_user.id
