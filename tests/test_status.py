# tests/test_status.py - Kanban status transitions and their authorization
import pytest

from tests.conftest import create_task, get_auth_headers


class TestStatusChange:
    def test_creator_moves_task(self, client, store, test_user):
        task = create_task(client, test_user)
        res = client.patch(
            f"/api/tasks/{task['id']}/status",
            json={"status": "in-progress"},
            headers=get_auth_headers(test_user),
        )
        assert res.status_code == 200
        assert res.json()["status"] == "in-progress"
        assert res.json()["editHistory"][-1]["changes"] == "Status"
        # No notification for the creator's own change
        assert store.notifications.list() == []

    def test_assignee_cannot_move_task(self, client, test_user, other_user):
        task = create_task(client, test_user, assigneeIds=[other_user.id])
        res = client.patch(
            f"/api/tasks/{task['id']}/status",
            json={"status": "completed"},
            headers=get_auth_headers(other_user),
        )
        assert res.status_code == 403
        tasks = client.get("/api/tasks", headers=get_auth_headers(test_user)).json()
        assert tasks[0]["status"] == "draft"

    def test_status_change_through_put_is_also_checked(self, client, test_user, other_user):
        task = create_task(client, test_user)
        res = client.put(
            f"/api/tasks/{task['id']}",
            json={"status": "completed"},
            headers=get_auth_headers(other_user),
        )
        assert res.status_code == 403

    def test_non_creator_can_edit_other_fields(self, client, test_user, other_user):
        task = create_task(client, test_user)
        res = client.put(
            f"/api/tasks/{task['id']}",
            json={"description": "more detail", "status": "draft"},
            headers=get_auth_headers(other_user),
        )
        assert res.status_code == 200
        assert res.json()["description"] == "more detail"

    def test_admin_moves_task_and_creator_is_notified(self, client, store, test_user, admin_user):
        task = create_task(client, test_user, title="Quarterly report")
        res = client.patch(
            f"/api/tasks/{task['id']}/status",
            json={"status": "under-review"},
            headers=get_auth_headers(admin_user),
        )
        assert res.status_code == 200

        notifications = [n for n in store.notifications.list() if n.user_id == test_user.id]
        assert len(notifications) == 1
        assert notifications[0].type == "task_status_change"
        assert "from draft to under-review" in notifications[0].message
        assert "Admin User" in notifications[0].message

    @pytest.mark.parametrize("status", ["draft", "in-progress", "under-review", "completed", "canceled"])
    def test_every_status_accepted(self, client, test_user, status):
        task = create_task(client, test_user)
        res = client.patch(
            f"/api/tasks/{task['id']}/status",
            json={"status": status},
            headers=get_auth_headers(test_user),
        )
        assert res.status_code == 200
        assert res.json()["status"] == status

    def test_invalid_status(self, client, test_user):
        task = create_task(client, test_user)
        res = client.patch(
            f"/api/tasks/{task['id']}/status",
            json={"status": "archived"},
            headers=get_auth_headers(test_user),
        )
        assert res.status_code == 400

    def test_unknown_task(self, client, test_user):
        res = client.patch("/api/tasks/missing/status", json={"status": "draft"}, headers=get_auth_headers(test_user))
        assert res.status_code == 404
