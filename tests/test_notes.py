# tests/test_notes.py - Personal notes
from tests.conftest import get_auth_headers


class TestNotes:
    def test_create_and_list_own(self, client, test_user, other_user):
        res = client.post("/api/notes", json={
            "title": "Call",
            "content": "Call the client on Monday",
            "entityType": "client",
            "entityId": "c1",
        }, headers=get_auth_headers(test_user))
        assert res.status_code == 201
        note = res.json()
        assert note["createdBy"] == test_user.id
        assert note["entityType"] == "client"

        client.post("/api/notes", json={"title": "Other", "content": "..."}, headers=get_auth_headers(other_user))

        mine = client.get("/api/notes", headers=get_auth_headers(test_user)).json()
        assert [n["id"] for n in mine] == [note["id"]]

    def test_missing_content(self, client, test_user):
        res = client.post("/api/notes", json={"title": "Empty"}, headers=get_auth_headers(test_user))
        assert res.status_code == 400

    def test_invalid_entity_type(self, client, test_user):
        res = client.post(
            "/api/notes",
            json={"title": "T", "content": "C", "entityType": "invoice"},
            headers=get_auth_headers(test_user),
        )
        assert res.status_code == 400

    def test_delete_own_note(self, client, test_user):
        headers = get_auth_headers(test_user)
        note = client.post("/api/notes", json={"title": "T", "content": "C"}, headers=headers).json()
        res = client.delete(f"/api/notes/{note['id']}", headers=headers)
        assert res.status_code == 200
        assert res.json() == {"message": "Note deleted successfully"}
        assert client.get("/api/notes", headers=headers).json() == []

    def test_cannot_delete_someone_elses_note(self, client, test_user, other_user):
        note = client.post("/api/notes", json={"title": "T", "content": "C"}, headers=get_auth_headers(test_user)).json()
        res = client.delete(f"/api/notes/{note['id']}", headers=get_auth_headers(other_user))
        assert res.status_code == 404
        assert len(client.get("/api/notes", headers=get_auth_headers(test_user)).json()) == 1
