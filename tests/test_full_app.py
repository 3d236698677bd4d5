from types import SimpleNamespace

from todo_api.config import Settings
from todo_api.utils.tokens import TokenService

from conftest import TEST_SECRET


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def test_full_app_flow_create_list_update_delete_tasks(client, login_as):
    token = login_as("alice", "secret1")

    t1 = client.post("/tasks/", json={"title": "task one"}, headers=_auth(token))
    assert t1.status_code == 200
    assert t1.json()["success"] is True
    id1 = t1.json()["data"]["id"]
    assert t1.json()["data"]["is_completed"] is False

    t2 = client.post("/tasks/", json={"title": "task two"}, headers=_auth(token))
    assert t2.status_code == 200
    id2 = t2.json()["data"]["id"]

    listing = client.get("/tasks/", headers=_auth(token))
    assert listing.status_code == 200
    assert {t["title"] for t in listing.json()["data"]} == {"task one", "task two"}

    one = client.get(f"/tasks/{id2}", headers=_auth(token))
    assert one.status_code == 200
    assert one.json()["data"]["title"] == "task two"

    upd = client.put(f"/tasks/{id2}", json={"title": "task two", "is_completed": True}, headers=_auth(token))
    assert upd.status_code == 200
    assert upd.json()["data"]["is_completed"] is True

    d = client.delete(f"/tasks/{id1}", headers=_auth(token))
    assert d.status_code == 200
    assert d.json()["data"]["id"] == id1

    titles = [t["title"] for t in client.get("/tasks/", headers=_auth(token)).json()["data"]]
    assert titles == ["task two"]


def test_token_query_parameter_is_accepted(client, login_as):
    token = login_as("alice", "secret1")
    r = client.post(f"/tasks/?token={token}", json={"title": "via query"})
    assert r.status_code == 200


def test_users_are_isolated(client, login_as):
    alice = login_as("alice", "secret1")
    bob = login_as("bob", "secret2")

    task_id = client.post("/tasks/", json={"title": "private"}, headers=_auth(alice)).json()["data"]["id"]

    assert client.get("/tasks/", headers=_auth(bob)).json()["data"] == []
    for method, kwargs in [
        ("get", {}),
        ("put", {"json": {"title": "hijacked", "is_completed": True}}),
        ("delete", {}),
    ]:
        r = client.request(method, f"/tasks/{task_id}", headers=_auth(bob), **kwargs)
        assert r.status_code == 403, method
        assert r.json()["success"] is False

    r = client.get(f"/tasks/{task_id}", headers=_auth(alice))
    assert r.json()["data"]["title"] == "private"


def test_missing_task_is_404(client, login_as):
    token = login_as("alice", "secret1")
    r = client.delete("/tasks/12345", headers=_auth(token))
    assert r.status_code == 404
    assert r.json() == {"success": False, "data": None, "message": "Task not found"}


def test_requests_without_valid_token_are_401(client, login_as):
    login_as("alice", "secret1")
    expired = TokenService(Settings(secret_key=TEST_SECRET, access_token_expire_minutes=-1))
    foreign = TokenService(Settings(secret_key="not-our-key"))
    user = SimpleNamespace(id=1, username="alice", role="User")

    responses = [
        client.get("/tasks/"),
        client.get("/tasks/", headers={"Authorization": "Bearer garbage"}),
        client.get("/tasks/", headers=_auth(foreign.issue(user))),
        client.get("/tasks/", headers=_auth(expired.issue(user))),
        client.get("/tasks/?token=garbage"),
    ]
    assert [r.status_code for r in responses] == [401] * len(responses)
    assert len({r.json()["message"] for r in responses}) == 1
    assert all(r.headers["www-authenticate"] == "Bearer" for r in responses)


def test_invalid_title_is_rejected(client, login_as):
    token = login_as("alice", "secret1")
    assert client.post("/tasks/", json={}, headers=_auth(token)).status_code == 400
    r = client.post("/tasks/", json={"title": "   "}, headers=_auth(token))
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_admin_route_requires_admin(client, login_as):
    token = login_as("alice", "secret1")
    r = client.get("/admin/all-todos", headers=_auth(token))
    assert r.status_code == 403
    assert r.json()["success"] is False


def test_created_at_is_serialized_as_utc(client, login_as):
    token = login_as("alice", "secret1")
    created = client.post("/tasks/", json={"title": "stamp"}, headers=_auth(token)).json()["data"]["created_at"]
    assert created.endswith("Z") or created.endswith("+00:00")

    listed = client.get("/tasks/", headers=_auth(token)).json()["data"][0]["created_at"]
    assert listed == created


def test_token_for_unknown_user_cannot_create_tasks(client, app):
    ghost = SimpleNamespace(id=999, username="ghost", role="User")
    token = app.state.token_service.issue(ghost)

    r = client.post("/tasks/", json={"title": "orphan"}, headers=_auth(token))
    assert r.status_code == 401
    assert r.json()["success"] is False
