# /tests/test_admin_router.py

from sqlalchemy import text


def _seed(client):
    client.post("/api/auth/teacher", json={"name": "Ms Frizzle", "externalId": "oauth-1"})
    client.post("/api/auth/student", json={"code": "COLLAB123", "name": "Ada"})
    client.post("/api/auth/student", json={"code": "COLLAB123", "name": "Grace"})


def test_remove_users_without_configured_key(client):
    _seed(client)
    response = client.post("/api/admin/remove-users", json={"action": "byRole", "role": "student"})
    assert response.status_code == 200
    assert response.json()["deletedCount"] == 2


def test_remove_users_requires_configured_key(make_client):
    client = make_client(admin_api_key="s3cret")
    _seed(client)

    assert client.post("/api/admin/remove-users", json={"action": "all"}).status_code == 401
    wrong = client.post("/api/admin/remove-users", json={"action": "all"}, headers={"x-api-key": "nope"})
    assert wrong.status_code == 401
    assert wrong.json() == {"success": False, "error": "Unauthorized"}

    ok = client.post("/api/admin/remove-users", json={"action": "all"}, headers={"x-api-key": "s3cret"})
    assert ok.status_code == 200
    assert ok.json() == {"success": True, "deletedCount": 3}


def test_cron_key_is_the_admin_fallback(make_client):
    client = make_client(cron_api_key="cron-key")
    _seed(client)
    response = client.get("/api/admin/remove-users", params={"action": "byName", "userName": "Ada", "key": "cron-key"})
    assert response.status_code == 200
    assert response.json()["deletedCount"] == 1


def test_remove_users_bad_input_is_400(client):
    assert client.post("/api/admin/remove-users", json={"action": "explode"}).status_code == 400
    assert client.post("/api/admin/remove-users", json={"action": "byRole", "role": "principal"}).status_code == 400
    assert client.post("/api/admin/remove-users", json={"action": "byName"}).status_code == 400
    assert client.get("/api/admin/remove-users", params={"action": "byRole"}).status_code == 400


def test_remove_by_name_prefers_exact_teacher_name(client):
    _seed(client)
    response = client.get("/api/admin/remove-users", params={"action": "byName", "userName": "Ms Frizzle"})
    assert response.json()["deletedCount"] == 1
    board = client.get("/api/leaderboard").json()
    assert board["teachers"] == []


def test_purge_keeps_users_and_settings(make_client):
    client = make_client(cron_api_key="cron-key")
    _seed(client)
    client.put("/api/access-code", json={"code": "KEEPME"})
    session_id = client.post("/api/sessions", json={"teacherName": "Ms Frizzle"}).json()["sessionId"]
    client.post(f"/api/chat/{session_id}/messages", json={"text": "hello", "senderName": "Ada"})
    client.post("/api/rewards", json={"senderName": "Ms Frizzle", "rewarderName": "Ada", "contentId": session_id})

    assert client.post("/api/cron/clear-db").status_code == 401

    response = client.post("/api/cron/clear-db", headers={"x-api-key": "cron-key"})
    assert response.status_code == 200
    assert response.json()["deletedCounts"] == {"content": 1, "messages": 1, "rewards": 1}

    assert client.get(f"/api/sessions/{session_id}/content").json()["errorCode"] == "NotFound"
    assert client.get("/api/access-code").json()["code"] == "KEEPME"
    assert len(client.get("/api/leaderboard").json()["students"]) == 2
    assert client.get("/api/users/points", params={"name": "Ms Frizzle"}).json()["points"] == 1


def _drop_table(client, table):
    with client.app.state.store.engine.begin() as connection:
        connection.execute(text(f"DROP TABLE {table}"))


def test_remove_users_store_failure_is_500(client):
    _seed(client)
    _drop_table(client, "users")

    response = client.post("/api/admin/remove-users", json={"action": "all"})
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to remove users", "errorCode": "StoreUnavailable"}


def test_purge_store_failure_is_500(client):
    _drop_table(client, "messages")

    response = client.get("/api/cron/clear-db")
    assert response.status_code == 500
    assert response.json()["errorCode"] == "StoreUnavailable"


def test_cron_key_wins_when_both_keys_are_set(make_client):
    client = make_client(admin_api_key="admin-key", cron_api_key="cron-key")
    _seed(client)

    assert client.post("/api/admin/remove-users", json={"action": "all"}, headers={"x-api-key": "admin-key"}).status_code == 401
    response = client.post("/api/admin/remove-users", json={"action": "all"}, headers={"x-api-key": "cron-key"})
    assert response.status_code == 200
