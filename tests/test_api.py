"""End-to-end tests through the FastAPI app."""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from puppymatch.api.handlers import health_handler
from puppymatch.api.main import app
from puppymatch.shared.repositories.user_repository import UserRepository
from tests.conftest import PASSWORD, auth


# ═══════════════════════════════════════════════════════════════════════════════
# AUTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_register_returns_token_and_profile(client):
    response = await client.post(
        "/auth/register",
        json={"email": "Dana@Example.com", "password": PASSWORD},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["expiresIn"] > 0
    assert body["user"]["id"] == body["userId"]
    assert body["user"]["email"] == "dana@example.com"
    assert "passwordHash" not in body["user"]
    assert "password_hash" not in response.text


async def test_register_accepts_username_as_email_alias(client):
    response = await client.post(
        "/auth/register",
        json={"username": "eve@example.com", "password": PASSWORD},
    )

    assert response.status_code == 201
    assert response.json()["user"]["email"] == "eve@example.com"


async def test_register_duplicate_returns_conflict(client, register):
    await register("dup@example.com")

    response = await client.post(
        "/auth/register",
        json={"email": "DUP@example.com", "password": PASSWORD},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DUPLICATE_IDENTITY"


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "not-an-email", "password": PASSWORD},
        {"email": "short@example.com", "password": "abc"},
        {"password": PASSWORD},
        {"email": "ctrl\x07@example.com", "password": PASSWORD},
    ],
)
async def test_register_validation_errors(client, payload):
    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_login_round_trip(client, register):
    _, user_id = await register("frank@example.com")

    response = await client.post(
        "/auth/login",
        json={"email": "FRANK@example.com", "password": PASSWORD},
    )

    assert response.status_code == 200
    assert response.json()["userId"] == user_id


async def test_login_failures_share_one_response(client, register):
    await register("gina@example.com")

    wrong_password = await client.post(
        "/auth/login",
        json={"email": "gina@example.com", "password": "not-the-password"},
    )
    unknown_email = await client.post(
        "/auth/login",
        json={"email": "ghost@example.com", "password": PASSWORD},
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["error"]["code"] == "INVALID_CREDENTIALS"


# ═══════════════════════════════════════════════════════════════════════════════
# TOKEN GATE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer not-a-token"},
        {"Authorization": "Basic dXNlcjpwYXNz"},
    ],
)
async def test_protected_routes_reject_bad_tokens(client, headers):
    response = await client.get("/users/me/interests", headers=headers)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.parametrize(
    "method,path,payload",
    [
        ("GET", "/users/me/interests", None),
        ("PUT", "/users/me/interests", {"interests": ["chess"]}),
        ("GET", "/users/me/matches", None),
        ("GET", "/users/me", None),
        ("PATCH", "/users/me", {"username": "ghost_user"}),
    ],
)
async def test_token_of_deleted_user_is_rejected(
    client, register, session_factory, method, path, payload
):
    token, _ = await register("gone@example.com")

    async with session_factory() as session:
        repo = UserRepository(session)
        user = await repo.get_by_email("gone@example.com")
        assert await repo.delete(user.id)
        await session.commit()

    response = await client.request(method, path, headers=auth(token), json=payload)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


# ═══════════════════════════════════════════════════════════════════════════════
# PROFILE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_get_me(client, register):
    token, user_id = await register("hal@example.com")

    response = await client.get("/users/me", headers=auth(token))

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user_id
    assert body["username"] is None


async def test_patch_me_normalizes_telegram_handle(client, register):
    token, _ = await register("ivy@example.com")

    response = await client.patch(
        "/users/me",
        headers=auth(token),
        json={"username": "ivy_b", "telegramHandle": "ivy_walks"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "ivy_b"
    assert body["telegramHandle"] == "@ivy_walks"
    assert body["avatarUrl"] is None


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "ab"},
        {"username": "has space"},
        {"telegramHandle": "@abc"},
        {"avatarUrl": "ftp://example.com/a.png"},
        {"avatarUrl": "https://example.com/a\x00.png"},
    ],
)
async def test_patch_me_rejects_bad_fields(client, register, payload):
    token, _ = await register("jay@example.com")

    response = await client.patch("/users/me", headers=auth(token), json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_patch_me_username_conflict(client, register):
    first, _ = await register("kim@example.com")
    second, _ = await register("lee@example.com")
    await client.patch("/users/me", headers=auth(first), json={"username": "taken"})

    response = await client.patch("/users/me", headers=auth(second), json={"username": "taken"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DUPLICATE_IDENTITY"


# ═══════════════════════════════════════════════════════════════════════════════
# INTERESTS & MATCHES
# ═══════════════════════════════════════════════════════════════════════════════


async def test_replace_and_read_interests(client, register):
    token, _ = await register("max@example.com")

    saved = await client.put(
        "/users/me/interests",
        headers=auth(token),
        json={"interests": ["Hiking", " chess ", "hiking", ""]},
    )
    stored = await client.get("/users/me/interests", headers=auth(token))

    assert saved.status_code == 200
    assert saved.json() == {"saved": 2}
    assert stored.json() == {"interests": ["chess", "hiking"]}


async def test_replace_interests_validation_error_shape(client, register):
    token, _ = await register("ned@example.com")

    response = await client.put(
        "/users/me/interests",
        headers=auth(token),
        json={"interests": "chess"},
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]["errors"][0]["loc"][-1] == "interests"


async def test_overlong_interest_is_rejected_without_writing(client, register):
    token, _ = await register("ola@example.com")
    await client.put("/users/me/interests", headers=auth(token), json={"interests": ["chess"]})

    response = await client.put(
        "/users/me/interests",
        headers=auth(token),
        json={"interests": ["x" * 65]},
    )
    stored = await client.get("/users/me/interests", headers=auth(token))

    assert response.status_code == 400
    assert stored.json() == {"interests": ["chess"]}


async def test_nul_interest_is_rejected_without_writing(client, register):
    token, _ = await register("otto@example.com")
    await client.put("/users/me/interests", headers=auth(token), json={"interests": ["chess"]})

    response = await client.put(
        "/users/me/interests",
        headers=auth(token),
        json={"interests": ["hiking", "ch\x00ess"]},
    )
    stored = await client.get("/users/me/interests", headers=auth(token))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert stored.json() == {"interests": ["chess"]}


async def test_matches_end_to_end(client, register):
    a, _ = await register("a@example.com")
    b, b_id = await register("b@example.com")
    c, c_id = await register("c@example.com")
    await client.put("/users/me/interests", headers=auth(a), json={"interests": ["chess", "hiking"]})
    await client.put("/users/me/interests", headers=auth(b), json={"interests": ["hiking", "baking"]})
    await client.put("/users/me/interests", headers=auth(c), json={"interests": ["hiking", "chess"]})
    await client.patch("/users/me", headers=auth(c), json={"username": "cee"})

    response = await client.get("/users/me/matches", headers=auth(a))

    assert response.status_code == 200
    assert response.json() == [
        {
            "userId": c_id,
            "overlap": 2,
            "common": ["chess", "hiking"],
            "username": "cee",
            "avatarUrl": None,
            "telegramHandle": None,
        },
        {
            "userId": b_id,
            "overlap": 1,
            "common": ["hiking"],
            "username": None,
            "avatarUrl": None,
            "telegramHandle": None,
        },
    ]

    limited = await client.get("/users/me/matches", headers=auth(a), params={"limit": 0})
    assert [m["userId"] for m in limited.json()] == [c_id]


async def test_matches_empty_for_user_without_interests(client, register):
    token, _ = await register("pam@example.com")

    response = await client.get("/users/me/matches", headers=auth(token))

    assert response.status_code == 200
    assert response.json() == []


async def test_matches_rejects_non_integer_limit(client, register):
    token, _ = await register("quinn@example.com")

    response = await client.get("/users/me/matches", headers=auth(token), params={"limit": "lots"})

    assert response.status_code == 400


# ═══════════════════════════════════════════════════════════════════════════════
# STORE FAULTS & HEALTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_store_outage_returns_503(client, register, monkeypatch):
    token, _ = await register("rae@example.com")

    async def failing_execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))

    monkeypatch.setattr(AsyncSession, "execute", failing_execute)

    response = await client.get("/users/me/interests", headers=auth(token))

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"
    assert "SELECT" not in response.text


async def test_commit_failure_returns_503_and_rolls_back(client, register, monkeypatch):
    token, _ = await register("sam@example.com")

    async def failing_commit(self):
        raise OperationalError("COMMIT", {}, ConnectionRefusedError("connection refused"))

    with monkeypatch.context() as patched:
        patched.setattr(AsyncSession, "commit", failing_commit)
        response = await client.put(
            "/users/me/interests",
            headers=auth(token),
            json={"interests": ["chess"]},
        )

    stored = await client.get("/users/me/interests", headers=auth(token))

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"
    assert stored.json() == {"interests": []}


async def test_register_commit_failure_leaves_no_account(client, monkeypatch):
    async def failing_commit(self):
        raise OperationalError("COMMIT", {}, ConnectionRefusedError("connection refused"))

    with monkeypatch.context() as patched:
        patched.setattr(AsyncSession, "commit", failing_commit)
        response = await client.post(
            "/auth/register",
            json={"email": "tess@example.com", "password": PASSWORD},
        )

    login = await client.post(
        "/auth/login",
        json={"email": "tess@example.com", "password": PASSWORD},
    )

    assert response.status_code == 503
    assert login.status_code == 401


def test_openapi_documents_error_body():
    responses = app.openapi()["paths"]["/users/me/interests"]["put"]["responses"]

    for status_code in ("400", "401", "503"):
        schema_ref = responses[status_code]["content"]["application/json"]["schema"]["$ref"]
        assert schema_ref.endswith("/ErrorResponse")


async def test_health_and_live(client):
    health = await client.get("/health")
    live = await client.get("/live")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert live.json() == {"status": "alive"}


@pytest.mark.parametrize("reachable,status_code", [(True, 200), (False, 503)])
async def test_ready_reflects_database(client, monkeypatch, reachable, status_code):
    async def fake_ping():
        return reachable

    monkeypatch.setattr(health_handler, "ping_db", fake_ping)

    response = await client.get("/ready")

    assert response.status_code == status_code


async def test_request_id_is_echoed(client):
    response = await client.get("/live", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
