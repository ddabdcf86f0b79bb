"""Token extraction end to end: header, session and the /auth, /accounts routes."""

from __future__ import annotations

import json
from typing import Any

from httpx import AsyncClient


async def _login(client: AsyncClient, token: str) -> Any:
    return await client.post("/auth/session", json={"apiToken": token})


class TestAuthStatus:
    async def test_anonymous(self, client: AsyncClient) -> None:
        resp = await client.get("/auth/status")
        assert resp.status_code == 200
        body = resp.json()
        assert body["authenticated"] is False
        assert body["apiTokenPayload"] is None
        assert body["tokenSource"] is None
        assert body["message"] == "Not authenticated"

    async def test_bearer_header(self, client: AsyncClient, make_token: Any) -> None:
        token = make_token({"accountId": "acc-9"})
        resp = await client.get("/auth/status", headers={"Authorization": f"Bearer {token}"})
        body = resp.json()
        assert body["authenticated"] is True
        assert body["tokenSource"] == "header"
        assert body["apiTokenPayload"]["accountId"] == "acc-9"

    async def test_invalid_token_treated_as_anonymous(
        self, client: AsyncClient, make_token: Any
    ) -> None:
        token = make_token(secret="another-secret-0123456789abcdef-0123456789abcdef")
        resp = await client.get("/auth/status", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200
        assert resp.json()["authenticated"] is False

    async def test_expired_token_treated_as_anonymous(
        self, client: AsyncClient, make_token: Any
    ) -> None:
        token = make_token(expires_in=-30)
        resp = await client.get("/auth/status", headers={"Authorization": f"Bearer {token}"})
        assert resp.json()["authenticated"] is False


class TestSessionFlow:
    async def test_login_stores_token_in_session(
        self, client: AsyncClient, make_token: Any
    ) -> None:
        resp = await _login(client, make_token())
        assert resp.status_code == 200
        assert resp.json()["message"] == "Session started"
        assert resp.json()["apiTokenPayload"]["sub"] == "account-1"

        status = (await client.get("/auth/status")).json()
        assert status["authenticated"] is True
        assert status["tokenSource"] == "session"

    async def test_header_takes_precedence_over_session(
        self, client: AsyncClient, make_token: Any
    ) -> None:
        await _login(client, make_token({"sub": "session-account"}))
        header_token = make_token({"sub": "header-account"})
        resp = await client.get(
            "/auth/status", headers={"Authorization": f"Bearer {header_token}"}
        )
        body = resp.json()
        assert body["tokenSource"] == "header"
        assert body["apiTokenPayload"]["sub"] == "header-account"

    async def test_invalid_login_rejected(self, client: AsyncClient) -> None:
        resp = await _login(client, "not-a-jwt")
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "message": "Invalid API token"}
        assert (await client.get("/auth/status")).json()["authenticated"] is False

    async def test_empty_token_is_validation_error(self, client: AsyncClient) -> None:
        resp = await _login(client, "")
        assert resp.status_code == 422

    async def test_logout_clears_session(self, client: AsyncClient, make_token: Any) -> None:
        await _login(client, make_token())
        resp = await client.delete("/auth/session")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Session ended"
        assert (await client.get("/auth/status")).json()["authenticated"] is False


class TestAccounts:
    async def test_requires_token(self, client: AsyncClient) -> None:
        resp = await client.get("/accounts/me")
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "message": "Authentication required"}

    async def test_account_from_header_token(
        self, client: AsyncClient, make_token: Any
    ) -> None:
        token = make_token({"accountId": "acc-1", "email": "buyer@example.com"})
        resp = await client.get("/accounts/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200
        assert resp.json()["account"] == {
            "id": "acc-1",
            "email": "buyer@example.com",
            "accountType": "customer",
        }

    async def test_account_from_session_token(
        self, client: AsyncClient, make_token: Any
    ) -> None:
        await _login(client, make_token())
        resp = await client.get("/accounts/me")
        assert resp.status_code == 200
        assert resp.json()["account"]["id"] == "account-1"


class TestMultipartLogin:
    async def test_login_from_multipart_data_field(
        self, client: AsyncClient, make_token: Any
    ) -> None:
        resp = await client.post(
            "/auth/session",
            data={"data": json.dumps({"apiToken": make_token()})},
            files={"avatar": ("me.png", b"\x89PNG")},
        )
        assert resp.status_code == 200
        assert resp.json()["message"] == "Session started"
        assert (await client.get("/auth/status")).json()["tokenSource"] == "session"

    async def test_rejected_payload_does_not_echo_token(
        self, client: AsyncClient
    ) -> None:
        resp = await client.post(
            "/auth/session",
            data={"data": json.dumps({"apiToken": "", "secret": "s3cr3t"})},
            files={"avatar": ("me.png", b"\x89PNG")},
        )
        assert resp.status_code == 422
        errors = resp.json()["errorReport"]["errors"]
        assert all("input" not in err for err in errors)
        assert "s3cr3t" not in resp.text
