def test_auth_api_returns_json_on_bad_credentials(client):
    # Intentionally send invalid credentials; we only care about status and content type.
    resp = client.post(
        "/auth/login",
        data={"email": "nouser@campus.edu", "password": "bad-password"},
        follow_redirects=False,
    )
    assert resp.status_code == 401
    assert "application/json" in resp.headers.get("content-type", "").lower()


def test_signup_rejects_unknown_department(client):
    resp = client.post(
        "/auth/signup",
        data={"name": "Grace", "email": "grace@campus.edu", "password": "password123",
              "department": "Astrology", "campus": "Main Campus"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Unknown department"


def test_signup_rejects_short_password(client):
    resp = client.post(
        "/auth/signup",
        data={"name": "Grace", "email": "grace2@campus.edu", "password": "short",
              "department": "Business", "campus": "Main Campus"},
    )
    assert resp.status_code == 422


def test_signup_rejects_duplicate_email(client):
    data = {"name": "Alan", "email": "alan@campus.edu", "password": "password123",
            "department": "Business", "campus": "Online"}
    first = client.post("/auth/signup", data=data)
    second = client.post("/auth/signup", data=data)
    assert first.status_code == 200
    assert second.status_code == 400


def test_protected_route_requires_token(client):
    client.cookies.clear()
    assert client.get("/api/me/dashboard").status_code == 401
    assert client.get("/api/me/dashboard", headers={"Authorization": "Bearer junk"}).status_code == 401


def test_token_resolves_to_user_id_until_expired():
    from datetime import timedelta

    from app.core.security import issue_token, user_id_from_token

    assert user_id_from_token(issue_token(42)) == 42
    assert user_id_from_token(issue_token(42, expires_delta=timedelta(seconds=-5))) is None
    assert user_id_from_token(issue_token(42) + "x") is None
    assert user_id_from_token("not-a-jwt") is None


def test_expired_token_is_rejected_by_protected_routes(client, signup_and_login):
    from datetime import timedelta

    from app.core.security import issue_token

    user_id, headers = signup_and_login()
    assert client.get("/api/me/dashboard", headers=headers).status_code == 200

    expired = issue_token(user_id, expires_delta=timedelta(seconds=-5))
    resp = client.get("/api/me/dashboard", headers={"Authorization": f"Bearer {expired}"})
    assert resp.status_code == 401
