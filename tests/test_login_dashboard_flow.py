def test_login_then_dashboard_ok(client, signup_and_login):
    """
    End-to-end smoke test:
    - Signup + login via the auth API.
    - GET /api/me/dashboard returns the fresh profile.
    """
    user_id, headers = signup_and_login(department="Medicine", campus="North Campus", name="Rosalind")

    resp = client.get("/api/me/dashboard", headers=headers)
    assert resp.status_code == 200

    body = resp.json()
    assert body["id"] == user_id
    assert body["name"] == "Rosalind"
    assert body["department"] == "Medicine"
    assert body["total_points"] == 0
    assert body["daily_points"] == 0
    assert body["today_transport_mode"] is None
    assert body["milestones"] == {"walked": 0.0, "cycled": 0.0}
    assert body["commute_baseline"] is None


def test_login_sets_cookie_usable_for_requests(client):
    client.cookies.clear()
    client.post(
        "/auth/signup",
        data={"name": "Cookie", "email": "cookie@campus.edu", "password": "password123",
              "department": "Business", "campus": "Online"},
    )
    login = client.post("/auth/login", data={"email": "cookie@campus.edu", "password": "password123"})
    assert login.status_code == 200

    # TestClient keeps the access_token cookie for us
    assert client.get("/api/me/dashboard").status_code == 200
    client.cookies.clear()


def test_commute_baseline_uses_daily_log_units(client, signup_and_login):
    _, headers = signup_and_login()

    resp = client.post(
        "/api/me/commute",
        data={"mode": "Car", "distance_km": 10, "round_trips": 1},
        headers=headers,
    )
    assert resp.status_code == 200

    baseline = resp.json()["commute_baseline"]
    # one round trip = two one-way trips of 10 km
    assert baseline["trips"] == 2
    assert baseline["emissions"] == 4.6
    assert baseline["points"] == 11


def test_options_lists_forms_choices(client):
    body = client.get("/api/options").json()
    assert body["transport_modes"] == ["Car", "Bike", "Bus", "Walking", "Bicycle", "EV"]
    assert body["emission_factors"]["Car"] == 0.23
    assert "Engineering" in body["departments"]
    assert "Online" in body["campuses"]
