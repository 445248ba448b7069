"""HTTP surface: route guard and dashboard endpoints"""
import pytest
from fastapi.testclient import TestClient

import config
from admin_panel.app import app, resolve_redirect

SIGNED_IN = {config.SESSION_COOKIE: "+919800000000", config.PROMOTER_COOKIE: "p1"}


@pytest.fixture
def store(fake_store):
    fake_store.promoters["p1"] = {"name": "Asha"}
    fake_store.campaigns.update({
        "c1": {"campaignName": "Always On", "startDate": "2000-01-01", "endDate": "2999-12-31",
               "promoters": [{"promoterId": "p1"}], "targetSamplings": 10, "targetScans": 4},
        "c2": {"campaignName": "Old", "startDate": "2001-01-01", "endDate": "2001-02-01",
               "promoters": [{"promoterId": "p1"}]},
        "c3": {"campaignName": "Far Future", "startDate": "2999-01-01", "endDate": "2999-02-01",
               "promoters": [{"promoterId": "p1"}]},
    })
    return fake_store


def client(cookies=None) -> TestClient:
    return TestClient(app, cookies=cookies)


@pytest.mark.parametrize("path, signed_in, expected", [
    ("/", False, "/login"),
    ("/", True, "/dashboard"),
    ("/login", True, "/dashboard"),
    ("/login", False, None),
    ("/dashboard", False, "/login"),
    ("/dashboard/anything", False, "/login"),
    ("/api/dashboard", False, "/login"),
    ("/dashboard", True, None),
    ("/health", False, None),
])
def test_resolve_redirect(path, signed_in, expected):
    assert resolve_redirect(path, signed_in) == expected


def test_anonymous_root_redirects_to_login():
    response = client().get("/", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/login"


def test_signed_in_login_redirects_to_dashboard():
    response = client(SIGNED_IN).get("/login", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/dashboard"


def test_login_page_is_public():
    response = client().get("/login")
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_dashboard_payload(store):
    response = client(SIGNED_IN).get("/api/dashboard")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["promoterInfo"]["name"] == "Asha"
    assert data["stats"] == {"assigned": 3, "active": 1, "completed": 1, "upcoming": 1}
    assert data["campaigns"]["active"][0]["id"] == "c1"
    assert data["campaigns"]["active"][0]["status"] == "ACTIVE"


def test_dashboard_alias_path(store):
    assert client(SIGNED_IN).get("/dashboard").json()["data"]["stats"]["assigned"] == 3


def test_dashboard_without_promoter_cookie(store):
    response = client({config.SESSION_COOKIE: "+919800000000"}).get("/api/dashboard")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "NO_COOKIE", "errors": ["NO_COOKIE"]}


def test_dashboard_unknown_promoter(store):
    cookies = {**SIGNED_IN, config.PROMOTER_COOKIE: "ghost"}
    response = client(cookies).get("/api/dashboard")
    assert response.status_code == 404
    assert response.json()["message"] == "NO_PROMOTER_FOUND"


def test_dashboard_store_down(store):
    store.fail = True
    response = client(SIGNED_IN).get("/api/dashboard")
    assert response.status_code == 500
    assert response.json()["message"] == "SERVER_ERROR"


def test_campaign_details(store):
    response = client(SIGNED_IN).get("/api/campaigns/c1")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Always On"
    assert data["status"] == "ACTIVE"
    assert data["progress"]["totalRemaining"] == 6
    assert data["progress"]["percent"] == 40


def test_campaign_details_not_found(store):
    response = client(SIGNED_IN).get("/api/campaigns/nope")
    assert response.status_code == 404
    assert response.json()["message"] == "CAMPAIGN_NOT_FOUND"


def test_logout_clears_session():
    response = client(SIGNED_IN).post("/logout", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    set_cookies = response.headers.get_list("set-cookie")
    assert any(c.startswith(f"{config.SESSION_COOKIE}=") for c in set_cookies)
    assert any(c.startswith(f"{config.PROMOTER_COOKIE}=") for c in set_cookies)


def test_campaign_details_serve_raw_document(store):
    data = client(SIGNED_IN).get("/api/campaigns/c2").json()["data"]
    assert data["fullData"]["campaignName"] == "Old"
    assert data["fullData"]["endDate"] == "2001-02-01T00:00:00"
