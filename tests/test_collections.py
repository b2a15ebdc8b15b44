"""Tests for the generic collection routes and the app shell."""


def test_list_collection(client, read_db):
    resp = client.get("/api/music")
    assert resp.status_code == 200
    assert resp.json() == read_db()["music"]


def test_filter_collection(client):
    resp = client.get("/api/users", params={"open_id": "open_id_123456789"})
    assert resp.status_code == 200
    users = resp.json()
    assert len(users) == 1
    assert users[0]["display_name"] == "Demo Advertiser"


def test_filter_collection_no_match(client):
    resp = client.get("/api/users", params={"open_id": "nobody"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_get_item(client):
    resp = client.get("/api/music/music_002")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Urban Beat"


def test_get_item_with_numeric_id(client):
    resp = client.get("/api/advertisers/1")
    assert resp.status_code == 200
    assert resp.json()["advertiser_id"] == "adv_789012345"


def test_list_ads_includes_created(client, valid_ad):
    client.post("/api/ads", json=valid_ad)
    resp = client.get("/api/ads")
    assert resp.status_code == 200
    assert [a["campaign_name"] for a in resp.json()] == ["My Campaign"]


def test_unknown_collection(client):
    resp = client.get("/api/campaigns")
    assert resp.status_code == 404
    assert resp.json()["type"] == "not_found"


def test_unknown_item(client):
    resp = client.get("/api/music/music_999")
    assert resp.status_code == 404
    assert resp.json()["type"] == "not_found"


def test_specific_routes_take_precedence(client):
    resp = client.get("/api/music/search", params={"q": "urban"})
    assert resp.status_code == 200
    assert resp.json()["success"] is True


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200


def test_filter_collection_on_boolean_and_number(client):
    resp = client.get("/api/music", params={"is_available_for_ads": "false"})
    assert [m["id"] for m in resp.json()] == ["music_011"]

    resp = client.get("/api/music", params={"is_available_for_ads": "true", "duration": "45"})
    assert [m["id"] for m in resp.json()] == ["music_002"]
