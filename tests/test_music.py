"""Tests for the /api/music endpoints."""

import pytest


def test_validate_approved_music(client):
    resp = client.get("/api/music/validate/music_001")
    assert resp.status_code == 200
    body = resp.json()
    assert body["valid"] is True
    assert body["success"] is True
    assert body["can_be_used_in_ads"] is True
    assert body["is_accessible"] is True
    assert body["result"] == "eligible"
    assert body["music"]["id"] == "music_001"


def test_validate_unknown_music(client):
    resp = client.get("/api/music/validate/music_unknown")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is False
    assert body["valid"] is False
    assert body["type"] == "not_found"
    assert body["result"] == "not_found"
    assert body["error"] == "Music ID not found"


def test_validate_ineligible_music(client):
    resp = client.get("/api/music/validate/music_011")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["valid"] is False
    assert body["can_be_used_in_ads"] is False
    assert body["result"] == "ineligible"


@pytest.mark.parametrize("query,expected", [
    ("summer", ["music_001"]),
    ("MC FLOW", ["music_002"]),
    ("lo-fi", ["music_003"]),
    ("nothing matches", []),
])
def test_search_music(client, query, expected):
    resp = client.get("/api/music/search", params={"q": query})
    assert resp.status_code == 200
    assert [m["id"] for m in resp.json()["data"]["music_list"]] == expected


def test_search_music_without_query_returns_catalog(client, read_db):
    resp = client.get("/api/music/search")
    assert resp.status_code == 200
    assert resp.json()["data"]["music_list"] == read_db()["music"]


def test_upload_music(client, read_db):
    resp = client.post("/api/music/upload", json={"name": "jingle.mp3"})
    assert resp.status_code == 200
    music = resp.json()["data"]["music"]
    assert music["id"].startswith("uploaded_")
    assert music["title"] == "jingle.mp3"
    assert music["status"] == "PENDING_REVIEW"
    assert music["is_available_for_ads"] is False

    # Uploads are not catalogued
    assert all(m["id"] != music["id"] for m in read_db()["music"])


def test_upload_music_without_name(client):
    resp = client.post("/api/music/upload")
    assert resp.status_code == 200
    assert resp.json()["data"]["music"]["title"] == "Custom Music"


@pytest.mark.parametrize("name,title", [
    ("x" * 201, "x" * 201),
    (12345, "12345"),
])
def test_upload_music_accepts_any_name(client, name, title):
    resp = client.post("/api/music/upload", json={"name": name})
    assert resp.status_code == 200
    assert resp.json()["data"]["music"]["title"] == title
