"""APIエンドポイントの結合テスト"""
from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)

PAYLOAD = {
    "input": {
        "full_name": "山田花子",
        "birth_date": "1990-05-15",
        "birth_time": "08:30",
        "gender": "female",
        "question": "今年の仕事運はどうなりますか",
    },
    "environment": {
        "lunar": {"phase": 0.5, "phase_name": "満月"},
        "weather": {"condition": "雨", "temperature": 18},
    },
    "options": {"now": "2024-06-15T10:30:00", "include_wall_clock": False},
}


def test_root_and_health():
    assert client.get("/").status_code == 200
    r = client.get("/api/health")
    assert r.status_code == 200
    assert "tarot" in r.json()["engines"]


def test_divination_types():
    r = client.get("/api/divination/types")
    assert r.status_code == 200
    assert len(r.json()["data"]) == 14


def test_tarot_divination():
    r = client.post("/api/divination/tarot", json=PAYLOAD)
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["type"] == "tarot"
    assert len(data["result"]["positions"]) == 3
    assert data["three_layer"]["meta"]["environmental_influence"] == 0.7


def test_divination_is_reproducible():
    first = client.post("/api/divination/iching", json=PAYLOAD).json()["data"]["result"]
    second = client.post("/api/divination/iching", json=PAYLOAD).json()["data"]["result"]
    assert first["lines"] == second["lines"]


def test_unknown_type_is_bad_request():
    r = client.post("/api/divination/palmistry", json=PAYLOAD)
    assert r.status_code == 400


def test_invalid_option_is_bad_request():
    payload = dict(PAYLOAD, options={"spread_type": "pentagram"})
    r = client.post("/api/divination/tarot", json=payload)
    assert r.status_code == 400


def test_text_report():
    r = client.post("/api/divination/numerology/report", json=PAYLOAD)
    assert r.status_code == 200
    body = r.json()
    assert body["data"]["core_meaning"] in body["report"]


def test_pdf_report():
    r = client.post("/api/divination/mayan/pdf", json=PAYLOAD)
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/pdf"
    assert r.content.startswith(b"%PDF")


def test_visual_endpoints():
    for path in ("/api/divination/iching/visual", "/api/divination/numerology/visual"):
        r = client.post(path, json=PAYLOAD)
        assert r.status_code == 200
        assert r.headers["content-type"] == "image/png"
        assert r.content.startswith(b"\x89PNG")


def test_integrated():
    payload = dict(PAYLOAD, types=["tarot", "runes", "palmistry"])
    r = client.post("/api/integrated", json=payload)
    assert r.status_code == 200
    data = r.json()["data"]
    assert set(data["results"]) == {"tarot", "runes"}
    assert "palmistry" in data["errors"]


def test_tarot_spreads_and_cards():
    r = client.get("/api/tarot/spreads")
    assert r.status_code == 200
    assert {spread["type"] for spread in r.json()["data"]} >= {"one-card", "celtic-cross"}
    assert client.get("/api/tarot/cards/0").status_code == 200
    r = client.get("/api/tarot/cards/78")
    assert r.status_code == 404
    assert r.json()["detail"] == "Card not found"
