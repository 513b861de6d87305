"""
Tests for the units router.
"""

from fastapi.testclient import TestClient
from larder.main import app

client = TestClient(app)


def test_list_units():
    response = client.get("/api/units/")
    assert response.status_code == 200
    data = response.json()
    keys = [u["key"] for u in data]
    assert len(keys) == 15
    assert "floz" in keys
    cup = next(u for u in data if u["key"] == "cup")
    assert cup["kind"] == "volume"
    assert cup["base_factor"] == 236.588
    assert "cups" in cup["aliases"]


def test_get_unit():
    response = client.get("/api/units/lb")
    assert response.status_code == 200
    assert response.json()["base_factor"] == 453.592


def test_get_unit_not_found():
    # Aliases are not canonical keys
    response = client.get("/api/units/pounds")
    assert response.status_code == 404


def test_normalize_endpoint():
    response = client.get("/api/units/normalize", params={"unit": "Tbsp."})
    assert response.status_code == 200
    data = response.json()
    assert data["normalized"] == "tbsp"
    assert data["recognized"] is True
    assert data["kind"] == "volume"


def test_normalize_endpoint_unknown():
    response = client.get("/api/units/normalize", params={"unit": "Widgets"})
    data = response.json()
    assert data["normalized"] == "widget"
    assert data["recognized"] is False
    assert data["kind"] == "unknown"


def test_normalize_endpoint_empty():
    response = client.get("/api/units/normalize")
    assert response.json()["normalized"] == "unknown"


def test_convert_mass_simple():
    # 1 kg = 1000 g
    response = client.post("/api/units/convert", json={
        "qty": 1,
        "from_unit": "kg",
        "to_unit": "grams"
    })
    assert response.status_code == 200
    data = response.json()
    assert data["converted"] == 1000
    assert data["ok"] is True
    assert data["reason"] is None
    assert data["from_unit"] == "kg"
    assert data["to_unit"] == "g"


def test_convert_incompatible():
    response = client.post("/api/units/convert", json={
        "qty": 1,
        "from_unit": "g",
        "to_unit": "ml"
    })
    assert response.status_code == 200
    data = response.json()
    assert data["converted"] is None
    assert data["ok"] is False
    assert data["reason"] == "incompatible"


def test_convert_unknown_unit():
    response = client.post("/api/units/convert", json={
        "qty": 10,
        "from_unit": "glarps",
        "to_unit": "g"
    })
    data = response.json()
    assert data["ok"] is False
    assert data["reason"] == "unknown_unit"
    assert data["from_unit"] == "glarp"


def test_convert_identical_unknown():
    response = client.post("/api/units/convert", json={
        "qty": 2,
        "from_unit": "bag",
        "to_unit": "bags"
    })
    data = response.json()
    assert data["ok"] is True
    assert data["converted"] == 2


def test_convert_rejects_bad_qty():
    response = client.post("/api/units/convert", json={
        "qty": "lots",
        "from_unit": "g",
        "to_unit": "kg"
    })
    assert response.status_code == 422


def test_normalize_endpoint_plural_single_letter():
    data = client.get("/api/units/normalize", params={"unit": "Ts"}).json()
    assert data["normalized"] == "tbsp"
    assert data["kind"] == "volume"


def test_convert_identical_unregistered_ending_in_s():
    response = client.post("/api/units/convert", json={
        "qty": 3,
        "from_unit": "glass",
        "to_unit": "glass"
    })
    data = response.json()
    assert data["ok"] is True
    assert data["converted"] == 3
    assert data["from_unit"] == "glas"
