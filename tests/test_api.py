import pytest
from fastapi.testclient import TestClient

import main


@pytest.fixture
def client():
    return TestClient(main.app)


SCHEDULE = {
    "date": "Friday",
    "items": [
        {"time": "6:00 AM", "class_name": "Sunrise Spin", "instructor": "Maya", "location": "Studio B"},
        {"time": "7:30 AM", "class_name": "Power Yoga Flow", "instructor": "Jordan", "location": "Studio A"},
        {"time": "12:00 PM", "class_name": "Lunch HIIT", "instructor": "Sam", "location": "Main Floor"},
        {"time": "5:30 PM", "class_name": "Barbell Strength", "instructor": "Alex", "location": "Rack Room"},
    ],
}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_elements(client):
    data = client.get("/elements").json()
    assert data["groups"]["hero"] == ["heading", "subtitle", "scheduleDate"]
    assert data["groups"]["footer"] == ["footer"]
    assert data["elements"]["className"]["default_font_size"] == 18
    assert data["elements"]["className"]["group"] == "schedule"
    assert data["default_hidden"] == ["duration", "description"]


def test_layout_options(client):
    data = client.get("/layout-options").json()
    assert [option["id"] for option in data["spacing_options"]] == ["compact", "comfortable", "spacious"]
    assert {option["id"] for option in data["layout_options"]} == {"grid", "list", "card"}
    assert data["default_spacing"]["schedule_gap"] == 1.0


def test_smart_sizing_defaults(client):
    response = client.post("/smart-sizing", json={})
    assert response.status_code == 200

    data = response.json()
    assert len(data["element_styles"]) == 10
    assert data["scale_factor"] == 1.0
    assert data["spacing"]["hero_gap"] == 1.0
    assert 0 <= data["density"] <= 1.7


def test_smart_sizing_with_overflow(client):
    payload = {
        "style": {"heading": "Friday Classes", "layout_style": "grid", "spacing": "compact"},
        "visible_elements": ["className", "instructor", "time", "location"],
        "schedule": SCHEDULE,
        "metrics": {"content_height": 2400, "available_height": 1920, "item_count": 4},
    }
    data = client.post("/smart-sizing", json=payload).json()

    assert data["spacing"]["schedule_gap"] == pytest.approx(0.9125)
    assert data["scale_factor"] == pytest.approx(0.8)
    assert 34 <= data["element_styles"]["heading"]["font_size"] <= 76


def test_smart_sizing_keeps_current_style_fields(client):
    payload = {
        "current_styles": {"time": {"font_size": 22, "line_height": 1.2, "color": "#FF00AA"}},
        "schedule": SCHEDULE,
    }
    data = client.post("/smart-sizing", json=payload).json()
    assert data["element_styles"]["time"]["color"] == "#FF00AA"


def test_smart_sizing_element_meta_override(client):
    baseline = client.post("/smart-sizing", json={}).json()
    payload = {"element_meta": {"heading": {"default_font_size": 70}}}
    data = client.post("/smart-sizing", json=payload).json()

    assert data["element_styles"]["heading"]["font_size"] > baseline["element_styles"]["heading"]["font_size"]


def test_unknown_element_is_rejected(client):
    response = client.post("/smart-sizing", json={"visible_elements": ["className", "coach"]})
    assert response.status_code == 400
    assert "coach" in response.json()["detail"]


def test_unknown_current_style_is_rejected(client):
    response = client.post("/smart-sizing", json={"current_styles": {"banner": {"font_size": 20}}})
    assert response.status_code == 400


def test_unknown_meta_field_is_rejected(client):
    response = client.post("/smart-sizing", json={"element_meta": {"heading": {"font_family": "Inter"}}})
    assert response.status_code == 400


@pytest.mark.parametrize(
    "element_meta",
    [
        {"heading": {"default_font_size": "huge"}},
        {"footer": {"default_line_height": None}},
        {"time": {"default_font_size": -12}},
    ],
)
def test_unusable_meta_values_are_rejected(client, element_meta):
    response = client.post("/smart-sizing", json={"element_meta": element_meta})
    assert response.status_code == 400
    assert "Invalid metadata value" in response.json()["detail"]


def test_font_sizes_are_whole_pixels(client):
    payload = {
        "current_styles": {"heading": {"font_size": 51.3, "line_height": 1.1}},
        "schedule": SCHEDULE,
        "metrics": {"content_height": 2100, "available_height": 1920},
    }
    data = client.post("/smart-sizing", json=payload).json()
    for element_style in data["element_styles"].values():
        assert isinstance(element_style["font_size"], int)


def test_hidden_heading_with_infinite_line_height_gets_default(client):
    body = '{"current_styles": {"heading": {"font_size": 50, "line_height": Infinity}}, "style": {"show_heading": false}}'
    response = client.post("/smart-sizing", content=body, headers={"Content-Type": "application/json"})
    assert response.status_code == 200
    assert response.json()["element_styles"]["heading"]["line_height"] == pytest.approx(1.1)


def test_invalid_payloads_fail_validation(client):
    assert client.post("/smart-sizing", json={"metrics": {"content_height": -5, "available_height": 1920}}).status_code == 422
    assert client.post("/smart-sizing", json={"style": {"layout_style": "masonry"}}).status_code == 422
