import pytest

from campuspaths.server import create_app


@pytest.fixture
def client(small_campus):
    app = create_app(small_campus)
    app.config["TESTING"] = True
    return app.test_client()


def test_find_path_json(client):
    response = client.get("/find-path?start=AAA&end=BBB")
    assert response.status_code == 200
    data = response.get_json()
    assert data["cost"] == 15.0
    assert data["start"] == {"x": 0.0, "y": 0.0}
    assert data["path"] == [
        {"start": {"x": 0.0, "y": 0.0}, "end": {"x": 10.0, "y": 0.0}, "cost": 10.0},
        {"start": {"x": 10.0, "y": 0.0}, "end": {"x": 10.0, "y": 10.0}, "cost": 5.0},
    ]


def test_find_path_unreachable_is_null(client):
    response = client.get("/find-path?start=AAA&end=CCC")
    assert response.status_code == 200
    assert response.get_json() is None


def test_find_path_same_building(client):
    response = client.get("/find-path?start=AAA&end=AAA")
    assert response.status_code == 200
    assert response.get_json()["path"] == []


def test_find_path_unknown_building(client):
    response = client.get("/find-path?start=AAA&end=NOPE")
    assert response.status_code == 400
    assert "NOPE" in response.get_json()["error"]


def test_find_path_missing_parameter(client):
    response = client.get("/find-path?start=AAA")
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_valid_buildings(client):
    response = client.get("/get-valid-buildings")
    assert response.status_code == 200
    assert response.get_json() == {
        "AAA": "Alpha Hall",
        "BBB": "Beta Library",
        "CCC": "Gamma Annex",
    }


def test_cors_header(client):
    response = client.get("/get-valid-buildings")
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_create_app_from_bundled_config():
    app = create_app()
    response = app.test_client().get("/get-valid-buildings")
    assert "CSE" in response.get_json()
