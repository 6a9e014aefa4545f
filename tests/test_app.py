import pytest

from main import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def _preset(client, name="perfect"):
    return client.post("/api/tree/preset", json={"preset": name})


def test_index(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b"BST Visualizer" in r.data
    assert b"<svg" in r.data


def test_insert_updates_tree(client):
    r = client.post("/api/op/insert", json={"value": 15})
    assert r.status_code == 200
    data = r.get_json()
    assert data["result"] == {"success": True, "path": [15], "message": "Inserted 15 as root"}
    assert data["is_playing"]
    assert data["current_step"] == 0

    client.post("/api/op/insert", json={"value": "6"})
    assert client.get("/api/state").get_json()["tree"] == [15, 6]


@pytest.mark.parametrize("payload", [{}, {"value": ""}, {"value": "abc"}, {"value": 0}, {"value": 100}, {"value": True}])
def test_invalid_values_are_rejected(client, payload):
    r = client.post("/api/op/insert", json=payload)
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_unknown_operation(client):
    assert client.post("/api/op/balance").status_code == 404


def test_search_and_step_through(client):
    _preset(client)
    data = client.post("/api/op/search", json={"value": 20}).get_json()
    assert data["result"]["found"]
    assert data["total_steps"] == 7

    r = client.post("/api/step/next")
    assert r.get_json()["current_step"] == 1

    end = client.post("/api/step/goto", json={"index": -1}).get_json()
    assert end["is_final"]
    assert end["current_step"] == 6
    assert end["frame"]["highlighted"] == 20

    assert client.post("/api/step/next").status_code == 400

    back = client.post("/api/step/prev").get_json()
    assert back["current_step"] == 5
    assert not back["is_playing"]


def test_goto_out_of_range(client):
    _preset(client)
    client.post("/api/op/find_min")
    assert client.post("/api/step/goto", json={"index": 50}).status_code == 400
    assert client.post("/api/step/goto", json={"index": 2}).get_json()["current_step"] == 2


def test_play_toggles(client):
    _preset(client)
    client.post("/api/op/inorder")
    assert not client.post("/api/step/play").get_json()["is_playing"]
    assert client.post("/api/step/play").get_json()["is_playing"]


def test_step_without_animation(client):
    for route in ("/api/step/next", "/api/step/prev", "/api/step/goto", "/api/step/play"):
        assert client.post(route).status_code == 400


def test_remove_persists(client):
    _preset(client)
    data = client.post("/api/op/remove", json={"value": 15}).get_json()
    assert data["result"]["message"] == "Removed 15 (two children, replaced with 20)"
    assert client.get("/api/state").get_json()["tree"] == [20, 6, 4, 7, 23, 50]
    # playback still walks the pre-removal layout
    frame = client.post("/api/step/goto", json={"index": -1}).get_json()["frame"]
    assert frame["visited"] == [15, 23, 20]


def test_find_min_on_empty_tree(client):
    data = client.post("/api/op/find_min").get_json()
    assert data["result"] == {"value": None, "path": [], "message": "Tree is empty"}
    assert data["is_final"]


def test_clear(client):
    _preset(client)
    data = client.post("/api/tree/clear").get_json()
    assert data["message"] == "Tree cleared"
    state = client.get("/api/state").get_json()
    assert state["tree"] == []
    assert state["animation"] is None


def test_presets(client):
    data = _preset(client, "skewed_right").get_json()
    assert data["values"] == [10, 20, 30, 40, 50]
    assert _preset(client, "zigzag").status_code == 400


def test_speed(client):
    data = client.post("/api/config/speed", json={"speed": 5}).get_json()
    assert data["speed"] == 2.0
    assert data["interval_ms"] == 400
    assert client.post("/api/config/speed", json={"speed": "fast"}).status_code == 400
    assert client.get("/api/state").get_json()["speed"] == 2.0


def test_close_animation(client):
    _preset(client)
    client.post("/api/op/search", json={"value": 4})
    client.post("/api/animation/close")
    state = client.get("/api/state").get_json()
    assert state["animation"] is None
    assert state["message"] == "Ready"
    assert "insert" in state["operations"]


@pytest.mark.parametrize("seed", [{"a": 1}, [1], "7", True, 1.5])
def test_preset_rejects_non_integer_seed(client, seed):
    r = client.post("/api/tree/preset", json={"preset": "random", "seed": seed})
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_preset_accepts_integer_seed(client):
    a = client.post("/api/tree/preset", json={"preset": "random", "seed": 3}).get_json()
    b = client.post("/api/tree/preset", json={"preset": "random", "seed": 3}).get_json()
    assert a["values"] == b["values"]
    assert client.post("/api/tree/preset", json={"preset": "random", "seed": None}).status_code == 200


@pytest.mark.parametrize("index", [True, False, "2", 1.0])
def test_goto_rejects_non_integer_index(client, index):
    _preset(client)
    client.post("/api/op/find_min")
    r = client.post("/api/step/goto", json={"index": index})
    assert r.status_code == 400
    assert client.get("/api/state").get_json()["current_step"] == 0
