import threading

from fastapi.testclient import TestClient

import api

app = api.app


client = TestClient(app)


def test_load_endpoint(model_project):
	resp = client.post(
		"/load", json={"include": [str(model_project)], "require": ["models/*.py"]}
	)
	assert resp.status_code == 200, resp.text
	data = resp.json()
	names = [m["name"] for m in data["facts"]["models"]]
	assert "User" in names and "Post" in names
	kinds = sorted(r["kind"] for r in data["report"]["results"])
	assert kinds == ["loaded", "loaded", "not_found"]


def test_load_endpoint_rejects_bad_config():
	resp = client.post("/load", json={"include": "not-a-list"})
	assert resp.status_code == 422


def test_load_endpoint_reports_fatal_errors(tmp_path, write_file):
	write_file(tmp_path / "boom.py", "raise RuntimeError('boom')\n")
	resp = client.post("/load", json={"include": [str(tmp_path)], "require": ["*.py"]})
	assert resp.status_code == 400
	assert "boom" in resp.json()["detail"]


def test_repeated_loads_do_not_duplicate_models(model_project):
	body = {"include": [str(model_project)], "require": ["models/*.py"]}
	client.post("/load", json=body)
	resp = client.post("/load", json=body)

	names = [m["name"] for m in resp.json()["facts"]["models"]]
	assert sorted(names) == ["Post", "User"]


def test_loads_are_serialized(model_project):
	responses = []
	body = {"include": [str(model_project)], "require": ["models/user.py"]}
	worker = threading.Thread(target=lambda: responses.append(client.post("/load", json=body)))

	with api.load_lock:
		worker.start()
		worker.join(timeout=0.5)
		assert worker.is_alive()
		assert responses == []
	worker.join(timeout=10)

	assert responses[0].status_code == 200
