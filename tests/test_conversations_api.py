def test_health_reports_local_mode(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "aiMode": "local",
        "message": "Local template engine active",
    }


def test_health_reports_cloud_mode(client, cloud_backend):
    cloud_backend.enabled = True
    body = client.get("/api/health").json()
    assert body["aiMode"] == "cloud"
    assert body["message"] == "Cloud AI ready"


def test_create_conversation_defaults_title(client):
    response = client.post("/conversations", json={})
    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "New Chat"
    assert body["techStack"] == []
    assert body["featuresBuilt"] == []
    assert "createdAt" in body


def test_create_conversation_without_body(client):
    assert client.post("/conversations").status_code == 201


def test_create_conversation_validates_title(client):
    response = client.post("/conversations", json={"title": "x" * 201})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request body"
    assert body["details"]

    assert client.post("/conversations", json={"title": ""}).status_code == 400


def test_list_newest_first(client):
    first = client.post("/conversations", json={"title": "first"}).json()
    second = client.post("/conversations", json={"title": "second"}).json()
    ids = [c["id"] for c in client.get("/conversations").json()]
    assert ids.index(second["id"]) < ids.index(first["id"])


def test_get_conversation(client, conversation_id):
    response = client.get(f"/conversations/{conversation_id}")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == conversation_id
    assert body["messages"] == []


def test_missing_conversation_is_404(client):
    response = client.get("/conversations/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Conversation not found"}


def test_invalid_id_is_400(client):
    response = client.get("/conversations/abc")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid conversation ID"}


def test_routes_also_served_under_api_prefix(client, conversation_id):
    assert client.get(f"/api/conversations/{conversation_id}").status_code == 200


def test_delete_cascades(client, conversation_id):
    client.post(f"/conversations/{conversation_id}/messages", json={"content": "hello"})
    client.post(
        f"/conversations/{conversation_id}/files",
        json={"path": "index.html", "content": "<p></p>", "language": "html"},
    )

    assert client.delete(f"/conversations/{conversation_id}").status_code == 204
    assert client.get(f"/conversations/{conversation_id}").status_code == 404
    assert client.get(f"/conversations/{conversation_id}/files").status_code == 404


def test_update_context_merges(client, conversation_id):
    response = client.put(
        f"/conversations/{conversation_id}/context",
        json={"projectName": "Orbit", "techStack": ["HTML", "CSS"]},
    )
    assert response.status_code == 200
    assert response.json()["projectName"] == "Orbit"

    response = client.put(
        f"/conversations/{conversation_id}/context",
        json={"tech_stack": ["CSS", "React"], "featuresBuilt": ["Navigation"]},
    )
    body = response.json()
    assert body["projectName"] == "Orbit"
    assert body["techStack"] == ["HTML", "CSS", "React"]
    assert body["featuresBuilt"] == ["Navigation"]


def test_update_context_missing_conversation(client):
    response = client.put("/conversations/999/context", json={"projectName": "X"})
    assert response.status_code == 404


def test_preview(client, conversation_id):
    assert client.get(f"/conversations/{conversation_id}/preview").status_code == 404

    client.post(
        f"/conversations/{conversation_id}/files/bulk",
        json={"files": [
            {"path": "index.html", "content": "<html><head></head><body></body></html>", "language": "html"},
            {"path": "styles.css", "content": "body{color:red}", "language": "css"},
        ]},
    )
    response = client.get(f"/conversations/{conversation_id}/preview")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<style>\nbody{color:red}\n</style>\n</head>" in response.text
