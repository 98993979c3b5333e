def create_file(client, conversation_id, path="index.html", content="<p>v1</p>", language="html"):
    return client.post(
        f"/conversations/{conversation_id}/files",
        json={"path": path, "content": content, "language": language},
    )


def test_create_and_list(client, conversation_id):
    response = create_file(client, conversation_id)
    assert response.status_code == 201
    body = response.json()
    assert body["conversationId"] == conversation_id
    assert body["path"] == "index.html"

    listed = client.get(f"/conversations/{conversation_id}/files").json()
    assert [f["path"] for f in listed] == ["index.html"]


def test_upsert_by_path_keeps_id(client, conversation_id):
    first = create_file(client, conversation_id, content="<p>v1</p>").json()
    second = create_file(client, conversation_id, content="<p>v2</p>").json()
    assert second["id"] == first["id"]
    assert second["content"] == "<p>v2</p>"
    assert len(client.get(f"/conversations/{conversation_id}/files").json()) == 1


def test_same_path_in_other_conversation(client, conversation_id):
    other = client.post("/conversations", json={}).json()["id"]
    a = create_file(client, conversation_id).json()
    b = create_file(client, other).json()
    assert a["id"] != b["id"]


def test_create_file_validation(client, conversation_id):
    response = client.post(f"/conversations/{conversation_id}/files", json={"path": "a.js"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_files_for_missing_conversation(client):
    assert create_file(client, 999).status_code == 404


def test_update_file(client, conversation_id):
    file_id = create_file(client, conversation_id).json()["id"]
    response = client.put(f"/files/{file_id}", json={"content": "<p>edited</p>"})
    assert response.status_code == 200
    assert response.json()["content"] == "<p>edited</p>"


def test_update_missing_file(client):
    response = client.put("/files/999", json={"content": "x"})
    assert response.status_code == 404
    assert response.json() == {"error": "File not found"}


def test_invalid_file_id(client):
    response = client.put("/files/nope", json={"content": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid file ID"}


def test_delete_file(client, conversation_id):
    file_id = create_file(client, conversation_id).json()["id"]
    assert client.delete(f"/files/{file_id}").status_code == 204
    assert client.get(f"/conversations/{conversation_id}/files").json() == []


def test_bulk_skips_incomplete_entries(client, conversation_id):
    response = client.post(
        f"/conversations/{conversation_id}/files/bulk",
        json={"files": [
            {"path": "index.html", "content": "<p></p>", "language": "html"},
            {"path": "styles.css", "content": "p{}"},
            {"content": "orphan", "language": "javascript"},
            {"path": "script.js", "content": "go()", "language": "javascript"},
        ]},
    )
    assert response.status_code == 201
    assert [f["path"] for f in response.json()] == ["index.html", "script.js"]


def test_bulk_upserts_existing_paths(client, conversation_id):
    original = create_file(client, conversation_id).json()
    response = client.post(
        f"/conversations/{conversation_id}/files/bulk",
        json={"files": [{"path": "index.html", "content": "<p>bulk</p>", "language": "html"}]},
    )
    saved = response.json()
    assert saved[0]["id"] == original["id"]
    assert saved[0]["content"] == "<p>bulk</p>"
