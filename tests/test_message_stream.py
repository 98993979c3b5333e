from codeai.agents.main_agent import StreamEvent
from codeai.client.sse import iter_sse_events

CLOUD_CHUNKS = [
    "Here's your landing page:\n\n```html\n<nav>Home</nav>\n",
    "<section class=\"hero\">Hi</section>\n```\n\n",
    "```css\nnav { display: flex; }\n```\n",
]


def send(client, conversation_id, content):
    response = client.post(f"/conversations/{conversation_id}/messages", json={"content": content})
    events = list(iter_sse_events(response.text.splitlines()))
    return response, events


def test_local_mode_delegates_to_client(client, conversation_id):
    response, events = send(client, conversation_id, "Create a contact form with validation")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert response.headers["cache-control"] == "no-cache"
    assert [e.type for e in events] == ["fallback"]
    assert events[0].user_message == "Create a contact form with validation"
    assert '"useLocalEngine": true' in response.text

    messages = client.get(f"/conversations/{conversation_id}").json()["messages"]
    assert [(m["role"], m["content"]) for m in messages] == [
        ("user", "Create a contact form with validation"),
    ]


def test_cloud_reply_streams_and_persists(client, conversation_id, cloud_backend):
    cloud_backend.enabled = True
    cloud_backend.chunks = CLOUD_CHUNKS

    response, events = send(client, conversation_id, "Orbit is a landing page for my startup")

    assert [e.type for e in events] == ["chunk", "chunk", "chunk", "done"]
    assert "".join(e.content for e in events[:-1]) == "".join(CLOUD_CHUNKS)
    assert '"done": true' in response.text

    conversation = client.get(f"/conversations/{conversation_id}").json()
    assert [m["role"] for m in conversation["messages"]] == ["user", "assistant"]
    assert conversation["messages"][1]["content"] == "".join(CLOUD_CHUNKS)
    assert conversation["projectName"] == "Orbit"
    assert conversation["techStack"] == ["HTML", "CSS"]
    assert "Navigation" in conversation["featuresBuilt"]
    assert "Hero Section" in conversation["featuresBuilt"]
    assert conversation["lastCodeGenerated"].startswith("<nav>Home</nav>")

    files = client.get(f"/conversations/{conversation_id}/files").json()
    assert sorted(f["path"] for f in files) == ["index.html", "styles.css"]


def test_history_excludes_latest_message(client, conversation_id, cloud_backend):
    cloud_backend.enabled = True
    cloud_backend.chunks = ["first reply"]
    send(client, conversation_id, "hello")

    cloud_backend.chunks = ["second reply"]
    send(client, conversation_id, "again")

    message, history = cloud_backend.calls[-1]
    assert message == "again"
    assert history == [("user", "hello"), ("assistant", "first reply")]


def test_cloud_failure_before_first_chunk_uses_local_engine(client, conversation_id, cloud_backend):
    cloud_backend.enabled = True
    cloud_backend.chunks = ["never sent"]
    cloud_backend.fail_after = 0

    _, events = send(client, conversation_id, "Create a contact form with validation")

    assert events[-1].type == "done"
    assert all(e.type == "chunk" for e in events[:-1])
    reply = "".join(e.content for e in events[:-1])
    assert reply.startswith("Here's a **Contact Form** for you:")

    messages = client.get(f"/conversations/{conversation_id}").json()["messages"]
    assert messages[-1]["role"] == "assistant"
    assert messages[-1]["content"] == reply


def test_cloud_failure_mid_reply_reports_error(client, conversation_id, cloud_backend):
    cloud_backend.enabled = True
    cloud_backend.chunks = ["partial", "rest"]
    cloud_backend.fail_after = 1

    _, events = send(client, conversation_id, "hello")

    assert [e.type for e in events] == ["chunk", "error"]
    assert events[0].content == "partial"
    assert events[1].error == "The response was interrupted. Please try again."

    messages = client.get(f"/conversations/{conversation_id}").json()["messages"]
    assert [m["role"] for m in messages] == ["user"]


def test_empty_message_rejected(client, conversation_id):
    response = client.post(f"/conversations/{conversation_id}/messages", json={"content": ""})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_message_to_missing_conversation(client):
    response = client.post("/conversations/999/messages", json={"content": "hi"})
    assert response.status_code == 404
    assert response.json() == {"error": "Conversation not found"}


def test_stream_event_payloads():
    assert StreamEvent.chunk("x").to_sse() == 'data: {"type": "chunk", "content": "x"}\n\n'
    assert StreamEvent.done().to_payload() == {"type": "done", "done": True}
    assert StreamEvent.fallback("hi").to_payload() == {
        "type": "fallback",
        "useLocalEngine": True,
        "userMessage": "hi",
    }
    assert StreamEvent.failed("boom").is_terminal
    assert not StreamEvent.chunk("x").is_terminal


def test_unexpected_failure_before_first_chunk_uses_local_engine(client, conversation_id, cloud_backend):
    cloud_backend.enabled = True
    cloud_backend.chunks = ["never sent"]
    cloud_backend.fail_after = 0
    cloud_backend.error = RuntimeError("unexpected SDK failure")

    _, events = send(client, conversation_id, "Create a contact form with validation")

    assert events[-1].type == "done"
    assert "".join(e.content for e in events[:-1]).startswith("Here's a **Contact Form** for you:")


def test_unexpected_failure_mid_reply_reports_error(client, conversation_id, cloud_backend):
    cloud_backend.enabled = True
    cloud_backend.chunks = ["partial", "rest"]
    cloud_backend.fail_after = 1
    cloud_backend.error = RuntimeError("unexpected SDK failure")

    _, events = send(client, conversation_id, "hello")

    assert [e.type for e in events] == ["chunk", "error"]
    assert events[1].error == "The response was interrupted. Please try again."
