from codeai.agents.skills.response_parsing import (
    extract_files_from_response,
    language_for_path,
    parse_code_blocks,
    parse_project_files,
)

MULTI_FILE = """Here is the project.

--- FILE: index.html ---
<html><body></body></html>

--- FILE: src/app.js ---
console.log('hi');

--- FILE: styles/main.css ---
body { margin: 0; }
"""


def test_parse_code_blocks():
    blocks = parse_code_blocks("intro\n```html\n<p>x</p>\n```\ntext\n```\nplain\n```")
    assert [(b.language, b.code) for b in blocks] == [("html", "<p>x</p>"), ("text", "plain")]


def test_parse_project_files():
    files = parse_project_files(MULTI_FILE)
    assert [(p.path, p.language) for p in files] == [
        ("index.html", "html"),
        ("src/app.js", "javascript"),
        ("styles/main.css", "css"),
    ]
    assert files[1].content == "console.log('hi');"


def test_single_marker_is_not_a_project():
    assert parse_project_files("--- FILE: index.html ---\n<p></p>") is None


def test_empty_files_dropped():
    text = "--- FILE: a.js ---\n\n--- FILE: b.js ---\nb()"
    assert parse_project_files(text) is None


def test_language_for_path():
    assert language_for_path("App.tsx") == "typescript"
    assert language_for_path("notes.md") == "markdown"
    assert language_for_path("main.py") == "python"
    assert language_for_path("Dockerfile.prod") == "prod"


def test_extract_files_prefers_markers():
    assert len(extract_files_from_response(MULTI_FILE)) == 3


def test_extract_files_from_blocks():
    text = "```html\n<p>a</p>\n```\n```css\np{}\n```\n```javascript\nx()\n```\n```js\ny()\n```"
    files = extract_files_from_response(text)
    assert [(p.path, p.content) for p in files] == [
        ("index.html", "<p>a</p>"),
        ("styles.css", "p{}"),
        ("script.js", "x()\n\ny()"),
    ]


def test_no_html_block_no_files():
    assert extract_files_from_response("```css\np{}\n```") == []
