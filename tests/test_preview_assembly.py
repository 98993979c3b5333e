from codeai.agents.skills.preview_assembly import assemble_preview, merge_code_blocks
from codeai.agents.skills.response_parsing import ParsedFile, parse_code_blocks


def f(path, content):
    return ParsedFile(path=path, content=content, language="")


def test_css_injected_before_head_close():
    files = [f("index.html", "<!DOCTYPE html><html><head></head><body></body></html>"), f("styles.css", "body{color:red}")]
    html = assemble_preview(files)
    assert "<style>\nbody{color:red}\n</style>\n</head>" in html


def test_no_html_file_means_no_preview():
    assert assemble_preview([f("styles.css", "a{}"), f("app.js", "1")]) is None


def test_index_html_preferred():
    files = [f("about.html", "<html>about</html>"), f("index.html", "<html>home</html>")]
    assert "home" in assemble_preview(files)


def test_fragment_is_wrapped_in_boilerplate():
    html = assemble_preview([f("page.html", "<h1>Hi</h1>")])
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Preview</title>" in html
    assert "<body>\n<h1>Hi</h1>\n</body>" in html


def test_css_files_joined_in_order():
    files = [
        f("index.html", "<html><head></head><body></body></html>"),
        f("a.css", "a{}"),
        f("b.css", "b{}"),
    ]
    assert "<style>\na{}\n\nb{}\n</style>" in assemble_preview(files)


def test_css_goes_after_body_open_without_head():
    files = [f("index.html", "<html><body class=\"x\"><p>hi</p></body></html>"), f("s.css", "p{}")]
    html = assemble_preview(files)
    assert '<body class="x">\n<style>\np{}\n</style>' in html


def test_css_prepended_without_head_or_body():
    files = [f("index.html", "<html><p>hi</p></html>"), f("s.css", "p{}")]
    assert assemble_preview(files).startswith("<style>\np{}\n</style>\n<html>")


def test_js_before_body_close_or_appended():
    with_body = assemble_preview([f("index.html", "<html><body></body></html>"), f("app.js", "go()")])
    assert "<script>\ngo()\n</script>\n</body>" in with_body

    without_body = assemble_preview([f("index.html", "<html></html>"), f("app.js", "go()")])
    assert without_body.endswith("</html>\n<script>\ngo()\n</script>")


def test_merge_code_blocks():
    text = "```html\n<html><head></head><body></body></html>\n```\n```css\nh1{}\n```\n```js\nrun()\n```"
    merged = merge_code_blocks(parse_code_blocks(text))
    assert "<style>\nh1{}\n</style>\n</head>" in merged
    assert "<script>\nrun()\n</script>\n</body>" in merged


def test_merge_needs_html_and_assets():
    assert merge_code_blocks(parse_code_blocks("```html\n<p></p>\n```")) is None
    assert merge_code_blocks(parse_code_blocks("```css\np{}\n```")) is None
