"""
Preview Assembly Skill

Builds one self-contained HTML document from a project's HTML, CSS and JS
files so the whole project can be rendered in a single sandboxed frame.
"""

import re
from typing import Any, Iterable, List, Optional

BOILERPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Preview</title>
</head>
<body>
{body}
</body>
</html>"""

BODY_OPEN_PATTERN = re.compile(r"<body[^>]*>", re.IGNORECASE)


def _pick_html(files: List[Any]) -> Optional[Any]:
    for f in files:
        if f.path.lower().endswith("index.html"):
            return f
    for f in files:
        if f.path.lower().endswith(".html"):
            return f
    return None


def inject_assets(html: str, css: List[str], js: List[str]) -> str:
    """Inline stylesheets and scripts into an HTML document."""
    if "<!DOCTYPE" not in html and "<html" not in html:
        html = BOILERPLATE.format(body=html)

    if css:
        style_tag = "<style>\n" + "\n\n".join(css) + "\n</style>"
        if "</head>" in html:
            html = html.replace("</head>", f"{style_tag}\n</head>", 1)
        elif BODY_OPEN_PATTERN.search(html):
            html = BODY_OPEN_PATTERN.sub(lambda m: f"{m.group(0)}\n{style_tag}", html, count=1)
        else:
            html = f"{style_tag}\n{html}"

    if js:
        script_tag = "<script>\n" + "\n\n".join(js) + "\n</script>"
        if "</body>" in html:
            html = html.replace("</body>", f"{script_tag}\n</body>", 1)
        else:
            html = f"{html}\n{script_tag}"

    return html


def assemble_preview(files: Iterable[Any]) -> Optional[str]:
    """
    Combined preview for a set of files (anything with path and content).

    The HTML file is index.html if present, else the first .html file.
    Returns None when there is no HTML file.
    """
    files = list(files)
    html_file = _pick_html(files)
    if html_file is None:
        return None

    css = [f.content for f in files if f.path.lower().endswith(".css")]
    js = [f.content for f in files if f.path.lower().endswith(".js")]
    return inject_assets(html_file.content, css, js)


def merge_code_blocks(blocks: Iterable[Any]) -> Optional[str]:
    """
    Merge the first html block with all css and javascript blocks.

    Returns None unless there is an html block and at least one css or
    javascript block to fold into it.
    """
    blocks = list(blocks)
    html = next((b.code for b in blocks if b.language == "html"), None)
    css = [b.code for b in blocks if b.language == "css"]
    js = [b.code for b in blocks if b.language == "javascript"]
    if html is None or not (css or js):
        return None
    return inject_assets(html, css, js)
