"""
Response Parsing Skill

Pulls fenced code blocks and named project files out of assistant
responses so they can be persisted as ProjectFiles.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

CODE_BLOCK_PATTERN = re.compile(r"```(\w+)?\n([\s\S]*?)```")
FILE_MARKER_PATTERN = re.compile(r"---\s*FILE:\s*([^\s]+)\s*---", re.IGNORECASE)

EXTENSION_LANGUAGES = {
    "js": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "jsx": "javascript",
    "css": "css",
    "html": "html",
    "json": "json",
    "md": "markdown",
    "py": "python",
}

# Fence tags that name the same language
LANGUAGE_ALIASES = {
    "js": "javascript",
    "htm": "html",
}


@dataclass
class CodeBlock:
    """A fenced code block; raw is the block exactly as it appeared."""
    language: str
    code: str
    raw: str


@dataclass
class ParsedFile:
    path: str
    content: str
    language: str


def parse_code_blocks(text: str) -> List[CodeBlock]:
    """Fenced ```lang blocks in order of appearance; untagged blocks get "text"."""
    blocks = []
    for match in CODE_BLOCK_PATTERN.finditer(text or ""):
        language = (match.group(1) or "text").lower()
        blocks.append(CodeBlock(
            language=LANGUAGE_ALIASES.get(language, language),
            code=match.group(2).rstrip("\n"),
            raw=match.group(0),
        ))
    return blocks


def language_for_path(path: str) -> str:
    """Language name from the file extension, or the bare extension."""
    extension = path.rsplit(".", 1)[-1].lower() if "." in path else "text"
    return EXTENSION_LANGUAGES.get(extension, extension)


def parse_project_files(text: str) -> Optional[List[ParsedFile]]:
    """
    Split a response on "--- FILE: path ---" markers.

    Each file runs from its marker to the next one (or the end of the
    text), trimmed. Empty files are dropped. Returns None unless at least
    two non-empty files remain.
    """
    text = text or ""
    markers = list(FILE_MARKER_PATTERN.finditer(text))
    if len(markers) < 2:
        return None

    files = []
    for index, marker in enumerate(markers):
        end = markers[index + 1].start() if index + 1 < len(markers) else len(text)
        content = text[marker.end():end].strip()
        if content:
            path = marker.group(1)
            files.append(ParsedFile(path=path, content=content, language=language_for_path(path)))

    return files if len(files) >= 2 else None


def extract_files_from_response(text: str) -> List[ParsedFile]:
    """
    Project files contained in a response.

    Marker-delimited files win. Otherwise an html block plus any css and
    javascript blocks become index.html, styles.css and script.js; blocks
    of the same language are joined with a blank line. A response without
    an html block yields no files.
    """
    files = parse_project_files(text)
    if files:
        return files

    blocks = parse_code_blocks(text)
    by_language = {}
    for block in blocks:
        if block.language in ("html", "css", "javascript"):
            by_language.setdefault(block.language, []).append(block.code)

    if "html" not in by_language:
        return []

    files = [ParsedFile(path="index.html", content="\n\n".join(by_language["html"]), language="html")]
    if "css" in by_language:
        files.append(ParsedFile(path="styles.css", content="\n\n".join(by_language["css"]), language="css"))
    if "javascript" in by_language:
        files.append(ParsedFile(path="script.js", content="\n\n".join(by_language["javascript"]), language="javascript"))
    return files


def first_code_block(text: str, language: str) -> Optional[str]:
    """Content of the first block tagged with the given language."""
    for block in parse_code_blocks(text):
        if block.language == language:
            return block.code
    return None
