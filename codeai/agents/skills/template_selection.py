"""
Template Selection Skill

Scores a free-text prompt against the template catalog, extracts template
parameters and formats the local engine's chat reply.

Scoring is a plain substring count over the lowercased prompt, so "form"
also matches "platform". Ties go to the template declared first.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from codeai.agents.skills.template_catalog import CodeTemplate, TemplateCatalog, default_catalog
from codeai.agents.skills.response_parsing import parse_code_blocks
from codeai.agents.skills.preview_assembly import merge_code_blocks

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r'"([^"]+)"')
NAME_PATTERN = re.compile(r"(?:called|named)\s+[\"']?([A-Za-z]\w*)", re.IGNORECASE)
DESCRIPTION_PATTERN = re.compile(r"for\s+(?:a\s+)?(.+?)(?:\s+page|\s+site|\s+app|\.|$)", re.IGNORECASE)
URL_PATTERN = re.compile(r"(https?://[^\s]+)")
BRAND_PATTERN = re.compile(r"(?:for|my|our)\s+(?:company\s+)?[\"']?([A-Z][a-zA-Z]+)")

CODING_KEYWORDS = (
    "code", "create", "build", "make", "generate", "write", "html", "css",
    "javascript", "js", "react", "component", "function", "page", "website",
    "app", "form", "button", "layout", "style", "api", "fetch", "hook",
    "animation", "navbar", "dashboard", "landing", "todo", "grid", "flex",
    "modal", "card", "terminal",
)

TEMPLATE_TIPS: Dict[str, str] = {
    "html-basic": "Add your content inside the `<main>` section and tweak the CSS variables to change the theme.",
    "html-landing": "Replace the hero text and feature cards with your own copy. The colors live in the `:root` variables.",
    "html-form": "The form validates on blur and on submit. Hook the submit handler up to your backend to send real data.",
    "html-card-grid": "The grid uses `auto-fill` so cards reflow automatically on any screen size.",
    "html-navbar": "Below 768px the links collapse into a hamburger menu.",
    "html-dashboard": "Stat counters animate on load. Swap the sample numbers for live data from your API.",
    "js-fetch": "Change `API_BASE` to your endpoint. Errors carry the HTTP status and response body.",
    "js-localstorage": "Pass a TTL in milliseconds to `Storage.set` to make values expire.",
    "js-debounce": "Use debounce for input handlers and throttle for scroll or resize events.",
    "js-form-validation": "Compose rules per field; the first failing rule's message is reported.",
    "js-todo-app": "Todos persist in localStorage, so they survive page reloads.",
    "react-component": "Props are fully typed. Pass `onChange` to observe value updates.",
    "react-form": "Errors clear as soon as the user edits a field.",
    "react-modal": "The modal renders in a portal, closes on Escape and restores focus when closed.",
    "react-fetch-hook": "In-flight requests are aborted when the URL changes or the component unmounts.",
    "css-flexbox": "Combine these utility classes to build most common layouts.",
    "css-grid": "The named-area layout collapses to a single column on small screens.",
    "css-animations": "Animations respect `prefers-reduced-motion` automatically.",
    "html-cyber-terminal": "Edit the `lines` array to change what the terminal types out.",
}

CAPABILITIES_TEXT = """I'm running in **local mode** with a built-in template engine. I can generate:

**HTML/Web Pages:** landing pages, forms, card grids, navigation bars, dashboards
**JavaScript:** fetch requests, localStorage helpers, debounce/throttle, form validation, todo apps
**React:** components, forms, modals, custom hooks
**CSS:** flexbox and grid layouts, animations

Try something like *"Create a landing page for my startup"* or *"Build a React modal"*."""


@dataclass
class TemplateMatch:
    """Best-fit template for a prompt."""
    template: CodeTemplate
    score: int
    params: Dict[str, str] = field(default_factory=dict)
    tokens: List[str] = field(default_factory=list)


@dataclass
class GenerationResult:
    """Generated code and the template that produced it."""
    code: str
    language: str
    template_id: str
    template_name: str
    score: int


def normalize_prompt(prompt: str) -> str:
    return (prompt or "").lower()


def tokenize(prompt: str) -> List[str]:
    return re.findall(r"\w+", normalize_prompt(prompt))


def score_template(template: CodeTemplate, normalized_prompt: str) -> int:
    """Number of keywords that occur as substrings of the prompt."""
    return sum(1 for keyword in template.keywords if keyword.lower() in normalized_prompt)


def extract_params(prompt: str) -> Dict[str, str]:
    """
    Pull template parameters out of the prompt.

    title: first double-quoted string, else a called/named identifier,
    else a capitalized brand after for/my/our.
    name: called/named identifier.
    description: the phrase after "for [a]".
    url: first http(s) URL.
    """
    prompt = prompt or ""
    params: Dict[str, str] = {}

    title = TITLE_PATTERN.search(prompt)
    name = NAME_PATTERN.search(prompt)
    brand = BRAND_PATTERN.search(prompt)
    if title:
        params["title"] = title.group(1)
    elif name:
        params["title"] = name.group(1)
    elif brand:
        params["title"] = brand.group(1)

    if name:
        params["name"] = name.group(1)

    description = DESCRIPTION_PATTERN.search(prompt)
    if description and description.group(1).strip():
        params["description"] = description.group(1).strip()

    url = URL_PATTERN.search(prompt)
    if url:
        params["url"] = url.group(1)

    return params


def rank_templates(prompt: str, catalog: TemplateCatalog = default_catalog) -> List[TemplateMatch]:
    """All templates ordered by score descending, declaration order on ties."""
    normalized = normalize_prompt(prompt)
    scored = [
        (score_template(template, normalized), index, template)
        for index, template in enumerate(catalog)
    ]
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [TemplateMatch(template=t, score=s) for s, _, t in scored]


def select_template(prompt: str, catalog: TemplateCatalog = default_catalog) -> TemplateMatch:
    """Pick the best template; a zero score falls back to the catalog default."""
    best = rank_templates(prompt, catalog)[0]
    template = best.template if best.score > 0 else catalog.default
    return TemplateMatch(
        template=template,
        score=best.score,
        params=extract_params(prompt),
        tokens=tokenize(prompt),
    )


def generate_code(prompt: str, catalog: TemplateCatalog = default_catalog) -> GenerationResult:
    """Generate code for a prompt. Deterministic and never raises."""
    match = select_template(prompt, catalog)
    try:
        code = match.template.generate(match.params)
    except Exception as e:
        logger.error(f"Template {match.template.id} failed, using default: {str(e)}", exc_info=True)
        match = TemplateMatch(template=catalog.default, score=match.score)
        code = catalog.default.generate({})

    return GenerationResult(
        code=code,
        language=match.template.language,
        template_id=match.template.id,
        template_name=match.template.name,
        score=match.score,
    )


def suggest_templates(prompt: str, limit: int = 3, catalog: TemplateCatalog = default_catalog) -> List[CodeTemplate]:
    """Top matching templates with a positive score."""
    return [m.template for m in rank_templates(prompt, catalog) if m.score > 0][:limit]


def available_templates(catalog: TemplateCatalog = default_catalog) -> Dict[str, List[Dict[str, str]]]:
    """Catalog summary grouped by category."""
    return {
        category: [
            {"id": t.id, "name": t.name, "description": t.description}
            for t in templates
        ]
        for category, templates in catalog.by_category().items()
    }


def is_coding_request(prompt: str) -> bool:
    normalized = normalize_prompt(prompt)
    return any(keyword in normalized for keyword in CODING_KEYWORDS)


def format_local_response(prompt: str, catalog: TemplateCatalog = default_catalog) -> str:
    """
    Chat reply produced by the local engine.

    Layout: heading naming the template, fenced code block, a usage tip,
    then up to three alternative templates. Prompts that match nothing get
    the default template followed by an overview of what can be generated.
    """
    result = generate_code(prompt, catalog)

    response = f"Here's a **{result.template_name}** for you:\n\n"
    response += f"```{result.language}\n{result.code}\n```\n\n"

    tip = TEMPLATE_TIPS.get(result.template_id)
    if tip:
        response += f"**Tip:** {tip}\n\n"

    if result.score == 0:
        response += CAPABILITIES_TEXT
    else:
        alternatives = [
            t for t in suggest_templates(prompt, limit=4, catalog=catalog)
            if t.id != result.template_id
        ][:3]
        if alternatives:
            response += "**Want more? I can also generate:**\n"
            response += "".join(f"- {t.name}: {t.description}\n" for t in alternatives)
            response += "\nJust ask!"

    return combine_blocks(response.rstrip())


def combine_blocks(response: str) -> str:
    """
    Merge an HTML block with sibling CSS/JS blocks into one previewable
    document. Responses with a single block are returned unchanged.
    """
    blocks = parse_code_blocks(response)
    merged = merge_code_blocks(blocks)
    if merged is None:
        return response
    html_block = next(b for b in blocks if b.language == "html")
    response = response.replace(html_block.raw, f"```html\n{merged}\n```", 1)
    for block in blocks:
        if block.language in ("css", "javascript"):
            response = response.replace(block.raw, "", 1)
    return response

