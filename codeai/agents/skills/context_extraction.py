"""
Context Extraction Skill

Infers "project memory" (name, tech stack, features, summary, last HTML
generated) from conversation text. Pure: the caller persists the patch.

Once the inputs stop changing, a repeated call returns an empty patch, and
tech_stack / features_built only ever grow.
"""

import re
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from codeai.agents.skills.response_parsing import first_code_block

logger = logging.getLogger(__name__)

MAX_LAST_CODE_LENGTH = 5000

PROJECT_NAME_PATTERNS = [
    # "building a SecureMage platform", "create an Acme app"
    re.compile(
        r"(?i:building|create|making|develop)\s+(?:(?i:an?)\s+)?[\"']?([A-Z][A-Za-z0-9]+)[\"']?"
        r"\s+(?i:app|website|dashboard|platform|tool|system)"
    ),
    # "SecureMage is a ...", "Acme will be ..."
    re.compile(r"[\"']?([A-Z][A-Za-z0-9]+)[\"']?\s+(?:is a|will be)"),
    # "called SecureMage", "named 'Acme'"
    re.compile(r"(?i:called|named)\s+[\"']?([A-Z][A-Za-z0-9]+)[\"']?"),
]

# Sentence-initial words that are never project names. Skipping them lets a
# later match of the same pattern win; see "Project-name false positives" in
# DESIGN.md.
NAME_STOPWORDS = {"This", "That", "It", "Here", "There", "What", "Which", "Who", "The", "Mine"}

TECH_VOCABULARY: List[Tuple[str, re.Pattern]] = [
    ("HTML", re.compile(r"\bhtml\b", re.IGNORECASE)),
    ("CSS", re.compile(r"\bcss\b", re.IGNORECASE)),
    ("JavaScript", re.compile(r"\bjavascript\b", re.IGNORECASE)),
    ("React", re.compile(r"\breact\b", re.IGNORECASE)),
    ("TypeScript", re.compile(r"\btypescript\b", re.IGNORECASE)),
    ("Node.js", re.compile(r"\bnode\.?js\b", re.IGNORECASE)),
    ("Express", re.compile(r"\bexpress\b", re.IGNORECASE)),
    ("Tailwind", re.compile(r"\btailwind", re.IGNORECASE)),
    ("Bootstrap", re.compile(r"\bbootstrap\b", re.IGNORECASE)),
]

FEATURE_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"<nav\b|\bnav(?:bar|igation)?\b", re.IGNORECASE), "Navigation"),
    (re.compile(r"<form\b|<input\b|\bforms?\b|\binputs?\b", re.IGNORECASE), "Forms"),
    (re.compile(r"\bdashboard", re.IGNORECASE), "Dashboard"),
    (re.compile(r"\bcharts?\b|\bgraphs?\b", re.IGNORECASE), "Charts/Analytics"),
    (re.compile(r"\bmodals?\b|\bdialogs?\b", re.IGNORECASE), "Modals"),
    (re.compile(r"\bcart\b|\bcheckout\b", re.IGNORECASE), "Shopping Cart"),
    (re.compile(r"\bhero\b|\blanding\b", re.IGNORECASE), "Hero Section"),
    (re.compile(r"\bpricing\b", re.IGNORECASE), "Pricing Section"),
    (re.compile(r"\bterminal\b|\bconsole\b", re.IGNORECASE), "Terminal Display"),
    (re.compile(r"\bsettings\b|\bpreferences\b", re.IGNORECASE), "Settings Panel"),
]

_CAMEL_KEYS = {
    "projectName": "project_name",
    "projectDescription": "project_description",
    "techStack": "tech_stack",
    "featuresBuilt": "features_built",
    "projectSummary": "project_summary",
    "lastCodeGenerated": "last_code_generated",
}


@dataclass
class ProjectContextPatch:
    """Sparse context update; None means "leave unchanged"."""
    project_name: Optional[str] = None
    project_description: Optional[str] = None
    tech_stack: Optional[List[str]] = None
    features_built: Optional[List[str]] = None
    project_summary: Optional[str] = None
    last_code_generated: Optional[str] = None

    def is_empty(self) -> bool:
        return all(value is None for value in asdict(self).values())

    def to_dict(self) -> Dict[str, Any]:
        """Only the fields that are set."""
        return {key: value for key, value in asdict(self).items() if value is not None}


def context_snapshot(existing: Any) -> ProjectContextPatch:
    """
    Normalize an existing context into a ProjectContextPatch.

    Accepts a Conversation row, a ProjectContextPatch, a mapping with
    snake_case or camelCase keys, or None.
    """
    if existing is None:
        return ProjectContextPatch()
    if isinstance(existing, ProjectContextPatch):
        return existing

    values = {}
    for field_name in ProjectContextPatch.__dataclass_fields__:
        if isinstance(existing, Mapping):
            value = existing.get(field_name)
        else:
            value = getattr(existing, field_name, None)
        values[field_name] = value
    if isinstance(existing, Mapping):
        for camel, snake in _CAMEL_KEYS.items():
            if values.get(snake) is None and existing.get(camel) is not None:
                values[snake] = existing[camel]
    return ProjectContextPatch(**values)


def find_project_name(all_content: str) -> Optional[str]:
    """First pattern family with a usable match wins."""
    for pattern in PROJECT_NAME_PATTERNS:
        for match in pattern.finditer(all_content):
            name = match.group(1)
            if name not in NAME_STOPWORDS:
                return name
    return None


def merge_ordered(existing: Optional[List[str]], additions: List[str]) -> List[str]:
    """Union preserving first-seen order."""
    merged = list(existing or [])
    for item in additions:
        if item not in merged:
            merged.append(item)
    return merged


def build_summary(name: Optional[str], tech_stack: List[str], features: List[str]) -> str:
    stack = ", ".join(tech_stack[:3]) if tech_stack else "HTML, CSS, JS"
    built = ", ".join(features[-3:]) if features else "In progress"
    return f"{name or 'Project'} - Built with {stack}. Features: {built}"


def _extract(all_content: str, latest_response: str, existing: ProjectContextPatch) -> ProjectContextPatch:
    patch = ProjectContextPatch()

    if not existing.project_name:
        patch.project_name = find_project_name(all_content)

    current_stack = list(existing.tech_stack or [])
    found_stack = [label for label, pattern in TECH_VOCABULARY if pattern.search(latest_response)]
    merged_stack = merge_ordered(current_stack, found_stack)
    if len(merged_stack) > len(current_stack):
        patch.tech_stack = merged_stack

    current_features = list(existing.features_built or [])
    found_features = [label for pattern, label in FEATURE_PATTERNS if pattern.search(latest_response)]
    merged_features = merge_ordered(current_features, found_features)
    if len(merged_features) > len(current_features):
        patch.features_built = merged_features

    if patch.project_name or patch.features_built:
        patch.project_summary = build_summary(
            patch.project_name or existing.project_name,
            merged_stack,
            merged_features,
        )

    html = first_code_block(latest_response, "html")
    if html:
        html = html[:MAX_LAST_CODE_LENGTH]
        if html != existing.last_code_generated:
            patch.last_code_generated = html

    return patch


def extract_project_context(all_content: str, latest_response: str, existing: Any = None) -> ProjectContextPatch:
    """
    Compute a context patch from the conversation so far.

    Never raises: unexpected input is treated as "nothing found".
    """
    try:
        return _extract(all_content or "", latest_response or "", context_snapshot(existing))
    except Exception as e:
        logger.error(f"Context extraction failed: {str(e)}", exc_info=True)
        return ProjectContextPatch()
