from codeai.agents.skills.context_extraction import (
    ProjectContextPatch,
    build_summary,
    extract_project_context,
)


def apply(context, patch):
    """Merge a patch the way ConversationService does."""
    merged = dict(context)
    for key, value in patch.to_dict().items():
        if key in ("tech_stack", "features_built"):
            current = list(merged.get(key) or [])
            value = current + [v for v in value if v not in current]
        merged[key] = value
    return merged


HTML_RESPONSE = (
    "Here's your page:\n\n"
    "```html\n<!DOCTYPE html>\n<html>\n<body>\n<nav class=\"navbar\">Home</nav>\n</body>\n</html>\n```\n"
)


def test_securemage_scenario():
    user = "SecureMage is a cybersecurity monitoring tool"
    patch = extract_project_context(user + "\n" + HTML_RESPONSE, HTML_RESPONSE, None)
    assert patch.project_name == "SecureMage"
    assert "Navigation" in patch.features_built
    assert patch.tech_stack == ["HTML"]
    assert patch.project_summary == "SecureMage - Built with HTML. Features: Navigation"
    assert patch.last_code_generated.startswith("<!DOCTYPE html>")


def test_building_pattern_has_priority():
    content = "We are building a TaskFlow app. Zeta is a codename."
    assert extract_project_context(content, "", None).project_name == "TaskFlow"


def test_is_a_pattern_beats_called_pattern():
    content = "The repo is called Zeta. Alpha is a dashboard for sales."
    assert extract_project_context(content, "", None).project_name == "Alpha"


def test_called_pattern():
    content = "make me something called 'Orbit' please"
    assert extract_project_context(content, "", None).project_name == "Orbit"


def test_sentence_words_are_not_names():
    assert extract_project_context("This is a simple page", "", None).project_name is None


def test_existing_name_is_kept():
    patch = extract_project_context("Nova is a game", "", {"projectName": "Orbit"})
    assert patch.project_name is None


def test_tech_stack_recorded_only_when_it_grows():
    existing = {"tech_stack": ["HTML"]}
    assert extract_project_context("", "plain html here", existing).tech_stack is None

    patch = extract_project_context("", "html with css and React", existing)
    assert patch.tech_stack == ["HTML", "CSS", "React"]


def test_camel_case_existing_context():
    patch = extract_project_context("", "a React widget", {"techStack": ["React"]})
    assert patch.tech_stack is None


def test_feature_table():
    response = "Added a pricing table, a checkout cart, a settings page and a modal dialog."
    patch = extract_project_context("", response, None)
    assert patch.features_built == ["Modals", "Shopping Cart", "Pricing Section", "Settings Panel"]


def test_summary_defaults():
    patch = extract_project_context("", "new pricing section", None)
    assert patch.project_summary == "Project - Built with HTML, CSS, JS. Features: Pricing Section"


def test_build_summary_uses_first_stack_and_last_features():
    summary = build_summary("Acme", ["HTML", "CSS", "JavaScript", "React"], ["A", "B", "C", "D"])
    assert summary == "Acme - Built with HTML, CSS, JavaScript. Features: B, C, D"


def test_last_code_is_truncated():
    response = "```html\n" + ("x" * 6000) + "\n```"
    patch = extract_project_context("", response, None)
    assert len(patch.last_code_generated) == 5000


def test_idempotent_once_stable():
    user = "SecureMage is a cybersecurity monitoring tool"
    content = user + "\n" + HTML_RESPONSE
    context = apply({}, extract_project_context(content, HTML_RESPONSE, {}))

    for _ in range(3):
        patch = extract_project_context(content, HTML_RESPONSE, context)
        assert patch.is_empty()
        context = apply(context, patch)


def test_lists_grow_monotonically():
    responses = [
        "A hero section built with HTML",
        "Now a navbar and a contact form in CSS",
        "Nothing new",
        "A dashboard with charts in JavaScript",
        "The hero again",
    ]
    context = {}
    history = []
    for response in responses:
        context = apply(context, extract_project_context("", response, context))
        history.append((list(context.get("tech_stack") or []), list(context.get("features_built") or [])))

    for (earlier_stack, earlier_features), (later_stack, later_features) in zip(history, history[1:]):
        assert set(earlier_stack) <= set(later_stack)
        assert set(earlier_features) <= set(later_features)
        assert len(later_stack) >= len(earlier_stack)
        assert len(later_features) >= len(earlier_features)


def test_never_raises_on_odd_input():
    assert extract_project_context(None, None, 42).is_empty()


def test_patch_to_dict_is_sparse():
    assert ProjectContextPatch(project_name="X").to_dict() == {"project_name": "X"}


def test_building_pattern_without_article():
    assert extract_project_context("We are building AWSGuard platform", "", None).project_name == "AWSGuard"
    assert extract_project_context("create an Acme app", "", None).project_name == "Acme"
