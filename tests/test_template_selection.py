import pytest

from codeai.agents.skills.template_catalog import (
    CodeTemplate,
    TemplateCatalog,
    build_default_catalog,
    default_catalog,
)
from codeai.agents.skills.response_parsing import parse_code_blocks
from codeai.agents.skills.template_selection import (
    available_templates,
    combine_blocks,
    extract_params,
    format_local_response,
    generate_code,
    is_coding_request,
    score_template,
    select_template,
    suggest_templates,
)


def test_catalog_order_and_default():
    ids = [t.id for t in default_catalog]
    assert len(ids) == 19
    assert ids[0] == "html-basic"
    assert ids[-1] == "html-cyber-terminal"
    assert default_catalog.default.id == "html-basic"


def test_catalog_rejects_duplicate_ids():
    template = default_catalog.get("html-basic")
    with pytest.raises(ValueError):
        TemplateCatalog([template, template], default_id="html-basic")


@pytest.mark.parametrize("template", list(build_default_catalog()), ids=lambda t: t.id)
def test_every_template_generates_with_empty_params(template):
    code = template.generate({})
    assert code.strip()
    assert "{{" not in code


def test_contact_form_scenario():
    match = select_template("Create a contact form with validation")
    assert match.template.id == "html-form"
    code = match.template.generate({})
    assert '<form id="contactForm"' in code


def test_keyword_occurrence_scores_at_least_one():
    for template in default_catalog:
        for keyword in template.keywords:
            assert score_template(template, f"please build {keyword.lower()} now") >= 1


def test_substring_matching_is_loose():
    # "form" is found inside "platform"
    form = default_catalog.get("html-form")
    assert score_template(form, "a platform") == 1


def test_ties_go_to_earlier_template():
    # "grid" belongs to html-card-grid and css-grid; the card grid is declared first
    assert select_template("grid").template.id == "html-card-grid"


def test_no_match_falls_back_to_default():
    match = select_template("zzz qqq")
    assert match.score == 0
    assert match.template.id == "html-basic"


@pytest.mark.parametrize("prompt", ["", "   ", "🙂🙂", "a" * 10000, '"unterminated', "called"])
def test_selection_never_raises(prompt):
    result = generate_code(prompt)
    assert result.code.strip()


def test_selection_is_deterministic():
    prompt = "Build a dashboard with analytics and a modal"
    assert generate_code(prompt) == generate_code(prompt)


def test_extract_params():
    params = extract_params('Make a landing page "Rocket Launch" for a coffee shop app https://api.acme.io/v1')
    assert params["title"] == "Rocket Launch"
    assert params["description"] == "coffee shop"
    assert params["url"] == "https://api.acme.io/v1"


def test_called_name_feeds_react_component():
    result = generate_code("Create a react component called StarRating")
    assert result.template_id == "react-component"
    assert "export function StarRating(" in result.code
    assert result.language == "tsx"


def test_brand_becomes_title():
    result = generate_code("Build a landing page for my startup Nimbus")
    assert result.template_id == "html-landing"


def test_title_is_html_escaped():
    result = generate_code('Create a basic page "<script>alert(1)</script>"')
    assert "<title>&lt;script&gt;alert(1)&lt;/script&gt;</title>" in result.code


def test_fetch_template_uses_url():
    result = generate_code("fetch data from https://api.example.org/items")
    assert result.template_id == "js-fetch"
    assert "const API_BASE = 'https://api.example.org/items';" in result.code


def test_format_local_response_layout():
    response = format_local_response("Create a contact form with validation")
    assert response.startswith("Here's a **Contact Form** for you:\n\n```html\n")
    assert "**Want more? I can also generate:**" in response
    assert response.rstrip().endswith("Just ask!")


def test_format_local_response_without_match_lists_capabilities():
    response = format_local_response("zzz")
    assert "Basic HTML Page" in response
    assert "local mode" in response


def test_suggest_templates_orders_by_score():
    suggestions = suggest_templates("react form with validation", limit=3)
    assert suggestions[0].id == "react-form"
    assert len(suggestions) == 3


def test_available_templates_grouped():
    groups = available_templates()
    assert list(groups) == ["HTML/Web Pages", "JavaScript", "React", "CSS", "Advanced"]
    assert groups["React"][0]["id"] == "react-component"


def test_is_coding_request():
    assert is_coding_request("Build me a navbar")
    assert not is_coding_request("hello there")


def test_custom_catalog_injection():
    only = CodeTemplate(
        id="only",
        name="Only",
        keywords=("widget",),
        description="d",
        language="html",
        category="Custom",
        generator=lambda params: "<p>widget</p>",
    )
    catalog = TemplateCatalog([only], default_id="only")
    assert generate_code("a widget", catalog).code == "<p>widget</p>"


def test_combine_blocks_merges_assets_into_html():
    response = (
        "Here you go:\n\n"
        "```html\n<html><head></head><body><h1>Hi</h1></body></html>\n```\n\n"
        "```css\nh1 { color: red; }\n```\n\n"
        "```javascript\nconsole.log('hi');\n```\n\n"
        "Enjoy!"
    )
    combined = combine_blocks(response)

    blocks = parse_code_blocks(combined)
    assert [b.language for b in blocks] == ["html"]
    assert "<style>\nh1 { color: red; }\n</style>\n</head>" in blocks[0].code
    assert "<script>\nconsole.log('hi');\n</script>\n</body>" in blocks[0].code
    assert combined.startswith("Here you go:")
    assert combined.rstrip().endswith("Enjoy!")


def test_combine_blocks_leaves_single_block_alone():
    response = "Here:\n\n```html\n<p>x</p>\n```\n"
    assert combine_blocks(response) == response
