"""Sanity checks on the in-page scripts (executed for real only in a browser)."""

import pytest

from browser_utils.models import dom_scripts

SCRIPTS = [
    dom_scripts.DETECT_MODEL_CONTROL_SCRIPT,
    dom_scripts.CLICK_CONTROL_BY_TEXT_SCRIPT,
    dom_scripts.CLICK_ELEMENT_BY_TEXT_SCRIPT,
    dom_scripts.PROBE_UI_CAPABILITIES_SCRIPT,
]


@pytest.mark.parametrize("script", SCRIPTS)
def test_scripts_are_single_argument_arrow_functions(script):
    body = script.strip()
    assert body.startswith("({")
    assert "=>" in body.splitlines()[0]
    assert body.count("{") == body.count("}")
    assert body.count("(") == body.count(")")


def test_document_scan_skips_technical_nodes():
    script = dom_scripts.CLICK_ELEMENT_BY_TEXT_SCRIPT
    for tag in ("SCRIPT", "STYLE", "NOSCRIPT", "TEMPLATE", "HEAD"):
        assert f"'{tag}'" in script
    # Clicks the innermost match, never the document root
    assert "'HTML'" in script
    assert "closest(optionSelector)" in script


def test_probe_reports_all_capability_fields():
    script = dom_scripts.PROBE_UI_CAPABILITIES_SCRIPT
    for field in (
        "has_more_affordance",
        "has_reasoning_toggle",
        "dropdown_is_portal",
    ):
        assert field in script
