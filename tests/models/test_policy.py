import pytest

from models import (
    BANNED_MODEL_PATTERNS,
    BannedNamePolicy,
    BannedPattern,
    is_model_allowed,
)


@pytest.mark.parametrize(
    "name", ["model", "Model", " MODEL ", "sonar", "Sonar", "модель", "МОДЕЛЬ", "modelo", "モデル"]
)
def test_banned_names_rejected(name):
    assert is_model_allowed(name) is False


@pytest.mark.parametrize(
    "name", ["claude-sonnet-4.6", "model-x", "my model", "sonar-pro", "modelos", "", "GPT-5.2"]
)
def test_other_names_allowed(name):
    """Only whole-string matches are banned; substrings stay allowed."""
    assert is_model_allowed(name) is True


def test_builtin_locales():
    locales = {p.locale for p in BANNED_MODEL_PATTERNS}
    assert {"en", "ru", "ja"} <= locales


def test_custom_policy():
    policy = BannedNamePolicy([BannedPattern(word="Preview", locale="en")])
    assert policy.is_banned("preview")
    assert policy.is_allowed("sonar")


def test_pattern_casefold_matching():
    pattern = BannedPattern(word="straße", locale="de")
    assert pattern.matches("STRASSE")
