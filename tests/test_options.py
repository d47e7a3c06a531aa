import pytest
from jsgen.options import (
	DEFAULT_OPTIONS,
	ENV_JSGEN_ALLOW_RESERVED_WORDS,
	ENV_JSGEN_STATEMENT_SEPARATOR,
	RenderOptions,
)


def test_defaults():
	assert DEFAULT_OPTIONS == RenderOptions()
	assert DEFAULT_OPTIONS.allow_reserved_words is False
	assert DEFAULT_OPTIONS.statement_separator == ""


def test_options_are_read_only():
	with pytest.raises(AttributeError):
		DEFAULT_OPTIONS.statement_separator = "\n"  # pyright: ignore[reportAttributeAccessIssue]


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.delenv(ENV_JSGEN_ALLOW_RESERVED_WORDS, raising=False)
	monkeypatch.delenv(ENV_JSGEN_STATEMENT_SEPARATOR, raising=False)
	assert RenderOptions.from_env() == RenderOptions()


@pytest.mark.parametrize(
	("raw", "expected"),
	[("1", True), ("true", True), ("yes", True), ("0", False), ("false", False)],
)
def test_allow_reserved_words_from_env(
	monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
):
	monkeypatch.setenv(ENV_JSGEN_ALLOW_RESERVED_WORDS, raw)
	assert RenderOptions.from_env().allow_reserved_words is expected


def test_statement_separator_escapes(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv(ENV_JSGEN_STATEMENT_SEPARATOR, "\\n")
	assert RenderOptions.from_env().statement_separator == "\n"
