from __future__ import annotations

import os
from dataclasses import dataclass

ENV_JSGEN_ALLOW_RESERVED_WORDS = "JSGEN_ALLOW_RESERVED_WORDS"
ENV_JSGEN_STATEMENT_SEPARATOR = "JSGEN_STATEMENT_SEPARATOR"

_TRUTHY = {"1", "true", "True", "yes", "on"}


@dataclass(frozen=True, slots=True)
class RenderOptions:
	"""Switches threaded unchanged through every emit call of a render pass.

	allow_reserved_words: identifiers created with `allow_reserved=True` may be
		emitted in value positions. Property positions (`a.default`,
		`{default: 1}`) accept them regardless.
	statement_separator: text written between consecutive statements of a
		script, block or function body. Empty by default, so output is compact.
	"""

	allow_reserved_words: bool = False
	statement_separator: str = ""

	@staticmethod
	def from_env() -> RenderOptions:
		return RenderOptions(
			allow_reserved_words=allow_reserved_words_from_env(),
			statement_separator=statement_separator_from_env(),
		)


DEFAULT_OPTIONS = RenderOptions()


def allow_reserved_words_from_env() -> bool:
	value = os.environ.get(ENV_JSGEN_ALLOW_RESERVED_WORDS)
	if value is None:
		return False
	return value in _TRUTHY


def statement_separator_from_env() -> str:
	raw = os.environ.get(ENV_JSGEN_STATEMENT_SEPARATOR, "")
	if not raw:
		return ""
	# Shells make literal newlines awkward; accept the usual escapes.
	return raw.replace("\\n", "\n").replace("\\t", "\t")
