from __future__ import annotations

import unicodedata

# Unicode categories allowed to start a name (letters, letter numbers) and
# the extra ones allowed after the first character. `$`, `_`, ZWNJ and ZWJ
# are listed separately.
_START_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nl"})
_PART_CATEGORIES = _START_CATEGORIES | {"Nd", "Mn", "Mc", "Pc"}

RESERVED_WORDS = frozenset(
	{
		# Keywords
		"break",
		"case",
		"catch",
		"continue",
		"debugger",
		"default",
		"delete",
		"do",
		"else",
		"finally",
		"for",
		"function",
		"if",
		"in",
		"instanceof",
		"new",
		"return",
		"switch",
		"this",
		"throw",
		"try",
		"typeof",
		"var",
		"void",
		"while",
		"with",
		# Future reserved words
		"class",
		"const",
		"enum",
		"export",
		"extends",
		"import",
		"super",
		"implements",
		"interface",
		"let",
		"package",
		"private",
		"protected",
		"public",
		"static",
		"yield",
		# Literals
		"null",
		"true",
		"false",
	}
)


def is_identifier_name(name: object) -> bool:
	"""True if `name` matches the identifier grammar, reserved words included."""
	if not isinstance(name, str) or not name:
		return False
	first, rest = name[0], name[1:]
	if first not in "$_" and unicodedata.category(first) not in _START_CATEGORIES:
		return False
	return all(
		ch in "$\u200c\u200d" or unicodedata.category(ch) in _PART_CATEGORIES for ch in rest
	)


def is_reserved_word(name: str) -> bool:
	return name in RESERVED_WORDS


def is_valid_identifier(name: object, allow_reserved: bool = False) -> bool:
	if not is_identifier_name(name):
		return False
	return allow_reserved or name not in RESERVED_WORDS
