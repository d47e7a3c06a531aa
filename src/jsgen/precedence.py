"""Operator precedence and automatic grouping.

Levels run from 1 (comma, binds loosest) to 16 (atomic: literals, identifiers,
member access, calls). A child expression embedded in a parent is wrapped in
parentheses when its level is lower than the parent's, or when it is equal and
sits on the side the parent's associativity would re-associate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Associativity(Enum):
	LEFT_TO_RIGHT = "ltr"
	RIGHT_TO_LEFT = "rtl"


class Position(Enum):
	"""Where a child sits relative to its parent operator."""

	LEFT = "left"
	RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Precedence:
	level: int
	associativity: Associativity = Associativity.LEFT_TO_RIGHT


LTR = Associativity.LEFT_TO_RIGHT
RTL = Associativity.RIGHT_TO_LEFT

ATOMIC = Precedence(16, LTR)
POSTFIX = Precedence(15, LTR)
PREFIX = Precedence(14, RTL)
CONDITIONAL = Precedence(3, RTL)
ASSIGNMENT = Precedence(2, RTL)
COMMA = Precedence(1, LTR)

BINARY_PRECEDENCE: dict[str, Precedence] = {
	# Multiplicative
	"*": Precedence(13, LTR),
	"/": Precedence(13, LTR),
	"%": Precedence(13, LTR),
	# Additive
	"+": Precedence(12, LTR),
	"-": Precedence(12, LTR),
	# Shift
	"<<": Precedence(11, LTR),
	">>": Precedence(11, LTR),
	">>>": Precedence(11, LTR),
	# Relational
	"<": Precedence(10, LTR),
	"<=": Precedence(10, LTR),
	">": Precedence(10, LTR),
	">=": Precedence(10, LTR),
	"in": Precedence(10, LTR),
	"instanceof": Precedence(10, LTR),
	# Equality
	"==": Precedence(9, LTR),
	"!=": Precedence(9, LTR),
	"===": Precedence(9, LTR),
	"!==": Precedence(9, LTR),
	# Bitwise
	"&": Precedence(8, LTR),
	"^": Precedence(7, LTR),
	"|": Precedence(6, LTR),
	# Logical
	"&&": Precedence(5, LTR),
	"||": Precedence(4, LTR),
	# Assignment (right-assoc)
	"=": ASSIGNMENT,
	"+=": ASSIGNMENT,
	"-=": ASSIGNMENT,
	"*=": ASSIGNMENT,
	"/=": ASSIGNMENT,
	"%=": ASSIGNMENT,
	"<<=": ASSIGNMENT,
	">>=": ASSIGNMENT,
	">>>=": ASSIGNMENT,
	"&=": ASSIGNMENT,
	"^=": ASSIGNMENT,
	"|=": ASSIGNMENT,
	# Comma
	",": COMMA,
}

PREFIX_OPERATORS = frozenset(
	{"!", "~", "+", "-", "++", "--", "typeof", "void", "delete"}
)
POSTFIX_OPERATORS = frozenset({"++", "--"})

# Operators spelled as words need a space before their operand.
WORD_OPERATORS = frozenset({"typeof", "void", "delete", "in", "instanceof"})


def binary_precedence(op: str) -> Precedence:
	try:
		return BINARY_PRECEDENCE[op]
	except KeyError:
		raise ValueError(f"Unknown binary operator: {op!r}") from None


def needs_parens(parent: Precedence, child: Precedence, position: Position) -> bool:
	"""Return True when `child` must be grouped to keep its place under `parent`."""
	if child.level < parent.level:
		return True
	if child.level > parent.level:
		return False
	if parent.associativity is LTR:
		return position is Position.RIGHT
	return position is Position.LEFT
