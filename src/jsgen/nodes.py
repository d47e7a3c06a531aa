from __future__ import annotations

import logging
import math
import numbers
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field, fields, is_dataclass
from decimal import Decimal
from enum import Enum
from types import ModuleType
from typing import Any, TypeAlias

from typing_extensions import override

from jsgen.errors import (
	IncompleteNodeError,
	InvalidIdentifierError,
	StatementAsExpressionError,
)
from jsgen.identifiers import is_identifier_name, is_reserved_word, is_valid_identifier
from jsgen.options import DEFAULT_OPTIONS, RenderOptions
from jsgen.precedence import (
	ASSIGNMENT,
	ATOMIC,
	CONDITIONAL,
	POSTFIX,
	POSTFIX_OPERATORS,
	PREFIX,
	PREFIX_OPERATORS,
	WORD_OPERATORS,
	Position,
	Precedence,
	binary_precedence,
	needs_parens,
)

logger = logging.getLogger(__name__)

RecordFields: TypeAlias = Callable[[Any], Iterable[tuple[str, Any]]]

# Registry: type -> field enumeration, consulted by Expr.of() before reflection
RECORD_REGISTRY: dict[type, RecordFields] = {}


# =============================================================================
# Base classes
# =============================================================================
class Node(ABC):
	"""Base class for every statement and expression."""

	__slots__: tuple[str, ...] = ()

	@property
	def requires_terminator(self) -> bool:
		"""Whether a `;` follows this node when it is used as a statement."""
		return True

	@abstractmethod
	def emit(self, out: list[str], options: RenderOptions) -> None:
		"""Emit this node as JavaScript into the output buffer."""

	@override
	def __str__(self) -> str:
		return emit(self)


class Stmt(Node, ABC):
	"""Base class for statements that cannot be used as expressions."""

	__slots__: tuple[str, ...] = ()


class Expr(Node, ABC):
	"""Base class for expression nodes.

	Every expression is also usable as a statement. The fluent helpers below
	build new nodes around this one; their arguments go through Expr.of(), so
	native Python values can be passed anywhere an expression is expected.
	"""

	__slots__: tuple[str, ...] = ()

	def precedence(self) -> Precedence:
		"""Binding strength used for grouping. Default: atomic (16)."""
		return ATOMIC

	# -------------------------------------------------------------------------
	# Access, calls, conditionals
	# -------------------------------------------------------------------------

	def dot(self, name: str | Identifier) -> Member:
		return Member(self, name)

	def index(self, key: Any) -> Index:
		return Index(self, key)

	def call(self, *args: Any) -> Call:
		return Call(self, list(args))

	def new(self, *args: Any) -> New:
		return New(self, list(args))

	def iif(self, then: Any, else_: Any) -> Conditional:
		"""self ? then : else_"""
		return Conditional(self, then, else_)

	def assign(self, value: Any) -> Binary:
		return Binary(self, "=", value)

	# -------------------------------------------------------------------------
	# Operators
	# -------------------------------------------------------------------------

	def add_with(self, other: Any) -> Binary:
		return Binary(self, "+", other)

	def subtract_with(self, other: Any) -> Binary:
		return Binary(self, "-", other)

	def multiply_by(self, other: Any) -> Binary:
		return Binary(self, "*", other)

	def divide_by(self, other: Any) -> Binary:
		return Binary(self, "/", other)

	def modulo(self, other: Any) -> Binary:
		return Binary(self, "%", other)

	def is_equal_to(self, other: Any) -> Binary:
		return Binary(self, "==", other)

	def is_not_equal_to(self, other: Any) -> Binary:
		return Binary(self, "!=", other)

	def is_identical_to(self, other: Any) -> Binary:
		return Binary(self, "===", other)

	def is_not_identical_to(self, other: Any) -> Binary:
		return Binary(self, "!==", other)

	def is_greater_than(self, other: Any) -> Binary:
		return Binary(self, ">", other)

	def is_greater_than_or_equal_to(self, other: Any) -> Binary:
		return Binary(self, ">=", other)

	def is_less_than(self, other: Any) -> Binary:
		return Binary(self, "<", other)

	def is_less_than_or_equal_to(self, other: Any) -> Binary:
		return Binary(self, "<=", other)

	def and_(self, other: Any) -> Binary:
		return Binary(self, "&&", other)

	def or_(self, other: Any) -> Binary:
		return Binary(self, "||", other)

	def not_(self) -> Unary:
		return Unary("!", self)

	def negate(self) -> Unary:
		return Unary("-", self)

	def type_of(self) -> Unary:
		return Unary("typeof", self)

	def increment(self, postfix: bool = True) -> Unary:
		return Unary("++", self, postfix=postfix)

	def decrement(self, postfix: bool = True) -> Unary:
		return Unary("--", self, postfix=postfix)

	# -------------------------------------------------------------------------
	# Python value -> Expr
	# -------------------------------------------------------------------------

	@staticmethod
	def of(value: Any) -> Expr:
		"""Convert a Python value to an Expr.

		Resolution order (first match wins):
		1. Already an Expr: returned as-is
		2. None -> null
		3. str -> String (never a number, even if it looks like one)
		4. Any other Node -> StatementAsExpressionError
		5. Mapping -> Object (values converted recursively)
		6. Other iterables -> array_or_object()
		7. Records (registered types, dataclasses, plain objects) -> Object
		8. bool -> Boolean
		9. Real numbers, or values whose str() parses as a float -> Number
		10. Anything else -> String(str(value))
		"""
		if isinstance(value, Expr):
			return value
		if value is None:
			return NULL
		if isinstance(value, str):
			return String(value)
		if isinstance(value, Node):
			raise StatementAsExpressionError(value)

		# Collections - Mapping must come first since mappings are iterable
		if isinstance(value, Mapping):
			return Object(value)
		if isinstance(value, Iterable):
			return array_or_object(value)

		props = record_fields(value)
		if props is not None:
			return Object(props)

		# Must check bool before numbers since bool is a subclass of int
		if isinstance(value, bool):
			return Boolean(value)
		if isinstance(value, int):
			return Number(value)
		if isinstance(value, numbers.Real):
			return Number(float(value))
		try:
			number = float(str(value))
		except ValueError:
			logger.debug("Emitting %s value as a string", type(value).__name__)
			return String(str(value))
		return Number(number)


# =============================================================================
# Emit logic
# =============================================================================


def emit(node: Node, options: RenderOptions | None = None) -> str:
	"""Emit a node as JavaScript, followed by `;` when it requires one."""
	if node is None:
		raise TypeError("emit() requires a node")
	if options is None:
		options = DEFAULT_OPTIONS
	out: list[str] = []
	node.emit(out, options)
	if node.requires_terminator:
		out.append(";")
	return "".join(out)


def emit_statements(
	statements: Iterable[Node | None], out: list[str], options: RenderOptions
) -> None:
	"""Emit statements in order, each followed by its required terminator.

	None entries stand for the empty statement and still emit their `;`.
	"""
	for i, stmt in enumerate(statements):
		if stmt is None:
			stmt = EMPTY
		if i > 0 and options.statement_separator:
			out.append(options.statement_separator)
		stmt.emit(out, options)
		if stmt.requires_terminator:
			out.append(";")


def _emit_operand(
	node: Expr,
	parent: Precedence,
	position: Position,
	out: list[str],
	options: RenderOptions,
) -> None:
	"""Emit child with parens if needed for precedence."""
	if needs_parens(parent, node.precedence(), position):
		out.append("(")
		node.emit(out, options)
		out.append(")")
	else:
		node.emit(out, options)


def emit_item(node: Expr, out: list[str], options: RenderOptions) -> None:
	"""Emit an array element, argument or property value.

	These sit between commas, so only a comma expression needs grouping.
	"""
	_emit_operand(node, ASSIGNMENT, Position.RIGHT, out, options)


def _emit_target(
	node: Expr, out: list[str], options: RenderOptions, member: bool = False
) -> None:
	"""Emit the object of a member access, index or call."""
	# `function(){}()` would read as a declaration at statement start, and
	# `5.x` as a malformed number.
	if isinstance(node, Function) or (member and isinstance(node, Number)):
		out.append("(")
		node.emit(out, options)
		out.append(")")
		return
	_emit_operand(node, ATOMIC, Position.LEFT, out, options)


def _emit_after_sign(op: str, operand: list[str], out: list[str]) -> None:
	"""Append operand text, keeping `+ +x` and `- -x` from fusing into ++/--."""
	first = next((part for part in operand if part), "")
	if op and op[-1] in "+-" and first[:1] == op[-1]:
		out.append(" ")
	out.extend(operand)


def _emit_args(args: Sequence[Expr], out: list[str], options: RenderOptions) -> None:
	out.append("(")
	for i, a in enumerate(args):
		if i > 0:
			out.append(",")
		emit_item(a, out, options)
	out.append(")")


# =============================================================================
# Literal Nodes
# =============================================================================


class Identifier(Expr):
	"""JS identifier: x, foo, $el

	The name is validated on construction and on every assignment. Reserved
	words are rejected unless `allow_reserved` is set; such identifiers are
	meant for property names (`a.default`, `{class: 1}`) and only emit in
	value positions when RenderOptions.allow_reserved_words is on.
	"""

	__slots__: tuple[str, ...] = ("_name", "allow_reserved")

	_name: str
	allow_reserved: bool

	def __init__(self, name: str, allow_reserved: bool = False) -> None:
		self.allow_reserved = allow_reserved
		self.name = name

	@property
	def name(self) -> str:
		return self._name

	@name.setter
	def name(self, value: str) -> None:
		if value is None:
			raise TypeError("Identifier name is required")
		if not is_identifier_name(value):
			raise InvalidIdentifierError(value)
		if not is_valid_identifier(value, allow_reserved=self.allow_reserved):
			raise InvalidIdentifierError(value, "a reserved word")
		self._name = value

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		if not options.allow_reserved_words and is_reserved_word(self._name):
			raise InvalidIdentifierError(
				self._name, "a reserved word and can only be used as a property name"
			)
		out.append(self._name)

	def emit_name(self, out: list[str]) -> None:
		"""Emit in a property-name position, where reserved words are legal."""
		out.append(self._name)

	@override
	def __repr__(self) -> str:
		return f"Identifier({self._name!r})"


@dataclass(slots=True)
class Number(Expr):
	"""JS number: 42, 3.5, 1e+21, NaN"""

	value: int | float

	def __post_init__(self) -> None:
		if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
			raise TypeError(
				f"Number requires a real number, got {type(self.value).__name__}"
			)
		if not isinstance(self.value, int):
			self.value = float(self.value)

	@override
	def precedence(self) -> Precedence:
		# A leading minus sign binds like a prefix operator: `(-1)[0]`.
		if self.value < 0:
			return PREFIX
		return ATOMIC

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append(format_number(self.value))


@dataclass(slots=True)
class String(Expr):
	"""JS string literal, always double-quoted: "hello" """

	value: str

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append('"')
		out.append(escape_string(self.value))
		out.append('"')


@dataclass(slots=True)
class Boolean(Expr):
	"""JS boolean: true, false"""

	value: bool

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("true" if self.value else "false")


class Null(Expr):
	"""JS null literal.

	Singleton-like class with no fields; use NULL.
	"""

	__slots__: tuple[str, ...] = ()

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("null")

	@override
	def __eq__(self, other: object) -> bool:
		return isinstance(other, Null)

	@override
	def __hash__(self) -> int:
		return hash(Null)

	@override
	def __repr__(self) -> str:
		return "NULL"


NULL = Null()


class This(Expr):
	"""JS `this`."""

	__slots__: tuple[str, ...] = ()

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("this")

	@override
	def __repr__(self) -> str:
		return "This()"


@dataclass(slots=True)
class Array(Expr):
	"""JS array: [a,b,c]"""

	elements: list[Expr] = field(default_factory=list)

	def __post_init__(self) -> None:
		self.elements = [Expr.of(e) for e in self.elements]

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("[")
		for i, e in enumerate(self.elements):
			if i > 0:
				out.append(",")
			emit_item(e, out, options)
		out.append("]")


PropertyKey: TypeAlias = "Identifier | String | Number"


class Object(Expr):
	"""JS object literal: {a:1,"b-c":2}

	Properties are an ordered list of (key, value) pairs. Adding a key that is
	already present appends a second entry; both are emitted and the last one
	wins when the script runs.
	"""

	__slots__: tuple[str, ...] = ("_properties",)

	_properties: list[tuple[PropertyKey, Expr]]

	def __init__(self, properties: Any = None) -> None:
		self._properties = []
		if properties is not None:
			self.with_properties(properties)

	@property
	def properties(self) -> list[tuple[PropertyKey, Expr]]:
		return self._properties

	@properties.setter
	def properties(self, value: Any) -> None:
		self._properties = []
		if value is not None:
			self.with_properties(value)

	def with_property(self, key: Any, value: Any) -> Object:
		"""Append one property and return this object."""
		self._properties.append((property_key(key), Expr.of(value)))
		return self

	def with_properties(self, values: Any) -> Object:
		"""Append properties from a mapping, (key, value) pairs, or a record."""
		if values is None:
			raise TypeError("with_properties() requires a mapping, pairs or a record")
		if isinstance(values, Mapping):
			items: Iterable[Any] = values.items()
		elif isinstance(values, Iterable) and not isinstance(values, str):
			items = values
		else:
			items = record_fields(values)
			if items is None:
				raise TypeError(
					f"Cannot read properties from {type(values).__name__}"
				)
		for key, value in items:
			self.with_property(key, value)
		return self

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("{")
		for i, (k, v) in enumerate(self._properties):
			if i > 0:
				out.append(",")
			if isinstance(k, Identifier):
				k.emit_name(out)
			else:
				k.emit(out, options)
			out.append(":")
			emit_item(v, out, options)
		out.append("}")

	@override
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Object):
			return NotImplemented
		return self._properties == other._properties

	__hash__ = None  # pyright: ignore[reportAssignmentType]

	@override
	def __repr__(self) -> str:
		return f"Object({self._properties!r})"


# =============================================================================
# Operation Nodes
# =============================================================================


class Conditional(Expr):
	"""JS conditional: cond?then:else

	All three parts may be left unset and filled in later; emitting fails
	with IncompleteNodeError until every part is present. Passing None is the
	same as leaving a part unset.
	"""

	__slots__: tuple[str, ...] = ("_condition", "_then", "_else")

	_condition: Expr | None
	_then: Expr | None
	_else: Expr | None

	def __init__(
		self, condition: Any = None, then: Any = None, else_: Any = None
	) -> None:
		self.condition = condition
		self.then = then
		self.else_ = else_

	@property
	def condition(self) -> Expr | None:
		return self._condition

	@condition.setter
	def condition(self, value: Any) -> None:
		self._condition = None if value is None else Expr.of(value)

	@property
	def then(self) -> Expr | None:
		return self._then

	@then.setter
	def then(self, value: Any) -> None:
		self._then = None if value is None else Expr.of(value)

	@property
	def else_(self) -> Expr | None:
		return self._else

	@else_.setter
	def else_(self, value: Any) -> None:
		self._else = None if value is None else Expr.of(value)

	@override
	def precedence(self) -> Precedence:
		return CONDITIONAL

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		if self._condition is None:
			raise IncompleteNodeError(self, "condition")
		if self._then is None:
			raise IncompleteNodeError(self, "then")
		if self._else is None:
			raise IncompleteNodeError(self, "else")
		# then/else sit on the right so `a?b:c?d:e` needs no parens
		_emit_operand(self._condition, CONDITIONAL, Position.LEFT, out, options)
		out.append("?")
		_emit_operand(self._then, CONDITIONAL, Position.RIGHT, out, options)
		out.append(":")
		_emit_operand(self._else, CONDITIONAL, Position.RIGHT, out, options)

	@override
	def __repr__(self) -> str:
		return f"Conditional({self._condition!r}, {self._then!r}, {self._else!r})"


@dataclass(slots=True)
class Binary(Expr):
	"""JS binary expression: a+b, a&&b, a=b, a,b"""

	left: Expr
	op: str
	right: Expr

	def __post_init__(self) -> None:
		binary_precedence(self.op)
		self.left = Expr.of(self.left)
		self.right = Expr.of(self.right)

	@override
	def precedence(self) -> Precedence:
		return binary_precedence(self.op)

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		prec = self.precedence()
		_emit_operand(self.left, prec, Position.LEFT, out, options)
		if self.op in WORD_OPERATORS:
			out.append(" ")
			out.append(self.op)
			out.append(" ")
			_emit_operand(self.right, prec, Position.RIGHT, out, options)
			return
		# `a++ +b`
		if out and out[-1][-1:] == self.op[0] and self.op[0] in "+-":
			out.append(" ")
		out.append(self.op)
		right: list[str] = []
		_emit_operand(self.right, prec, Position.RIGHT, right, options)
		_emit_after_sign(self.op, right, out)


@dataclass(slots=True)
class Unary(Expr):
	"""JS unary expression: !a, -a, typeof a, ++a, a++"""

	op: str
	operand: Expr
	postfix: bool = False

	def __post_init__(self) -> None:
		allowed = POSTFIX_OPERATORS if self.postfix else PREFIX_OPERATORS
		if self.op not in allowed:
			kind = "postfix" if self.postfix else "prefix"
			raise ValueError(f"Unknown {kind} operator: {self.op!r}")
		self.operand = Expr.of(self.operand)

	@override
	def precedence(self) -> Precedence:
		return POSTFIX if self.postfix else PREFIX

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		if self.postfix:
			_emit_operand(self.operand, POSTFIX, Position.LEFT, out, options)
			out.append(self.op)
			return
		out.append(self.op)
		if self.op in WORD_OPERATORS:
			out.append(" ")
		operand: list[str] = []
		_emit_operand(self.operand, PREFIX, Position.RIGHT, operand, options)
		_emit_after_sign(self.op, operand, out)


@dataclass(slots=True)
class Member(Expr):
	"""JS member access: obj.prop"""

	obj: Expr
	name: Identifier

	def __post_init__(self) -> None:
		self.obj = Expr.of(self.obj)
		if not isinstance(self.name, Identifier):
			self.name = Identifier(self.name, allow_reserved=True)

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		_emit_target(self.obj, out, options, member=True)
		out.append(".")
		self.name.emit_name(out)


@dataclass(slots=True)
class Index(Expr):
	"""JS subscript access: obj[key]"""

	obj: Expr
	key: Expr

	def __post_init__(self) -> None:
		self.obj = Expr.of(self.obj)
		self.key = Expr.of(self.key)

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		_emit_target(self.obj, out, options)
		out.append("[")
		self.key.emit(out, options)
		out.append("]")


@dataclass(slots=True)
class Call(Expr):
	"""JS function call: fn(args)"""

	callee: Expr
	args: list[Expr] = field(default_factory=list)

	def __post_init__(self) -> None:
		self.callee = Expr.of(self.callee)
		self.args = [Expr.of(a) for a in self.args]

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		_emit_target(self.callee, out, options)
		_emit_args(self.args, out, options)


@dataclass(slots=True)
class New(Expr):
	"""JS new expression: new Ctor(args)"""

	ctor: Expr
	args: list[Expr] = field(default_factory=list)

	def __post_init__(self) -> None:
		self.ctor = Expr.of(self.ctor)
		self.args = [Expr.of(a) for a in self.args]

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("new ")
		# The first argument list after `new` belongs to it: `new (f())()`
		if _contains_call(self.ctor):
			out.append("(")
			self.ctor.emit(out, options)
			out.append(")")
		else:
			_emit_target(self.ctor, out, options)
		_emit_args(self.args, out, options)


def _contains_call(node: Expr) -> bool:
	while isinstance(node, (Member, Index)):
		node = node.obj
	return isinstance(node, Call)


@dataclass(slots=True)
class Function(Expr):
	"""JS function expression: function name(a,b){...}"""

	params: list[Identifier] = field(default_factory=list)
	body: list[Node | None] = field(default_factory=list)
	name: Identifier | None = None

	def __post_init__(self) -> None:
		self.params = [p if isinstance(p, Identifier) else Identifier(p) for p in self.params]
		self.body = list(self.body)
		if self.name is not None and not isinstance(self.name, Identifier):
			self.name = Identifier(self.name)

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("function")
		if self.name is not None:
			out.append(" ")
			self.name.emit(out, options)
		out.append("(")
		for i, p in enumerate(self.params):
			if i > 0:
				out.append(",")
			p.emit(out, options)
		out.append("){")
		emit_statements(self.body, out, options)
		out.append("}")


# =============================================================================
# Statement Nodes
# =============================================================================


class Empty(Stmt):
	"""JS empty statement: emits nothing but its terminator."""

	__slots__: tuple[str, ...] = ()

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		pass

	@override
	def __repr__(self) -> str:
		return "Empty()"


EMPTY = Empty()


# =============================================================================
# Python value helpers
# =============================================================================


def property_key(key: Any) -> PropertyKey:
	"""Normalize a property key: bare identifier if possible, else quoted."""
	if isinstance(key, Number):
		# `{-1:x}` and `{NaN:x}` are not valid literals; quote the text form.
		if key.value < 0 or (
			isinstance(key.value, float) and not math.isfinite(key.value)
		):
			return String(format_number(key.value))
		return key
	if isinstance(key, (Identifier, String)):
		return key
	if key is None:
		raise TypeError("Property key is required")
	if isinstance(key, Expr):
		raise TypeError(f"{type(key).__name__} cannot be used as a property key")
	if isinstance(key, str):
		if is_identifier_name(key):
			return Identifier(key, allow_reserved=True)
		return String(key)
	if isinstance(key, (int, float)) and not isinstance(key, bool):
		return property_key(Number(key))
	return String(str(key))


def _is_property_pair(item: Any) -> bool:
	return (
		isinstance(item, tuple)
		and len(item) == 2  # pyright: ignore[reportUnknownArgumentType]
		and isinstance(item[0], (str, Identifier, String))
	)


def array_or_object(values: Iterable[Any]) -> Array | Object:
	"""Build an Object if every item is a (name, value) pair, else an Array."""
	items = list(values)
	if items and all(_is_property_pair(item) for item in items):
		return Object(items)
	return Array(items)


def register_record(cls: type, attrs: Sequence[str] | RecordFields) -> None:
	"""Register how Expr.of() reads the properties of instances of `cls`.

	Args:
		cls: The record type (subclasses are covered too).
		attrs: Either attribute names, read in order, or a function returning
			(name, value) pairs for an instance.
	"""
	if callable(attrs):
		RECORD_REGISTRY[cls] = attrs
		return
	names = list(attrs)
	RECORD_REGISTRY[cls] = lambda value: [(n, getattr(value, n)) for n in names]


def record_fields(value: Any) -> list[tuple[str, Any]] | None:
	"""Public fields of a record value in declaration order, or None."""
	for cls in type(value).__mro__:
		reader = RECORD_REGISTRY.get(cls)
		if reader is not None:
			return list(reader(value))
	if isinstance(value, (type, ModuleType, Enum)) or callable(value):
		return None
	if is_dataclass(value):
		logger.debug("Reading dataclass %s as an object", type(value).__name__)
		return [
			(f.name, getattr(value, f.name))
			for f in fields(value)
			if not f.name.startswith("_")
		]
	try:
		attrs = vars(value)
	except TypeError:
		return None
	logger.debug("Reading %s attributes as an object", type(value).__name__)
	return [(k, v) for k, v in attrs.items() if not k.startswith("_")]


coerce = Expr.of


# =============================================================================
# Text helpers
# =============================================================================


def format_number(value: int | float) -> str:
	"""Format like JavaScript's Number.prototype.toString()."""
	if isinstance(value, int):
		if abs(value) < 10**21:
			return str(value)
		value = float(value)
	if math.isnan(value):
		return "NaN"
	if math.isinf(value):
		return "Infinity" if value > 0 else "-Infinity"
	if value.is_integer() and abs(value) < 1e21:
		if abs(value) < 2**53:
			return str(int(value))
		return format(Decimal(repr(value)), "f")
	text = repr(value)
	mantissa, sep, exponent = text.partition("e")
	if not sep:
		return text
	if 1e-6 <= abs(value) < 1e21:
		return format(Decimal(text), "f")
	exp = int(exponent)
	return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def escape_string(s: str) -> str:
	"""Escape for double-quoted JS string literals."""
	return (
		s.replace("\\", "\\\\")
		.replace('"', '\\"')
		.replace("\n", "\\n")
		.replace("\r", "\\r")
		.replace("\t", "\\t")
		.replace("\b", "\\b")
		.replace("\f", "\\f")
		.replace("\v", "\\v")
		.replace("\x00", "\\x00")
		.replace("\u2028", "\\u2028")
		.replace("\u2029", "\\u2029")
	)
