from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from typing_extensions import override

from jsgen.nodes import (
	Expr,
	Identifier,
	Node,
	Stmt,
	emit_item,
	emit_statements,
)
from jsgen.options import RenderOptions


def _as_block(body: Node | Iterable[Node | None] | None) -> Block:
	if isinstance(body, Block):
		return body
	if body is None:
		return Block()
	if isinstance(body, Node):
		return Block([body])
	return Block(list(body))


@dataclass(slots=True)
class Return(Stmt):
	"""JS return statement: return expr"""

	value: Expr | None = None

	def __post_init__(self) -> None:
		if self.value is not None:
			self.value = Expr.of(self.value)

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("return")
		if self.value is not None:
			out.append(" ")
			self.value.emit(out, options)


@dataclass(slots=True)
class Throw(Stmt):
	"""JS throw statement: throw expr"""

	value: Expr

	def __post_init__(self) -> None:
		if self.value is None:
			raise TypeError("throw requires a value")
		self.value = Expr.of(self.value)

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("throw ")
		self.value.emit(out, options)


@dataclass(slots=True)
class Var(Stmt):
	"""JS variable statement: var a=1,b

	declarations: (name, initializer) pairs; initializer None leaves the
	variable undefined.
	"""

	declarations: list[tuple[Identifier, Expr | None]]

	def __post_init__(self) -> None:
		decls: list[tuple[Identifier, Expr | None]] = []
		for name, value in self.declarations:
			ident = name if isinstance(name, Identifier) else Identifier(name)
			decls.append((ident, None if value is None else Expr.of(value)))
		if not decls:
			raise ValueError("var requires at least one declaration")
		self.declarations = decls

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("var ")
		for i, (name, value) in enumerate(self.declarations):
			if i > 0:
				out.append(",")
			name.emit(out, options)
			if value is not None:
				out.append("=")
				emit_item(value, out, options)


class Break(Stmt):
	"""JS break statement."""

	__slots__: tuple[str, ...] = ()

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("break")

	@override
	def __repr__(self) -> str:
		return "Break()"


class Continue(Stmt):
	"""JS continue statement."""

	__slots__: tuple[str, ...] = ()

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("continue")

	@override
	def __repr__(self) -> str:
		return "Continue()"


@dataclass(slots=True)
class Block(Stmt):
	"""JS block: {...}"""

	statements: list[Node | None] = field(default_factory=list)

	@property
	@override
	def requires_terminator(self) -> bool:
		return False

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("{")
		emit_statements(self.statements, out, options)
		out.append("}")


@dataclass(slots=True)
class If(Stmt):
	"""JS if statement: if(cond){...}else{...}

	Branches are always emitted as blocks; an If in else_ chains as `else if`.
	"""

	condition: Expr
	then: Block
	else_: Block | If | None = None

	def __post_init__(self) -> None:
		if self.condition is None:
			raise TypeError("if requires a condition")
		self.condition = Expr.of(self.condition)
		self.then = _as_block(self.then)
		if self.else_ is not None and not isinstance(self.else_, If):
			self.else_ = _as_block(self.else_)

	@property
	@override
	def requires_terminator(self) -> bool:
		return False

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("if(")
		self.condition.emit(out, options)
		out.append(")")
		self.then.emit(out, options)
		if self.else_ is None:
			return
		out.append("else")
		if isinstance(self.else_, If):
			out.append(" ")
		self.else_.emit(out, options)


@dataclass(slots=True)
class While(Stmt):
	"""JS while loop: while(cond){...}"""

	condition: Expr
	body: Block = field(default_factory=lambda: Block())

	def __post_init__(self) -> None:
		if self.condition is None:
			raise TypeError("while requires a condition")
		self.condition = Expr.of(self.condition)
		self.body = _as_block(self.body)

	@property
	@override
	def requires_terminator(self) -> bool:
		return False

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		out.append("while(")
		self.condition.emit(out, options)
		out.append(")")
		self.body.emit(out, options)


def declarations(values: Sequence[Any]) -> list[tuple[Identifier, Expr | None]]:
	"""Accept `"a"`, `("a", value)` or `(Identifier, value)` entries."""
	decls: list[tuple[Identifier, Expr | None]] = []
	for entry in values:
		if isinstance(entry, tuple):
			name, value = entry  # pyright: ignore[reportUnknownVariableType]
		else:
			name, value = entry, None
		decls.append((name, value))  # pyright: ignore[reportUnknownArgumentType]
	return decls
