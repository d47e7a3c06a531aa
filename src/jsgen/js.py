"""Factory functions for building trees.

Usage:
	from jsgen import js

	a = js.identifier("a")
	js.script(js.var(("b", a.add_with(1))), js.return_(a))
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from jsgen.identifiers import is_valid_identifier
from jsgen.nodes import (
	EMPTY,
	NULL,
	Array,
	Boolean,
	Conditional,
	Empty,
	Expr,
	Function,
	Identifier,
	New,
	Node,
	Null,
	Number,
	Object,
	String,
	This,
	array_or_object,
)
from jsgen.script import Script
from jsgen.statements import Block, If, Return, Throw, Var, While, declarations

__all__ = [
	"array",
	"array_or_object",
	"block",
	"boolean",
	"empty",
	"function",
	"identifier",
	"if_",
	"iif",
	"is_valid_identifier",
	"new",
	"null",
	"number",
	"obj",
	"return_",
	"script",
	"string",
	"this",
	"throw",
	"var",
	"while_",
]


def identifier(name: str, allow_reserved: bool = False) -> Identifier:
	return Identifier(name, allow_reserved=allow_reserved)


def number(value: int | float) -> Number:
	return Number(value)


def string(value: str) -> String:
	return String(value)


def boolean(value: bool) -> Boolean:
	return Boolean(value)


def null() -> Null:
	return NULL


def this() -> This:
	return This()


def array(*elements: Any) -> Array:
	"""js.array(1, 2, 3) -> [1,2,3]"""
	return Array(list(elements))


def obj(properties: Any = None, /, **kwargs: Any) -> Object:
	"""js.obj({"a": 1}) or js.obj(a=1) -> {a:1}"""
	result = Object(properties)
	if kwargs:
		result.with_properties(kwargs)
	return result


def iif(condition: Any = None, then: Any = None, else_: Any = None) -> Conditional:
	return Conditional(condition, then, else_)


def function(
	params: Iterable[str | Identifier] = (),
	body: Iterable[Node | None] = (),
	name: str | Identifier | None = None,
) -> Function:
	return Function(list(params), list(body), name)  # pyright: ignore[reportArgumentType]


def new(ctor: str | Expr, *args: Any) -> New:
	"""js.new("Date", 0) -> new Date(0)"""
	if isinstance(ctor, str):
		ctor = Identifier(ctor)
	return New(ctor, list(args))


def var(*decls: Any) -> Var:
	"""js.var("a", ("b", 1)) -> var a,b=1"""
	return Var(declarations(decls))


def return_(value: Any = None) -> Return:
	return Return(value)


def throw(value: Any) -> Throw:
	return Throw(value)


def block(*statements: Node | None) -> Block:
	return Block(list(statements))


def if_(condition: Any, then: Any, else_: Any = None) -> If:
	return If(condition, then, else_)


def while_(condition: Any, *body: Node | None) -> While:
	return While(condition, Block(list(body)))


def empty() -> Empty:
	return EMPTY


def script(*statements: Any) -> Script:
	return Script(*statements)
