from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from jsgen.nodes import Node


class JSGenError(Exception):
	"""Base class for errors raised while building or emitting a tree."""


class InvalidIdentifierError(JSGenError, ValueError):
	"""A name does not satisfy the identifier grammar or is a reserved word."""

	name: object

	def __init__(self, name: object, reason: str = "not a valid identifier") -> None:
		super().__init__(f"{name!r} is {reason}")
		self.name = name


class InvalidOperationError(JSGenError, RuntimeError):
	pass


class IncompleteNodeError(InvalidOperationError):
	"""A node cannot be emitted because one of its required parts is unset."""

	node: Node
	part: str

	def __init__(self, node: Node, part: str) -> None:
		super().__init__(
			f"{type(node).__name__} cannot be emitted: '{part}' has not been set"
		)
		self.node = node
		self.part = part


class StatementAsExpressionError(InvalidOperationError):
	def __init__(self, node: Node) -> None:
		super().__init__(
			f"A statement cannot be used as an expression ({type(node).__name__})"
		)
		self.node = node
