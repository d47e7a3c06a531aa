from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing_extensions import override

from jsgen.nodes import Node, emit_statements
from jsgen.options import DEFAULT_OPTIONS, RenderOptions

logger = logging.getLogger(__name__)


class Script(Node):
	"""An ordered list of statements emitted as one unit.

	None entries are kept in place and emitted as empty statements, so the
	number and position of statements in the output match the list.
	"""

	__slots__: tuple[str, ...] = ("statements",)

	statements: list[Node | None]

	def __init__(self, *statements: Node | Iterable[Node | None] | None) -> None:
		self.statements = []
		self.add(*statements)

	def add(self, *statements: Node | Iterable[Node | None] | None) -> Script:
		"""Append statements, other scripts, or iterables of statements."""
		for stmt in statements:
			if isinstance(stmt, Script):
				self.statements.extend(stmt.statements)
			elif stmt is None or isinstance(stmt, Node):
				self.statements.append(stmt)
			elif isinstance(stmt, Iterable) and not isinstance(stmt, str):
				items = list(stmt)
				for item in items:
					if item is not None and not isinstance(item, Node):
						raise TypeError(f"Cannot add {type(item).__name__} to a Script")
				self.statements.extend(items)
			else:
				raise TypeError(f"Cannot add {type(stmt).__name__} to a Script")
		return self

	@property
	@override
	def requires_terminator(self) -> bool:
		return False

	@override
	def emit(self, out: list[str], options: RenderOptions) -> None:
		emit_statements(self.statements, out, options)

	def render(self, options: RenderOptions | None = None) -> str:
		if options is None:
			options = DEFAULT_OPTIONS
		out: list[str] = []
		self.emit(out, options)
		logger.debug("Emitted %d statements", len(self.statements))
		return "".join(out)

	@override
	def __str__(self) -> str:
		return self.render()

	def __iter__(self) -> Iterator[Node | None]:
		return iter(self.statements)

	def __len__(self) -> int:
		return len(self.statements)

	@override
	def __repr__(self) -> str:
		return f"Script({self.statements!r})"
