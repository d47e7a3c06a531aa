"""
Command-line interface for jsgen.
Renders JSON data as JavaScript literals and checks identifier names.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import json
import sys
from dataclasses import replace
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from jsgen.errors import JSGenError
from jsgen.identifiers import is_identifier_name, is_valid_identifier
from jsgen.nodes import Expr, emit
from jsgen.options import RenderOptions

cli = typer.Typer(
	name="jsgen",
	help="jsgen - build JavaScript syntax trees and emit compact source",
	no_args_is_help=True,
)


@cli.command("literal")
def literal(
	file: Path | None = typer.Argument(
		None, help="JSON file to render (reads stdin when omitted)"
	),
	allow_reserved_words: bool | None = typer.Option(
		None,
		"--allow-reserved-words/--no-allow-reserved-words",
		help="Override JSGEN_ALLOW_RESERVED_WORDS",
	),
	separator: str | None = typer.Option(
		None, "--separator", help="Override JSGEN_STATEMENT_SEPARATOR"
	),
):
	"""Render a JSON document as a JavaScript expression statement."""
	console = Console(stderr=True)
	options = RenderOptions.from_env()
	if allow_reserved_words is not None:
		options = replace(options, allow_reserved_words=allow_reserved_words)
	if separator is not None:
		options = replace(options, statement_separator=separator)

	try:
		if file is None:
			data = json.load(sys.stdin)
		else:
			data = json.loads(file.read_text(encoding="utf-8"))
	except (OSError, json.JSONDecodeError) as exc:
		console.print(f"❌ Could not read JSON: {exc}")
		raise typer.Exit(1) from None

	try:
		code = emit(Expr.of(data), options)
	except JSGenError as exc:
		console.print(f"❌ {exc}")
		raise typer.Exit(1) from None
	typer.echo(code)


@cli.command("identifier")
def identifier(
	name: str = typer.Argument(..., help="Name to check"),
	allow_reserved: bool = typer.Option(
		False, "--allow-reserved", help="Accept reserved words (property names)"
	),
):
	"""Check whether NAME can be used as an identifier."""
	console = Console()
	label = escape(name)
	if is_valid_identifier(name, allow_reserved=allow_reserved):
		console.print(f"✅ [green]{label}[/green] is a valid identifier")
		return
	if is_identifier_name(name):
		console.print(f"❌ [red]{label}[/red] is a reserved word")
	else:
		console.print(f"❌ [red]{label}[/red] is not a valid identifier")
	raise typer.Exit(1)


def main():
	"""Main CLI entry point."""
	try:
		cli()
	except Exception:
		console = Console()
		console.print_exception()
		raise typer.Exit(1) from None


if __name__ == "__main__":
	main()
