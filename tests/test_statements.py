"""
Tests for statement nodes and Script emission.
"""

import pytest
from jsgen import js
from jsgen.errors import StatementAsExpressionError
from jsgen.nodes import EMPTY, Identifier, Node, emit
from jsgen.options import RenderOptions
from jsgen.script import Script
from jsgen.statements import Block, Break, Continue, If, Return, Throw, Var

a = Identifier("a")
b = Identifier("b")


# =============================================================================
# Statement Nodes
# =============================================================================


class TestStatementEmit:
	def test_empty(self):
		assert emit(EMPTY) == ";"
		assert js.empty() is EMPTY

	def test_return(self):
		assert emit(Return()) == "return;"
		assert emit(Return(a.add_with(1))) == "return a+1;"
		assert emit(js.return_("x")) == 'return "x";'

	def test_throw(self):
		assert emit(Throw(js.new("Error", "boom"))) == 'throw new Error("boom");'

	def test_throw_requires_value(self):
		with pytest.raises(TypeError):
			Throw(None)  # pyright: ignore[reportArgumentType]

	def test_var(self):
		assert emit(js.var("a")) == "var a;"
		assert emit(js.var(("a", 1), "b", (b, [1, 2]))) == "var a=1,b,b=[1,2];"

	def test_var_requires_declarations(self):
		with pytest.raises(ValueError, match="at least one"):
			Var([])

	def test_var_rejects_reserved_names(self):
		with pytest.raises(ValueError):
			js.var("new")

	def test_break_continue(self):
		assert emit(Break()) == "break;"
		assert emit(Continue()) == "continue;"

	def test_block_needs_no_terminator(self):
		assert emit(Block([a.increment(), None])) == "{a++;;}"
		assert emit(js.block()) == "{}"

	def test_if(self):
		assert emit(js.if_(a, Return(1))) == "if(a){return 1;}"
		assert emit(js.if_(a, [Return(1)], [Return(2)])) == "if(a){return 1;}else{return 2;}"

	def test_else_if_chain(self):
		stmt = If(a, Block([Return(1)]), If(b, Block([Return(2)]), Block([Return(3)])))
		assert emit(stmt) == "if(a){return 1;}else if(b){return 2;}else{return 3;}"

	def test_while(self):
		loop = js.while_(a.is_less_than(10), a.increment(), Break())
		assert emit(loop) == "while(a<10){a++;break;}"


# =============================================================================
# Script
# =============================================================================


class TestScript:
	def test_empty_script(self):
		assert str(Script()) == ""

	def test_statements_are_terminated(self):
		script = js.script(js.var(("a", 1)), a.assign(a.add_with(2)), js.block())
		assert script.render() == "var a=1;a=a+2;{}"

	def test_null_entries_keep_their_position(self):
		script = Script(a.call(), None, b.call())
		assert len(script) == 3
		assert list(script)[1] is None
		assert str(script) == "a();;b();"

	def test_add_flattens_scripts_and_iterables(self):
		first = Script(a.call())
		script = Script().add(first, [b.call(), None]).add(None)
		assert len(script) == 4
		assert str(script) == "a();b();;;"

	def test_add_returns_same_script(self):
		script = Script()
		assert script.add(a) is script

	def test_add_rejects_other_values(self):
		with pytest.raises(TypeError):
			Script(42)  # pyright: ignore[reportArgumentType]
		with pytest.raises(TypeError):
			Script("a;")  # pyright: ignore[reportArgumentType]

	def test_add_rejects_non_nodes_inside_iterables(self):
		script = Script(a.call())
		with pytest.raises(TypeError, match="Cannot add int to a Script"):
			script.add([b.call(), 1])  # pyright: ignore[reportArgumentType]
		assert len(script) == 1
		with pytest.raises(TypeError):
			Script([1])  # pyright: ignore[reportArgumentType]

	def test_statement_separator(self):
		script = Script(a.call(), None, js.if_(a, [b.call()]))
		options = RenderOptions(statement_separator="\n")
		assert script.render(options) == "a();\n;\nif(a){b();}"

	def test_emit_accepts_a_script(self):
		script = Script(a.call(), b.call())
		assert emit(script) == "a();b();"

	def test_script_is_not_an_expression(self):
		with pytest.raises(StatementAsExpressionError):
			js.array(Script())

	def test_custom_statement_terminator_contract(self):
		class Label(Node):
			@property
			def requires_terminator(self) -> bool:
				return False

			def emit(self, out: list[str], options: RenderOptions) -> None:
				out.append("start:")

		assert str(Script(Label(), a.call())) == "start:a();"
