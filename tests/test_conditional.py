import pytest
from jsgen import js
from jsgen.errors import IncompleteNodeError, InvalidOperationError
from jsgen.nodes import Conditional, Identifier, Number, String, emit

a = Identifier("a")


def test_conditional_emits_condition_then_else():
	expr = Conditional()
	expr.condition = a.is_greater_than(0)
	expr.then = String("Yes!")
	expr.else_ = String("No!")
	assert emit(expr) == 'a>0?"Yes!":"No!";'


def test_conditional_via_constructor():
	expr = Conditional(a.is_greater_than(0), "Yes!", "No!")
	assert emit(expr) == 'a>0?"Yes!":"No!";'


def test_conditional_helper():
	assert str(js.boolean(True).iif(js.number(1), js.number(-1))) == "true?1:-1;"


@pytest.mark.parametrize(
	("condition", "then", "else_", "part"),
	[
		(None, String("Yes!"), String("No!"), "condition"),
		(a.is_greater_than(0), None, String("No!"), "then"),
		(a.is_greater_than(0), String("Yes!"), None, "else"),
	],
)
def test_conditional_requires_all_parts(condition, then, else_, part: str):
	# Construction never validates
	expr = Conditional(condition, then, else_)
	with pytest.raises(IncompleteNodeError, match=f"'{part}'") as exc_info:
		emit(expr)
	assert exc_info.value.part == part
	assert exc_info.value.node is expr
	assert isinstance(exc_info.value, InvalidOperationError)


def test_conditional_can_be_completed_after_failure():
	expr = Conditional(a)
	with pytest.raises(IncompleteNodeError):
		str(expr)
	expr.then = 1
	expr.else_ = 2
	assert str(expr) == "a?1:2;"


def test_conditional_parts_are_coerced():
	expr = Conditional(True, 1, None)
	assert expr.then == Number(1)
	assert expr.else_ is None


def test_clearing_a_part_makes_it_unset():
	expr = Conditional(a, 1, 2)
	expr.then = None
	with pytest.raises(IncompleteNodeError, match="'then'"):
		emit(expr)


def test_nested_conditional_in_then_branch():
	inner = Conditional(Identifier("b"), 1, 2)
	assert str(Conditional(a, inner, 3)) == "a?b?1:2:3;"


def test_incomplete_nested_conditional_fails_whole_render():
	expr = js.array(Conditional(a, 1))
	with pytest.raises(IncompleteNodeError):
		emit(expr)
