"""
Tests for Expr.of(): converting Python values to expression nodes.

The resolution order is part of the contract, so several tests feed values
that match more than one category.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import SimpleNamespace

import pytest
from jsgen import js
from jsgen.errors import InvalidOperationError, StatementAsExpressionError
from jsgen.nodes import (
	NULL,
	RECORD_REGISTRY,
	Array,
	Boolean,
	Expr,
	Identifier,
	Number,
	Object,
	String,
	array_or_object,
	coerce,
	emit,
	register_record,
)
from jsgen.statements import Return


@pytest.fixture(autouse=True)
def _clean_registry():  # pyright: ignore[reportUnusedFunction]
	saved = dict(RECORD_REGISTRY)
	yield
	RECORD_REGISTRY.clear()
	RECORD_REGISTRY.update(saved)


def code(value: object) -> str:
	return emit(Expr.of(value))


# =============================================================================
# Identity, null and strings
# =============================================================================


class TestIdentityAndPrimitives:
	def test_expressions_are_returned_unchanged(self):
		ident = Identifier("a")
		assert Expr.of(ident) is ident
		assert Expr.of(Expr.of(ident)) is ident
		arr = Array([1])  # pyright: ignore[reportArgumentType]
		assert coerce(coerce(arr)) is arr

	def test_none_is_null(self):
		assert Expr.of(None) is NULL
		assert code(None) == "null;"

	def test_strings(self):
		assert Expr.of("hi") == String("hi")

	def test_numeric_string_stays_a_string(self):
		assert Expr.of("42") == String("42")
		assert code("3.5") == '"3.5";'

	def test_bool_is_not_a_number(self):
		assert Expr.of(True) == Boolean(True)
		assert code(False) == "false;"

	def test_numbers(self):
		assert Expr.of(7) == Number(7)
		assert code(2.5) == "2.5;"
		assert code(Decimal("1.25")) == "1.25;"
		assert code(Fraction(1, 4)) == "0.25;"
		assert code(float("nan")) == "NaN;"

	def test_large_int_keeps_precision(self):
		assert code(2**60) == "1152921504606846976;"

	def test_fallback_is_text(self):
		assert code(complex(1, 2)) == '"(1+2j)";'


# =============================================================================
# Statements
# =============================================================================


class TestStatements:
	def test_statement_cannot_be_an_expression(self):
		with pytest.raises(StatementAsExpressionError, match="statement cannot be used"):
			Expr.of(Return())

	def test_is_an_invalid_operation(self):
		with pytest.raises(InvalidOperationError):
			js.array(js.var("a"))


# =============================================================================
# Mappings and iterables
# =============================================================================


class TestCollections:
	def test_mapping_becomes_object(self):
		assert code({"a": 12, "b": "Wrong!", "c": None}) == '{a:12,b:"Wrong!",c:null};'

	def test_mapping_preserves_order(self):
		data = OrderedDict([("z", 1), ("a", 2)])
		assert code(data) == "{z:1,a:2};"

	def test_sequences_become_arrays(self):
		assert code([1, 2, 3]) == "[1,2,3];"
		assert code((1, "a")) == '[1,"a"];'
		assert code(x * 2 for x in range(3)) == "[0,2,4];"
		assert code([]) == "[];"

	def test_pairs_become_object(self):
		assert code([("a", 1), ("b", 2)]) == "{a:1,b:2};"
		assert code({"a": 1}.items()) == "{a:1};"

	def test_mixed_items_stay_an_array(self):
		assert code([("a", 1), 2]) == '[["a",1],2];'
		assert code([(1, 2)]) == "[[1,2]];"
		assert code([("a", 1, 2)]) == '[["a",1,2]];'

	def test_array_or_object(self):
		assert isinstance(array_or_object([]), Array)
		assert isinstance(array_or_object([("k", "v")]), Object)
		assert isinstance(array_or_object([Identifier("k")]), Array)

	def test_nested_values_are_coerced(self):
		assert code({"rows": [{"id": 1}, {"id": 2}]}) == "{rows:[{id:1},{id:2}]};"


# =============================================================================
# Records
# =============================================================================


@dataclass
class Point:
	x: int
	y: int
	_cache: dict[str, int] = field(default_factory=dict)


class Color(Enum):
	RED = 1


class Slotted:
	__slots__ = ("name", "size")

	def __init__(self, name: str, size: int) -> None:
		self.name = name
		self.size = size


class TestRecords:
	def test_dataclass_fields_in_declaration_order(self):
		assert code(Point(1, 2)) == "{x:1,y:2};"

	def test_plain_objects_use_public_attributes(self):
		assert code(SimpleNamespace(b=1, a="x", _hidden=3)) == '{b:1,a:"x"};'

	def test_nested_records(self):
		assert code({"origin": Point(0, 0)}) == "{origin:{x:0,y:0}};"

	def test_registered_attribute_names(self):
		register_record(Slotted, ["size", "name"])
		assert code(Slotted("box", 3)) == '{size:3,name:"box"};'

	def test_registered_reader(self):
		register_record(Slotted, lambda s: [("label", s.name.upper())])
		assert code(Slotted("box", 3)) == '{label:"BOX"};'

	def test_registration_covers_subclasses(self):
		class Big(Slotted):
			__slots__ = ()

		register_record(Slotted, ["name"])
		assert code(Big("b", 9)) == '{name:"b"};'

	def test_registry_takes_precedence_over_reflection(self):
		register_record(Point, ["y"])
		assert code(Point(1, 2)) == "{y:2};"

	def test_unregistered_slots_class_falls_back_to_text(self):
		value = Slotted("box", 3)
		assert Expr.of(value) == String(str(value))

	def test_enum_is_not_a_record(self):
		assert code(Color.RED) == '"Color.RED";'

	def test_callables_and_types_are_not_records(self):
		assert isinstance(Expr.of(len), String)
		assert isinstance(Expr.of(Point), String)
