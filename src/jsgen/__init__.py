"""Build JavaScript syntax trees and emit them as compact source text."""

# Factories
from jsgen import js as js

# Errors
from jsgen.errors import IncompleteNodeError as IncompleteNodeError
from jsgen.errors import InvalidIdentifierError as InvalidIdentifierError
from jsgen.errors import InvalidOperationError as InvalidOperationError
from jsgen.errors import JSGenError as JSGenError
from jsgen.errors import StatementAsExpressionError as StatementAsExpressionError

# Identifiers
from jsgen.identifiers import RESERVED_WORDS as RESERVED_WORDS
from jsgen.identifiers import is_valid_identifier as is_valid_identifier

# Global singletons and registry
from jsgen.nodes import EMPTY as EMPTY
from jsgen.nodes import NULL as NULL
from jsgen.nodes import RECORD_REGISTRY as RECORD_REGISTRY

# Expression nodes
from jsgen.nodes import Array as Array
from jsgen.nodes import Binary as Binary
from jsgen.nodes import Boolean as Boolean
from jsgen.nodes import Call as Call
from jsgen.nodes import Conditional as Conditional
from jsgen.nodes import Expr as Expr
from jsgen.nodes import Function as Function
from jsgen.nodes import Identifier as Identifier
from jsgen.nodes import Index as Index
from jsgen.nodes import Member as Member
from jsgen.nodes import New as New
from jsgen.nodes import Node as Node
from jsgen.nodes import Null as Null
from jsgen.nodes import Number as Number
from jsgen.nodes import Object as Object
from jsgen.nodes import String as String
from jsgen.nodes import This as This
from jsgen.nodes import Unary as Unary

# Statement nodes
from jsgen.nodes import Empty as Empty
from jsgen.nodes import Stmt as Stmt
from jsgen.statements import Block as Block
from jsgen.statements import Break as Break
from jsgen.statements import Continue as Continue
from jsgen.statements import If as If
from jsgen.statements import Return as Return
from jsgen.statements import Throw as Throw
from jsgen.statements import Var as Var
from jsgen.statements import While as While

# Coercion
from jsgen.nodes import array_or_object as array_or_object
from jsgen.nodes import coerce as coerce
from jsgen.nodes import register_record as register_record

# Emit
from jsgen.nodes import emit as emit
from jsgen.options import RenderOptions as RenderOptions
from jsgen.script import Script as Script

# Precedence
from jsgen.precedence import Associativity as Associativity
from jsgen.precedence import Position as Position
from jsgen.precedence import Precedence as Precedence
from jsgen.precedence import needs_parens as needs_parens
