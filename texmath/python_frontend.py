"""Build expression trees from Python expression source.

The translator only consumes trees; this module is the parser shipped with the
package so that formulas can be written in ordinary Python syntax::

    >>> parse_expression("sqrt(x) + pi")
    Call(head='+', args=(Call(head='sqrt', args=(Identifier(name='x'),)), Identifier(name='pi')))

Operators become calls whose head is the operator symbol (``-x`` becomes
``neg``), matching the keys of the default notation table.  Python drops
redundant parentheses while parsing, so operands that bind looser than their
operator are wrapped in a ``paren`` call to keep the rendered grouping.
"""

from __future__ import annotations

import ast
from typing import Dict, List, Tuple, Type

from .errors import UnsupportedSyntaxError
from .expr import Call, ExpressionNode, Identifier, Literal


# Module prefixes dropped from dotted names, so ``math.sqrt(x)`` reaches the
# ``sqrt`` renderer and ``math.pi`` the ``pi`` symbol.
MODULE_PREFIXES = ("math", "cmath", "numpy", "np", "sympy", "sp")

_BINARY_OPERATORS: Dict[Type[ast.operator], str] = {
    ast.Add: "+",
    ast.Sub: "-",
    ast.Mult: "*",
    ast.Div: "/",
    ast.FloorDiv: "//",
    ast.Mod: "%",
    ast.Pow: "**",
}

_UNARY_OPERATORS: Dict[Type[ast.unaryop], str] = {
    ast.USub: "neg",
    ast.UAdd: "pos",
    ast.Not: "not",
}

_COMPARISONS: Dict[Type[ast.cmpop], str] = {
    ast.Eq: "==",
    ast.NotEq: "!=",
    ast.Lt: "<",
    ast.LtE: "<=",
    ast.Gt: ">",
    ast.GtE: ">=",
    ast.In: "in",
}

_BOOLEAN_OPERATORS: Dict[Type[ast.boolop], str] = {
    ast.And: "and",
    ast.Or: "or",
}

# Python's binding strength; results that render as a self-delimiting group
# (fractions, function calls, names) count as atoms.
_ATOM = 100
_PRECEDENCE: Dict[str, int] = {
    "or": 1,
    "and": 2,
    "not": 3,
    "==": 4,
    "!=": 4,
    "<": 4,
    "<=": 4,
    ">": 4,
    ">=": 4,
    "in": 4,
    "+": 6,
    "-": 6,
    "*": 7,
    "%": 7,
    "neg": 8,
    "pos": 8,
    "**": 9,
    "/": _ATOM,
    "//": _ATOM,
}

_ASSOCIATIVE = {"+", "*", "and", "or"}

_Built = Tuple[ExpressionNode, int]


def parse_expression(source: str) -> ExpressionNode:
    """Parse ``source`` as a single Python expression and return its tree."""

    try:
        module = ast.parse(source.strip(), mode="eval")
    except SyntaxError as exc:
        raise UnsupportedSyntaxError(f"invalid expression: {exc.msg}", column=exc.offset) from None
    node, _ = _TreeBuilder().visit(module.body)
    return node


def _group(built: _Built, minimum: int) -> ExpressionNode:
    node, precedence = built
    if precedence < minimum:
        return Call("paren", (node,))
    return node


class _TreeBuilder(ast.NodeVisitor):
    """Convert Python ``ast`` expression nodes into expression trees."""

    def generic_visit(self, node: ast.AST) -> _Built:
        raise UnsupportedSyntaxError(
            f"unsupported syntax: {type(node).__name__}",
            column=getattr(node, "col_offset", None),
        )

    def visit_Constant(self, node: ast.Constant) -> _Built:
        if isinstance(node.value, (bool, int, float, complex, str)):
            return Literal(node.value), _ATOM
        return self.generic_visit(node)

    def visit_Name(self, node: ast.Name) -> _Built:
        return Identifier(node.id), _ATOM

    def visit_Attribute(self, node: ast.Attribute) -> _Built:
        return Identifier(self._dotted_name(node)), _ATOM

    def visit_BinOp(self, node: ast.BinOp) -> _Built:
        operator = _BINARY_OPERATORS.get(type(node.op))
        if operator is None:
            return self.generic_visit(node.op)
        precedence = _PRECEDENCE[operator]
        left = self.visit(node.left)
        right = self.visit(node.right)
        if operator in {"/", "//"}:
            # the fraction template groups both slots
            args = (left[0], right[0])
        elif operator == "**":
            args = (_group(left, precedence + 1), right[0])
        else:
            # only a right operand with the same associative operator regroups freely
            same_operator = isinstance(right[0], Call) and right[0].head == operator
            right_minimum = (
                precedence if operator in _ASSOCIATIVE and same_operator else precedence + 1
            )
            args = (_group(left, precedence), _group(right, right_minimum))
        return Call(operator, args), precedence

    def visit_UnaryOp(self, node: ast.UnaryOp) -> _Built:
        operator = _UNARY_OPERATORS.get(type(node.op))
        if operator is None:
            return self.generic_visit(node.op)
        precedence = _PRECEDENCE[operator]
        operand = self.visit(node.operand)
        # ``-x**2`` keeps its meaning without parentheses, ``-(a + b)`` does not
        return Call(operator, (_group(operand, precedence),)), precedence

    def visit_BoolOp(self, node: ast.BoolOp) -> _Built:
        operator = _BOOLEAN_OPERATORS[type(node.op)]
        precedence = _PRECEDENCE[operator]
        values = [_group(self.visit(value), precedence) for value in node.values]
        result = values[0]
        for value in values[1:]:
            result = Call(operator, (result, value))
        return result, precedence

    def visit_Compare(self, node: ast.Compare) -> _Built:
        comparisons: List[ExpressionNode] = []
        left = self.visit(node.left)
        for op, comparator in zip(node.ops, node.comparators):
            operator = _COMPARISONS.get(type(op))
            if operator is None:
                return self.generic_visit(op)
            right = self.visit(comparator)
            precedence = _PRECEDENCE[operator]
            comparisons.append(
                Call(operator, (_group(left, precedence + 1), _group(right, precedence + 1)))
            )
            left = right
        if len(comparisons) == 1:
            return comparisons[0], _PRECEDENCE["=="]
        result = comparisons[0]
        for comparison in comparisons[1:]:
            result = Call("and", (result, comparison))
        return result, _PRECEDENCE["and"]

    def visit_Call(self, node: ast.Call) -> _Built:
        if node.keywords:
            raise UnsupportedSyntaxError(
                "keyword arguments are not supported", column=node.keywords[0].col_offset
            )
        if isinstance(node.func, ast.Name):
            head = node.func.id
        elif isinstance(node.func, ast.Attribute):
            head = self._dotted_name(node.func)
        else:
            return self.generic_visit(node.func)
        args = tuple(self.visit(arg)[0] for arg in node.args)
        return Call(head, args), _ATOM

    def visit_Subscript(self, node: ast.Subscript) -> _Built:
        base = self.visit(node.value)
        index = self.visit(node.slice)
        return Call("[]", (_group(base, _ATOM), index[0])), _ATOM

    def _dotted_name(self, node: ast.AST) -> str:
        parts: List[str] = []
        while isinstance(node, ast.Attribute):
            parts.append(node.attr)
            node = node.value
        if not isinstance(node, ast.Name):
            return self.generic_visit(node)
        parts.append(node.id)
        module, _, name = ".".join(reversed(parts)).rpartition(".")
        if module in MODULE_PREFIXES:
            return name
        return f"{module}.{name}"


__all__ = ["MODULE_PREFIXES", "parse_expression"]
