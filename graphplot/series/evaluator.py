"""Safe single-variable expression evaluator backed by SymPy.

Expressions use calculator syntax: ``x^2`` is a power, ``2x`` is ``2*x``,
``log`` is the natural logarithm and ``ceil``/``ln``/``log10`` are
accepted alongside the SymPy names. Only whitelisted names and operator
characters reach the SymPy parser.

Parsing never evaluates: numeric literals are read as floats and the tree
is compiled with ``lambdify`` to NumPy, so ``10^10^10`` or ``x^x^x^x``
overflow to ``inf`` in machine arithmetic instead of being expanded as
exact integers.
"""

import functools
import re
from tokenize import NAME
from typing import Dict, List, Mapping, Tuple

import numpy as np
import sympy as sp
from sympy.core.function import AppliedUndef
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication,
    parse_expr,
    standard_transformations,
)

from graphplot.exceptions import ExpressionEvaluationError, ExpressionSyntaxError

VARIABLE = sp.Symbol("x", real=True)


def _integers_as_floats(tokens: List[Tuple[int, str]], local_dict, global_dict):
    """Read integer literals as ``Float`` so powers stay in floating point."""
    return [
        (NAME, "Float") if (tok_type, tok_value) == (NAME, "Integer") else (tok_type, tok_value)
        for tok_type, tok_value in tokens
    ]


_TRANSFORMATIONS = standard_transformations + (
    _integers_as_floats,
    implicit_multiplication,
    convert_xor,
)


def _unevaluated(func):
    return functools.partial(func, evaluate=False)


def _reciprocal(func):
    def build(arg, **kwargs):
        return sp.Pow(func(arg, evaluate=False), -1, evaluate=False)

    return build


def _log_base(base: float):
    def build(arg, **kwargs):
        return sp.Mul(
            sp.log(arg, evaluate=False),
            sp.Pow(sp.log(sp.Float(base), evaluate=False), -1, evaluate=False),
            evaluate=False,
        )

    return build


_LOCALS: Dict[str, object] = {
    "x": VARIABLE,
    "pi": sp.pi,
    "e": sp.E,
    "sin": _unevaluated(sp.sin),
    "cos": _unevaluated(sp.cos),
    "tan": _unevaluated(sp.tan),
    "sec": _reciprocal(sp.cos),
    "csc": _reciprocal(sp.sin),
    "cot": _reciprocal(sp.tan),
    "asin": _unevaluated(sp.asin),
    "acos": _unevaluated(sp.acos),
    "atan": _unevaluated(sp.atan),
    "arcsin": _unevaluated(sp.asin),
    "arccos": _unevaluated(sp.acos),
    "arctan": _unevaluated(sp.atan),
    "sinh": _unevaluated(sp.sinh),
    "cosh": _unevaluated(sp.cosh),
    "tanh": _unevaluated(sp.tanh),
    "asinh": _unevaluated(sp.asinh),
    "acosh": _unevaluated(sp.acosh),
    "atanh": _unevaluated(sp.atanh),
    "exp": _unevaluated(sp.exp),
    "log": _unevaluated(sp.log),
    "ln": _unevaluated(sp.log),
    "log10": _log_base(10.0),
    "log2": _log_base(2.0),
    "sqrt": _unevaluated(sp.sqrt),
    "cbrt": _unevaluated(sp.cbrt),
    "abs": _unevaluated(sp.Abs),
    "sign": _unevaluated(sp.sign),
    "floor": _unevaluated(sp.floor),
    "ceil": _unevaluated(sp.ceiling),
    "ceiling": _unevaluated(sp.ceiling),
}

ALLOWED_NAMES = frozenset(_LOCALS)

_ALLOWED_CHARS = re.compile(r"^[0-9a-z_+\-*/^().,\s]*$")
# Numeric literals are matched first so the ``e`` in ``1e3`` is not read as a name
_TOKEN = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|[a-z_][a-z0-9_]*")
_FORBIDDEN = ("__", "lambda", "import")


class CompiledExpression:
    """A parsed expression ready to be evaluated at many x values."""

    def __init__(self, source: str, expr: sp.Expr):
        self.source = source
        self.expr = expr
        self._func = sp.lambdify(VARIABLE, expr, "numpy")

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def evaluate(self, x: float) -> float:
        """Evaluate at ``x`` in double precision.

        Raises:
            ExpressionEvaluationError: If the value at x is not a finite
                real number (domain error, division by zero, overflow)
        """
        try:
            with np.errstate(all="ignore"):
                value = float(self._func(np.float64(x)))
        except (TypeError, ValueError, ArithmeticError) as e:
            raise ExpressionEvaluationError(self.source, x, str(e))
        if not np.isfinite(value):
            raise ExpressionEvaluationError(self.source, x, f"value is {value}")
        return value

    def __repr__(self) -> str:
        return f"CompiledExpression({self.source!r})"


def _check_tokens(source: str) -> None:
    if not _ALLOWED_CHARS.match(source):
        raise ExpressionSyntaxError(source, "unsupported characters")
    for term in _FORBIDDEN:
        if term in source:
            raise ExpressionSyntaxError(source, f"forbidden term '{term}'")
    if re.search(r"\.\s*[a-z_]", source):
        raise ExpressionSyntaxError(source, "attribute access is not allowed")
    for name in _TOKEN.findall(source):
        if name[0].isdigit() or name[0] == ".":
            continue
        if name not in ALLOWED_NAMES:
            raise ExpressionSyntaxError(source, f"unknown name '{name}'")


@functools.lru_cache(maxsize=256)
def compile_expression(source: str) -> CompiledExpression:
    """Parse ``source`` into a reusable ``CompiledExpression``.

    Raises:
        ExpressionSyntaxError: If the text is not a valid expression in x
    """
    source = source.strip().lower()
    if not source:
        raise ExpressionSyntaxError(source, "expression is empty")
    _check_tokens(source)

    try:
        expr = parse_expr(
            source,
            local_dict=dict(_LOCALS),
            transformations=_TRANSFORMATIONS,
            evaluate=False,
        )
    except Exception as e:
        raise ExpressionSyntaxError(source, f"{type(e).__name__}: {e}")

    if not isinstance(expr, sp.Expr):
        raise ExpressionSyntaxError(source, "not a numeric expression")
    unknown_symbols = expr.free_symbols - {VARIABLE}
    if unknown_symbols:
        names = ", ".join(sorted(str(s) for s in unknown_symbols))
        raise ExpressionSyntaxError(source, f"unknown symbols: {names}")
    if expr.atoms(AppliedUndef):
        raise ExpressionSyntaxError(source, "unknown function")

    try:
        return CompiledExpression(source, expr)
    except Exception as e:
        raise ExpressionSyntaxError(source, f"cannot compile: {type(e).__name__}: {e}")


class ExpressionEvaluator:
    """Evaluates expression strings under a single ``x`` binding."""

    def compile(self, expression: str) -> CompiledExpression:
        return compile_expression(expression)

    def evaluate(self, expression: str, bindings: Mapping[str, float]) -> float:
        """Evaluate ``expression`` with ``bindings["x"]``.

        Raises:
            ExpressionSyntaxError: If the expression cannot be parsed
            ExpressionEvaluationError: If it has no real value at x
        """
        if "x" not in bindings:
            raise KeyError("bindings must provide 'x'")
        return self.compile(expression).evaluate(float(bindings["x"]))
