# aad/ops/arithmetic.py
import numpy as np
from ..core.node import Node, create


def _as_node(x):
    """Ensure x is a Node; otherwise lift it to a leaf Node."""
    return x if isinstance(x, Node) else create(x)


def _binary(x, y, f, tag):
    """
    Generic binary primitive:
      - lifts plain numbers to leaves (operand order is kept as written)
      - computes out.value = f(x.value, y.value)
      - records (x, y) as predecessors under `tag`; the engine holds the rule
    """
    x = _as_node(x)
    y = _as_node(y)
    with np.errstate(over="ignore", invalid="ignore"):
        val = f(x.value, y.value)
    return Node(val, (x, y), tag)


def add(x, y): return _binary(x, y, lambda a, b: a + b, "add")
def mul(x, y): return _binary(x, y, lambda a, b: a * b, "mul")


def neg(x):
    """Unary negation, built as x * (-1)."""
    return mul(x, create(-1.0))


def sub(x, y):
    """x - y, built as x + (-y)."""
    return add(x, neg(y))


def pow(x, exponent):
    """
    Power with a constant exponent:
      out.value = x.value ** exponent
      ∂out/∂x   = exponent * x^(exponent-1)

    No domain handling: a zero base with a negative exponent gives inf, and a
    negative base with a non-integer exponent gives NaN, as in IEEE arithmetic.
    """
    if isinstance(exponent, Node):
        raise TypeError("pow only supports constant (int/float) exponents, not Node exponents")
    if not isinstance(exponent, (int, float, np.integer, np.floating)):
        raise TypeError(f"pow exponent must be a number, got {type(exponent)}")
    x = _as_node(x)
    exponent = float(exponent)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        val = np.power(x.value, exponent)
    return Node(val, (x,), "pow", exponent=exponent)


def div(x, y):
    """x / y, built as x * y^(-1)."""
    return mul(x, pow(_as_node(y), -1.0))
