"""
Worked example: a small expression exercising every arithmetic primitive,
with shared subexpressions, followed by one reverse pass.

    python -m scalar_aad.aad.demo
"""

from .core.node import create
from .core.graph_utils import print_graph_summary


def build_expression():
    """Return (a, b, g) for the canonical expression; g.value ≈ 24.70408."""
    a = create(-4.0, name="a")
    b = create(2.0, name="b")
    c = a + b
    d = a * b + b * b * b
    c = c + c + 1
    c = c + 1 + c + (-a)
    d = d + d * 2 + (b + a).relu()
    d = d + 3 * d + (b - a).relu()
    e = c - d
    f = e * e
    g = f / 2.0
    g = g + 10.0 / f
    return a, b, g


def main(verbose: bool = False):
    a, b, g = build_expression()
    print(f"g value : {g} grad value {float(g.grad)}")
    g.backward()
    print(f"a value : {a} grad value {float(a.grad)}")
    print(f"b value : {b} grad value {float(b.grad)}")
    if verbose:
        print_graph_summary(g)


if __name__ == "__main__":
    main(verbose=True)
