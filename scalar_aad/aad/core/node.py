# aad/core/node.py
from __future__ import annotations
import itertools
import numpy as np
from typing import Any, Optional, Tuple

# Stable integer ids, handed out in creation order. Traversals key their
# visited sets on these instead of on object identity.
_node_ids = itertools.count()

_NUMERIC = (int, float, np.integer, np.floating)


class Node:
    """
    One vertex of the scalar computation graph.

    A Node is either a leaf (created directly from a number) or the output of a
    primitive operation in `aad.ops`. Forward values are computed eagerly when
    the node is built; gradients are filled in by `aad.core.engine.backward`.

    Attributes
    ----------
    value : np.float64
        Forward (primal) value. Fixed once produced by an operation; leaf values
        may be overwritten by an optimizer between steps.
    grad : np.float64
        Gradient accumulator, 0 at construction. The engine only ever adds to it,
        except for the root of a backward pass which is seeded with 1.0.
    predecessors : Tuple[Node, ...]
        Operand(s) that produced this node, in call order. Empty for leaves.
    op_tag : str
        Name of the primitive that produced the node ("leaf", "add", "mul",
        "pow", "relu", "exp", "log"). The backward sweep dispatches on it.
    exponent : Optional[float]
        Constant exponent recorded by "pow" nodes; None otherwise.
    id : int
        Stable creation-order id.
    name : Optional[str]
        Optional debug/pretty-print name.
    """

    __slots__ = ("_value", "_grad", "predecessors", "op_tag", "exponent", "id", "name")

    def __init__(self, value: Any, predecessors: Tuple["Node", ...] = (), op_tag: str = "leaf",
                 *, exponent: Optional[float] = None, name: Optional[str] = None):
        # Type check: only plain numeric scalars are allowed
        if not isinstance(value, _NUMERIC):
            raise TypeError(
                f"Node only accepts numeric scalars (int, float, numpy scalar), "
                f"but got {type(value)}"
            )
        self._value = np.float64(value)
        self._grad = np.float64(0.0)
        self.predecessors = tuple(predecessors)
        self.op_tag = op_tag
        self.exponent = exponent
        self.id = next(_node_ids)
        self.name = name

    @property
    def value(self) -> np.float64:
        return self._value

    @value.setter
    def value(self, v):
        self._value = np.float64(v)

    @property
    def grad(self) -> np.float64:
        return self._grad

    @grad.setter
    def grad(self, g):
        self._grad = np.float64(g)

    @property
    def is_leaf(self) -> bool:
        return not self.predecessors

    def backward(self):
        from .engine import backward
        backward(self)

    def __str__(self):
        return f"{float(self._value):f}"

    def __repr__(self):
        label = f", name={self.name!r}" if self.name is not None else ""
        return (f"Node(value={float(self._value)!r}, grad={float(self._grad)!r}, "
                f"op={self.op_tag!r}{label})")

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def relu(self):
        from ..ops.special import relu
        return relu(self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def log(self):
        from ..ops.transcendental import log
        return log(self)


def create(value: Any, *, name: Optional[str] = None) -> Node:
    """Leaf construction: a Node with no predecessors and a no-op backward rule."""
    return Node(value, name=name)


# Plain field access, used by optimizers and zero-grad sweeps
def get_value(node: Node) -> np.float64:
    return node.value


def set_value(node: Node, v: float) -> None:
    node.value = v


def get_grad(node: Node) -> np.float64:
    return node.grad


def set_grad(node: Node, g: float) -> None:
    node.grad = g


def get_predecessors(node: Node) -> Tuple[Node, ...]:
    return node.predecessors
