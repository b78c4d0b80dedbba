# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List
import numpy as np

from .node import Node
from .engine import backward, topo_sort, zero_grad


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, name: str) -> Node:
    """Wrap a plain value as a leaf Node if needed; otherwise return the Node itself."""
    return v if isinstance(v, Node) else Node(v, name=name)


def _reverse(y: Node, inputs: Iterable[Node]):
    """Zero every gradient the pass can touch (and the inputs), then run one reverse pass."""
    zero_grad(topo_sort(y))
    zero_grad(inputs)
    backward(y)


def _scalar_output(y: Any, fname: str) -> Node:
    if isinstance(y, Node):
        return y
    if isinstance(y, (list, tuple, dict, set)) or (hasattr(y, "shape") and getattr(y, "shape", ()) != ()):
        raise ValueError(f"{fname} expects scalar output.")
    if isinstance(y, np.ndarray):
        y = y.item()
    # Constant output: no path back to the inputs, so every gradient is 0
    return Node(y, name="y")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Clears any gradient already held by the graph, then runs one reverse pass.
    """
    x = _ensure_node(x0, name="x")
    y = _scalar_output(f(x), "grad(f, x0)")
    _reverse(y, [x])
    return float(x.grad)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar-output function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a scalar Node
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    nodes: Dict[str, Node] = {k: _ensure_node(v, name=k) for k, v in inputs.items()}
    y = _scalar_output(f(nodes), "grads(f, inputs)")
    _reverse(y, nodes.values())
    return {k: float(nodes[k].grad) for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Node], x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [_ensure_node(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = _scalar_output(f(xs), "grads_list(f, x0_list)")
    _reverse(y, xs)
    return [float(x.grad) for x in xs]
