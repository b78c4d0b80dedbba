# aad/core/__init__.py

"""
Core public API for the AAD package.

Exports:
    Node             : A vertex of the scalar computation graph.
    create           : Build a leaf Node from a number.
    backward         : Run a reverse pass from a root Node.
    topo_sort        : Predecessors-first order of the graph under a root.
    zero_grad        : Reset gradients on an explicit list of Nodes.
    get_value, set_value, get_grad, set_grad, get_predecessors
                     : Plain field access for optimizers.
    grad, grads, grads_list
                     : Convenience: one reverse pass over f at a given point.
    value            : Convenience: the primal value of a Node or number.
"""

from .node import (
    Node, create,
    get_value, set_value, get_grad, set_grad, get_predecessors,
)
from .engine import backward, topo_sort, zero_grad
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Node", "create",
    "get_value", "set_value", "get_grad", "set_grad", "get_predecessors",
    "backward", "topo_sort", "zero_grad",
    "grad", "grads", "grads_list", "value",
]
