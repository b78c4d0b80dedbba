# aad/__init__.py
# Reverse-mode automatic differentiation over scalar values

from .core.node import (
    Node, create,
    get_value, set_value, get_grad, set_grad, get_predecessors,
)
from .core.engine import backward, topo_sort, zero_grad
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import get_graph_stats, print_graph_summary

# Primitive operations
from .ops import add, sub, mul, div, neg, pow, exp, log, relu

__all__ = [
    # Core
    'Node',
    'create',
    'backward',
    'topo_sort',
    'zero_grad',
    # Field access
    'get_value',
    'set_value',
    'get_grad',
    'set_grad',
    'get_predecessors',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'get_graph_stats',
    'print_graph_summary',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'exp', 'log',
    'relu',
]
