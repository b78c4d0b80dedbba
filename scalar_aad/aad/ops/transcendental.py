# aad/ops/transcendental.py
import numpy as np
from ..core.node import Node
from .arithmetic import _as_node


def exp(x):
    x = _as_node(x)
    with np.errstate(over="ignore"):
        ex = np.exp(x.value)
    return Node(ex, (x,), "exp")


def log(x):
    x = _as_node(x)
    with np.errstate(divide="ignore", invalid="ignore"):
        out = np.log(x.value)
    return Node(out, (x,), "log")
