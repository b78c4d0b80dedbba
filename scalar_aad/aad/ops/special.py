# aad/ops/special.py
import numpy as np
from ..core.node import Node
from .arithmetic import _as_node


def relu(x):
    """
    Primitive: out = max(0, x).

    The backward gate looks at the output value, so x == 0 is treated as the
    closed side of the kink (sub-gradient 0).
    """
    x = _as_node(x)
    val = np.float64(0.0) if x.value <= 0.0 else x.value
    return Node(val, (x,), "relu")
