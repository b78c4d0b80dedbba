"""
Plain stochastic gradient descent over a list of leaf Nodes.
"""

from typing import Iterable

from ..aad.core.node import get_grad, get_value, set_value
from ..aad.core.engine import zero_grad


class SGD:
    """
    p.value <- p.value - lr * p.grad for every parameter.

    Overwriting leaf values does not touch graphs already built from them;
    the next forward pass must rebuild the graph.
    """

    def __init__(self, parameters: Iterable, lr: float = 1.0):
        self.parameters = list(parameters)
        if not self.parameters:
            raise ValueError("SGD got an empty parameter list.")
        self.lr = lr

    def step(self):
        for p in self.parameters:
            set_value(p, get_value(p) - self.lr * get_grad(p))

    def zero_grad(self):
        zero_grad(self.parameters)
