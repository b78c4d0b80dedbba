# aad/ops/__init__.py

from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import exp, log
from .special import relu

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "exp", "log",
    "relu",
]
