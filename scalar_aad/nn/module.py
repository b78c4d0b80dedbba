"""
Neural-network building blocks on top of the scalar AAD engine:
Neuron, Layer and MLP (multi-layer perceptron).
"""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence, Union

from ..aad.core.node import Node, create
from ..aad.core.engine import zero_grad as _zero_grad

Scalar = Union[Node, float]


class Module:
    """
    Base class for all network modules.

    Subclasses override `parameters()`; `zero_grad()` resets the gradient of
    every parameter before the next backward pass.
    """

    def zero_grad(self):
        _zero_grad(self.parameters())

    def parameters(self) -> List[Node]:
        return []


class Neuron(Module):
    """
    Single neuron: act(w1*x1 + ... + wn*xn + b).

    Args:
        nin: number of inputs
        nonlin: apply relu to the weighted sum (False gives a linear unit)
        rng: numpy Generator used for the uniform(-1, 1) weight draw
    """

    def __init__(self, nin: int, nonlin: bool = True, rng: Optional[np.random.Generator] = None):
        if nin < 1:
            raise ValueError(f"nin must be >= 1, got {nin}")
        rng = rng if rng is not None else np.random.default_rng()
        self.w = [create(wi) for wi in rng.uniform(-1.0, 1.0, size=nin)]
        self.b = create(0.0)
        self.nonlin = nonlin

    def __call__(self, x: Sequence[Scalar]) -> Node:
        if len(x) != len(self.w):
            raise ValueError(f"Neuron expects {len(self.w)} inputs, got {len(x)}")
        act = self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * xi
        return act.relu() if self.nonlin else act

    def parameters(self) -> List[Node]:
        return self.w + [self.b]

    def __repr__(self):
        return f"{'ReLU' if self.nonlin else 'Linear'}Neuron({len(self.w)})"


class Layer(Module):
    """Fully-connected layer: `nout` neurons sharing the same `nin` inputs."""

    def __init__(self, nin: int, nout: int, nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        self.neurons = [Neuron(nin, nonlin=nonlin, rng=rng) for _ in range(nout)]

    def __call__(self, x: Sequence[Scalar]) -> List[Node]:
        return [n(x) for n in self.neurons]

    def parameters(self) -> List[Node]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """
    Multi-layer perceptron.

    MLP(2, [16, 16, 1]) builds 2 -> 16 -> 16 -> 1; every layer uses relu
    except the last, which is linear (raw scores).
    """

    def __init__(self, nin: int, nouts: Sequence[int], rng: Optional[np.random.Generator] = None):
        if not nouts:
            raise ValueError("nouts must name at least one layer")
        rng = rng if rng is not None else np.random.default_rng()
        sz = [nin] + list(nouts)
        self.layers = [
            Layer(sz[i], sz[i + 1], nonlin=i != len(nouts) - 1, rng=rng)
            for i in range(len(nouts))
        ]

    def __call__(self, x: Sequence[Scalar]) -> List[Node]:
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    @property
    def n_outputs(self) -> int:
        return len(self.layers[-1].neurons)

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
