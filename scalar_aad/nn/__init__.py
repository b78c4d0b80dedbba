"""
Neural-network package built on the scalar AAD engine.
"""

from .module import Module, Neuron, Layer, MLP

__all__ = [
    'Module',
    'Neuron',
    'Layer',
    'MLP',
]
