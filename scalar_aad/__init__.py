"""
scalar_aad: reverse-mode automatic differentiation over scalar values,
with a small MLP and training loop built on top.
"""

__version__ = "0.1.0"
