# aad/core/engine.py
from __future__ import annotations
import numpy as np
from typing import Iterable, List
from .node import Node


def topo_sort(root: Node) -> List[Node]:
    """
    Linear order of every node reachable from `root`, predecessors first.

    This is the postorder of a depth-first walk that expands a node's
    predecessors (in their recorded order) before emitting the node itself.
    Each node appears exactly once, however many paths reach it, because the
    visited set (keyed on `Node.id`) stops re-expansion.

    The walk uses an explicit work stack rather than recursion, so graph depth
    is not bounded by the interpreter's recursion limit.
    """
    order: List[Node] = []
    visited = set()
    # (node, expanded): expanded=True means its predecessors are already done
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if node.id in visited:
            continue
        visited.add(node.id)
        stack.append((node, True))
        # Reversed push so the first predecessor is expanded first
        for p in reversed(node.predecessors):
            if p.id not in visited:
                stack.append((p, False))
    return order


def backward(root: Node):
    """
    Run a full reverse pass rooted at `root`.

    Steps:
        1) topological order from the root, reversed (root -> leaves)
        2) seed root.grad = 1.0  (d root / d root)
        3) fire each node's local rule, accumulating into its predecessors

    When a node's rule fires, all of its consumers have already fired, so its
    gradient is complete. Gradients are accumulated, never overwritten:
    a second call without `zero_grad` adds to what is already there.
    """
    order = topo_sort(root)
    root.grad = 1.0
    # IEEE semantics: inf/NaN propagate silently
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        for node in reversed(order):
            _local_backward(node)


def zero_grad(nodes: Iterable[Node]):
    """Set `grad` to zero on every node in an explicit list (e.g. model parameters)."""
    for v in nodes:
        v.grad = 0.0


def _local_backward(node: Node):
    """
    Local chain-rule step for one node: given node.grad, add each operand's
    contribution into that operand's grad.

    Rules
    -----
    add  : a.grad += g ; b.grad += g
    mul  : a.grad += b * g ; b.grad += a * g
    pow  : a.grad += p * a^(p-1) * g
    relu : a.grad += g * [out > 0]
    exp  : a.grad += exp(a) * g
    log  : a.grad += g / a

    neg, sub and div are not primitives: they are built from mul, add and pow.
    Operand values are read when the rule fires.
    """
    tag = node.op_tag
    g = node.grad

    if tag == "leaf":
        return

    if tag == "add":
        a, b = node.predecessors
        a.grad += g
        b.grad += g
        return

    if tag == "mul":
        a, b = node.predecessors
        a.grad += b.value * g
        b.grad += a.value * g
        return

    if tag == "pow":
        (a,) = node.predecessors
        p = node.exponent
        a.grad += p * np.power(a.value, p - 1.0) * g
        return

    if tag == "relu":
        # Gate on the output: an input of exactly 0 gets no gradient
        (a,) = node.predecessors
        a.grad += g * (1.0 if node.value > 0 else 0.0)
        return

    if tag == "exp":
        (a,) = node.predecessors
        a.grad += np.exp(a.value) * g
        return

    if tag == "log":
        (a,) = node.predecessors
        a.grad += g / a.value
        return

    raise ValueError(f"No backward rule for op_tag {tag!r}")
