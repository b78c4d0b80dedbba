"""
Loss and metric for binary classification with raw scores.
"""

from typing import Iterable, Sequence

from ..aad.core.node import Node, create


def svm_loss(scores: Sequence[Node], y: Sequence[Node],
             parameters: Iterable[Node] = (), alpha: float = 0.0) -> Node:
    """
    SVM max-margin loss with optional L2 penalty:

        mean_i relu(1 - y_i * s_i)  +  alpha * sum_p p^2

    The penalty term is only built when alpha > 0.
    """
    if len(scores) != len(y):
        raise ValueError(f"{len(scores)} scores for {len(y)} targets")
    if not scores:
        raise ValueError("svm_loss needs at least one score")

    data_loss = create(0.0)
    for si, yi in zip(scores, y):
        data_loss = data_loss + (1 + -yi * si).relu()
    data_loss = data_loss / len(scores)

    if alpha <= 0.0:
        return data_loss

    reg_loss = create(0.0)
    for p in parameters:
        reg_loss = reg_loss + p * p
    return data_loss + alpha * reg_loss


def accuracy(scores: Sequence[Node], y: Sequence[Node]) -> float:
    """
    Fraction of samples whose score has the same sign as the label.
    A zero on either side counts as a match.
    """
    if len(scores) != len(y):
        raise ValueError(f"{len(scores)} scores for {len(y)} targets")
    if not scores:
        return 0.0
    hits = 0
    for si, yi in zip(scores, y):
        s, t = si.value, yi.value
        if (s >= 0 and t >= 0) or (s <= 0 and t <= 0):
            hits += 1
    return hits / len(scores)
