"""
Full-batch gradient-descent training of an MLP classifier.

    python -m scalar_aad.training.trainer --x dataset/X.csv --y dataset/y.csv
"""

import argparse
import sys
import time
import warnings
import numpy as np
from typing import Dict, List, Optional, Sequence

from ..aad.core.node import Node
from ..nn.module import MLP
from .config import TrainConfig
from .dataset import load_dataset
from .losses import accuracy, svm_loss
from .optimizer import SGD


def train(model: MLP, X: Sequence[Sequence[Node]], y: Sequence[Node],
          config: Optional[TrainConfig] = None) -> List[Dict]:
    """
    Train `model` in place on (X, y).

    Each step rebuilds the graph from the current parameter values:
        forward -> loss/accuracy -> zero grads -> backward -> SGD update

    Args:
        model: MLP producing raw scores; only its first output is scored
        X: Feature rows
        y: Labels (-1 / +1)
        config: Training settings (defaults to TrainConfig())

    Returns:
        One dict per step: {'step', 'loss', 'accuracy', 'lr'}; loss and
        accuracy are measured before that step's update.
    """
    config = config if config is not None else TrainConfig()
    if len(X) != len(y):
        raise ValueError(f"{len(X)} feature rows for {len(y)} targets")
    if not X:
        raise ValueError("Cannot train on an empty dataset")
    if model.n_outputs != 1:
        warnings.warn(
            f"Model has {model.n_outputs} outputs; only the first is used as the score"
        )

    params = model.parameters()
    optimizer = SGD(params, lr=config.lr_start)
    history = []
    t_start = time.time()

    for step in range(config.n_steps):
        # Forward
        scores = [model(xi)[0] for xi in X]
        total_loss = svm_loss(scores, y, params, alpha=config.alpha)
        acc = accuracy(scores, y)

        # Backward
        optimizer.zero_grad()
        total_loss.backward()

        # SGD
        optimizer.lr = config.lr_at(step)
        optimizer.step()

        history.append({
            'step': step,
            'loss': float(total_loss.value),
            'accuracy': acc,
            'lr': optimizer.lr,
        })

        if config.verbose and (step % config.print_every == 0 or step == config.n_steps - 1):
            print(f"Step {step} Loss {total_loss} Accuracy {acc * 100:.1f}")

    if config.verbose:
        elapsed = time.time() - t_start
        print(f"Trained {len(params)} parameters for {config.n_steps} steps in {elapsed:.2f}s")

    return history


def parse_hidden(hidden_str: str):
    """Parse '16,16' into (16, 16)."""
    try:
        return tuple(int(h) for h in hidden_str.split(',') if h.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid layer widths: {hidden_str!r}")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Train a small MLP classifier with the scalar AAD engine',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--x', dest='x_path', default='dataset/X.csv',
                        help='Features file (two whitespace-separated columns)')
    parser.add_argument('--y', dest='y_path', default='dataset/y.csv',
                        help='Labels file (one column, -1/+1)')
    parser.add_argument('--steps', type=int, default=100,
                        help='Number of gradient-descent steps')
    parser.add_argument('--hidden', type=parse_hidden, default=(16, 16),
                        help='Comma-separated hidden layer widths (e.g. "16,16")')
    parser.add_argument('--alpha', type=float, default=1e-4,
                        help='L2 regularization strength')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for weight initialization')
    parser.add_argument('--print-every', type=int, default=1,
                        help='Report progress every n steps')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress output')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = TrainConfig(
            n_steps=args.steps, hidden=args.hidden, alpha=args.alpha,
            seed=args.seed, verbose=not args.quiet, print_every=args.print_every,
        )
        X, y = load_dataset(args.x_path, args.y_path)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    model = MLP(2, list(config.hidden) + [1], rng=np.random.default_rng(config.seed))
    if config.verbose:
        print(f"Loaded {len(X)} samples; model: {model}")

    history = train(model, X, y, config)
    final = history[-1]
    print(f"Final loss {final['loss']:.6f} accuracy {final['accuracy'] * 100:.1f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
