"""
Training Configuration

Settings for the gradient-descent training loop, plus the learning-rate
schedule shared by the loop and the CLI.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class TrainConfig:
    """
    Settings for `train()`.

    Attributes:
        n_steps: Number of full-batch gradient-descent steps
        hidden: Hidden layer widths; the output layer (width 1) is appended
        alpha: L2 regularization strength (0 disables the penalty)
        lr_start: Learning rate at step 0
        lr_end_fraction: Fraction of `lr_start` removed by the last step
        seed: Seed for weight initialization (None draws fresh entropy)
        verbose: Print progress while training
        print_every: Print every n-th step when verbose
    """
    n_steps: int = 100
    hidden: Tuple[int, ...] = (16, 16)
    alpha: float = 1e-4
    lr_start: float = 1.0
    lr_end_fraction: float = 0.9
    seed: Optional[int] = None
    verbose: bool = True
    print_every: int = 1

    def __post_init__(self):
        self.hidden = tuple(self.hidden)
        if self.n_steps < 1:
            raise ValueError(f"n_steps must be >= 1, got {self.n_steps}")
        if self.alpha < 0:
            raise ValueError(f"alpha must be non-negative, got {self.alpha}")
        if self.print_every < 1:
            raise ValueError(f"print_every must be >= 1, got {self.print_every}")
        if any(h < 1 for h in self.hidden):
            raise ValueError(f"hidden layer widths must be >= 1, got {self.hidden}")

    @staticmethod
    def learning_rate(step: int, n_steps: int, lr_start: float = 1.0,
                      lr_end_fraction: float = 0.9) -> float:
        """
        Linearly decaying step size.

            lr(step) = lr_start * (1 - lr_end_fraction * step / n_steps)

        Example (defaults, n_steps=100):
            step 0  -> 1.0
            step 50 -> 0.55
            step 99 -> 0.109
        """
        return lr_start * (1.0 - lr_end_fraction * step / n_steps)

    def lr_at(self, step: int) -> float:
        return TrainConfig.learning_rate(step, self.n_steps, self.lr_start, self.lr_end_fraction)
