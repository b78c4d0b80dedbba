"""
Training package: dataset loading, loss, optimizer and the training loop.
"""

from .config import TrainConfig
from .dataset import DatasetError, load_features, load_targets, load_dataset
from .losses import svm_loss, accuracy
from .optimizer import SGD
from .trainer import train

__all__ = [
    'TrainConfig',
    'DatasetError',
    'load_features',
    'load_targets',
    'load_dataset',
    'svm_loss',
    'accuracy',
    'SGD',
    'train',
]
