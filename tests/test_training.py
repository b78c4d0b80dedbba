import numpy as np
import pytest

from scalar_aad.aad import create
from scalar_aad.nn import MLP
from scalar_aad.training import (
    TrainConfig, DatasetError, SGD,
    load_features, load_targets, load_dataset,
    svm_loss, accuracy, train,
)
from scalar_aad.training.trainer import main, parse_args


# ---------------------------------------------------------------- config

def test_config_defaults():
    cfg = TrainConfig()
    assert cfg.n_steps == 100
    assert cfg.hidden == (16, 16)
    assert cfg.alpha == pytest.approx(1e-4)


@pytest.mark.parametrize("kwargs", [
    {"n_steps": 0},
    {"alpha": -1.0},
    {"print_every": 0},
    {"hidden": (16, 0)},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        TrainConfig(**kwargs)


def test_learning_rate_schedule():
    assert TrainConfig.learning_rate(0, 100) == pytest.approx(1.0)
    assert TrainConfig.learning_rate(50, 100) == pytest.approx(0.55)
    assert TrainConfig.learning_rate(99, 100) == pytest.approx(0.109)
    assert TrainConfig(n_steps=10, lr_start=0.5).lr_at(5) == pytest.approx(0.5 * 0.55)


# ---------------------------------------------------------------- dataset

def _write(path, text):
    path.write_text(text)
    return path


def test_load_features_and_targets(tmp_path):
    xf = _write(tmp_path / "X.csv", "0.5 1.0\n-1.5 2.0\n")
    yf = _write(tmp_path / "y.csv", "1\n-1\n")
    X = load_features(xf)
    y = load_targets(yf)
    assert [[p.value for p in row] for row in X] == [[0.5, 1.0], [-1.5, 2.0]]
    assert [t.value for t in y] == [1.0, -1.0]
    assert all(p.is_leaf for row in X for p in row)


def test_load_single_row(tmp_path):
    xf = _write(tmp_path / "X.csv", "0.5 1.0\n")
    assert len(load_features(xf)) == 1


def test_missing_file(tmp_path):
    with pytest.raises(DatasetError, match="no such file"):
        load_features(tmp_path / "nope.csv")


def test_wrong_column_count(tmp_path):
    xf = _write(tmp_path / "X.csv", "1 2 3\n4 5 6\n")
    with pytest.raises(DatasetError, match="expected 2 column"):
        load_features(xf)


def test_non_numeric_file(tmp_path):
    yf = _write(tmp_path / "y.csv", "1\nabc\n")
    with pytest.raises(DatasetError):
        load_targets(yf)


def test_empty_file(tmp_path):
    yf = _write(tmp_path / "y.csv", "")
    with pytest.raises(DatasetError, match="empty"):
        load_targets(yf)


def test_mismatched_rows(tmp_path):
    xf = _write(tmp_path / "X.csv", "1 2\n3 4\n")
    yf = _write(tmp_path / "y.csv", "1\n")
    with pytest.raises(DatasetError):
        load_dataset(xf, yf)


def test_dataset_error_is_value_error(tmp_path):
    err = DatasetError(tmp_path / "x", "bad")
    assert isinstance(err, ValueError)
    assert err.path == tmp_path / "x"


# ---------------------------------------------------------------- loss / metric / optimizer

def test_svm_loss_value_and_gradient():
    s = [create(2.0), create(-0.5)]
    y = [create(1.0), create(1.0)]
    loss = svm_loss(s, y)
    assert loss.value == pytest.approx(0.75)
    loss.backward()
    # first sample is past the margin, second is not
    assert s[0].grad == pytest.approx(0.0)
    assert s[1].grad == pytest.approx(-0.5)


def test_svm_loss_regularization_added_once():
    s = [create(2.0)]
    y = [create(1.0)]
    p = create(2.0)
    loss = svm_loss(s, y, [p], alpha=0.1)
    assert loss.value == pytest.approx(0.1 * 4.0)
    loss.backward()
    assert p.grad == pytest.approx(0.1 * 2 * 2.0)


def test_svm_loss_checks_lengths():
    with pytest.raises(ValueError):
        svm_loss([create(1.0)], [])
    with pytest.raises(ValueError):
        svm_loss([], [])


def test_accuracy():
    s = [create(1.0), create(-1.0), create(0.0)]
    y = [create(1.0), create(1.0), create(-1.0)]
    assert accuracy(s, y) == pytest.approx(2 / 3)
    assert accuracy([], []) == 0.0


def test_accuracy_checks_lengths():
    with pytest.raises(ValueError):
        accuracy([create(1.0), create(-1.0)], [create(1.0)])


def test_sgd_step_and_zero_grad():
    p = create(1.0)
    p.grad = 0.5
    opt = SGD([p], lr=0.1)
    opt.step()
    assert p.value == pytest.approx(0.95)
    opt.zero_grad()
    assert p.grad == 0.0


# ---------------------------------------------------------------- training loop

def _separable():
    pts = [(1.0, 1.0, 1.0), (2.0, 1.0, 1.0), (-1.0, -1.0, -1.0), (-1.0, -2.0, -1.0)]
    X = [[create(a), create(b)] for a, b, _ in pts]
    y = [create(t) for _, _, t in pts]
    return X, y


def test_train_linear_model_separates_data():
    X, y = _separable()
    model = MLP(2, [1], rng=np.random.default_rng(0))
    cfg = TrainConfig(n_steps=50, hidden=(), alpha=0.0, verbose=False)
    history = train(model, X, y, cfg)
    assert len(history) == 50
    assert set(history[0]) == {'step', 'loss', 'accuracy', 'lr'}
    assert history[-1]['accuracy'] == 1.0
    assert history[-1]['loss'] <= history[0]['loss']


def test_train_prints_progress(capsys):
    X, y = _separable()
    model = MLP(2, [4, 1], rng=np.random.default_rng(1))
    train(model, X, y, TrainConfig(n_steps=3, verbose=True))
    out = capsys.readouterr().out
    assert "Step 0 Loss" in out
    assert "Step 2 Loss" in out


def test_train_warns_on_wide_output():
    X, y = _separable()
    model = MLP(2, [2], rng=np.random.default_rng(0))
    with pytest.warns(UserWarning, match="only the first"):
        train(model, X, y, TrainConfig(n_steps=1, verbose=False))


def test_train_rejects_empty_dataset():
    model = MLP(2, [1], rng=np.random.default_rng(0))
    with pytest.raises(ValueError):
        train(model, [], [], TrainConfig(n_steps=1, verbose=False))


# ---------------------------------------------------------------- CLI

def test_parse_args_hidden():
    args = parse_args(["--hidden", "8,4", "--steps", "5"])
    assert args.hidden == (8, 4)
    assert args.steps == 5


def test_cli_runs(tmp_path, capsys):
    xf = _write(tmp_path / "X.csv", "1 1\n2 1\n-1 -1\n-1 -2\n")
    yf = _write(tmp_path / "y.csv", "1\n1\n-1\n-1\n")
    code = main(["--x", str(xf), "--y", str(yf), "--steps", "3",
                 "--hidden", "4", "--seed", "0", "--quiet"])
    assert code == 0
    assert "Final loss" in capsys.readouterr().out


def test_cli_missing_dataset(tmp_path, capsys):
    code = main(["--x", str(tmp_path / "X.csv"), "--y", str(tmp_path / "y.csv")])
    assert code == 1
    assert "Unable to read dataset file" in capsys.readouterr().err


def test_sgd_rejects_empty_parameters():
    with pytest.raises(ValueError, match="empty parameter list"):
        SGD([])
