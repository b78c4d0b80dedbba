import numpy as np
import pytest

from scalar_aad.aad import create
from scalar_aad.nn import Neuron, Layer, MLP


def test_neuron_parameters_and_init():
    n = Neuron(3, rng=np.random.default_rng(0))
    params = n.parameters()
    assert len(params) == 4
    assert params[-1] is n.b
    assert n.b.value == 0.0
    assert all(-1.0 <= w.value <= 1.0 for w in n.w)


def test_neuron_is_seeded():
    w1 = [w.value for w in Neuron(4, rng=np.random.default_rng(7)).w]
    w2 = [w.value for w in Neuron(4, rng=np.random.default_rng(7)).w]
    assert w1 == w2


def test_linear_neuron_forward():
    n = Neuron(2, nonlin=False, rng=np.random.default_rng(1))
    n.b.value = 0.5
    x = [2.0, -3.0]
    out = n(x)
    expected = n.w[0].value * 2.0 + n.w[1].value * -3.0 + 0.5
    assert out.value == pytest.approx(expected)


def test_neuron_gradients_flow_to_weights():
    n = Neuron(2, nonlin=False, rng=np.random.default_rng(1))
    out = n([create(2.0), create(-3.0)])
    out.backward()
    assert n.w[0].grad == 2.0
    assert n.w[1].grad == -3.0
    assert n.b.grad == 1.0


def test_relu_neuron_is_non_negative():
    n = Neuron(2, nonlin=True, rng=np.random.default_rng(3))
    n.b.value = -100.0
    assert n([1.0, 1.0]).value == 0.0


def test_neuron_rejects_wrong_input_length():
    n = Neuron(2, rng=np.random.default_rng(0))
    with pytest.raises(ValueError):
        n([1.0, 2.0, 3.0])


def test_layer_outputs():
    layer = Layer(2, 3, rng=np.random.default_rng(0))
    out = layer([1.0, 2.0])
    assert len(out) == 3
    assert len(layer.parameters()) == 9


def test_mlp_structure():
    model = MLP(2, [16, 16, 1], rng=np.random.default_rng(0))
    assert len(model.parameters()) == 16 * 3 + 16 * 17 + 17
    assert [n.nonlin for n in model.layers[0].neurons] == [True] * 16
    assert [n.nonlin for n in model.layers[-1].neurons] == [False]
    assert model.n_outputs == 1
    out = model([0.5, -0.5])
    assert len(out) == 1


def test_mlp_zero_grad():
    model = MLP(2, [4, 1], rng=np.random.default_rng(0))
    model([1.0, 2.0])[0].backward()
    assert any(p.grad != 0.0 for p in model.parameters())
    model.zero_grad()
    assert all(p.grad == 0.0 for p in model.parameters())


def test_mlp_requires_layers():
    with pytest.raises(ValueError):
        MLP(2, [])


def test_repr():
    model = MLP(2, [2, 1], rng=np.random.default_rng(0))
    assert repr(model) == (
        "MLP of [Layer of [ReLUNeuron(2), ReLUNeuron(2)], Layer of [LinearNeuron(2)]]"
    )
