# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import pickle
import numpy as np
import pytest

from fvflux.euler.state import ConsState, PrimState
from fvflux.exceptions import NonPhysicalState
from fvflux.state import State, StateTemplate


@pytest.fixture
def QTemplate():
    yield StateTemplate("rho", "rhoU", "rhoV", "p")


@pytest.fixture()
def Q(QTemplate):
    yield QTemplate(0, 0, 0, 0)


def test_list_to_enum():
    Fields = State.list_to_enum(["rho", "rhoU"])

    assert Fields.rho == 0
    assert Fields.rhoU == 1


def test_pickling():
    W = PrimState(rho=1.0, U=2.0, V=3.0, p=4.0)

    restored_state = pickle.loads(pickle.dumps(W))

    assert isinstance(restored_state, PrimState)
    assert np.array_equal(restored_state, W)


def test_set_attributes(Q):
    Q[Q.fields.p] = 1.5

    assert Q[Q.fields.p] == 1.5


def test_multiple_instances(QTemplate):
    Q = QTemplate(0, 0, 0, 0)
    W = QTemplate(0, 0, 0, 0)

    Q[Q.fields.p] = 1.5

    assert Q[Q.fields.p] == 1.5
    assert W[W.fields.p] == 0.0


def test_reverse_view(QTemplate):
    Q = np.array([0, 1, 2, 3]).view(QTemplate)

    assert Q[Q.fields.rho] == 0
    assert Q[Q.fields.rhoU] == 1
    assert Q[Q.fields.rhoV] == 2
    assert Q[Q.fields.p] == 3


def test_kwargs_on_base_class():
    state = State(rho=0, rhoU=1, rhoV=2)

    assert state[state.fields.rhoV] == 2
    assert not hasattr(State, "fields")


def test_kwargs_order():
    state = PrimState(p=4.0, V=3.0, U=2.0, rho=1.0)

    assert np.array_equal(state, [1.0, 2.0, 3.0, 4.0])


def test_kwargs_missing_field():
    with pytest.raises(TypeError):
        PrimState(rho=1.0, U=0.0, V=0.0)


def test_kwargs_unknown_field():
    with pytest.raises(TypeError):
        PrimState(rho=1.0, U=0.0, V=0.0, p=1.0, T=300.0)


def test_args_and_kwargs():
    with pytest.raises(TypeError):
        PrimState(1.0, U=0.0, V=0.0, p=1.0)


def test_zeros():
    Q = PrimState.zeros(5)

    assert Q.shape == (5, 4)
    assert isinstance(Q, PrimState)
    assert np.all(Q == 0)


def test_from_columns():
    Q = PrimState.from_columns(np.ones(3), 2.0, np.zeros(3), [4, 5, 6])

    assert Q.shape == (3, 4)
    assert np.array_equal(Q[..., Q.fields.U], [2.0, 2.0, 2.0])
    assert np.array_equal(Q[..., Q.fields.p], [4, 5, 6])


def test_from_columns_wrong_number():
    with pytest.raises(ValueError):
        PrimState.from_columns(1.0, 2.0)


def test_primitive_conservative(eos):
    W = PrimState(rho=2.0, U=1.0, V=-1.0, p=0.4)

    Q = W.to_conservative(eos)

    assert isinstance(Q, ConsState)
    assert Q[Q.fields.rhoU] == pytest.approx(2.0)
    assert Q[Q.fields.rhoV] == pytest.approx(-2.0)
    assert Q[Q.fields.rhoE] == pytest.approx(0.4 / 0.4 + 2.0)

    assert np.allclose(Q.to_primitive(eos), W)


def test_check_physical():
    PrimState(rho=1.0, U=-5.0, V=3.0, p=1e-3).check_physical()


@pytest.mark.parametrize(
    "values",
    [
        (0.0, 0.0, 0.0, 1.0),
        (1.0, 0.0, 0.0, -1.0),
        (1.0, np.nan, 0.0, 1.0),
        (1.0, 0.0, np.inf, 1.0),
    ],
)
def test_check_non_physical(values):
    W = np.array([[1.0, 0.0, 0.0, 1.0], values]).view(PrimState)

    with pytest.raises(NonPhysicalState, match="index"):
        W.check_physical()
