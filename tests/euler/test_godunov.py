# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import numpy as np
import pytest

from fvflux.euler.exact import ExactRiemannSolver
from fvflux.euler.riemann import Godunov
from fvflux.euler.state import PrimState
from fvflux.exceptions import NonPhysicalState


@pytest.fixture
def left():
    yield PrimState(rho=1.0, U=0.3, V=0.7, p=1.0)


@pytest.fixture
def right():
    yield PrimState(rho=0.5, U=-0.2, V=-0.4, p=0.4)


def test_default_exact_solver(problem):
    assert isinstance(Godunov(problem).exact, ExactRiemannSolver)


@pytest.mark.parametrize("U, V", [(0.5, 0.7), (0.0, 0.7), (-0.5, -0.4)])
def test_tangential_velocity(problem, mocker, left, right, U, V):
    """The tangential velocity is upwinded with the resolved normal
    velocity"""
    exact = mocker.Mock(return_value=(np.array(1.2), np.array(U), np.array(2.0)))
    solver = Godunov(problem, exact=exact)

    F = solver(left, right)

    exact.assert_called_once()
    assert np.allclose(F, problem.F(1.2, U, V, 2.0))


def test_exact_solver_arguments(problem, eos, mocker, left, right):
    exact = mocker.Mock(return_value=(np.array(1.0), np.array(0.0), np.array(1.0)))
    solver = Godunov(problem, exact=exact)

    solver(left, right)

    rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R = exact.call_args[0]

    assert (rho_L, rho_R) == (1.0, 0.5)
    assert (U_L, U_R) == (0.3, -0.2)
    assert (p_L, p_R) == (1.0, 0.4)
    assert c_L == pytest.approx(eos.sound_velocity(1.0, 1.0))
    assert c_R == pytest.approx(eos.sound_velocity(0.5, 0.4))


def test_vacuum(problem):
    solver = Godunov(problem)
    Q_L = PrimState(rho=1.0, U=-20.0, V=0.0, p=1.0)
    Q_R = PrimState(rho=1.0, U=20.0, V=0.0, p=1.0)

    with pytest.raises(NonPhysicalState):
        solver(Q_L, Q_R)
