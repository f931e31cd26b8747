# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import pytest

from dataclasses import dataclass

from fvflux.euler.riemann import RiemannSolver

# Test Toro


@dataclass
class RiemannSolution:
    p_star: float
    U_star: float


@dataclass
class RiemannState:
    rho: float
    U: float
    V: float
    p: float

    def args(self):
        return self.rho, self.U, self.V, self.p


@dataclass
class RiemannProblem:
    left: RiemannState
    right: RiemannState
    solution: RiemannSolution


riemann_states = [
    RiemannProblem(
        left=RiemannState(rho=1.0, U=0, V=0, p=1.0),
        right=RiemannState(rho=0.125, U=0, V=0, p=0.1),
        solution=RiemannSolution(p_star=0.30313, U_star=0.92745),
    ),
    RiemannProblem(
        left=RiemannState(rho=1.0, U=-2, V=0, p=0.4),
        right=RiemannState(rho=1.0, U=2.0, V=0, p=0.4),
        solution=RiemannSolution(p_star=0.00189, U_star=0.0),
    ),
    RiemannProblem(
        left=RiemannState(rho=1.0, U=0, V=0, p=1000),
        right=RiemannState(rho=1.0, U=0, V=0, p=0.01),
        solution=RiemannSolution(p_star=460.894, U_star=19.5975),
    ),
    RiemannProblem(
        left=RiemannState(rho=1.0, U=0, V=0, p=0.01),
        right=RiemannState(rho=1.0, U=0, V=0, p=100),
        solution=RiemannSolution(p_star=46.0950, U_star=-6.19633),
    ),
    RiemannProblem(
        left=RiemannState(rho=5.99924, U=19.5975, V=0, p=460.894),
        right=RiemannState(rho=5.9924, U=-6.19633, V=0, p=46.0950),
        solution=RiemannSolution(p_star=1691.64, U_star=8.68975),
    ),
]


@pytest.fixture(params=riemann_states, ids=["sod", "123", "left", "right", "collision"])
def toro_riemann_state(request):
    yield request.param


@pytest.fixture(params=RiemannSolver._all_subclasses(), ids=lambda c: c.__name__)
def Solver(request):
    yield request.param


@pytest.fixture
def solver(Solver, problem):
    yield Solver(problem)
