# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import Callable, Optional, Tuple, TYPE_CHECKING

from fvflux.euler.exact import ExactRiemannSolver

from .scheme import RiemannSolver

if TYPE_CHECKING:
    from fvflux.euler.problem import EulerProblem

ExactSolver = Callable[..., Tuple[np.ndarray, np.ndarray, np.ndarray]]


class Godunov(RiemannSolver):
    r"""The Godunov flux: the physical flux evaluated on the exact solution of
    the Riemann problem at :math:`x/t = 0`

    .. math::

        \vb{F}^* = \vb{F}\qty(\vb{w}^*\qty(0; \vb{w}_L, \vb{w}_R))

    The tangential velocity is transported by the contact discontinuity: it
    is taken from the left state if the resolved normal velocity is
    non-negative, from the right state otherwise.

    Parameters
    ----------
    problem
        The :class:`~.EulerProblem`
    exact
        A callable ``exact(rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R)``
        returning the density, normal velocity and pressure sampled at the
        face. Defaults to :class:`~.ExactRiemannSolver`
    """

    def __init__(self, problem: EulerProblem, exact: Optional[ExactSolver] = None):
        super().__init__(problem)

        if exact is None:
            exact = ExactRiemannSolver(problem.eos)

        self.exact = exact

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        c_L = self.eos.sound_velocity(rho_L, p_L)
        c_R = self.eos.sound_velocity(rho_R, p_R)

        rho, U, p = self.exact(rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R)

        V = np.where(np.asarray(U) >= 0, V_L, V_R)

        return self.problem.F(rho, U, V, p)
