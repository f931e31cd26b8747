# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from .scheme import RiemannSolver


class Central(RiemannSolver):
    r"""The arithmetic average of the physical fluxes

    .. math::

        \vb{F}^* = \frac{1}{2}\qty(\vb{F}_L + \vb{F}_R)

    It carries no numerical dissipation and it is unconditionally unstable
    for the Euler equations, so it must be paired with some other
    stabilization mechanism.
    """

    stable = False

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        F_L = self.problem.F(rho_L, U_L, V_L, p_L)
        F_R = self.problem.F(rho_R, U_R, V_R, p_R)

        return 0.5 * (F_L + F_R)


class LaxFriedrichs(RiemannSolver):
    r"""The local Lax-Friedrichs (a.k.a. Rusanov) flux

    .. math::

        \vb{F}^* = \frac{1}{2}\qty(\vb{F}_L + \vb{F}_R)
            - \frac{1}{2} a \qty(\vb{q}_R - \vb{q}_L)
        \qquad
        a = \max\qty(\abs{u_L} + c_L, \abs{u_R} + c_R)
    """

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        problem = self.problem

        c_L = self.eos.sound_velocity(rho_L, p_L)
        c_R = self.eos.sound_velocity(rho_R, p_R)

        a = np.asarray(np.maximum(np.abs(U_L) + c_L, np.abs(U_R) + c_R))[
            ..., np.newaxis
        ]

        F_L = problem.F(rho_L, U_L, V_L, p_L)
        F_R = problem.F(rho_R, U_R, V_R, p_R)
        q_L = problem.conservative(rho_L, U_L, V_L, p_L)
        q_R = problem.conservative(rho_R, U_R, V_R, p_R)

        return 0.5 * (F_L + F_R) - 0.5 * a * (q_R - q_L)
