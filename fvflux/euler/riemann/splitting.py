# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

r""" Flux vector splitting schemes: the numerical flux is the sum of the
forward-moving part of the left flux and of the backward-moving part of the
right flux

.. math::

    \vb{F}^* = \vb{F}^+\qty(\vb{w}_L) + \vb{F}^-\qty(\vb{w}_R)
"""

from __future__ import annotations

import numpy as np

from fvflux.euler.problem import stack_flux

from .scheme import RiemannSolver


class StegerWarming(RiemannSolver):
    r"""The Steger-Warming flux vector splitting, based on the sign of the
    eigenvalues :math:`u - c, u, u, u + c` of the flux Jacobian"""

    def split_flux(self, rho, U, V, p, sign: int) -> np.ndarray:
        """The forward (``sign = 1``) or backward (``sign = -1``) part of the
        flux of a state"""
        eos = self.eos
        gamma = eos.gamma
        c = eos.sound_velocity(rho, p)

        if sign > 0:
            a_0, a_1, a_3 = (np.maximum(a, 0) for a in (U - c, U, U + c))
        else:
            a_0, a_1, a_3 = (np.minimum(a, 0) for a in (U - c, U, U + c))

        k = 0.5 / gamma

        f_0 = rho * k * (2 * eos.gm1 * a_1 + a_0 + a_3)
        f_1 = f_0 * U + (a_3 - a_0) * rho * c * k
        f_2 = f_0 * V
        f_3 = (
            f_0 * 0.5 * (U**2 + V**2)
            + (a_3 - a_0) * rho * c * U * k
            + (a_3 + a_0) * rho * c**2 * k * eos.gm1_inv
        )

        return stack_flux(f_0, f_1, f_2, f_3)

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        return self.split_flux(rho_L, U_L, V_L, p_L, 1) + self.split_flux(
            rho_R, U_R, V_R, p_R, -1
        )


class VanLeer(RiemannSolver):
    r"""The Van Leer flux vector splitting, based on the normal Mach number
    :math:`M = u / c`. For :math:`\abs{M} < 1`

    .. math::

        F^\pm_\rho = \pm \frac{1}{4}\rho c \qty(M \pm 1)^2 \qquad
        F^\pm_{\rho u} = F^\pm_\rho \frac{(\gamma - 1)u \pm 2c}{\gamma}

    while in the supersonic range the whole flux is upwinded. The splitting
    is continuous at :math:`\abs{M} = 1`.
    """

    def split_flux(self, rho, U, V, p, sign: int) -> np.ndarray:
        """The forward (``sign = 1``) or backward (``sign = -1``) part of the
        flux of a state"""
        eos = self.eos
        gamma = eos.gamma
        c = eos.sound_velocity(rho, p)
        M = U / c

        cx = eos.gm1 * U + sign * 2 * c
        f_0 = sign * 0.25 * rho * c * (M + sign) ** 2
        f_1 = f_0 * cx / gamma
        f_2 = f_0 * V
        f_3 = 0.5 * (f_1 * cx * gamma / (gamma**2 - 1) + f_2 * V)

        subsonic = stack_flux(f_0, f_1, f_2, f_3)
        full = self.problem.F(rho, U, V, p)

        upwind = np.asarray(sign * M >= 1)[..., np.newaxis]
        downwind = np.asarray(sign * M <= -1)[..., np.newaxis]

        F = np.where(upwind, full, subsonic)

        return np.where(downwind, 0.0, F)

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        return self.split_flux(rho_L, U_L, V_L, p_L, 1) + self.split_flux(
            rho_R, U_R, V_R, p_R, -1
        )
