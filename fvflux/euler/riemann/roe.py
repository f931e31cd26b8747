# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import Tuple, TYPE_CHECKING

from fvflux.euler.problem import stack_flux

from .scheme import RiemannSolver

if TYPE_CHECKING:
    from fvflux.euler.eos import PerfectGas


def roe_average(
    eos: PerfectGas, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    r"""Compute the Roe averaged velocities, total enthalpy and sound velocity

    .. math::

        \bar{\phi} = \frac{\sqrt{\rho_L}\phi_L + \sqrt{\rho_R}\phi_R}
            {\sqrt{\rho_L} + \sqrt{\rho_R}}
        \qquad
        \bar{c}^2 = (\gamma - 1)\qty(\bar{H} - \frac{1}{2}
            \qty(\bar{u}^2 + \bar{v}^2))

    Returns
    -------
    U
        The averaged normal velocity
    V
        The averaged tangential velocity
    H
        The averaged total enthalpy
    c
        The averaged sound velocity
    """
    sq_L = np.sqrt(rho_L)
    sq_R = np.sqrt(rho_R)
    sq_sum_inv = 1 / (sq_L + sq_R)

    H_L = eos.total_enthalpy(rho_L, U_L, V_L, p_L)
    H_R = eos.total_enthalpy(rho_R, U_R, V_R, p_R)

    U = (sq_L * U_L + sq_R * U_R) * sq_sum_inv
    V = (sq_L * V_L + sq_R * V_R) * sq_sum_inv
    H = (sq_L * H_L + sq_R * H_R) * sq_sum_inv
    c = np.sqrt(eos.gm1 * (H - 0.5 * (U**2 + V**2)))

    return U, V, H, c


class Roe(RiemannSolver):
    r"""The Roe approximate Riemann solver, with Harten's entropy fix

    .. math::

        \vb{F}^* = \frac{1}{2}\qty(\vb{F}_L + \vb{F}_R)
            - \frac{1}{2}\sum_k \alpha_k \abs{\tilde{\lambda}_k} \vb{r}_k

    The eigenvalues are :math:`\bar{u} - \bar{c}, \bar{u}, \bar{u},
    \bar{u} + \bar{c}`. The modulus of each one of them is smoothed as

    .. math::

        \abs{\tilde{\lambda}} = \frac{1}{2}\qty(\frac{\lambda^2}{\delta} +
            \delta) \quad \text{if} \quad \abs{\lambda} < \delta = \max\qty(0,
            \lambda - \lambda_L, \lambda_R - \lambda)

    where :math:`\lambda_L, \lambda_R` are the same eigenvalues evaluated on
    the left and right states.
    """

    def wave_strengths(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        r"""Project the jump of the conservative variables on the Roe
        eigenvectors

        Returns
        -------
        alpha
            The strength of the four waves stacked on the last axis
        """
        U, V, H, c = roe_average(self.eos, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R)

        q_L = self.problem.conservative(rho_L, U_L, V_L, p_L)
        q_R = self.problem.conservative(rho_R, U_R, V_R, p_R)
        d_rho, d_rhoU, d_rhoV, d_rhoE = np.moveaxis(q_R - q_L, -1, 0)

        # Energy jump without the contribution of the shear wave
        d_rhoE_q = d_rhoE - (d_rhoV - V * d_rho) * V

        alpha_2 = (
            self.eos.gm1
            / c**2
            * (d_rho * (H - U**2) + U * d_rhoU - d_rhoE_q)
        )
        alpha_1 = 0.5 / c * (d_rho * (U + c) - d_rhoU) - 0.5 * alpha_2
        alpha_4 = d_rho - alpha_1 - alpha_2
        alpha_3 = d_rhoV - V * d_rho

        return stack_flux(alpha_1, alpha_2, alpha_3, alpha_4)

    def eigenvalues(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        """Returns the moduli of the Roe eigenvalues with the entropy fix
        applied"""
        eos = self.eos
        U, V, H, c = roe_average(eos, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R)
        c_L = eos.sound_velocity(rho_L, p_L)
        c_R = eos.sound_velocity(rho_R, p_R)

        lam = stack_flux(U - c, U, U, U + c)
        lam_L = stack_flux(U_L - c_L, U_L, U_L, U_L + c_L)
        lam_R = stack_flux(U_R - c_R, U_R, U_R, U_R + c_R)

        delta = np.maximum(0, np.maximum(lam - lam_L, lam_R - lam))
        fix = np.abs(lam) < delta

        return np.where(
            fix,
            0.5 * (lam**2 / np.where(fix, delta, 1) + delta),
            np.abs(lam),
        )

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        args = (rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R)
        U, V, H, c = roe_average(self.eos, *args)

        alpha = self.wave_strengths(*args)
        lam = self.eigenvalues(*args)

        one = np.ones_like(U)
        zero = np.zeros_like(U)
        r = np.stack(
            (
                stack_flux(one, U - c, V, H - U * c),
                stack_flux(one, U, V, 0.5 * (U**2 + V**2)),
                stack_flux(zero, zero, one, V),
                stack_flux(one, U + c, V, H + U * c),
            ),
            axis=-2,
        )

        dissipation = np.einsum("...k,...k,...kj->...j", alpha, lam, r)

        F_L = self.problem.F(rho_L, U_L, V_L, p_L)
        F_R = self.problem.F(rho_R, U_R, V_R, p_R)

        return 0.5 * (F_L + F_R - dissipation)
