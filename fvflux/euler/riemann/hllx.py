# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import Tuple

from fvflux.euler.problem import stack_flux

from .roe import roe_average
from .scheme import RiemannSolver


class HLL(RiemannSolver):
    r"""This class implements the HLL scheme. See
    :cite:`toro_riemann_2009` for a detailed view on compressible schemes.

    .. math::

        \vb{F}^* =
        \begin{cases}
            \vb{F}_L & 0 < S_L \\
            \frac{S_R \vb{F}_L - S_L \vb{F}_R + S_L S_R \qty(\vb{q}_R -
                \vb{q}_L)}{S_R - S_L} & S_L \le 0 \le S_R \\
            \vb{F}_R & S_R < 0
        \end{cases}
    """

    def compute_sigma(
        self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R
    ) -> Tuple[np.ndarray, np.ndarray]:
        r"""Returns the value of the :math:`\sigma` (i.e. the wave velocity)
        for the HLL and HLLC scheme, combining the one-sided estimates with
        the Roe averaged ones

        .. math::

            \sigma_L = \min{\qty(u_L - c_L, \bar{u} - \bar{c})}

            \sigma_R = \max{\qty(u_R + c_R, \bar{u} + \bar{c})}

        Returns
        -------
        sigma_L
            The fastest left-going wave velocity for each face

        sigma_R
            The fastest right-going wave velocity for each face
        """
        eos = self.eos
        U, _, _, c = roe_average(eos, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R)

        c_L = eos.sound_velocity(rho_L, p_L)
        c_R = eos.sound_velocity(rho_R, p_R)

        sigma_L = np.minimum(U_L - c_L, U - c)
        sigma_R = np.maximum(U_R + c_R, U + c)

        return sigma_L, sigma_R

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        args = (rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R)
        sigma_L, sigma_R = self.compute_sigma(*args)
        sigma_L = np.asarray(sigma_L)[..., np.newaxis]
        sigma_R = np.asarray(sigma_R)[..., np.newaxis]

        F_L = self.problem.F(rho_L, U_L, V_L, p_L)
        F_R = self.problem.F(rho_R, U_R, V_R, p_R)
        q_L = self.problem.conservative(rho_L, U_L, V_L, p_L)
        q_R = self.problem.conservative(rho_R, U_R, V_R, p_R)

        F = np.divide(
            sigma_R * F_L - sigma_L * F_R + sigma_L * sigma_R * (q_R - q_L),
            sigma_R - sigma_L,
        )

        F = np.where(sigma_R < 0, F_R, F)
        F = np.where(sigma_L > 0, F_L, F)

        return F


class HLLE(HLL):
    r"""The HLL scheme with the signal speeds estimated following Einfeld

    .. math::

        \bar{d}^2 = \frac{\sqrt{\rho_L}c_L^2 + \sqrt{\rho_R}c_R^2}
            {\sqrt{\rho_L} + \sqrt{\rho_R}} + \eta_2 \qty(u_R - u_L)^2
        \qquad
        \eta_2 = \frac{1}{2}\frac{\sqrt{\rho_L}\sqrt{\rho_R}}
            {\qty(\sqrt{\rho_L} + \sqrt{\rho_R})^2}

    and :math:`\sigma_L = \min\qty(u_L - c_L, \bar{u} - \bar{d})`,
    :math:`\sigma_R = \max\qty(u_R + c_R, \bar{u} + \bar{d})`
    """

    def compute_sigma(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        eos = self.eos
        U, _, _, _ = roe_average(eos, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R)

        c_L = eos.sound_velocity(rho_L, p_L)
        c_R = eos.sound_velocity(rho_R, p_R)

        sq_L = np.sqrt(rho_L)
        sq_R = np.sqrt(rho_R)
        sq_sum = sq_L + sq_R

        eta_2 = 0.5 * sq_L * sq_R / sq_sum**2
        d = np.sqrt(
            (sq_R * c_R**2 + sq_L * c_L**2) / sq_sum
            + eta_2 * np.square(np.subtract(U_R, U_L))
        )

        sigma_L = np.minimum(U_L - c_L, U - d)
        sigma_R = np.maximum(U_R + c_R, U + d)

        return sigma_L, sigma_R


class HLLC(HLL):
    r"""This class implements the HLLC scheme. See
    :cite:`toro_riemann_2009` for a detailed view on compressible schemes.

    The HLL signal speeds are used, while the speed of the contact
    discontinuity is

    .. math::

        S^* = \frac{p_R - p_L + \rho_L u_L \qty(\sigma_L - u_L)
            - \rho_R u_R \qty(\sigma_R - u_R)}
            {\rho_L \qty(\sigma_L - u_L) - \rho_R\qty(\sigma_R - u_R)}
    """

    def _star_state(self, sigma, S_star, rho, U, V, p):
        r"""The intermediate conservative state on one side of the contact.
        :math:`V` is the tangential velocity of the same side"""

        fac = rho * (sigma - U) / (sigma - S_star)
        rhoE = self.eos.total_energy(rho, U, V, p)

        return stack_flux(
            fac,
            fac * S_star,
            fac * V,
            fac * (rhoE / rho + (S_star - U) * (S_star + p / (rho * (sigma - U)))),
        )

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        args = (rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R)
        sigma_L, sigma_R = self.compute_sigma(*args)

        with np.errstate(divide="ignore", invalid="ignore"):
            S_star = (
                p_R
                - p_L
                + rho_L * U_L * (sigma_L - U_L)
                - rho_R * U_R * (sigma_R - U_R)
            ) / (rho_L * (sigma_L - U_L) - rho_R * (sigma_R - U_R))

            q_star_L = self._star_state(sigma_L, S_star, rho_L, U_L, V_L, p_L)
            q_star_R = self._star_state(sigma_R, S_star, rho_R, U_R, V_R, p_R)

        F_L = self.problem.F(rho_L, U_L, V_L, p_L)
        F_R = self.problem.F(rho_R, U_R, V_R, p_R)
        q_L = self.problem.conservative(rho_L, U_L, V_L, p_L)
        q_R = self.problem.conservative(rho_R, U_R, V_R, p_R)

        sigma_L = np.asarray(sigma_L)[..., np.newaxis]
        sigma_R = np.asarray(sigma_R)[..., np.newaxis]
        S_star = np.asarray(S_star)[..., np.newaxis]

        F_star_L = F_L + sigma_L * (q_star_L - q_L)
        F_star_R = F_R + sigma_R * (q_star_R - q_R)

        F = np.where(S_star >= 0, F_star_L, F_star_R)
        F = np.where(sigma_R < 0, F_R, F)
        F = np.where(sigma_L > 0, F_L, F)

        return F
