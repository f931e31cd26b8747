# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging

import numpy as np

from typing import Tuple
from scipy.optimize import root_scalar

from fvflux.exceptions import NonPhysicalState

from .eos import PerfectGas


logger = logging.getLogger(__name__)


class ExactRiemannSolver:
    r"""This class implements the exact solution of the Riemann problem for a
    perfect gas, sampled along the ray :math:`x/t = 0`.

    See :cite:`toro_riemann_2009` for a detailed view on compressible schemes.
    The star pressure :math:`p^*` is the root of the pressure function

    .. math::

        f(p) = f_L(p) + f_R(p) + u_R - u_L

    where :math:`f_K` is the Rankine-Hugoniot locus for :math:`p > p_K` and
    the isentrope otherwise. Its root is bracketed in :math:`\qty[0, p_{max}]`
    and found with :func:`scipy.optimize.root_scalar`.

    An instance is a callable that can be injected into
    :class:`~.riemann.godunov.Godunov`.

    Parameters
    ----------
    eos
        The :class:`PerfectGas` to use
    """

    def __init__(self, eos: PerfectGas, xtol: float = 1e-14):
        self.eos = eos
        self.xtol = xtol

        gamma = eos.gamma
        self._g1 = (gamma - 1) / (2 * gamma)
        self._g2 = (gamma + 1) / (2 * gamma)
        self._g4 = 2 / (gamma + 1)
        self._g6 = (gamma - 1) / (gamma + 1)

    def pressure_function(self, p: float, rho_k: float, p_k: float, c_k: float):
        """The function :math:`f_K` linking the velocity jump across a wave to
        the star pressure :math:`p`"""

        if p > p_k:
            A = 2 / ((self.eos.gamma + 1) * rho_k)
            B = self._g6 * p_k
            return (p - p_k) * np.sqrt(A / (p + B))

        return 2 * c_k * self.eos.gm1_inv * ((p / p_k) ** self._g1 - 1)

    def _star_pressure(self, rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R):
        dU = U_R - U_L

        def f(p):
            return (
                self.pressure_function(p, rho_L, p_L, c_L)
                + self.pressure_function(p, rho_R, p_R, c_R)
                + dU
            )

        # Pressure positivity condition
        if f(0) >= 0:
            raise NonPhysicalState(
                "The Riemann problem generates vacuum: "
                f"U_R - U_L = {dU} >= {2 * self.eos.gm1_inv * (c_L + c_R)}"
            )

        p_max = max(p_L, p_R)
        while f(p_max) < 0:
            p_max *= 2

        opt = root_scalar(f, bracket=[0, p_max], method="brentq", xtol=self.xtol)

        if not (opt.converged):
            raise RuntimeError(
                "The root finding algorithm could not find a solution for "
                f"p_star: {opt.flag}"
            )

        return opt.root

    def star_state(
        self, rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Compute the pressure and the normal velocity in the star region
        for each pair of states

        Returns
        -------
        p_star
            The pressure in the star region

        U_star
            The velocity of the contact discontinuity
        """
        rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R = np.broadcast_arrays(
            *(
                np.asarray(v, dtype=float)
                for v in (rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R)
            )
        )

        p_star = np.empty(rho_L.shape)
        U_star = np.empty(rho_L.shape)

        for idx in np.ndindex(rho_L.shape):
            args = (
                rho_L[idx],
                rho_R[idx],
                U_L[idx],
                U_R[idx],
                p_L[idx],
                p_R[idx],
                c_L[idx],
                c_R[idx],
            )
            p = self._star_pressure(*args)

            p_star[idx] = p
            U_star[idx] = 0.5 * (U_L[idx] + U_R[idx]) + 0.5 * (
                self.pressure_function(p, rho_R[idx], p_R[idx], c_R[idx])
                - self.pressure_function(p, rho_L[idx], p_L[idx], c_L[idx])
            )

        return p_star, U_star

    def _sample_left(self, rho, U, p, c, p_star, U_star):
        gamma = self.eos.gamma
        ratio = p_star / p

        # Shock
        S = U - c * np.sqrt(self._g2 * ratio + self._g1)
        rho_shock = rho * (ratio + self._g6) / (self._g6 * ratio + 1)

        # Rarefaction
        S_head = U - c
        S_tail = U_star - c * ratio**self._g1
        rho_rar = rho * ratio ** (1 / gamma)

        fan = self._g4 + self._g6 / c * U
        rho_fan = rho * fan ** (2 * self.eos.gm1_inv)
        U_fan = self._g4 * (c + 0.5 * self.eos.gm1 * U)
        p_fan = p * fan ** (2 * gamma * self.eos.gm1_inv)

        shock = p_star > p
        undisturbed = np.where(shock, S >= 0, S_head >= 0)
        in_fan = ~shock & (S_head < 0) & (S_tail >= 0)

        rho_s = np.where(shock, rho_shock, rho_rar)
        rho_s = np.where(in_fan, rho_fan, rho_s)
        U_s = np.where(in_fan, U_fan, U_star)
        p_s = np.where(in_fan, p_fan, p_star)

        return (
            np.where(undisturbed, rho, rho_s),
            np.where(undisturbed, U, U_s),
            np.where(undisturbed, p, p_s),
        )

    def __call__(
        self, rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        r"""Solve the Riemann problems and sample them at :math:`x/t = 0`

        Returns
        -------
        rho
            The density on the face
        U
            The normal velocity on the face
        p
            The pressure on the face
        """
        p_star, U_star = self.star_state(rho_L, rho_R, U_L, U_R, p_L, p_R, c_L, c_R)

        logger.debug("Solved %d exact Riemann problems", p_star.size)

        with np.errstate(invalid="ignore", divide="ignore"):
            rho_l, U_l, p_l = self._sample_left(
                *np.broadcast_arrays(rho_L, U_L, p_L, c_L), p_star, U_star
            )
            # The right side is the mirror image of the left one
            rho_r, U_r, p_r = self._sample_left(
                *np.broadcast_arrays(rho_R, np.negative(U_R), p_R, c_R),
                p_star,
                -U_star,
            )

        left = U_star >= 0

        return (
            np.where(left, rho_l, rho_r),
            np.where(left, U_l, -U_r),
            np.where(left, p_l, p_r),
        )
