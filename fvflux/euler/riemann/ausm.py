# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from fvflux.euler.problem import stack_flux

from .scheme import RiemannSolver


def upwind(mass_flux, phi_L, phi_R):
    r"""Transport the quantity :math:`\phi` with the mass flux :math:`\dot{m}`,
    taking it from the upwind side

    .. math::

        \frac{1}{2}\qty(\dot{m}\qty(\phi_R + \phi_L) - \abs{\dot{m}}
            \qty(\phi_R - \phi_L))
    """
    return 0.5 * (
        mass_flux * (phi_R + phi_L) - np.abs(mass_flux) * (phi_R - phi_L)
    )


class AUSMD(RiemannSolver):
    r"""The AUSMD scheme of Wada and Liou. The normal velocity and the
    pressure are split with polynomials of the velocity scaled by the
    common sound speed :math:`c_m = \max\qty(c_L, c_R)`, and the pressure
    weighted coefficients

    .. math::

        \alpha_L = \frac{2 \qty(p/\rho)_L}{\qty(p/\rho)_L + \qty(p/\rho)_R}
        \qquad
        \alpha_R = \frac{2 \qty(p/\rho)_R}{\qty(p/\rho)_L + \qty(p/\rho)_R}

    The mass flux :math:`\qty(\rho u)_{1/2} = u^+ \rho_L + u^- \rho_R`
    transports the velocities and the total enthalpy from the upwind side.
    """

    def _setup(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        eos = self.eos

        c_L = eos.sound_velocity(rho_L, p_L)
        c_R = eos.sound_velocity(rho_R, p_R)
        c_m = np.maximum(c_L, c_R)

        ratio_L = p_L / rho_L
        ratio_R = p_R / rho_R
        alpha_L = 2 * ratio_L / (ratio_L + ratio_R)
        alpha_R = 2 * ratio_R / (ratio_L + ratio_R)

        H_L = eos.total_enthalpy(rho_L, U_L, V_L, p_L)
        H_R = eos.total_enthalpy(rho_R, U_R, V_R, p_R)

        return c_L, c_R, c_m, alpha_L, alpha_R, H_L, H_R

    @staticmethod
    def split_pressure(p, U, c_m, sign: int):
        """The pressure splitting. In the supersonic range the pressure is
        taken entirely from the upwind side"""
        subsonic = 0.25 * p * (U + sign * c_m) ** 2 / c_m**2 * (2 - sign * U / c_m)
        supersonic = np.where(sign * U > 0, p, 0.0)

        return np.where(np.abs(U) < c_m, subsonic, supersonic)

    def split_velocity(self, U, c_m, alpha, sign: int):
        """The normal velocity splitting"""
        subsonic = sign * 0.25 * alpha * (U + sign * c_m) ** 2 / c_m + 0.5 * (
            1 - alpha
        ) * (U + sign * np.abs(U))
        supersonic = 0.5 * (U + sign * np.abs(U))

        return np.where(np.abs(U) < c_m, subsonic, supersonic)

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        _, _, c_m, alpha_L, alpha_R, H_L, H_R = self._setup(
            rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R
        )

        U_plus = self.split_velocity(U_L, c_m, alpha_L, 1)
        U_minus = self.split_velocity(U_R, c_m, alpha_R, -1)
        p_plus = self.split_pressure(p_L, U_L, c_m, 1)
        p_minus = self.split_pressure(p_R, U_R, c_m, -1)

        rhoU = U_plus * rho_L + U_minus * rho_R

        return stack_flux(
            rhoU,
            upwind(rhoU, U_L, U_R) + p_plus + p_minus,
            upwind(rhoU, V_L, V_R),
            upwind(rhoU, H_L, H_R),
        )


class AUSMDV(AUSMD):
    r"""The AUSMDV scheme: a blend of the AUSMD and AUSMV momentum fluxes
    driven by the pressure jump

    .. math::

        s = \min\qty(1, 10 \frac{\abs{p_R - p_L}}{\min\qty(p_L, p_R)})

    with an entropy fix acting on the expansion fans crossing the face.

    .. warning::

        This implementation reproduces legacy results and it is known to be
        defective: in the subsonic range the velocity splittings miss the
        :math:`1/(4c_m)` scaling and the backward velocity of a right state
        moving forward is computed from the left velocity. It is not
        consistent for subsonic states with different velocities. Do not use
        it for production runs.
    """

    reliable = False

    @staticmethod
    def split_velocities(U_L, U_R, c_m, alpha_L, alpha_R):
        """Returns the forward velocity of the left state and the backward
        velocity of the right state"""
        subsonic_L = np.where(
            U_L > 0,
            U_L + alpha_L * (U_L - c_m) ** 2,
            alpha_L * (U_L + c_m) ** 2,
        )
        supersonic_L = np.where(U_L > 0, U_L, 0.0)
        U_plus = np.where(np.abs(U_L) < c_m, subsonic_L, supersonic_L)

        subsonic_R = np.where(
            U_R > 0,
            -alpha_R * (U_L - c_m) ** 2,
            U_R - alpha_R * (U_R + c_m) ** 2,
        )
        supersonic_R = np.where(U_R > 0, 0.0, U_R)
        U_minus = np.where(np.abs(U_R) < c_m, subsonic_R, supersonic_R)

        return U_plus, U_minus

    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R):
        c_L, c_R, c_m, alpha_L, alpha_R, H_L, H_R = self._setup(
            rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R
        )

        U_plus, U_minus = self.split_velocities(U_L, U_R, c_m, alpha_L, alpha_R)
        p_plus = self.split_pressure(p_L, U_L, c_m, 1)
        p_minus = self.split_pressure(p_R, U_R, c_m, -1)

        rhoU = U_plus * rho_L + U_minus * rho_R

        s = np.minimum(1, 10 * np.abs(p_R - p_L) / np.minimum(p_R, p_L))
        rhoUU = 0.5 * (1 + s) * (rho_L * U_L * U_plus + rho_R * U_R * U_minus)
        rhoUU = rhoUU + 0.5 * (1 - s) * upwind(rhoU, U_L, U_R)

        F = stack_flux(
            rhoU,
            rhoUU + p_plus + p_minus,
            upwind(rhoU, V_L, V_R),
            upwind(rhoU, H_L, H_R),
        )

        # Entropy fix on the sonic points of the acoustic waves
        sonic_1 = (U_L - c_L < 0) & (U_R - c_R > 0)
        sonic_4 = (U_L + c_L < 0) & (U_R + c_R > 0)
        d_lam = np.where(
            sonic_1 & ~sonic_4,
            (U_R - c_R) - (U_L - c_L),
            np.where(~sonic_1 & sonic_4, (U_R + c_R) - (U_L + c_L), 0.0),
        )

        dq = stack_flux(rho_R, rho_R * U_R, rho_R * V_R, rho_R * H_R) - stack_flux(
            rho_L, rho_L * U_L, rho_L * V_L, rho_L * H_L
        )

        return F - 0.125 * np.asarray(d_lam)[..., np.newaxis] * dq
