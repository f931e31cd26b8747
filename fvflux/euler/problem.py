# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from .eos import PerfectGas


def stack_flux(*components) -> np.ndarray:
    """Broadcast the components of a flux (or state) vector to a common
    shape and stack them along the last axis"""

    return np.stack(
        np.broadcast_arrays(*(np.asarray(c, dtype=float) for c in components)),
        axis=-1,
    )


class EulerProblem:
    """A class representing the Euler system written in the local frame of a
    face, i.e. with the normal velocity :math:`u` and the tangential velocity
    :math:`v`

    Attributes
    ---------
    eos
        An instance of :class:`~.PerfectGas`, the equation of state of the fluid
    """

    def __init__(self, eos: PerfectGas):
        self.eos = eos

    def conservative(self, rho, U, V, p) -> np.ndarray:
        r"""The conservative state vector
        :math:`\qty(\rho, \rho u, \rho v, \rho E)` stacked on the last axis"""

        return stack_flux(
            rho,
            np.multiply(rho, U),
            np.multiply(rho, V),
            self.eos.total_energy(rho, U, V, p),
        )

    def F(self, rho, U, V, p) -> np.ndarray:
        r"""This returns the physical flux along the face normal

        .. math::

            \vb{F}\qty(\vb{w}) =
            \begin{bmatrix}
                \rho u \\
                \rho u^2 + p \\
                \rho u v \\
                (\rho E + p) u
            \end{bmatrix}

        Parameters
        ----------
        rho
            The density, one value per face
        U
            The normal velocity
        V
            The tangential velocity
        p
            The pressure

        Returns
        ---------
        F
            An array of dimension :math:`N_f \times 4`
        """
        rhoU = np.multiply(rho, U)
        rhoE = self.eos.total_energy(rho, U, V, p)

        return stack_flux(
            rhoU,
            rhoU * U + p,
            rhoU * V,
            np.multiply(rhoE + p, U),
        )
