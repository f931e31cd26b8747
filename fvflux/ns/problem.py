# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import Tuple, TYPE_CHECKING

from fvflux.euler.fields import ConsFields, PrimFields
from fvflux.euler.problem import EulerProblem

if TYPE_CHECKING:
    from fvflux.euler.eos import PerfectGas
    from fvflux.ns.transport import NSTransport


class NSProblem(EulerProblem):
    r"""A class representing the Navier-Stokes equations for a Newtonian
    fluid with the Stokes hypothesis and the Fourier heat flux

    Attributes
    ----------
    eos
        An instance of :class:`~.PerfectGas`
    transport
        An instance of :class:`~.NSTransport` providing the viscosity and the
        Prandtl number
    """

    def __init__(self, eos: PerfectGas, transport: NSTransport):
        super().__init__(eos)

        self.transport = transport

    def diffusive_flux(
        self, values: np.ndarray, grad_x: np.ndarray, grad_y: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray]:
        r"""The viscous flux tensor, split in its :math:`x` and :math:`y`
        columns

        .. math::

            \vb{f} =
            \begin{bmatrix}
                0 \\
                \tau_{xx} \\
                \tau_{xy} \\
                u \tau_{xx} + v \tau_{xy} + k \pdv{T}{x}
            \end{bmatrix}
            \qquad
            \vb{g} =
            \begin{bmatrix}
                0 \\
                \tau_{xy} \\
                \tau_{yy} \\
                u \tau_{xy} + v \tau_{yy} + k \pdv{T}{y}
            \end{bmatrix}

        with :math:`\tau_{xx} = \mu\qty(\frac{4}{3}\pdv{u}{x} -
        \frac{2}{3}\pdv{v}{y})`, :math:`\tau_{xy} = \mu\qty(\pdv{u}{y} +
        \pdv{v}{x})` and :math:`k \grad{T} = \frac{\mu \gamma}{(\gamma - 1)
        \text{Pr}} \grad{\frac{p}{\rho}}`

        Parameters
        ----------
        values
            The primitive state, :math:`N_f \times 4`
        grad_x
            The :math:`x` derivatives of the primitive fields
        grad_y
            The :math:`y` derivatives of the primitive fields

        Returns
        -------
        f
            The :math:`x` column of the viscous flux, :math:`N_f \times 4`
        g
            The :math:`y` column of the viscous flux
        """
        fields = PrimFields
        eos = self.eos

        rho = values[..., fields.rho]
        U = values[..., fields.U]
        V = values[..., fields.V]
        p = values[..., fields.p]

        dU_dx = grad_x[..., fields.U]
        dU_dy = grad_y[..., fields.U]
        dV_dx = grad_x[..., fields.V]
        dV_dy = grad_y[..., fields.V]

        mu = self.transport.viscosity(values)
        Pr = self.transport.prandtl(values)

        tau_xx = mu * (4 / 3 * dU_dx - 2 / 3 * dV_dy)
        tau_yy = mu * (4 / 3 * dV_dy - 2 / 3 * dU_dx)
        tau_xy = mu * (dU_dy + dV_dx)

        k = mu * eos.gamma / (eos.gm1 * Pr * rho**2)
        q_x = k * (rho * grad_x[..., fields.p] - p * grad_x[..., fields.rho])
        q_y = k * (rho * grad_y[..., fields.p] - p * grad_y[..., fields.rho])

        f = np.zeros(np.shape(values)[:-1] + (len(ConsFields),))
        g = np.zeros_like(f)

        f[..., ConsFields.rhoU] = tau_xx
        f[..., ConsFields.rhoV] = tau_xy
        f[..., ConsFields.rhoE] = U * tau_xx + V * tau_xy + q_x

        g[..., ConsFields.rhoU] = tau_xy
        g[..., ConsFields.rhoV] = tau_yy
        g[..., ConsFields.rhoE] = U * tau_xy + V * tau_yy + q_y

        return f, g
