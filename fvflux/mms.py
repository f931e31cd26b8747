# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Source terms of manufactured solutions, used to verify the order of
accuracy of the solver """

from __future__ import annotations

import abc
import numpy as np

from typing import Optional, TYPE_CHECKING

from fvflux.euler.fields import ConsFields
from fvflux.euler.state import PrimState

if TYPE_CHECKING:
    from fvflux.euler.eos import PerfectGas
    from fvflux.ns.transport import NSTransport


class ManufacturedSource(abc.ABC):
    """A forcing term, function of space and time, added to the right hand
    side of the conservative equations"""

    @abc.abstractmethod
    def __call__(self, points: np.ndarray, t: float) -> np.ndarray:
        r"""Evaluate the source term

        Parameters
        ----------
        points
            Coordinates of the evaluation points, :math:`N_g \times 2`
        t
            Time instant

        Returns
        -------
        s
            The source term of each conservative equation on each point,
            :math:`N_g \times 4`
        """
        raise NotImplementedError


class NoSource(ManufacturedSource):
    """A zero source term"""

    def __call__(self, points: np.ndarray, t: float) -> np.ndarray:
        return np.zeros((len(points), len(ConsFields)))


class WaveSource(ManufacturedSource):
    r"""The source term that turns the travelling wave

    .. math::

        \rho = 2 + A \sin\qty(\omega (x + y) - a t)
        \qquad u = v = 1 \qquad \rho E = \rho^2

    into a solution of the Euler (or Navier-Stokes, if a ``transport`` is
    given) equations, with :math:`A = 0.1`, :math:`\omega = \pi f`,
    :math:`f = 1` and :math:`a = 2\pi`.

    Parameters
    ----------
    eos
        The :class:`~.PerfectGas` of the fluid
    transport
        The :class:`~.NSTransport` providing viscosity and Prandtl number.
        ``None`` for inviscid flows
    """

    amplitude = 0.1
    frequency = 1.0

    def __init__(self, eos: PerfectGas, transport: Optional[NSTransport] = None):
        self.eos = eos
        self.transport = transport

        self.omega = np.pi * self.frequency
        self.a = 2 * np.pi

    def _phase(self, points: np.ndarray, t: float) -> np.ndarray:
        return self.omega * (points[..., 0] + points[..., 1]) - self.a * t

    def exact(self, points: np.ndarray, t: float) -> PrimState:
        """The manufactured solution on the given points"""
        points = np.asarray(points, dtype=float)

        rho = 2 + self.amplitude * np.sin(self._phase(points, t))
        one = np.ones_like(rho)

        return PrimState.from_columns(rho, one, one, self.eos.gm1 * (rho**2 - rho))

    def __call__(self, points: np.ndarray, t: float) -> np.ndarray:
        points = np.asarray(points, dtype=float)
        fields = ConsFields

        gamma = self.eos.gamma
        amp = self.amplitude
        om = self.omega
        a = self.a

        phase = self._phase(points, t)
        cos = np.cos(phase)
        sin2 = np.sin(2 * phase)

        s = np.empty(points.shape[:-1] + (len(fields),))

        s[..., fields.rho] = (-a + 2 * om) * cos
        s[..., fields.rhoU] = (-a + om * (3 * gamma - 1)) * cos + (
            amp * om * self.eos.gm1 * sin2
        )
        s[..., fields.rhoV] = s[..., fields.rhoU]
        s[..., fields.rhoE] = ((2 + 6 * gamma) * om - 4 * a) * cos + amp * (
            2 * om * gamma - a
        ) * sin2

        if self.transport is not None:
            state = self.exact(points, t)
            mu = self.transport.viscosity(state)
            Pr = self.transport.prandtl(state)
            s[..., fields.rhoE] += 2 * mu * gamma * om**2 / Pr * np.sin(phase)

        return amp * s
