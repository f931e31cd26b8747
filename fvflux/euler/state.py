# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

r"""
The flux engine works on the primitive variables, the conservative ones are
only derived on demand

.. math::

    \vb{w} = \qty(\rho, u, v, p) \qquad
    \vb{q} = \qty(\rho, \rho u, \rho v, \rho E)


* ``rho``: density :math:`\rho`
* ``U``: component along :math:`x` of the velocity :math:`u`
* ``V``: component along :math:`y` of the velocity :math:`v`
* ``p``: pressure :math:`p`
"""
from __future__ import annotations

import numpy as np

from typing import TYPE_CHECKING

from fvflux.exceptions import NonPhysicalState
from fvflux.state import State

from .fields import ConsFields, PrimFields

if TYPE_CHECKING:
    from .eos import PerfectGas


class ConsState(State):
    """A :class:`State` class representing the conservative state variables
    of the Euler system"""

    fields = ConsFields

    def to_primitive(self, eos: PerfectGas) -> PrimState:
        """Recover the :class:`PrimState` from the conservative variables"""
        fields = self.fields

        rho = np.asarray(self[..., fields.rho])
        U = np.asarray(self[..., fields.rhoU]) / rho
        V = np.asarray(self[..., fields.rhoV]) / rho
        rhoe = np.asarray(self[..., fields.rhoE]) - 0.5 * rho * (U**2 + V**2)

        return PrimState.from_columns(rho, U, V, eos.p(rho, rhoe / rho))


class PrimState(State):
    """A :class:`State` class representing the primitive state variables of
    the Euler system"""

    fields = PrimFields

    def to_conservative(self, eos: PerfectGas) -> ConsState:
        """Compute the :class:`ConsState` associated to this state"""
        fields = self.fields

        rho = np.asarray(self[..., fields.rho])
        U = np.asarray(self[..., fields.U])
        V = np.asarray(self[..., fields.V])
        p = np.asarray(self[..., fields.p])

        return ConsState.from_columns(
            rho, rho * U, rho * V, eos.total_energy(rho, U, V, p)
        )

    def check_physical(self):
        """Raise :class:`~.NonPhysicalState` if any density or pressure is not
        strictly positive, or if any component is not finite"""
        fields = self.fields
        values = np.asarray(self, dtype=float)

        bad = ~np.all(np.isfinite(values), axis=-1)
        bad |= ~(values[..., fields.rho] > 0)
        bad |= ~(values[..., fields.p] > 0)

        if np.any(bad):
            first = tuple(int(i) for i in np.argwhere(np.atleast_1d(bad))[0])
            raise NonPhysicalState(
                f"{np.count_nonzero(bad)} non-physical state(s) found, first at "
                f"index {first}: {np.atleast_2d(values)[first[0]]}"
            )
