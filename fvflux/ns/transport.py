# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import abc
import numpy as np


class NSTransport(abc.ABC):
    """The transport coefficients of a Newtonian fluid following the Fourier
    law"""

    @abc.abstractmethod
    def viscosity(self, values: np.ndarray) -> np.ndarray:
        r"""Momentum diffusivity also called dynamic viscosity
        :math:`\mu`. Units: :math:`\qty[\si{\pascal \second}]`

        It returns a value per each state in ``values``
        """
        raise NotImplementedError

    @abc.abstractmethod
    def prandtl(self, values: np.ndarray) -> np.ndarray:
        r"""The Prandtl number :math:`\text{Pr} = \frac{c_p \mu}{k}`, relating
        the thermal conductivity to the viscosity

        It returns a value per each state in ``values``
        """
        raise NotImplementedError


class NSConstantTransport(NSTransport):
    """A :class:`NSTransport` providing constant coefficients

    Parameters
    ----------
    viscosity
        the constant value of the viscosity

    prandtl
        the constant value of the Prandtl number
    """

    def __init__(self, viscosity: float, prandtl: float = 0.72):
        if viscosity < 0:
            raise ValueError(f"The viscosity must be non-negative, got {viscosity}")

        if not prandtl > 0:
            raise ValueError(f"The Prandtl number must be positive, got {prandtl}")

        self._viscosity = viscosity
        self._prandtl = prandtl

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(viscosity={self._viscosity}, "
            f"prandtl={self._prandtl})"
        )

    def viscosity(self, values: np.ndarray) -> np.ndarray:
        return np.full(np.shape(values)[:-1], self._viscosity)

    def prandtl(self, values: np.ndarray) -> np.ndarray:
        return np.full(np.shape(values)[:-1], self._prandtl)
