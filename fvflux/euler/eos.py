# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" This module contains the Equation of State (EOS) implementations
"""

from abc import ABC, abstractmethod
import numpy as np

from typing import Union

ArrayAndScalar = Union[np.ndarray, float]


class EOS(ABC):
    """An Abstract Base Class representing an EOS for an Euler System"""

    @abstractmethod
    def rhoe(self, rho: ArrayAndScalar, p: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def p(self, rho: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def sound_velocity(
        self, rho: ArrayAndScalar, p: ArrayAndScalar
    ) -> ArrayAndScalar:
        raise NotImplementedError


class PerfectGas(EOS):
    r"""This class embeds methods to compute states for the Euler problem
    using an EOS (Equation of State) for calorically perfect gases

    .. math::

        p = \rho \mathcal{R} T = \rho \left( \gamma - 1 \right)e


    Attributes
    ----------
    gamma
        The adiabatic coefficient

    gm1
        :math:`\gamma - 1`

    gm1_inv
        :math:`\frac{1}{\gamma - 1}`
    """

    def __init__(self, gamma: float = 1.4):
        if not gamma > 1:
            raise ValueError(
                f"The adiabatic coefficient must be greater than 1, got {gamma}"
            )

        self.gamma = gamma
        self.gm1 = gamma - 1
        self.gm1_inv = 1 / self.gm1

    def __repr__(self):
        return f"{self.__class__.__name__}(gamma={self.gamma})"

    def rhoe(self, rho: ArrayAndScalar, p: ArrayAndScalar) -> ArrayAndScalar:
        """This returns the internal energy multiplied by the density

        Parameters
        ----------
        rho
            A :class:`ArrayAndScalar` containing the values of the density

        p
            A :class:`ArrayAndScalar` containing the values of the pressure

        Returns
        -------
        rhoe
            A :class:`ArrayAndScalar` containing the values of the internal
            energy multiplied by the density
        """

        return np.multiply(p, self.gm1_inv)

    def p(self, rho: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        """This returns the pressure from density and internal energy

        Parameters
        ----------
        rho
            A :class:`ArrayAndScalar` containing the values of the density

        e
            A :class:`ArrayAndScalar` containing the values of the internal
            energy

        Returns
        -------
        p
            A :class:`ArrayAndScalar` containing the values of the pressure
        """
        return self.gm1 * np.multiply(rho, e)

    def sound_velocity(
        self, rho: ArrayAndScalar, p: ArrayAndScalar
    ) -> ArrayAndScalar:
        """This returns the sound velocity from density and pressure

        Parameters
        ----------
        rho
            A :class:`ArrayAndScalar` containing the values of the density

        p
            A :class:`ArrayAndScalar` containing the values of the pressure

        Returns
        -------
        c
            A :class:`ArrayAndScalar` containing the values of the sound
            velocity
        """

        return np.sqrt(self.gamma * np.divide(p, rho))

    def total_energy(
        self,
        rho: ArrayAndScalar,
        U: ArrayAndScalar,
        V: ArrayAndScalar,
        p: ArrayAndScalar,
    ) -> ArrayAndScalar:
        r"""Total energy per unit volume
        :math:`\rho E = \frac{p}{\gamma - 1} + \frac{1}{2}\rho(u^2 + v^2)`"""

        return self.rhoe(rho, p) + 0.5 * np.multiply(rho, np.square(U) + np.square(V))

    def total_enthalpy(
        self,
        rho: ArrayAndScalar,
        U: ArrayAndScalar,
        V: ArrayAndScalar,
        p: ArrayAndScalar,
    ) -> ArrayAndScalar:
        r"""Specific total enthalpy :math:`H = \frac{\rho E + p}{\rho}`"""

        return np.divide(self.total_energy(rho, U, V, p) + p, rho)
