# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import abc
import numpy as np

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fvflux.euler.problem import EulerProblem
    from fvflux.euler.state import PrimState


class RiemannSolver(abc.ABC):
    r"""An abstract class representing an (approximate) Riemann solver, i.e. a
    numerical flux function

    .. math::

        \vb{F}^* = \mathcal{F}\qty(\vb{w}_L, \vb{w}_R)

    The states are expressed in the local frame of the face: :math:`U` is the
    velocity component along the face normal (pointing from the left state to
    the right state) and :math:`V` the tangential one. Every argument of
    :meth:`flux` can be a scalar or an array (one value per face).

    Attributes
    ----------
    problem
        The :class:`~.EulerProblem` providing the physical flux and the
        equation of state

    stable
        ``False`` for flux functions that are known to be unconditionally
        unstable when used alone

    reliable
        ``False`` for flux functions whose implementation is known to be
        defective and that are kept only to reproduce legacy results
    """

    stable = True
    reliable = True

    def __init__(self, problem: EulerProblem):
        self.problem = problem

    def __repr__(self):
        return f"{self.__class__.__name__}({self.problem.eos!r})"

    @property
    def eos(self):
        return self.problem.eos

    @classmethod
    def _all_subclasses(cls):
        """A recursive class method to get all the subclasses of this class"""
        return sorted(
            set(cls.__subclasses__()).union(
                [s for c in cls.__subclasses__() for s in c._all_subclasses()]
            ),
            key=lambda c: c.__name__,
        )

    def __call__(self, Q_L: PrimState, Q_R: PrimState) -> np.ndarray:
        """Compute the numerical flux between two :class:`~.PrimState`
        (already rotated in the frame of the faces) after checking that they
        are physical

        Raises
        ------
        NonPhysicalState
            If any of the states has a non-positive density or pressure
        """
        Q_L.check_physical()
        Q_R.check_physical()

        fields = Q_L.fields
        L = np.asarray(Q_L, dtype=float)
        R = np.asarray(Q_R, dtype=float)

        return self.flux(
            L[..., fields.rho],
            R[..., fields.rho],
            L[..., fields.U],
            R[..., fields.U],
            L[..., fields.V],
            R[..., fields.V],
            L[..., fields.p],
            R[..., fields.p],
        )

    @abc.abstractmethod
    def flux(self, rho_L, rho_R, U_L, U_R, V_L, V_R, p_L, p_R) -> np.ndarray:
        r"""This is the numerical flux function. It returns the flux of
        :math:`\qty(\rho, \rho U, \rho V, \rho E)` through the face, per unit
        length, in the local frame of the face

        Parameters
        ----------
        rho_L
            The density of the left state
        rho_R
            The density of the right state
        U_L
            The normal velocity of the left state
        U_R
            The normal velocity of the right state
        V_L
            The tangential velocity of the left state
        V_R
            The tangential velocity of the right state
        p_L
            The pressure of the left state
        p_R
            The pressure of the right state

        Returns
        -------
        F
            An array of dimensions :math:`\ldots \times 4`
        """

        raise NotImplementedError
