# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import abc
import logging

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fvflux.euler.problem import EulerProblem
    from fvflux.mesh import Mesh


logger = logging.getLogger(__name__)


class Scheme(abc.ABC):
    r"""An abstract class representing the space discretization of a problem
    on an unstructured mesh.

    A general problem can be written in a compact way:

    .. math::

        \pdv{\vb{q}}{t} + \div{\qty(\vb{F}\qty(\vb{q}) - \vb{D}\qty(\vb{q},
            \grad{\vb{q}}))} = \vb{s}

    A concrete instance of this class is composed of mixins, each one of them
    implementing the discretization of one of the terms

    * :class:`~.ConvectiveScheme` for :math:`\vb{F}`
    * :class:`~.DiffusiveScheme` for :math:`\vb{D}`
    * :class:`~.SourceScheme` for :math:`\vb{s}`

    Each mixin adds its contribution in :meth:`accumulate` and then defers to
    the next class of the MRO with a ``super()`` call.

    Attributes
    ----------
    problem
        An instance of :class:`~.EulerProblem` representing the physical
        problem that this scheme discretizes
    """

    def __init__(self, problem: EulerProblem):
        self.problem = problem

    def pre_step(self, mesh: Mesh):
        """Hook called just before the accumulation. It's used by default to
        reset the face fluxes to zero

        Parameters
        ----------
        mesh
            The :class:`~.Mesh` whose fluxes are computed
        """

        mesh.faces.fluxes.fill(0)

    @abc.abstractmethod
    def accumulate(self, mesh: Mesh, t: float):
        r"""This method implements the accumulation of all the terms on the
        faces (and on the cells for the source terms) of the mesh.

        Parameters
        ----------
        mesh
            The :class:`~.Mesh` containing the state of the cells

        t
            The time instant at which to compute time-dependent terms
        """

        pass

    def update(self, mesh: Mesh, t: float):
        """Compute all the numerical fluxes of the mesh at time ``t``. The
        fluxes are stored in-place into :attr:`~.FaceSet.fluxes` (and the
        source terms in :attr:`~.CellSet.sources`)

        Parameters
        ---------
        mesh
            A :class:`~.Mesh` containing the state of the cells

        t
            The current time instant of the simulation
        """

        self.pre_step(mesh)
        self.accumulate(mesh, t)

        logger.debug(
            "%s: fluxes updated on %d faces at t=%g",
            self.__class__.__name__,
            mesh.faces.num_faces,
            t,
        )
