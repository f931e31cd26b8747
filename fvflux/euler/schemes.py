# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import Optional, TYPE_CHECKING

from fvflux.math import from_normal_frame, to_normal_frame
from fvflux.mms import ManufacturedSource, NoSource
from fvflux.scheme.convective import ConvectiveScheme
from fvflux.scheme.source import SourceScheme

from .fields import ConsFields
from .state import PrimState

if TYPE_CHECKING:
    from fvflux.mesh import Mesh

    from .problem import EulerProblem
    from .riemann import RiemannSolver


class EulerScheme(ConvectiveScheme, SourceScheme):
    r"""The inviscid discretization of the Euler equations. For each face the
    states of the two adjacent cells are rotated in the frame of the face,
    the numerical flux is computed by a :class:`~.RiemannSolver`, rotated
    back and multiplied by the face length

    .. math::

        \vb{F}^*_f = \vb{T}^{-1}_f \mathcal{F}\qty(\vb{T}_f \vb{w}_L,
            \vb{T}_f \vb{w}_R) \abs{\partial \Omega_f}

    Parameters
    ----------
    problem
        The :class:`~.EulerProblem` to discretize
    riemann_solver
        The numerical flux function to use on every face
    source
        The source term. Defaults to :class:`~.NoSource`
    """

    problem: EulerProblem

    def __init__(
        self,
        problem: EulerProblem,
        riemann_solver: RiemannSolver,
        source: Optional[ManufacturedSource] = None,
    ):
        super().__init__(problem)

        self.riemann_solver = riemann_solver
        self.source = NoSource() if source is None else source

    def __repr__(self):
        return (
            f"{self.__class__.__name__}({self.riemann_solver!r}, "
            f"source={self.source.__class__.__name__})"
        )

    def F(self, mesh: Mesh) -> np.ndarray:
        cells = mesh.cells
        faces = mesh.faces
        fields = PrimState.fields

        values = np.asarray(cells.values)
        Q_L = values[faces.owner]
        Q_R = values[faces.neighbour]

        U_L, V_L = to_normal_frame(
            Q_L[..., fields.U], Q_L[..., fields.V], faces.normals
        )
        U_R, V_R = to_normal_frame(
            Q_R[..., fields.U], Q_R[..., fields.V], faces.normals
        )

        F = self.riemann_solver(
            PrimState.from_columns(Q_L[..., fields.rho], U_L, V_L, Q_L[..., fields.p]),
            PrimState.from_columns(Q_R[..., fields.rho], U_R, V_R, Q_R[..., fields.p]),
        )

        F_x, F_y = from_normal_frame(
            F[..., ConsFields.rhoU], F[..., ConsFields.rhoV], faces.normals
        )
        F[..., ConsFields.rhoU] = F_x
        F[..., ConsFields.rhoV] = F_y

        return F * faces.lengths[..., np.newaxis]

    def s(self, points: np.ndarray, t: float) -> np.ndarray:
        return self.source(points, t)
