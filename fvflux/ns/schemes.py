# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import TYPE_CHECKING

from fvflux.euler.schemes import EulerScheme
from fvflux.math import Direction
from fvflux.ns.problem import NSProblem
from fvflux.scheme.diffusive import DiffusiveScheme

if TYPE_CHECKING:
    from fvflux.mesh import Mesh


class NSScheme(EulerScheme, DiffusiveScheme):
    r"""The discretization of the Navier-Stokes equations: the convective
    flux of :class:`~.EulerScheme` minus the viscous flux evaluated on the
    averaged face state with the corrected face gradients

    .. math::

        \vb{F}^*_f - \qty(\vb{f} n_x + \vb{g} n_y) \abs{\partial \Omega_f}
    """

    problem: NSProblem

    def D(self, mesh: Mesh) -> np.ndarray:
        faces = mesh.faces

        values, grad_x, grad_y = self.face_gradients(mesh)
        f, g = self.problem.diffusive_flux(values, grad_x, grad_y)

        n_x = faces.normals[..., [Direction.X]]
        n_y = faces.normals[..., [Direction.Y]]

        return (f * n_x + g * n_y) * faces.lengths[..., np.newaxis]
