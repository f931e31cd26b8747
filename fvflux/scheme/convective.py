# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import abc

from typing import TYPE_CHECKING

from .scheme import Scheme

import numpy as np

if TYPE_CHECKING:
    from fvflux.mesh import Mesh


class ConvectiveScheme(Scheme):
    r"""A mixin that provides the scheme implementation for the convective
    term

    .. math::

        \sum_f \vb{F}^*_f \cdot \hat{\vb{n}}_f \abs{\partial \Omega_f}

    """

    @abc.abstractmethod
    def F(self, mesh: Mesh) -> np.ndarray:
        r"""This is the convective flux implementation of the scheme. See
        :cite:`toro_riemann_2009` for a great overview on numerical methods for
        hyperbolic problems.

        A concrete implementation of this method needs to compute the
        numerical flux on **all** the faces of the mesh at once

        Parameters
        ----------
        mesh
            The :class:`~.Mesh` containing the state of the cells

        Returns
        -------
        F
            The value of the numerical convective flux multiplied by the
            face length, :math:`N_f \times 4`

        """
        raise NotImplementedError

    def accumulate(self, mesh: Mesh, t: float):
        # Compute fluxes computed eventually by the other terms (diffusive,
        # source)
        super().accumulate(mesh, t)

        mesh.faces.fluxes += self.F(mesh)
