# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import abc
import numpy as np

from typing import TYPE_CHECKING

from .scheme import Scheme

if TYPE_CHECKING:
    from fvflux.mesh import CellSet, Mesh


class SourceScheme(Scheme):
    r"""A mixin that provides the scheme implementation for the source term,
    integrated on the quadrature points of each cell

    .. math::

        \int_{\Omega_i} \vb{s} \dd{\Omega} \approx \sum_g w_g \vb{s}(\vb{x}_g)
    """

    def accumulate(self, mesh: Mesh, t: float):
        # Compute fluxes computed eventually by the other terms (convective,
        # diffusive)
        super().accumulate(mesh, t)

        self.update_sources(mesh.cells, t)

    def update_sources(self, cells: CellSet, t: float):
        """Reset :attr:`~.CellSet.sources` and accumulate in it the source
        term evaluated on all the quadrature points

        Parameters
        ----------
        cells
            The :class:`~.CellSet` whose sources are updated
        t
            Time instant
        """
        cells.sources.fill(0)

        values = self.s(cells.gauss_points, t) * cells.gauss_weights[..., np.newaxis]

        # Several quadrature points can belong to the same cell
        np.add.at(cells.sources, cells.gauss_cells, values)

    @abc.abstractmethod
    def s(self, points: np.ndarray, t: float) -> np.ndarray:
        r"""This is the source term implementation of the scheme

        Parameters
        ----------
        points
            The coordinates of the points where the source is evaluated,
            :math:`N_g \times 2`

        t
            Time instant

        Returns
        -------
        s
            The value of the source term on the points, :math:`N_g \times 4`
        """

        raise NotImplementedError
