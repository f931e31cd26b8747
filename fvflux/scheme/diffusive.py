# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import abc
import numpy as np

from typing import Tuple, TYPE_CHECKING

from .scheme import Scheme

if TYPE_CHECKING:
    from fvflux.mesh import Mesh


def corrected_gradients(
    grad_x: np.ndarray,
    grad_y: np.ndarray,
    Q_L: np.ndarray,
    Q_R: np.ndarray,
    centroid_vectors: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    r"""Apply the deferred correction to averaged face gradients so that
    their component along the line joining the two cell centroids matches
    the finite difference of the cell values

    .. math::

        \grad{\phi}_f = \overline{\grad{\phi}} - \qty(\overline{\grad{\phi}}
            \cdot \hat{\vb{e}} - \frac{\phi_R - \phi_L}{\abs{\vb{d}}})
            \hat{\vb{e}}
        \qquad
        \hat{\vb{e}} = \frac{\vb{d}}{\abs{\vb{d}}}

    Parameters
    ----------
    grad_x
        The averaged :math:`x` derivative of each field, :math:`N_f \times
        N_\text{fields}`
    grad_y
        The averaged :math:`y` derivative of each field
    Q_L
        The fields in the owner cells
    Q_R
        The fields in the neighbour cells
    centroid_vectors
        The vector :math:`\vb{d}` joining the centroid of the owner to the
        centroid of the neighbour, :math:`N_f \times 2`

    Returns
    -------
    grad_x
        The corrected :math:`x` derivatives
    grad_y
        The corrected :math:`y` derivatives
    """
    distances = np.linalg.norm(centroid_vectors, axis=-1)[..., np.newaxis]
    e_x = centroid_vectors[..., [0]] / distances
    e_y = centroid_vectors[..., [1]] / distances

    correction = grad_x * e_x + grad_y * e_y - (Q_R - Q_L) / distances

    return grad_x - correction * e_x, grad_y - correction * e_y


class DiffusiveScheme(Scheme):
    """A mixin that provides the scheme interface for the diffusive term. The
    state gradient at the face is the average of the cell gradients with a
    deferred non-orthogonal correction"""

    def face_gradients(
        self, mesh: Mesh
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Compute the fields and their gradients on the faces

        Returns
        -------
        values
            The average of the fields of the two cells of each face
        grad_x
            The corrected :math:`x` derivative of the fields on the faces
        grad_y
            The corrected :math:`y` derivative of the fields on the faces
        """
        cells = mesh.cells
        faces = mesh.faces

        Q_L = np.asarray(cells.values[faces.owner])
        Q_R = np.asarray(cells.values[faces.neighbour])

        grad_x = 0.5 * (
            cells.gradient_x[faces.owner] + cells.gradient_x[faces.neighbour]
        )
        grad_y = 0.5 * (
            cells.gradient_y[faces.owner] + cells.gradient_y[faces.neighbour]
        )

        grad_x, grad_y = corrected_gradients(
            grad_x, grad_y, Q_L, Q_R, faces.centroid_vectors
        )

        return 0.5 * (Q_L + Q_R), grad_x, grad_y

    @abc.abstractmethod
    def D(self, mesh: Mesh) -> np.ndarray:
        r"""This is the diffusive flux implementation of the scheme.

        A concrete implementation of this method needs to compute the
        numerical diffusive flux on **all** the faces of the mesh

        Parameters
        ----------
        mesh
            The :class:`~.Mesh` containing the state of the cells

        Returns
        -------
        D
            The value of the numerical diffusive flux projected on the face
            normal and multiplied by the face length, :math:`N_f \times 4`
        """

        raise NotImplementedError

    def accumulate(self, mesh: Mesh, t: float):
        # Compute fluxes computed eventually by the other terms
        super().accumulate(mesh, t)

        mesh.faces.fluxes -= self.D(mesh)
