# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations
import numpy as np

from dataclasses import dataclass, field
from typing import Optional, Tuple

from fvflux.euler.fields import ConsFields
from fvflux.euler.state import PrimState


@dataclass
class CellSet:
    r"""A dataclass representing the cells of an unstructured mesh, ghost
    cells included. It ships the values of the primitive fields in the cells,
    their gradients, the cell centroids and the quadrature points used to
    integrate the source terms

    Attributes
    ----------
    values
        A :class:`~.PrimState` of dimensions :math:`N_c \times 4`

    centroids
        An array containing the centroid of the cells. It has the dimensions
        of :math:`N_c \times 2`

    gradient_x
        The derivative along :math:`x` of each primitive field. Array of
        dimensions :math:`N_c \times 4`. Provided by the gradient
        reconstruction, zero if not given

    gradient_y
        The derivative along :math:`y` of each primitive field

    gauss_points
        The coordinates of the quadrature points of all the cells, flattened.
        Array of dimensions :math:`N_g \times 2`. Cells can have a different
        number of quadrature points

    gauss_weights
        The quadrature weights, :math:`N_g`. They already include the cell
        area (i.e. they sum to the area of the cell)

    gauss_cells
        The index of the cell each quadrature point belongs to, :math:`N_g`

    sources
        The accumulated source term of each cell, :math:`N_c \times 4`,
        ordered as the conservative equations
    """

    values: PrimState
    centroids: np.ndarray
    gradient_x: Optional[np.ndarray] = None
    gradient_y: Optional[np.ndarray] = None
    gauss_points: np.ndarray = field(default_factory=lambda: np.empty((0, 2)))
    gauss_weights: np.ndarray = field(default_factory=lambda: np.empty(0))
    gauss_cells: np.ndarray = field(
        default_factory=lambda: np.empty(0, dtype=int)
    )
    sources: np.ndarray = field(init=False)

    def __post_init__(self):
        self.values = np.asarray(self.values, dtype=float).view(PrimState)
        self.centroids = np.asarray(self.centroids, dtype=float)

        shape = self.values.shape
        if self.gradient_x is None:
            self.gradient_x = np.zeros(shape)
        if self.gradient_y is None:
            self.gradient_y = np.zeros(shape)

        self.gradient_x = np.asarray(self.gradient_x, dtype=float)
        self.gradient_y = np.asarray(self.gradient_y, dtype=float)
        self.gauss_points = np.asarray(self.gauss_points, dtype=float)
        self.gauss_weights = np.asarray(self.gauss_weights, dtype=float)
        self.gauss_cells = np.asarray(self.gauss_cells, dtype=int)

        self.sources = np.zeros((len(self), len(ConsFields)))

    def __len__(self):
        return self.values.shape[0]

    @property
    def num_cells(self) -> int:
        return len(self)


@dataclass
class FaceSet:
    r"""A dataclass representing the faces of an unstructured mesh. Each
    physical face is stored once and it owns a single flux slot, seen with a
    positive sign by the :attr:`owner` cell and with a negative sign by the
    :attr:`neighbour` cell

    Attributes
    ----------
    owner
        The index of the cell the normal points out of, :math:`N_f`

    neighbour
        The index of the cell on the other side of the face (possibly a ghost
        cell), :math:`N_f`

    normals
        The unit normals, :math:`N_f \times 2`, pointing from the owner to the
        neighbour

    lengths
        The length of each face, :math:`N_f`

    centroid_vectors
        The vector joining the centroid of the owner to the centroid of the
        neighbour, :math:`N_f \times 2`. If not given it is computed by the
        :class:`~.Mesh` from the cell centroids. It must be given explicitly
        across periodic faces

    fluxes
        The numerical flux through each face, already multiplied by the face
        length, :math:`N_f \times 4`
    """

    owner: np.ndarray
    neighbour: np.ndarray
    normals: np.ndarray
    lengths: np.ndarray
    centroid_vectors: Optional[np.ndarray] = None
    fluxes: np.ndarray = field(init=False)

    def __post_init__(self):
        self.owner = np.asarray(self.owner, dtype=int)
        self.neighbour = np.asarray(self.neighbour, dtype=int)
        self.normals = np.asarray(self.normals, dtype=float)
        self.lengths = np.asarray(self.lengths, dtype=float)

        if self.centroid_vectors is not None:
            self.centroid_vectors = np.asarray(self.centroid_vectors, dtype=float)

        self.fluxes = np.zeros((len(self), len(ConsFields)))

    def __len__(self):
        return self.owner.shape[0]

    @property
    def num_faces(self) -> int:
        return len(self)

    @property
    def distances(self) -> np.ndarray:
        """The distance between the centroids of the two cells of each face"""
        return np.linalg.norm(self.centroid_vectors, axis=-1)

    @property
    def half_fluxes(self) -> np.ndarray:
        r"""The flux seen by the owner (``[:, 0]``) and by the neighbour
        (``[:, 1]``) of each face, :math:`N_f \times 2 \times 4`. The two
        halves are exact opposites"""
        return np.stack((self.fluxes, -self.fluxes), axis=1)

    @property
    def half_normals(self) -> np.ndarray:
        r"""The outward normal of the face as seen by the owner and by the
        neighbour, :math:`N_f \times 2 \times 2`"""
        return np.stack((self.normals, -self.normals), axis=1)

    def cell_faces(self, cell: int) -> Tuple[np.ndarray, np.ndarray]:
        """Returns the faces bounding a cell, and the sign with which the
        cell sees the flux stored in each of them

        Returns
        -------
        faces
            The indices of the faces
        signs
            ``1`` if the cell is the owner of the face, ``-1`` otherwise
        """
        owned = np.flatnonzero(self.owner == cell)
        neighbouring = np.flatnonzero(self.neighbour == cell)

        faces = np.concatenate((owned, neighbouring))
        signs = np.concatenate((np.ones(len(owned)), -np.ones(len(neighbouring))))

        return faces, signs
