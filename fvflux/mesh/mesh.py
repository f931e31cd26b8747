# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging

import numpy as np

from fvflux.exceptions import InvalidMesh

from .cellset import CellSet, FaceSet


logger = logging.getLogger(__name__)


class Mesh:
    r"""This class collects the cells and the faces of an unstructured 2D
    mesh, as produced by an external mesh generator (ghost cells included)

    The connectivity is checked at construction. In particular, every face
    must join two distinct cells. Each face owns exactly one flux slot, so
    the fluxes of all the faces can be computed at once even when several
    faces join the same pair of cells.

    Parameters
    ----------
    cells
        A :class:`CellSet` storing the cell data
    faces
        A :class:`FaceSet` storing the face data

    Raises
    ------
    InvalidMesh
        If the connectivity or the geometry is not valid
    """

    def __init__(self, cells: CellSet, faces: FaceSet, tol: float = 1e-10):
        self.cells = cells
        self.faces = faces
        self.tol = tol

        if (
            faces.centroid_vectors is None
            and faces.neighbour.shape == faces.owner.shape
            and cells.centroids.ndim == 2
            and self._indices_valid()
        ):
            faces.centroid_vectors = (
                cells.centroids[faces.neighbour] - cells.centroids[faces.owner]
            )

        self.validate()

        logger.debug(
            "Mesh with %d cells and %d faces", cells.num_cells, faces.num_faces
        )

    def _indices_valid(self) -> bool:
        faces = self.faces
        num_cells = self.cells.num_cells

        return bool(
            np.all((faces.owner >= 0) & (faces.owner < num_cells))
            and np.all((faces.neighbour >= 0) & (faces.neighbour < num_cells))
        )

    def validate(self):
        """Check the consistency of the mesh data

        Raises
        ------
        InvalidMesh
            If the mesh is not valid
        """
        cells = self.cells
        faces = self.faces
        num_faces = faces.num_faces

        if cells.values.ndim != 2 or cells.values.shape[1] != len(
            cells.values.fields
        ):
            raise InvalidMesh(
                f"Cell values must have shape (N, {len(cells.values.fields)}), "
                f"got {cells.values.shape}"
            )

        for name in ("gradient_x", "gradient_y"):
            if getattr(cells, name).shape != cells.values.shape:
                raise InvalidMesh(
                    f"The {name} array must have the shape of the cell values"
                )

        if cells.centroids.shape != (cells.num_cells, 2):
            raise InvalidMesh("The centroids must have shape (N_cells, 2)")

        if (
            faces.neighbour.shape != (num_faces,)
            or faces.lengths.shape != (num_faces,)
            or faces.normals.shape != (num_faces, 2)
        ):
            raise InvalidMesh("Inconsistent dimensions of the face arrays")

        if not self._indices_valid():
            raise InvalidMesh("Faces reference cells that do not exist")

        if faces.centroid_vectors is None or faces.centroid_vectors.shape != (
            num_faces,
            2,
        ):
            raise InvalidMesh("The centroid vectors must have shape (N_faces, 2)")

        self_loops = np.flatnonzero(faces.owner == faces.neighbour)
        if self_loops.size:
            raise InvalidMesh(
                f"Faces {self_loops.tolist()} connect a cell to itself"
            )

        norms = np.linalg.norm(faces.normals, axis=-1)
        if not np.allclose(norms, 1, rtol=0, atol=self.tol):
            raise InvalidMesh("The face normals must be unit vectors")

        if np.any(~(faces.lengths > 0)):
            raise InvalidMesh("The face lengths must be strictly positive")

        if np.any(~(faces.distances > 0)):
            raise InvalidMesh(
                "The distance between the centroids of the cells of a face "
                "must be strictly positive"
            )

        num_points = cells.gauss_points.shape[0]
        if (
            cells.gauss_points.shape != (num_points, 2)
            or cells.gauss_weights.shape != (num_points,)
            or cells.gauss_cells.shape != (num_points,)
        ):
            raise InvalidMesh("Inconsistent dimensions of the quadrature arrays")

        if np.any((cells.gauss_cells < 0) | (cells.gauss_cells >= cells.num_cells)):
            raise InvalidMesh("Quadrature points reference cells that do not exist")

    def net_flux(self) -> np.ndarray:
        r"""Sum, for each cell, the fluxes through its faces with the sign the
        cell sees them with

        Returns
        -------
        net_flux
            An array of dimensions :math:`N_c \times 4`
        """
        faces = self.faces
        net = np.zeros((self.cells.num_cells, faces.fluxes.shape[-1]))

        np.add.at(net, faces.owner, faces.fluxes)
        np.add.at(net, faces.neighbour, -faces.fluxes)

        return net
