# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import numpy as np
import pytest

from fvflux.euler.eos import PerfectGas
from fvflux.euler.problem import EulerProblem
from fvflux.euler.state import PrimState
from fvflux.mesh import CellSet, FaceSet, Mesh


def periodic_mesh(n: int, values=None) -> Mesh:
    """A periodic Cartesian mesh of the unit square with ``n x n`` cells. Each
    cell owns its right and top faces. A single quadrature point per cell is
    placed on the centroid"""
    h = 1 / n

    def index(i, j):
        return (j % n) * n + (i % n)

    centroids = []
    owner = []
    neighbour = []
    normals = []
    vectors = []

    for j in range(n):
        for i in range(n):
            centroids.append(((i + 0.5) * h, (j + 0.5) * h))

            owner += [index(i, j), index(i, j)]
            neighbour += [index(i + 1, j), index(i, j + 1)]
            normals += [(1, 0), (0, 1)]
            vectors += [(h, 0), (0, h)]

    num_cells = n * n

    if values is None:
        values = PrimState(rho=1.0, U=0.0, V=0.0, p=1.0)

    values = np.asarray(values, dtype=float)
    if values.ndim == 1:
        values = np.tile(values, (num_cells, 1))

    cells = CellSet(
        values=values.view(PrimState),
        centroids=np.array(centroids),
        gauss_points=np.array(centroids),
        gauss_weights=np.full(num_cells, h**2),
        gauss_cells=np.arange(num_cells),
    )
    faces = FaceSet(
        owner=np.array(owner),
        neighbour=np.array(neighbour),
        normals=np.array(normals, dtype=float),
        lengths=np.full(len(owner), h),
        centroid_vectors=np.array(vectors),
    )

    return Mesh(cells, faces)


@pytest.fixture
def tol():
    yield 1e-12


@pytest.fixture
def eos():
    yield PerfectGas(gamma=1.4)


@pytest.fixture
def problem(eos):
    yield EulerProblem(eos)


@pytest.fixture
def make_mesh():
    yield periodic_mesh


@pytest.fixture
def mesh():
    yield periodic_mesh(3)
