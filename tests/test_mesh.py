# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import numpy as np
import pytest

from fvflux.exceptions import InvalidMesh
from fvflux.mesh import CellSet, FaceSet, Mesh


def two_cells(**kwargs):
    cells = CellSet(
        values=np.tile([1.0, 0.0, 0.0, 1.0], (2, 1)),
        centroids=np.array([[0.5, 0.5], [1.5, 0.5]]),
    )

    face_data = dict(
        owner=[0],
        neighbour=[1],
        normals=[[1.0, 0.0]],
        lengths=[1.0],
    )
    face_data.update(kwargs)

    return cells, FaceSet(**face_data)


def test_centroid_vectors_from_centroids():
    mesh = Mesh(*two_cells())

    assert np.allclose(mesh.faces.centroid_vectors, [[1.0, 0.0]])
    assert np.allclose(mesh.faces.distances, [1.0])


def test_default_gradients():
    cells, faces = two_cells()

    assert cells.gradient_x.shape == (2, 4)
    assert np.all(cells.gradient_y == 0)


@pytest.mark.parametrize(
    "faces",
    [
        dict(neighbour=[0]),
        dict(neighbour=[2]),
        dict(owner=[-1]),
        dict(normals=[[1.0, 1.0]]),
        dict(lengths=[0.0]),
        dict(centroid_vectors=[[0.0, 0.0]]),
        dict(owner=[0, 1]),
    ],
)
def test_invalid(faces):
    with pytest.raises(InvalidMesh):
        Mesh(*two_cells(**faces))


def test_invalid_quadrature():
    cells, faces = two_cells()
    cells.gauss_points = np.zeros((2, 2))
    cells.gauss_weights = np.ones(2)
    cells.gauss_cells = np.array([0, 5])

    with pytest.raises(InvalidMesh):
        Mesh(cells, faces)


def test_periodic_two_by_two(make_mesh):
    # The periodic faces join the same cells as the internal ones
    mesh = make_mesh(2)

    assert mesh.faces.num_faces == 8
    assert np.array_equal(mesh.faces.owner, [0, 0, 1, 1, 2, 2, 3, 3])
    assert np.array_equal(mesh.faces.neighbour, [1, 2, 0, 3, 3, 0, 2, 1])


def test_faces_sharing_cells():
    # A corner cell whose two boundary faces point to the same ghost cell
    cells, faces = two_cells(
        owner=[0, 0],
        neighbour=[1, 1],
        normals=[[1.0, 0.0], [0.0, 1.0]],
        lengths=[1.0, 0.5],
        centroid_vectors=[[1.0, 0.0], [0.0, 1.0]],
    )

    mesh = Mesh(cells, faces)
    mesh.faces.fluxes[:] = [[1.0, 2.0, 3.0, 4.0], [0.5, 0.5, 0.5, 0.5]]

    assert np.allclose(
        mesh.net_flux(), [[1.5, 2.5, 3.5, 4.5], [-1.5, -2.5, -3.5, -4.5]]
    )


def test_sizes(mesh):
    assert mesh.cells.num_cells == 9
    assert mesh.faces.num_faces == 18
    assert mesh.faces.fluxes.shape == (18, 4)
    assert mesh.cells.sources.shape == (9, 4)


def test_half_fluxes(mesh):
    rng = np.random.default_rng(0)
    mesh.faces.fluxes[:] = rng.normal(size=mesh.faces.fluxes.shape)

    half = mesh.faces.half_fluxes

    assert half.shape == (18, 2, 4)
    assert np.array_equal(half[:, 0], -half[:, 1])
    assert np.array_equal(mesh.faces.half_normals[:, 1], -mesh.faces.normals)


def test_cell_faces(mesh):
    faces, signs = mesh.faces.cell_faces(4)

    assert len(faces) == 4
    assert sorted(signs) == [-1, -1, 1, 1]

    for face, sign in zip(faces, signs):
        cell = mesh.faces.owner[face] if sign > 0 else mesh.faces.neighbour[face]
        assert cell == 4


def test_net_flux(mesh):
    rng = np.random.default_rng(1)
    mesh.faces.fluxes[:] = rng.normal(size=mesh.faces.fluxes.shape)

    net = mesh.net_flux()

    # Each face flux enters one cell and leaves another one
    assert np.allclose(net.sum(axis=0), 0)

    faces, signs = mesh.faces.cell_faces(4)
    expected = np.sum(mesh.faces.fluxes[faces] * signs[:, np.newaxis], axis=0)
    assert np.allclose(net[4], expected)
