# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import numpy as np
import pytest

from fvflux.euler.riemann import AUSMD, AUSMDV, HLLC
from fvflux.euler.schemes import EulerScheme
from fvflux.euler.state import PrimState
from fvflux.mesh import CellSet, FaceSet, Mesh
from fvflux.mms import NoSource, WaveSource


@pytest.fixture
def free_stream():
    yield PrimState(rho=1.2, U=0.3, V=-0.2, p=0.8)


def test_default_source(problem):
    scheme = EulerScheme(problem, HLLC(problem))

    assert isinstance(scheme.source, NoSource)
    assert "HLLC" in repr(scheme)


def test_free_stream(problem, solver, make_mesh, free_stream):
    mesh = make_mesh(3, free_stream)
    scheme = EulerScheme(problem, solver)

    scheme.update(mesh, 0.0)

    rho, U, V, p = free_stream
    h = 1 / 3
    F_x = problem.F(rho, U, V, p) * h
    F_y = problem.F(rho, V, U, p)[[0, 2, 1, 3]] * h

    faces = mesh.faces
    x_faces = faces.normals[:, 0] == 1

    assert np.allclose(faces.fluxes[x_faces], F_x, rtol=1e-8, atol=1e-10)
    assert np.allclose(faces.fluxes[~x_faces], F_y, rtol=1e-8, atol=1e-10)
    assert np.allclose(mesh.net_flux(), 0, atol=1e-10)


def test_free_stream_two_by_two(problem, solver, make_mesh, free_stream):
    mesh = make_mesh(2, free_stream)
    scheme = EulerScheme(problem, solver)

    scheme.update(mesh, 0.0)

    assert np.any(mesh.faces.fluxes != 0)
    assert np.allclose(mesh.net_flux(), 0, atol=1e-10)


def test_update_resets_fluxes(problem, make_mesh, free_stream):
    mesh = make_mesh(3, free_stream)
    scheme = EulerScheme(problem, HLLC(problem))

    scheme.update(mesh, 0.0)
    first = mesh.faces.fluxes.copy()
    scheme.update(mesh, 0.0)

    assert np.array_equal(mesh.faces.fluxes, first)


def two_cells(values, flip):
    normal = np.array([0.6, 0.8])
    owner, neighbour = (1, 0) if flip else (0, 1)

    cells = CellSet(
        values=np.array(values),
        centroids=np.array([[0.0, 0.0], [0.6, 0.8]]),
    )
    faces = FaceSet(
        owner=[owner],
        neighbour=[neighbour],
        normals=[-normal if flip else normal],
        lengths=[0.5],
    )

    return Mesh(cells, faces)


def test_orientation(problem, Solver):
    """Storing a face the other way around flips the sign of its flux"""
    if Solver in (AUSMD, AUSMDV):
        pytest.skip("The AUSM splittings are not mirror symmetric")

    values = [[1.0, 0.4, 0.2, 1.0], [0.6, -0.1, -0.3, 0.5]]
    scheme = EulerScheme(problem, Solver(problem))

    mesh = two_cells(values, flip=False)
    flipped = two_cells(values, flip=True)

    scheme.update(mesh, 0.0)
    scheme.update(flipped, 0.0)

    assert np.allclose(mesh.faces.fluxes, -flipped.faces.fluxes, atol=1e-12)
    assert np.allclose(mesh.net_flux(), flipped.net_flux(), atol=1e-12)


def test_sources(problem, eos, mesh):
    source = WaveSource(eos)
    scheme = EulerScheme(problem, HLLC(problem), source)

    scheme.update(mesh, 0.1)

    expected = source(mesh.cells.centroids, 0.1) / 9

    assert np.allclose(mesh.cells.sources, expected)
