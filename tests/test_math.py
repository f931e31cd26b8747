# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import numpy as np

from fvflux.math import Direction, from_normal_frame, to_normal_frame


def test_rotation_round_trip():
    rng = np.random.default_rng(42)
    angles = rng.uniform(0, 2 * np.pi, 20)
    normals = np.stack((np.cos(angles), np.sin(angles)), axis=-1)

    U = rng.normal(size=20)
    V = rng.normal(size=20)

    U_n, U_t = to_normal_frame(U, V, normals)
    U_back, V_back = from_normal_frame(U_n, U_t, normals)

    assert np.allclose(U_back, U)
    assert np.allclose(V_back, V)

    # Rotations preserve the modulus
    assert np.allclose(U_n**2 + U_t**2, U**2 + V**2)


def test_rotation_axes():
    normals = np.array([[1.0, 0.0], [0.0, 1.0], [-1.0, 0.0]])

    U_n, U_t = to_normal_frame(np.full(3, 2.0), np.full(3, 3.0), normals)

    assert np.array_equal(U_n, [2.0, 3.0, -2.0])
    assert np.array_equal(U_t, [3.0, -2.0, -3.0])


def test_direction():
    assert Direction.X == 0
    assert Direction.Y == 1
