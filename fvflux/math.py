# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" General purpose math primitives """
from __future__ import annotations

import numpy as np

from enum import IntEnum
from typing import Tuple


class Direction(IntEnum):
    """An :class:`Enum` encapsulating the coordinates indices"""

    X = 0
    Y = 1


def to_normal_frame(
    U: np.ndarray, V: np.ndarray, normals: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    r"""Rotate a vector field into the local frame of a face

    .. math::

        u_n = n_x u + n_y v \qquad u_t = -n_y u + n_x v

    Parameters
    ----------
    U
        The :math:`x` component of the vector, one value per face
    V
        The :math:`y` component of the vector, one value per face
    normals
        The unit normals of the faces. Array of dimensions
        :math:`N_f \times 2`

    Returns
    -------
    U_n
        The component along the normal
    U_t
        The component along the tangent
    """
    nx = normals[..., Direction.X]
    ny = normals[..., Direction.Y]

    return nx * U + ny * V, -ny * U + nx * V


def from_normal_frame(
    U_n: np.ndarray, U_t: np.ndarray, normals: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    r"""Inverse of :func:`to_normal_frame`

    .. math::

        u = n_x u_n - n_y u_t \qquad v = n_y u_n + n_x u_t
    """
    nx = normals[..., Direction.X]
    ny = normals[..., Direction.Y]

    return nx * U_n - ny * U_t, ny * U_n + nx * U_t
