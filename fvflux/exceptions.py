# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause


class InvalidMesh(ValueError):
    """Raised when the face and cell arrays handed over by the mesh do not
    describe a valid mesh (e.g. a face connecting a cell to itself)"""

    pass


class NonPhysicalState(ValueError):
    """Raised when a state with non-positive (or non finite) density or
    pressure reaches a flux computation, or when two states generate vacuum
    in the exact Riemann solver"""

    pass
