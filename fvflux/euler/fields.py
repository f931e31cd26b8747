# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

from fvflux.fields import Fields


class PrimFields(Fields):
    """Indexing enum for the primitive state variables"""

    rho = 0
    U = 1
    V = 2
    p = 3


class ConsFields(Fields):
    """Indexing enum for the conservative state variables. It is also the
    ordering of the components of any flux or source vector"""

    rho = 0
    rhoU = 1
    rhoV = 2
    rhoE = 3
