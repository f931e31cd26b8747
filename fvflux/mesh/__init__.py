# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from .cellset import CellSet, FaceSet
from .mesh import Mesh
