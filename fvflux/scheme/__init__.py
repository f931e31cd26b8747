# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from .scheme import Scheme
from .convective import ConvectiveScheme
from .diffusive import DiffusiveScheme
from .source import SourceScheme
