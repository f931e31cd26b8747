# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Numerical flux functions for the Euler equations written in the local
frame of a face """

from .scheme import RiemannSolver
from .godunov import Godunov
from .roe import Roe, roe_average
from .hllx import HLL, HLLE, HLLC
from .central import Central, LaxFriedrichs
from .splitting import StegerWarming, VanLeer
from .ausm import AUSMD, AUSMDV
