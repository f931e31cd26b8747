# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" The compressible Euler equations for a perfect gas """
