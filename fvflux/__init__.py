# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Interface numerical fluxes for 2D unstructured finite volume solvers """

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
