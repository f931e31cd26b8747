# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Build the flux functions and the schemes out of a :class:`~.RunConfig` """

from __future__ import annotations

import logging

from typing import Dict, Optional, Type, TYPE_CHECKING

from fvflux.config import FluxFunction, SourceFunction
from fvflux.euler.eos import PerfectGas
from fvflux.euler.problem import EulerProblem
from fvflux.euler.riemann import (
    AUSMD,
    AUSMDV,
    HLL,
    HLLC,
    HLLE,
    Central,
    Godunov,
    LaxFriedrichs,
    RiemannSolver,
    Roe,
    StegerWarming,
    VanLeer,
)
from fvflux.euler.schemes import EulerScheme
from fvflux.mms import ManufacturedSource, NoSource, WaveSource
from fvflux.ns.problem import NSProblem
from fvflux.ns.schemes import NSScheme
from fvflux.ns.transport import NSConstantTransport

if TYPE_CHECKING:
    from fvflux.config import RunConfig
    from fvflux.ns.transport import NSTransport


logger = logging.getLogger(__name__)


RIEMANN_SOLVERS: Dict[FluxFunction, Type[RiemannSolver]] = {
    FluxFunction.GODUNOV: Godunov,
    FluxFunction.ROE: Roe,
    FluxFunction.HLL: HLL,
    FluxFunction.HLLE: HLLE,
    FluxFunction.HLLC: HLLC,
    FluxFunction.LAX_FRIEDRICHS: LaxFriedrichs,
    FluxFunction.STEGER_WARMING: StegerWarming,
    FluxFunction.CENTRAL: Central,
    FluxFunction.AUSMD: AUSMD,
    FluxFunction.AUSMDV: AUSMDV,
    FluxFunction.VAN_LEER: VanLeer,
}


def make_riemann_solver(
    flux_function: FluxFunction, problem: EulerProblem, **kwargs
) -> RiemannSolver:
    """Instantiate the :class:`~.RiemannSolver` associated to a
    :class:`~.FluxFunction`. Additional keyword arguments are forwarded to the
    constructor (e.g. ``exact`` for :class:`~.Godunov`)"""

    solver_cls = RIEMANN_SOLVERS[FluxFunction(flux_function)]

    if not solver_cls.reliable:
        logger.warning(
            "The %s flux function is known to produce incorrect results, "
            "do not use it for production runs",
            solver_cls.__name__,
        )

    if not solver_cls.stable:
        logger.warning(
            "The %s flux function is unconditionally unstable without "
            "additional dissipation",
            solver_cls.__name__,
        )

    return solver_cls(problem, **kwargs)


def make_source(
    source_function: SourceFunction,
    eos: PerfectGas,
    transport: Optional[NSTransport] = None,
) -> ManufacturedSource:
    """Instantiate the :class:`~.ManufacturedSource` associated to a
    :class:`~.SourceFunction`"""

    if source_function is SourceFunction.WAVE:
        return WaveSource(eos, transport)

    return NoSource()


def make_scheme(config: RunConfig, **kwargs) -> EulerScheme:
    """Build the scheme of a run: a :class:`~.NSScheme` if the configuration
    is viscous, an :class:`~.EulerScheme` otherwise. Additional keyword
    arguments are forwarded to the :class:`~.RiemannSolver`

    Parameters
    ----------
    config
        The :class:`~.RunConfig` of the run

    Returns
    -------
    scheme
        The scheme, ready to compute the fluxes with :meth:`~.Scheme.update`
    """
    eos = PerfectGas(config.gamma)

    scheme_cls: Type[EulerScheme]
    if config.viscous:
        transport: Optional[NSTransport] = NSConstantTransport(
            config.viscosity, config.prandtl
        )
        problem: EulerProblem = NSProblem(eos, transport)  # type: ignore
        scheme_cls = NSScheme
    else:
        transport = None
        problem = EulerProblem(eos)
        scheme_cls = EulerScheme

    riemann_solver = make_riemann_solver(config.flux_function, problem, **kwargs)
    source = make_source(config.source_function, eos, transport)

    scheme = scheme_cls(problem, riemann_solver, source)

    logger.info("Using %r", scheme)

    return scheme
