# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" The run configuration, loaded once at start-up from a YAML file or a
mapping and immutable afterwards

.. code-block:: yaml

    gamma: 1.4
    flux_function: hllc
    viscous: true
    viscosity: 1.0e-3
    prandtl: 0.72
    source_function: wave
"""

from __future__ import annotations

import logging
import yaml

from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union


logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class FluxFunction(Enum):
    """The numerical flux functions available for the convective term"""

    GODUNOV = "godunov"
    ROE = "roe"
    HLL = "hll"
    HLLE = "hlle"
    HLLC = "hllc"
    LAX_FRIEDRICHS = "lax_friedrichs"
    STEGER_WARMING = "steger_warming"
    CENTRAL = "central"
    AUSMD = "ausmd"
    AUSMDV = "ausmdv"
    VAN_LEER = "van_leer"

    @property
    def legacy_id(self) -> int:
        """The integer identifier used by legacy configuration files. The
        members are numbered from 1 in the order they are defined"""
        return list(type(self)).index(self) + 1

    @classmethod
    def from_legacy_id(cls, legacy_id: int) -> FluxFunction:
        members = list(cls)
        if not 1 <= legacy_id <= len(members):
            raise ValueError(
                f"Unknown FluxFunction identifier {legacy_id}. "
                f"Valid identifiers: 1 to {len(members)}"
            )

        return members[legacy_id - 1]


class SourceFunction(Enum):
    """The manufactured solutions whose source term can be added"""

    NONE = "none"
    WAVE = "wave"


def _parse_enum(enum_cls: Type[E], value: Union[int, str, E]) -> E:
    """Accept an enum member, its value or its name, case-insensitively and
    with ``-`` in place of ``_``. A :class:`FluxFunction` can also be given by
    its legacy integer identifier"""
    if isinstance(value, enum_cls):
        return value

    # Legacy configuration files select the flux function by number
    if enum_cls is FluxFunction and isinstance(value, int) and not isinstance(
        value, bool
    ):
        return FluxFunction.from_legacy_id(value)

    key = str(value).strip().lower().replace("-", "_")
    for member in enum_cls:
        if key in (member.value, member.name.lower()):
            return member

    raise ValueError(
        f"Unknown {enum_cls.__name__} {value!r}. "
        f"Valid values: {[m.value for m in enum_cls]}"
    )


@dataclass(frozen=True)
class RunConfig:
    """The immutable configuration of a run

    Attributes
    ----------
    gamma
        The adiabatic coefficient of the gas
    flux_function
        The :class:`FluxFunction` used on all the faces for the whole run
    viscous
        If ``True`` the viscous flux is subtracted from the convective one
    viscosity
        The dynamic viscosity, used only if :attr:`viscous`
    prandtl
        The Prandtl number, used only if :attr:`viscous`
    source_function
        The :class:`SourceFunction` integrated in each cell
    """

    gamma: float = 1.4
    flux_function: FluxFunction = FluxFunction.HLLC
    viscous: bool = False
    viscosity: float = 0.0
    prandtl: float = 0.72
    source_function: SourceFunction = SourceFunction.NONE

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(
            self, "flux_function", _parse_enum(FluxFunction, self.flux_function)
        )
        object.__setattr__(
            self, "source_function", _parse_enum(SourceFunction, self.source_function)
        )
        object.__setattr__(self, "gamma", float(self.gamma))
        object.__setattr__(self, "viscosity", float(self.viscosity))
        object.__setattr__(self, "prandtl", float(self.prandtl))

        if not isinstance(self.viscous, bool):
            raise ValueError(f"viscous must be a boolean, got {self.viscous!r}")

        if not self.gamma > 1:
            raise ValueError(f"gamma must be greater than 1, got {self.gamma}")

        if self.viscosity < 0:
            raise ValueError(f"viscosity must be non-negative, got {self.viscosity}")

        if not self.prandtl > 0:
            raise ValueError(f"prandtl must be positive, got {self.prandtl}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary, the inverse of :func:`from_dict`"""
        d = {}
        for f in fields(self):
            value = getattr(self, f.name)
            d[f.name] = value.value if isinstance(value, Enum) else value
        return d


def from_dict(data: Dict[str, Any]) -> RunConfig:
    """Create a :class:`RunConfig` from a dictionary. Missing keys take the
    default values

    Raises
    ------
    ValueError
        On unknown keys or invalid values
    """
    known = {f.name for f in fields(RunConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

    config = RunConfig(**data)

    logger.info(
        "Run configuration: flux=%s, viscous=%s, source=%s",
        config.flux_function.value,
        config.viscous,
        config.source_function.value,
    )

    return config


def load_yaml(path: Union[str, Path]) -> RunConfig:
    """
    Load the run configuration from a YAML file

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    yaml.YAMLError
        If the YAML is invalid
    ValueError
        If the configuration is not valid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(f"The configuration file {path} must contain a mapping")

    return from_dict(data)
