# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import dataclasses

import pytest
import yaml

from fvflux.config import (
    FluxFunction,
    RunConfig,
    SourceFunction,
    from_dict,
    load_yaml,
)


def test_defaults():
    config = RunConfig()

    assert config.gamma == 1.4
    assert config.flux_function is FluxFunction.HLLC
    assert not config.viscous
    assert config.source_function is SourceFunction.NONE


def test_immutable():
    config = RunConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.gamma = 1.67


@pytest.mark.parametrize(
    "name, expected",
    [
        ("roe", FluxFunction.ROE),
        ("HLLE", FluxFunction.HLLE),
        ("lax-friedrichs", FluxFunction.LAX_FRIEDRICHS),
        ("Van_Leer", FluxFunction.VAN_LEER),
        (FluxFunction.AUSMD, FluxFunction.AUSMD),
    ],
)
def test_flux_function_names(name, expected):
    assert RunConfig(flux_function=name).flux_function is expected


@pytest.mark.parametrize(
    "legacy_id, expected",
    [
        (1, FluxFunction.GODUNOV),
        (2, FluxFunction.ROE),
        (3, FluxFunction.HLL),
        (10, FluxFunction.AUSMDV),
        (11, FluxFunction.VAN_LEER),
    ],
)
def test_flux_function_legacy_ids(legacy_id, expected):
    assert from_dict({"flux_function": legacy_id}).flux_function is expected
    assert expected.legacy_id == legacy_id


def test_load_yaml_legacy_id(tmp_path):
    path = tmp_path / "legacy.yaml"
    path.write_text("flux_function: 5\n")

    assert load_yaml(path).flux_function is FluxFunction.HLLC


@pytest.mark.parametrize(
    "data",
    [
        {"flux_function": "muscl"},
        {"flux_function": 0},
        {"flux_function": 12},
        {"flux_function": True},
        {"source_function": "vortex"},
        {"gamma": 1.0},
        {"viscosity": -1e-3},
        {"prandtl": 0},
        {"viscous": "false"},
    ],
)
def test_invalid_values(data):
    with pytest.raises(ValueError):
        from_dict(data)


def test_unknown_key():
    with pytest.raises(ValueError, match="cfl"):
        from_dict({"cfl": 0.5})


def test_dict_round_trip():
    config = RunConfig(
        flux_function="ausmdv", viscous=True, viscosity=1e-3, source_function="wave"
    )

    assert from_dict(config.to_dict()) == config


def test_load_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "gamma": 1.3,
                "flux_function": "steger_warming",
                "viscous": True,
                "viscosity": 1e-2,
                "source_function": "wave",
            }
        )
    )

    config = load_yaml(path)

    assert config.gamma == 1.3
    assert config.flux_function is FluxFunction.STEGER_WARMING
    assert config.viscous
    assert config.viscosity == 1e-2
    assert config.prandtl == 0.72
    assert config.source_function is SourceFunction.WAVE


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_yaml(path) == RunConfig()


def test_load_yaml_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- roe\n- hllc\n")

    with pytest.raises(ValueError):
        load_yaml(path)


def test_load_missing_yaml(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_yaml(tmp_path / "missing.yaml")
