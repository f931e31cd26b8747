# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import numpy as np
import pytest

from fvflux.fields import Fields


@pytest.fixture
def fields():
    class NewFields(Fields):
        """Some fields"""

        b = 1
        a = 0

    yield NewFields


def test_functional_api():
    fields = Fields("Test", {"a": 0, "b": 1})

    assert fields.a == 0
    assert fields.b == 1
    assert len(fields) == 2


def test_no_init():
    with pytest.raises(TypeError):
        Fields()


def test_int_type(fields):
    for f in fields:
        assert isinstance(f, int)


def test_field_name(fields):
    assert fields.a.name == "a"
    assert fields.b.name == "b"


def test_field_value(fields):
    assert fields.a.value == 0
    assert fields.b.value == 1


def test_iteration_order(fields):
    assert [f.name for f in fields] == ["a", "b"]


def test_field_names(fields):
    assert fields.names() == [f.name for f in fields]


def test_contains(fields):
    assert "a" in fields
    assert "c" not in fields


def test_docstring_is_not_a_field(fields):
    assert len(fields) == 2
    assert fields.__doc__ == "Some fields"


def test_field_getitem():
    fields = Fields("Test", {"a": 0, "b": 1, "c": 2, "d": 3})

    result = (fields[2], fields[3])

    assert set(fields[2:4]) == set(result)


def test_non_contiguous():
    with pytest.raises(ValueError):
        Fields("Test", {"a": 0, "b": 2})


def test_indexing(fields):
    arr = np.array([[10, 20], [30, 40]])

    assert np.array_equal(arr[..., fields.b], [20, 40])
