# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Lightweight enumerations used to index the last axis of a
:class:`~fvflux.state.State` """

import sys

from typing import List, Optional

from aenum import (
    is_sunder,
    is_dunder,
    is_descriptor,
    is_private_name,
)


class Field(int):
    """An :class:`int` that also remembers the name of the state component it
    indexes"""

    name: str
    value: int

    def __new__(cls, name: str, value: int):
        obj = super().__new__(cls, value)
        obj.name = name
        obj.value = value

        return obj

    def __repr__(self):
        return f"<{self.name}: {self.value}>"


class FieldsMeta(type):
    """Metaclass behaving like a simplified :class:`Enum`. Every public class
    attribute is converted into a :class:`Field`, while the order of
    definition is kept to iterate over the fields.

    Contrary to an :class:`Enum`, fields compare (and index arrays) as plain
    integers, with no ``.value`` indirection needed.
    """

    _field_values: List[Field]
    _field_names: List[str]
    _len: int

    def __new__(cls, name, bases, clsdict):
        fields = {
            k: Field(k, v)
            for (k, v) in clsdict.items()
            if not (
                is_sunder(k)
                or is_dunder(k)
                or is_private_name(name, k)
                or is_descriptor(v)
            )
        }

        values = sorted(fields.values(), key=int)
        if [int(v) for v in values] != list(range(len(values))):
            raise ValueError(
                f"The fields of {name} must be numbered contiguously from 0, "
                f"got {[int(v) for v in values]}"
            )

        # Non-field attributes (docstring, module, methods) are kept as is
        attrs = {k: v for (k, v) in clsdict.items() if k not in fields}
        attrs.update(fields)

        fields_cls = super().__new__(cls, name, bases, attrs)

        fields_cls._field_values = values
        fields_cls._field_names = [f.name for f in values]
        fields_cls._len = len(values)

        return fields_cls

    def __iter__(cls):
        return iter(cls._field_values)

    def __call__(
        cls,
        clsname: Optional[str] = None,
        fields: Optional[dict] = None,
        *args,
        **kwargs,
    ):
        """Functional creation, e.g. ``Fields("Q", {"rho": 0, "p": 1})``"""
        metacls = cls.__class__

        if fields is None:
            raise TypeError(
                "This class is used like an `Enum`. Can't be directly instantiated"
            )

        obj = metacls.__new__(metacls, clsname, (cls,), dict(fields))
        obj.__module__ = sys._getframe(1).f_globals["__name__"]

        return obj

    def __getitem__(cls, idx):
        return cls._field_values[idx]

    def __len__(cls):
        return cls._len

    def __contains__(cls, name: str):
        return name in cls._field_names

    def names(cls) -> List[str]:
        """Returns a list of field names, in index order"""

        return cls._field_names


class Fields(metaclass=FieldsMeta):
    pass
