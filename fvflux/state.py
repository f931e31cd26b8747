# SPDX-FileCopyrightText: 2020-2023 FvFlux Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numbers

import numpy as np

from typing import Collection, Type

from .fields import Fields


class State(np.ndarray):
    """:class:`State` is a subclass of :class:`numpy.ndarray`. It behaves like
    a normal :class:`numpy.ndarray` except that the last axis is labelled by
    the :attr:`fields` enumeration, so that components can be accessed by name

    A :class:`State` can be initialized using a :class:`StateTemplate`,

    >>> Q = StateTemplate("rho", "rhoU", "rhoV")
    >>> state = np.array([0, 1, 2]).view(Q)
    >>> assert state[state.fields.rho] == 0
    >>> assert state[state.fields.rhoU] == 1
    >>> assert state[state.fields.rhoV] == 2

    or directly providing key-value arguments

    >>> state = State(rho=0, rhoU=1, rhoV=2)
    >>> assert state[state.fields.rhoV] == 2

    A :class:`State` can be multidimensional. The last dimension must be the
    number of fields. In a face-based solver the first axis usually runs over
    the faces (or the cells) of the mesh

    >>> state = np.random.random((10, 3)).view(Q)
    >>> assert np.array_equal(state[..., state.fields.rhoU], state[..., 1])
    """

    fields: Type[Fields]
    _FIELDS_ENUM_NAME = "FieldsEnum"

    def __new__(cls, *args, **kwargs):
        if args and kwargs:
            raise TypeError(
                "A State can be defined using positional arguments OR "
                "keyword arguments, not both"
            )

        if kwargs:
            if cls is not State:
                try:
                    args = tuple(kwargs.pop(name) for name in cls.fields.names())
                except KeyError as e:
                    raise TypeError(f"Missing field {e} for {cls.__name__}") from e

                if kwargs:
                    raise TypeError(
                        f"Unknown fields for {cls.__name__}: {list(kwargs)}"
                    )
            else:
                # Derive a new class instead of mutating the base one
                cls = StateTemplate(*kwargs.keys())
                args = tuple(kwargs.values())

        if all(isinstance(arg, numbers.Number) for arg in args):
            dtype: type = float
        else:
            dtype = object

        return np.asarray(list(args), dtype=dtype).view(cls)

    @classmethod
    def list_to_enum(cls, fields: Collection[str]) -> Type[Fields]:
        """Convert a list of textual fields to the :class:`Fields` enumeration
        that is stored in :attr:`fields`"""

        return Fields(  # type: ignore
            cls._FIELDS_ENUM_NAME, dict(zip(fields, range(len(fields))))
        )

    @classmethod
    def zeros(cls, num: int) -> State:
        """Returns a zero-initialized :class:`State` array storing ``num``
        states"""

        return np.zeros((num, len(cls.fields))).view(cls)

    @classmethod
    def from_columns(cls, *columns) -> State:
        """Stack one array per field (in the order of :attr:`fields`) into a
        :class:`State` whose last axis runs over the fields"""

        if len(columns) != len(cls.fields):
            raise ValueError(
                f"{cls.__name__} needs {len(cls.fields)} columns, "
                f"got {len(columns)}"
            )

        return np.stack(
            np.broadcast_arrays(*(np.asarray(c, dtype=float) for c in columns)),
            axis=-1,
        ).view(cls)


def StateTemplate(*fields: str) -> Type[State]:
    r"""A factory for a :class:`State`.

    It allows you to create at will a :class:`State` class for which you can
    access its variables (e.g. the velocity :math:`\mathbf{U}`) using the
    attribute :attr:`fields`, and not only by index.

    Parameters
    ----------
    fields
        A list of (scalar) fields composing the state


    The state of the 2D Euler compressible equations

    >>> Q = StateTemplate("rho", "rhoU", "rhoV", "rhoE")
    >>> zero = Q(0, 0, 0, 0)
    >>> assert zero[Q.fields.rho] == 0
    """
    state_fields: Type[Fields] = State.list_to_enum(fields)
    state_cls = type("DerivedState", (State,), {"fields": state_fields})

    return state_cls
