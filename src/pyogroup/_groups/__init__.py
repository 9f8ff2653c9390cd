from ._base import GroupIterator, Rev
from ._slice import (
    BinaryGroupBy,
    BinaryGroupByMut,
    ExponentialGroupBy,
    ExponentialGroupByMut,
    LinearGroupBy,
    LinearGroupByMut,
)
from ._str import (
    BinaryStrGroupBy,
    BinaryStrGroupByMut,
    ExponentialStrGroupBy,
    ExponentialStrGroupByMut,
    LinearStrGroupBy,
    LinearStrGroupByMut,
)

__all__ = [
    "BinaryGroupBy",
    "BinaryGroupByMut",
    "BinaryStrGroupBy",
    "BinaryStrGroupByMut",
    "ExponentialGroupBy",
    "ExponentialGroupByMut",
    "ExponentialStrGroupBy",
    "ExponentialStrGroupByMut",
    "GroupIterator",
    "LinearGroupBy",
    "LinearGroupByMut",
    "LinearStrGroupBy",
    "LinearStrGroupByMut",
    "Rev",
]
