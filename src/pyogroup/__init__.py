"""Zero-copy grouping of sequences and UTF-8 text into runs of adjacent elements.

```python
>>> import pyogroup as pg
>>> [list(g) for g in pg.LinearGroupBy([1, 1, 1, 3, 3, 2, 2, 2])]
[[1, 1, 1], [3, 3], [2, 2, 2]]

```
"""

import logging

from ._api import group_by, group_by_mut, str_group_by, str_group_by_mut
from ._core import Config, SearchName, get_config
from ._groups import (
    BinaryGroupBy,
    BinaryGroupByMut,
    BinaryStrGroupBy,
    BinaryStrGroupByMut,
    ExponentialGroupBy,
    ExponentialGroupByMut,
    ExponentialStrGroupBy,
    ExponentialStrGroupByMut,
    GroupIterator,
    LinearGroupBy,
    LinearGroupByMut,
    LinearStrGroupBy,
    LinearStrGroupByMut,
    Rev,
)
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._search import (
    BINARY,
    EXPONENTIAL,
    LINEAR,
    Binary,
    BoundarySearch,
    Exponential,
    Linear,
    get_search,
)
from ._types import Cursor, Predicate
from ._views import ItemCursor, SliceMut, SliceView, Utf8Cursor, Utf8View, Utf8ViewMut

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BINARY",
    "EXPONENTIAL",
    "LINEAR",
    "NONE",
    "Binary",
    "BinaryGroupBy",
    "BinaryGroupByMut",
    "BinaryStrGroupBy",
    "BinaryStrGroupByMut",
    "BoundarySearch",
    "Config",
    "Cursor",
    "Err",
    "Exponential",
    "ExponentialGroupBy",
    "ExponentialGroupByMut",
    "ExponentialStrGroupBy",
    "ExponentialStrGroupByMut",
    "GroupIterator",
    "ItemCursor",
    "Linear",
    "LinearGroupBy",
    "LinearGroupByMut",
    "LinearStrGroupBy",
    "LinearStrGroupByMut",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Predicate",
    "Result",
    "ResultUnwrapError",
    "Rev",
    "SearchName",
    "SliceMut",
    "SliceView",
    "Some",
    "Utf8Cursor",
    "Utf8View",
    "Utf8ViewMut",
    "get_config",
    "get_search",
    "group_by",
    "group_by_mut",
    "str_group_by",
    "str_group_by_mut",
]
