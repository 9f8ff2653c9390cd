from ._base import BaseView
from ._slice import ItemCursor, SliceMut, SliceView
from ._utf8 import BytesLike, Utf8Cursor, Utf8View, Utf8ViewMut

__all__ = [
    "BaseView",
    "BytesLike",
    "ItemCursor",
    "SliceMut",
    "SliceView",
    "Utf8Cursor",
    "Utf8View",
    "Utf8ViewMut",
]
