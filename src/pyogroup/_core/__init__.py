from ._config import SEARCH_NAMES, Config, SearchName, get_config
from ._main import Checkable, Pipeable

__all__ = [
    "SEARCH_NAMES",
    "Checkable",
    "Config",
    "Pipeable",
    "SearchName",
    "get_config",
]
