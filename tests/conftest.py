from collections.abc import Iterator

import pytest

import pyogroup as pg


@pytest.fixture
def config() -> Iterator[pg.Config]:
    """The process-wide config, restored to its defaults after the test."""
    cfg = pg.get_config()
    defaults = pg.Config()
    yield cfg
    cfg.update(
        default_search=defaults.default_search,
        repr_max_items=defaults.repr_max_items,
    )
