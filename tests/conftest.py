import logging

import logfire
import pytest

from csscraft import SelectorChain, SelectorLink, SelectorSpec, css_selector_builder


@pytest.fixture
def builder():
    return css_selector_builder


@pytest.fixture
def table_chain():
    """div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"""
    return SelectorChain(
        head=SelectorSpec(element='div', id='main', classes=['container', 'draggable']),
        links=[
            SelectorLink(combinator='+', selector=SelectorSpec(element='table', id='data')),
            SelectorLink(combinator='~', selector=SelectorSpec(element='tr', pseudo_classes=['nth-of-type(even)'])),
            SelectorLink(combinator=' ', selector=SelectorSpec(element='td', pseudo_classes=['nth-of-type(even)'])),
        ],
    )


@pytest.fixture
def restore_root_logger():
    """Undo handlers and level changes made to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


def pytest_configure(config):
    """Register custom markers and keep logfire offline."""
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')
    logfire.configure(send_to_logfire=False, console=False)


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)
