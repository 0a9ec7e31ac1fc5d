"""Tests for the pathgraph logger and the search trace it carries."""

import logging
from io import StringIO

import pytest

from pathgraph import Graph, WeightData, find_path, shortest_path_tree
from pathgraph.logging import LOGGER_NAME, get_logger, reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Start each test without the default handler and restore it afterwards."""
    reset_logging()
    yield
    reset_logging()
    setup_root_logger()


@pytest.fixture
def two_vertices():
    graph = Graph()
    a, b = graph.add_vertex("A"), graph.add_vertex("B")
    graph.add_edge(a, b, WeightData(1))
    return graph, a, b


def _capture(level=logging.INFO):
    stream = StringIO()
    setup_root_logger(
        level=level,
        format_string="%(name)s %(levelname)s %(message)s",
        handler=logging.StreamHandler(stream),
    )
    return stream


def test_loggers_are_nested_under_package():
    assert get_logger(LOGGER_NAME) is logging.getLogger("pathgraph")
    assert get_logger("pathgraph.algorithms.path_finder").name == (
        "pathgraph.algorithms.path_finder"
    )
    assert get_logger("myapp.routing").name == "pathgraph.myapp.routing"


def test_setup_installs_one_handler_until_reset():
    stream = StringIO()
    mine = logging.StreamHandler(stream)
    logger = setup_root_logger(handler=mine)
    again = setup_root_logger(level=logging.DEBUG, handler=logging.StreamHandler())

    assert again is logger
    assert logger.handlers == [mine]
    assert logger.level == logging.INFO

    other = logging.NullHandler()
    logger.addHandler(other)
    try:
        reset_logging()
        assert logger.handlers == [other]
        assert logger.level == logging.NOTSET
    finally:
        logger.removeHandler(other)


def test_get_logger_installs_default_handler():
    get_logger("pathgraph.graph")
    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)


def test_searches_are_quiet_at_default_level(two_vertices):
    graph, a, b = two_vertices
    stream = _capture()
    find_path(graph, a, b)
    shortest_path_tree(graph, a)
    assert stream.getvalue() == ""


def test_search_outcomes_traced_at_debug(two_vertices):
    graph, a, b = two_vertices
    stream = _capture(logging.DEBUG)

    find_path(graph, a, b)
    find_path(graph, b, a)

    lines = stream.getvalue().splitlines()
    prefix = "pathgraph.algorithms.path_finder DEBUG "
    assert lines == [
        prefix + "Searching Vertex('A') -> Vertex('B') (coefficient=1.0)",
        prefix + "Path found: 1 edges, weight 1.0, 1 tracks expanded",
        prefix + "Searching Vertex('B') -> Vertex('A') (coefficient=1.0)",
        prefix + "No path from Vertex('B') to Vertex('A') (1 tracks expanded)",
    ]


def test_module_level_tracing(two_vertices, caplog):
    """Lowering one module's logger traces that module only."""
    graph, a, b = two_vertices
    setup_root_logger()

    with caplog.at_level(logging.DEBUG, logger="pathgraph.algorithms.path_finder"):
        find_path(graph, a, b)
        shortest_path_tree(graph, a)

    names = {record.name for record in caplog.records}
    assert names == {"pathgraph.algorithms.path_finder"}
    assert any(r.getMessage().startswith("Path found") for r in caplog.records)
