"""Tests for the contextual logger."""

import logging

from chain_registry.core.logging import LOGGER_NAME, ContextualLogger, logger


def test_with_context_renders_dimensions(caplog):
    scoped = logger.with_context(component="path_cache", ref="master")

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        scoped.info("built")

    record = caplog.records[-1]
    assert record.getMessage() == "built [component=path_cache ref=master]"
    assert record.context == {"component": "path_cache", "ref": "master"}


def test_with_prefix_chains(caplog):
    scoped = logger.with_prefix("PathCache: ").with_prefix("build: ")

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        scoped.info("done")

    assert caplog.records[-1].getMessage() == "PathCache: build: done"


def test_derived_loggers_do_not_mutate_parent():
    parent = logger.with_context(a=1)
    child = parent.with_context(b=2).with_prefix("x: ")

    assert isinstance(child, ContextualLogger)
    assert parent.dimensions == {"a": 1}
    assert parent.prefix == ""
    assert child.dimensions == {"a": 1, "b": 2}
