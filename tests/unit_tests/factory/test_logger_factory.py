"""
LoggerFactory unit tests

Covers registration, hierarchical resolution, caching and reset.
"""

from __future__ import annotations

import threading

import pytest

from hierlog.appenders import StdOutAppender
from hierlog.exceptions import HierlogError, InvalidLoggerIdentifier
from hierlog.factory import (
    LoggerFactory,
    get_default_factory,
    get_logger,
    parent_identifier,
    set_default_factory,
)
from hierlog.levels import LogLevel
from hierlog.logger import Logger


class TestParentIdentifier:
    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("a.b.c", "a.b"),
            ("a.b", "a"),
            ("a", ""),
            ("", ""),
        ],
    )
    def test_drops_last_component(self, identifier, expected):
        assert parent_identifier(identifier) == expected


class TestRegisterLogger:
    def test_empty_identifier_is_rejected(self, factory):
        with pytest.raises(InvalidLoggerIdentifier) as exc_info:
            factory.register_logger(Logger(""))

        assert isinstance(exc_info.value, HierlogError)
        assert exc_info.value.code == "INVALID_LOGGER_IDENTIFIER"
        assert factory.loggers == {}

    def test_registered_logger_is_returned(self, factory):
        logger = Logger("a.b", threshold_level=LogLevel.WARNING)
        factory.register_logger(logger)

        assert factory.get_logger("a.b") is logger
        assert "a.b" in factory

    def test_registering_twice_replaces_the_entry(self, factory, console):
        first = Logger("a", threshold_level=LogLevel.ERROR, appenders=[console])
        second = Logger("a", threshold_level=LogLevel.INFO)
        factory.register_logger(first)
        factory.register_logger(second)

        resolved = factory.get_logger("a")
        assert resolved is second
        assert resolved.threshold_level == LogLevel.INFO
        assert resolved.appenders == ()


class TestGetLogger:
    def test_empty_identifier_returns_root(self, factory):
        assert factory.get_logger("") is factory.root_logger

    def test_unknown_identifier_derives_from_root(self, factory, console):
        factory.root_logger.threshold_level = LogLevel.INFO
        factory.root_logger.add_appender(console)

        logger = factory.get_logger("x.y")

        assert logger is not factory.root_logger
        assert logger.identifier == "x.y"
        assert logger.threshold_level == LogLevel.INFO
        assert logger.appenders == (console,)

    def test_closest_registered_ancestor_wins(self, factory):
        factory.register_logger(Logger("a", threshold_level=LogLevel.ERROR))
        factory.register_logger(Logger("a.b", threshold_level=LogLevel.WARNING))

        logger = factory.get_logger("a.b.c.d")

        assert logger.identifier == "a.b.c.d"
        assert logger.threshold_level == LogLevel.WARNING

    def test_distant_ancestor_used_when_closer_ones_missing(self, factory):
        factory.register_logger(Logger("a", threshold_level=LogLevel.FATAL))

        assert factory.get_logger("a.b.c").threshold_level == LogLevel.FATAL

    def test_sibling_is_not_an_ancestor(self, factory):
        factory.register_logger(Logger("a.bc", threshold_level=LogLevel.FATAL))

        assert factory.get_logger("a.b").threshold_level == factory.root_logger.threshold_level

    def test_resolution_is_cached(self, factory):
        first = factory.get_logger("a.b.c")
        second = factory.get_logger("a.b.c")

        assert first is second
        assert factory.loggers == {"a.b.c": first}

    def test_derived_logger_is_an_ancestor_for_later_lookups(self, factory):
        derived = factory.get_logger("a.b")
        derived.threshold_level = LogLevel.ERROR

        assert factory.get_logger("a.b.c").threshold_level == LogLevel.ERROR

    def test_derived_logger_is_independent_from_its_base(self, factory, console):
        base = Logger("a", threshold_level=LogLevel.WARNING, appenders=[console])
        factory.register_logger(base)

        derived = factory.get_logger("a.b")
        derived.threshold_level = LogLevel.TRACE
        derived.remove_appender(console)

        assert base.threshold_level == LogLevel.WARNING
        assert base.appenders == (console,)

    def test_cached_logger_not_updated_by_later_registration(self, factory):
        derived = factory.get_logger("a.b")
        factory.register_logger(Logger("a", threshold_level=LogLevel.FATAL))

        assert factory.get_logger("a.b") is derived
        assert derived.threshold_level == LogLevel.DEBUG

    def test_every_key_matches_logger_identifier(self, factory):
        factory.register_logger(Logger("a"))
        for identifier in ("a.b", "a.b.c", "z"):
            factory.get_logger(identifier)

        for identifier, logger in factory.loggers.items():
            assert logger.identifier == identifier


class TestResetConfiguration:
    def test_reset_clears_loggers_and_root(self, factory, console):
        factory.root_logger.threshold_level = LogLevel.FATAL
        factory.root_logger.add_appender(console)
        factory.register_logger(Logger("a"))

        factory.reset_configuration()

        assert factory.loggers == {}
        assert factory.root_logger.identifier == ""
        assert factory.root_logger.threshold_level == LogLevel.DEBUG
        assert factory.root_logger.appenders == ()

    def test_reset_invalidates_cached_loggers(self, factory):
        factory.root_logger.threshold_level = LogLevel.ERROR
        stale = factory.get_logger("a.b")

        factory.reset_configuration()
        fresh = factory.get_logger("a.b")

        assert fresh is not stale
        assert fresh.threshold_level == LogLevel.DEBUG

    def test_root_logger_instance_survives_reset(self, factory):
        root = factory.root_logger
        factory.reset_configuration()

        assert factory.root_logger is root


class TestConcurrency:
    def test_concurrent_resolution_yields_one_logger_per_identifier(self, factory):
        factory.register_logger(Logger("svc", threshold_level=LogLevel.WARNING))
        identifiers = [f"svc.worker{i % 8}.task" for i in range(200)]
        results: list[Logger] = []
        results_lock = threading.Lock()
        barrier = threading.Barrier(8)

        def resolve(chunk):
            barrier.wait()
            for identifier in chunk:
                logger = factory.get_logger(identifier)
                with results_lock:
                    results.append(logger)

        threads = [threading.Thread(target=resolve, args=(identifiers[i::8],)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 200
        cached = factory.loggers
        assert len(cached) == 9
        for logger in results:
            assert cached[logger.identifier] is logger
            assert logger.threshold_level == LogLevel.WARNING


class TestDefaultFactory:
    def test_default_factory_is_shared(self):
        assert get_default_factory() is get_default_factory()
        assert get_logger("a.b") is get_default_factory().get_logger("a.b")

    def test_default_factory_can_be_replaced(self):
        custom = LoggerFactory()
        set_default_factory(custom)

        assert get_default_factory() is custom
        assert get_logger("x") is custom.get_logger("x")

    def test_end_to_end_logging_through_derived_logger(self, streams, xterm_terminal):
        console = StdOutAppender("console", terminal=xterm_terminal, stdout=streams.stdout, stderr=streams.stderr)
        factory = get_default_factory()
        factory.register_logger(Logger("app", threshold_level=LogLevel.WARNING, appenders=[console]))

        log = get_logger("app.db.pool")
        log.info("dropped")
        log.warning("slow query")
        log.error("connection lost")

        assert streams.stdout.getvalue() == "slow query\n"
        assert streams.stderr.getvalue() == "connection lost\n"
