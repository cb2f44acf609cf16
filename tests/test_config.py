"""Tests for ContextVar-based scan configuration."""

from threading import Thread

import pytest

from tagscan import (
    ScanConfig,
    Scanner,
    TokenType,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.entity_expander is None
        assert config.declaration_keyword == "DOCTYPE"
        assert config.preformatted_tag == "PRE"
        assert config.raw_text_tags == frozenset({"SCRIPT", "STYLE"})
        assert config.layout_markers == frozenset({"BR", "HR"})
        assert config.pushback_capacity == 4
        assert config.strict is False

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_small_pushback_capacity_rejected(self) -> None:
        with pytest.raises(ValueError, match="pushback_capacity"):
            ScanConfig(pushback_capacity=1)


class TestFromDict:
    """Building config from plain dictionaries."""

    def test_known_keys(self) -> None:
        config = ScanConfig.from_dict({"strict": True, "pushback_capacity": 8})
        assert config.strict is True
        assert config.pushback_capacity == 8

    def test_unknown_keys_ignored(self) -> None:
        config = ScanConfig.from_dict({"nonsense": 1})
        assert config == ScanConfig()

    def test_tag_names_normalized(self) -> None:
        config = ScanConfig.from_dict(
            {"raw_text_tags": ["script", "xmp"], "preformatted_tag": "listing"}
        )
        assert config.raw_text_tags == frozenset({"SCRIPT", "XMP"})
        assert config.preformatted_tag == "LISTING"


class TestContextVarFunctions:
    """get/set/reset and the context manager."""

    def setup_method(self) -> None:
        reset_scan_config()

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_default(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_reset(self) -> None:
        set_scan_config(ScanConfig(strict=True))
        assert get_scan_config().strict is True
        reset_scan_config()
        assert get_scan_config().strict is False

    def test_context_manager_restores(self) -> None:
        with scan_config_context(ScanConfig(strict=True)):
            assert get_scan_config().strict is True
        assert get_scan_config().strict is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_scan_config().strict is False

    def test_thread_isolation(self) -> None:
        seen: list[bool] = []

        def worker() -> None:
            seen.append(get_scan_config().strict)

        with scan_config_context(ScanConfig(strict=True)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()
        assert seen == [False]


class TestSessionSnapshot:
    """A scanner keeps the config active when it was built."""

    def test_config_captured_at_construction(self) -> None:
        with scan_config_context(ScanConfig(entity_expander=str.upper)):
            scanner = Scanner(b"abc")
        token = scanner.next_raw()
        assert token.type is TokenType.TEXT
        assert token.value == "ABC"

    def test_explicit_config_wins(self) -> None:
        with scan_config_context(ScanConfig(entity_expander=str.upper)):
            scanner = Scanner(b"abc", config=ScanConfig())
        assert scanner.next_raw().value == "abc"

    def test_pushback_capacity_applied(self) -> None:
        scanner = Scanner(b"", config=ScanConfig(pushback_capacity=6))
        assert scanner._source.pushback_capacity == 6
