"""Tests for settings resolution and adapter selection."""

import logging
import textwrap

import pytest

from contextforge.adapters import BaseAdapter
from contextforge.config import Settings, configure, get_settings, import_string
from contextforge.contexts import CreateContext
from contextforge.errors import ConfigurationError
from conftest import FakeFailureAdapter, FakeSuccessAdapter, make_context_class, make_policy


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("CONTEXTFORGE_ORM", raising=False)
    monkeypatch.delenv("CONTEXTFORGE_LOG_LEVEL", raising=False)


class TestImportString:
    def test_colon_form(self):
        assert import_string("contextforge.adapters.base:BaseAdapter") is BaseAdapter

    def test_dotted_form(self):
        assert import_string("contextforge.adapters.base.BaseAdapter") is BaseAdapter

    def test_missing_module(self):
        with pytest.raises(ConfigurationError, match="Cannot import"):
            import_string("contextforge.nope:Thing")

    def test_missing_attribute(self):
        with pytest.raises(ConfigurationError, match="no attribute"):
            import_string("contextforge.adapters.base:Nope")

    def test_invalid_path(self):
        with pytest.raises(ConfigurationError, match="Invalid import path"):
            import_string("nodots")


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings.load()
        assert settings.orm is None
        assert settings.log_level == "WARNING"

    def test_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("CONTEXTFORGE_ORM", "contextforge.adapters.base:BaseAdapter")
        monkeypatch.setenv("CONTEXTFORGE_LOG_LEVEL", "DEBUG")
        settings = Settings.from_env()
        assert settings.orm == "contextforge.adapters.base:BaseAdapter"
        assert settings.log_level == "DEBUG"

    def test_from_file(self, clean_env, tmp_path):
        path = tmp_path / "contextforge.yaml"
        path.write_text(textwrap.dedent("""\
            orm: myapp.adapters:SQLAdapter
            log_level: INFO
        """))
        settings = Settings.from_file(path)
        assert settings.orm == "myapp.adapters:SQLAdapter"
        assert settings.log_level == "INFO"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "contextforge.yaml"
        path.write_text("")
        assert Settings.from_file(path) == Settings()

    def test_unknown_keys_rejected(self, tmp_path):
        path = tmp_path / "contextforge.yaml"
        path.write_text("orm: a.b:C\ncolour: blue\n")
        with pytest.raises(ConfigurationError, match="colour"):
            Settings.from_file(path)

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "contextforge.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            Settings.from_file(path)

    def test_env_overrides_file(self, clean_env, monkeypatch, tmp_path):
        path = tmp_path / "contextforge.yaml"
        path.write_text("orm: from.file:Adapter\nlog_level: INFO\n")
        monkeypatch.setenv("CONTEXTFORGE_ORM", "from.env:Adapter")
        settings = Settings.load(path)
        assert settings.orm == "from.env:Adapter"
        assert settings.log_level == "INFO"

    def test_adapter_requires_orm(self):
        with pytest.raises(ConfigurationError, match="No model adapter configured"):
            Settings().adapter()

    def test_adapter_resolves_orm(self):
        assert Settings(orm="contextforge.adapters.base:BaseAdapter").adapter() is BaseAdapter


class TestConfigure:
    def test_configure_overrides_and_caches(self, clean_env):
        settings = configure(orm="contextforge.adapters.base:BaseAdapter")
        assert get_settings() is settings
        assert settings.orm == "contextforge.adapters.base:BaseAdapter"

    def test_configure_sets_package_log_level(self, clean_env):
        package_logger = logging.getLogger("contextforge")
        previous = package_logger.level
        try:
            configure(log_level="debug")
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)


class TestAdapterSelection:
    def test_constructor_adapter_wins(self):
        context_class = make_context_class(CreateContext, make_policy())
        assert context_class(adapter=FakeFailureAdapter).adapter is FakeFailureAdapter

    def test_class_adapter_used_next(self):
        context_class = make_context_class(CreateContext, make_policy())
        assert context_class().adapter is FakeSuccessAdapter

    def test_settings_adapter_is_the_fallback(self, clean_env):
        configure(orm="conftest:FakeFailureAdapter")
        context_class = make_context_class(CreateContext, make_policy(), adapter=None)
        assert context_class().adapter is FakeFailureAdapter

    def test_no_adapter_anywhere_raises(self, clean_env):
        context_class = make_context_class(CreateContext, make_policy(), adapter=None)
        with pytest.raises(ConfigurationError, match="No model adapter configured"):
            context_class().create(params={})
