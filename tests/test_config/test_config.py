"""Tests for ScopeConfig."""

import pytest

from localscope.config import ScopeConfig


class TestScopeConfig:
    def test_defaults(self):
        config = ScopeConfig()
        assert config.mode == "local"
        assert config.default_mode == "local"
        assert config.pure is False
        assert config.generate_scoped_name is None

    def test_pure_defaults_to_local(self):
        config = ScopeConfig(mode="pure")
        assert config.default_mode == "local"
        assert config.pure is True

    def test_global(self):
        assert ScopeConfig(mode="global").default_mode == "global"

    def test_invalid_mode(self):
        with pytest.raises(ValueError, match="Invalid mode"):
            ScopeConfig(mode="scoped")

    def test_frozen(self):
        config = ScopeConfig()
        with pytest.raises(AttributeError):
            config.mode = "global"  # type: ignore[misc]

    def test_from_options(self):
        def generate(name, path, css):
            return name

        config = ScopeConfig.from_options(
            {"mode": "global", "generateScopedName": generate, "from": "a.css"}
        )
        assert config.mode == "global"
        assert config.generate_scoped_name is generate
        assert config.from_path == "a.css"

    def test_from_no_options(self):
        assert ScopeConfig.from_options() == ScopeConfig()
