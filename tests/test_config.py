"""Tests for DispatchConfig and engine construction."""

import pytest

from acceptlib import AcceptEngine, ConfigurationError, DispatchConfig, Phase


class TestDispatchConfig:
    """Configuration defaults, helpers and validation."""

    def test_defaults(self):
        config = DispatchConfig()
        assert config.neutral_context is None
        assert config.use_registry is True
        assert config.validate() == []

    def test_handler_name(self):
        config = DispatchConfig()
        assert config.handler_name(Phase.ENTER, "Box") == "enter_Box"
        assert config.handler_name("exit", "Box") == "exit_Box"

    def test_custom_template(self):
        config = DispatchConfig(handler_template="on_{phase}_{name}")
        assert config.handler_name(Phase.VISIT, "Book") == "on_visit_Book"

    def test_name_for(self):
        class Box:
            pass

        assert DispatchConfig().name_for(Box) == "Box"
        config = DispatchConfig(type_name=lambda klass: "Crate")
        assert config.name_for(Box) == "Crate"

    def test_convention_only(self):
        assert DispatchConfig.convention_only().use_registry is False

    def test_validate_template(self):
        errors = DispatchConfig(handler_template="{phase}").validate()
        assert errors == ["handler_template must contain '{name}'"]
        errors = DispatchConfig(handler_template="handle").validate()
        assert len(errors) == 2

    def test_validate_type_name(self):
        errors = DispatchConfig(type_name="Box").validate()
        assert errors == ["type_name must be callable"]


class TestEngineConstruction:
    """AcceptEngine validates its configuration up front."""

    def test_default_engine(self):
        assert AcceptEngine().config == DispatchConfig()

    def test_invalid_config_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            AcceptEngine(DispatchConfig(handler_template="{name}"))
