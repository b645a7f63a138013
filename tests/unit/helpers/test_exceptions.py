"""Unit tests for incgraph.helpers.exceptions module."""

import pytest

from incgraph.helpers.exceptions import (
    ConfigError,
    ConfigFileError,
    ConfigValidationError,
    IncGraphError,
)


class TestExceptionHierarchy:
    """Configuration errors share one base so the CLI can catch them together."""

    @pytest.mark.unit
    def test_config_errors_are_incgraph_errors(self) -> None:
        assert issubclass(ConfigError, IncGraphError)
        assert issubclass(ConfigFileError, ConfigError)
        assert issubclass(ConfigValidationError, ConfigError)

    @pytest.mark.unit
    def test_config_file_error_can_be_caught_as_config_error(self) -> None:
        with pytest.raises(ConfigError, match="does not exist"):
            raise ConfigFileError("Config file x.yaml does not exist")
