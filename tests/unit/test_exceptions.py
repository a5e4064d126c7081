"""Tests for custom exceptions."""

import pytest

from primkit.core.exceptions import ConfigurationError, PrimkitError, TemplateArgumentError


def test_configuration_error_is_primkit_error():
    """ConfigurationError should inherit from PrimkitError."""
    error = ConfigurationError("bad settings")
    assert isinstance(error, PrimkitError)
    assert str(error) == "bad settings"
    assert error.path is None


def test_configuration_error_includes_path():
    error = ConfigurationError("bad settings", path="primkit.yaml")
    assert error.path == "primkit.yaml"
    assert str(error) == "bad settings (primkit.yaml)"


def test_template_argument_error_is_type_error():
    """TemplateArgumentError can be caught as TypeError or PrimkitError."""
    with pytest.raises(TypeError):
        raise TemplateArgumentError("mixed")
    with pytest.raises(PrimkitError):
        raise TemplateArgumentError("mixed")
