"""Tests for dateserial package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_dateserial() -> None:
    """Import dateserial package succeeds."""
    import dateserial

    assert dateserial.__version__ == "0.1.0"


def test_import_subpackages() -> None:
    """Every subpackage declares __all__."""
    from dateserial import _internal, arithmetic, config, convert, parse
    from dateserial import format  # noqa: A004

    for module in (_internal, arithmetic, config, convert, format, parse):
        assert hasattr(module, "__all__")


def test_public_api_is_exported() -> None:
    """Everything in __all__ is reachable from the package root."""
    import dateserial

    for name in dateserial.__all__:
        assert hasattr(dateserial, name), name


def test_error_hierarchy() -> None:
    """Exceptions share a base and ParseError is a ValueError."""
    from dateserial import DateSerialError, FormatError, ParseError, PatternError

    assert issubclass(ParseError, DateSerialError)
    assert issubclass(ParseError, ValueError)
    assert issubclass(FormatError, ParseError)
    assert issubclass(PatternError, DateSerialError)
    assert issubclass(PatternError, ValueError)
    assert not issubclass(PatternError, ParseError)
