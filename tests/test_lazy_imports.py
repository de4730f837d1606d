"""Tests for vetted.__init__ — lazy attribute access covers all public names."""

import pytest

import vetted


@pytest.mark.parametrize("name", vetted.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(vetted, name)
    assert obj is not None, f"vetted.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        vetted.__getattr__("ThisDoesNotExist")
