"""Fixtures and configuration for pytest."""

import re

import pytest

from vue_declassify.transformer.models import (
    Block,
    ClassDeclaration,
    ComputedPair,
    SetAccessor,
    Statement,
    VueClass,
)

_CLASS = re.compile(r"@Component[\s\S]*?class\s+(?P<name>\w+)[\s\S]*\}")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: mark test as a whole-file conversion test")


def regex_extract(source):
    """Find a bare class component by pattern.

    Only good for empty classes. A class whose body mentions ``BROKEN`` gets a
    setter without a getter, so its translation fails.
    """
    match = _CLASS.search(source.get_full_text())
    if match is None:
        return None

    vue = VueClass(
        declaration=ClassDeclaration(
            name=match.group("name"),
            start=match.start(),
            end=match.end(),
            source_file=source.path,
        )
    )
    if "BROKEN" in match.group(0):
        vue.computed["broken"] = ComputedPair(
            setter=SetAccessor(body=Block([Statement("this.x = 1")]))
        )
    return vue


@pytest.fixture
def extractor():
    """Fixture providing a pattern based extractor for empty class components."""
    return regex_extract
