"""Interfaces of the collaborators the transformer consumes.

The transformer does not read TypeScript itself. An extractor turns a source
unit into a ``VueClass`` model, and an import registrar edits import
statements.
"""

from typing import TYPE_CHECKING, Protocol

from vue_declassify.transformer.models import VueClass

if TYPE_CHECKING:
    from vue_declassify.source import SourceUnit


class Extractor(Protocol):
    """Finds the class component in a source unit."""

    def __call__(self, source: "SourceUnit") -> VueClass | None:
        """Extract the component model.

        Args:
            source: Source unit to scan

        Returns:
            The model, or None if the unit holds no class component
        """
        ...


class ImportRegistrar(Protocol):
    """Ensures named imports exist in a source unit."""

    def __call__(self, source: "SourceUnit", module: str, named: list[str]) -> None:
        """Import ``named`` from ``module`` unless already imported.

        Args:
            source: Source unit to edit
            module: Module specifier, e.g. ``vue``
            named: Names to import
        """
        ...
