"""Per-unit state shared by the option translators."""

from dataclasses import dataclass, field

from loguru import logger

from vue_declassify.transformer.config import TransformOptions
from vue_declassify.transformer.diagnostics import Diagnostic, DiagnosticSink, report


@dataclass
class TranslationContext:
    """State of one class-to-object translation.

    Import registrations are queued here rather than applied to the source unit
    right away. The assembler applies them once every translator has succeeded,
    so a failed translation leaves the unit untouched.

    Attributes:
        options: Generated code settings
        sink: Where diagnostics go, if anywhere
        imports: Named imports to ensure, keyed by module, in request order
    """

    options: TransformOptions = field(default_factory=TransformOptions)
    sink: DiagnosticSink | None = None
    imports: dict[str, list[str]] = field(default_factory=dict)

    def require_import(self, module: str, name: str) -> None:
        """Queue a named import; repeated requests are collapsed."""
        names = self.imports.setdefault(module, [])
        if name not in names:
            logger.debug(f"Queued import of {name} from '{module}'")
            names.append(name)

    def diagnose(self, diagnostic: Diagnostic) -> None:
        report(self.sink, diagnostic)
