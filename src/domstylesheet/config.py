from __future__ import annotations

from dataclasses import dataclass

from domstylesheet.pseudo import PseudoClassTable


@dataclass(frozen=True)
class CompilerConfig:
    unit: str = "px"  # appended to every numeric value
    extra_pseudo_classes: tuple[tuple[str, str], ...] = ()  # e.g. (("placeholder", "::placeholder"),)
    variant_separator: str = "--"

    def pseudo_classes(self) -> PseudoClassTable:
        """Return the default pseudo-class table plus any extra entries."""
        table = PseudoClassTable()
        if self.extra_pseudo_classes:
            table = table.extend(dict(self.extra_pseudo_classes))
        return table
