"""Color palette and named styles for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass(frozen=True)
class Theme:
    """Sky blue and sunset orange, the colors of a cheap evening flight."""

    primary: str = "#4FC3F7"
    tertiary: str = "#26A69A"
    accent: str = "#00CED1"

    success: str = "#00E676"
    error: str = "#FF5252"
    warning: str = "#FFB347"

    text: str = "#E8E8E8"
    muted: str = "#888888"
    dim: str = "#555555"
    highlight: str = "#FFFFFF"

    # Logo rows cycle through these, top to bottom
    logo_gradient: tuple[str, ...] = ("#4FC3F7", "#26A69A", "#FF8C42")

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        styles = {
            "primary": Style(color=self.primary),
            "primary.bold": Style(color=self.primary, bold=True),
            "tertiary": Style(color=self.tertiary),
            "accent": Style(color=self.accent),

            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),

            "text": Style(color=self.text),
            "muted": Style(color=self.muted),
            "dim": Style(color=self.dim),
            "highlight": Style(color=self.highlight, bold=True),

            # Commands, links and result tables
            "command": Style(color=self.primary, bold=True),
            "url": Style(color=self.accent, underline=True),
            "table.header": Style(color=self.accent, bold=True),
            "table.footer": Style(color=self.dim),
        }
        for i, color in enumerate(self.logo_gradient, start=1):
            styles[f"logo.{i}"] = Style(color=color, bold=True)
        return RichTheme(styles)

    @property
    def logo_styles(self) -> list[str]:
        return [f"logo.{i}" for i in range(1, len(self.logo_gradient) + 1)]


_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
