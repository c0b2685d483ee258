"""User interface components - placeholder and substitution tables."""

from collections.abc import Mapping
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.markup import escape

from photo_vars.constants import CONSOLE_STYLES
from photo_vars.substitution.placeholders import PLACEHOLDERS, NOT_IMPLEMENTED
from photo_vars.substitution.template_engine import STATUS_OK, STATUS_UNKNOWN

console = Console()


STATUS_STYLES = {
    STATUS_OK: CONSOLE_STYLES['success'],
    STATUS_UNKNOWN: CONSOLE_STYLES['error'],
}


def _visible(value: str) -> str:
    """Show control characters such as the NL placeholder's newline."""
    return escape(value.replace("\n", "\\n"))


def display_placeholder_table(registry: Optional[Mapping] = None,
                              title: str = "Placeholders"):
    """Display every placeholder name, with its value when a registry is given."""
    table = Table(title=title)
    table.add_column("Placeholder", style="cyan", no_wrap=True)
    if registry is not None:
        table.add_column("Value", style="green")
    table.add_column("Status", style="yellow")

    for name in PLACEHOLDERS:
        status = "not implemented" if name in NOT_IMPLEMENTED else ""
        if registry is not None:
            table.add_row(f"$({name})", _visible(registry.get(name, "")), status)
        else:
            table.add_row(f"$({name})", status)

    console.print(table)


def display_substitution_preview(preview: dict):
    """Display how each token of a template was resolved."""
    table = Table(title=f"Template: {_visible(preview['template'])}")
    table.add_column("Token", style="cyan", no_wrap=True)
    table.add_column("Placeholder", style="magenta")
    table.add_column("Modifier", style="dim")
    table.add_column("Value", style="green")
    table.add_column("Status")

    for entry in preview['substitutions']:
        style = STATUS_STYLES.get(entry['status'], CONSOLE_STYLES['warning'])
        status = entry['status'] if not entry['reason'] else f"{entry['status']}: {entry['reason']}"
        table.add_row(
            escape(entry['token']),
            entry['canonical'] or "",
            escape(entry['modifier'] or ""),
            _visible(entry['value']),
            f"[{style}]{escape(status)}[/{style}]",
        )

    console.print(table)
    console.print(f"\n[{CONSOLE_STYLES['info']}]Result:[/{CONSOLE_STYLES['info']}] "
                  f"{_visible(preview['result'])}")
