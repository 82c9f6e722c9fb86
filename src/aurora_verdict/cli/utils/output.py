"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from aurora_verdict.api.core.enums import PhysicsFlag, QualityTier, StrengthCategory


# Create console with unicode detection
# If terminal doesn't support unicode properly, Rich will use ASCII alternatives
console = Console()

# Detect if we can safely use unicode symbols
_use_unicode = console.is_terminal and not console.legacy_windows


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    # U+2139 is widely supported, fall back to a plain "i" elsewhere
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any] | list[Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def format_kp_index(kp: float) -> str:
    """Format Kp index with color based on activity level."""
    match kp:
        case k if k >= 8.0:
            return f"[bold bright_red]{k:.1f}[/bold bright_red] (Severe storm)"
        case k if k >= 7.0:
            return f"[bold red]{k:.1f}[/bold red] (Strong storm)"
        case k if k >= 5.0:
            return f"[bold yellow]{k:.1f}[/bold yellow] (Storm)"
        case k if k >= 4.0:
            return f"[yellow]{k:.1f}[/yellow] (Active)"
        case k if k >= 3.0:
            return f"[cyan]{k:.1f}[/cyan] (Unsettled)"
        case _:
            return f"[dim]{kp:.1f}[/dim] (Quiet)"


def format_quality_tier(tier: QualityTier) -> str:
    """Format a visibility quality tier with color."""
    colors = {
        QualityTier.OVERHEAD: "[bold bright_green]Overhead[/bold bright_green]",
        QualityTier.EXCELLENT: "[bold bright_green]Excellent[/bold bright_green]",
        QualityTier.GOOD: "[bold green]Good[/bold green]",
        QualityTier.FAIR: "[yellow]Fair[/yellow]",
        QualityTier.POOR: "[dim yellow]Poor[/dim yellow]",
        QualityTier.NONE: "[dim]None[/dim]",
    }
    return colors.get(tier, tier.value)


def format_category(category: StrengthCategory) -> str:
    """Format a strength category with color."""
    styles = {
        StrengthCategory.EXTREME: "bold bright_red",
        StrengthCategory.MAJOR: "bold red",
        StrengthCategory.STRONG: "bold yellow",
        StrengthCategory.MODERATE: "bold green",
        StrengthCategory.MINOR: "cyan",
        StrengthCategory.WEAK: "dim cyan",
        StrengthCategory.NONE: "dim",
    }
    style = styles.get(category, "white")
    return f"[{style}]{category.value}[/{style}]"


def format_physics_flag(flag: PhysicsFlag) -> str:
    """Format a physics flag, highlighting anything other than valid."""
    match flag:
        case PhysicsFlag.VALID:
            return "[green]valid[/green]"
        case PhysicsFlag.IMPOSSIBLE:
            return "[bold red]impossible[/bold red]"
        case _:
            return f"[yellow]{flag.value}[/yellow]"


def key_value_table(title: str, rows: list[tuple[str, str]]) -> Table:
    """Build a two-column setting/value table."""
    table = Table(
        title=f"[bold]{title}[/bold]",
        show_header=True,
        header_style="bold magenta",
        expand=False,
    )
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for name, value in rows:
        table.add_row(name, value)
    return table
