"""Console reporter: filters and approvers -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from rosterfilter.domain.model.enums import ApprovalMode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rosterfilter.domain.model.evaluation_result import EvaluationResult
    from rosterfilter.domain.model.filter_item import FilterItem
    from rosterfilter.domain.model.person import Person

_CATEGORY_STYLES = {
    "relationships": "magenta",
    "groups": "cyan",
    "attributes": "yellow",
    "people": "green",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        color: Emit ANSI styles. False = plain text.
        width: Console width in columns.
        show_ids: Show filter and person ids.
    """

    color: bool = True
    width: int = 120
    show_ids: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def _console(self, output: StringIO) -> Console:
        return Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

    def report_filters(self, filters: Sequence[FilterItem], mode: ApprovalMode = ApprovalMode.ALL) -> str:
        """Format a filter collection as a table.

        Args:
            filters: Filters to render
            mode: Combination mode shown in the header

        Returns:
            Formatted string
        """
        output = StringIO()
        console = self._console(output)

        joiner = "all" if mode is ApprovalMode.ALL else "any"
        console.rule("[bold]FILTERS[/bold]")
        console.print(f"[bold]Filters:[/bold] {len(filters)} (match {joiner})")

        if not filters:
            console.print("[dim]No filters[/dim]")
            return output.getvalue()

        table = Table(show_header=True, header_style="bold", box=None)
        if self._config.show_ids:
            table.add_column("Id", style="dim")
        table.add_column("Category")
        table.add_column("Subject")
        table.add_column("Operator")
        table.add_column("Value")

        for flt in filters:
            style = _CATEGORY_STYLES.get(flt.category.value, "")
            row = [
                f"[{style}]{flt.category.value}[/{style}]" if style else flt.category.value,
                flt.subject,
                flt.operator.value,
                flt.display_value,
            ]
            if self._config.show_ids:
                row.insert(0, flt.id)
            table.add_row(*row)

        console.print(table)
        return output.getvalue()

    def report_people(self, people: Sequence[Person], title: str = "Eligible approvers") -> str:
        """Format a list of people as a table.

        Args:
            people: People to render, in order
            title: Header text

        Returns:
            Formatted string
        """
        output = StringIO()
        console = self._console(output)

        console.rule(f"[bold]{title.upper()}[/bold]")
        console.print(f"[bold]People:[/bold] {len(people)}")

        if not people:
            console.print("[dim]Nobody matches[/dim]")
            return output.getvalue()

        table = Table(show_header=True, header_style="bold", box=None)
        if self._config.show_ids:
            table.add_column("Id", style="dim")
        table.add_column("Name")
        table.add_column("Position")
        table.add_column("Department")
        table.add_column("Team")

        for person in people:
            row = [person.full_name, person.position, person.department, person.team]
            if self._config.show_ids:
                row.insert(0, person.id)
            table.add_row(*row)

        console.print(table)
        return output.getvalue()

    def report_result(self, result: EvaluationResult, filters: Sequence[FilterItem]) -> str:
        """Format an evaluation result with the filters the person failed."""
        output = StringIO()
        console = self._console(output)

        verdict = "[green]PASSES[/green]" if result.passes else "[red]FAILS[/red]"
        console.print(f"[bold]{result.person.full_name}[/bold] {verdict}")

        by_id = {f.id: f for f in filters}
        for filter_id in result.failed_filters:
            flt = by_id.get(filter_id)
            if flt is None:
                console.print(f"  [dim]{filter_id}[/dim]")
                continue
            console.print(f"  [red]x[/red] {flt.subject} {flt.operator.value} {flt.display_value}")

        return output.getvalue()
