"""Rich terminal reporter — credential table and verdict."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sigv4gate.credentials import key_type
from sigv4gate.gate import Decision
from sigv4gate.output.redactor import redact


def render(decision: Decision, *, verbose: bool = False, console: Optional[Console] = None) -> None:
    """Print a decision to the terminal using Rich."""
    console = console or Console(stderr=True)
    cred = decision.credential

    if cred is not None:
        table = Table(show_header=False, border_style="dim", title="SigV4 Credential", title_style="bold")
        table.add_column("Field", style="dim")
        table.add_column("Value")
        table.add_row("Account", f"[cyan]{cred.account_id}[/cyan]")
        table.add_row("Region", escape(cred.region))
        table.add_row("Service", escape(cred.service))
        if verbose:
            table.add_row("Access key", redact(cred.access_key_id))
            table.add_row("Key type", key_type(cred.access_key_id))
            table.add_row("Date", cred.date.isoformat())
        console.print(table)

    if decision.allowed:
        console.print(f"[bold green]✅ ALLOWED[/bold green] [dim]{escape(decision.reason)}[/dim]")
    elif decision.error == "credential":
        console.print(f"[bold red]❌ DENIED — invalid credential:[/bold red] {escape(decision.reason)}")
    elif decision.error == "policy":
        console.print(f"[bold red]❌ DENIED — policy error:[/bold red] {escape(decision.reason)}")
    else:
        console.print(f"[bold red]❌ DENIED[/bold red] [dim]{escape(decision.reason)}[/dim]")
