"""Console narration for the demo."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from family_store.models import Family

console = Console()


def print_step(title: str) -> None:
    """Print a rule introducing the next demo step."""
    console.rule(f"[bold cyan]{escape(title)}[/bold cyan]")


def print_line(message: str) -> None:
    console.print(message, markup=False, highlight=False)


def print_family(family: Family, title: str) -> None:
    """Print a family document as highlighted JSON inside a panel."""
    body = Syntax(family.model_dump_json(by_alias=True, indent=2), "json", word_wrap=True)
    console.print(Panel(body, title=escape(title), border_style="bright_blue", padding=(0, 1)))


def print_error(message: str) -> None:
    console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)
