# ossrh_release/cli/output.py
"""Output formatting utilities"""

from rich.markup import escape
from rich.panel import Panel

from ..api.exceptions import ReleaseError, CloseTimeoutError
from ..constants import USAGE, EMOJI_SUCCESS, EMOJI_ERROR
from ..models import OperationResult
from ..utils.output import console

TASK_TITLES = {
    "gpg": "Checksum and gpg sign",
    "upload": "Nexus: Staging",
    "promote": "Nexus: Promote",
}

LINK_LABELS = {
    "upload": "Below is the staging repository url, you could use it to test deployment.",
    "promote": "Below is the public repository url, you could manually validate it.",
}


def print_usage(message: str = None) -> None:
    """Print usage guidance, optionally preceded by an error"""
    if message:
        console.print(f"[red]{escape(message)}[/red]")
    console.print(escape(USAGE))


def format_result(result: OperationResult) -> None:
    """Format and display a task result"""
    title = TASK_TITLES.get(result.task, result.task)

    if result.is_success:
        lines = [f"[green]{EMOJI_SUCCESS}[/green] {escape(result.message)}"]
        if result.repository_id:
            lines.append("")
            lines.append(f"[bold]Staging repository:[/bold] {result.repository_id}")
        if result.links:
            lines.append("")
            lines.append(LINK_LABELS.get(result.task, "Links:"))
            lines.extend(f"  {escape(link)}" for link in result.links)
        if result.duration is not None:
            lines.append("")
            lines.append(f"[dim]Finished in {result.duration:.1f}s[/dim]")

        console.print(Panel("\n".join(lines), title=escape(f"[Success] {title}"), border_style="green"))
        return

    console.print(Panel(
        "\n".join(_failure_lines(result)),
        title=f"[bold red]{escape(f'[Failure] {title}')}[/bold red]",
        border_style="red",
    ))


def _failure_lines(result: OperationResult):
    error = result.error
    lines = [f"[red]{EMOJI_ERROR} {escape(result.message)}[/red]"]

    if result.repository_id:
        lines.append(f"[bold]Staging repository:[/bold] {result.repository_id}")

    if isinstance(error, CloseTimeoutError):
        lines.append("")
        lines.append("See failure messages:")
        if error.failure_messages:
            lines.append(escape("\n\n".join(error.failure_messages)))
        else:
            lines.append("[dim](no failure messages reported)[/dim]")
        return lines

    if isinstance(error, ReleaseError):
        if error.command:
            lines.append("")
            lines.append("[bold]Command:[/bold]")
            lines.append(escape(error.command))
        if error.response:
            lines.append("")
            lines.append("[bold]Response:[/bold]")
            lines.append(escape(error.response.strip()))
        if error.error_code:
            lines.append("")
            lines.append(f"[dim]Error code: {error.error_code}[/dim]")
    return lines
