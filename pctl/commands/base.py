"""
Base class for a Rich-enhanced Click command.

This module defines:
- `rich_help`: builds colorized help text listing commands or arguments.
- `RichCommand`: a Click command that renders its help inside a Rich panel
  followed by its options.
"""

from rich.markup import escape
from rich.panel import Panel
import click
from pctl.config.settings import console
from pctl.lib.log import LOG


def rich_help(description: str, usage: str, args: dict[str, str], heading: str = "Arguments") -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :param heading: Title of the argument listing.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{description}[/bold cyan]\n\n"
    help_text += f"[bold yellow]Usage:[/bold yellow]\n    [green]{escape(usage)}[/green]\n\n"
    help_text += f"[bold yellow]{heading}:[/bold yellow]\n"
    width: int = max((len(arg) for arg in args), default=0)
    for arg, desc in args.items():
        padding: str = " " * (width - len(arg))
        help_text += f"    [green]{escape(arg)}[/green]{padding}  {escape(desc)}\n"
    return help_text


class RichCommand(click.Command):
    """
    A Click Command that uses Rich for rendering help messages.

    Methods:
        format_help(ctx, formatter): Renders the help panel and option list.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the help message for the command using Rich.

        :param ctx: The Click context for the command.
        :param formatter: The Click help formatter.
        """
        try:
            help_text = self.help or "No help text available."
            panel = Panel(help_text.rstrip(), expand=False, border_style="cyan")
            console.print(panel)

            params = self.get_params(ctx)
            options = [param for param in params if isinstance(param, click.Option)]
            if options:
                console.print("[bold yellow]Options:[/bold yellow]")
                for option in options:
                    console.print(
                        f"  [cyan]{', '.join(option.opts)}[/cyan]: "
                        f"{option.help or 'No description'}",
                        highlight=False,
                    )
        except Exception as e:
            # Log and notify the user of any help rendering errors
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")
