import os
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.syntax import Syntax

from panelkit.logger import get_logger, setup_logger
from panelkit.presentation.environment import SoupEnvironment
from panelkit.presentation.template import Template
from panelkit.presentation.widgets import Panel

load_dotenv()

DEMO_DOCUMENT = '<html><head></head><body><div id="app"></div></body></html>'

cli = typer.Typer(
    name="panelkit",
    help="Render panelkit components and templates to HTML",
    epilog="""
    Examples:
    $ panelkit demo --title Layers --mask "Loading layers..."
    $ panelkit template '<h3>{title}</h3>' title=Layers
    """,
    add_completion=False,
)

console = Console()


def _configure_logging(debug: bool) -> None:
    level = "DEBUG" if debug else os.getenv("PANELKIT_LOG_LEVEL", "WARNING")
    setup_logger(log_level=level, console_output=True)


def _print_html(markup: str, plain: bool) -> None:
    if plain:
        typer.echo(markup)
    else:
        console.print(Syntax(markup, "html", word_wrap=True))


@cli.command()
def demo(
    title: str = typer.Option("Panel", "--title", "-t", help="Panel title"),
    collapsed: bool = typer.Option(False, "--collapsed", help="Collapse the panel after rendering"),
    mask: Optional[str] = typer.Option(None, "--mask", "-m", help="Mask the panel body with this message"),
    plain: bool = typer.Option(False, "--plain", help="Print raw HTML without highlighting"),
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"),
):
    """Render a demo panel into an empty page and print the page."""
    _configure_logging(debug)
    logger = get_logger("main")

    environment = SoupEnvironment(DEMO_DOCUMENT)
    panel = Panel.create(
        environment,
        title=title,
        container_selector="#app",
        auto_render=True,
        events={
            "render": lambda component, node, container: logger.info(f"Rendered {component.config.title!r}"),
        },
    )

    if collapsed:
        panel.collapse()
    if mask is not None:
        panel.mask(mask)

    _print_html(environment.to_html(), plain)


@cli.command()
def template(
    text: str = typer.Argument(..., help="Template text with {name} placeholders"),
    values: Optional[list[str]] = typer.Argument(None, help="Placeholder values as name=value"),
    plain: bool = typer.Option(False, "--plain", help="Print the result without highlighting"),
):
    """Render a template against name=value pairs."""
    _configure_logging(False)

    source: dict[str, str] = {}
    for pair in values or []:
        name, sep, value = pair.partition("=")
        if not sep:
            raise typer.BadParameter(f"Expected name=value, got {pair!r}", param_hint="VALUES")
        source[name] = value

    _print_html(Template(text).render(source), plain)


if __name__ == "__main__":
    cli()
