"""CLI commands for Nederlandse Gids."""

import asyncio
import logging

import click

from . import __version__
from .app import ArticleNotFoundError, BlogPlatform
from .config import ConfigError, Settings
from .render import render_detail, render_detail_html, render_home, render_sidebar
from .router import Screen
from .store import SupabaseStore

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Nederlandse Gids - browse articles from the command line."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _mount_platform(ctx: click.Context) -> BlogPlatform:
    """Build the platform from the environment and load its collections."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        click.echo(click.style(f"Error: {e}", fg="red"))
        raise SystemExit(1)

    verbose = (ctx.obj or {}).get("verbose", False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format=LOG_FORMAT,
    )

    store = SupabaseStore(
        settings.supabase_url,
        settings.supabase_key,
        timeout=settings.fetch_timeout,
    )
    platform = BlogPlatform(store)
    asyncio.run(platform.mount())
    return platform


@cli.command()
@click.pass_context
def articles(ctx: click.Context):
    """List articles, newest first."""
    platform = _mount_platform(ctx)
    try:
        click.echo(render_home(platform.articles.snapshot()))
    finally:
        platform.unmount()


@cli.command()
@click.pass_context
def categories(ctx: click.Context):
    """List categories and their subcategories."""
    platform = _mount_platform(ctx)
    try:
        click.echo(render_sidebar(platform.categories.snapshot()))
    finally:
        platform.unmount()


@cli.command()
@click.argument("article_id")
@click.option("--html", "as_html", is_flag=True, help="Print the article as an HTML fragment")
@click.pass_context
def read(ctx: click.Context, article_id: str, as_html: bool):
    """Show a single article."""
    platform = _mount_platform(ctx)
    try:
        try:
            article = platform.open_article(article_id)
        except ArticleNotFoundError as e:
            click.echo(click.style(f"Error: {e}", fg="red"))
            raise SystemExit(1)

        if as_html:
            click.echo(render_detail_html(article))
        else:
            click.echo(render_detail(article))
    finally:
        platform.unmount()


@cli.command()
@click.pass_context
def browse(ctx: click.Context):
    """Browse articles interactively.

    Enter a card number to read it, b to go back, m to toggle the menu,
    t to toggle the theme and q to quit.
    """
    platform = _mount_platform(ctx)
    try:
        while True:
            _echo_page(platform)
            choice = click.prompt(
                "Keuze (nummer, b=terug, m=menu, t=thema, q=stop)",
                default="q",
                show_default=False,
            ).strip().lower()

            if choice == "q":
                break
            elif choice == "b":
                platform.click_back()
            elif choice == "m":
                platform.click_menu()
            elif choice == "t":
                platform.click_theme()
            elif choice.isdigit() and platform.router.screen is Screen.HOME:
                _open_card(platform, int(choice))
            else:
                click.echo(click.style(f"Unknown choice '{choice}'", fg="yellow"))
    finally:
        platform.unmount()


def _open_card(platform: BlogPlatform, number: int) -> None:
    """Open the card shown with the given number on the home screen."""
    cards = platform.articles.snapshot()
    if not 1 <= number <= len(cards):
        click.echo(click.style(f"No article with number {number}", fg="yellow"))
        return

    platform.click_card(cards[number - 1])


def _echo_page(platform: BlogPlatform) -> None:
    """Print the current page in the active theme."""
    click.echo()
    if platform.shell.is_dark:
        click.secho(platform.render(), fg="white", bg="black")
    else:
        click.echo(platform.render())


if __name__ == "__main__":
    cli()
