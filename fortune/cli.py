"""
Interactive fortune cookie client.

Shows a menu, runs the chosen action once against the server and exits.
"""

import sys
from typing import Callable

import click

from . import client
from .client import RequestFailed
from .client_config import ClientConfig, ConfigError, load_config, DEFAULT_CONFIG_PATH
from .limits import MAX_CONTENT_LENGTH, MAX_AUTHOR_LENGTH

MENU = ("------- Choose -------\n"
        "(1) Open a fortune cookie\n"
        "(2) Make a fortune cookie\n"
        "(3) Show statistics")

InputFn = Callable[[str], str]


def handle_pick(config: ClientConfig, read: InputFn = input) -> None:
    try:
        result = client.pick(config)
    except RequestFailed as e:
        click.echo(e)
        return
    click.echo()
    click.echo(f"\"{result['content']}\"\n  - {result['author']} ({result['creator']})")


def handle_create(config: ClientConfig, read: InputFn = input) -> None:
    content = read("Enter the fortune: ").strip()
    if not 0 < len(content) <= MAX_CONTENT_LENGTH:
        click.echo("The fortune has an invalid length.")
        return

    author = read("Enter the author: ").strip()
    if not 0 < len(author) <= MAX_AUTHOR_LENGTH:
        click.echo("The author has an invalid length.")
        return

    try:
        result = client.create(config, content, author)
    except RequestFailed as e:
        click.echo(e)
        return
    click.echo()
    click.echo("Fortune cookie created!")
    click.echo(f"Total fortune cookies: {result['all_count']}")
    click.echo(f"Fortune cookies made by {config.user.name}: {result['user_count']}")


def handle_stats(config: ClientConfig, read: InputFn = input) -> None:
    try:
        result = client.stats(config)
    except RequestFailed as e:
        click.echo(e)
        return
    click.echo()
    click.echo(f"Total fortune cookies: {result['all_count']}")
    click.echo(f"Fortune cookies made by {config.user.name}: {result['user_count']}")
    click.echo(f"Total visits: {result['all_visits']}")
    click.echo(f"Visits today: {result['today_visits']}")


ACTIONS = {
    1: handle_pick,
    2: handle_create,
    3: handle_stats,
}


def run(config: ClientConfig, read: InputFn = input) -> None:
    """Prompt until a valid choice is made, then run that action once."""
    while True:
        click.echo(MENU)
        try:
            choice = read("").strip()
        except EOFError:
            return
        try:
            action = ACTIONS[int(choice)]
        except (ValueError, KeyError):
            click.echo("Enter 1, 2 or 3.\n")
            continue
        try:
            action(config, read)
        except EOFError:
            pass
        return


@click.command()
@click.argument("config_path", default=DEFAULT_CONFIG_PATH,
                type=click.Path(dir_okay=False))
def main(config_path):
    """
    Open, make or count fortune cookies using the server in CONFIG_PATH.
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(e, err=True)
        sys.exit(1)
    try:
        run(config, input)
    except KeyboardInterrupt:
        click.echo()


if __name__ == "__main__":
    main()  # pylint: disable=no-value-for-parameter
