"""Click CLI entry point for rztracker."""
from __future__ import annotations

import logging
import sys

import click

from rztracker import __version__
from rztracker.beacon import deliver
from rztracker.boot import bootstrap, load_config
from rztracker.environment import StaticEnvironment
from rztracker.errors import ConfigError
from rztracker.identity import MemorySessionStore
from rztracker.output.terminal import render_beacon, render_not_sent
from rztracker.tracker import track


def _page_options(func):
    """Options describing the page being tracked."""
    func = click.option("--url", "page_url", required=True,
                        help="Address of the page being viewed")(func)
    func = click.option("--title", default=None,
                        help="Page title (omitted from the beacon if not given)")(func)
    func = click.option("--referrer", default=None, help="Document referrer")(func)
    func = click.option("--dnt", default=None,
                        help="Do-not-track value as the browser reports it (1/0/yes/no)")(func)
    func = click.option("--dry-run", is_flag=True,
                        help="Print the beacon URL instead of sending it")(func)
    func = click.option("--verbose", is_flag=True, help="Debug logging")(func)
    return func


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )


def _environment(page_url, title, referrer, dnt) -> StaticEnvironment:
    return StaticEnvironment(
        location=page_url,
        title=title,
        referrer=referrer,
        do_not_track=dnt,
        session_store=MemorySessionStore(),
    )


class _Dispatch:
    """Sends (or, for --dry-run, only renders) the beacon URL."""

    def __init__(self, dry_run: bool):
        self.dry_run = dry_run
        self.urls: list[str] = []

    def __call__(self, url: str) -> None:
        self.urls.append(url)
        if self.dry_run:
            click.echo(url)
            render_beacon(url)
        else:
            # The process is about to exit, so don't leave the GET on a
            # daemon thread.
            deliver(url)


@click.group()
@click.version_option(version=__version__, prog_name="rztracker")
def cli() -> None:
    """rztracker - page-view beacons for a tracking collector."""
    pass


@cli.command("track")
@click.argument("site_id", type=int)
@click.argument("host")
@_page_options
@click.option("--http", "use_http", is_flag=True, help="Send over http instead of https")
@click.option("--no-referrer", is_flag=True, help="Do not send the referrer")
@click.option("--strict", is_flag=True,
              help="Only track when do-not-track is explicitly off")
def track_cmd(site_id: int, host: str, page_url: str, title: str | None,
              referrer: str | None, dnt: str | None, dry_run: bool, verbose: bool,
              use_http: bool, no_referrer: bool, strict: bool) -> None:
    """Send one page-view beacon for SITE_ID to HOST."""
    _setup_logging(verbose)
    options = {
        "useHttps": not use_http,
        "sendReferrer": not no_referrer,
        "strictDoNotTrack": strict,
    }
    dispatch = _Dispatch(dry_run)
    track(site_id, host, options,
          env=_environment(page_url, title, referrer, dnt), sender=dispatch)
    if not dispatch.urls:
        render_not_sent()


@cli.command("bootstrap")
@click.argument("config_path", type=click.Path())
@_page_options
def bootstrap_cmd(config_path: str, page_url: str, title: str | None,
                  referrer: str | None, dnt: str | None, dry_run: bool,
                  verbose: bool) -> None:
    """Track a page view from a {id, host, options} JSON config file."""
    _setup_logging(verbose)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Failed to load config: {e}", err=True)
        sys.exit(2)

    dispatch = _Dispatch(dry_run)
    bootstrap(config, env=_environment(page_url, title, referrer, dnt), sender=dispatch)
    if not dispatch.urls:
        render_not_sent()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
