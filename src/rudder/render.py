"""rudder.render - Print a release for the user."""

from __future__ import annotations

from typing import Callable

import click

from rudder.release import Release, format_timestamp


def release_lines(rel: Release, verbose: bool = False) -> list[str]:
    if not verbose:
        return [rel.name]
    return [
        f"NAME:   {rel.name}",
        f"INFO:   {format_timestamp(rel.info.last_deployed)} {rel.info.status.value}",
        f"CHART:  {rel.chart.name} {rel.chart.version}",
        f"MANIFEST: {rel.manifest}",
    ]


def print_release(
    rel: Release | None,
    verbose: bool = False,
    echo: Callable[[str], None] | None = None,
) -> None:
    """Print a release. Nothing is printed when there is no release.

    The verbose layout (NAME / INFO / CHART / MANIFEST) is scraped by
    scripts; keep labels and order stable.
    """
    if rel is None:
        return
    echo = echo or click.echo
    for line in release_lines(rel, verbose):
        echo(line)
