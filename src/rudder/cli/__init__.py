"""
rudder.cli - CLI entry point.

Commands:
  rudder install [CHART] [flags]   - Install a chart via the release service
"""

import logging

import click

from rudder.cli.install_cmd import install_cmd


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(package_name="rudder")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Verbose output")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help="Enable logging at this level")
@click.pass_context
def main(ctx, verbose, log_level):
    """rudder - install charts through a release service."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if log_level:
        logging.basicConfig(level=log_level.upper())
        logging.getLogger("rudder").setLevel(log_level.upper())


main.add_command(install_cmd, "install")
