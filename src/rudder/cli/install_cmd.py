"""
rudder.cli.install_cmd - Install a chart archive.

The install argument must be either a relative path to a chart
directory or the name of a chart in the current working directory.

  rudder install ./nginx
  rudder install ./nginx -f values.toml
  rudder install ./nginx --dry-run
  rudder --verbose install ./nginx --host tiller.internal:44134
"""

import sys
import click

from rudder.errors import RudderError


@click.command("install")
@click.argument("args", metavar="[CHART]", nargs=-1)
@click.option("--host", default="",
              help='Address of the release service (default ":44134")')
@click.option("-f", "--values", "values_file", default="",
              help="Path to a values file")
@click.option("--dry-run", is_flag=True, default=False,
              help="Simulate an install")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Verbose output")
@click.pass_context
def install_cmd(ctx, args, host, values_file, dry_run, verbose):
    """Install a chart archive."""
    from rudder.install import InstallOptions, check_args_length, run_install

    obj = ctx.obj or {}

    try:
        check_args_length(1, args, "chart name")
        options = InstallOptions(
            chart=args[0],
            values_file=values_file,
            dry_run=dry_run,
            verbose=verbose or obj.get("verbose", False),
        )
        installer = obj.get("installer") or _default_installer(host)
        run_install(options, installer)
    except RudderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _default_installer(host):
    from rudder.client import ReleaseClient
    from rudder.config import resolve_host

    return ReleaseClient(resolve_host(host))
