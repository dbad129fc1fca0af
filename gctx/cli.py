import sys
from typing import Tuple

import click

from gctx import __version__
from gctx.config import Settings
from gctx.engine import ContextSwitcher
from gctx.exceptions import GctxError
from gctx.logger import setup_logger
from gctx.output import print_current, print_profiles, success
from gctx.storage.context_storage import PreviousContextStorage
from gctx.storage.profile_store import GcloudProfileStore
from gctx.utils.utils import is_rename, parse_rename

settings = Settings.from_env()
store = GcloudProfileStore(settings.gcloud_config_dir, settings.gcloud_bin)
tracker = PreviousContextStorage(settings.previous_file)

USAGE = """\b
USAGE:
  gctx                    : list the profiles
  gctx <NAME>             : switch to profile <NAME>
  gctx -                  : switch to the previous profile
  gctx -c, --current      : show the current profile name
  gctx <NEW>=<OLD>        : rename profile <OLD> to <NEW>
  gctx <NEW>=.            : rename the current profile
  gctx -f <NEW>=<OLD>     : rename, overwriting an existing <NEW> (destructive)
  gctx -d <NAME>          : delete profile <NAME> ('.' for the current one)
  gctx -h, --help         : show this message
"""


def _fail(error: GctxError):
    click.secho(f"error: {error}", fg="red", err=True)
    sys.exit(1)


@click.command(help="Switch between gcloud configurations.\n\n" + USAGE,
               context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("args", nargs=-1)
@click.option("-d", "--delete", "delete_name", metavar="NAME", help="Delete a profile ('.' for the current one)")
@click.option("-f", "--force", is_flag=True, help="Rename over an existing profile, deleting its settings")
@click.option("-c", "--current", is_flag=True, help="Print the current profile name")
@click.option("-v", "--verbose", count=True, help="Log more (repeat for debug output)")
@click.version_option(__version__, prog_name="gctx")
def cli(args: Tuple[str, ...], delete_name, force, current, verbose):
    setup_logger(verbose)
    switcher = ContextSwitcher(store, tracker)

    if len(args) > 1:
        raise click.UsageError("too many arguments")
    token = args[0] if args else None

    if current and (token or delete_name is not None or force):
        raise click.UsageError("--current takes no other arguments")
    if delete_name is not None and (token or force):
        raise click.UsageError("--delete takes only a profile name")
    if force and not (token and is_rename(token)):
        raise click.UsageError("--force requires <NEW>=<OLD>")

    try:
        if current:
            print_current(switcher.state().active)
        elif delete_name is not None:
            deleted = switcher.delete(delete_name)
            success(f'Deleted profile "{deleted}".')
        elif token is None:
            print_profiles(switcher.list_profiles(), switcher.state().active)
        elif token == "-":
            state = switcher.swap()
            success(f'Switched to profile "{state.active}".')
        elif is_rename(token):
            try:
                old, new = parse_rename(token)
            except ValueError as e:
                raise click.UsageError(str(e))
            old = switcher.resolve(old)
            switcher.rename(old, new, force=force)
            success(f'Profile "{old}" renamed to "{new}".')
        else:
            state = switcher.switch(token)
            success(f'Switched to profile "{state.active}".')
    except GctxError as e:
        _fail(e)


if __name__ == '__main__':
    cli()
