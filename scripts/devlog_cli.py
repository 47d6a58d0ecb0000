#!/usr/bin/env python3
"""
Devlog CLI - track daily development work.

Usage:
    devlog_cli.py init [-y]
    devlog_cli.py edit [-y]
    devlog_cli.py rollover [-y]
    devlog_cli.py status [--show all|todo|started|blocked|done] [--back N]
    devlog_cli.py tail [--limit N]

Devlog files are created in the directory at $DEVLOG_REPO, which defaults to
$HOME/devlogs if not set. `edit` uses the editor program $DEVLOG_EDITOR,
which defaults to nano if not set.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add lib directory to path for imports
_SCRIPT_DIR = Path(__file__).parent.resolve()
if str(_SCRIPT_DIR / "lib") not in sys.path:
    sys.path.insert(0, str(_SCRIPT_DIR / "lib"))

from devlog import __version__
from devlog.config import Config
from devlog.editor import open_log
from devlog.errors import DevlogError, InvalidArgumentError
from devlog.hooks import HookType, execute_hook, init_hooks
from devlog.repository import LogRepository
from devlog.rollover import rollover
from devlog.status import SHOW_CHOICES, collect, parse_show

TAIL_SEPARATOR = "\n~~~~~~~~~~~~~~~~~~~~~~\n"


def prompt_confirm(msg: str, assume_yes: bool) -> bool:
    """Ask a yes/no question on stdin; -y/--yes answers yes."""
    if assume_yes:
        return True
    try:
        answer = input(f"{msg} [y/n] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def parse_int_arg(name: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{name} must be an integer") from None
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}")
    return value


def _load_repo() -> tuple[Config, LogRepository]:
    config = Config.load()
    return config, LogRepository(config.repo_dir)


def _not_initialized(repo: LogRepository) -> int:
    print(
        f"Repository at {repo.path} has not been initialized.\n"
        "Please run `devlog init` to initialize the repository."
    )
    return 1


def initialize_if_necessary(repo: LogRepository, assume_yes: bool) -> bool | None:
    """
    Initialize the repository after confirmation.

    Returns:
        True if created, False if it already existed, None if the user declined
    """
    if repo.initialized():
        return False
    if not prompt_confirm(f"Initialize devlog repository at {repo.path}?", assume_yes):
        return None
    repo.init()
    init_hooks(repo.path)
    return True


def cmd_init(args) -> int:
    _, repo = _load_repo()
    created = initialize_if_necessary(repo, args.yes)
    if created is None:
        return 0
    if created:
        print("Success!  Now you can open your devlog using `devlog edit`")
    else:
        print(f"Devlog repository already exists at {repo.path}")
    return 0


def cmd_edit(args) -> int:
    config, repo = _load_repo()
    if initialize_if_necessary(repo, args.yes) is None:
        return 0

    logpath = repo.latest()
    if logpath is None:
        # The user already confirmed initialization, so make sure a log exists.
        logpath = repo.init()

    open_log(config, logpath.path)
    return 0


def cmd_rollover(args) -> int:
    config, repo = _load_repo()
    if not repo.initialized():
        return _not_initialized(repo)

    logpath = repo.latest()
    if logpath is None:
        print("Could not find devlog file to rollover")
        return 1

    if not prompt_confirm("Rollover incomplete tasks?", args.yes):
        return 0

    execute_hook(config.repo_dir, HookType.BEFORE_ROLLOVER, logpath.path)
    new_logpath, count = rollover(repo, logpath)
    execute_hook(config.repo_dir, HookType.AFTER_ROLLOVER, logpath.path, new_logpath.path)

    print(f"Imported {count} tasks into {new_logpath.path}")
    return 0


def cmd_status(args) -> int:
    back = parse_int_arg("back", args.back, 0)
    show = parse_show(args.show)

    _, repo = _load_repo()
    if not repo.initialized():
        return _not_initialized(repo)

    report = collect(repo, back=back, show=show)
    print(report.render(), end="")
    return 0


def cmd_tail(args) -> int:
    limit = parse_int_arg("limit", args.limit, 1)

    _, repo = _load_repo()
    if not repo.initialized():
        return _not_initialized(repo)

    for i, logpath in enumerate(repo.tail(limit)):
        if i > 0:
            sys.stdout.write(TAIL_SEPARATOR)
        sys.stdout.write(logpath.path.read_text(encoding="utf-8", errors="replace"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devlog",
        description="Track daily development work",
        epilog="Devlog files are created in the directory at $DEVLOG_REPO, "
               "which defaults to $HOME/devlogs if not set.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    yes_help = 'Automatically answer "yes" in response to all prompts.'

    init_parser = subparsers.add_parser(
        "init", help="Initialize a new devlog repository if it does not already exist"
    )
    init_parser.add_argument("-y", "--yes", action="store_true", help=yes_help)
    init_parser.set_defaults(func=cmd_init)

    edit_parser = subparsers.add_parser(
        "edit",
        help="Edit the most recent devlog file",
        epilog="Uses the editor program $DEVLOG_EDITOR, which defaults to nano if not set.",
    )
    edit_parser.add_argument("-y", "--yes", action="store_true", help=yes_help)
    edit_parser.set_defaults(func=cmd_edit)

    rollover_parser = subparsers.add_parser(
        "rollover",
        help="Create new devlog file with incomplete and blocked tasks from the current devlog file",
    )
    rollover_parser.add_argument("-y", "--yes", action="store_true", help=yes_help)
    rollover_parser.set_defaults(func=cmd_rollover)

    status_parser = subparsers.add_parser("status", help="Show recent tasks")
    status_parser.add_argument(
        "-s", "--show", default="all", choices=SHOW_CHOICES, help="Sections to show"
    )
    status_parser.add_argument(
        "-b", "--back", default="0", metavar="BACK", help="Show tasks from a previous devlog"
    )
    status_parser.set_defaults(func=cmd_status)

    tail_parser = subparsers.add_parser("tail", help="Show recent devlogs")
    tail_parser.add_argument(
        "-n", "--limit", default="2", metavar="LIMIT",
        help="Maximum number of log files to display",
    )
    tail_parser.set_defaults(func=cmd_tail)

    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (DevlogError, OSError) as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
