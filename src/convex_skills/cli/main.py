"""CLI entrypoint for convex-skills."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

from convex_skills import __version__
from convex_skills.cli import handlers
from convex_skills.constants.branding import CLI_DESCRIPTION, LIST_HINT, PROGRAM_NAME
from convex_skills.exceptions import ConfigError, ConvexSkillsError, SkillNotFoundError

_COMMANDS: dict[str, Callable[[argparse.Namespace], int]] = {
    "list": handlers.handle_list,
    "install": handlers.handle_install,
    "install-all": handlers.handle_install_all,
    "install-templates": handlers.handle_install_templates,
    "install-opencode": handlers.handle_install_opencode,
    "uninstall-opencode": handlers.handle_uninstall_opencode,
    "show": handlers.handle_show,
    "path": handlers.handle_path,
    "help": handlers.handle_help,
    "browse": handlers.handle_browse,
    "context": handlers.handle_context,
    "watch": handlers.handle_watch,
    "validate-config": handlers.handle_validate_config,
}


class _Parser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def _add_common_options(parser: argparse.ArgumentParser, *, suppress: bool) -> None:
    """Add options accepted both before and after the command name.

    Subcommand copies use ``SUPPRESS`` defaults so they never overwrite a
    value given before the command.
    """

    def default(value: object) -> object:
        return argparse.SUPPRESS if suppress else value

    parser.add_argument("--dir", type=Path, default=default(None), help="Target directory (default: cwd)")
    parser.add_argument(
        "--target",
        default=default(None),
        help="Install target: claude, codex, agents, or a path",
    )
    parser.add_argument(
        "--link",
        action="store_true",
        default=default(False),
        help="Symlink SKILL.md instead of copying",
    )
    parser.add_argument("-c", "--config", type=Path, default=default(None), help="Explicit config file")
    parser.add_argument("--no-color", action="store_true", default=default(False), help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", default=default(False), help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = _Parser(
        prog=PROGRAM_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_common_options(parser, suppress=False)

    common = _Parser(add_help=False)
    _add_common_options(common, suppress=True)

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", parents=[common], help="List all available skills")

    install = subparsers.add_parser("install", parents=[common], help="Install a skill")
    install.add_argument("skill", nargs="?", help="Skill identifier")

    subparsers.add_parser("install-all", parents=[common], help="Install all skills")
    subparsers.add_parser("install-templates", parents=[common], help="Install template files to your project")

    opencode = subparsers.add_parser("install-opencode", parents=[common], help="Install OpenCode agents and commands")
    opencode.add_argument("--force", action="store_true", help="Overwrite an existing opencode.json")
    opencode.add_argument("--skip-config", action="store_true", help="Don't create opencode.json")

    subparsers.add_parser("uninstall-opencode", parents=[common], help="Remove OpenCode agents and commands")

    show = subparsers.add_parser("show", parents=[common], help="Print a skill's content")
    show.add_argument("skill", nargs="?", help="Skill identifier")

    path = subparsers.add_parser("path", parents=[common], help="Print the path to a skill file")
    path.add_argument("skill", nargs="?", help="Skill identifier")

    subparsers.add_parser("help", parents=[common], help="Show help")
    subparsers.add_parser("browse", parents=[common], help="Browse skills interactively")

    context = subparsers.add_parser("context", parents=[common], help="Print the deployment context")
    context.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    context.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON context to this file")

    watch = subparsers.add_parser("watch", parents=[common], help="Watch convex/ and report settled changes")
    watch.add_argument("--quiet-ms", type=int, default=None, help="Quiet period in milliseconds")

    subparsers.add_parser("validate-config", parents=[common], help="Validate convex-skills.yaml")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handler = _COMMANDS[args.command or "help"]
    try:
        return handler(args)
    except SkillNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(LIST_HINT)
        return 1
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except ConvexSkillsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
