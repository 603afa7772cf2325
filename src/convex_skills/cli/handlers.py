"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
import threading
from pathlib import Path

from convex_skills.cli.browse import run_browser
from convex_skills.config import SkillsConfig, load_config, validate_config_file
from convex_skills.constants.context import CONTEXT_TEMP_PREFIX, CONTEXT_TEMP_SUFFIX
from convex_skills.exceptions import WatchTargetUnavailableError
from convex_skills.exceptions.validation import format_errors
from convex_skills.installer import (
    install_all_skills,
    install_opencode,
    install_skill,
    install_templates,
    resolve_target_skills_dir,
    uninstall_opencode,
)
from convex_skills.io import write_json_atomic
from convex_skills.model import SkillSummary
from convex_skills.reporting import StdoutReporter
from convex_skills.skills import SkillRepository
from convex_skills.sync import SyncSession
from convex_skills.ui import SkillBrowser, skill_document_url

WATCH_POLL_INTERVAL_S: float = 0.5


def _base_dir(args: argparse.Namespace) -> Path:
    return (args.dir or Path.cwd()).resolve()


def _reporter(args: argparse.Namespace) -> StdoutReporter:
    return StdoutReporter(color=not args.no_color and sys.stdout.isatty())


def _config(args: argparse.Namespace) -> SkillsConfig:
    return load_config(_base_dir(args), args.config)


def _target_skills_dir(args: argparse.Namespace, config: SkillsConfig) -> Path:
    return resolve_target_skills_dir(_base_dir(args), args.target or config.target)


def _require_skill(args: argparse.Namespace, action: str) -> str | None:
    if not args.skill:
        print(f"Error: Please specify a skill to {action}.", file=sys.stderr)
    return args.skill


def handle_help(args: argparse.Namespace) -> int:
    print(_reporter(args).render_help(SkillRepository().list_skills()))
    return 0


def handle_list(args: argparse.Namespace) -> int:
    print(_reporter(args).render_skill_list(SkillRepository().list_skills()))
    return 0


def handle_install(args: argparse.Namespace) -> int:
    skill_id = _require_skill(args, "install")
    if skill_id is None:
        return 1
    config = _config(args)
    result = install_skill(
        SkillRepository(),
        skill_id,
        _target_skills_dir(args, config),
        link=args.link or config.link,
    )
    print(_reporter(args).render_install_result(result))
    return 0


def handle_install_all(args: argparse.Namespace) -> int:
    config = _config(args)
    repository = SkillRepository()
    target = _target_skills_dir(args, config)
    reporter = _reporter(args)

    print(f"Installing {len(repository.skill_ids())} skills...\n")
    results = install_all_skills(repository, target, link=args.link or config.link)
    for result in results:
        print(reporter.render_install_result(result))
    print(reporter.render_install_summary(results, target))
    return 0


def handle_install_templates(args: argparse.Namespace) -> int:
    reporter = _reporter(args)
    for result in install_templates(_base_dir(args)):
        print(reporter.render_install_result(result))
    print("\nDone!")
    return 0


def handle_install_opencode(args: argparse.Namespace) -> int:
    reporter = _reporter(args)
    print("Installing Convex OpenCode Plugin...\n")
    results = install_opencode(_base_dir(args), force=args.force, skip_config=args.skip_config)
    for result in results:
        print(reporter.render_install_result(result))
    if len(results) == 1 and results[0].action == "skipped":
        return 0
    print("\nConvex OpenCode Plugin installed successfully!")
    return 0


def handle_uninstall_opencode(args: argparse.Namespace) -> int:
    reporter = _reporter(args)
    for result in uninstall_opencode(_base_dir(args)):
        print(reporter.render_install_result(result))
    print("\nNote: opencode.json not removed. Remove manually if needed.")
    return 0


def handle_show(args: argparse.Namespace) -> int:
    skill_id = _require_skill(args, "show")
    if skill_id is None:
        return 1
    print(SkillRepository().get_skill(skill_id))
    return 0


def handle_path(args: argparse.Namespace) -> int:
    skill_id = _require_skill(args, "locate")
    if skill_id is None:
        return 1
    print(SkillRepository().skill_path(skill_id))
    return 0


def handle_browse(args: argparse.Namespace) -> int:
    repository = SkillRepository()

    def _open(skill: SkillSummary) -> None:
        print(f"--- {skill_document_url(skill.id)} ---")
        print(repository.get_skill(skill.id))

    run_browser(SkillBrowser(repository.list_skills(), on_open=_open), read=input, write=print)
    return 0


def handle_context(args: argparse.Namespace) -> int:
    config = _config(args)
    session = SyncSession(_base_dir(args), config)
    context = session.context()
    if context is None:
        print(f"Error: No {config.watch.directory}/ directory found in {session.project_dir}", file=sys.stderr)
        return 1

    payload = context.to_dict()
    if args.output is not None:
        write_json_atomic(
            path=args.output,
            payload=payload,
            temp_prefix=CONTEXT_TEMP_PREFIX,
            temp_suffix=CONTEXT_TEMP_SUFFIX,
        )
    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        print(_reporter(args).render_context(context))
    return 0


def handle_watch(args: argparse.Namespace, *, stop_event: threading.Event | None = None) -> int:
    """Run a sync session until interrupted or the watched directory disappears."""
    config = _config(args)
    if args.quiet_ms is not None:
        if args.quiet_ms <= 0:
            print("Error: --quiet-ms must be positive", file=sys.stderr)
            return 1
        config = dataclasses.replace(config, watch=dataclasses.replace(config.watch, quiet_period_ms=args.quiet_ms))

    stop_event = stop_event if stop_event is not None else threading.Event()
    failures: list[WatchTargetUnavailableError] = []

    def _on_error(error: WatchTargetUnavailableError) -> None:
        failures.append(error)
        stop_event.set()

    session = SyncSession(_base_dir(args), config, on_error=_on_error)
    if not session.start():
        print(f"Error: No {config.watch.directory}/ directory found in {session.project_dir}", file=sys.stderr)
        return 1

    print(f"Watching {session.watch_dir} (Ctrl+C to quit)")
    try:
        # Renamed roots emit no notification.
        while not stop_event.wait(WATCH_POLL_INTERVAL_S):
            session.check_watch()
    except KeyboardInterrupt:
        pass
    finally:
        session.stop()

    if failures:
        print(f"Error: {failures[0]}", file=sys.stderr)
        return 1
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(_base_dir(args), args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
