"""
CLI Application - Entry point for the solidkit command.

Usage:
    # List every example (or one principle's)
    solidkit list
    solidkit list --principle ocp

    # Explain one example
    solidkit show lsp-violated

    # Run demonstrations
    solidkit demo dip-applied
    solidkit demo --all

    # Flag implementers that break their abstraction's contract
    solidkit audit --strict

    # Browse interactively
    solidkit tui

Environment Variables:
    SOLIDKIT_VERBOSE: Enable debug logging
    SOLIDKIT_COLOR: Set to false to disable colored output (as does NO_COLOR)
    SOLIDKIT_PRINCIPLE: Default principle filter for "list"
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from ..adapters.config import EnvironmentConfigProvider
from ..catalog import AUDIT_SUITES, EXAMPLES, Principle, examples_for, get_example
from ..core.audit import all_substitutable
from ..core.exceptions import ExampleNotFoundError, SolidKitError
from ..core.ports.config_provider import AppConfig, ConfigProviderPort
from .exit_codes import ExitCode
from .output import Console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="solidkit",
        description="SOLID design principles, each shown applied and violated",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    list_parser = commands.add_parser("list", help="List the examples")
    list_parser.add_argument(
        "--principle", "-p",
        type=str,
        help="Only list one principle (e.g. ocp or 'Open-Closed Principle')",
    )

    show_parser = commands.add_parser("show", help="Explain one example")
    show_parser.add_argument("key", help="Example key (e.g. lsp-violated)")

    demo_parser = commands.add_parser("demo", help="Run demonstrations")
    demo_target = demo_parser.add_mutually_exclusive_group(required=True)
    demo_target.add_argument("key", nargs="?", help="Example key (e.g. dip-applied)")
    demo_target.add_argument("--all", action="store_true", help="Run every example")

    audit_parser = commands.add_parser("audit", help="Check implementers for substitutability")
    audit_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error if any implementer is flagged",
    )

    commands.add_parser("tui", help="Browse the examples in a terminal UI")

    return parser


# -------------------------------------------------------------------------
# Commands
# -------------------------------------------------------------------------

def cmd_list(args: argparse.Namespace, config: AppConfig, console: Console) -> int:
    principle_text = args.principle or config.principle
    principle = Principle.from_string(principle_text) if principle_text else None
    examples = examples_for(principle)

    console.header("SOLID examples" if principle is None else principle.title)
    console.example_table(examples)
    return ExitCode.SUCCESS


def cmd_show(args: argparse.Namespace, config: AppConfig, console: Console) -> int:
    console.example(get_example(args.key))
    return ExitCode.SUCCESS


def cmd_demo(args: argparse.Namespace, config: AppConfig, console: Console) -> int:
    examples = list(EXAMPLES) if args.all else [get_example(args.key)]
    for example in examples:
        console.transcript(example, example.run())
    return ExitCode.SUCCESS


def cmd_audit(args: argparse.Namespace, config: AppConfig, console: Console) -> int:
    logger = logging.getLogger("audit")
    console.header("Substitutability audit")

    flagged = 0
    for suite in AUDIT_SUITES:
        findings = suite.run()
        console.audit_findings(suite.title, findings)
        if not all_substitutable(findings):
            logger.debug(f"{suite.title}: contract broken")
        flagged += sum(1 for f in findings if not f.substitutable)

    console.print()
    if flagged == 0:
        console.success("Every implementer honours its contract")
        return ExitCode.SUCCESS

    console.warning(f"{flagged} implementer(s) break their contract")
    if args.strict:
        logger.error(f"Audit failed: {flagged} flagged implementer(s)")
        return ExitCode.AUDIT_FAILED
    return ExitCode.SUCCESS


def cmd_tui(args: argparse.Namespace, config: AppConfig, console: Console) -> int:
    from ..tui.app import run_tui

    return run_tui()


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "demo": cmd_demo,
    "audit": cmd_audit,
    "tui": cmd_tui,
}


# -------------------------------------------------------------------------
# Entry points
# -------------------------------------------------------------------------

def run(
    argv: Optional[list[str]] = None,
    stream: Optional[TextIO] = None,
    config_provider: Optional[ConfigProviderPort] = None,
) -> int:
    """
    Parse arguments and run a command.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        stream: Where console output goes (defaults to stdout)
        config_provider: Configuration source (defaults to the environment)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    provider = config_provider or EnvironmentConfigProvider(cli_overrides=vars(args))
    config = provider.load()

    setup_logging(config.verbose)
    logger = logging.getLogger("main")
    console = Console(color=config.color, verbose=config.verbose, stream=stream)

    errors = provider.validate()
    if errors:
        for error in errors:
            console.error(error)
        return ExitCode.CONFIG_ERROR

    try:
        return COMMANDS[args.command](args, config, console)
    except ExampleNotFoundError as e:
        console.error(str(e))
        return ExitCode.NOT_FOUND
    except SolidKitError as e:
        logger.error(str(e))
        console.error(str(e))
        return ExitCode.ERROR


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
