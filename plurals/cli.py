"""plurals CLI - pick plural word forms from the command line.

The CLI is the only place that reads dictionary files; the library itself
works on in-memory text.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from plurals import __version__
from plurals.config import Settings
from plurals.engine import PluralEngine
from plurals.exceptions import PluralError
from plurals.rules import NAME_TO_CODE, RULES, get_rule
from plurals.words import BUNDLED_DICTIONARIES

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _load_engine(settings: Settings) -> PluralEngine:
    if settings.dictionary is None:
        logger.debug(f"Using bundled dictionary for '{settings.language}'")
        return PluralEngine.for_language(settings.language)

    logger.debug(f"Reading dictionary from {settings.dictionary}")
    text = Path(settings.dictionary).read_text(encoding="utf-8")
    return PluralEngine(get_rule(settings.language), text)


def cmd_pl(settings: Settings, args: argparse.Namespace) -> int:
    engine = _load_engine(settings)
    render = engine.substitute_with_number if args.number else engine.substitute
    for word in args.words:
        console.print(render(args.n, word), markup=False, highlight=False)
    return 0


def cmd_check(settings: Settings, args: argparse.Namespace) -> int:
    engine = _load_engine(settings)
    console.print(
        f"[green]OK[/green] {len(engine)} words, "
        f"{engine.rule.category_count} forms each ({engine.rule.name})"
    )
    return 0


def cmd_rules(settings: Settings, args: argparse.Namespace) -> int:
    names: dict[str, str] = {}
    for name, code in NAME_TO_CODE.items():
        names.setdefault(code, name)

    table = Table(title="Plural rules")
    table.add_column("Code", style="cyan")
    table.add_column("Language")
    table.add_column("Rule")
    table.add_column("Forms", justify="right")
    table.add_column("Bundled words", justify="center")

    for code, rule in sorted(RULES.items()):
        table.add_row(
            code,
            names.get(code, "").capitalize(),
            rule.name,
            str(rule.category_count),
            "✓" if code in BUNDLED_DICTIONARIES else "",
        )
    console.print(table)
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plurals",
        description="Pick the plural form of a word for a number",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  plurals pl 5 год -l ru              # лет
  plurals pl 2 " клиент" -l ru -n     # 2 клиента
  plurals pl 3 apple -d words.txt     # apples
  plurals check words.txt -l ru
  plurals rules

Environment Variables:
  PLURALS_LANGUAGE     Default language (code or name)
  PLURALS_DICTIONARY   Default dictionary file
  PLURALS_VERBOSE      Enable debug logging
        """,
    )
    parser.add_argument("--version", "-V", action="version", version=f"plurals {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    pl_parser = subparsers.add_parser("pl", help="Print plural forms for a number")
    pl_parser.add_argument("n", type=int, help="The number")
    pl_parser.add_argument("words", nargs="+", help="Words in base form, optionally prefixed")
    pl_parser.add_argument("--language", "-l", help="Language code or name")
    pl_parser.add_argument("--dictionary", "-d", help="Dictionary file")
    pl_parser.add_argument(
        "--number", "-n", action="store_true", help="Prepend the number to each result"
    )
    pl_parser.set_defaults(handler=cmd_pl)

    check_parser = subparsers.add_parser("check", help="Validate a dictionary file")
    check_parser.add_argument("dictionary", help="Dictionary file")
    check_parser.add_argument("--language", "-l", help="Language code or name")
    check_parser.set_defaults(handler=cmd_check)

    rules_parser = subparsers.add_parser("rules", help="List known plural rules")
    rules_parser.set_defaults(handler=cmd_rules)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the plurals CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env(
            language=getattr(args, "language", None),
            dictionary=getattr(args, "dictionary", None),
            verbose=args.verbose or None,
        )
    except ValidationError as e:
        for error in e.errors():
            err_console.print(f"[red]Error:[/red] {escape(error['msg'])}")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(settings, args)
    except KeyboardInterrupt:
        err_console.print("\nInterrupted")
        return 130
    except (PluralError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
