"""
Command-line interface for the application.

One subcommand per exercise screen. This module provides the main entry point.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from learning_projects import __version__
from learning_projects.config import Settings, get_settings
from learning_projects.exercises import (
    TIP_PERCENTAGES,
    Counter,
    RGBColor,
    calculate_tip,
    format_conversion,
)
from learning_projects.renderers.expenses import build_expense_report_text
from learning_projects.renderers.github import build_favorites_text
from learning_projects.renderers.tasks import build_task_board_text
from learning_projects.schemas import Expense, ExpenseCategory, OrphanPolicy
from learning_projects.screens.github import UserSearchScreen
from learning_projects.screens.state import ViewPhase
from learning_projects.screens.weather import WeatherScreen
from learning_projects.services.expenses import ExpenseService
from learning_projects.services.favorites import FavoritesService
from learning_projects.services.github import GitHubService
from learning_projects.services.http import build_retry, create_session
from learning_projects.services.tasks import CategoryInUseError, demo_board
from learning_projects.services.weather import WeatherService
from learning_projects.store import KeyValueStore

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Set up root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="learning-projects",
        description="Small app exercises: converters, to-dos, weather, GitHub, expenses",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    color_parser = subparsers.add_parser("color", help="Mix an RGB color")
    for channel in ("red", "green", "blue"):
        color_parser.add_argument(channel, type=float, help=f"{channel} channel (0-255)")

    counter_parser = subparsers.add_parser("counter", help="Apply counter operations")
    counter_parser.add_argument(
        "ops",
        nargs="*",
        metavar="{inc,dec,reset}",
        help="Operations applied in order, starting from 0",
    )

    convert_parser = subparsers.add_parser("convert", help="Convert Celsius to Fahrenheit")
    convert_parser.add_argument("celsius", help="Temperature in Celsius")

    tip_parser = subparsers.add_parser("tip", help="Calculate a tip")
    tip_parser.add_argument("bill", help="Bill amount")
    tip_parser.add_argument(
        "--percent",
        type=float,
        choices=TIP_PERCENTAGES,
        default=18.0,
        help="Tip percentage (default: 18)",
    )

    weather_parser = subparsers.add_parser("weather", help="Look up (simulated) weather")
    weather_parser.add_argument("city", help="City name")

    github_parser = subparsers.add_parser("github", help="Look up a GitHub user")
    github_parser.add_argument("username", help="GitHub username")
    github_parser.add_argument(
        "--favorite",
        action="append",
        default=[],
        metavar="REPO_NAME",
        help="Toggle a repository as favorite (repeatable)",
    )

    subparsers.add_parser("favorites", help="List favorite repositories")

    expenses_parser = subparsers.add_parser("expenses", help="Show and edit the expense ledger")
    expenses_parser.add_argument(
        "--add",
        nargs=3,
        metavar=("TITLE", "AMOUNT", "CATEGORY"),
        help=f"Add an expense; CATEGORY is one of {', '.join(c.value for c in ExpenseCategory)}",
    )
    expenses_parser.add_argument(
        "--delete",
        nargs="+",
        type=int,
        metavar="INDEX",
        help="Delete expenses by position",
    )
    expenses_parser.add_argument(
        "--by-date",
        action="store_true",
        help="List newest first (row numbers stay ledger positions)",
    )

    tasks_parser = subparsers.add_parser("tasks", help="Show the to-do board")
    tasks_parser.add_argument("category", nargs="?", help="Only show this category")
    tasks_parser.add_argument(
        "--delete-category",
        metavar="NAME",
        help="Delete a category before showing the board",
    )
    tasks_parser.add_argument(
        "--policy",
        choices=[p.value for p in OrphanPolicy],
        default=None,
        help="What to do with the deleted category's tasks (default: from settings)",
    )
    tasks_parser.add_argument(
        "--reassign-to",
        metavar="NAME",
        help="Target category for --policy reassign",
    )

    return parser


def _store(settings: Settings) -> KeyValueStore:
    return KeyValueStore(settings.data_dir)


def _favorites(settings: Settings) -> FavoritesService:
    return FavoritesService(
        _store(settings),
        key=settings.favorites_key,
        strict=settings.favorites_strict,
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data directory: {settings.data_dir}")
    return 0


def cmd_color(args: argparse.Namespace) -> int:
    """Handle the 'color' command."""
    color = RGBColor.from_sliders(args.red, args.green, args.blue)
    print(f"Red: {color.red}")
    print(f"Green: {color.green}")
    print(f"Blue: {color.blue}")
    print(f"Hex: {color.hex}")
    return 0


def cmd_counter(args: argparse.Namespace) -> int:
    """Handle the 'counter' command."""
    counter = Counter()
    actions = {"inc": counter.increment, "dec": counter.decrement, "reset": counter.reset}
    for op in args.ops:
        if op not in actions:
            print(f"Unknown counter operation: {op!r}", file=sys.stderr)
            return 1
        actions[op]()
    print(f"{counter.count} ({counter.tone})")
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle the 'convert' command."""
    print(format_conversion(args.celsius))
    return 0


def cmd_tip(args: argparse.Namespace) -> int:
    """Handle the 'tip' command."""
    breakdown = calculate_tip(args.bill, args.percent)
    for line in breakdown.lines():
        print(line)
    return 0


def cmd_weather(args: argparse.Namespace) -> int:
    """Handle the 'weather' command."""
    settings = get_settings()
    screen = WeatherScreen(WeatherService(delay=settings.weather_delay_seconds))
    if not screen.can_search(args.city):
        print("Enter a city name.", file=sys.stderr)
        return 1

    state = asyncio.run(screen.search(args.city))
    output = screen.render()
    if state.phase is ViewPhase.ERROR:
        print(output, file=sys.stderr)
        return 1
    print(output)
    return 0


def cmd_github(args: argparse.Namespace) -> int:
    """Handle the 'github' command: look up a user, optionally toggle favorites."""
    settings = get_settings()
    session = create_session(retry=build_retry(settings.http_retries), timeout=settings.http_timeout)
    service = GitHubService(session=session, base_url=settings.github_api_url)
    screen = UserSearchScreen(service, _favorites(settings))
    if not screen.can_search(args.username):
        print("Enter a username.", file=sys.stderr)
        return 1

    state = asyncio.run(screen.search(args.username))
    if state.phase is ViewPhase.ERROR or state.data is None:
        print(screen.render(), file=sys.stderr)
        return 1

    by_name = {repo.name: repo for repo in state.data.repositories}
    for name in args.favorite:
        repo = by_name.get(name)
        if repo is None:
            print(f"No repository named {name!r} for {args.username}", file=sys.stderr)
            return 1
        result = screen.toggle_favorite(repo)
        if not result.success:
            print(f"Warning: {result.message}: {result.error}", file=sys.stderr)

    print(screen.render())
    return 0


def cmd_favorites(_args: argparse.Namespace) -> int:
    """Handle the 'favorites' command."""
    favorites = _favorites(get_settings())
    if not favorites.last_load.success:
        print(f"Warning: {favorites.last_load.message}", file=sys.stderr)
    print(build_favorites_text(favorites.favorites))
    return 0


def cmd_expenses(args: argparse.Namespace) -> int:
    """Handle the 'expenses' command."""
    service = ExpenseService(store=_store(get_settings()))

    if args.add:
        title, amount_text, category_text = args.add
        try:
            expense = Expense(
                title=title,
                amount=float(amount_text),
                category=ExpenseCategory(category_text.title()),
            )
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        service.add_expense(expense)

    if args.delete:
        try:
            service.delete_expense(args.delete)
        except IndexError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    shown = service.sorted_by_date() if args.by_date else service.expenses
    print(
        build_expense_report_text(
            shown,
            service.total_expenses,
            service.totals_by_category(),
            positions={expense.id: index for index, expense in enumerate(service.expenses)},
        )
    )
    return 0


def cmd_tasks(args: argparse.Namespace) -> int:
    """Handle the 'tasks' command."""
    settings = get_settings()
    board = demo_board()

    if args.delete_category:
        category = board.find_category(args.delete_category)
        if category is None:
            print(f"No category named {args.delete_category!r}", file=sys.stderr)
            return 1
        target = None
        if args.reassign_to:
            target = board.find_category(args.reassign_to)
            if target is None:
                print(f"No category named {args.reassign_to!r}", file=sys.stderr)
                return 1
        policy = OrphanPolicy(args.policy) if args.policy else settings.orphan_policy
        try:
            board.delete_category(
                category.id,
                policy=policy,
                reassign_to=target.id if target is not None else None,
            )
        except (CategoryInUseError, LookupError, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    only = None
    if args.category:
        only = board.find_category(args.category)
        if only is None:
            print(f"No category named {args.category!r}", file=sys.stderr)
            return 1

    print(build_task_board_text(board, only=only))
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(debug=args.debug or get_settings().debug)

    commands = {
        "info": cmd_info,
        "color": cmd_color,
        "counter": cmd_counter,
        "convert": cmd_convert,
        "tip": cmd_tip,
        "weather": cmd_weather,
        "github": cmd_github,
        "favorites": cmd_favorites,
        "expenses": cmd_expenses,
        "tasks": cmd_tasks,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
