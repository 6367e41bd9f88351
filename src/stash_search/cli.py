"""
Command-line interface for stash search.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

from stash_search.config import ConfigError, SearchConfig
from stash_search.filters import Filter
from stash_search.forms import FilterForm
from stash_search.logging import disable, get_logger, setup_logging
from stash_search.models import ItemRecord
from stash_search.search import Search

console = Console()
logger = get_logger("cli")


def default_config_paths() -> list[Path]:
    """Config file search paths, in priority order."""
    return [
        Path.cwd() / "stash-search.yaml",
        Path.home() / ".config" / "stash-search" / "config.yaml",
    ]


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Search inventory items by name, properties and sockets",
        prog="stash-search",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Silence all log output",
    )
    parser.add_argument("-c", "--config", help="Config file (YAML)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Query command
    query_parser = subparsers.add_parser("query", help="Filter items from a JSON file")
    query_parser.add_argument("items", help="JSON file with a list of items or a stash tab")
    query_parser.add_argument("-s", "--search", help="Start from a saved search")
    query_parser.add_argument("-n", "--name", help="Name substring")
    query_parser.add_argument(
        "-r",
        "--range",
        action="append",
        dest="ranges",
        default=[],
        metavar="FILTER=MIN:MAX",
        help="Numeric range, e.g. Q=10: or R.Str=:100 or Links=5:6",
    )
    query_parser.add_argument("--colors", metavar="R,G,B", help="Socket colors, e.g. 1,,2")
    query_parser.add_argument("--linked", metavar="R,G,B", help="Linked socket colors")
    query_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Config command with subcommands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")
    config_subparsers.add_parser("show", help="Show current configuration")
    config_init_parser = config_subparsers.add_parser("init", help="Initialize a new config file")
    config_init_parser.add_argument(
        "-o",
        "--output",
        default="stash-search.yaml",
        help="Output file path",
    )

    args = parser.parse_args(argv)

    try:
        config, loaded_from = _load_config(args.config)
    except (ConfigError, OSError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        sys.exit(1)

    setup_logging("DEBUG" if args.verbose else config.log_level)
    if args.quiet:
        disable()
    if loaded_from:
        logger.debug("Loaded config from %s", loaded_from)

    if args.command == "query":
        cmd_query(args, config)
    elif args.command == "config":
        cmd_config(args, config, loaded_from)
    else:
        parser.print_help()


def _load_config(path: str | None) -> tuple[SearchConfig, Path | None]:
    """Load the given config file, or the first one found in the default locations."""
    if path:
        return SearchConfig.from_yaml(Path(path)), Path(path)
    for candidate in default_config_paths():
        if candidate.exists():
            return SearchConfig.from_yaml(candidate), candidate
    return SearchConfig(), None


def load_items(path: Path) -> list[ItemRecord]:
    """Load items from a JSON list or a stash tab object with an ``items`` list."""
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise ValueError("expected a list of items")
    return [ItemRecord.from_dict(entry) for entry in data]


def find_filter(filters: list[Filter], name: str) -> int:
    """Index of the filter whose key or caption is ``name`` (case-insensitive)."""
    wanted = name.lower()
    for index, flt in enumerate(filters):
        if flt.key.lower() == wanted or flt.caption.lower() == wanted:
            return index
    raise KeyError(name)


def apply_arguments(args: argparse.Namespace, search: Search, forms: list[FilterForm]) -> None:
    """Write command-line values into the search forms."""
    filters = search.filters

    if args.name is not None:
        forms[find_filter(filters, "name")].set_text("query", args.name)

    for entry in args.ranges:
        target, eq, bounds = entry.partition("=")
        if not eq:
            raise ValueError(f"Range must look like FILTER=MIN:MAX, got {entry!r}")
        low, sep, high = bounds.partition(":")
        form = forms[find_filter(filters, target)]
        if "min" not in form.fields:
            raise ValueError(f"Filter {target!r} does not take a range")
        form.set_text("min", low)
        if sep:
            form.set_text("max", high)

    for option, key in ((args.colors, "sockets_colors"), (args.linked, "links_colors")):
        if option is None:
            continue
        parts = (option.split(",") + ["", "", ""])[:3]
        form = forms[find_filter(filters, key)]
        for field_name, text in zip(("r", "g", "b"), parts):
            form.set_text(field_name, text.strip())


def cmd_query(args: argparse.Namespace, config: SearchConfig) -> None:
    """Filter items and print the matches."""
    try:
        filters = config.build_filters()
        searches = config.build_searches(filters)
    except ConfigError as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        sys.exit(1)

    if args.search:
        search = searches.get(args.search)
        if search is None:
            console.print(f"[red]Saved search not found: {args.search}[/red]")
            sys.exit(1)
    else:
        search = Search("cli", filters)

    forms = search.create_forms()
    search.display_all(forms)
    try:
        apply_arguments(args, search, forms)
    except KeyError as e:
        console.print(f"[red]Unknown filter: {e.args[0]}[/red]")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    search.capture_all(forms)

    try:
        items = load_items(Path(args.items))
    except (OSError, ValueError) as e:
        console.print(f"[red]Cannot read items from {args.items}: {e}[/red]")
        sys.exit(1)

    matching = search.filter_items(items)

    if args.json:
        data = [_item_summary(item) for item in matching]
        console.print_json(json.dumps(data, indent=2))
        return

    table = Table(title="Matching Items")
    table.add_column("Name", style="cyan")
    table.add_column("Sockets")
    table.add_column("Links", justify="right")

    for item in matching:
        table.add_row(item.name, format_sockets(item), str(item.links))

    console.print(table)
    console.print(f"\n[dim]Total: {len(matching)} of {len(items)} items[/dim]")


def format_sockets(item: ItemRecord) -> str:
    """Render sockets as linked runs, e.g. ``R-R-G B``."""
    return " ".join(
        "-".join(socket.color.value for socket in group) for group in item.link_groups()
    )


def _item_summary(item: ItemRecord) -> dict[str, Any]:
    return {
        "name": item.name,
        "sockets": format_sockets(item),
        "links": item.links,
    }


def cmd_config(args: argparse.Namespace, config: SearchConfig, loaded_from: Path | None) -> None:
    """Configuration management commands."""
    if args.config_command == "show":
        if loaded_from is None:
            console.print("[dim]No config file found. Using defaults.[/dim]")
        else:
            console.print(f"[dim]Loaded from: {loaded_from}[/dim]\n")
        console.print("[bold]Current Configuration:[/bold]\n")
        console.print(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))
    elif args.config_command == "init":
        _config_init(args.output)
    else:
        console.print("[yellow]Usage: stash-search config <show|init>[/yellow]")


def _config_init(output: str) -> None:
    """Initialize a new config file."""
    output_path = Path(output)

    if output_path.exists():
        console.print(f"[red]File already exists: {output_path}[/red]")
        sys.exit(1)

    with open(output_path, "w") as f:
        yaml.dump(SearchConfig().to_dict(), f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]Created config file: {output_path}[/green]")


if __name__ == "__main__":
    main()
