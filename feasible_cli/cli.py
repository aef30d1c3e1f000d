"""
Feasible CLI - Main entry point.

Inspect level campaigns and check player systems from the command line.
"""

import argparse
import logging
import yaml
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from feasible_zone.analytics.equivalence import canonical_systems_equal
from feasible_zone.analytics.polygon import binding_status, polygon_vertices
from feasible_zone.describe import describe_constraint, format_number
from feasible_zone.geometry.boundary import boundary_segment
from feasible_zone.geometry.errors import GeometryError
from feasible_zone.geometry.halfplane import Constraint
from feasible_zone.logging import LogEvent, StructuredLogger, create_logger
from feasible_levels.catalog import DEFAULT_CAMPAIGN, get_campaign
from feasible_levels.config import CampaignConfig, LevelConfig
from feasible_levels.registry import LevelRegistry


def load_yaml_config(config_path: str) -> Any:
    """
    Load YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If YAML is invalid
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")


def load_player_system(config_path: str) -> List[Constraint]:
    """
    Load a player system from YAML.

    Accepted layouts:
        - a list of constraint mappings
        - a mapping with a "constraints" list

    Example YAML:
        constraints:
          - {id: budget, a: 2, b: 1, c: 12, comp: "<="}
          - {id: security, a: 1, b: 0, c: 2, comp: ">="}
    """
    data = load_yaml_config(config_path)
    if isinstance(data, dict):
        data = data.get("constraints")
    if not isinstance(data, list):
        raise ValueError(
            f"Player system in {config_path} must be a list of constraints "
            f"or a mapping with a 'constraints' list"
        )
    constraints = [Constraint.from_dict(k) for k in data]
    ids = [k.id for k in constraints if k.id]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(
            f"Player system in {config_path} has duplicate constraint ids: {duplicates}"
        )
    return constraints


def load_campaign(args: argparse.Namespace, logger: StructuredLogger) -> CampaignConfig:
    if args.campaign:
        return CampaignConfig.from_yaml(args.campaign, logger=logger)
    return get_campaign(args.builtin)


def _format_point(point: Sequence[float]) -> str:
    return f"({format_number(point[0])}, {format_number(point[1])})"


def _print_polygon(title: str, polygon, area: float) -> None:
    print(f"{title}: {len(polygon)} vertices, area {area:.2f}")
    for x, y in polygon_vertices(polygon):
        print(f"  ({x:g}, {y:g})")


def cmd_list_levels(campaign: CampaignConfig) -> None:
    print(f"Campaign: {campaign.name}")
    for level in campaign.levels:
        print(f"  [{level.level_id}] {level.title} ({len(level.target)} rules)")


def cmd_polygon(registry: LevelRegistry, level: LevelConfig, player_path: Optional[str]) -> None:
    evaluator = registry.evaluator(level.level_id)
    _print_polygon("Target", evaluator.target_polygon, evaluator.target_area)
    if player_path:
        report = evaluator.evaluate(load_player_system(player_path))
        _print_polygon("Player", report.polygon, report.area)
        if report.is_empty:
            print("Player region is empty")


def cmd_check(
    registry: LevelRegistry,
    level: LevelConfig,
    player_path: str,
    strict: bool = False,
    line: bool = False,
) -> None:
    player = load_player_system(player_path)
    evaluator = registry.evaluator(level.level_id)

    if strict:
        if canonical_systems_equal(level.target, player):
            print("MATCH (same half-planes)")
        else:
            print("NO MATCH (half-planes differ)")
        return

    if line:
        if evaluator.lines_match(player):
            print(f"MATCH (lines within {evaluator.line_match_tol:g})")
        else:
            print(f"NO MATCH (lines differ by more than {evaluator.line_match_tol:g})")
        return

    report = evaluator.evaluate(player)
    if report.matches_target:
        print("MATCH")
    else:
        print(f"NO MATCH: systems differ at {_format_point(report.mismatch_point)}")
    print(f"Player area {report.area:.2f} / target area {report.target_area:.2f}")


def cmd_status(
    registry: LevelRegistry,
    level: LevelConfig,
    x: float,
    y: float,
    player_path: Optional[str],
) -> None:
    system = load_player_system(player_path) if player_path else list(level.target)
    tol = registry.evaluator(level.level_id).binding_tol

    print(f"Status at {_format_point((x, y))}:")
    for idx, k in enumerate(system):
        key = k.id or f"k{idx}"
        status = binding_status((x, y), k, tol)
        print(f"  {key:<12} {describe_constraint(k):<20} {status.value}")


def cmd_segment(level: LevelConfig) -> None:
    for idx, k in enumerate(level.target):
        key = k.id or f"k{idx}"
        segment = boundary_segment(level.domain, k)
        if segment is None:
            print(f"  {key:<12} {describe_constraint(k):<20} not visible")
        else:
            print(
                f"  {key:<12} {describe_constraint(k):<20} "
                f"{_format_point(segment.p)} -> {_format_point(segment.q)}"
            )


def main(argv: Optional[Sequence[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Feasible CLI - Inspect feasible-zone levels and check player systems",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Levels of the built-in campaign
  feasible-cli list-levels
  feasible-cli --builtin half-plane-hero list-levels

  # Levels from a campaign file
  feasible-cli --campaign config/levels/night_market.yaml list-levels

  # Target (and player) feasible polygon
  feasible-cli polygon 1
  feasible-cli polygon 1 --player player.yaml

  # Check a player system against a level
  feasible-cli check 3 player.yaml
  feasible-cli check 3 player.yaml --strict
  feasible-cli --builtin half-plane-hero check 2 player.yaml --line

  # Binding / slack / violated at a point
  feasible-cli status 3 4 2

  # Visible boundary chord of every target rule
  feasible-cli segment 3
"""
    )

    # Global arguments
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--campaign",
        help="Path to campaign YAML (default: built-in campaign)"
    )
    source.add_argument(
        "--builtin",
        default=DEFAULT_CAMPAIGN,
        help=f"Built-in campaign name (default: {DEFAULT_CAMPAIGN})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Emit structured JSON logs on stderr"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list-levels', help='List levels of the campaign')

    polygon = subparsers.add_parser('polygon', help='Print target feasible polygon')
    polygon.add_argument('level', type=int, help='Level ID')
    polygon.add_argument('--player', help='Player system YAML to clip as well')

    check = subparsers.add_parser('check', help='Check player system against level target')
    check.add_argument('level', type=int, help='Level ID')
    check.add_argument('player', help='Path to player system YAML')
    mode = check.add_mutually_exclusive_group()
    mode.add_argument(
        '--strict',
        action='store_true',
        help='Compare canonical half-planes instead of lattice sampling'
    )
    mode.add_argument(
        '--line',
        action='store_true',
        help="Match boundary lines within the campaign's line_match_tol"
    )

    status = subparsers.add_parser('status', help='Binding status of each rule at a point')
    status.add_argument('level', type=int, help='Level ID')
    status.add_argument('x', type=float, help='Point x')
    status.add_argument('y', type=float, help='Point y')
    status.add_argument('--player', help='Player system YAML (default: level target)')

    segment = subparsers.add_parser('segment', help='Visible boundary chord of each target rule')
    segment.add_argument('level', type=int, help='Level ID')

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logger = create_logger("cli", level=logging.DEBUG if args.verbose else logging.WARNING)

    # Execute command
    try:
        campaign = load_campaign(args, logger)
        registry = LevelRegistry.from_campaign(campaign, logger=logger)

        logger.info(
            event=LogEvent.CLI_COMMAND,
            message="Running command",
            metadata={'command': args.command, 'campaign': campaign.name},
        )

        if args.command == 'list-levels':
            cmd_list_levels(campaign)

        elif args.command == 'polygon':
            cmd_polygon(registry, registry.get(args.level), args.player)

        elif args.command == 'check':
            cmd_check(registry, registry.get(args.level), args.player, args.strict, args.line)

        elif args.command == 'status':
            cmd_status(registry, registry.get(args.level), args.x, args.y, args.player)

        elif args.command == 'segment':
            cmd_segment(registry.get(args.level))

    except GeometryError as e:
        logger.error(
            event=LogEvent.GEOMETRY_ERROR,
            message="Degenerate geometric input",
            metadata={'command': args.command},
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
