"""Command-line interface for generating fielding rotations from a roster CSV."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict

from dugout.config import PositionCategory, get_sport_rules, max_innings
from dugout.config_loader import RosterProfile
from dugout.ingest import RosterImportError, load_roster_csv
from dugout.models import RotationSettings
from dugout.rotation import plan_rotation, rotation_to_csv, summarize_rotation, validate_lineup


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a fair fielding rotation from a roster")
    parser.add_argument("roster", type=Path, help="Path to roster CSV")
    parser.add_argument("--name", default=None, help="Lineup name (defaults to the roster file name)")
    parser.add_argument("--sport", default=None, help="Sport key (baseball or softball)")
    parser.add_argument("--innings", type=int, default=None, help="Number of innings to plan")
    parser.add_argument("--no-pitcher", action="store_true", help="Leave the pitcher position out of the rotation")
    parser.add_argument("--no-catcher", action="store_true", help="Leave the catcher position out of the rotation")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., name=First Name|Last Name)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load roster profile JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save roster profile JSON", default=None)
    parser.add_argument("--output", type=Path, default=Path("rotation.csv"), help="Output CSV path")
    parser.add_argument("--summary", action="store_true", help="Print per-player position counts")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _resolve_settings(args: argparse.Namespace, profile: RosterProfile | None, sport: str) -> RotationSettings:
    values: Dict[str, Any] = {"number_of_innings": get_sport_rules(sport).default_innings}
    if profile is not None:
        values.update(RotationSettings.model_validate(profile.rotation_settings).model_dump())
    if args.innings is not None:
        values["number_of_innings"] = args.innings
    if args.no_pitcher:
        values["use_pitcher"] = False
    if args.no_catcher:
        values["use_catcher"] = False
    settings = RotationSettings(**values)
    if settings.number_of_innings > max_innings():
        raise ValueError(f"number_of_innings must be at most {max_innings()}")
    return settings


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        roster_mapping = _parse_mapping(args.column)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    profile = RosterProfile.load(args.load_profile) if args.load_profile else None
    if profile is not None:
        roster_mapping = profile.roster_mapping | roster_mapping

    sport = args.sport or (profile.sport if profile and profile.sport else "baseball")
    try:
        get_sport_rules(sport)
        settings = _resolve_settings(args, profile, sport)
    except KeyError as exc:
        raise SystemExit(f"Unknown sport {sport!r}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid rotation settings: {exc}") from exc

    try:
        players = load_roster_csv(args.roster, mapping=roster_mapping or None)
    except RosterImportError as exc:
        raise SystemExit(f"Could not read roster: {exc}") from exc

    if args.save_profile:
        RosterProfile(
            roster_mapping=roster_mapping,
            rotation_settings=settings.model_dump(mode="json", by_alias=True),
            sport=sport.lower(),
        ).save(args.save_profile)
        print(f"Saved roster profile to {args.save_profile}")

    name = args.name if args.name is not None else args.roster.stem
    problems = validate_lineup(name, players, settings)
    if problems:
        raise SystemExit("Lineup is not valid:\n" + "\n".join(f"  - {problem}" for problem in problems))

    plan = plan_rotation(players, settings)
    args.output.write_text(rotation_to_csv(players, plan.rotation), encoding="utf-8")
    print(
        f"Planned {settings.number_of_innings} innings for {len(players)} players "
        f"across {len(plan.field_positions)} positions; wrote {args.output}"
    )

    if plan.unfilled:
        preview = ", ".join(f"inning {item.inning} {item.position.value}" for item in plan.unfilled[:5])
        more = len(plan.unfilled) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Positions left unfilled: {preview}{suffix}")

    if args.summary:
        for summary in summarize_rotation(players, plan.rotation):
            counts = " ".join(
                f"{position.value}={count}"
                for position, count in sorted(summary.positions.items(), key=lambda item: item[0].value)
            )
            infield = summary.categories.get(PositionCategory.INFIELD, 0)
            outfield = summary.categories.get(PositionCategory.OUTFIELD, 0)
            bench = summary.categories.get(PositionCategory.BENCH, 0)
            print(f"{summary.batting_order:>2} {summary.name}: {counts} (IF {infield} / OF {outfield} / BN {bench})")


if __name__ == "__main__":
    main()
