"""Lightweight REST client for the dugout API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx

from dugout.ingest import RosterImportError, load_roster_csv


def load_players(path: Path) -> list[dict]:
    try:
        players = load_roster_csv(path)
    except RosterImportError as exc:
        raise SystemExit(f"Could not read roster: {exc}") from exc
    return [player.model_dump(mode="json", by_alias=True) for player in players]


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the dugout REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV")
    parser.add_argument("--owner", default="local", help="Owner id for saved lineups")
    parser.add_argument("--name", default=None, help="Lineup name when saving")
    parser.add_argument("--innings", type=int, default=6, help="Number of innings to plan")
    parser.add_argument("--no-pitcher", action="store_true", help="Disable the pitcher position")
    parser.add_argument("--no-catcher", action="store_true", help="Disable the catcher position")
    parser.add_argument("--preview-only", action="store_true", help="Plan the rotation without saving a lineup")
    parser.add_argument("--list-lineups", action="store_true", help="List saved lineups and exit")
    parser.add_argument("--get-lineup", metavar="LINEUP_ID", help="Fetch a specific lineup and exit")
    parser.add_argument("--export-lineup", metavar="LINEUP_ID", help="Download rotation CSV for a lineup")
    parser.add_argument("--export-path", type=Path, help="Destination path for exported CSV")
    args = parser.parse_args()

    if args.list_lineups or args.get_lineup or args.export_lineup:
        with httpx.Client(base_url=args.base_url) as client:
            if args.list_lineups:
                resp = client.get("/lineups", params={"owner_id": args.owner})
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            if args.get_lineup:
                resp = client.get(f"/lineups/{args.get_lineup}")
                if resp.status_code == 404:
                    raise SystemExit(f"lineup {args.get_lineup} not found")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            if args.export_lineup:
                resp = client.get(f"/lineups/{args.export_lineup}/export.csv")
                if resp.status_code == 404:
                    raise SystemExit(f"lineup {args.export_lineup} not found")
                resp.raise_for_status()
                if args.export_path:
                    args.export_path.write_text(resp.text)
                    print(f"CSV export saved to {args.export_path}")
                else:
                    print(resp.text)
        return

    if args.roster is None:
        raise SystemExit("roster file is required unless using --list-lineups/--get-lineup/--export-lineup")

    payload = {
        "players": load_players(args.roster),
        "rotationSettings": {
            "numberOfInnings": args.innings,
            "usePitcher": not args.no_pitcher,
            "useCatcher": not args.no_catcher,
        },
    }

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/rotation/preview", json=payload)
        resp.raise_for_status()
        preview = resp.json()
        print(f"Planned {len(preview['rotation'])} innings")
        if preview["unfilled"]:
            print("Unfilled positions:", json.dumps(preview["unfilled"], indent=2))

        if args.preview_only:
            print(json.dumps(preview["summaries"], indent=2))
            return

        payload["owner_id"] = args.owner
        payload["name"] = args.name or args.roster.stem
        resp = client.post("/lineups", json=payload)
        if resp.status_code in {400, 409}:
            raise SystemExit(f"lineup rejected: {resp.json()['detail']}")
        resp.raise_for_status()
        lineup = resp.json()
        print(f"Saved lineup {lineup['lineup_id']}")


if __name__ == "__main__":
    main()
