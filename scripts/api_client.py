"""Lightweight REST client for the pybreakout API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def _print_players(payload: dict) -> None:
    print(f"{payload['year']} ({payload['model']}): {payload['summary']['selected_players']} players")
    for player in payload["players"]:
        print(
            f"{player['rank']:>3}. {player['name']:<24} {player['team']:<4} "
            f"{player['breakout_score']:>4} {player['tier']:<5} {player['confidence']}"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pybreakout REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("expected", type=Path, nargs="?", help="Savant expected-statistics CSV to upload")
    parser.add_argument("--year", type=int, default=None, help="Prediction year")
    parser.add_argument("--model", default=None, help="Model version")
    parser.add_argument("--limit", type=int, default=25, help="Number of players to return")
    parser.add_argument("--players-json", type=Path, help="Score a JSON list of player records instead")
    parser.add_argument("--list-models", action="store_true", help="List registered models and exit")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON response")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_models:
            resp = client.get("/models")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.players_json:
            players = json.loads(args.players_json.read_text(encoding="utf-8"))
            resp = client.post(
                "/scores",
                json={
                    "year": args.year,
                    "model": args.model,
                    "players": players,
                    "filters": {"limit": args.limit},
                },
            )
        elif args.expected:
            files = {"expected": (args.expected.name, args.expected.read_bytes(), "text/csv")}
            data = {"limit": str(args.limit)}
            if args.year:
                data["year"] = str(args.year)
            if args.model:
                data["model"] = args.model
            resp = client.post("/scores/upload", files=files, data=data)
        else:
            if args.year is None:
                raise SystemExit("--year is required when no input file is given")
            params = {"limit": args.limit}
            if args.model:
                params["model"] = args.model
            resp = client.get(f"/scores/{args.year}", params=params)

        if resp.status_code == 404:
            raise SystemExit(resp.json().get("detail", "not found"))
        resp.raise_for_status()
        payload = resp.json()

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        _print_players(payload)


if __name__ == "__main__":
    main()
