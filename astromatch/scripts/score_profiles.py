"""Script de calcul de compatibilité hors API.

Compare deux profils JSON, ou classe une liste de candidats, et affiche le résultat en JSON.
"""

# ============================================================
# Script : astromatch/scripts/score_profiles.py
# Objet  : Score d'une paire de profils ou classement de candidats.
# Usage  : python -m astromatch.scripts.score_profiles user.json target.json --seed 7
#          python -m astromatch.scripts.score_profiles user.json --rank candidates.json --limit 10
# Sortie : JSON sur stdout (ou --output FILE)
# ============================================================

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from astromatch.core.logging import setup_logging
from astromatch.domain.compatibility import CompatibilityAnalyzer, compatibility_tier
from astromatch.domain.entities import Profile
from astromatch.domain.services import CompatibilityService


def _load_json(parser: argparse.ArgumentParser, path: str) -> Any:
    """Charge un fichier JSON; une erreur de lecture termine via `parser.error` (code 2)."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as err:
        parser.error(f"cannot read {path}: {err}")


def _load_profile(parser: argparse.ArgumentParser, raw: Any, source: str) -> Profile:
    try:
        return Profile.model_validate(raw)
    except ValidationError as err:
        parser.error(f"invalid profile in {source}: {err.error_count()} error(s)")


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score profile compatibility")
    parser.add_argument("user", help="JSON file holding the reference profile")
    parser.add_argument("target", nargs="?", help="JSON file holding the profile to compare")
    parser.add_argument("--rank", metavar="FILE", help="JSON file holding a list of candidates")
    parser.add_argument("--limit", type=_positive_int, default=None, help="Max ranked results")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible scores")
    parser.add_argument("--output", metavar="FILE", help="Write JSON here instead of stdout")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.target and not args.rank:
        parser.error("either a target profile or --rank FILE is required")

    # stdout est réservé au JSON de sortie
    setup_logging(args.log_level, file=sys.stderr)
    service = CompatibilityService(CompatibilityAnalyzer(seed=args.seed))
    user = _load_profile(parser, _load_json(parser, args.user), args.user)

    if args.rank:
        raw = _load_json(parser, args.rank)
        if not isinstance(raw, list):
            parser.error(f"{args.rank} must contain a JSON list of profiles")
        candidates = [_load_profile(parser, item, args.rank) for item in raw]
        ranked = service.rank_candidates(user, candidates, limit=args.limit)
        output: Any = [item.model_dump(mode="json", by_alias=True) for item in ranked]
    else:
        target = _load_profile(parser, _load_json(parser, args.target), args.target)
        result = service.compare(user, target)
        output = {
            **result.model_dump(mode="json", by_alias=True),
            "tier": compatibility_tier(result.score),
        }

    text = json.dumps(output, indent=2, ensure_ascii=False) + "\n"
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
