"""Tests pour le script de calcul de compatibilité en ligne de commande."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from astromatch.scripts.score_profiles import main

# Constantes pour éviter les erreurs PLR2004 (Magic values)
ARGPARSE_ERROR = 2


def _write(path: Path, payload) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_score_pair_is_reproducible_with_seed(tmp_path: Path) -> None:
    """Teste qu'une même graine produit la même sortie JSON."""
    user = _write(tmp_path / "user.json", {"id": "a", "birthday": "1990-05-15"})
    target = _write(tmp_path / "target.json", {"id": "b", "birthday": "1992-10-05"})
    out1, out2 = tmp_path / "out1.json", tmp_path / "out2.json"

    assert main([user, target, "--seed", "3", "--output", str(out1)]) == 0
    assert main([user, target, "--seed", "3", "--output", str(out2)]) == 0

    data = json.loads(out1.read_text(encoding="utf-8"))
    assert data == json.loads(out2.read_text(encoding="utf-8"))
    assert 0 <= data["score"] <= 100  # noqa: PLR2004
    assert data["tier"] in ("high", "medium", "low")
    assert data["zodiacMatch"] is not None


def test_rank_candidates_with_limit(tmp_path: Path) -> None:
    """Teste le classement d'un fichier de candidats."""
    user = _write(tmp_path / "user.json", {"id": "me", "birthday": "1990-05-15"})
    candidates = _write(
        tmp_path / "candidates.json",
        [{"id": "a", "birthday": "1991-01-01"}, {"id": "b"}, {"id": "c", "birthday": "1975-07-30"}],
    )
    out = tmp_path / "ranked.json"

    assert main([user, "--rank", candidates, "--limit", "2", "--seed", "1", "--output", str(out)]) == 0

    ranked = json.loads(out.read_text(encoding="utf-8"))
    assert len(ranked) == 2  # noqa: PLR2004
    assert ranked[0]["result"]["score"] >= ranked[1]["result"]["score"]


def test_missing_target_and_rank_is_an_error(tmp_path: Path) -> None:
    """Teste qu'une cible ou --rank est requis."""
    user = _write(tmp_path / "user.json", {"id": "me"})
    with pytest.raises(SystemExit) as exc:
        main([user])
    assert exc.value.code == ARGPARSE_ERROR


def test_unreadable_file_is_an_error(tmp_path: Path) -> None:
    """Teste qu'un fichier absent termine avec le code 2."""
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.json"), str(tmp_path / "other.json")])
    assert exc.value.code == ARGPARSE_ERROR


def test_invalid_profile_is_an_error(tmp_path: Path) -> None:
    """Teste qu'un profil mal formé termine avec le code 2."""
    user = _write(tmp_path / "user.json", {"skills": "nope"})
    target = _write(tmp_path / "target.json", {})
    with pytest.raises(SystemExit) as exc:
        main([user, target])
    assert exc.value.code == ARGPARSE_ERROR


@pytest.mark.parametrize("limit", ["-1", "0", "abc"])
def test_rank_rejects_invalid_limit(tmp_path: Path, limit: str) -> None:
    """Teste qu'une limite inférieure à 1 termine avec le code 2."""
    user = _write(tmp_path / "user.json", {"id": "me", "birthday": "1990-05-15"})
    candidates = _write(
        tmp_path / "candidates.json",
        [{"id": "a"}, {"id": "b"}, {"id": "c"}],
    )
    out = tmp_path / "ranked.json"
    with pytest.raises(SystemExit) as exc:
        main([user, "--rank", candidates, "--limit", limit, "--output", str(out)])
    assert exc.value.code == ARGPARSE_ERROR
    assert not out.exists()
