"""
Tests pour la résolution des variables d'environnement.

Ce module teste le chargement des settings depuis un fichier .env personnalisé et la construction
du conteneur à partir de ces settings.
"""

from __future__ import annotations

import importlib
from pathlib import Path

# Constantes pour éviter les erreurs PLR2004 (Magic values)
TEST_SEED = 7
TEST_MAX_CANDIDATES = 25


def test_settings_reads_env_file(tmp_path: Path, monkeypatch) -> None:
    """
    Teste que les settings lisent correctement les fichiers d'environnement.

    Vérifie que les variables définies dans un fichier .env personnalisé sont chargées et
    appliquées aux settings.
    """
    env = tmp_path / ".env.custom"
    env.write_text(
        "COMPAT_SEED=7\nRANK_MAX_CANDIDATES=25\nLOG_JSON=true\n", encoding="utf-8"
    )
    monkeypatch.setenv("ENV_FILE", str(env))

    # Reload settings module to pick up new ENV_FILE
    settings_mod = importlib.import_module("astromatch.core.settings")
    importlib.reload(settings_mod)
    try:
        s = settings_mod.get_settings()
        assert s.COMPAT_SEED == TEST_SEED
        assert s.RANK_MAX_CANDIDATES == TEST_MAX_CANDIDATES
        assert s.LOG_JSON is True
    finally:
        monkeypatch.delenv("ENV_FILE")
        importlib.reload(settings_mod)


def test_settings_env_var_overrides_default(monkeypatch) -> None:
    """Teste qu'une variable d'environnement remplace la valeur par défaut."""
    monkeypatch.setenv("COMPAT_SEED", "7")
    from astromatch.core.settings import Settings  # noqa: PLC0415

    assert Settings().COMPAT_SEED == TEST_SEED


def test_default_settings_are_unseeded(monkeypatch) -> None:
    """Teste que par défaut l'analyseur n'est pas amorcé."""
    monkeypatch.delenv("COMPAT_SEED", raising=False)
    from astromatch.core.settings import Settings  # noqa: PLC0415

    s = Settings(_env_file=None)
    assert s.COMPAT_SEED is None
    assert s.APP_NAME == "astromatch-backend"


def test_container_seeds_analyzer(monkeypatch) -> None:
    """Teste qu'une graine configurée rend le conteneur reproductible."""
    monkeypatch.setenv("COMPAT_SEED", "7")
    from astromatch.core.container import Container  # noqa: PLC0415
    from astromatch.domain.entities import Profile  # noqa: PLC0415

    first, second = Container(), Container()
    assert first.seeded is True
    user = Profile(birthday="1990-05-15", skills=["Python"])
    target = Profile(birthday="1984-02-02", skills=["Python", "Go"])
    assert first.compatibility.compare(user, target) == second.compatibility.compare(user, target)
