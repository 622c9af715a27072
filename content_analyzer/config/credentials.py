"""Layered lookup of the enrichment API credential."""

import os
from collections.abc import Callable, Mapping
from pathlib import Path

from dotenv import dotenv_values

from content_analyzer.config.settings import Settings
from content_analyzer.logging.logger import Log

CredentialSource = tuple[str, Callable[[], str | None]]


def resolve_api_key(
    settings: Settings,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Return the first non-empty credential, or None if every source is empty.

    Order: process environment, then each configured credential file,
    then the inline default from settings.
    """
    env = os.environ if environ is None else environ
    for name, lookup in _sources(settings, env):
        value = (lookup() or "").strip()
        if value:
            Log.info(f"Enrichment credential resolved from {name}")
            return value
    Log.warning("No enrichment credential configured")
    return None


def _sources(settings: Settings, env: Mapping[str, str]) -> list[CredentialSource]:
    var = settings.enrichment_api_key_env_var
    sources: list[CredentialSource] = [(f"env:{var}", lambda: env.get(var))]
    for raw_path in settings.enrichment_credential_files:
        path = Path(raw_path).expanduser()
        sources.append((f"file:{path}", lambda p=path: _read_from_file(p, var)))
    sources.append(("settings", lambda: settings.enrichment_api_key))
    return sources


def _read_from_file(path: Path, key: str) -> str | None:
    if not path.is_file():
        return None
    return dotenv_values(path).get(key)
