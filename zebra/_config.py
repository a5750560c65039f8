"""Konfiguracja CLI — zmienne środowiskowe, opcjonalnie z pliku .env."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass, field

from dotenv import load_dotenv

from solver import DEFAULT_MODELS
from validator import DEFAULT_ALIASES, parse_aliases

ROOT = pathlib.Path(__file__).resolve().parent.parent

load_dotenv(ROOT / ".env")


@dataclass(frozen=True, slots=True)
class Settings:
    """
    - models:  liczba modeli, o które prosimy solver     (ZEBRA_MODELS)
    - timeout: limit czasu solvera w sekundach, 0 = brak (ZEBRA_TIMEOUT)
    - aliases: aliasy kategorii "stara=nowa,..."         (ZEBRA_CATEGORY_ALIASES)
    """
    models:  int = DEFAULT_MODELS
    timeout: float = 0.0
    aliases: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ALIASES))


def get_settings() -> Settings:
    aliases_raw = os.getenv("ZEBRA_CATEGORY_ALIASES")
    try:
        return Settings(
            models  = int(os.getenv("ZEBRA_MODELS", str(DEFAULT_MODELS))),
            timeout = float(os.getenv("ZEBRA_TIMEOUT", "0")),
            aliases = dict(DEFAULT_ALIASES) if aliases_raw is None else parse_aliases(aliases_raw),
        )
    except ValueError as exc:
        raise ValueError(f"Nieprawidłowa konfiguracja środowiska: {exc}") from exc
