# config.py
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Chargement du .env à la racine du projet (l'environnement du process reste prioritaire)
ENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

# --- Fonctions utilitaires ---


def get_required(key: str) -> str:
    value = os.getenv(key)
    if value is None:
        print(f"[CONFIG ERROR] La variable {key} est requise mais absente.")
        sys.exit(1)
    return value


def get_bool(key: str, default: str = "false") -> bool:
    return os.getenv(key, default).lower() in ("true", "1", "yes")


def get_str(key: str, default: str = "") -> str:
    return os.getenv(key, default)


def get_int(key: str, default: int = 0) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        print(f"[CONFIG ERROR] La variable {key} doit être un entier.")
        sys.exit(1)


# --- Variables d'environnement accessibles globalement ---

LOG_FILE_PATH = get_str("LOG_FILE_PATH", "logs")
LOG_ROTATION_DAYS = get_int("LOG_ROTATION_DAYS", 30)

# Fichiers d'entrée (export Trakt) et de sortie (import Letterboxd)
WATCHED_JSON_PATH = Path(get_str("WATCHED_JSON_PATH", "watched-movies.json"))
RATINGS_JSON_PATH = Path(get_str("RATINGS_JSON_PATH", "ratings-movies.json"))
OUTPUT_CSV_PATH = Path(get_str("OUTPUT_CSV_PATH", "letterboxd_import.csv"))

# Fuseau pour dériver les dates (vide = fuseau local de la machine)
TIMEZONE = get_str("TIMEZONE", "")
