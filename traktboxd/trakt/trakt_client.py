from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, cast

import requests

from traktboxd.trakt.models import JsonObj
from traktboxd.utils.config import ENV_PATH, get_required
from traktboxd.utils.logger import LoggerProtocol, ensure_logger

API_URL = "https://api.trakt.tv"
WATCHED_MOVIES_ENDPOINT = "/users/me/watched/movies"
RATINGS_MOVIES_ENDPOINT = "/users/me/ratings/movies"


class TraktClient:
    def __init__(self, logger: LoggerProtocol | None = None, env_path: Path = ENV_PATH) -> None:
        self.logger = ensure_logger(logger, __name__)
        self.env_path = env_path
        self._api_key = get_required("API_KEY")
        self._api_secret = get_required("API_SECRET")
        self._redirect_uri = get_required("REDIRECT_URI")
        self._access_token: str = get_required("ACCESS_TOKEN")
        self._refresh_token: str = get_required("REFRESH_TOKEN")

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "User-Agent": "traktboxd/1.0",
                "trakt-api-key": self._api_key,
                "trakt-api-version": "2",
            }
        )

    def _update_env(self, key: str, value: str) -> None:
        dotenv_path = self.env_path
        try:
            if dotenv_path.exists():
                lines = dotenv_path.read_text(encoding="utf-8").splitlines()
                updated = False
                for i, line in enumerate(lines):
                    if line.startswith(f"{key}="):
                        lines[i] = f"{key}={value}"
                        updated = True
                        break
                if not updated:
                    lines.append(f"{key}={value}")
                dotenv_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as exc:
            self.logger.warning("Impossible de mettre à jour .env: %s", exc)

    def refresh_access_token(self) -> None:
        self.logger.info("🔄 Rafraîchissement du token…")
        data = {
            "refresh_token": self._refresh_token,
            "client_id": self._api_key,
            "client_secret": self._api_secret,
            "redirect_uri": self._redirect_uri,
            "grant_type": "refresh_token",
        }
        r = self.session.post(f"{API_URL}/oauth/token", json=data, timeout=15)
        r.raise_for_status()
        tokens: dict[str, str] = r.json()
        self._access_token = tokens["access_token"]
        self._refresh_token = tokens["refresh_token"]

        os.environ["ACCESS_TOKEN"] = self._access_token
        os.environ["REFRESH_TOKEN"] = self._refresh_token

        self._update_env("ACCESS_TOKEN", self._access_token)
        self._update_env("REFRESH_TOKEN", self._refresh_token)
        self.logger.info("✅ Token rafraîchi")

    def trakt_get(self, endpoint: str) -> JsonObj | list[JsonObj]:
        headers = {"Authorization": f"Bearer {self._access_token}"}
        r = self.session.get(f"{API_URL}{endpoint}", headers=headers, timeout=20)
        if r.status_code == 401:
            self.refresh_access_token()
            headers = {"Authorization": f"Bearer {self._access_token}"}
            r = self.session.get(f"{API_URL}{endpoint}", headers=headers, timeout=20)
        r.raise_for_status()
        data: Any = r.json()
        if isinstance(data, list):
            return cast(list[JsonObj], data)
        return cast(JsonObj, data)

    def backup_endpoint(self, endpoint: str, out_file: Path) -> None:
        out_file.parent.mkdir(parents=True, exist_ok=True)
        data = self.trakt_get(endpoint)
        with out_file.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        self.logger.info("📥 Sauvegarde %s → %s", endpoint, out_file)

    def export_history(self, watched_path: Path, ratings_path: Path) -> None:
        """Télécharge les deux exports nécessaires à la conversion Letterboxd."""
        self.backup_endpoint(WATCHED_MOVIES_ENDPOINT, watched_path)
        self.backup_endpoint(RATINGS_MOVIES_ENDPOINT, ratings_path)
