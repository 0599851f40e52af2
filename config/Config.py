# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)


@dataclass(frozen=True)
class Config:
    # External document API (UPLOAD_DOCUMENTO)
    upload_documento_url: str
    upload_documento_token: str

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "upload_documento_url": "API_URL_UPLOAD_DOCUMENTO",
        "upload_documento_token": "API_TOKEN_UPLOAD_DOCUMENTO",
    }

    UPLOAD_DOCUMENTO_ENV_VARS = (
        "API_URL_UPLOAD_DOCUMENTO",
        "API_TOKEN_UPLOAD_DOCUMENTO",
    )

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        kwargs = {
            field_name: (os.getenv(env_name) or "").strip()
            for field_name, env_name in Config.ENV_VARS.items()
        }
        return Config(**kwargs)

    def missing_upload_env_vars(self) -> List[str]:
        """
        Env var names still empty for the UPLOAD_DOCUMENTO API.

        Missing credentials are reported when an upload is attempted rather
        than at startup, so extraction-only deployments still boot.
        """
        return [
            self.ENV_VARS[f]
            for f in ("upload_documento_url", "upload_documento_token")
            if not getattr(self, f)
        ]

    @property
    def upload_configured(self) -> bool:
        return not self.missing_upload_env_vars()

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "upload_documento_url": self.upload_documento_url,
            "upload_documento_token_set": bool(self.upload_documento_token),
        }
