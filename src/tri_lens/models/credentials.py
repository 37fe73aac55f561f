"""Explicit API credentials, resolved once and injected into callers."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, SecretStr


class Credentials(BaseModel):
    api_key: SecretStr

    @classmethod
    def from_env(cls, env_name: str, environ: Mapping[str, str] | None = None) -> "Credentials":
        source = os.environ if environ is None else environ
        # Local OpenAI-compatible servers accept any key.
        return cls(api_key=SecretStr(source.get(env_name, "noop")))

    def secret(self) -> str:
        return self.api_key.get_secret_value()
