"""Entry point for analysis and interrogation runs."""

from __future__ import annotations

from pathlib import Path

from pydantic_ai.models import Model

from tri_lens.analyst import NarrativeAnalyst
from tri_lens.input_adaptors import InputAdaptor, TextInput
from tri_lens.llm import build_model, build_model_settings
from tri_lens.models.analysis_result import AnalysisResult
from tri_lens.models.credentials import Credentials
from tri_lens.models.loaded_profile import LoadedProfile
from tri_lens.models.message import Message
from tri_lens.profile_registry import PACKAGED_PROFILES_DIR, ProfileRegistry
from tri_lens.suspect import SuspectChat


class Orchestrator:
    """
    Owns the profile registry, credentials and built models for one process.
    Credentials are resolved once here (or passed in) and never re-read from the environment.
    """

    def __init__(
        self,
        profile_roots: list[Path] | None = None,
        credentials: dict[str, Credentials] | None = None,
    ) -> None:
        self.registry: ProfileRegistry = ProfileRegistry((profile_roots or []) + [PACKAGED_PROFILES_DIR])
        self._credentials: dict[str, Credentials] = dict(credentials or {})
        self._models: dict[tuple[str, str, str, str], Model] = {}

    def credentials_for(self, profile: LoadedProfile) -> Credentials:
        env_name = profile.spec.model.api_key_env
        if env_name not in self._credentials:
            self._credentials[env_name] = Credentials.from_env(env_name)
        return self._credentials[env_name]

    def model_for(self, profile: LoadedProfile) -> Model:
        spec = profile.spec.model
        key = (spec.provider, spec.base_url, spec.model_name, spec.api_key_env)
        if key not in self._models:
            self._models[key] = build_model(spec, self.credentials_for(profile))
        return self._models[key]

    async def analyze(self, input_data: InputAdaptor | str, profile_id: str = "analyst") -> AnalysisResult:
        profile = self.registry.get(profile_id)
        analyst = NarrativeAnalyst(
            profile=profile,
            model=self.model_for(profile),
            model_settings=build_model_settings(profile.spec.model),
        )
        if isinstance(input_data, str):
            input_data = TextInput(input_data)
        return await analyst.run(input_data)

    async def interrogate(
        self,
        persona_id: str,
        history: list[Message],
        message: str,
        system_instruction: str | None = None,
    ) -> str:
        profile = self.registry.get(persona_id)
        chat = SuspectChat(
            profile=profile,
            model=self.model_for(profile),
            model_settings=build_model_settings(profile.spec.model),
        )
        return await chat.reply(history, message, system_instruction=system_instruction)
