"""Narrative analysis runs."""

from __future__ import annotations

import logging
from typing import Any

from pydantic_ai import Agent
from pydantic_ai.builtin_tools import WebSearchTool
from pydantic_ai.models import Model
from pydantic_ai.settings import ModelSettings

from tri_lens.input_adaptors import InputAdaptor
from tri_lens.llm import supports_grounding
from tri_lens.models.analysis_result import AnalysisResult
from tri_lens.models.loaded_profile import LoadedProfile
from tri_lens.prompting import make_user_prompt
from tri_lens.report import collect_grounding_chunks, grounding_sources_from_chunks, parse_report


logger = logging.getLogger(__name__)


class NarrativeAnalyst:
    def __init__(
        self,
        *,
        profile: LoadedProfile,
        model: Model,
        model_settings: ModelSettings | None = None,
    ) -> None:
        self.profile: LoadedProfile = profile
        self.model: Model = model
        self.model_settings: ModelSettings | None = model_settings

    async def run(self, input_data: InputAdaptor) -> AnalysisResult:
        narrative = input_data.load()
        user_prompt = make_user_prompt(narrative)
        agent = Agent(
            self.model,
            instructions=self._normalize_agent_text(self.profile.instructions),
            system_prompt=self._normalize_system_prompt(self.profile.system_prompt),
            output_type=str,
            model_settings=self.model_settings,
            builtin_tools=self._builtin_tools(),
        )
        logger.debug("Analyzing narrative from %s with profile %s", narrative.source_path, self.profile.spec.name)
        result = await agent.run(user_prompt)

        report = parse_report(result.output or "")
        sources = grounding_sources_from_chunks(collect_grounding_chunks(result.all_messages()))
        if sources:
            report.grounding_sources = sources
        return report

    def _builtin_tools(self) -> list[Any]:
        if supports_grounding(self.profile.spec.model):
            return [WebSearchTool()]
        return []

    def _normalize_agent_text(self, text: str) -> str | None:
        if text:
            return text
        return None

    def _normalize_system_prompt(self, text: str) -> str | list[str]:
        if text:
            return text
        return []
