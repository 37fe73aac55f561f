"""Suspect persona conversations."""

from __future__ import annotations

import logging

from pydantic_ai import Agent
from pydantic_ai.messages import ModelMessage, ModelRequest, ModelResponse, TextPart, UserPromptPart
from pydantic_ai.models import Model
from pydantic_ai.settings import ModelSettings

from tri_lens.models.loaded_profile import LoadedProfile
from tri_lens.models.message import Message


logger = logging.getLogger(__name__)


def to_model_messages(history: list[Message]) -> list[ModelMessage]:
    messages: list[ModelMessage] = []
    for message in history:
        if message.role == "user":
            messages.append(ModelRequest(parts=[UserPromptPart(content=message.text)]))
        else:
            messages.append(ModelResponse(parts=[TextPart(content=message.text)]))
    return messages


class SuspectChat:
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

    async def reply(
        self,
        history: list[Message],
        message: str,
        system_instruction: str | None = None,
    ) -> str:
        agent = Agent(
            self.model,
            instructions=self._build_instructions(system_instruction),
            output_type=str,
            model_settings=self.model_settings,
        )
        logger.debug("Questioning %s with %d prior turns", self.profile.spec.name, len(history))
        result = await agent.run(message, message_history=to_model_messages(history))
        return result.output or ""

    def _build_instructions(self, system_instruction: str | None) -> str | None:
        # Agent system prompts are dropped once a message history exists; instructions are not.
        persona = system_instruction if system_instruction is not None else self.profile.system_prompt
        parts = [text for text in (persona, self.profile.instructions) if text]
        if not parts:
            return None
        return "\n\n".join(parts)
