"""Model construction from profile configuration."""

from __future__ import annotations

from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from tri_lens.models.credentials import Credentials
from tri_lens.models.model_spec import ModelSpec


def build_model(model_spec: ModelSpec, credentials: Credentials) -> Model:
    if model_spec.provider == "openai-compatible":
        provider = OpenAIProvider(base_url=model_spec.base_url, api_key=credentials.secret())
        return OpenAIChatModel(model_spec.model_name, provider=provider)
    if model_spec.provider == "google":
        # Only needed when a profile targets Gemini directly.
        from pydantic_ai.models.google import GoogleModel
        from pydantic_ai.providers.google import GoogleProvider

        return GoogleModel(model_spec.model_name, provider=GoogleProvider(api_key=credentials.secret()))
    raise ValueError(f"Unknown model provider: {model_spec.provider!r}")


def build_model_settings(model_spec: ModelSpec) -> ModelSettings:
    return {"temperature": model_spec.temperature, "max_tokens": model_spec.max_tokens}


def supports_grounding(model_spec: ModelSpec) -> bool:
    return model_spec.grounding and model_spec.provider == "google"
