"""Model types for configuration, inputs and reports."""

from tri_lens.models.analysis_result import AnalysisResult
from tri_lens.models.analysis_result import GroundingSource
from tri_lens.models.credentials import Credentials
from tri_lens.models.loaded_profile import LoadedProfile
from tri_lens.models.message import Message
from tri_lens.models.model_spec import ModelSpec
from tri_lens.models.narrative_input import NarrativeInput
from tri_lens.models.profile_spec import ProfileSpec

__all__ = [
    "AnalysisResult",
    "Credentials",
    "GroundingSource",
    "LoadedProfile",
    "Message",
    "ModelSpec",
    "NarrativeInput",
    "ProfileSpec",
]
