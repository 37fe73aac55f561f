"""Public package exports."""

from tri_lens.errors import InvalidReportFormat
from tri_lens.input_adaptors import FileInput
from tri_lens.input_adaptors import InputAdaptor
from tri_lens.input_adaptors import TextInput
from tri_lens.json_utils import extract_first_json_object
from tri_lens.orchestrator import Orchestrator
from tri_lens.report import parse_report

__all__ = [
    "FileInput",
    "InputAdaptor",
    "InvalidReportFormat",
    "Orchestrator",
    "TextInput",
    "extract_first_json_object",
    "parse_report",
]
