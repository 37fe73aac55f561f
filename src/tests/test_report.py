import logging
from types import SimpleNamespace

import pytest

from tri_lens.errors import InvalidReportFormat, JsonSyntaxInvalid, NoJsonFound, UnbalancedBraces
from tri_lens.models import AnalysisResult
from tri_lens.report import collect_grounding_chunks
from tri_lens.report import grounding_sources_from_chunks
from tri_lens.report import load_report_json
from tri_lens.report import parse_report


def test_parse_report_from_noisy_output() -> None:
    text = 'Here is the result: {"verdict":"true","summary":"ok","sources":[{"id":1}],"extra":"kept"} Thanks!'
    report = parse_report(text)

    assert isinstance(report, AnalysisResult)
    assert report.verdict == "true"
    assert report.summary == "ok"
    assert report.sources == [{"id": 1}]
    assert report.model_dump()["extra"] == "kept"
    assert report.grounding_sources == []


def test_parse_report_accepts_camel_case_grounding_sources() -> None:
    report = parse_report('{"verdict": "false", "groundingSources": [{"title": "A", "uri": "https://a"}]}')

    assert report.grounding_sources[0].uri == "https://a"
    dumped = report.model_dump(by_alias=True)
    assert dumped["groundingSources"] == [{"title": "A", "uri": "https://a"}]


def test_load_report_json_wraps_syntax_errors() -> None:
    with pytest.raises(JsonSyntaxInvalid):
        load_report_json('{"a": 1,}')


@pytest.mark.parametrize(
    ("text", "cause"),
    [
        ("no json at all", NoJsonFound),
        ('truncated {"verdict": "tr', UnbalancedBraces),
        ("{'single': 'quotes'}", JsonSyntaxInvalid),
    ],
)
def test_parse_report_maps_failures_to_single_error(text: str, cause: type[Exception]) -> None:
    with pytest.raises(InvalidReportFormat) as excinfo:
        parse_report(text)

    assert str(excinfo.value) == "Invalid intelligence report format."
    assert isinstance(excinfo.value.__cause__, cause)


def test_parse_report_maps_schema_errors() -> None:
    with pytest.raises(InvalidReportFormat):
        parse_report('{"confidence": "very"}')


def test_parse_report_logs_raw_text(caplog: pytest.LogCaptureFixture) -> None:
    raw = "The model rambled {without closing"
    with caplog.at_level(logging.ERROR, logger="tri_lens.report"):
        with pytest.raises(InvalidReportFormat):
            parse_report(raw)

    assert "UnbalancedBraces" in caplog.text
    assert "The model rambled {without closing" in caplog.text


def test_grounding_sources_from_chunks_filters_and_defaults() -> None:
    chunks = [
        {"web": {"title": "Wire story", "uri": "https://news.example/1"}},
        {"web": {"uri": "https://news.example/2"}},
        {"web": {"title": "No uri"}},
        {"retrieved_context": {"uri": "gs://bucket"}},
        "not a chunk",
    ]
    sources = grounding_sources_from_chunks(chunks)

    assert [(s.title, s.uri) for s in sources] == [
        ("Wire story", "https://news.example/1"),
        ("External Intelligence Source", "https://news.example/2"),
    ]


def test_collect_grounding_chunks_reads_web_search_returns() -> None:
    list_part = SimpleNamespace(
        part_kind="builtin-tool-return",
        tool_name="web_search",
        content=[{"web": {"title": "A", "uri": "https://a"}}],
    )
    dict_part = SimpleNamespace(
        part_kind="builtin-tool-return",
        tool_name="web_search",
        content={"groundingChunks": [{"web": {"uri": "https://b"}}]},
    )
    other_tool = SimpleNamespace(part_kind="builtin-tool-return", tool_name="code_execution", content=[{"web": {}}])
    text_part = SimpleNamespace(part_kind="text", content="hello")
    messages = [
        SimpleNamespace(parts=[text_part, list_part]),
        SimpleNamespace(parts=[other_tool, dict_part]),
        SimpleNamespace(),
    ]

    chunks = collect_grounding_chunks(messages)

    assert chunks == [{"web": {"title": "A", "uri": "https://a"}}, {"web": {"uri": "https://b"}}]


def test_grounding_sources_from_flat_web_entries() -> None:
    chunks = [
        {"domain": "news.example", "title": "Wire story", "uri": "https://news.example/1"},
        {"domain": None, "title": None, "uri": "https://news.example/2"},
        {"domain": "news.example", "title": "No uri"},
    ]
    sources = grounding_sources_from_chunks(chunks)

    assert [(s.title, s.uri) for s in sources] == [
        ("Wire story", "https://news.example/1"),
        ("External Intelligence Source", "https://news.example/2"),
    ]


def test_collect_grounding_chunks_reads_sources_dict() -> None:
    part = SimpleNamespace(
        part_kind="builtin-tool-return",
        tool_name="web_search",
        content={"queries": ["bridge"], "sources": [{"title": "A", "uri": "https://a.example"}]},
    )

    chunks = collect_grounding_chunks([SimpleNamespace(parts=[part])])

    assert grounding_sources_from_chunks(chunks)[0].uri == "https://a.example"


def as_parts(mapped: object) -> list[object]:
    if mapped is None:
        return []
    if isinstance(mapped, (list, tuple)):
        return [item for item in mapped if item is not None]
    return [mapped]


def test_grounding_sources_from_google_model_parts() -> None:
    google_model = pytest.importorskip("pydantic_ai.models.google")
    genai_types = pytest.importorskip("google.genai.types")
    metadata = genai_types.GroundingMetadata(
        web_search_queries=["bridge opening date"],
        grounding_chunks=[
            genai_types.GroundingChunk(web=genai_types.GroundingChunkWeb(uri="https://a.example", title="A")),
            genai_types.GroundingChunk(web=genai_types.GroundingChunkWeb(uri="https://b.example")),
        ],
    )
    parts = as_parts(google_model._map_grounding_metadata(metadata, "google"))

    chunks = collect_grounding_chunks([SimpleNamespace(parts=parts)])
    sources = grounding_sources_from_chunks(chunks)

    assert [(s.title, s.uri) for s in sources] == [
        ("A", "https://a.example"),
        ("External Intelligence Source", "https://b.example"),
    ]
