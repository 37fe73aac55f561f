"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tri_lens.errors import InvalidReportFormat
from tri_lens.input_adaptors import FileInput, InputAdaptor, TextInput
from tri_lens.io_utils import load_history, write_output
from tri_lens.models.message import Message
from tri_lens.orchestrator import Orchestrator


async def run_analysis(orch: Orchestrator, profile_id: str, input_adaptor: InputAdaptor) -> str:
    report = await orch.analyze(input_adaptor, profile_id=profile_id)
    return report.model_dump_json(indent=2, by_alias=True)


async def run_interrogation(orch: Orchestrator, persona_id: str, history: list[Message], question: str) -> str:
    return await orch.interrogate(persona_id, history, question)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tri-lens")
    parser.add_argument("--profiles-dir", type=str, default="profiles")
    parser.add_argument("--profile", type=str, default="analyst", help="Analysis profile ID")
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("--input", type=str, help="Path to a narrative file")
    input_group.add_argument("--input-text", type=str, help="Raw narrative text")
    parser.add_argument("--persona", type=str, help="Question this suspect persona instead of analyzing")
    parser.add_argument("--history", type=str, help="JSON list of prior {role, text} messages")
    parser.add_argument("--output", type=str, help="Write the result to this path")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    orch = Orchestrator([Path(args.profiles_dir)])

    # Async entrypoint
    import anyio

    if args.persona:
        if args.input_text is not None:
            question = args.input_text
        else:
            question = Path(args.input).read_text(encoding="utf-8")
        history = load_history(Path(args.history)) if args.history else []
        out = anyio.run(run_interrogation, orch, args.persona, history, question)
    else:
        input_adaptor: InputAdaptor
        if args.input_text is not None:
            input_adaptor = TextInput(args.input_text)
        else:
            input_adaptor = FileInput(Path(args.input))
        try:
            out = anyio.run(run_analysis, orch, args.profile, input_adaptor)
        except InvalidReportFormat as exc:
            print(str(exc), file=sys.stderr)
            return 1

    if args.output:
        write_output(Path(args.output), out)
    else:
        print(out)
    return 0
