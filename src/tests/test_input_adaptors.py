import json
from pathlib import Path

import pytest

from tri_lens import io_utils
from tri_lens import prompting
from tri_lens.input_adaptors import FileInput, TextInput
from tri_lens.models import Message
from tri_lens.models import NarrativeInput


def test_file_input_reads_text(tmp_path: Path) -> None:
    input_path = tmp_path / "input.txt"
    input_path.write_text("ok", encoding="utf-8")

    narrative = FileInput(input_path).load()
    assert narrative.text == "ok"
    assert narrative.kind == "text"
    assert narrative.source_path == str(input_path)


def test_file_input_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileInput(tmp_path / "missing.txt")


def test_load_input_json(tmp_path: Path) -> None:
    json_path = tmp_path / "in.json"
    json_path.write_text(json.dumps({"a": 1}), encoding="utf-8")
    narrative = io_utils.load_input(json_path)
    assert narrative.kind == "json"
    assert narrative.data == {"a": 1}
    assert "\n" in narrative.text


def test_load_input_json_requires_object(tmp_path: Path) -> None:
    json_path = tmp_path / "in.json"
    json_path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        io_utils.load_input(json_path)


def test_text_input_is_inline() -> None:
    narrative = TextInput("hello").load()
    assert narrative.source_path == "inline_input.txt"
    assert narrative.data is None


def test_load_history(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    path.write_text(json.dumps([{"role": "user", "text": "hi"}, {"role": "model", "text": "hey"}]), encoding="utf-8")
    assert io_utils.load_history(path) == [Message(role="user", text="hi"), Message(role="model", text="hey")]

    path.write_text(json.dumps({"role": "user"}), encoding="utf-8")
    with pytest.raises(ValueError):
        io_utils.load_history(path)


def test_write_output_creates_parent(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "out.txt"
    io_utils.write_output(out_path, "data")
    assert out_path.read_text(encoding="utf-8") == "data"


def test_make_user_prompt_for_text_file() -> None:
    narrative = NarrativeInput(source_path="file.txt", kind="text", text="hi", data=None)
    prompt = prompting.make_user_prompt(narrative)

    assert prompt == "# Narrative Input\nsource_path: file.txt\nkind: text\n\n## Narrative\nhi\n"
