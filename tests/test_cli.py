import io
import json
import logging
from pathlib import Path

import pytest

from morse_converter import cli


@pytest.fixture(autouse=True)
def _log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    return tmp_path / "logs"


def _run(argv, stdin_text=""):
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = cli.main(argv, stdin=io.StringIO(stdin_text), stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


def test_encode_from_arguments_joins_words_with_spaces():
    code, out, err = _run(["hi", "you"])
    assert code == 0
    assert out == ".... .. / -.-- --- ..-\n"
    assert err == ""


def test_decode_flag_inverts_direction():
    code, out, _err = _run(["--decode", "...", "---", "..."])
    assert code == 0
    assert out == "SOS\n"


def test_reads_stdin_when_no_arguments_and_strips_one_newline():
    code, out, _err = _run([], "sos\n")
    assert code == 0
    assert out == "... --- ...\n"

    code, out, _err = _run(["-d"], ".... ..\r\n")
    assert out == "HI\n"


def test_stdin_keeps_inner_newlines_as_passthrough():
    _code, out, _err = _run([], "a\nb\n")
    assert out == ".- \n -...\n"


def test_json_output():
    code, out, _err = _run(["--json", "sos"])
    assert code == 0
    assert json.loads(out) == {"mode": "encode", "input": "sos", "output": "... --- ..."}


def test_unmapped_input_never_fails():
    code, out, _err = _run(["日本"])
    assert code == 0
    assert out == "日 本\n"


def test_collisions_listing():
    code, out, _err = _run(["--collisions"])
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 2
    assert any(line.startswith(".-..-.\t") and line.endswith("decodes to '}'") for line in lines)
    assert any(line.startswith("-.-.-.\t") and line.endswith("decodes to '|'") for line in lines)


def test_copy_uses_system_clipboard(monkeypatch):
    copied = []
    monkeypatch.setattr(cli.SystemClipboard, "write", lambda _self, text: copied.append(text))

    code, out, err = _run(["--copy", "e"])

    assert code == 0
    assert out == ".\n"
    assert copied == ["."]
    assert err == ""


def test_copy_failure_warns_but_exits_zero(monkeypatch):
    def _fail(_self, _text):
        raise RuntimeError("no clipboard mechanism")

    monkeypatch.setattr(cli.SystemClipboard, "write", _fail)

    code, out, err = _run(["--copy", "e"])

    assert code == 0
    assert out == ".\n"
    assert "could not copy" in err


def test_parser_help_lists_flags():
    help_text = cli._build_parser().format_help()
    for flag in ("--decode", "--copy", "--json", "--collisions"):
        assert flag in help_text


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["-d", "---", "..."], "OS\n"),
        (["-d", "-.-.", "-----"], "C0\n"),
        (["---", "-d", "-.-."], "OC\n"),
    ],
)
def test_dash_prefixed_morse_arguments_are_input(argv, expected):
    code, out, err = _run(argv)
    assert code == 0
    assert out == expected
    assert err == ""


def test_dash_prefixed_text_is_encoded_not_rejected():
    code, out, err = _run(["-x"])
    assert code == 0
    assert out == "-....- -..-\n"
    assert err == ""


def test_words_after_double_dash_are_input():
    code, out, _err = _run(["--", "--json"])
    assert code == 0
    assert out == "-....- -....- .--- ... --- -.\n"


def test_split_argv_keeps_word_order():
    flags, words = cli._split_argv(["...", "--copy", "-x", "-d", "---"])
    assert flags == ["--copy", "-d"]
    assert words == ["...", "-x", "---"]


def test_cli_logs_to_file_only(monkeypatch, _log_dir):
    def _fail(_self, _text):
        raise RuntimeError("no clipboard mechanism")

    monkeypatch.setattr(cli.SystemClipboard, "write", _fail)

    code, _out, err = _run(["--copy", "e"])

    assert code == 0
    assert err == "Warning: could not copy the result to the clipboard.\n"
    handlers = logging.getLogger("morse_app").handlers
    assert handlers and all(isinstance(handler, logging.FileHandler) for handler in handlers)
    for handler in handlers:
        handler.flush()
    content = "".join(path.read_text(encoding="utf-8") for path in Path(_log_dir).glob("*.log"))
    assert "Clipboard write failed" in content
    assert "no clipboard mechanism" in content
