import io
import os
import subprocess
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from chardump import cli


def run_cli(
    monkeypatch: pytest.MonkeyPatch, data: bytes, argv: list
) -> int:
    monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=io.BytesIO(data)))
    return cli.main(argv)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CHARDUMP_CHARSET", "CHARDUMP_TRACE", "CHARDUMP_CHUNK_SIZE"):
        monkeypatch.delenv(name, raising=False)


def test_default_charset_is_utf8(monkeypatch, capsys) -> None:
    assert run_cli(monkeypatch, "aあ".encode("utf-8"), []) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "a\tU+0061\t61\tLATIN SMALL LETTER A",
        "あ\tU+3042\te3 81 82\tHIRAGANA LETTER A",
    ]


def test_charset_option_is_case_insensitive(monkeypatch, capsys) -> None:
    assert run_cli(monkeypatch, b"\x61\x00\x00\xd8", ["-c", "utf-16le"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["a\tU+0061\t61 00\tLATIN SMALL LETTER A", "\t\t00 d8\t"]


def test_malformed_input_does_not_abort(monkeypatch, capsys) -> None:
    assert run_cli(monkeypatch, b"\xc1\xa1\xff\x62", ["--charset", "UTF-8"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "a\tU+0061\tc1 a1\t[Redundant encoding]LATIN SMALL LETTER A",
        "\t\tff\t",
        "b\tU+0062\t62\tLATIN SMALL LETTER B",
    ]


def test_unknown_charset_prints_usage(monkeypatch, capsys) -> None:
    assert run_cli(monkeypatch, b"a", ["-c", "EBCDIC"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage: chardump" in captured.err
    assert "EBCDIC" in captured.err


def test_charset_from_environment(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CHARDUMP_CHARSET", "UTF-32LE")
    assert run_cli(monkeypatch, b"\x3d\x9e\x02\x00", []) == 0
    assert capsys.readouterr().out == "𩸽\tU+29E3D\t3d 9e 02 00\tCJK UNIFIED IDEOGRAPH-29E3D\n"


def test_run_counts_lines() -> None:
    out = io.StringIO()
    count = cli.run("UTF-16", io.BytesIO(b"\x00\x61\xd8\x00"), out, chunk_size=1)
    assert count == 2
    assert out.getvalue().splitlines()[1] == "\t\td8 00\t"


class ClosedPipe(io.StringIO):
    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")


def test_broken_pipe_exits_quietly(monkeypatch, capsys) -> None:
    silenced = []
    monkeypatch.setattr(cli, "_silence_stdout", lambda: silenced.append(True))
    monkeypatch.setattr(sys, "stdout", ClosedPipe())
    assert run_cli(monkeypatch, b"abc", []) == 0
    assert silenced == [True]
    assert capsys.readouterr().err == ""


REPO_ROOT = Path(__file__).resolve().parent.parent


def run_module(data: bytes, args: list, trace_env: str | None = None):
    env = {k: v for k, v in os.environ.items() if not k.startswith("CHARDUMP_")}
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(REPO_ROOT), env.get("PYTHONPATH")) if p
    )
    if trace_env is not None:
        env["CHARDUMP_TRACE"] = trace_env
    return subprocess.run(
        [sys.executable, "-m", "chardump", *args],
        input=data,
        cwd=REPO_ROOT,
        env=env,
        capture_output=True,
        check=False,
    )


TRUNCATED_UTF8 = b"\xff\xe3\x81"


def assert_trace_records(stderr: bytes) -> None:
    lines = stderr.decode("utf-8").splitlines()
    assert "DEBUG chardump.decoding.utf8: invalid UTF-8 sequence ff ending at offset 1" in lines
    assert (
        "DEBUG chardump.decoding.utf8: invalid UTF-8 sequence e3 81 ending at offset 3 (truncated)"
        in lines
    )
    assert "DEBUG chardump.decoding.dispatcher: stopped with UNEXPECTED_END at offset 3" in lines


def test_trace_option_logs_to_stderr() -> None:
    out = run_module(TRUNCATED_UTF8, ["--trace", "-c", "utf-8"])
    assert out.returncode == 0, out.stderr
    assert out.stdout.decode("utf-8").splitlines() == ["\t\tff\t", "\t\te3 81\t"]
    assert_trace_records(out.stderr)


def test_trace_from_environment() -> None:
    out = run_module(TRUNCATED_UTF8, ["-c", "utf-8"], trace_env="1")
    assert out.returncode == 0, out.stderr
    assert_trace_records(out.stderr)


def test_no_trace_overrides_environment() -> None:
    out = run_module(TRUNCATED_UTF8, ["--no-trace", "-c", "utf-8"], trace_env="1")
    assert out.returncode == 0, out.stderr
    assert out.stderr == b""
    assert len(out.stdout.splitlines()) == 2


def test_trace_reports_leftover_partial_unit() -> None:
    # High surrogate followed by a single byte: that byte is never consumed.
    out = run_module(b"\xd8\x00\xdc", ["--trace", "-c", "UTF-16BE"])
    assert out.returncode == 0, out.stderr
    assert out.stdout.decode("utf-8").splitlines() == ["\t\td8 00\t"]
    lines = out.stderr.decode("utf-8").splitlines()
    assert "DEBUG chardump.cli: partial unit left undecoded after offset 2" in lines
    assert "DEBUG chardump.cli: wrote 1 lines for 2 bytes" in lines
