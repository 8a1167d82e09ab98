"""Tests for the StreamScout CLI."""

import json
from unittest.mock import AsyncMock

import pytest
from typer.testing import CliRunner

from cli.commands.keys import key_app
from cli.main import app
from cli.rendering import render_result
from streamscout.keys import decode_params, encode_params
from streamscout.scraper.errors import Stage, TokenNotFound, TransportError
from streamscout.scraper.models import Link, PipelineResult

runner = CliRunner()

_RESULT = PipelineResult(
    links=[
        Link(url="https://pub-1.dev/abc", label="FastServer", is_trusted=True),
        Link(url="https://random.example/x", label="Slow Mirror", is_trusted=False),
    ],
    page_title="Movie (2024) Hindi V-Cloud 1080p.zip",
    is_zip_file=True,
)


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from reconfiguring the root logger during tests."""
    monkeypatch.setattr("cli.main.setup_logging", lambda level=None: None)


def test_resolve_prints_ranked_links(monkeypatch):
    monkeypatch.setattr("cli.main.process_url", AsyncMock(return_value=_RESULT))

    result = runner.invoke(app, ["resolve", "https://gate.example/x"])

    assert result.exit_code == 0
    out = result.stdout
    assert out.index("FastServer") < out.index("Slow Mirror")
    assert "Trusted servers:" in out
    assert "Zip    : yes" in out
    assert "N-Cloud" in out
    assert "Audio  : Hindi" in out


def test_resolve_json(monkeypatch):
    monkeypatch.setattr("cli.main.process_url", AsyncMock(return_value=_RESULT))

    result = runner.invoke(app, ["resolve", "https://gate.example/x", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == _RESULT.to_dict()


def test_resolve_failure_exits_1(monkeypatch):
    monkeypatch.setattr(
        "cli.main.process_url",
        AsyncMock(side_effect=TokenNotFound(stage=Stage.RESOLVING_TOKEN)),
    )

    result = runner.invoke(app, ["resolve", "https://gate.example/x"])

    assert result.exit_code == 1
    assert "Could not find the tokenized URL" in result.output


def test_render_result_without_title():
    text = render_result(PipelineResult(links=_RESULT.links[1:], page_title="", is_zip_file=False))
    assert "Title  : (none)" in text
    assert "Trusted servers:" not in text
    assert "Zip" not in text


def test_key_encode_decode_roundtrip():
    result = runner.invoke(key_app, ["encode", "-f", "id=42", "-f", "title=A = B", "--kind", "cloud"])
    assert result.exit_code == 0
    key = result.stdout.strip()
    assert decode_params(key) == {"id": "42", "title": "A = B"}

    result = runner.invoke(key_app, ["decode", key])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"id": "42", "title": "A = B"}


def test_key_encode_rejects_unknown_field():
    result = runner.invoke(key_app, ["encode", "-f", "bogus=1", "--kind", "drive"])
    assert result.exit_code == 1
    assert "bogus" in result.stdout


def test_key_decode_malformed():
    result = runner.invoke(key_app, ["decode", "!!!"])
    assert result.exit_code == 1
    assert "Malformed key" in result.stdout


def test_key_decode_kind_restriction():
    key = encode_params({"link": "https://x.example/"})
    assert runner.invoke(key_app, ["decode", key, "--kind", "cloud"]).exit_code == 1
    assert runner.invoke(key_app, ["decode", key, "--kind", "drive"]).exit_code == 0


def test_key_commands_reject_unknown_kind():
    key = encode_params({"id": "1"})
    for args in (["decode", key, "--kind", "bogus"], ["encode", "-f", "id=1", "--kind", "bogus"]):
        result = runner.invoke(key_app, args)
        assert result.exit_code == 1
        assert "Unknown kind 'bogus'" in result.stdout


def test_resolve_transport_failure_exits_1(monkeypatch):
    monkeypatch.setattr(
        "cli.main.process_url",
        AsyncMock(side_effect=TransportError("Could not reach https://gate.example/x: loop")),
    )

    result = runner.invoke(app, ["resolve", "https://gate.example/x"])

    assert result.exit_code == 1
    assert "Could not reach" in result.output
