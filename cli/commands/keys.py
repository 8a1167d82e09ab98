"""Deep-link key commands."""

import json
from typing import List

import typer

from streamscout.keys import CLOUD_FIELDS, DRIVE_FIELDS, decode_params, encode_params

key_app = typer.Typer(help="Encode and decode deep-link keys.", no_args_is_help=True)

_FIELD_SETS = {"drive": DRIVE_FIELDS, "cloud": CLOUD_FIELDS}


def _field_set(kind: str):
    """Return the allowed fields for *kind*, ``None`` for no restriction."""
    if not kind:
        return None
    allowed = _FIELD_SETS.get(kind)
    if allowed is None:
        typer.echo(f"❌ Unknown kind {kind!r}. Use: drive | cloud")
        raise typer.Exit(code=1)
    return allowed


def _parse_fields(pairs: List[str]) -> dict:
    params = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            typer.echo(f"❌ Expected name=value, got {pair!r}.")
            raise typer.Exit(code=1)
        params[name] = value
    return params


@key_app.command("encode")
def key_encode(
    field: List[str] = typer.Option([], "--field", "-f", help="name=value (repeatable)."),
    kind: str = typer.Option("", "--kind", help="Restrict fields: drive | cloud."),
) -> None:
    """Pack fields into a URL-safe key."""
    params = _parse_fields(field)
    allowed = _field_set(kind)
    if allowed is not None:
        unknown = sorted(set(params) - set(allowed))
        if unknown:
            typer.echo(f"❌ Unknown field(s) for {kind}: {', '.join(unknown)}")
            raise typer.Exit(code=1)
    typer.echo(encode_params(params))


@key_app.command("decode")
def key_decode(
    key: str = typer.Argument(..., help="Key produced by 'key encode'."),
    kind: str = typer.Option("", "--kind", help="Restrict fields: drive | cloud."),
) -> None:
    """Print the fields packed in a key as JSON."""
    params = decode_params(key, _field_set(kind))
    if params is None:
        typer.echo("❌ Malformed key.")
        raise typer.Exit(code=1)
    typer.echo(json.dumps(params, indent=2, ensure_ascii=False))
