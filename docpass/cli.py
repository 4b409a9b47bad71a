"""CLI entry point for the docpass hook.

Cursor runs this once per hook event with the payload on stdin:

    docpass [--model <id>] [--log] [--config <path>] < payload.json

stdout always receives a single JSON object; diagnostics go to stderr.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from docpass.config import DocpassConfig, load_config
from docpass.hooks import PayloadError, dispatch, read_payload
from docpass.paths import project_root

app = typer.Typer(
    name="docpass",
    help="Cursor hook that runs a documentation pass after a conversation edits files.",
    add_completion=False,
)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_logging(level: str) -> None:
    """Send docpass log records to stderr; stdout is reserved for the hook response."""
    pkg_logger = logging.getLogger("docpass")
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)
    pkg_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)
    )
    pkg_logger.setLevel(_LOG_LEVELS[level])


def _model_from_args(args: list[str]) -> str | None:
    """Pull --model out of the pass-through arguments.

    Parsed by hand so that a bare trailing --model is ignored instead of
    failing the whole hook run.
    """
    model = None
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--model" and i + 1 < len(args) and args[i + 1]:
            model = args[i + 1]
            i += 1
        elif arg.startswith("--model="):
            model = arg[len("--model="):]
        i += 1
    return model or None


def _fail(message: str) -> NoReturn:
    typer.echo(f"docpass hook error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    log: Annotated[
        bool, typer.Option("--log", help="Append the doc agent's output to agent.log.")
    ] = False,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to docpass.yaml")
    ] = None,
) -> None:
    """Handle one hook event read from stdin.

    --model <id> or --model=<id> picks the doc agent's model ('auto' lets the
    agent choose). Other arguments are ignored.
    """
    model = _model_from_args(ctx.args)
    root = project_root()

    try:
        cfg: DocpassConfig = load_config(config, root)
    except ValueError as e:
        _fail(str(e))

    _configure_logging(cfg.log_level)

    updates: dict[str, object] = {}
    if model is not None:
        updates["model"] = model
    if log:
        updates["log_output"] = True
    options = cfg.agent.model_copy(update=updates)

    try:
        payload = read_payload()
        response = dispatch(payload, options, root)
    except (PayloadError, OSError) as e:
        _fail(str(e))

    typer.echo(json.dumps(response))


if __name__ == "__main__":
    app()
