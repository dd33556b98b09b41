"""Main entry point for the marketfeed command line interface."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from marketfeed.core.config import get_default_config, set_proxy
from marketfeed.core.logging import normalize_level

from .formatters import create_formatter
from .market import register as register_market_commands


def create_app() -> typer.Typer:
    """Create a Typer application instance for marketfeed."""

    app = typer.Typer(add_completion=False, help="Futures market data command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        proxy: str | None = typer.Option(
            None,
            "--proxy",
            envvar="MARKETFEED_PROXY_URL",
            help="Forward proxy URL, e.g. http://127.0.0.1:7890.",
        ),
        strict_status: bool = typer.Option(
            False,
            "--strict-status",
            help="Fail on non-2xx HTTP responses instead of decoding the body.",
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level. Defaults to the configured level, else WARNING.",
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            # Validate formatter eagerly for immediate feedback on invalid options
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "no_color": no_color,
                "strict_status": strict_status,
            }
        )
        try:
            config = get_default_config()
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_hint="configuration") from exc

        if log_level is None:
            log_level = config.logging.level if "level" in config.logging.model_fields_set else "WARNING"
        try:
            level = normalize_level(log_level)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

        config.apply_logging(level)
        if proxy:
            set_proxy(proxy)

    register_market_commands(app)
    return app


app = create_app()


def run() -> None:  # pragma: no cover - console script entry
    app()


__all__ = ["app", "create_app", "run"]
