from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import typer
import yaml

from .calibration import JsonProfileStore
from .config import SignalsConfig, load_config
from .report import InvalidRequestError, build_report

app = typer.Typer(help="Writing signals CLI.", no_args_is_help=True)

# File types the CLI knows how to read as documents.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@app.callback()
def configure_logging(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Heuristic AI-style and citation signals for submitted writing."""
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'. Choose from {', '.join(LOG_LEVELS)}.",
            param_hint="--log-level",
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    threshold: float | None = typer.Option(
        None,
        "--threshold",
        "-t",
        min=0.0,
        max=1.0,
        help="Sentence score at or above which a sentence is flagged.",
    ),
    profile_store: Path | None = typer.Option(
        None, "--profile-store", help="Override profile_store_path config value."
    ),
) -> None:
    """Analyze a text file or directory and emit a JSON report per document."""
    cfg = _load_config(config)
    _apply_overrides(cfg, threshold, profile_store)
    store = JsonProfileStore(cfg.profile_store_path)
    documents = _load_documents(input_path)
    summary: List[Dict[str, Any]] = []
    for doc_id, text in documents:
        try:
            report = build_report({"text": text}, cfg, store)
        except InvalidRequestError:
            typer.echo(f"[warn] Skipping {doc_id}: no text.", err=True)
            continue
        summary.append({"doc_id": doc_id, **report})
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def check(
    request_path: str = typer.Argument(
        "-", help="JSON request file holding {\"text\": ...}; '-' reads stdin."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    with_calibration: bool = typer.Option(
        True,
        "--with-calibration/--without-calibration",
        help="Include the calibration verdict from the profile store.",
    ),
) -> None:
    """Answer a single JSON request the way the service boundary does."""
    cfg = _load_config(config)
    if request_path == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(request_path).read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise typer.BadParameter(f"Request is not valid JSON: {exc}") from exc
    store = JsonProfileStore(cfg.profile_store_path) if with_calibration else None
    try:
        report = build_report(payload, cfg, store)
    except InvalidRequestError as exc:
        typer.echo(json.dumps({"error": str(exc)}), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(report, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = SignalsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config(path: Path | None) -> SignalsConfig:
    try:
        return load_config(path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _apply_overrides(
    config: SignalsConfig,
    threshold: float | None,
    profile_store: Path | None,
) -> None:
    if threshold is not None:
        config.threshold = threshold
    if profile_store is not None:
        config.profile_store_path = str(profile_store)


def _load_documents(input_path: Path) -> List[Tuple[str, str]]:
    """Expand the input path into (doc_id, text) pairs."""
    if input_path.is_file():
        return [(input_path.name, input_path.read_text(encoding="utf-8"))]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    # Relative paths keep doc IDs stable across machines.
    return [
        (str(file.relative_to(input_path)), file.read_text(encoding="utf-8"))
        for file in files
    ]


if __name__ == "__main__":
    main()
