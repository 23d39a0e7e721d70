from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import cast

import click

from ..config import load_config
from ..models import PROFILE_LABELS, ProfileLabel
from .profile_store import JsonProfileStore, profile_to_dict
from .profiles import calibrate


@click.group(name="calibration")
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Override profile_store_path config value.",
)
@click.pass_context
def calibration_group(
    ctx: click.Context, config_path: str | None, store_path: str | None
) -> None:
    """Commands for managing human/AI calibration profiles."""
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc
    if store_path is not None:
        cfg.profile_store_path = store_path
    ctx.obj = {"config": cfg, "store": JsonProfileStore(cfg.profile_store_path)}


@calibration_group.command("save")
@click.option("--label", type=click.Choice(PROFILE_LABELS), required=True)
@click.argument("sample", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def save_profile(ctx: click.Context, label: str, sample: str) -> None:
    """Capture a reference profile from a known-human or known-AI sample."""
    text = Path(sample).read_text(encoding="utf-8")
    try:
        profile = calibrate(
            ctx.obj["store"], cast(ProfileLabel, label), text, ctx.obj["config"].threshold
        )
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(profile_to_dict(profile), indent=2))


@calibration_group.command("show")
@click.pass_context
def show_profiles(ctx: click.Context) -> None:
    """Print the stored profiles (null when a label has none)."""
    store: JsonProfileStore = ctx.obj["store"]
    payload = {}
    for label in PROFILE_LABELS:
        profile = store.load(label)
        payload[label] = profile_to_dict(profile) if profile else None
    click.echo(json.dumps(payload, indent=2))


@calibration_group.command("clear")
@click.pass_context
def clear_profiles(ctx: click.Context) -> None:
    """Remove both calibration profiles."""
    store: JsonProfileStore = ctx.obj["store"]
    store.clear()
    click.echo(f"Cleared calibration profiles at {store.path}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    calibration_group()
