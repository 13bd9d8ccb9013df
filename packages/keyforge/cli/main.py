"""Command-line interface for keyforge.

Lists presets, builds clips and exports them against a scene file.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from keyforge.core.animation import AnimationClip
from keyforge.core.clips import build_clip
from keyforge.core.config import AnimationParams, AppConfig, load_app_config, load_config
from keyforge.core.easing import UnknownEasingError
from keyforge.core.export import (
    ExportError,
    ExportTarget,
    ExportTrackResolver,
    JsonClipSerializer,
    export_clip,
)
from keyforge.core.presets import (
    PresetCategory,
    PresetNotFoundError,
    get_preset,
    list_presets,
)
from keyforge.core.utils.json import dumps_json, write_json
from keyforge.core.utils.logging import configure_logging

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

_USER_ERRORS = (
    PresetNotFoundError,
    UnknownEasingError,
    ExportError,
    ValidationError,
    FileNotFoundError,
    ValueError,
)


def _params_from_args(config: AppConfig, args: argparse.Namespace) -> AnimationParams:
    """Config-file params with any command-line overrides applied."""
    overrides = {
        field: getattr(args, field)
        for field in ("speed", "intensity", "duration", "easing", "loop_count")
        if getattr(args, field, None) is not None
    }
    return AnimationParams(**{**config.params.model_dump(), **overrides})


def _clip_document(clip: AnimationClip, params: AnimationParams) -> dict[str, Any]:
    return {"params": params.model_dump(mode="json"), "clip": clip.to_dict()}


def cmd_list(args: argparse.Namespace, config: AppConfig) -> int:
    """Print the preset catalog as a table."""
    infos = list_presets(category=args.category)

    table = Table(title=f"Presets ({len(infos)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("", justify="center")
    table.add_column("Description", style="dim")
    for info in infos:
        table.add_row(info.preset_id, info.name, info.category.value, info.icon, info.description)

    console.print(table)
    return 0


def cmd_show(args: argparse.Namespace, config: AppConfig) -> int:
    """Describe one preset and the tracks it generates with the configured params."""
    preset = get_preset(args.preset)
    clip = build_clip(preset, config.params)

    console.print(f"[bold]{preset.icon} {preset.name}[/bold] [dim]({preset.id})[/dim]")
    console.print(f"   Category: {preset.category.value}")
    console.print(f"   {preset.description}")

    table = Table(title=f"Tracks at intensity={config.params.intensity}, duration={clip.duration}s")
    table.add_column("Path", style="cyan")
    table.add_column("Kind")
    table.add_column("Samples", justify="right")
    for track in clip.tracks:
        table.add_row(escape(track.path), track.kind.value, str(track.sample_count))
    console.print(table)
    return 0


def cmd_build(args: argparse.Namespace, config: AppConfig) -> int:
    """Build a clip and write it as JSON to stdout or a file."""
    params = _params_from_args(config, args)
    clip = build_clip(get_preset(args.preset), params)
    document = _clip_document(clip, params)

    if args.output:
        write_json(args.output, document)
        err_console.print(f"[green]✅ Wrote {len(clip.tracks)} tracks to[/green] {args.output}")
    else:
        sys.stdout.write(dumps_json(document) + "\n")
    return 0


def cmd_export(args: argparse.Namespace, config: AppConfig) -> int:
    """Build a clip, resolve it against a scene file and save the export."""
    params = _params_from_args(config, args)
    target = ExportTarget.model_validate(load_config(args.scene))
    resolver_config = config.resolver
    if args.target:
        resolver_config = resolver_config.model_copy(update={"target_name": args.target})

    clip = build_clip(get_preset(args.preset), params)
    artifact = export_clip(
        clip,
        target,
        JsonClipSerializer(),
        resolver=ExportTrackResolver(resolver_config),
    )
    out_dir = Path(args.out) if args.out else config.output_dir
    out_path = artifact.write(out_dir)
    console.print(f"[green]✅ Exported[/green] {clip.name} → {out_path}")
    return 0


_COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "build": cmd_build,
    "export": cmd_export,
}


def _add_param_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--intensity", type=float, help="Motion amplitude multiplier (0.1-3.0)")
    p.add_argument("--duration", type=float, help="Clip duration in seconds (0.5-30)")
    p.add_argument("--speed", type=float, help="Playback rate multiplier (0.1-5.0)")
    p.add_argument("--easing", help="Easing identifier, e.g. easeInOutQuad")
    p.add_argument("--loop-count", dest="loop_count", type=int, help="Number of playback loops")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="keyforge",
        description="keyforge - procedural keyframe animation presets and export",
    )
    p.add_argument("--config", help="Path to app config (.json, .yaml or .yml)")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Override the configured log level",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    sub = p.add_subparsers(dest="cmd", required=True)

    list_cmd = sub.add_parser("list", help="List available presets")
    list_cmd.add_argument(
        "--category", choices=[c.value for c in PresetCategory], help="Only this category"
    )

    show = sub.add_parser("show", help="Describe a preset and its tracks")
    show.add_argument("preset", help="Preset id or name")

    build = sub.add_parser("build", help="Build a clip and print it as JSON")
    build.add_argument("preset", help="Preset id or name")
    _add_param_options(build)
    build.add_argument("-o", "--output", help="Write JSON to this file instead of stdout")

    export = sub.add_parser("export", help="Resolve a clip against a scene and save it")
    export.add_argument("preset", help="Preset id or name")
    export.add_argument("--scene", required=True, help="Scene graph file (.json, .yaml or .yml)")
    export.add_argument("--target", help="Animation target node name")
    _add_param_options(export)
    export.add_argument("-o", "--out", help="Output directory (default: config output_dir)")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_app_config(args.config)
    except _USER_ERRORS as e:
        err_console.print(f"[red]ERROR: Could not load config:[/red] {escape(str(e))}")
        return 1

    level = "DEBUG" if args.verbose else (args.log_level or config.log_level)
    configure_logging(level=level, structured=config.log_format == "json")

    try:
        return _COMMANDS[args.cmd](args, config)
    except _USER_ERRORS as e:
        logger.debug(f"Command {args.cmd!r} failed", exc_info=True)
        err_console.print(f"[red]ERROR:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
