"""CLI entrypoints for rendering countdown GIFs and inspecting settings."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from countdown_core import AppConfig, build_doctor_payload, generate, load_config, save_config
from countdown_core.config import config_path
from countdown_core.logging_setup import configure_logging, install_excepthook
from countdown_renderer import clamp
from countdown_renderer.normalize import FRAME_RANGE
from countdown_timing import Active, compute_initial, display_breakdown, parse_target, tick


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _parse_target_or_report(text: str):
    try:
        return parse_target(text)
    except ValueError as exc:
        _print_json({"success": False, "error": f"invalid timestamp {text!r}: {exc}"})
        return None


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config()
    defaults = cfg.render
    target = _parse_target_or_report(args.time)
    if target is None:
        return 2

    job = generate(
        target,
        width=args.width if args.width is not None else defaults.width,
        height=args.height if args.height is not None else defaults.height,
        color=args.color or defaults.text_color,
        bg=args.bg or defaults.background_color,
        name=args.name or defaults.name,
        title=args.title or defaults.title,
        frames=args.frames if args.frames is not None else defaults.frames,
        output_dir=Path(args.out_dir).expanduser().resolve() if args.out_dir else None,
        settings=cfg,
    )
    path = job.wait(timeout=args.timeout)
    _print_json(
        {
            "success": True,
            "path": str(path),
            "frames": job.report.frame_count,
            "passed": job.report.passed,
            "bytes": path.stat().st_size,
        }
    )
    return 0


def cmd_breakdown(args: argparse.Namespace) -> int:
    target = _parse_target_or_report(args.time)
    if target is None:
        return 2

    frames = clamp(args.frames, *FRAME_RANGE)
    state = compute_initial(target, datetime.now().astimezone())
    if not isinstance(state, Active):
        _print_json({"passed": True, "message": state.message, "frames": []})
        return 0

    rows = []
    duration = state.duration
    for _ in range(frames):
        rows.append(display_breakdown(duration).as_dict())
        tick(duration)
    _print_json({"passed": False, "frames": rows})
    return 0


def cmd_config_show(_args: argparse.Namespace) -> int:
    cfg = load_config()
    _print_json({"path": str(config_path()), "config": asdict(cfg)})
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    path = config_path()
    if path.exists() and not args.force:
        _print_json({"success": False, "path": str(path), "error": "config exists (use --force)"})
        return 1
    _print_json({"success": True, "path": str(save_config(AppConfig(), path))})
    return 0


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(load_config()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="countdown-gif", description="Animated countdown GIF generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show info and debug logs on stderr")
    parser.add_argument("--log-file", default=None, help="Append JSON log lines to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render a countdown GIF")
    render_cmd.add_argument("time", help="Target timestamp, e.g. 2026-12-31T23:59:59")
    render_cmd.add_argument("--width", type=int, default=None)
    render_cmd.add_argument("--height", type=int, default=None)
    render_cmd.add_argument("--color", default=None, help="Text color hex triplet (no #)")
    render_cmd.add_argument("--bg", default=None, help="Background color hex triplet (no #)")
    render_cmd.add_argument("--name", default=None, help="Output file name without extension")
    render_cmd.add_argument("--title", default=None)
    render_cmd.add_argument("--frames", type=int, default=None)
    render_cmd.add_argument("--out-dir", default=None, help="Output directory (default ./tmp)")
    render_cmd.add_argument("--timeout", type=float, default=60.0, help="Seconds to wait for the write to finish")
    render_cmd.set_defaults(func=cmd_render)

    breakdown_cmd = sub.add_parser("breakdown", help="Print per-frame unit breakdowns without rendering")
    breakdown_cmd.add_argument("time")
    breakdown_cmd.add_argument("--frames", type=int, default=5)
    breakdown_cmd.set_defaults(func=cmd_breakdown)

    config_cmd = sub.add_parser("config", help="Inspect or create the settings file")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective settings")
    show_cmd.set_defaults(func=cmd_config_show)
    init_cmd = config_sub.add_parser("init", help="Write default settings")
    init_cmd.add_argument("--force", action="store_true", help="Overwrite an existing settings file")
    init_cmd.set_defaults(func=cmd_config_init)

    doctor_cmd = sub.add_parser("doctor", help="Print environment and font diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config()
    log_file = args.log_file or cfg.logging.file
    configure_logging(
        level=cfg.logging.level,
        log_file=Path(log_file) if log_file else None,
        verbose=args.verbose,
    )
    install_excepthook()
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
