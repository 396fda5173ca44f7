# rasterbench/cli.py
"""
Command line entry point.

    python -m rasterbench list
    python -m rasterbench dump triangleStrip --width 200 --height 200
    python -m rasterbench render meshIndex out/mesh.png --border
    python -m rasterbench preview
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Sequence

from rasterbench.catalog import ModelCatalog, ModelKind
from rasterbench.color import BLACK, Color
from rasterbench.debug.dump import dump_generated_model
from rasterbench.debug.profiler import profile

BACKGROUND = Color(129, 128, 128)


class _NullProcessor:
    """Processor for commands that only generate buffers."""

    def fill_triangle_strip(self, *args) -> None:
        pass

    def fill_triangle_fan(self, *args) -> None:
        pass

    def fill_triangles_index(self, *args) -> None:
        pass

    def fill_triangles(self, *args) -> None:
        pass


def _color_arg(value: str) -> Color:
    try:
        return Color.from_hex(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rasterbench",
        description="Procedural test geometry for rasterizer fill routines.",
    )
    parser.add_argument("--width", type=int, default=200)
    parser.add_argument("--height", type=int, default=200)
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        metavar="DIR",
        help="write cProfile stats for the command into DIR",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    models = [kind.value for kind in ModelKind]

    sub.add_parser("list", help="list registered models")

    dump = sub.add_parser("dump", help="print a model's buffers")
    dump.add_argument("model", choices=models)
    dump.add_argument("--limit", type=int, default=None)

    for name, help_text in (
        ("render", "render a model to a PNG file"),
        ("preview", "open an interactive preview window"),
    ):
        p = sub.add_parser(name, help=help_text)
        if name == "render":
            p.add_argument("model", choices=models)
            p.add_argument("out", type=Path)
        else:
            p.add_argument("model", choices=models, nargs="?")
        p.add_argument("--border", action="store_true")
        p.add_argument(
            "--border-color", type=_color_arg, default=BLACK, metavar="#RRGGBB"
        )

    return parser


def cmd_list(args: argparse.Namespace) -> int:
    for name in ModelCatalog(_NullProcessor()).get_models():
        print(name)
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    catalog = ModelCatalog(_NullProcessor())
    generated = catalog.generate(args.model, args.width, args.height)
    assert generated is not None
    dump_generated_model(generated, limit=args.limit)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    from rasterbench.gl import (
        GLFrameBuffer,
        GLGeometricProcessor,
        create_offscreen_context,
        save_png,
    )

    ctx = create_offscreen_context()
    processor = GLGeometricProcessor(ctx)
    frame = GLFrameBuffer(ctx, args.width, args.height)
    try:
        frame.clear(BACKGROUND)
        ModelCatalog(processor).draw_model(
            args.model, frame, args.border, args.border_color
        )
        path = save_png(frame, args.out)
        print(f"[rasterbench] wrote {path}")
    finally:
        frame.release()
        processor.release()
        ctx.release()
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    from rasterbench.gl.preview import run_preview

    run_preview(
        args.width,
        args.height,
        args.border_color,
        start_model=args.model,
    )
    return 0


COMMANDS: dict[str, Callable[[argparse.Namespace], int]] = {
    "list": cmd_list,
    "dump": cmd_dump,
    "render": cmd_render,
    "preview": cmd_preview,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    command = COMMANDS[args.command]

    if args.profile is not None:
        command = profile(out_dir=args.profile)(command)

    return command(args)
