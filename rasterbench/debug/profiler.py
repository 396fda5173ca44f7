# rasterbench/debug/profiler.py
from __future__ import annotations

import cProfile
import functools
import io
import pstats
from pathlib import Path
from typing import Any, Callable, ParamSpec, TypeVar, cast

P = ParamSpec("P")
R = TypeVar("R")


def profile(
    *,
    out_dir: Path,
    enabled: bool = True,
    top: int = 30,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Profiling decorator.

    Args:
        out_dir: Directory to save profile stats.
        enabled: Whether profiling is active.
        top: Number of rows written to each text report.

    Writes <name>.prof plus one text report per sort key (tottime, cumtime,
    calls) after the decorated call returns or raises.
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        if not enabled:
            return fn

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            profiler = cProfile.Profile()

            def dump_stats() -> None:
                out_dir.mkdir(parents=True, exist_ok=True)

                base = cast(Any, fn).__name__
                prof_path = out_dir / f"{base}.prof"

                profiler.dump_stats(prof_path)
                print(f"[profile] wrote {prof_path}")

                try:
                    stats = pstats.Stats(str(prof_path))
                except (EOFError, TypeError):
                    print("[profile] Warning: No data collected.")
                    return

                for cmd in ("tottime", "cumtime", "calls"):
                    path = out_dir / f"{base}.{cmd}.txt"
                    buf = io.StringIO()
                    pstats.Stats(str(prof_path), stream=buf).sort_stats(
                        cmd
                    ).print_stats(top)
                    path.write_text(buf.getvalue())
                    print(f"[profile] wrote {path}")

                total_time = getattr(stats, "total_tt", 0)
                print(f"[profile] Total Time: {total_time:.4f}s")

            profiler.enable()
            try:
                return fn(*args, **kwargs)
            finally:
                profiler.disable()
                dump_stats()

        return wrapper

    return decorator
