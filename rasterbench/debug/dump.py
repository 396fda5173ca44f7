# rasterbench/debug/dump.py
from __future__ import annotations

from rasterbench.buffers import iter_vertices, vertex_count
from rasterbench.catalog import GeneratedModel


def dump_generated_model(
    generated: GeneratedModel,
    *,
    header: str = "MODEL BUFFER DUMP",
    limit: int | None = None,
) -> None:
    """
    Print a readable snapshot of a generated model's buffers.

    Intended for checking winding, ordering and colors by eye before
    blaming the rasterizer.
    """

    print("\n" + "=" * 80)
    print(header)
    print("=" * 80)

    print("\n[Model]")
    print(f"  Name            : {generated.kind.value}")
    print(f"  Primitive       : {generated.primitive.value}")
    print(f"  Vertex count    : {vertex_count(generated.vertices)}")
    print(f"  Buffer length   : {len(generated.vertices)}")
    print(f"  Triangle count  : {generated.triangle_count}")
    if generated.indices is not None:
        print(f"  Index count     : {len(generated.indices)}")

    print("\n[Vertices]")
    for i, (x, y, z, r, g, b) in enumerate(iter_vertices(generated.vertices)):
        if limit is not None and i >= limit:
            print(f"  ... {vertex_count(generated.vertices) - limit} more")
            break
        print(
            f"  {i:04d}: pos=({x:9.3f}, {y:9.3f}, {z:g})  rgb=({r:3d}, {g:3d}, {b:3d})"
        )

    if generated.indices is not None:
        print("\n[Triangles]")
        idx = generated.indices
        for t in range(0, len(idx) - len(idx) % 3, 3):
            if limit is not None and t // 3 >= limit:
                print(f"  ... {len(idx) // 3 - limit} more")
                break
            print(f"  {t // 3:04d}: {idx[t]:4d} {idx[t + 1]:4d} {idx[t + 2]:4d}")

    print("\n" + "=" * 80)
    print("END MODEL BUFFER DUMP")
    print("=" * 80 + "\n")
