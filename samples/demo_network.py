"""
TrophicNet proof of concept
Lays out a small food web and writes it as SVG — no server involved.
"""
import json
import sys

from trophicnet.engine import ColorPair, InvalidNetworkError, Level, NetworkAssembler, NetworkConfig
from trophicnet.engine.flows import tiling_error
from trophicnet.render.serializer import scene_to_svg

# Birds, predatory insects, parasitoids, aphids, host plants
levels = [
    Level(
        populations=[0.7, 0.3],
        colors=[ColorPair("#264653", "white"), ColorPair("#2a9d8f", "white")],
        labels=["Blue tit", "Wren"],
    ),
    Level(
        populations=[0.45, 0.35, 0.2],
        occupation_per_previous_level=[[0.6, 0.4], [0.8, 0.2], [0.0, 1.0]],
        colors=[ColorPair("#e9c46a", "black"), ColorPair("#f4a261", "black")],
        labels=["Ladybird", "Lacewing", "Hoverfly"],
    ),
    Level(
        populations=[0.5, 0.5],
        occupation_per_previous_level=[[0.5, 0.3, 0.2], [0.2, 0.2, 0.6]],
        colors=[ColorPair("#e76f51", "white")],
    ),
    Level(
        populations=[0.25, 0.25, 0.5],
        occupation_per_previous_level=[[1.0, 0.0], [0.5, 0.5], [0.0, 1.0]],
    ),
]

config = NetworkConfig(canvas_width=800, space_between_levels=120)

# ============================================================
# STEP 1: Validate + lay out
# ============================================================
try:
    scene = NetworkAssembler(config).assemble(levels)
except InvalidNetworkError as e:
    print(e)
    sys.exit(1)

print("=" * 60)
print("STEP 1: LAYOUT")
print("=" * 60)
for level in scene.levels:
    print(f"\n--- Level {level.index + 1} (y={level.y:.0f}) ---")
    for box in level.species:
        r = box.rect
        print(f"  {box.label:<10} x=[{r.left:7.2f}, {r.right:7.2f}]  width={r.width:7.2f}  fill={box.fill}")

# ============================================================
# STEP 2: Flows
# ============================================================
print("\n" + "=" * 60)
print("STEP 2: FLOWS")
print("=" * 60)
for band in scene.flows:
    prey_rects = scene.levels[band.prey_level].rectangles
    print(f"\n--- Level {band.prey_level + 1} -> level {band.predator_level + 1} ---")
    print(f"  Polygons: {len(band.polygons)}")
    print(f"  Tiling error: {tiling_error(prey_rects, band.polygons):.2e}px")
    print("  " + json.dumps([
        {"prey": p.prey_index, "predator": p.predator_index, "width": round(p.width, 2)}
        for p in band.polygons
    ]))

# ============================================================
# STEP 3: Render
# ============================================================
out = sys.argv[1] if len(sys.argv) > 1 else "trophic_network.svg"
with open(out, "w", encoding="utf-8") as f:
    f.write(scene_to_svg(scene, title="Food web"))
print(f"\nWrote {out}")
