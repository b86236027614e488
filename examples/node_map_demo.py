#!/usr/bin/env python3
"""
Simple demo script showing node map generation.

Settings come from NODEMAP_* environment variables (or a .env file), so
e.g. `NODEMAP_NODES_TO_GENERATE=80 python examples/node_map_demo.py`.
"""

import numpy as np

from py_nodemap.config import Settings, configure_logging
from py_nodemap.core import GenerationPipeline, SpatialMask, export_node_map


def island_heights(width: int, height: int) -> np.ndarray:
    """Round island falling off towards the map edges."""
    y, x = np.mgrid[0:height, 0:width]
    r = np.hypot((x - width / 2) / (width / 2), (y - height / 2) / (height / 2))
    return np.clip(100 * (1 - r), 0, 100)


def main():
    """Demonstrate node map generation."""
    settings = Settings()
    configure_logging(settings.log_level, settings.log_format)

    config = settings.generation_config()
    heights = island_heights(
        int(config.map_width * settings.mask_resolution),
        int(config.map_height * settings.mask_resolution),
    )
    mask = SpatialMask.from_heights(
        heights, settings.buildable_threshold, config.map_width, config.map_height
    )

    print("Py-NodeMap Generation Demo")
    print("=" * 40)
    print(f"Mask: {mask}")

    pipeline = GenerationPipeline(seed=settings.seed or "demo123")
    pipeline.add_listener(lambda result: print(f"\nFinished in {result.elapsed_ms:.1f}ms"))
    result = pipeline.generate(config, mask)

    export = export_node_map(result.nodes)
    print(f"Nodes: {len(export.nodes)} ({export.town_count} towns, {export.village_count} villages)")
    print(f"Connections: {len(export.edges)}")
    for key, value in result.summary().items():
        print(f"  {key}: {value}")

    degrees = [len(n.connections) for n in export.nodes]
    if degrees:
        print("\nDegree distribution:")
        for degree in range(1, max(degrees) + 1):
            count = degrees.count(degree)
            print(f"  {degree}: {'#' * count} ({count})")


if __name__ == "__main__":
    main()
