#!/usr/bin/env python3
"""Batch lay out and render all project fixtures to SVG.

Outputs go to /tmp/mind_layout_renders/.  Every fixture is rendered once per
density preset so spacing regressions are easy to eyeball side by side.

Usage:
    python scripts/render_projects.py [--theme light] [--density compact] [--png]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))
sys.path.insert(0, str(project_root / "tests"))

from layout_validator import Severity, validate_layout  # noqa: E402

from mind_layout.layout.config import LayoutConfig  # noqa: E402
from mind_layout.layout.constants import DENSITY_FACTORS  # noqa: E402
from mind_layout.layout.engine import compute_layout  # noqa: E402
from mind_layout.parser.project import parse_project  # noqa: E402
from mind_layout.render.svg import render_svg  # noqa: E402
from mind_layout.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/mind_layout_renders")
PROJECTS_DIR = project_root / "tests" / "fixtures" / "projects"

FIXTURE_FILES = sorted(PROJECTS_DIR.glob("*.json"))


def render_project(
    json_path: Path, output_dir: Path, density: str, theme_name: str, png: bool
) -> tuple[str, list[str], bool]:
    """Lay out one project at one density and write its preview.

    Returns (output stem, findings, failed).
    """
    stem = f"{json_path.stem}_{density}"

    try:
        graph = parse_project(json_path.read_text())
    except ValueError as e:
        return stem, [f"unreadable project: {e}"], True

    result = compute_layout(graph, LayoutConfig.for_density(density))
    if result is graph and graph.nodes:
        return stem, ["hierarchy is not a single rooted tree"], True

    violations = validate_layout(result)
    findings = [f"{v.severity.value}: {v.message}" for v in violations]
    failed = any(v.severity == Severity.ERROR for v in violations)

    svg_str = render_svg(result, THEMES[theme_name])
    (output_dir / f"{stem}.svg").write_text(svg_str)

    if png:
        import cairosvg

        cairosvg.svg2png(
            bytestring=svg_str.encode(),
            write_to=str(output_dir / f"{stem}.png"),
            scale=2,
        )

    return stem, findings, failed


def main():
    parser = argparse.ArgumentParser(description="Lay out and preview project fixtures")
    parser.add_argument("--theme", choices=sorted(THEMES), default="dark")
    parser.add_argument(
        "--density", choices=list(DENSITY_FACTORS), action="append",
        help="Density preset to render (repeatable; default: all)",
    )
    parser.add_argument(
        "--png", action="store_true", help="Also write 2x PNGs (needs cairosvg)"
    )
    args = parser.parse_args()
    densities = args.density or list(DENSITY_FACTORS)

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    print(f"{len(FIXTURE_FILES)} projects x {len(densities)} densities -> {OUTPUT_DIR}/\n")

    width = max(len(f.stem) for f in FIXTURE_FILES) + max(len(d) for d in densities) + 1
    failures = 0
    for json_path in FIXTURE_FILES:
        for density in densities:
            stem, findings, failed = render_project(
                json_path, OUTPUT_DIR, density, args.theme, args.png
            )
            failures += failed
            verdict = "FAIL" if failed else ("WARN" if findings else "ok")
            print(f"  {stem:<{width}}  {verdict}")
            for line in findings:
                print(f"      {line}")

    if failures:
        print(f"\n{failures} layout(s) failed validation")
        sys.exit(1)


if __name__ == "__main__":
    main()
