from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from cubelet_engine.core.generators import parse_sequence, sequence_permutation  # noqa: E402
from cubelet_engine.core.interpolator import cell_positions, clamp  # noqa: E402
from cubelet_engine.core.labels import CELL_SPACING  # noqa: E402
from cubelet_engine.invariants.group_laws import audit_generator_table  # noqa: E402
from cubelet_engine.logging_config import setup_logging  # noqa: E402
from cubelet_engine.viz.plot import plot_cells  # noqa: E402

logger = logging.getLogger("cubelet_engine.scripts.animate_report")


def progress_samples(frames: int) -> list[float]:
    if frames < 1:
        raise ValueError("frames must be >= 1")
    if frames == 1:
        return [1.0]
    return [clamp(i / (frames - 1)) for i in range(frames)]


def main() -> int:
    ap = argparse.ArgumentParser(description="Sample cell transforms along a move sequence.")
    ap.add_argument("sequence", help="moves, e.g. \"U R U' R'\" or '[\"U\", \"R⁻¹\"]'")
    ap.add_argument("--frames", type=int, default=5)
    ap.add_argument("--spacing", type=float, default=CELL_SPACING)
    ap.add_argument("--outdir", type=Path, default=Path("artifacts/animation"))
    ap.add_argument("--no-plots", action="store_true")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args()

    setup_logging(level=getattr(logging, args.log_level.upper(), logging.INFO))
    audit_generator_table()

    seq = parse_sequence(args.sequence)
    logger.info("Sequence: %s", json.dumps(seq, ensure_ascii=False))

    args.outdir.mkdir(parents=True, exist_ok=True)

    frames = []
    for k, t in enumerate(progress_samples(args.frames)):
        positions = cell_positions(seq, t, spacing=args.spacing)
        frames.append({"t": t, "positions": {c: list(p) for c, p in positions.items()}})
        if not args.no_plots:
            ax = plot_cells(seq, t, spacing=args.spacing)
            plt.tight_layout()
            plt.savefig(args.outdir / f"frame_{k:03d}.png")
            plt.close(ax.figure)

    net = sequence_permutation(seq)
    summary = {
        "sequence": seq,
        "spacing": args.spacing,
        "net_permutation": {k: v for k, v in sorted(net.items()) if k != v},
        "frames": frames,
    }
    (args.outdir / "animation_summary.json").write_text(json.dumps(summary, indent=2, ensure_ascii=False))

    print(f"Moves: {len(seq)}  frames={len(frames)}  cells moved={len(summary['net_permutation'])}")
    print(f"\nWrote: {args.outdir}/animation_summary.json")
    if not args.no_plots:
        print(f"Wrote: {len(frames)} frame PNGs to {args.outdir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
