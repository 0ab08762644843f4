"""Draw the totals bar chart and the county-winner map.

Both functions only consume already-computed values and write a PNG; nothing
is returned to the caller except the output path.
"""
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

import params
import utils
from .io_utils import ensure_dir
from .models import CandidateLabels, CountyRecord, VoteCount


def _bar_panel(ax, values: Sequence[int], labels: CandidateLabels, title: str, y_label: str):
    x_idx = np.arange(2)
    colors = [params.COLORS['A'], params.COLORS['B']]
    bars = ax.bar(x_idx, values, width=0.5, color=colors)
    ax.bar_label(bars, labels=[f"{v:,}" for v in values], padding=3, fontsize=9, color="white")
    ax.set_title(title)
    ax.set_ylabel(y_label)
    ax.set_xticks(x_idx)
    ax.set_xticklabels([labels.a, labels.b])
    ax.grid(True, axis="y", alpha=0.3)


def plot_totals(popular: VoteCount, electoral: VoteCount, labels: CandidateLabels,
                out_dir, show: bool = False) -> Path:
    out_dir = ensure_dir(out_dir)
    plt.style.use('dark_background')
    fig, (ax_pop, ax_ev) = plt.subplots(1, 2, figsize=(12, 6))
    _bar_panel(ax_pop, [popular.a, popular.b], labels, "Popular Vote", "Votes")
    _bar_panel(ax_ev, [electoral.a, electoral.b], labels, "Electoral Votes", "EVs")
    fig.suptitle(f"{labels.a} vs {labels.b}")
    fig.tight_layout()

    out_path = out_dir / "results_totals.png"
    fig.savefig(out_path)
    if not show:
        plt.close(fig)
    return out_path


def counties_for(counties: List[CountyRecord], state: Optional[str] = None) -> List[CountyRecord]:
    if not state:
        return list(counties)
    key = utils.normalize_state_id(state)
    return [c for c in counties if c.state == key]


def plot_county_map(counties: List[CountyRecord], labels: CandidateLabels, out_dir,
                    state: Optional[str] = None, background=None, show: bool = False) -> Path:
    """Scatter county winners by longitude/latitude, optionally for one state only.

    background: path to a US map image, stretched over params.MAP_EXTENT. Skipped if missing.
    """
    out_dir = ensure_dir(out_dir)
    points = counties_for(counties, state)
    plt.style.use('dark_background')
    fig, ax = plt.subplots(figsize=(12, 7))

    if background is not None:
        background = Path(background)
        if background.exists():
            ax.imshow(plt.imread(background), extent=params.MAP_EXTENT, aspect="auto", zorder=0)
        else:
            print(f"Warning: map image not found: {background}")

    for winner, name in (('A', labels.a), ('B', labels.b)):
        sel = [c for c in points if c.winner == winner]
        ax.scatter([c.lng for c in sel], [c.lat for c in sel], s=params.MAP_POINT_SIZE,
                   c=utils.winner_color(winner), label=f"{name} Counties ({len(sel)})", zorder=2)

    if state:
        title = f"{utils.normalize_state_id(state)} County Results"
    else:
        title = "National County Results"
        ax.set_xlim(params.MAP_EXTENT[0], params.MAP_EXTENT[1])
        ax.set_ylim(params.MAP_EXTENT[2], params.MAP_EXTENT[3])
    ax.set_title(f"{title} - {labels.a} vs {labels.b}")
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.legend(loc="lower left")
    ax.grid(True, alpha=0.2)

    suffix = utils.normalize_state_id(state) if state else "national"
    out_path = out_dir / f"county_map_{suffix}.png"
    fig.savefig(out_path)
    if not show:
        plt.close(fig)
    return out_path


def show_figures():
    """Open any figures kept for display. Does not block the caller on non-interactive backends."""
    if plt.get_fignums():
        plt.show()
