"""Progress chart rendering with matplotlib."""

from pathlib import Path
from typing import Mapping, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from ..models import ProgressEntry


def render_progress_chart(
    progress: Mapping[str, ProgressEntry],
    path: Union[str, Path],
    title: str = "Your Progress",
) -> Path:
    """
    Draw encountered vs resolved counts per issue type and save as an image.

    Args:
        progress: Issue type -> ProgressEntry
        path: Output image path (format from the extension)
        title: Figure title

    Returns:
        Path of the written image
    """
    if not progress:
        raise ValueError("No progress recorded yet")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    types = [t.capitalize() for t in progress.keys()]
    encountered = [entry.encountered for entry in progress.values()]
    resolved = [entry.resolved for entry in progress.values()]

    x = np.arange(len(types))
    width = 0.38

    fig, ax = plt.subplots(figsize=(max(6, len(types) * 1.6), 4.5))
    ax.bar(x - width / 2, encountered, width, label="Encountered",
           color="#45B7D1", edgecolor="black", linewidth=1.0)
    bars = ax.bar(x + width / 2, resolved, width, label="Resolved",
                  color="#4ECDC4", edgecolor="black", linewidth=1.0)

    # completion percentage above each resolved bar
    for bar, entry in zip(bars, progress.values()):
        ax.text(bar.get_x() + bar.get_width() / 2., bar.get_height(),
                f"{entry.completion:.0f}%",
                ha="center", va="bottom", fontweight="bold", fontsize=9)

    ax.set_xticks(x)
    ax.set_xticklabels(types)
    ax.set_ylabel("Issues", fontsize=11, fontweight="bold")
    ax.set_title(title, fontsize=14, fontweight="bold", pad=12)
    ax.grid(axis="y", alpha=0.3, linestyle="--")
    ax.legend(loc="upper right", fontsize=9, framealpha=0.9)

    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)

    return path
