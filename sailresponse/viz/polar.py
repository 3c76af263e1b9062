from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from ..sim.polar import PolarResult


@dataclass
class PolarPlotOptions:
    figsize: tuple[float, float] = (7.0, 7.0)
    title: Optional[str] = None
    show_heel: bool = True
    mirror: bool = True          # draw the port half as a reflection of starboard
    grid: bool = True
    dpi: int = 120
    speed_label: str = "Boat speed [m/s]"
    heel_label: str = "Heel [deg]"


def plot_polar(result: PolarResult, png_out: Optional[Path] = None, options: Optional[PolarPlotOptions] = None) -> Optional[plt.Figure]:
    """
    Plot steady boat speed against true wind angle, compass style (0 deg up, clockwise).
    Heel is drawn on a secondary radial scale when options.show_heel is set.
    """
    if options is None:
        options = PolarPlotOptions()
    if not result.points:
        raise ValueError("Polar result has no points to plot")

    data = result.as_arrays()
    theta = np.radians(data["wind_angle"])
    speed = data["boat_speed"]
    heel = data["heeling_angle"]

    if options.mirror:
        theta = np.concatenate([theta, -theta[::-1]])
        speed = np.concatenate([speed, speed[::-1]])
        heel = np.concatenate([heel, heel[::-1]])

    fig = plt.figure(figsize=options.figsize, dpi=options.dpi)
    ax = fig.add_subplot(111, projection="polar")
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)
    if options.title:
        ax.set_title(options.title)

    ax.plot(theta, speed, color="tab:blue", linewidth=1.5, label=options.speed_label)

    if options.show_heel:
        # Heel shares the angular axis but has its own radial scale
        ax_heel = fig.add_axes(ax.get_position(), projection="polar", frameon=False)
        ax_heel.set_theta_zero_location("N")
        ax_heel.set_theta_direction(-1)
        ax_heel.plot(theta, heel, color="tab:red", linewidth=1.0, linestyle="--", alpha=0.7, label=options.heel_label)
        ax_heel.set_xticks([])
        ax_heel.tick_params(axis="y", colors="tab:red", labelsize=7)
        ax_heel.legend(loc="lower right", fontsize=8, framealpha=0.6)

    if options.grid:
        ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.5)

    ax.legend(loc="lower left", fontsize=8, framealpha=0.6)

    if png_out is not None:
        png_out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(png_out, bbox_inches="tight")
        plt.close(fig)
        return None

    return fig
