# sections/charts.py — skills radar
# ----------------------------------------------------------

from __future__ import annotations
import math
from typing import Dict, Iterable

import numpy as np
import matplotlib
import matplotlib.pyplot as plt
import streamlit as st

from portfolio.models import Skill


def is_dark_theme() -> bool:
    try:
        base = (st.get_option("theme.base") or "light").lower()
    except Exception:
        base = "light"
    return base == "dark"


def skill_scores(skills: Iterable[Skill]) -> Dict[str, int]:
    """Label -> level; repeated names get a numeric suffix so none are dropped."""
    scores: Dict[str, int] = {}
    for s in skills:
        label, n = s.name or "?", 2
        while label in scores:
            label = f"{s.name or '?'} ({n})"; n += 1
        scores[label] = s.level
    return scores


def radar_figure(title: str, scores: Dict[str, float], size_px: int = 520, dark: bool = False, title_y: float = 1.2) -> matplotlib.figure.Figure:
    labels = list(scores.keys()); values = list(scores.values())
    angles = np.linspace(0, 2*math.pi, len(labels), endpoint=False).tolist()
    angles += angles[:1]; v = values + values[:1]
    dpi = 200
    fig = plt.figure(figsize=(size_px/dpi, size_px/dpi), dpi=dpi); ax = fig.add_subplot(111, polar=True)
    fig.patch.set_alpha(0.0); ax.set_facecolor("none"); ax.set_theta_offset(math.pi/2); ax.set_theta_direction(-1)
    label_color = "#ffffff" if dark else "#1f2937"; tick_color = "#e5e7eb" if dark else "#6b7280"; grid_color = "#9ca3af"
    ax.set_xticks(angles[:-1]); ax.set_xticklabels(labels, fontsize=10, color=label_color)
    ax.tick_params(pad=8, colors=tick_color); ax.set_ylim(0, 100); ax.set_yticks([20,40,60,80,100])
    ax.set_yticklabels([20,40,60,80,100], fontsize=8, color=tick_color)
    ax.yaxis.grid(True, linestyle="dotted", alpha=0.25, color=grid_color)
    ax.xaxis.grid(True, linestyle="dotted", alpha=0.25, color=grid_color)
    line_color = (0.3,0.9,1.0,0.95) if dark else (0.1,0.4,0.7,0.95)
    for lw, a in [(10,0.06),(8,0.08),(6,0.10),(4,0.12)]: ax.plot(angles, v, linewidth=lw, color=(line_color[0], line_color[1], line_color[2], a))
    ax.plot(angles, v, linewidth=2, color=line_color); ax.fill(angles, v, alpha=0.10, color=line_color)
    ax.set_title(title, y=title_y, fontsize=12, color=line_color)
    return fig


def radar_chart(title: str, skills: Iterable[Skill], size_px: int = 520):
    fig = radar_figure(title, skill_scores(skills), size_px=size_px, dark=is_dark_theme())
    st.pyplot(fig, use_container_width=False, transparent=True, bbox_inches="tight")
    plt.close(fig)
