# portfolio/config.py — paths, env overrides, feature flags
# ----------------------------------------------------------

from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

# -----------------------------
# Paths & Data
# -----------------------------
BASE = Path(__file__).resolve().parent.parent


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


DATA_DIR = Path(os.getenv("PORTFOLIO_DATA_DIR", str(BASE / "data")))
DATA_URL: Optional[str] = os.getenv("PORTFOLIO_DATA_URL") or None
FETCH_TIMEOUT = float(os.getenv("PORTFOLIO_FETCH_TIMEOUT", "10"))
LOG_LEVEL = os.getenv("PORTFOLIO_LOG_LEVEL", "INFO").upper()

# One file per fragment, relative to DATA_DIR or DATA_URL
FRAGMENT_FILES = {
    "general": "generalInfo.json",
    "skills": "skills.json",
    "projects": "projects.json",
    "articles": "articles.json",
    "about": "about.json",
}

# --- Feature flags ---
TRUST_ARTICLE_MARKUP = _env_flag("PORTFOLIO_TRUST_MARKUP")  # off: article HTML goes through the allow-list
SHOW_SKILL_RADAR = True
COMPACT_NAV = _env_flag("PORTFOLIO_COMPACT_NAV")            # narrow-viewport mode, shows the menu toggle
MIN_RADAR_SKILLS = 3

LOADING_LABEL = "Loading..."
UNAVAILABLE_LABEL = "Content is currently unavailable."

# Ordered: this is the order of the nav bar and the footer quick links
SECTION_LABELS = {
    "home": "Home",
    "skills": "Skills",
    "projects": "Projects",
    "blog": "Blog",
    "about": "About",
    "contact": "Contact",
}

HERO_ACTIONS = (("View projects", "projects"), ("Get in touch", "contact"))
