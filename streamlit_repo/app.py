# app.py — single-page portfolio (content loaded from JSON fragments)
# ----------------------------------------------------------------
#  • Content: loaded once per process into a ContentStore (refreshable)
#  • Navigation: one NavigationState per browser session
#  • Rendering: everything drawn from the ViewDescriptor returned by project()
# ----------------------------------------------------------------

from __future__ import annotations
import logging

import streamlit as st

from portfolio import config
from portfolio.errors import LoadFailed
from portfolio.loader import ContentLoader, ContentStore
from portfolio.navigation import NavigationState, Navigator
from portfolio.projector import project
from sections.render import render_compact_menu, render_footer, render_sidebar, render_view, rerun

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger("portfolio.app")

# -----------------------------
# Page config + CSS
# -----------------------------
st.set_page_config(
    page_title="Portfolio",
    page_icon="🌿",
    layout="wide",
    initial_sidebar_state="collapsed" if config.COMPACT_NAV else "expanded",
)

st.markdown("""
<style>
.brand { font-weight: 800; font-size: 1.1rem; margin-bottom: 8px; }
.brand .initials {
  display: inline-block; width: 2.2em; height: 2.2em; line-height: 2.2em;
  text-align: center; border-radius: 6px; margin-right: 8px;
  background: rgba(255,0,255,.8); color: #0a0a0a;
}

.hero {
  font-weight: 800;
  line-height: 1.1;
  margin: 0 0 6px;
  letter-spacing: .2px;
  font-size: clamp(28px, 3.6vw, 48px);
}
.hero-sub {
  font-size: clamp(15px, 1.2vw, 18px);
  line-height: 1.6;
  opacity: .9;
  max-width: 62ch;
}
@media (max-width: 700px) {
  .hero { font-size: 26px; }
  .hero-sub { font-size: 16px; }
}

.section-title { font-weight: 700; font-size: 1.4rem; margin: 12px 0; }

.blurb {
  display: block;
  white-space: normal;
  font-size: 0.98rem;
  line-height: 1.55;
  opacity: .95;
}

.portfolio-grid .portfolio-card {
  border: 1px solid rgba(0,0,0,.08);
  border-radius: 12px;
  padding: 10px;
  box-shadow: 0 2px 6px rgba(0,0,0,0.06);
  display: flex;
  flex-direction: column;
  background: rgba(255,255,255,0.04);
}
.portfolio-grid .portfolio-title {
  margin: 10px 2px 0;
  font-weight: 700;
  font-size: 1.05rem;
  line-height: 1.2;
  min-height: 2.6em;
}
.badge {
  display: inline-block; padding: 2px 8px; margin: 0 4px 4px 0;
  border-radius: 999px; font-size: .8rem; border: 1px solid rgba(0,255,255,.5);
}
.article-body img { max-width: 100%; height: auto; }
</style>
""", unsafe_allow_html=True)

# -----------------------------
# State (process-wide content, per-session navigation)
# -----------------------------
NAV_KEY = "nav_state"


@st.cache_resource(show_spinner=False)
def get_store() -> ContentStore:
    store = ContentStore()
    try:
        ContentLoader(store=store).load_sync()
    except LoadFailed:
        pass  # recorded in the store; the projector shows the unavailable view
    return store


def get_navigator(store: ContentStore) -> Navigator:
    if NAV_KEY not in st.session_state:
        st.session_state[NAV_KEY] = NavigationState()
    return Navigator(st.session_state[NAV_KEY], content=store.current)


def refresh(store: ContentStore, nav: Navigator):
    try:
        content = ContentLoader(store=store).load_sync()
    except LoadFailed as e:
        st.sidebar.error(f"Refresh failed: {e.cause}")
        return
    nav.prune(content)
    rerun()


store = get_store()
nav = get_navigator(store)
snapshot = store.snapshot
view = project(snapshot, nav.state)

# -----------------------------
# Sidebar
# -----------------------------
if view.chrome is not None:
    render_sidebar(view.chrome, nav)
    st.sidebar.markdown("---")
if st.sidebar.button("⟳ Refresh content", use_container_width=True):
    refresh(store, nav)
if snapshot.last_error is not None:
    st.sidebar.caption(f"Last load problem: {snapshot.last_error.cause}")

# -----------------------------
# Dispatch
# -----------------------------
if view.chrome is not None:
    render_compact_menu(view.chrome, nav)
for section_view in view.views:
    render_view(section_view, nav)
if view.chrome is not None:
    render_footer(view.chrome, nav)
