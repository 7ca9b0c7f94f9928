import student_dashboard.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from student_dashboard.config import (
    PROFILE_QUERY_PARAM,
    PROFILE_VIEW,
    ROSTER_VIEW,
    configure_logging,
    load_settings,
)
from student_dashboard.data.client import SupabaseClient
from student_dashboard.data.filters import DEFAULT_FILTERS, serialize_filters
from student_dashboard.data.loader import load_profile, load_roster
from student_dashboard.ui.layout import roster_filters_ui, setup_page
from student_dashboard.ui.pages import profile, roster
from student_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

ROSTER_STATE_KEY = "sd_roster_result"
PROFILE_STATE_KEY = "sd_profile_result"


def _roster_view(client: SupabaseClient, context: PageContext) -> None:
    st.title(ROSTER_VIEW.label)
    st.session_state.pop(PROFILE_STATE_KEY, None)

    refresh = st.sidebar.button("🔄 Refresh Data")
    if refresh or ROSTER_STATE_KEY not in st.session_state:
        with st.spinner("Loading..."):
            st.session_state[ROSTER_STATE_KEY] = load_roster(client, context.settings)
    result = st.session_state[ROSTER_STATE_KEY]

    filters = roster_filters_ui(result.available_skills)
    st.session_state["sd_active_filters"] = serialize_filters(filters)
    context.filters = filters

    roster.render(result, context)


def _profile_view(client: SupabaseClient, context: PageContext, student_id: str) -> None:
    st.session_state.pop(ROSTER_STATE_KEY, None)

    refresh = st.sidebar.button("🔄 Refresh Data")
    cached = st.session_state.get(PROFILE_STATE_KEY)
    if refresh or cached is None or cached[0] != student_id:
        with st.spinner("Loading..."):
            st.session_state[PROFILE_STATE_KEY] = (
                student_id,
                load_profile(client, context.settings, student_id),
            )
    _, result = st.session_state[PROFILE_STATE_KEY]

    profile.render(result, context)


def main() -> None:
    setup_page()

    try:
        settings = load_settings()
    except RuntimeError as exc:
        st.error(f"Backend configuration missing: {exc}")
        st.stop()
        return

    configure_logging(settings.log_level)
    client = SupabaseClient.from_settings(settings)
    context = PageContext(settings=settings, filters=DEFAULT_FILTERS)

    student_id = st.query_params.get(PROFILE_QUERY_PARAM)
    logger.debug("Rendering %s view", PROFILE_VIEW.key if student_id else ROSTER_VIEW.key)
    if student_id:
        st.sidebar.caption(PROFILE_VIEW.label)
        _profile_view(client, context, student_id)
    else:
        st.sidebar.caption(ROSTER_VIEW.label)
        _roster_view(client, context)


if __name__ == "__main__":
    main()
