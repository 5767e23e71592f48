import streamlit as st
import streamlit.components.v1 as components
from clients.campus_data_client import CampusDataClient
from config.config import SETTINGS
from ui.Page import Page
from ui.state import save_state_to_cache
from utils.constants import Keys, Label, MapConstants, PERSONA_LABELS
from utils.map_utils import build_campus_map
from utils.styling import legend_html
from workflows.path_workflow import PathWorkflow


class MapPage(Page):
    """UI for the campus map, route form and turn-by-turn directions."""

    def __init__(self, campus_data: CampusDataClient, path_workflow: PathWorkflow):
        self.campus_data = campus_data
        self.path_workflow = path_workflow

    def _location_select(self, label: str, key: str):
        names = self.campus_data.names()
        current = st.session_state.get(key)
        return st.selectbox(
            label,
            names,
            index=names.index(current) if current in names else None,
            format_func=lambda name: f"{self.campus_data.get(name).icon} {name}",
            placeholder="Select a location...",
        )

    def _render_form(self):
        col_from, col_to, col_persona = st.columns(3)
        with col_from:
            from_location = self._location_select(
                Label.FROM_LOCATION.value, Keys.FROM_LOCATION.value
            )
        with col_to:
            to_location = self._location_select(
                Label.TO_LOCATION.value, Keys.TO_LOCATION.value
            )
        with col_persona:
            personas = list(PERSONA_LABELS)
            persona = st.selectbox(
                Label.PERSONA.value,
                personas,
                index=personas.index(st.session_state.persona)
                if st.session_state.persona in personas
                else 0,
                format_func=lambda p: PERSONA_LABELS[p],
            )

        changed = (
            from_location != st.session_state.from_location
            or to_location != st.session_state.to_location
            or persona != st.session_state.persona
        )
        st.session_state.update(
            {
                "from_location": from_location,
                "to_location": to_location,
                "persona": persona,
            }
        )
        if changed:
            save_state_to_cache()

    def _compute_route(self):
        from_location = st.session_state.from_location
        to_location = st.session_state.to_location
        if not from_location or not to_location:
            return None
        try:
            return self.path_workflow.run(
                {
                    "from_location": from_location,
                    "to_location": to_location,
                    "persona": st.session_state.persona,
                }
            )
        except Exception as e:
            st.error(str(e))
            return None

    def _render_directions(self, route):
        if route is None:
            return
        with st.container(border=True):
            st.subheader(
                f"Turn-by-Turn Directions: {st.session_state.from_location} → "
                f"{st.session_state.to_location}"
            )
            for i, line in enumerate(route.directions, start=1):
                st.markdown(f"{i}. {line}" if route.found else line)

    def render(self):
        st.title("Adaptive Campus Navigator")
        st.caption(
            "Explore Ajeenkya DY Patil Lohegaon Campus - Discover quirky spots, "
            "navigate with ease"
        )
        self._render_form()
        route = self._compute_route()

        fmap = build_campus_map(
            self.campus_data.all(),
            tiles_url=SETTINGS.map_tiles_url,
            zoom=SETTINGS.map_zoom,
            highlight=st.session_state.highlighted_location,
            path=route.path if route and route.found else None,
            persona=st.session_state.persona,
        )
        components.html(fmap._repr_html_(), height=MapConstants.HEIGHT_PX.value)

        if route is not None and route.found:
            st.caption(
                f"Route selected from {st.session_state.from_location} to "
                f"{st.session_state.to_location} using {st.session_state.persona} "
                "navigation style."
            )
        self._render_directions(route)

        if st.toggle(Label.LEGEND_TOGGLE.value, key=Keys.SHOW_LEGEND.value):
            st.markdown(legend_html(), unsafe_allow_html=True)
