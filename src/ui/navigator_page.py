import streamlit as st
from langchain_core.messages import AIMessage, HumanMessage
from clients.geolocation_client import GeolocationClient
from ui.Page import Page
from ui.net_action import net_action
from ui.state import save_state_to_cache
from utils.constants import Label, QUICK_QUESTIONS
from workflows.navigator_workflow import NavigatorWorkflow


class NavigatorPage(Page):
    """UI for the chat-style AI campus navigator."""

    def __init__(
        self,
        navigator_workflow: NavigatorWorkflow,
        geolocation_client: GeolocationClient,
    ):
        self.navigator_workflow = navigator_workflow
        self.geolocation_client = geolocation_client

    def _user_location(self):
        future = self.geolocation_client.request_position(st.query_params)
        return self.geolocation_client.resolve(future)

    def _ask(self, question: str):
        st.session_state.navigator_messages.append(HumanMessage(content=question))
        st.session_state.navigator_turn = "ai"
        save_state_to_cache()

    def _render_location_status(self, user_location):
        if user_location is not None:
            st.caption(":green[:material/near_me: Location Active]")
        else:
            st.caption(
                ":orange[:material/location_on: Enable location for routes] "
                "(open the app with `?lat=<lat>&lng=<lng>` to share your position)"
            )

    def _render_quick_questions(self):
        if len(st.session_state.navigator_messages) != 1:
            return
        st.caption("Try asking:")
        cols = st.columns(len(QUICK_QUESTIONS))
        for col, question in zip(cols, QUICK_QUESTIONS):
            col.button(question, on_click=self._ask, args=(question,))

    def _answer(self, user_location):
        bot_message = None
        try:
            with net_action("Finding your spot..."):
                result = self.navigator_workflow.run(
                    {
                        "messages": st.session_state.navigator_messages,
                        "user_location": user_location,
                    }
                )
            bot_message = result["messages"][-1]
            match = result.get("match")
            if match and match.location:
                st.session_state.highlighted_location = match.location
                st.session_state.to_location = match.location.name
            route_request = result.get("route_request")
            if route_request:
                st.session_state.from_location = route_request.from_location
                st.session_state.to_location = route_request.to_location
        except Exception as e:
            st.error(f"An error occurred: {e}")
            bot_message = AIMessage(content="An error occurred.")
        finally:
            st.session_state.navigator_messages.append(bot_message)
            st.session_state.navigator_turn = "human"
            save_state_to_cache()
            st.rerun()

    def render(self):
        st.title("AI Campus Navigator")
        user_location = self._user_location()
        self._render_location_status(user_location)

        for message in st.session_state.navigator_messages:
            role = "user" if isinstance(message, HumanMessage) else "assistant"
            with st.chat_message(role):
                st.markdown(message.content)

        self._render_quick_questions()

        if st.session_state.highlighted_location is not None:
            st.info(
                f"{st.session_state.highlighted_location.icon} "
                f"{st.session_state.highlighted_location.name} is highlighted on the Campus Map."
            )

        if prompt := st.chat_input(
            Label.CHAT_PLACEHOLDER.value,
            disabled=st.session_state.navigator_turn != "human",
        ):
            if prompt.strip():
                self._ask(prompt.strip())
                st.rerun()

        if st.session_state.navigator_turn == "ai":
            with st.chat_message("assistant"):
                self._answer(user_location)
