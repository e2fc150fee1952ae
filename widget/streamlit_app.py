"""Streamlit rendering of the chat widget.

Run with ``streamlit run widget/streamlit_app.py``.
"""

import httpx
import streamlit as st

from config.settings import get_widget_settings
from widget.client import ChatClient, WidgetCapabilities

# Key used in st.session_state
_CLIENT_KEY = "chat_client"
_STATUS_TTL_SECONDS = 30


@st.cache_resource
def get_http_client(relay_url: str) -> httpx.Client:
    """One pooled connection to the relay, shared by all browser sessions."""
    return httpx.Client(base_url=relay_url)


@st.cache_data(ttl=_STATUS_TTL_SECONDS)
def relay_is_up(relay_url: str, _client: ChatClient) -> bool:
    return _client.check_status()


def get_client() -> ChatClient:
    """Return this browser session's ChatClient, creating it on first use."""
    if _CLIENT_KEY not in st.session_state:
        settings = get_widget_settings()
        st.session_state[_CLIENT_KEY] = ChatClient(
            settings=settings,
            capabilities=WidgetCapabilities(status_check=True),
            http_client=get_http_client(settings.relay_url),
        )
    return st.session_state[_CLIENT_KEY]


def render() -> None:
    st.header("L-E-of-all-trades")

    client = get_client()

    for msg in client.messages:
        with st.chat_message("user" if msg.is_user else "assistant"):
            st.markdown(msg.text)

    if client.error:
        st.error(client.error)

    if prompt := st.chat_input("Tell us what you need...", disabled=client.is_input_disabled):
        with st.chat_message("user"):
            st.markdown(prompt)
        with st.spinner("Thinking..."):
            client.submit(prompt)
        st.rerun()

    with st.sidebar:
        st.subheader("Local businesses")
        if not relay_is_up(client.settings.relay_url, client):
            st.caption("Assistant is currently unavailable.")
        for business in client.businesses:
            st.markdown(
                f"**{business.name}**  \n{business.description}  \n"
                f"[{business.phone}](tel:{business.phone}) · "
                f"[{business.email}](mailto:{business.email})"
            )


render()
