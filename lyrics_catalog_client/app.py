# Streamlit viewer for the lyrics catalog: streamlit run lyrics_catalog_client/app.py
import streamlit as st

# Set page config FIRST before any other Streamlit commands
st.set_page_config(page_title="Lyrics Catalog", layout="wide")

import logging
from lyrics_catalog_client.api import CatalogClient
from lyrics_catalog_client.config import ClientSettings
from lyrics_catalog_client.state import CatalogState, refresh
from lyrics_catalog_client.views import get_view

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

settings = ClientSettings()

@st.cache_resource
def get_client() -> CatalogClient:
    logger.info(f"Using catalog API at {settings.API_URL}")
    return CatalogClient(settings.API_URL, timeout=settings.REQUEST_TIMEOUT)

view = get_view(settings.LAYOUT)
client = get_client()

if "catalog" not in st.session_state:
    st.session_state.catalog = CatalogState()
state = st.session_state.catalog

view.render_header()

# Re-runs on its own every POLL_INTERVAL seconds while the session is open
@st.fragment(run_every=settings.POLL_INTERVAL)
def catalog_panel():
    if state.loading:
        with view.render_loading():
            refresh(state, client)
    elif state.error is None:
        refresh(state, client)

    if state.error is not None:
        view.render_error(state)
    else:
        view.render_catalog(state)
        if state.last_updated is not None:
            st.caption(f"Updated {state.last_updated:%H:%M:%S}")

catalog_panel()
