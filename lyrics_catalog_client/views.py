"""
Rendering for the catalog viewer.

``SongCatalogView`` is the one presentation contract; ``DesktopView`` and
``MobileView`` implement it for wide and narrow screens. The layout is picked
once with ``get_view`` when the app starts, so rendering code never checks
the platform itself.
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import streamlit as st

from .state import CatalogState, close_detail, retry, select

EMPTY_MESSAGE = "No songs available. Add some songs to get started!"
NO_LYRICS_MESSAGE = "No lyrics available"


def format_lyrics(lyrics: Optional[str]) -> str:
    """Lyrics as markdown, keeping the original line breaks"""
    if not lyrics or not lyrics.strip():
        return f"_{NO_LYRICS_MESSAGE}_"
    # two trailing spaces force a markdown line break
    return "  \n".join(line.rstrip() for line in lyrics.strip().splitlines())


class SongCatalogView(ABC):
    """Presentation contract shared by every layout.

    ``render_loading``, ``render_error``, ``render_list`` and ``render_detail``
    are the four screens a layout provides; ``render_catalog`` composes the
    list and the open song from the current state.
    """

    title = "Lyrics Catalog"

    def render_header(self) -> None:
        st.title(self.title)

    @contextmanager
    def render_loading(self) -> Iterator[None]:
        with st.spinner("Loading songs..."):
            yield

    def render_error(self, state: CatalogState) -> None:
        st.error(f"**Error**\n\n{state.error}")
        st.button("Try Again", key="retry", on_click=retry, args=(state,))

    @abstractmethod
    def render_list(self, state: CatalogState) -> None:
        """Render the songs of the current snapshot."""

    @abstractmethod
    def render_detail(self, state: CatalogState, song: Dict[str, Any]) -> None:
        """Show the title, artist and lyrics of one song."""

    def render_catalog(self, state: CatalogState) -> None:
        if not state.songs:
            st.info(EMPTY_MESSAGE)
            return
        self.render_list(state)
        song = state.selected_song
        if song is not None:
            self.render_detail(state, song)

    def render_song_button(self, state: CatalogState, song: Dict[str, Any]) -> None:
        st.button(
            f"**{song.get('title', '')}**  \n{song.get('artist', '')}",
            key=f"song_{song.get('id')}",
            on_click=select,
            args=(state, song.get("id")),
            use_container_width=True,
        )


class DesktopView(SongCatalogView):
    """Full list on the page, the selected song opens in a dialog"""

    def render_list(self, state: CatalogState) -> None:
        for song in state.songs:
            self.render_song_button(state, song)

    def render_detail(self, state: CatalogState, song: Dict[str, Any]) -> None:
        @st.dialog(song.get("title") or "Song")
        def song_dialog():
            st.caption(song.get("artist", ""))
            st.markdown(format_lyrics(song.get("lyrics")))
            if st.button("Close", key="close_detail"):
                close_detail(state)
                st.rerun()

        song_dialog()


class MobileView(SongCatalogView):
    """Single column; the selected song replaces the list until closed"""

    def render_list(self, state: CatalogState) -> None:
        if state.selected_song is not None:
            return
        for song in state.songs:
            self.render_song_button(state, song)

    def render_detail(self, state: CatalogState, song: Dict[str, Any]) -> None:
        st.subheader(song.get("title", ""))
        st.caption(song.get("artist", ""))
        st.markdown(format_lyrics(song.get("lyrics")))
        st.button("Close", key="close_detail", on_click=close_detail, args=(state,))


VIEWS = {
    "desktop": DesktopView,
    "mobile": MobileView,
}


def get_view(layout: str) -> SongCatalogView:
    try:
        return VIEWS[layout.lower()]()
    except KeyError:
        raise ValueError(f"Unknown layout '{layout}', expected one of: {', '.join(VIEWS)}")
