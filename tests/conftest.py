import random

import pytest
import streamlit as st

from src.runthrough.domain.models import Track


class MockSessionState(dict):
    """
    Mock for st.session_state that behaves like both a dict and an object.
    Allows both dict-style and attribute-style access.
    """

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        try:
            del self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err


@pytest.fixture(autouse=True)
def mock_streamlit_session():
    """
    Auto-use fixture that ensures st.session_state exists for all tests.
    """
    original_session_state = getattr(st, "session_state", None)

    st.session_state = MockSessionState()

    yield st.session_state

    st.session_state.clear()

    if original_session_state is not None:
        st.session_state = original_session_state


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sample_tracks():
    return [
        Track(id=1, title="Blue Monday", album="Power", rating=16, playcount=12, lastplay=3300000000),
        Track(id=2, title="Unheard", album="Demo", rating=0, playcount=0, lastplay=0),
        Track(id=3, title="Skip Me", album="Demo", rating=20, playcount=3, lastplay=3200000000),
        Track(id=4, title="Old Favourite", album="Hits", rating=18, playcount=40, lastplay=3100000000),
        Track(id=5, title="Also Unheard", album="Demo", rating=8, playcount=0, lastplay=0),
    ]


GNUPOD_XML = """<?xml version='1.0' standalone='yes'?>
<gnuPod>
  <files>
    <file id="1" title="Blue Monday" album="Power" rating="16" playcount="12" lastplay="3300000000" />
    <file id="2" title="Unheard" album="Demo" rating="" playcount="" />
    <file id="3" title="Skip Me" album="Demo" rating="20" playcount="3" lastplay="3200000000" />
    <file id="4" title="Old Favourite" rating="18" playcount="40" lastplay="3100000000" />
  </files>
  <playlist name="Favourites" plid="7">
    <add id="1" />
  </playlist>
</gnuPod>
"""


@pytest.fixture
def gnupod_db(tmp_path):
    """A small GNUtunesDB.xml on disk."""
    path = tmp_path / "GNUtunesDB.xml"
    path.write_text(GNUPOD_XML, encoding="utf-8")
    return path
