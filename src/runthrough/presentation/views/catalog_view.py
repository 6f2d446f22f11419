import streamlit as st

from src.config import ShuffleConfig
from src.fsm import RunthroughState
from src.runthrough.presentation.formatting import track_table
from src.runthrough.presentation.viewmodel import RunthroughViewModel
from src.runthrough.presentation.views.components import render_stats


def render_catalog(vm: RunthroughViewModel) -> None:
    catalog = vm.catalog
    render_stats(
        total=len(catalog),
        excluded=sum(1 for t in catalog if t.is_excluded),
        never_played=sum(1 for t in catalog if t.never_played),
    )

    st.subheader("Catalog (most recently played first)")
    st.dataframe(track_table(catalog), use_container_width=True, hide_index=True)


def render_runthrough(vm: RunthroughViewModel) -> None:
    st.subheader(f"🔀 {ShuffleConfig.PLAYLIST_NAME}")
    st.dataframe(track_table(vm.runthrough), use_container_width=True, hide_index=True)

    if vm.current_state == RunthroughState.RANKED and st.button("💾 Save playlist"):
        vm.save()
        st.rerun()
