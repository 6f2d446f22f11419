import streamlit as st

from src.config import ShuffleConfig


def apply_styles():
    st.markdown("""
        <style>
            .block-container { padding-top: 2rem !important; }
            .stat-box { padding: 10px; background-color: #f0f2f6; border-radius: 5px; text-align: center; font-weight: bold; }
        </style>
    """, unsafe_allow_html=True)


def render_sidebar(current_path: str | None) -> tuple[str, int | None, bool, bool]:
    st.sidebar.header("⚙️ Settings")

    db_path = st.sidebar.text_input("GNUpod database", value=current_path or ShuffleConfig.db_path())

    use_seed = st.sidebar.checkbox("Reproducible order", value=False)
    seed = int(st.sidebar.number_input("Seed", min_value=0, value=0, step=1)) if use_seed else None

    load = st.sidebar.button("📂 Load", type="primary")
    reset = st.sidebar.button("Reset")

    with st.sidebar.expander("🕵️‍♂️ Telemetry"):
        st.caption("Trace ID: " + str(st.session_state.get('correlation_id', 'N/A')))

    return db_path, seed, load, reset


def render_stats(total: int, excluded: int, never_played: int):
    col1, col2, col3 = st.columns(3)
    col1.markdown(f'<div class="stat-box">🎵 {total} tracks</div>', unsafe_allow_html=True)
    col2.markdown(f'<div class="stat-box">🚫 {excluded} excluded</div>', unsafe_allow_html=True)
    col3.markdown(f'<div class="stat-box">✨ {never_played} never played</div>', unsafe_allow_html=True)
