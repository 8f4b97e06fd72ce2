"""PassForge -- Streamlit web interface."""

import streamlit as st

from passforge import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MAX_SCORE,
    MIN_LENGTH,
    CharsetOptions,
    EmptyCharsetError,
    generate_password,
    score_strength,
)
from passforge.history import MemoryHistoryStore, PasswordHistory, export_filename

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=32, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

ICON_HISTORY = _LUCIDE.format(s=20, paths=(
    '<path d="M3 12a9 9 0 1 0 9-9 9.75 9.75 0 0 0-6.74 2.74L3 8"/>'
    '<path d="M3 3v5h5"/><path d="M12 7v5l4 2"/>'
))

# Weak, Fair, Good, Strong
LABEL_COLORS = {
    "Weak": "#d32f2f",
    "Fair": "#f57c00",
    "Good": "#fbc02d",
    "Strong": "#388e3c",
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="PassForge",
    page_icon="\U0001f511",
    layout="centered",
)

if "history" not in st.session_state:
    st.session_state.history = PasswordHistory(MemoryHistoryStore())
if "current" not in st.session_state:
    st.session_state.current = ""

history: PasswordHistory = st.session_state.history


def _show_strength(password: str) -> None:
    report = score_strength(password)
    color = LABEL_COLORS[report["label"]]
    st.markdown(
        f"**Strength:** <span style='color:{color}'>{report['label']} Password</span>"
        f" &nbsp;·&nbsp; {report['score']}/{MAX_SCORE}",
        unsafe_allow_html=True,
    )
    st.progress(report["score"] / MAX_SCORE)


# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_KEY_ROUND} PassForge</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Generate random passwords from the character types you pick.  \n"
    "Passwords are generated locally and never leave this session."
)

tab_generate, tab_check = st.tabs(["Generate Password", "Check Password"])

# ── Generate tab ───────────────────────────────────────────────────────────

with tab_generate:
    length = st.slider("Length", MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH)
    col1, col2 = st.columns(2)
    with col1:
        use_upper = st.checkbox("Uppercase (A-Z)", value=True)
        use_lower = st.checkbox("Lowercase (a-z)", value=True)
        use_numbers = st.checkbox("Numbers (0-9)", value=True)
    with col2:
        use_symbols = st.checkbox("Symbols (!@#$...)", value=True)
        exclude_ambiguous = st.checkbox("Exclude similar (0 O 1 l I)", value=False)

    if st.button("Generate password", type="primary"):
        options = CharsetOptions(
            include_uppercase=use_upper,
            include_lowercase=use_lower,
            include_numbers=use_numbers,
            include_symbols=use_symbols,
            exclude_ambiguous=exclude_ambiguous,
        )
        try:
            st.session_state.current = generate_password(length, options)
        except EmptyCharsetError:
            st.error("Please select at least one character type!")
        else:
            history.add(st.session_state.current)

    if st.session_state.current:
        st.code(st.session_state.current, language=None)
        _show_strength(st.session_state.current)

    st.divider()
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_HISTORY} <strong>Recent passwords</strong></p>',
        unsafe_allow_html=True,
    )
    if len(history):
        for i, pwd in enumerate(history):
            col_pwd, col_show = st.columns([5, 1])
            with col_pwd:
                st.code(pwd, language=None)
            with col_show:
                # Loads the entry back into the output above and rescores it.
                if st.button("Show", key=f"history-{i}"):
                    st.session_state.current = pwd
                    st.rerun()

        col_clear, col_download = st.columns(2)
        with col_clear:
            if st.button("Clear history"):
                history.clear()
                st.rerun()
        with col_download:
            st.download_button(
                "Download passwords",
                data=history.export_text(),
                file_name=export_filename(),
                mime="text/plain",
            )
    else:
        st.caption("No passwords generated yet.")

# ── Check tab ──────────────────────────────────────────────────────────────

with tab_check:
    password = st.text_input(
        "Password",
        type="default",
        placeholder="Enter a password…",
        autocomplete="off",
    )

    if password:
        _show_strength(password)
