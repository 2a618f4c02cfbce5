import logging

import streamlit as st
from streamlit.errors import StreamlitAPIException

from backend import CaseFacts, compose_documents, export_filename
from config import ATTORNEY_FIELDS, CAPTION_FIELDS, LOGIC_NOTES, STRATEGY_FLAGS
from dispatcher import copy_to_clipboard, offer_download
from logger import load_logs

# --- 🔗 IMPORT CLIENT SETTINGS ---
import client_settings as cs

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

st.set_page_config(page_title=cs.APP_TITLE, page_icon=cs.PAGE_ICON, layout="wide")

# --- SECRETS OVERRIDE ---
try:
    cs.EXPORT_LOG_FILE = st.secrets.get("EXPORT_LOG_FILE", cs.EXPORT_LOG_FILE)
except (FileNotFoundError, StreamlitAPIException):
    pass  # no secrets.toml

# --- HEADER ---
st.caption(cs.CLIENT_NAME.upper())
st.title(f"🛡️ {cs.TAGLINE}")

left, right = st.columns(2, gap="large")

# ==========================================
# LEFT: FORM
# ==========================================
with left:
    with st.container(border=True):
        st.subheader("⚖️ Case Caption")
        c1, c2 = st.columns(2)
        for i, (key, field) in enumerate(CAPTION_FIELDS.items()):
            col = c1 if i % 2 == 0 else c2
            col.text_input(field["description"], placeholder=field["placeholder"], key=key)
        c2.date_input("Filing Date", value=None, key="filing_date")

    with st.container(border=True):
        st.subheader("🔨 Plaintiff’s Attorney")
        c1, c2 = st.columns(2)
        c1.text_input(ATTORNEY_FIELDS["atty_name"]["description"],
                      placeholder=ATTORNEY_FIELDS["atty_name"]["placeholder"], key="atty_name")
        c2.text_input(ATTORNEY_FIELDS["atty_phone"]["description"],
                      placeholder=ATTORNEY_FIELDS["atty_phone"]["placeholder"], key="atty_phone")
        st.text_input(ATTORNEY_FIELDS["atty_address"]["description"],
                      placeholder=ATTORNEY_FIELDS["atty_address"]["placeholder"], key="atty_address")

    with st.container(border=True):
        st.subheader("✅ Status & Strategy")
        for key, label in STRATEGY_FLAGS.items():
            st.toggle(label, key=key)

    with st.container(border=True):
        st.subheader("📄 Facts (optional)")
        st.text_area("Facts", placeholder="Short narrative (dates, calls, letters, key facts)…",
                     key="facts", height=120, label_visibility="collapsed")

# --- RECOMPUTE ON EVERY RERUN ---
facts = CaseFacts.from_mapping(st.session_state)
docs = compose_documents(facts)

# ==========================================
# RIGHT: OUTPUT
# ==========================================
with right:
    with st.container(border=True):
        st.subheader("✨ Generated Documents")
        for tab, doc in zip(st.tabs([d.title for d in docs]), docs):
            with tab:
                copy_to_clipboard(doc.body)
                filename = export_filename(doc.title)
                offer_download(filename, doc.body, doc.title, key=f"download_{filename}")

    with st.container(border=True):
        st.subheader("➡️ What gets generated (logic)")
        st.markdown("\n".join(f"- {note}" for note in LOGIC_NOTES))

    with st.expander("💼 Export History"):
        st.dataframe(load_logs())

# --- FOOTER ---
st.divider()
st.caption(f"© {cs.CLIENT_NAME}. {cs.DISCLAIMER_TEXT}")
