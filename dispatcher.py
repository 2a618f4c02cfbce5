import logging

import streamlit as st

from logger import log_export

logger = logging.getLogger(__name__)


def _record(title, filename, action, log_file=None):
    ok, msg = log_export(title, filename, action, log_file=log_file)
    if not ok:
        st.toast(f"⚠️ Export not logged: {msg}")
    return ok


def offer_download(filename, text, title, key, log_file=None):
    """Download button for one document body as UTF-8 text/plain."""
    return st.download_button(
        "⬇️ Download .txt",
        data=text.encode("utf-8"),
        file_name=filename,
        mime="text/plain",
        key=key,
        on_click=_record,
        args=(title, filename, "Download", log_file),
    )


def copy_to_clipboard(text):
    """
    Shows the body verbatim with Streamlit's copy-to-clipboard button.
    Clipboard permission failures happen in the browser, not here.
    """
    logger.debug("Rendering copyable body (%d chars)", len(text))
    st.code(text, language=None, wrap_lines=True)
