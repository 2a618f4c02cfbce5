# ==========================================
# ⚙️ CLIENT CONFIGURATION FILE
# ==========================================
# Edit this file to re-brand the app for a new deployment.

# --- BRANDING ---
APP_TITLE = "CredSmash | Doc Generator"   # Shows in browser tab
PAGE_ICON = "⚖️"                          # Browser tab icon
CLIENT_NAME = "CredSmash"                 # Shows in the page header
TAGLINE = "Court-Ready Doc Generator (MVP)"

# --- LEGAL DISCLAIMERS ---
DISCLAIMER_TEXT = "Educational use only. Not legal advice."

# --- EXPORT LOG ---
# Overridable with EXPORT_LOG_FILE in .streamlit/secrets.toml
EXPORT_LOG_FILE = "export_log.csv"
