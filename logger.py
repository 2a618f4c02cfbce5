import logging
import os
from datetime import datetime

import pandas as pd

import client_settings as cs

logger = logging.getLogger(__name__)

LOG_COLUMNS = ["Timestamp", "Document", "Filename", "Action"]


def log_export(title, filename, action, log_file=None):
    """
    Appends one export event to the CSV log. The document body is never stored.
    Returns (ok, message) like the other collaborators.
    """
    log_file = log_file or cs.EXPORT_LOG_FILE
    new_entry = {
        "Timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "Document": title,
        "Filename": filename,
        "Action": action,
    }

    # Headers only go in a fresh (or empty) file
    file_exists = os.path.isfile(log_file) and os.path.getsize(log_file) > 0

    try:
        df = pd.DataFrame([new_entry], columns=LOG_COLUMNS)
        df.to_csv(log_file, mode="a", header=not file_exists, index=False)
    except OSError as e:
        logger.warning("Could not write export log %s: %s", log_file, e)
        return False, str(e)
    return True, "Logged"


def load_logs(log_file=None):
    """Reads the export log for the history panel."""
    log_file = log_file or cs.EXPORT_LOG_FILE
    if os.path.exists(log_file):
        try:
            return pd.read_csv(log_file)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, OSError) as e:
            logger.warning("Export log %s unreadable, showing empty history: %s", log_file, e)
    return pd.DataFrame(columns=LOG_COLUMNS)
