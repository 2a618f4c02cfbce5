import datetime
import logging
import re
from dataclasses import dataclass, fields
from enum import Enum

from config import DOCUMENT_LIBRARY, FACTS_PLACEHOLDER

logger = logging.getLogger(__name__)


class DocumentType(str, Enum):
    VALIDATION = "Debt Validation Letter"
    VERIFICATION = "Debt Verification Letter"
    ANSWER = "Answer"
    ADMISSIONS = "Requests for Admission"
    PRODUCTION = "Requests for Production"
    INTERROGATORIES = "Interrogatories"
    COUNTERCLAIM = "Counterclaim"


PRE_SUIT_DOCUMENTS = (DocumentType.VALIDATION, DocumentType.VERIFICATION)
POST_SUIT_DOCUMENTS = (
    DocumentType.ANSWER,
    DocumentType.ADMISSIONS,
    DocumentType.PRODUCTION,
    DocumentType.INTERROGATORIES,
)


@dataclass(frozen=True)
class CaseFacts:
    # Court caption
    plaintiff_name: str = ""
    defendant_name: str = ""
    court_city: str = ""
    court_county: str = ""
    court_state: str = ""
    court_type: str = ""
    case_number: str = ""
    filing_date: str = ""  # yyyy-mm-dd

    # Plaintiff counsel contact
    atty_name: str = ""
    atty_phone: str = ""
    atty_address: str = ""

    # Status + strategy
    has_been_sued: bool = False
    include_counterclaim: bool = False
    arbitration_clause: bool = False
    reported_1099c: bool = False
    assignment_notice_filed: bool = False
    atty_authorized_by_original_creditor: bool = False

    facts: str = ""

    @classmethod
    def from_mapping(cls, source):
        """
        Builds a value from form state (a dict or st.session_state).
        Unknown keys are ignored and None falls back to the field default.
        """
        values = {}
        for f in fields(cls):
            raw = source.get(f.name)
            if raw is None:
                continue
            if f.type in (bool, "bool"):
                values[f.name] = bool(raw)
            elif isinstance(raw, (datetime.date, datetime.datetime)):
                values[f.name] = raw.strftime("%Y-%m-%d")
            else:
                values[f.name] = str(raw)
        return cls(**values)


@dataclass(frozen=True)
class GeneratedDocument:
    title: str
    body: str


def decide_doc_types(facts):
    if not facts.has_been_sued:
        # Pre-suit workflow; the counterclaim toggle only matters once sued
        return list(PRE_SUIT_DOCUMENTS)
    out = list(POST_SUIT_DOCUMENTS)
    if facts.include_counterclaim:
        out.append(DocumentType.COUNTERCLAIM)
    return out


def header_block(facts):
    court_line = f"{facts.court_city}, {facts.court_county} County, {facts.court_state} – {facts.court_type} Court"
    court_line = re.sub(r"\s+", " ", court_line).strip()
    return (
        f"IN THE {court_line.upper()}\n\n"
        f"{facts.plaintiff_name} (Plaintiff)\n"
        "vs.\n"
        f"{facts.defendant_name} (Defendant)\n\n"
        f"Case No.: {facts.case_number or '[TBD]'}\n"
        f"Filed: {facts.filing_date or '[TBD]'}\n"
    )


def _triggered_clauses(doc_type, facts):
    clauses = DOCUMENT_LIBRARY[doc_type.value]["clauses"]
    return [text for flag, when, text in clauses if getattr(facts, flag) == when]


def _assemble(doc_type, facts, lead_in, extra=()):
    entry = DOCUMENT_LIBRARY[doc_type.value]
    lines = [*lead_in, *entry["paragraphs"], *extra, *_triggered_clauses(doc_type, facts)]
    lines += ["", entry["signature"]]
    return "\n".join(lines)


def _letter_lead_in(doc_type, facts):
    heading = DOCUMENT_LIBRARY[doc_type.value]["heading"]
    return [heading, "", f"To: {facts.atty_name} | {facts.atty_address} | {facts.atty_phone}", ""]


def _pleading_lead_in(doc_type, facts):
    return [header_block(facts), DOCUMENT_LIBRARY[doc_type.value]["heading"], ""]


# --- PRE-SUIT LETTERS ---

def compose_validation_letter(facts):
    return _assemble(DocumentType.VALIDATION, facts, _letter_lead_in(DocumentType.VALIDATION, facts))


def compose_verification_letter(facts):
    return _assemble(DocumentType.VERIFICATION, facts, _letter_lead_in(DocumentType.VERIFICATION, facts))


# --- POST-SUIT PLEADINGS & DISCOVERY ---

def compose_answer(facts):
    return _assemble(DocumentType.ANSWER, facts, _pleading_lead_in(DocumentType.ANSWER, facts))


def compose_admissions(facts):
    return _assemble(DocumentType.ADMISSIONS, facts, _pleading_lead_in(DocumentType.ADMISSIONS, facts))


def compose_production(facts):
    return _assemble(DocumentType.PRODUCTION, facts, _pleading_lead_in(DocumentType.PRODUCTION, facts))


def compose_interrogatories(facts):
    return _assemble(DocumentType.INTERROGATORIES, facts, _pleading_lead_in(DocumentType.INTERROGATORIES, facts))


def compose_counterclaim(facts):
    facts_line = "Facts: " + (facts.facts or FACTS_PLACEHOLDER)
    return _assemble(
        DocumentType.COUNTERCLAIM,
        facts,
        _pleading_lead_in(DocumentType.COUNTERCLAIM, facts),
        extra=[facts_line],
    )


COMPOSERS = {
    DocumentType.VALIDATION: compose_validation_letter,
    DocumentType.VERIFICATION: compose_verification_letter,
    DocumentType.ANSWER: compose_answer,
    DocumentType.ADMISSIONS: compose_admissions,
    DocumentType.PRODUCTION: compose_production,
    DocumentType.INTERROGATORIES: compose_interrogatories,
    DocumentType.COUNTERCLAIM: compose_counterclaim,
}


def compose_documents(facts):
    """Every document the current case status calls for, in filing order."""
    docs = [GeneratedDocument(t.value, COMPOSERS[t](facts)) for t in decide_doc_types(facts)]
    logger.debug("Composed %d documents: %s", len(docs), ", ".join(d.title for d in docs))
    return docs


def export_filename(title):
    stem = re.sub(r"\s+", "_", title.strip()) or "document"
    return stem + ".txt"
