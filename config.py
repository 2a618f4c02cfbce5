# config.py

# -------------------------------------------------
# 🧾 FORM FIELDS: caption + attorney contact
# -------------------------------------------------
# Keys match the CaseFacts field names in backend.py
CAPTION_FIELDS = {
    "plaintiff_name": {"description": "Plaintiff", "placeholder": "CAPITAL ONE, N.A."},
    "defendant_name": {"description": "Defendant", "placeholder": "John Doe"},
    "case_number": {"description": "Case Number", "placeholder": "2025‑CA‑000123"},
    "court_city": {"description": "Court City", "placeholder": "Fort Lauderdale"},
    "court_county": {"description": "Court County", "placeholder": "Broward"},
    "court_state": {"description": "Court State", "placeholder": "Florida"},
    "court_type": {"description": "Court Type", "placeholder": "Circuit Court"},
}

ATTORNEY_FIELDS = {
    "atty_name": {"description": "Name", "placeholder": "Jane Lawyer, Esq."},
    "atty_phone": {"description": "Phone", "placeholder": "(555) 123‑4567"},
    "atty_address": {"description": "Address", "placeholder": "123 Firm Rd, Suite 400, City, ST 00000"},
}

STRATEGY_FLAGS = {
    "has_been_sued": "Has a lawsuit already been filed?",
    "include_counterclaim": "Include Counterclaim (optional)",
    "arbitration_clause": "Arbitration clause applies",
    "reported_1099c": "1099‑C reported / debt discharged",
    "assignment_notice_filed": "Assignment notice filed/served",
    "atty_authorized_by_original_creditor": "Attorney has written authorization from original creditor",
}

FACTS_PLACEHOLDER = "[Insert concise factual narrative with dates]"

# -------------------------------------------------
# 📚 DOCUMENT LIBRARY
# -------------------------------------------------
# "clauses" is the conditional table: (flag, value that triggers it, paragraph).
# Paragraphs are appended in the order listed, after the fixed paragraphs.
# Hyphens inside "1099‑C", "account‑level" etc. are non-breaking (U+2011).
DOCUMENT_LIBRARY = {
    "Debt Validation Letter": {
        "heading": "RE: Debt Validation Letter",
        "paragraphs": [
            "This is a request for validation under the FDCPA and any similar state law. The alleged debt is disputed.",
            "1) Identify the current creditor and complete chain of title from the original creditor, including each assignment and bill of sale where the specific Account is listed or referenced.",
            "2) Provide the signed agreement, full account‑level transaction history, and itemization of the amount claimed (principal, interest, fees).",
            "",
            "Authority & Assignment:",
            "3) State whether you (or your firm) are authorized by the ORIGINAL CREDITOR to collect or litigate in their name; provide the actual written authorization if so.",
            "4) Confirm whether an assignment notice was filed/served as required by law for any transfer of the alleged account.",
            "5) Identify whether any attorney was hired by a debt buyer to file suit in the original creditor’s name. If so, provide the written authorization and engagement.",
            "",
        ],
        "clauses": [
            ("reported_1099c", True,
             "Debt Closure Doctrine:\n"
             "6) Confirm whether a Form 1099‑C was issued for this account and whether the creditor treated the account as discharged/closed."),
        ],
        "signature": "CredSmash Signature: The alleged claim is disputed in its entirety pending strict proof with competent, admissible evidence establishing standing and a complete chain of title.",
    },
    "Debt Verification Letter": {
        "heading": "RE: Debt Verification Letter",
        "paragraphs": [
            "Provide sworn verification from a person with personal knowledge of the records, including the basis for ownership/standing.",
            "Attach authenticated documents sufficient for trial under the Rules of Evidence, not mere spreadsheets or summaries.",
        ],
        "clauses": [],
        "signature": "CredSmash Signature: Provide sworn verification by a person with personal knowledge, not a mere servicer declaration or hearsay custodian affidavit.",
    },
    "Answer": {
        "heading": "DEFENDANT’S ANSWER",
        "paragraphs": [
            "1. Defendant denies each and every material allegation not expressly admitted herein.",
            "2. Plaintiff lacks standing absent a complete chain of title and admissible proof of ownership.",
        ],
        "clauses": [
            ("arbitration_clause", True,
             "3. Affirmative Defense – Arbitration: The governing card agreement requires binding arbitration. Defendant invokes arbitration and waives litigation."),
            ("assignment_notice_filed", False,
             "4. Affirmative Defense – Assignment/Notice: No compliant notice of assignment was provided; any transfer is unenforceable against Defendant."),
            ("atty_authorized_by_original_creditor", False,
             "5. Affirmative Defense – Authority: Any attorney purporting to sue in the original creditor’s name must show actual written authorization; none has been produced."),
            ("reported_1099c", True,
             "6. Affirmative Defense – Debt Closure: The account was discharged and a 1099‑C issued/treated as income; collection is barred."),
        ],
        "signature": "CredSmash Signature: Defendant denies for lack of sufficient knowledge where Plaintiff’s pleading is built on assignment, redaction, or data‑dump exhibits without a witness competent to testify.",
    },
    "Requests for Admission": {
        "heading": "DEFENDANT’S FIRST REQUESTS FOR ADMISSION TO PLAINTIFF",
        "paragraphs": [
            "RFA 1: Admit you do not possess a complete, unredacted chain of title linking the alleged Account from the original creditor to Plaintiff.",
            "RFA 2: Admit the alleged Account is not identified by unique account number in any bill of sale relied upon by Plaintiff.",
            "RFA 3: Admit you lack a witness with personal knowledge competent to authenticate the records under the Rules of Evidence.",
            "RFA 4: Admit the governing card agreement contains a binding arbitration clause applicable to the claims.",
        ],
        "clauses": [],
        "signature": "CredSmash Signature: Requests track the elements of standing, ownership, and admissibility to position this case for a clean Summary Judgment if Plaintiff defaults.",
    },
    "Requests for Production": {
        "heading": "DEFENDANT’S FIRST REQUEST FOR PRODUCTION TO PLAINTIFF",
        "paragraphs": [
            "1. Complete, unredacted chain of title with schedules referencing the specific Account.",
            "2. Executed cardmember agreement(s) applicable to the alleged Account and time period.",
            "3. Full, itemized account‑level transaction history supporting the amount claimed.",
            "4. Communications evidencing actual written authorization for any attorney to file in the original creditor’s name.",
            "5. Any Form 1099‑C and related discharge/charge‑off entries.",
        ],
        "clauses": [],
        "signature": "CredSmash Signature: Produce the complete, unredacted chain of title, bill of sale with schedules referencing the Account, and authenticated records under Rules of Evidence.",
    },
    "Interrogatories": {
        "heading": "DEFENDANT’S FIRST SET OF INTERROGATORIES TO PLAINTIFF",
        "paragraphs": [
            "1. Identify each person with knowledge supporting standing/ownership, including title and custodian responsibilities.",
            "2. Identify each document you contend authenticates ownership/assignment of the alleged Account.",
            "3. State the legal basis for suing under this caption and whether authority was granted by the original creditor.",
            "4. Describe any arbitration clause and your position on its applicability.",
        ],
        "clauses": [],
        "signature": "CredSmash Signature: Interrogatories compel Plaintiff to identify each custodian, each document relied upon, and the legal basis for suing under this caption.",
    },
    "Counterclaim": {
        "heading": "DEFENDANT’S COUNTERCLAIM",
        "paragraphs": [
            "Count I – Unfair or Deceptive Practices (UDAP)",
            "Count II – FDCPA Violations (where applicable)",
        ],
        "clauses": [
            ("atty_authorized_by_original_creditor", False,
             "Allegation: Filing in the name of the original creditor without written authorization is deceptive and unlawful."),
            ("reported_1099c", True,
             "Allegation: Attempting to collect after discharge/1099‑C constitutes an unfair practice."),
        ],
        "signature": "CredSmash Signature: Plaintiff’s acts, as alleged, constitute unfair or deceptive practices actionable under state UDAP and the FDCPA where applicable.",
    },
}

# Shown in the "What gets generated" panel
LOGIC_NOTES = [
    "**Not sued** → Validation + Verification letters.",
    "**Sued** → Answer + Admissions + Productions + Interrogatories. Optional Counterclaim if toggled.",
    "**Arbitration on** → Inserts an arbitration defense into the Answer.",
    "**No assignment notice** → Adds an affirmative defense on assignment/notice.",
    "**No original‑creditor authorization** → Defense on attorney authority and deceptive filing.",
    "**1099‑C on** → Adds Debt Closure Doctrine language across relevant docs.",
]
