# conftest.py  (under tests/)
import copy
import sys
from pathlib import Path

import orjson
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Add src directory to Python path for proper imports
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _land_case_a():
    return {
        "id": "case-a",
        "keyword": "fraudulent land transfer",
        "url": "https://kenyalaw.org/a",
        "parsedOutput": {
            "caseInformation": {
                "caseTitle": "Mwangi v Otieno",
                "court": "Environment and Land Court",
                "dateOfJudgment": "2023-05-10",
                "caseURL": "https://kenyalaw.org/a",
                "originalSourceFileURL": "https://kenyalaw.org/a.pdf",
            },
            "legalIssues": [
                {
                    "issue": "Fraudulent land transfer",
                    "type": "primary",
                    "relevantStatutes": ["Land Registration Act, Section 80(1)"],
                    "description": "Whether the transfer was procured by fraud",
                },
                {"issue": "Compensation claims", "type": "secondary", "relevantStatutes": []},
            ],
            "arguments": {
                "plaintiffArguments": "Title was obtained by fraud",
                "defendantArguments": "Bona fide purchaser for value",
            },
            "evidence": {"keyEvidencePresented": ["Original title deed", "Forensic report"]},
            "courtAnalysis": {
                "courtReasoning": "Transfer lacked consent",
                "keyPrecedentsCited": [
                    {
                        "precedentName": "Hubert L. Martin v Margaret Kamar",
                        "precedentSummary": "Innocent purchaser doctrine",
                    }
                ],
            },
            "finalRulingAndOrders": {
                "disposition": "Judgment in favor of Plaintiff",
                "specificOrders": ["Cancellation of title"],
            },
            "analysisAndImplications": {
                "legalImplications": "Registry records are rebuttable",
                "practicalImplications": "Verify titles before purchase",
            },
        },
    }


def _land_case_b():
    parsed = {
        "caseInformation": {
            "caseTitle": "Kamau v Njoroge",
            "court": "Environment and Land Court",
            "dateOfJudgment": "2021-03-02",
            "caseURL": "https://kenyalaw.org/b",
            "originalSourceFileURL": "No available download link",
        },
        "legalIssues": [
            {
                "issue": "Fraudulent land transfer",
                "type": "primary",
                "relevantStatutes": [
                    "Land Registration Act, Section 80(1)",
                    "Land Act, Section 26",
                ],
            }
        ],
        "arguments": {
            "plaintiffArguments": "Title was obtained by fraud",
            "defendantArguments": "Suit is time barred",
        },
        "evidence": {"keyEvidencePresented": "Original title deed"},
        "courtAnalysis": {
            "courtReasoning": ["Transfer lacked consent"],
            "keyPrecedentsCited": [
                {
                    "precedentName": "Hubert L. Martin v Margaret Kamar",
                    "precedentSummary": "Cited on indefeasibility",
                },
                {
                    "precedentName": "Arthi Highway Developers v West End Butchery",
                    "precedentSummary": "Fraud vitiates title",
                },
            ],
        },
        "finalRulingAndOrders": {
            "disposition": "Judgment in favor of Plaintiff",
            "specificOrders": ["Cancellation of title", "Permanent injunction"],
        },
    }
    # Upstream extraction sometimes hands parsedOutput over as a JSON string
    return {"id": "case-b", "parsedOutput": orjson.dumps(parsed).decode("utf-8")}


def _land_case_c():
    return {
        "id": "case-c",
        "parsedOutput": {
            "caseInformation": {
                "caseTitle": "Republic v Wanjiru",
                "court": "High Court",
                "dateOfJudgment": "not a date",
                "originalSourceFileURL": "not visible",
            },
            "legalIssues": [{"issue": "Validity of land titles", "type": "primary"}],
            "arguments": {"defendantArguments": "Suit is time barred"},
            "courtAnalysis": {"keyPrecedentsCited": "not a list"},
            "finalRulingAndOrders": {"disposition": "Suit dismissed with costs to the defendant"},
        },
    }


@pytest.fixture
def land_cases():
    """Three irregular case records about land fraud."""
    return [_land_case_a(), _land_case_b(), _land_case_c()]


@pytest.fixture
def land_weights():
    return [0.9, 0.6, 0.3]


@pytest.fixture
def frozen_copy():
    """Deep copy helper for asserting inputs are not mutated."""
    return copy.deepcopy
