"""
Data models and schemas for the Company Briefing Function.

Holds the inbound request model, the Gemini structured-output schema and the
helpers that assemble the upstream generateContent payload.
"""

import copy
from typing import Any, Dict

from pydantic import BaseModel, Field, StrictStr


# ============================================================================
# Input Models
# ============================================================================

class BriefingRequest(BaseModel):
    """Inbound request body: the company to research."""
    companyName: StrictStr = Field(min_length=1)


# ============================================================================
# Gemini Response Schema
# ============================================================================

def _string() -> Dict[str, str]:
    return {"type": "STRING"}


def _string_list() -> Dict[str, Any]:
    return {"type": "ARRAY", "items": {"type": "STRING"}}


# Sent as generationConfig.responseSchema so Gemini answers with this shape.
# Describes intended output only; responses are not validated against it.
BRIEFING_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "companyOverview": {
            "type": "OBJECT",
            "properties": {
                "name": _string(),
                "industry": _string(),
                "headquarters": _string(),
                "founded": _string(),
                "employeeCount": _string(),
                "mission": _string(),
                "businessModel": _string(),
                "keyProducts": _string_list(),
            },
            "required": ["name", "industry", "mission", "businessModel"]
        },
        "strategicOutlook": {
            "type": "OBJECT",
            "properties": {
                "currentStrategy": _string(),
                "growthInitiatives": _string_list(),
                "competitivePosition": _string(),
                "keyCompetitors": _string_list(),
                "financialHealth": _string(),
            },
            "required": ["currentStrategy", "competitivePosition"]
        },
        "cultureAndValues": {
            "type": "OBJECT",
            "properties": {
                "coreValues": _string_list(),
                "workEnvironment": _string(),
                "leadershipStyle": _string(),
                "employeeSentiment": _string(),
            },
            "required": ["coreValues", "workEnvironment"]
        },
        "talentLandscape": {
            "type": "OBJECT",
            "properties": {
                "hiringTrends": _string(),
                "inDemandSkills": _string_list(),
                "interviewProcess": _string(),
                "compensationInsights": _string(),
            },
            "required": ["hiringTrends", "inDemandSkills"]
        },
        "riskAssessment": {
            "type": "OBJECT",
            "properties": {
                "marketRisks": _string_list(),
                "operationalRisks": _string_list(),
                "reputationalConcerns": _string_list(),
                "overallRiskLevel": {
                    "type": "STRING",
                    "enum": ["Low", "Moderate", "Elevated", "High"]
                },
            },
            "required": ["overallRiskLevel"]
        },
        "candidateAlignment": {
            "type": "OBJECT",
            "properties": {
                "idealCandidateProfile": _string(),
                "talkingPoints": _string_list(),
                "questionsToAsk": _string_list(),
                "potentialRedFlags": _string_list(),
            },
            "required": ["idealCandidateProfile", "talkingPoints"]
        },
        "recentNews": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "summary": _string(),
                    "sourceUrl": _string(),
                },
                "required": ["summary", "sourceUrl"]
            }
        },
        "integrityStatement": _string(),
    },
    "required": [
        "companyOverview",
        "strategicOutlook",
        "cultureAndValues",
        "talentLandscape",
        "riskAssessment",
        "candidateAlignment",
        "recentNews",
        "integrityStatement"
    ]
}


# ============================================================================
# Prompt Assembly
# ============================================================================

ACKNOWLEDGMENT_TEXT = (
    "Understood. I will act according to the persona and instructions provided "
    "and respond only with the intelligence briefing in the required JSON format."
)

USER_QUERY_TEMPLATE = (
    'Generate a comprehensive intelligence briefing for the company: "{company_name}". '
    "Follow the persona and instructions to provide detailed, well-sourced information "
    "in the specified JSON format."
)


def build_user_query(company_name: str) -> str:
    """Render the user turn for a company. The name is inserted as-is."""
    return USER_QUERY_TEMPLATE.format(company_name=company_name)


def build_gemini_payload(system_prompt: str, company_name: str) -> Dict[str, Any]:
    """
    Build the generateContent request body.

    The conversation is always three turns: the system prompt, a fixed model
    acknowledgment and the templated user query.

    Args:
        system_prompt: Persona and instructions, sent verbatim
        company_name: Company to research

    Returns:
        JSON-serializable payload dict
    """
    return {
        "contents": [
            {"role": "user", "parts": [{"text": system_prompt}]},
            {"role": "model", "parts": [{"text": ACKNOWLEDGMENT_TEXT}]},
            {"role": "user", "parts": [{"text": build_user_query(company_name)}]},
        ],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": copy.deepcopy(BRIEFING_RESPONSE_SCHEMA),
        },
    }
