"""
response_formatter.py

Builds the canned chatbot replies: emergency contact lists, IPC section
summaries and the "I don't understand" fallback. Pure string building.
"""

from typing import Mapping

from police_kb import LegalProvision, find_provision

TAMIL = "ta"

# Response templates
EMERGENCY_HEADER = {
    "english": "Here are the emergency contact numbers you can use:\n\n",
    TAMIL: "அவசர தொடர்பு எண்கள்:\n\n",
}

LEGAL_HIT_TEMPLATE = {
    "english": "Information about Section {n}:\n\nDescription: {description}\n\nPunishment: {punishment}",
    TAMIL: "பிரிவு {n} பற்றிய தகவல்:\n\nவிளக்கம்: {description}\n\nதண்டனை: {punishment}",
}

LEGAL_MISS_TEMPLATE = (
    "I'm sorry, I don't have information about Section {n}. "
    "Please check if the section number is correct or ask about a different legal provision."
)

FALLBACK_RESPONSES = {
    "english": (
        "I'm sorry, I don't have specific information about that. Please try rephrasing your question "
        "or ask about police procedures, complaint filing, emergency contacts, or legal provisions."
    ),
    TAMIL: (
        "மன்னிக்கவும், எனக்கு அந்த தகவல் தெரியவில்லை. "
        "தயவுசெய்து உங்கள் கேள்வியை மாற்றி கேளுங்கள் அல்லது காவல்துறை நடைமுறைகள், "
        "புகார் பதிவு, அவசர தொடர்புகள் அல்லது சட்ட விதிகள் பற்றி கேளுங்கள்."
    ),
}


def _template_language(language: str) -> str:
    # Only Tamil has its own templates; everything else reads English.
    return TAMIL if language == TAMIL else "english"


def format_emergency_response(contacts: Mapping[str, str], language: str) -> str:
    """Header line followed by one ``- name: number`` line per contact."""
    response = EMERGENCY_HEADER[_template_language(language)]
    for name, number in contacts.items():
        response += f"- {name}: {number}\n"
    return response


def format_legal_provision_response(
    section_number: str,
    legal_provisions: Mapping[str, LegalProvision],
    language: str,
) -> str:
    """
    Summarise an IPC section.

    The not-found message is always English. Tamil gets Tamil labels, but the
    description and punishment are the canonical English text.
    """
    provision = find_provision(legal_provisions, section_number)
    if provision is None:
        return LEGAL_MISS_TEMPLATE.format(n=section_number)

    return LEGAL_HIT_TEMPLATE[_template_language(language)].format(
        n=section_number,
        description=provision.description,
        punishment=provision.punishment,
    )


def fallback_response(language: str) -> str:
    return FALLBACK_RESPONSES[_template_language(language)]
