"""Shared fixtures for the police chatbot tests."""

import pytest

from police_kb import build_knowledge_base, load_sample_data
from police_chatbot import PoliceChatbot


@pytest.fixture(scope="session")
def sample_kb():
    """The bundled sample knowledge base."""
    return load_sample_data()


@pytest.fixture
def raw_kb():
    """A small raw knowledge base in the loader's input shape."""
    return {
        "entries": [
            {
                "category": "Theft",
                "question": "How do I report a theft?",
                "answer": "Report the theft at your nearest police station.",
                "keywords": ["theft"],
            },
            {
                "category": "Vehicles",
                "question": "My vehicle was stolen",
                "answer": "File an FIR for the stolen vehicle.",
                "keywords": ["theft", "stolen"],
                "translations": {
                    "ta": {"question": "என் வாகனம் திருடப்பட்டது", "answer": "திருடப்பட்ட வாகனத்திற்கு FIR பதிவு செய்யவும்."},
                    "hindi": {"question": "मेरा वाहन चोरी हो गया", "answer": ""},
                },
            },
            {
                "category": "Lost",
                "question": "I lost my phone",
                "answer": "Report a lost phone online.",
                "keywords": ["phone"],
            },
            {
                "category": "Lost",
                "question": "Where do I report a lost phone?",
                "answer": "Use the lost article portal.",
                "keywords": ["phone"],
            },
        ],
        "emergencyContacts": {
            "Police Emergency": "100",
            "Ambulance": "108",
        },
        "legalProvisions": {
            "302": {
                "description": "Murder.",
                "punishment": "Death or life imprisonment.",
                "translations": {"ta": {"description": "கொலை."}},
                "ta_punishment": "மரணம் அல்லது ஆயுள் சிறை.",
            },
            "498A": {
                "description": "Cruelty by husband.",
                "punishment": "Up to three years.",
            },
        },
    }


@pytest.fixture
def small_kb(raw_kb):
    return build_knowledge_base(raw_kb)


@pytest.fixture
def chatbot(sample_kb):
    return PoliceChatbot(knowledge_base=sample_kb)
