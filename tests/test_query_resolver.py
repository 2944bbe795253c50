"""Tests for query classification, keyword ranking and reply selection."""

import pytest

from query_resolver import (
    QueryIntent,
    QueryResolver,
    extract_section_number,
    normalize_query,
    resolve,
)
from response_formatter import EMERGENCY_HEADER, fallback_response


def test_normalize_query():
    assert normalize_query("  What Is An FIR?  ") == "what is an fir?"
    assert normalize_query("அவசரம்") == "அவசரம்"
    assert normalize_query("") == ""
    assert normalize_query(None) == ""


def test_extract_section_number():
    assert extract_section_number("what is section 302") == "302"
    assert extract_section_number("section   420 cheating") == "420"
    assert extract_section_number("section 498a") == "498"
    assert extract_section_number("sections about theft") is None
    assert extract_section_number("section abc") is None


def test_first_keyword_resolves_to_entry(sample_kb):
    """A query made of an entry's first keyword returns that entry's answer."""
    for entry in sample_kb.entries:
        assert resolve(entry.keywords[0], sample_kb, "english") == entry.answer


@pytest.mark.parametrize("query", [
    "emergency",
    "I need help with section 302",
    "URGENT: someone broke into my house",
    "அவசரம்",
    "உதவி தேவை",
    "legal emergency about fir",
])
def test_emergency_has_priority(sample_kb, query):
    assert resolve(query, sample_kb, "english").startswith(EMERGENCY_HEADER["english"])


def test_emergency_lists_contacts_in_order(sample_kb):
    text = resolve("help", sample_kb, "ta")
    lines = text.splitlines()
    assert lines[0] == "அவசர தொடர்பு எண்கள்:"
    assert lines[2] == "- Police Emergency: 100"
    assert lines[-1] == "- Cyber Crime Helpline: 1930"


def test_section_302_hit(sample_kb):
    provision = sample_kb.legal_provisions["302"]
    assert resolve("what is section 302", sample_kb, "english") == (
        f"Information about Section 302:\n\nDescription: {provision.description}\n\n"
        f"Punishment: {provision.punishment}"
    )


def test_section_lookup_is_case_insensitive_on_the_word(sample_kb):
    assert resolve("SECTION 420", sample_kb, "english").startswith("Information about Section 420:")


def test_section_hit_tamil_labels(sample_kb):
    text = resolve("section 354", sample_kb, "ta")
    assert text.startswith("பிரிவு 354 பற்றிய தகவல்:")
    assert sample_kb.legal_provisions["354"].description in text


def test_section_9999_miss(sample_kb):
    assert resolve("section 9999", sample_kb, "english") == (
        "I'm sorry, I don't have information about Section 9999. Please check if the section number "
        "is correct or ask about a different legal provision."
    )


def test_alphanumeric_section_is_not_reachable_from_chat(sample_kb):
    """Only the digits are extracted, so 498A is looked up as 498."""
    text = resolve("section 498A", sample_kb, "english")
    assert text.startswith("I'm sorry, I don't have information about Section 498.")


def test_legal_trigger_without_number_falls_through(sample_kb):
    """'law' without 'section <n>' behaves like a general knowledge base query."""
    rights = sample_kb.entries[3]
    assert resolve("what does the law say about arrest", sample_kb, "english") == rights.answer


def test_tamil_legal_trigger_without_section_word(sample_kb):
    assert resolve("பிரிவு 302", sample_kb, "ta") == fallback_response("ta")


@pytest.mark.parametrize("language,expected", [
    ("ta", fallback_response("ta")),
    ("english", fallback_response("english")),
    ("hindi", fallback_response("english")),
    ("fr", fallback_response("english")),
])
def test_no_match_fallback(sample_kb, language, expected):
    assert resolve("what is the weather today", sample_kb, language) == expected


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
def test_empty_query_falls_back(sample_kb, query):
    assert resolve(query, sample_kb, "english") == fallback_response("english")


def test_more_keyword_matches_wins(small_kb):
    """Entry B matches two keywords, entry A one: B is chosen."""
    assert resolve("theft of my car, it was stolen", small_kb, "english") == small_kb.entries[1].answer


def test_ties_keep_original_order(small_kb):
    assert resolve("my phone", small_kb, "english") == small_kb.entries[2].answer
    assert resolve("theft", small_kb, "english") == small_kb.entries[0].answer


def test_rank_entries_orders_by_match_count(small_kb):
    ranked = QueryResolver().rank_entries("stolen phone after theft", small_kb.entries)
    assert [(entry.category, count) for entry, count in ranked] == [
        ("Vehicles", 2), ("Theft", 1), ("Lost", 1), ("Lost", 1),
    ]


def test_translated_answer_is_returned(sample_kb):
    fir = sample_kb.entries[1]
    assert resolve("fir", sample_kb, "ta") == fir.translations["ta"].answer
    assert resolve("fir", sample_kb, "hindi") == fir.translations["hindi"].answer


def test_empty_translation_answer_uses_english(small_kb):
    assert resolve("stolen", small_kb, "hindi") == small_kb.entries[1].answer


def test_missing_translation_uses_english(small_kb):
    assert resolve("phone", small_kb, "ta") == small_kb.entries[2].answer


def test_resolve_is_idempotent(sample_kb):
    first = resolve("how to file a complaint", sample_kb, "ta")
    assert resolve("how to file a complaint", sample_kb, "ta") == first


def test_resolve_detailed_reports_intent(sample_kb):
    resolver = QueryResolver()
    assert resolver.resolve_detailed("help", sample_kb).intent is QueryIntent.EMERGENCY

    legal = resolver.resolve_detailed("section 302", sample_kb)
    assert legal.intent is QueryIntent.LEGAL_SECTION
    assert legal.section == "302"

    kb_match = resolver.resolve_detailed("rights in custody", sample_kb)
    assert kb_match.intent is QueryIntent.KNOWLEDGE_BASE
    assert kb_match.entry.category == "Rights"
    assert kb_match.match_count == 2

    assert resolver.resolve_detailed("xyz", sample_kb).intent is QueryIntent.FALLBACK


def test_custom_trigger_sets(sample_kb):
    resolver = QueryResolver(emergency_triggers={"SOS"}, legal_triggers={"ipc"})
    assert resolver.resolve("sos", sample_kb).startswith(EMERGENCY_HEADER["english"])
    # "help" is no longer an emergency trigger and matches nothing else
    assert resolver.resolve("help", sample_kb) == fallback_response("english")
    # "section" alone no longer opens the legal branch
    assert resolver.resolve("section 302", sample_kb) == fallback_response("english")
    assert resolver.resolve("ipc section 302", sample_kb).startswith("Information about Section 302:")
