"""Tests for knowledge base loading, validation and normalisation."""

import dataclasses
import json
import logging

import pytest

from police_kb import (
    KnowledgeBaseError,
    KnowledgeEntry,
    LegalProvision,
    build_knowledge_base,
    find_provision,
    load_knowledge_base,
    normalize_legal_translations,
)


def test_sample_data_shape(sample_kb):
    """Sample data has the expected entries, contacts and sections."""
    assert len(sample_kb.entries) == 4
    assert list(sample_kb.emergency_contacts)[0] == "Police Emergency"
    assert sample_kb.emergency_contacts["Cyber Crime Helpline"] == "1930"
    assert set(sample_kb.legal_provisions) == {"302", "376", "420", "354", "498A", "304B"}


def test_sample_translations_are_normalized(sample_kb):
    """Nested and flat Tamil fields end up in one translations mapping."""
    s302 = sample_kb.legal_provisions["302"].translations["ta"]
    assert s302.description.startswith("பிரிவு 302")
    assert s302.punishment.startswith("கொலைக்கான")

    s376 = sample_kb.legal_provisions["376"].translations["ta"]
    assert s376.description.startswith("பிரிவு 376")
    assert s376.punishment is not None


def test_nested_translation_wins_over_flat():
    """When both shapes carry the same field the nested value is kept."""
    merged = normalize_legal_translations({
        "description": "d",
        "punishment": "p",
        "ta_description": "flat",
        "translations": {"ta": {"description": "nested"}},
    })
    assert merged["ta"].description == "nested"
    assert merged["ta"].punishment is None


def test_keywords_lowercased_and_deduplicated(raw_kb):
    raw_kb["entries"][0]["keywords"] = ["Theft", "theft", " ROBBERY "]
    kb = build_knowledge_base(raw_kb)
    assert kb.entries[0].keywords == ("theft", "robbery")


def test_entry_without_keywords_is_kept_with_warning(raw_kb, caplog):
    """Keyword-less entries are a data-quality warning, not a load failure."""
    raw_kb["entries"][0]["keywords"] = []
    with caplog.at_level(logging.WARNING, logger="PoliceKnowledgeBase"):
        kb = build_knowledge_base(raw_kb)
    assert kb.entries[0].keywords == ()
    assert "no keywords" in caplog.text


@pytest.mark.parametrize("missing", ["entries", "emergencyContacts", "legalProvisions"])
def test_missing_top_level_section_raises(raw_kb, missing):
    del raw_kb[missing]
    with pytest.raises(KnowledgeBaseError):
        build_knowledge_base(raw_kb)


def test_wrong_section_types_raise(raw_kb):
    raw_kb["entries"] = {"not": "a list"}
    with pytest.raises(KnowledgeBaseError):
        build_knowledge_base(raw_kb)


def test_entry_missing_answer_raises(raw_kb):
    del raw_kb["entries"][1]["answer"]
    with pytest.raises(KnowledgeBaseError, match="answer"):
        build_knowledge_base(raw_kb)


def test_provision_missing_punishment_raises(raw_kb):
    del raw_kb["legalProvisions"]["302"]["punishment"]
    with pytest.raises(KnowledgeBaseError, match="302"):
        build_knowledge_base(raw_kb)


def test_snake_case_keys_accepted(raw_kb):
    raw_kb["emergency_contacts"] = raw_kb.pop("emergencyContacts")
    raw_kb["legal_provisions"] = raw_kb.pop("legalProvisions")
    kb = build_knowledge_base(raw_kb)
    assert kb.emergency_contacts["Ambulance"] == "108"


def test_knowledge_base_is_read_only(small_kb):
    with pytest.raises(TypeError):
        small_kb.emergency_contacts["Fire"] = "101"
    with pytest.raises(dataclasses.FrozenInstanceError):
        small_kb.entries[0].answer = "changed"


def test_find_provision_is_case_insensitive(small_kb):
    assert find_provision(small_kb.legal_provisions, "498a").section == "498A"
    assert find_provision(small_kb.legal_provisions, "302").description == "Murder."
    assert find_provision(small_kb.legal_provisions, "999") is None


def test_localized_falls_back_to_english(small_kb):
    vehicle = small_kb.entries[1]
    assert vehicle.localized("ta")[0] == "என் வாகனம் திருடப்பட்டது"
    question, answer = vehicle.localized("hindi")
    assert question == "मेरा वाहन चोरी हो गया"
    assert answer == vehicle.answer
    assert small_kb.entries[0].localized("ta") == (small_kb.entries[0].question, small_kb.entries[0].answer)


def test_load_knowledge_base_from_json(tmp_path, raw_kb):
    kb_file = tmp_path / "kb.json"
    kb_file.write_text(json.dumps(raw_kb, ensure_ascii=False), encoding="utf-8")
    kb = load_knowledge_base(kb_file)
    assert len(kb.entries) == 4
    assert kb.legal_provisions["302"].translations["ta"].punishment == "மரணம் அல்லது ஆயுள் சிறை."


def test_load_knowledge_base_missing_file(tmp_path):
    with pytest.raises(KnowledgeBaseError, match="not found"):
        load_knowledge_base(tmp_path / "missing.json")


def test_load_knowledge_base_invalid_json(tmp_path):
    kb_file = tmp_path / "kb.json"
    kb_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(KnowledgeBaseError, match="Invalid JSON"):
        load_knowledge_base(kb_file)


def test_load_knowledge_base_invalid_utf8(tmp_path):
    """Bytes that are not UTF-8 surface as a knowledge base error."""
    kb_file = tmp_path / "kb.json"
    kb_file.write_bytes(b'{"entries": ["\xff"]}')
    with pytest.raises(KnowledgeBaseError, match="Cannot read"):
        load_knowledge_base(kb_file)


def test_load_knowledge_base_directory_path(tmp_path):
    """A path that exists but is not a readable file is rejected."""
    with pytest.raises(KnowledgeBaseError, match="Cannot read"):
        load_knowledge_base(tmp_path)


def test_entry_translations_must_be_an_object(raw_kb):
    raw_kb["entries"][0]["translations"] = ["ta"]
    with pytest.raises(KnowledgeBaseError, match="'translations' must be an object"):
        build_knowledge_base(raw_kb)


@pytest.mark.parametrize("keyword", [None, 42, ["theft"]])
def test_non_string_keywords_raise(raw_kb, keyword):
    """Only strings are accepted as keywords."""
    raw_kb["entries"][0]["keywords"] = ["theft", keyword]
    with pytest.raises(KnowledgeBaseError, match="must be a string"):
        build_knowledge_base(raw_kb)


def test_default_translations_are_not_shared():
    """Entries and provisions built without translations get their own empty mapping."""
    first = KnowledgeEntry(category="General", question="q", answer="a", keywords=("k",))
    second = KnowledgeEntry(category="General", question="q2", answer="a2", keywords=("k",))
    assert dict(first.translations) == {}
    assert first.localized("ta") == ("q", "a")
    assert first.translations is not second.translations

    provision = LegalProvision(section="1", description="d", punishment="p")
    assert dict(provision.translations) == {}
