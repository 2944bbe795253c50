"""
police_kb.py

Knowledge Base for the Police Help Desk chatbot.

Holds question/answer entries about police procedures, emergency contact
numbers and IPC legal provisions (with translations). The knowledge base is
built once at start-up, validated and normalised here, and never mutated
afterwards, so a single instance can be shared by every request.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger("PoliceKnowledgeBase")


class KnowledgeBaseError(ValueError):
    """Raised when knowledge base data is missing or structurally invalid."""


# ================================
# Data model
# ================================
@dataclass(frozen=True)
class Translation:
    question: str = ""
    answer: str = ""


@dataclass(frozen=True)
class KnowledgeEntry:
    category: str
    question: str
    answer: str
    keywords: Tuple[str, ...]
    translations: Mapping[str, Translation] = field(default_factory=lambda: MappingProxyType({}))

    def localized(self, language: str) -> Tuple[str, str]:
        """Return (question, answer) in the requested language, English where missing."""
        translation = self.translations.get(language)
        if translation is None:
            return self.question, self.answer
        return translation.question or self.question, translation.answer or self.answer


@dataclass(frozen=True)
class LegalTranslation:
    description: Optional[str] = None
    punishment: Optional[str] = None


@dataclass(frozen=True)
class LegalProvision:
    section: str
    description: str
    punishment: str
    translations: Mapping[str, LegalTranslation] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class KnowledgeBase:
    entries: Tuple[KnowledgeEntry, ...]
    emergency_contacts: Mapping[str, str]
    legal_provisions: Mapping[str, LegalProvision]


# ================================
# Normalisation
# ================================
_LEGAL_FIELDS = ("description", "punishment")


def normalize_legal_translations(raw: Mapping[str, Any]) -> Dict[str, LegalTranslation]:
    """
    Merge the nested ``translations`` map and legacy flat ``<lang>_<field>`` keys
    into one mapping of language code -> LegalTranslation.

    Nested values take precedence over flat ones for the same language and field.
    """
    merged: Dict[str, Dict[str, str]] = {}

    for key, value in raw.items():
        if not isinstance(value, str) or "_" not in key:
            continue
        language, _, field_name = key.partition("_")
        if field_name in _LEGAL_FIELDS and language:
            merged.setdefault(language, {})[field_name] = value

    nested = raw.get("translations") or {}
    if not isinstance(nested, Mapping):
        raise KnowledgeBaseError("Legal provision 'translations' must be an object")
    for language, override in nested.items():
        if not isinstance(override, Mapping):
            raise KnowledgeBaseError(f"Translation '{language}' must be an object")
        for field_name in _LEGAL_FIELDS:
            if override.get(field_name):
                merged.setdefault(language, {})[field_name] = override[field_name]

    return {language: LegalTranslation(**fields) for language, fields in merged.items()}


def _normalize_keywords(raw_keywords: Any) -> Tuple[str, ...]:
    if not isinstance(raw_keywords, (list, tuple, set, frozenset)):
        raise KnowledgeBaseError("Entry 'keywords' must be a list of strings")
    seen: List[str] = []
    for keyword in raw_keywords:
        if not isinstance(keyword, str):
            raise KnowledgeBaseError(f"Keyword {keyword!r} must be a string")
        keyword = keyword.strip().lower()
        if keyword and keyword not in seen:
            seen.append(keyword)
    return tuple(seen)


def _build_entry(index: int, raw: Any) -> KnowledgeEntry:
    if not isinstance(raw, Mapping):
        raise KnowledgeBaseError(f"Entry #{index} must be an object")
    for required in ("question", "answer"):
        if not isinstance(raw.get(required), str):
            raise KnowledgeBaseError(f"Entry #{index} is missing '{required}'")

    keywords = _normalize_keywords(raw.get("keywords", []))
    if not keywords:
        logger.warning("Entry #%d (%s) has no keywords and can never be matched", index, raw["question"])

    raw_translations = raw.get("translations") or {}
    if not isinstance(raw_translations, Mapping):
        raise KnowledgeBaseError(f"Entry #{index} 'translations' must be an object")

    translations: Dict[str, Translation] = {}
    for language, override in raw_translations.items():
        if not isinstance(override, Mapping):
            raise KnowledgeBaseError(f"Entry #{index} translation '{language}' must be an object")
        translations[language] = Translation(
            question=override.get("question", "") or "",
            answer=override.get("answer", "") or "",
        )

    return KnowledgeEntry(
        category=raw.get("category", "General"),
        question=raw["question"],
        answer=raw["answer"],
        keywords=keywords,
        translations=MappingProxyType(translations),
    )


def _build_provision(section: str, raw: Any) -> LegalProvision:
    if not isinstance(raw, Mapping):
        raise KnowledgeBaseError(f"Section {section} must be an object")
    for required in _LEGAL_FIELDS:
        if not isinstance(raw.get(required), str):
            raise KnowledgeBaseError(f"Section {section} is missing '{required}'")
    return LegalProvision(
        section=str(section),
        description=raw["description"],
        punishment=raw["punishment"],
        translations=MappingProxyType(normalize_legal_translations(raw)),
    )


def _section(raw: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if name in raw:
            return raw[name]
    raise KnowledgeBaseError(f"Knowledge base is missing '{names[0]}'")


# ================================
# Public API
# ================================
def build_knowledge_base(raw: Mapping[str, Any]) -> KnowledgeBase:
    """
    Validate raw knowledge base data and build the immutable KnowledgeBase.

    Args:
        raw: Mapping with ``entries``, ``emergencyContacts`` and ``legalProvisions``
            (snake_case keys are accepted as well).

    Raises:
        KnowledgeBaseError: if a section is missing or malformed.
    """
    if not isinstance(raw, Mapping):
        raise KnowledgeBaseError("Knowledge base must be an object")

    raw_entries = _section(raw, "entries")
    raw_contacts = _section(raw, "emergencyContacts", "emergency_contacts")
    raw_provisions = _section(raw, "legalProvisions", "legal_provisions")

    if not isinstance(raw_entries, (list, tuple)):
        raise KnowledgeBaseError("'entries' must be a list")
    if not isinstance(raw_contacts, Mapping):
        raise KnowledgeBaseError("'emergencyContacts' must be an object")
    if not isinstance(raw_provisions, Mapping):
        raise KnowledgeBaseError("'legalProvisions' must be an object")

    entries = tuple(_build_entry(i, item) for i, item in enumerate(raw_entries))
    contacts = {str(name): str(number) for name, number in raw_contacts.items()}
    provisions = {str(key): _build_provision(str(key), value) for key, value in raw_provisions.items()}

    kb = KnowledgeBase(
        entries=entries,
        emergency_contacts=MappingProxyType(contacts),
        legal_provisions=MappingProxyType(provisions),
    )
    logger.info(
        "Knowledge base built: %d entries, %d emergency contacts, %d legal provisions",
        len(entries), len(contacts), len(provisions),
    )
    return kb


def load_knowledge_base(path: Union[str, Path]) -> KnowledgeBase:
    """Load and build a knowledge base from a UTF-8 JSON file."""
    kb_file = Path(path)
    if not kb_file.exists():
        raise KnowledgeBaseError(f"Knowledge base file not found: {kb_file}")

    try:
        with open(kb_file, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"Invalid JSON in {kb_file}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise KnowledgeBaseError(f"Cannot read knowledge base file {kb_file}: {e}") from e

    logger.info(f"Loaded knowledge base data from {kb_file}")
    return build_knowledge_base(raw)


def load_sample_data() -> KnowledgeBase:
    """Build the bundled sample knowledge base."""
    from sample_data import SAMPLE_KNOWLEDGE_BASE

    return build_knowledge_base(SAMPLE_KNOWLEDGE_BASE)


def find_provision(provisions: Mapping[str, LegalProvision], section: str) -> Optional[LegalProvision]:
    """Case-insensitive lookup of a legal provision by section key."""
    provision = provisions.get(section)
    if provision is not None:
        return provision
    wanted = section.strip().lower()
    for key, candidate in provisions.items():
        if key.lower() == wanted:
            return candidate
    return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    kb = load_sample_data()
    print(json.dumps(list(kb.legal_provisions), indent=2))
