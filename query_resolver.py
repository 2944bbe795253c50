"""
query_resolver.py

Rule-based query resolution for the Police Help Desk chatbot.

A query is classified, in this order, as:
  1) emergency        -> list of emergency contact numbers
  2) legal section    -> IPC section summary (only when "section <digits>" is present)
  3) knowledge base   -> best keyword-matched entry
  4) fallback         -> localised "I don't understand" reply
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Pattern, Sequence, Tuple

from police_kb import KnowledgeBase, KnowledgeEntry
from response_formatter import (
    fallback_response,
    format_emergency_response,
    format_legal_provision_response,
)

logger = logging.getLogger("QueryResolver")

ENGLISH = "english"

EMERGENCY_TRIGGERS: FrozenSet[str] = frozenset({
    "emergency", "urgent", "help",
    "அவசரம்", "உதவி", "அவசர",
})

LEGAL_TRIGGERS: FrozenSet[str] = frozenset({
    "section", "law", "legal", "punishment", "penalty",
    "பிரிவு", "சட்டம்", "தண்டனை",
})

# Digits only: sections such as "498A" are not reachable from chat.
SECTION_PATTERN: Pattern = re.compile(r"section\s+([0-9]+)", re.IGNORECASE)


class QueryIntent(str, Enum):
    EMERGENCY = "emergency"
    LEGAL_SECTION = "legal_section"
    KNOWLEDGE_BASE = "knowledge_base"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Resolution:
    text: str
    intent: QueryIntent
    section: Optional[str] = None
    entry: Optional[KnowledgeEntry] = None
    match_count: int = 0


def normalize_query(query: Optional[str]) -> str:
    """Trim and lower-case. Scripts without case (Tamil) pass through unchanged."""
    return (query or "").strip().lower()


def extract_section_number(normalized_query: str, pattern: Pattern = SECTION_PATTERN) -> Optional[str]:
    match = pattern.search(normalized_query)
    return match.group(1) if match else None


def count_keyword_matches(normalized_query: str, keywords: Iterable[str]) -> int:
    return sum(1 for keyword in keywords if keyword.lower() in normalized_query)


class QueryResolver:
    """
    Classifies a query and picks or formats the reply.

    Trigger sets are injectable so another locale can swap them without
    touching the control flow.
    """

    def __init__(
        self,
        emergency_triggers: Iterable[str] = EMERGENCY_TRIGGERS,
        legal_triggers: Iterable[str] = LEGAL_TRIGGERS,
        section_pattern: Pattern = SECTION_PATTERN,
    ):
        self.emergency_triggers = frozenset(t.lower() for t in emergency_triggers)
        self.legal_triggers = frozenset(t.lower() for t in legal_triggers)
        self.section_pattern = section_pattern

    def is_emergency(self, normalized_query: str) -> bool:
        return any(trigger in normalized_query for trigger in self.emergency_triggers)

    def is_legal(self, normalized_query: str) -> bool:
        return any(trigger in normalized_query for trigger in self.legal_triggers)

    def rank_entries(
        self, normalized_query: str, entries: Sequence[KnowledgeEntry]
    ) -> List[Tuple[KnowledgeEntry, int]]:
        """
        Entries with at least one keyword in the query, most matches first.
        sorted() is stable, so ties keep the original entry order.
        """
        scored = [(entry, count_keyword_matches(normalized_query, entry.keywords)) for entry in entries]
        matched = [(entry, count) for entry, count in scored if count > 0]
        return sorted(matched, key=lambda item: item[1], reverse=True)

    def resolve_detailed(self, query: str, knowledge_base: KnowledgeBase, language: str = ENGLISH) -> Resolution:
        normalized = normalize_query(query)

        if self.is_emergency(normalized):
            logger.debug("Emergency trigger matched: %r", normalized)
            return Resolution(
                text=format_emergency_response(knowledge_base.emergency_contacts, language),
                intent=QueryIntent.EMERGENCY,
            )

        if self.is_legal(normalized):
            section = extract_section_number(normalized, self.section_pattern)
            if section:
                logger.debug("Legal section lookup: %s", section)
                return Resolution(
                    text=format_legal_provision_response(section, knowledge_base.legal_provisions, language),
                    intent=QueryIntent.LEGAL_SECTION,
                    section=section,
                )
            # No section number: treat like any other knowledge base query

        ranked = self.rank_entries(normalized, knowledge_base.entries)
        if ranked:
            entry, count = ranked[0]
            answer = entry.answer
            if language != ENGLISH:
                translation = entry.translations.get(language)
                if translation is not None and translation.answer:
                    answer = translation.answer
            logger.debug("Matched entry %r with %d keyword(s)", entry.question, count)
            return Resolution(text=answer, intent=QueryIntent.KNOWLEDGE_BASE, entry=entry, match_count=count)

        return Resolution(text=fallback_response(language), intent=QueryIntent.FALLBACK)

    def resolve(self, query: str, knowledge_base: KnowledgeBase, language: str = ENGLISH) -> str:
        return self.resolve_detailed(query, knowledge_base, language).text


_default_resolver = QueryResolver()


def resolve(query: str, knowledge_base: KnowledgeBase, language: str = ENGLISH) -> str:
    """Resolve a user query to a reply string using the default trigger sets."""
    return _default_resolver.resolve(query, knowledge_base, language)
