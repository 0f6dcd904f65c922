"""Keyword cascade that maps an incident summary to a case category.

Rules are evaluated in order and the first pattern that matches the
lower-cased summary wins, so the order below is the precedence when a
summary mentions several kinds of wrongdoing:

  theft > threat > defamation > injury > general

Patterns match substrings anywhere in the text (``take`` also fires on
``mistake``); this mirrors how intake officers have always tagged cases.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from barangay_case.categories import CaseCategory

logger = logging.getLogger(__name__)

CLASSIFICATION_RULES: Tuple[Tuple[re.Pattern, CaseCategory], ...] = (
    (re.compile(r"steal|theft|stole|rob|robbed|take|took|taken|takin|missing"), CaseCategory.THEFT),
    (re.compile(r"threat|kill|hurt|intimidat"), CaseCategory.THREAT),
    (re.compile(r"defam|slander|insult|libel|oral"), CaseCategory.DEFAMATION),
    (re.compile(r"injur|hit|punch|physical|attack"), CaseCategory.INJURY),
)


def matched_rule(summary: Optional[str]) -> Tuple[CaseCategory, Optional[str]]:
    """Return (category, keyword) for the first rule matching ``summary``.

    keyword is None when nothing matched and the case falls back to GENERAL.
    """
    text = (summary or "").lower()
    for pattern, category in CLASSIFICATION_RULES:
        m = pattern.search(text)
        if m:
            return category, m.group(0)
    return CaseCategory.GENERAL, None


def classify(summary: Optional[str]) -> CaseCategory:
    category, keyword = matched_rule(summary)
    logger.debug(f"Classified summary as {category.value} (keyword={keyword!r})")
    return category


def rule_keywords() -> List[Tuple[str, List[str]]]:
    """Expose the cascade as (category, keywords) pairs in evaluation order."""
    out: List[Tuple[str, List[str]]] = []
    for pattern, category in CLASSIFICATION_RULES:
        out.append((category.value, pattern.pattern.split("|")))
    out.append((CaseCategory.GENERAL.value, []))
    return out
