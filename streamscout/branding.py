"""Brand-name rewriting for user-facing labels and titles.

Legacy and competing host names are mapped onto the product's own names.
Each rule is a whole-word regex; hyphenated, joined and spaced spellings map
to the matching canonical spelling, and the lower-case spaced forms keep
lower case.
"""

from __future__ import annotations

import re
from typing import Pattern, Sequence, Tuple

BrandRule = Tuple[Pattern[str], str]


def _rule(regex: str, replacement: str, ignore_case: bool = False) -> BrandRule:
    return re.compile(regex, re.IGNORECASE if ignore_case else 0), replacement


CLOUD_RULES: Sequence[BrandRule] = (
    _rule(r"\bHub-Cloud\b", "N-Cloud"),
    _rule(r"\bHubCloud\b", "N-Cloud"),
    _rule(r"\bhub-cloud\b", "N-Cloud", ignore_case=True),
    _rule(r"\bHub cloud\b", "N cloud"),
    _rule(r"\bV-Cloud\b", "N-Cloud"),
    _rule(r"\bVCloud\b", "N-Cloud"),
    _rule(r"\bvCloud\b", "N-Cloud"),
    _rule(r"\bv-cloud\b", "N-Cloud", ignore_case=True),
    _rule(r"\bV cloud\b", "N cloud"),
    _rule(r"\bv cloud\b", "n cloud"),
)

DRIVE_RULES: Sequence[BrandRule] = (
    _rule(r"\bNext-Drive\b", "Vlyx-Drive"),
    _rule(r"\bNextDrive\b", "Vlyx-Drive"),
    _rule(r"\bNext-drive\b", "Vlyx-Drive"),
    _rule(r"\bnext-drive\b", "vlyx-drive", ignore_case=True),
    _rule(r"\bNext drive\b", "Vlyx drive"),
    _rule(r"\bnext drive\b", "vlyx drive"),
    _rule(r"\bNextdrive\b", "Vlyxdrive"),
)

BRAND_RULES: Sequence[BrandRule] = (*CLOUD_RULES, *DRIVE_RULES)


def apply_rules(text: str, rules: Sequence[BrandRule]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def normalize_branding(text: str) -> str:
    """Rewrite every known legacy brand spelling in *text*."""
    if not text:
        return text
    return apply_rules(text, BRAND_RULES)
