"""Normalizer — lowercases dream text and expands contractions."""

import re
from typing import List, Mapping, Optional, Tuple

from dream_world.models.config import DEFAULT_CONTRACTIONS


def compile_contractions(contractions: Mapping[str, str]) -> List[Tuple[re.Pattern, str]]:
    """Whole-word patterns for each contraction, in declaration order."""
    # Only ASCII letters count as word characters, so "éi'm" still expands.
    return [
        (re.compile(r"\b" + re.escape(word) + r"\b", re.ASCII), expansion)
        for word, expansion in contractions.items()
    ]


class Normalizer:
    """Contraction rules compiled once; later edits to the source mapping don't leak in."""

    def __init__(self, contractions: Optional[Mapping[str, str]] = None):
        self._rules = compile_contractions(
            DEFAULT_CONTRACTIONS if contractions is None else contractions
        )

    def normalize(self, text: str) -> str:
        normalized = text.lower()
        for pattern, expansion in self._rules:
            normalized = pattern.sub(expansion, normalized)
        return normalized

    __call__ = normalize


_default_normalizer = Normalizer()


def normalize(text: str, contractions: Optional[Mapping[str, str]] = None) -> str:
    """Lowercase ``text`` and expand contractions matched as whole words."""
    if contractions is None:
        return _default_normalizer.normalize(text)
    return Normalizer(contractions).normalize(text)
