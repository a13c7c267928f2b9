"""Tokenizer — splits normalized text into words and content words."""

import re
from typing import AbstractSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from dream_world.models.config import DEFAULT_CONFIG, TransformConfig
from dream_world.pipeline.normalizer import normalize

WORD_PATTERN = re.compile(r"[a-z]+")


class TokenStream(BaseModel):
    """Both views of a dream's words."""

    model_config = ConfigDict(frozen=True)

    full: Tuple[str, ...] = ()              # Every word, stopwords included
    filtered: Tuple[str, ...] = ()          # Content words only


def tokenize(
    normalized: str, stopwords: Optional[AbstractSet[str]] = None
) -> TokenStream:
    """
    Extract every run of lowercase ASCII letters, in input order.

    Anything else (digits, punctuation, whitespace, non-ASCII letters) only
    separates words. ``filtered`` drops stopwords but keeps the order;
    stopwords stay in ``full`` because some of them act as relation markers.
    """
    if stopwords is None:
        stopwords = DEFAULT_CONFIG.stopwords

    full = tuple(WORD_PATTERN.findall(normalized))
    filtered = tuple(word for word in full if word not in stopwords)
    return TokenStream(full=full, filtered=filtered)


def tokenize_dream(
    dream: str, config: TransformConfig = DEFAULT_CONFIG
) -> Tuple[str, ...]:
    """Normalize raw dream text and return its content words."""
    normalized = normalize(dream, config.contractions)
    return tokenize(normalized, config.stopwords).filtered
