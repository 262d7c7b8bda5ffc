#!/usr/bin/env python3
"""
Corpus Builder - Normalized text corpus used by every keyword-based sub-score.

The corpus is the app name, category and captions joined in that order,
lowercased and whitespace-collapsed. A second variant drops captions that
look like screenshot filenames; only numeric-signal detection uses it.
"""

from typing import List
import logging
import re

from core.scorer.keyword_tables import IMAGE_EXTENSIONS, FILENAME_PREFIXES
from core.scorer.models import ScoreInput

logger = logging.getLogger(__name__)

_WHITESPACE_PATTERN = re.compile(r'\s+')
_WORD_PATTERN = re.compile(r'[a-z0-9]+')
_PATH_SEPARATOR_PATTERN = re.compile(r'[\\/]')
_IMAGE_EXTENSION_PATTERN = re.compile(
    r'\.(?:' + '|'.join(IMAGE_EXTENSIONS) + r')$',
    re.IGNORECASE
)
# e.g. "screenshot_1", "img-004", "shot12b"
_GENERIC_FILENAME_PATTERN = re.compile(
    r'^(?:' + '|'.join(FILENAME_PREFIXES) + r')?[_-]?[a-z]*\d+[a-z0-9_-]*$',
    re.IGNORECASE
)


def normalize_text(value: str) -> str:
    """Trim, collapse whitespace runs to a single space and lowercase."""
    return _WHITESPACE_PATTERN.sub(' ', value.strip()).lower()


def extract_words(corpus: str) -> List[str]:
    """Alphanumeric word runs of an already lowercased corpus."""
    return _WORD_PATTERN.findall(corpus)


def has_path_separator(value: str) -> bool:
    return bool(_PATH_SEPARATOR_PATTERN.search(value))


def has_image_extension(value: str) -> bool:
    return bool(_IMAGE_EXTENSION_PATTERN.search(value))


def is_generic_numbered_filename(value: str) -> bool:
    return bool(_GENERIC_FILENAME_PATTERN.match(value))


def is_likely_screenshot_filename(value: str) -> bool:
    """
    Classify a caption as a screenshot filename rather than marketing text.

    Checks run in order: path separator, image extension, then the generic
    numbered-name shape. Blank captions are never filenames.
    """
    normalized = normalize_text(value)

    if not normalized:
        return False
    if has_path_separator(normalized):
        return True
    if has_image_extension(normalized):
        return True

    return is_generic_numbered_filename(normalized)


def build_corpus(score_input: ScoreInput, exclude_filename_captions: bool = False) -> str:
    """
    Build the normalized corpus for a scoring input.

    Args:
        score_input: App identity record
        exclude_filename_captions: Drop filename-like captions (numeric detection only)

    Returns:
        Lowercased, whitespace-collapsed text
    """
    captions = score_input.captions
    if exclude_filename_captions:
        captions = tuple(c for c in captions if not is_likely_screenshot_filename(c))
        dropped = len(score_input.captions) - len(captions)
        if dropped:
            logger.debug(f"Excluded {dropped} filename-like caption(s) from numeric corpus")

    return normalize_text(' '.join([score_input.app_name, score_input.category, ' '.join(captions)]))
