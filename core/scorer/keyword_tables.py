"""
Keyword Tables - Fixed vocabularies used by the keyword-based sub-scores.

All tables are immutable and built once at import time.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

CTA_KEYWORDS: Tuple[str, ...] = (
    'download', 'get', 'start', 'try', 'now', 'free', 'join', 'unlock',
)

BENEFIT_KEYWORDS: Tuple[str, ...] = (
    'save', 'easy', 'fast', 'improve', 'boost', 'productivity', 'growth',
)

EMOTION_KEYWORDS: Tuple[str, ...] = (
    'amazing', 'love', 'powerful', 'effortless', 'confident',
)

_UTILITY_KEYWORDS = ('tool', 'utility', 'quick', 'simple', 'manage', 'organize', 'optimize')

CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'productivity': ('productivity', 'focus', 'task', 'plan', 'organize', 'workflow', 'efficiency'),
    'finance': ('budget', 'finance', 'money', 'expense', 'invest', 'saving', 'portfolio'),
    'health': ('health', 'fitness', 'workout', 'wellness', 'sleep', 'calorie', 'habit'),
    'education': ('learn', 'study', 'course', 'lesson', 'quiz', 'practice', 'education'),
    'gaming': ('game', 'level', 'battle', 'quest', 'multiplayer', 'score', 'leaderboard'),
    'lifestyle': ('lifestyle', 'routine', 'daily', 'habit', 'self-care', 'balance', 'home'),
    'travel': ('travel', 'trip', 'itinerary', 'flight', 'hotel', 'booking', 'destination'),
    'business': ('business', 'sales', 'crm', 'lead', 'pipeline', 'team', 'revenue'),
    # aliases share one list
    'utility': _UTILITY_KEYWORDS,
    'utilities': _UTILITY_KEYWORDS,
})

IMAGE_EXTENSIONS: Tuple[str, ...] = (
    'png', 'jpg', 'jpeg', 'webp', 'gif', 'bmp', 'svg', 'heic', 'heif', 'tif', 'tiff', 'avif',
)

FILENAME_PREFIXES: Tuple[str, ...] = (
    'img', 'image', 'screenshot', 'screen', 'shot', 'capture', 'photo', 'pic', 'ss',
)


def category_keywords_for(category: str) -> Tuple[str, ...]:
    """Keywords for a declared category (trimmed, case-insensitive); empty if unknown."""
    return CATEGORY_KEYWORDS.get(category.strip().lower(), ())
