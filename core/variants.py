#!/usr/bin/env python3
"""
Copy Variants - Placeholder A/B/C copy returned alongside the score.

Variant A leads with the app name, B with the category, C is neutral.
"""

from typing import Dict, List

VARIANT_LABELS = ('A', 'B', 'C')
VARIANTS_PER_LABEL = 2


def generate_variants(app_name: str, category: str) -> Dict[str, List[str]]:
    """Deterministic placeholder variants for the /generate response."""
    leads = {'A': app_name, 'B': category, 'C': ''}
    return {
        label: [
            f"{leads[label]} {label}{i}".strip()
            for i in range(1, VARIANTS_PER_LABEL + 1)
        ]
        for label in VARIANT_LABELS
    }
