from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from wellbeing.constants import (
    DEFAULT_MOOD_RATING,
    MOOD_EMOJIS,
    MOOD_LABELS,
    MOOD_RATINGS,
    MOOD_TAGS,
)


def normalize_rating(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        rating = int(round(float(value)))
    except (TypeError, ValueError):
        return None
    if rating not in MOOD_RATINGS:
        return None
    return rating


def tags_for_rating(rating) -> List[str]:
    return list(MOOD_TAGS.get(normalize_rating(rating), ()))


def emoji_for_rating(rating) -> str:
    return MOOD_EMOJIS.get(normalize_rating(rating), "")


def label_for_rating(rating) -> str:
    return MOOD_LABELS.get(normalize_rating(rating), "")


def toggle_tag(selected, tag) -> List[str]:
    selected = list(selected or [])
    if tag in selected:
        return [item for item in selected if item != tag]
    return selected + [tag]


def add_custom_tag(selected, available, custom) -> List[str]:
    selected = list(selected or [])
    tag = str(custom or "").strip()
    if not tag or tag in (available or []) or tag in selected:
        return selected
    return selected + [tag]


@dataclass
class MoodSelection:
    rating: int
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_state(cls, state) -> Optional["MoodSelection"]:
        state = state or {}
        rating = normalize_rating(state.get("selected_rating"))
        if rating is None:
            return None
        return cls(rating=rating, tags=list(state.get("selected_tags") or []))

    def to_state(self) -> dict:
        return {"selected_rating": self.rating, "selected_tags": list(self.tags)}

    @property
    def emoji(self) -> str:
        return emoji_for_rating(self.rating)

    @property
    def label(self) -> str:
        return label_for_rating(self.rating)

    @property
    def available_tags(self) -> List[str]:
        return tags_for_rating(self.rating)

    @property
    def custom_tags(self) -> List[str]:
        available = set(self.available_tags)
        return [tag for tag in self.tags if tag not in available]

    def logged_flash(self) -> dict:
        return {"mood_logged": True, "mood_rating": self.rating, "mood_tags": len(self.tags)}


def rating_state(rating=DEFAULT_MOOD_RATING) -> dict:
    normalized = normalize_rating(rating)
    return {"selected_rating": normalized if normalized is not None else DEFAULT_MOOD_RATING}


def save_selection(selection: MoodSelection, create_mood_log):
    return create_mood_log(selection.rating, list(selection.tags))
