"""Heuristic content scoring for social-platform readiness.

Pure functions only: the same text always yields the same analysis.
"""

import math
import re

from content_analyzer.scoring.models import HeuristicAnalysis

OPTIMAL_WORDS_PER_SENTENCE = 15
LONG_SENTENCE_WORDS = 25

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_CTA_RE = re.compile(r"share|comment|like", re.IGNORECASE)

MICRO_BLOG_TIP = (
    "Perfect for Twitter/X! Your concise content fits the character limit "
    "perfectly. Consider adding relevant hashtags to increase reach."
)
CAPTION_TIP = (
    "Great for Instagram captions! This length allows for engaging storytelling "
    "while keeping your audience's attention. Add emojis to make it more "
    "visually appealing."
)
PROFESSIONAL_POST_TIP = (
    "Excellent for LinkedIn! This length provides enough substance to "
    "demonstrate expertise while remaining scannable for busy professionals."
)
SERIES_TIP = (
    "This content is comprehensive and perfect for Facebook or LinkedIn "
    "articles. Consider breaking it into a series of posts or a carousel to "
    "maintain engagement across multiple days."
)
BREVITY_TIP = (
    "Some sentences are quite long for social media. Try breaking them into "
    "shorter, punchier statements that are easier to read on mobile devices."
)
QUESTION_PRAISE = (
    "Excellent use of questions! This encourages audience interaction and "
    "increases comment engagement."
)
QUESTION_PROMPT = (
    "Add a compelling question at the end to encourage comments and "
    "discussion. Questions like 'What do you think?' drive engagement."
)
HASHTAG_TIP = (
    "Your content has good substance. Add 3-5 relevant hashtags to increase "
    "discoverability."
)
CTA_TIP = (
    "Include a clear call-to-action! Phrases like 'Share this with someone who "
    "needs to see it' or 'Comment below' can significantly boost engagement."
)


def score(text: str) -> HeuristicAnalysis:
    """Compute word/character counts, readability and suggestions for text."""
    word_count = count_words(text)
    sentence_count = count_sentences(text)
    avg_words = word_count / sentence_count if sentence_count else 0.0
    return HeuristicAnalysis(
        word_count=word_count,
        character_count=len(text),
        readability_score=readability_score(avg_words),
        suggestions=build_suggestions(text, word_count, avg_words),
    )


def count_words(text: str) -> int:
    return len(text.split())


def count_sentences(text: str) -> int:
    return sum(1 for part in _SENTENCE_SPLIT_RE.split(text) if part.strip())


def readability_score(avg_words_per_sentence: float) -> int:
    """100 at the optimum sentence length, minus 2 points per word of deviation."""
    raw = 100 - abs(avg_words_per_sentence - OPTIMAL_WORDS_PER_SENTENCE) * 2
    clamped = max(0.0, min(100.0, raw))
    # half-up rounding; round() would round half to even
    return int(math.floor(clamped + 0.5))


def build_suggestions(text: str, word_count: int, avg_words: float) -> list[str]:
    suggestions: list[str] = []

    if word_count < 30:
        suggestions.append(MICRO_BLOG_TIP)
    elif word_count < 100:
        suggestions.append(CAPTION_TIP)
    elif word_count < 200:
        suggestions.append(PROFESSIONAL_POST_TIP)
    elif word_count > 300:
        suggestions.append(SERIES_TIP)

    if avg_words > LONG_SENTENCE_WORDS:
        suggestions.append(BREVITY_TIP)

    if "?" in text:
        suggestions.append(QUESTION_PRAISE)
    else:
        suggestions.append(QUESTION_PROMPT)

    if word_count > 50:
        suggestions.append(HASHTAG_TIP)

    if not _CTA_RE.search(text):
        suggestions.append(CTA_TIP)

    return suggestions


def readability_label(score_value: int) -> str:
    if score_value >= 80:
        return "Excellent"
    if score_value >= 60:
        return "Good"
    if score_value >= 40:
        return "Fair"
    return "Poor"


def recommend_platform(word_count: int) -> str:
    """Best-fit platform for a piece of content of the given length."""
    if word_count < 30:
        return "Twitter/X"
    if word_count < 100:
        return "Instagram"
    if word_count < 200:
        return "LinkedIn"
    return "Facebook/LinkedIn"
