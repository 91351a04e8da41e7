# analytics/services/journal_lexicon.py
"""
Lexicon-based emotion extraction from journal text.

Tokens are looked up in a closed, hand-maintained word list. There is no
statistical model here: a word is positive or negative only if the
lexicon says so, and everything else is neutral.
"""
from collections import Counter
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
import logging
import re

from analytics.lexicons import DEFAULT_LEXICON, TOPIC_KEYWORDS, SentimentLexicon
from analytics.types import DayBucket, EmotionWord, Entry, JournalText, SentimentPoint, TopicCount

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"[a-z]+")


def tokenize(text: str) -> List[str]:
    """Lowercase alphabetic tokens; anything else is a boundary"""
    if not text:
        return []
    return TOKEN_PATTERN.findall(text.lower())


def _entry_texts(entry: Entry) -> List[str]:
    texts = [entry.notes] if entry.has_journal else []
    texts.extend(tag for tag in entry.sub_moods if tag and tag.strip())
    return texts


def _journal_texts(journals: Iterable[JournalText]) -> List[JournalText]:
    return [journal for journal in journals if journal.content and journal.content.strip()]


def _keep_in_cloud(token: str, lexicon: SentimentLexicon) -> bool:
    if lexicon.is_sentiment_bearing(token):
        return True
    return len(token) >= lexicon.min_token_length and token not in lexicon.stopwords


def extract_emotion_cloud(
    entries: Iterable[Entry],
    lexicon: SentimentLexicon = DEFAULT_LEXICON,
    journals: Iterable[JournalText] = (),
) -> List[EmotionWord]:
    """
    Frequency-ranked words from notes, sub-mood tags and daily journals.

    The list is not truncated; picking a top N is left to the caller.
    """
    counts: Counter = Counter()
    texts: List[str] = []
    for entry in entries:
        texts.extend(_entry_texts(entry))
    texts.extend(journal.content for journal in _journal_texts(journals))

    for text in texts:
        for token in tokenize(text):
            if _keep_in_cloud(token, lexicon):
                counts[(token, lexicon.classify(token))] += 1

    cloud = [
        EmotionWord(word=word, count=count, sentiment=sentiment)
        for (word, sentiment), count in counts.items()
    ]
    cloud.sort(key=lambda item: (-item.count, item.word))
    logger.debug(f"Emotion cloud built from {len(texts)} texts, {len(cloud)} distinct words")
    return cloud


def count_sentiment(tokens: Iterable[str], lexicon: SentimentLexicon = DEFAULT_LEXICON) -> Tuple[int, int]:
    """Positive and negative token occurrences"""
    positive = negative = 0
    for token in tokens:
        label = lexicon.classify(token)
        if label == "positive":
            positive += 1
        elif label == "negative":
            negative += 1
    return positive, negative


def score_day(day: date, tokens: Iterable[str], lexicon: SentimentLexicon = DEFAULT_LEXICON) -> SentimentPoint:
    positive, negative = count_sentiment(tokens, lexicon)
    bearing = positive + negative
    return SentimentPoint(
        day=day,
        score=(positive - negative) / bearing if bearing else 0.0,
        has_signal=bearing > 0,
        positive_count=positive,
        negative_count=negative,
    )


def sentiment_over_time(
    buckets: Iterable[DayBucket],
    lexicon: SentimentLexicon = DEFAULT_LEXICON,
    journals: Iterable[JournalText] = (),
    limit_days: Optional[int] = None,
) -> List[SentimentPoint]:
    """
    One signed sentiment value per day, oldest first.

    Score is (positive - negative) / (positive + negative) token occurrences
    for the day. Days with no sentiment-bearing tokens stay in the series
    with score 0 and has_signal False so charts keep a continuous axis.
    """
    texts_by_day: Dict[date, List[str]] = {}
    for bucket in buckets:
        day_texts = texts_by_day.setdefault(bucket.day, [])
        for entry in bucket.entries:
            day_texts.extend(_entry_texts(entry))
    for journal in _journal_texts(journals):
        texts_by_day.setdefault(journal.day, []).append(journal.content)

    series = [
        score_day(day, (token for text in texts_by_day[day] for token in tokenize(text)), lexicon)
        for day in sorted(texts_by_day)
    ]

    if limit_days:
        series = series[-limit_days:]
    return series


def topic_frequency(
    entries: Iterable[Entry],
    journals: Iterable[JournalText] = (),
    topics: Mapping[str, Sequence[str]] = TOPIC_KEYWORDS,
) -> List[TopicCount]:
    """Count keyword hits per topic across notes and journals, busiest topic first"""
    texts = [entry.notes.lower() for entry in entries if entry.has_journal]
    texts.extend(journal.content.lower() for journal in _journal_texts(journals))

    counts = {topic: 0 for topic in topics}
    for text in texts:
        for topic, keywords in topics.items():
            counts[topic] += sum(1 for keyword in keywords if keyword in text)

    ranked = [TopicCount(topic=topic, count=count) for topic, count in counts.items() if count > 0]
    return sorted(ranked, key=lambda item: item.count, reverse=True)


def count_text_entries(entries: Iterable[Entry], journals: Iterable[JournalText] = ()) -> int:
    return sum(1 for entry in entries if entry.has_journal) + len(_journal_texts(journals))
