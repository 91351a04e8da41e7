from datetime import timedelta

import pytest

from analytics.lexicons import SentimentLexicon
from analytics.services.bucketing import bucket_by_day
from analytics.services.journal_lexicon import (
    count_text_entries,
    extract_emotion_cloud,
    sentiment_over_time,
    tokenize,
    topic_frequency,
)
from analytics.types import JournalText

from .conftest import TODAY


def cloud_dict(cloud):
    return {item.word: item for item in cloud}


def test_tokenize_splits_on_non_letters():
    assert tokenize("Can't STOP-smiling, 100% happy!") == ["can", "t", "stop", "smiling", "happy"]
    assert tokenize("") == []
    assert tokenize(None) == []


def test_repeated_word_is_counted_once_with_its_total(make_entry):
    cloud = extract_emotion_cloud([make_entry(notes="I feel overwhelmed and overwhelmed again")])

    overwhelmed = [item for item in cloud if item.word == "overwhelmed"]
    assert len(overwhelmed) == 1
    assert overwhelmed[0].count == 2
    assert overwhelmed[0].sentiment == "negative"


def test_unlexiconed_tokens_are_neutral_not_discarded(make_entry):
    words = cloud_dict(extract_emotion_cloud([make_entry(notes="Grateful for sunshine")]))

    assert words["grateful"].sentiment == "positive"
    assert words["sunshine"].sentiment == "neutral"


def test_stopwords_and_short_tokens_are_dropped_but_lexicon_words_kept(make_entry):
    words = cloud_dict(extract_emotion_cloud([make_entry(notes="This was a bad day with joy")]))

    assert "this" not in words
    assert "with" not in words
    assert "was" not in words
    assert words["bad"].sentiment == "negative"
    assert words["joy"].sentiment == "positive"


def test_sub_mood_tags_are_tokenized(make_entry):
    words = cloud_dict(extract_emotion_cloud([make_entry(notes=None, sub_moods=["Energetic", "calm"])]))

    assert words["energetic"].sentiment == "positive"
    assert words["calm"].count == 1


def test_cloud_is_ranked_by_count_then_word(make_entry):
    entries = [
        make_entry(notes="happy happy sunshine"),
        make_entry(notes="stressed sunshine happy"),
    ]
    cloud = extract_emotion_cloud(entries)

    assert [(item.word, item.count) for item in cloud] == [
        ("happy", 3),
        ("sunshine", 2),
        ("stressed", 1),
    ]


def test_journals_feed_the_cloud():
    journals = [JournalText(day=TODAY, content="Feeling hopeful about tomorrow")]
    words = cloud_dict(extract_emotion_cloud([], journals=journals))
    assert words["hopeful"].sentiment == "positive"


def test_custom_lexicon(make_entry):
    lexicon = SentimentLexicon(positive=frozenset({"sunshine"}), negative=frozenset(), stopwords=frozenset())
    words = cloud_dict(extract_emotion_cloud([make_entry(notes="sunshine happy")], lexicon))

    assert words["sunshine"].sentiment == "positive"
    assert words["happy"].sentiment == "neutral"


def test_empty_input():
    assert extract_emotion_cloud([]) == []
    assert sentiment_over_time([]) == []
    assert topic_frequency([]) == []
    assert count_text_entries([]) == 0


def test_sentiment_score_per_day(make_entry):
    entries = [
        make_entry(notes="happy and grateful", hour=9),
        make_entry(notes="but stressed", hour=18),
        make_entry(day=TODAY - timedelta(days=1), notes="sad sad day"),
    ]

    series = sentiment_over_time(bucket_by_day(entries))

    assert [point.day for point in series] == [TODAY - timedelta(days=1), TODAY]
    assert series[0].score == -1.0
    assert series[0].label == "negative"
    assert series[1].score == pytest.approx(1 / 3)
    assert series[1].positive_count == 2
    assert series[1].negative_count == 1
    assert all(-1.0 <= point.score <= 1.0 for point in series)


def test_day_without_signal_is_kept_with_zero(make_entry):
    entries = [
        make_entry(day=TODAY - timedelta(days=1), notes="walked to the shop"),
        make_entry(notes="wonderful"),
    ]

    series = sentiment_over_time(bucket_by_day(entries))

    assert len(series) == 2
    quiet = series[0]
    assert quiet.score == 0
    assert quiet.has_signal is False
    assert quiet.label == "neutral"
    assert series[1].has_signal is True


def test_journal_only_days_get_a_point(make_entry):
    journals = [
        JournalText(day=TODAY - timedelta(days=5), content="A terrible awful week"),
        JournalText(day=TODAY, content="   "),
    ]

    series = sentiment_over_time(bucket_by_day([make_entry(notes="calm")]), journals=journals)

    assert [point.day for point in series] == [TODAY - timedelta(days=5), TODAY]
    assert series[0].score == -1.0
    assert series[1].score == 1.0


def test_sentiment_series_can_be_limited(make_entry):
    entries = [make_entry(day=TODAY - timedelta(days=offset), notes="good") for offset in range(5)]
    series = sentiment_over_time(bucket_by_day(entries), limit_days=2)
    assert [point.day for point in series] == [TODAY - timedelta(days=1), TODAY]


def test_topic_frequency(make_entry):
    entries = [
        make_entry(notes="Long meeting at work with my boss"),
        make_entry(notes="Could not sleep, so tired"),
        make_entry(notes=None),
    ]
    journals = [JournalText(day=TODAY, content="Dinner with family and a friend")]

    topics = {item.topic: item.count for item in topic_frequency(entries, journals)}

    assert topics["Work"] == 3
    assert topics["Sleep"] == 2
    assert topics["Relationships"] == 2
    assert "Activities" not in topics
    ranked = [item.topic for item in topic_frequency(entries, journals)]
    assert ranked[0] == "Work"


def test_count_text_entries(make_entry):
    entries = [make_entry(notes="one"), make_entry(notes=""), make_entry(notes=None)]
    journals = [JournalText(day=TODAY, content="two"), JournalText(day=TODAY, content=" ")]
    assert count_text_entries(entries, journals) == 2
