# analytics/lexicons.py
"""
Fixed lookup tables used by the analytics engine.

Everything the engine classifies against lives here as plain data so the
tables can be extended or localized without touching the algorithms.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple

# Base rank for each of the five moods, lowest to highest
MOOD_RANKS: Dict[str, int] = {
    "sad": 1,
    "anxious": 2,
    "neutral": 3,
    "happy": 4,
    "excited": 5,
}

# Rank used for moods missing from MOOD_RANKS
DEFAULT_MOOD_RANK = 3

# Signed score adjustment applied for a recognised sub-mood
SUB_MOOD_MODIFIERS: Dict[str, float] = {
    # Positive
    "euphoric": 0.30,
    "energetic": 0.20,
    "content": 0.10,
    "joyful": 0.20,
    "peaceful": 0.15,
    "optimistic": 0.20,
    "grateful": 0.15,
    "confident": 0.20,
    "inspired": 0.25,
    "serene": 0.10,
    "hopeful": 0.15,
    "enthusiastic": 0.20,
    "accomplished": 0.20,
    "loved": 0.15,
    "calm": 0.10,
    # Negative
    "overwhelmed": -0.30,
    "irritated": -0.20,
    "disappointed": -0.20,
    "worried": -0.25,
    "lonely": -0.30,
    "frustrated": -0.25,
    "stressed": -0.30,
    "sad": -0.20,
    "angry": -0.25,
    "fearful": -0.30,
    "depressed": -0.40,
    "anxious": -0.25,
    "exhausted": -0.20,
    "rejected": -0.30,
    "guilty": -0.20,
    # Near-neutral
    "tired": -0.10,
    "focused": 0.05,
    "curious": 0.05,
    "thoughtful": 0.05,
    "restless": -0.05,
}

# Moods grouped by valence for the distribution breakdown
POSITIVE_MOODS: FrozenSet[str] = frozenset({"excited", "happy"})
NEUTRAL_MOODS: FrozenSet[str] = frozenset({"neutral"})
CHALLENGING_MOODS: FrozenSet[str] = frozenset({"sad", "anxious"})

MOON_PHASES: Tuple[str, ...] = (
    "new_moon",
    "waxing_crescent",
    "first_quarter",
    "waxing_gibbous",
    "full_moon",
    "waning_gibbous",
    "third_quarter",
    "waning_crescent",
)

# Keywords searched for in journal notes for activity impact
ACTIVITY_VOCABULARY: Tuple[str, ...] = (
    "journaling",
    "exercise",
    "meditation",
    "walking",
    "yoga",
    "sleep",
)

# Activity tags offered by the entry form
ACTIVITY_TAGS: Tuple[str, ...] = (
    "gym",
    "yoga",
    "meditation",
    "sports",
    "outdoors",
    "other",
)

POSITIVE_WORDS: FrozenSet[str] = frozenset({
    "happy", "joy", "love", "excited", "amazing", "wonderful", "great", "good",
    "beautiful", "peaceful", "calm", "grateful", "blessed", "success", "achieve",
    "win", "celebrate", "energized", "motivated", "celebratory", "inspired",
    "playful", "creative", "hopeful", "fantastic", "excellent", "perfect",
    "awesome", "brilliant", "fabulous", "delighted", "thrilled", "elated",
    "content", "satisfied", "pleased", "cheerful", "optimistic", "confident",
    "proud", "accomplished", "fulfilled", "thankful", "appreciative", "radiant",
    "vibrant", "dynamic", "enthusiastic", "passionate", "determined", "focused",
    "clear", "bright", "uplifting", "refreshing", "invigorating", "rejuvenating",
    "euphoric", "energetic", "joyful", "serene", "loved",
})

NEGATIVE_WORDS: FrozenSet[str] = frozenset({
    "sad", "angry", "hate", "terrible", "awful", "bad", "worst", "pain", "hurt",
    "stress", "anxious", "worried", "fear", "fail", "loss", "difficult",
    "problem", "disappointed", "frustrated", "depressed", "overwhelmed",
    "exhausted", "tired", "drained", "defeated", "hopeless", "discouraged",
    "upset", "irritated", "annoyed", "miserable", "lonely", "isolated",
    "rejected", "abandoned", "betrayed", "guilty", "ashamed", "embarrassed",
    "confused", "lost", "stuck", "blocked", "struggling", "stressed", "fearful",
})

# Filler words left out of the emotion cloud
STOPWORDS: FrozenSet[str] = frozenset({
    "this", "that", "with", "have", "will", "been", "they", "them", "were",
    "said", "each", "which", "their", "time", "what", "when", "where", "make",
    "like", "into", "only", "other", "many", "some", "very", "after", "first",
    "well", "year", "work", "such", "even", "want", "because", "these", "give",
    "most", "from", "just", "then", "than", "there", "about", "would", "could",
    "should", "today",
})

# Shortest non-lexicon token kept in the emotion cloud
MIN_CLOUD_TOKEN_LENGTH = 4

TOPIC_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "Work": ("work", "job", "office", "meeting", "project", "boss", "colleague",
             "deadline", "stress", "career"),
    "Relationships": ("love", "friend", "family", "partner", "relationship",
                      "date", "marriage", "boyfriend", "girlfriend", "spouse"),
    "Health": ("health", "exercise", "gym", "run", "walk", "doctor", "medicine",
               "sick", "pain", "energy"),
    "Emotions": ("happy", "sad", "angry", "excited", "nervous", "anxious", "calm",
                 "peaceful", "frustrated", "joy"),
    "Activities": ("travel", "vacation", "movie", "book", "music", "hobby",
                   "sport", "game", "shopping", "cooking"),
    "Sleep": ("sleep", "tired", "rest", "dream", "insomnia", "wake", "nap",
              "exhausted", "sleepy", "bed"),
}


@dataclass(frozen=True)
class SentimentLexicon:
    """Closed word list mapping tokens to a sentiment label"""

    positive: FrozenSet[str] = POSITIVE_WORDS
    negative: FrozenSet[str] = NEGATIVE_WORDS
    stopwords: FrozenSet[str] = field(default=STOPWORDS)
    min_token_length: int = MIN_CLOUD_TOKEN_LENGTH

    def classify(self, word: str) -> str:
        if word in self.positive:
            return "positive"
        if word in self.negative:
            return "negative"
        return "neutral"

    def is_sentiment_bearing(self, word: str) -> bool:
        return word in self.positive or word in self.negative


DEFAULT_LEXICON = SentimentLexicon()
