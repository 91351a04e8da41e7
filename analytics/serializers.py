# analytics/serializers.py
"""
Read-only serializers over the engine's dataclasses.

Values are rounded for display here; the engine itself keeps full precision.
"""
from rest_framework import serializers

from analytics.services.scoring import round_half_up


class RoundedFloatField(serializers.FloatField):
    def __init__(self, places=2, **kwargs):
        self.places = places
        kwargs.setdefault("read_only", True)
        super().__init__(**kwargs)

    def to_representation(self, value):
        return round_half_up(float(value), self.places)


class DayBucketSerializer(serializers.Serializer):
    date = serializers.DateField(source="day")
    average_score = RoundedFloatField()
    average_intensity = RoundedFloatField(places=1)
    entry_count = serializers.IntegerField()
    has_journal = serializers.BooleanField()


class PhaseCorrelationSerializer(serializers.Serializer):
    phase = serializers.CharField()
    average_score = RoundedFloatField()
    entry_count = serializers.IntegerField()
    day_count = serializers.IntegerField()


class LunarDayPointSerializer(serializers.Serializer):
    date = serializers.DateField(source="day")
    phase = serializers.CharField()
    illumination = serializers.FloatField(allow_null=True)
    average_score = RoundedFloatField()
    entry_count = serializers.IntegerField()


class ActivityImpactSerializer(serializers.Serializer):
    activity = serializers.CharField()
    average_score_boost = serializers.FloatField()
    frequency = serializers.IntegerField()
    latest_date = serializers.DateTimeField(allow_null=True)


class MoodSummarySerializer(serializers.Serializer):
    total_entries = serializers.IntegerField()
    average_score = RoundedFloatField()
    mood_distribution = serializers.DictField(child=serializers.IntegerField())
    moods_by_phase = serializers.DictField()
    valence_distribution = serializers.DictField(child=serializers.IntegerField())


class MoodTrendSerializer(serializers.Serializer):
    direction = serializers.CharField()
    strength = RoundedFloatField(places=3)
    volatility = RoundedFloatField(places=3)
    daily_averages = serializers.DictField(child=RoundedFloatField())
    weekday_pattern = serializers.DictField(child=RoundedFloatField())


class MoodAnalyticsSerializer(serializers.Serializer):
    generated_at = serializers.DateTimeField()
    today = serializers.DateField()
    period_days = serializers.IntegerField(allow_null=True)
    summary = MoodSummarySerializer()
    current_streak = serializers.IntegerField()
    longest_streak = serializers.IntegerField()
    consistency = serializers.IntegerField()
    trend = MoodTrendSerializer()
    insights = serializers.ListField(child=serializers.CharField())
    metadata = serializers.DictField()


class EmotionWordSerializer(serializers.Serializer):
    word = serializers.CharField()
    count = serializers.IntegerField()
    sentiment = serializers.CharField()


class SentimentPointSerializer(serializers.Serializer):
    date = serializers.DateField(source="day")
    score = RoundedFloatField(places=3)
    has_signal = serializers.BooleanField()
    label = serializers.CharField()
    positive_count = serializers.IntegerField()
    negative_count = serializers.IntegerField()


class TopicCountSerializer(serializers.Serializer):
    topic = serializers.CharField()
    count = serializers.IntegerField()


class JournalAnalyticsSerializer(serializers.Serializer):
    generated_at = serializers.DateTimeField()
    emotion_cloud = EmotionWordSerializer(many=True)
    sentiment_over_time = SentimentPointSerializer(many=True)
    topic_frequency = TopicCountSerializer(many=True)
    total_entries = serializers.IntegerField()


class RevenueMonthSerializer(serializers.Serializer):
    month = serializers.CharField()
    revenue = serializers.FloatField()
    new_subscriptions = serializers.IntegerField()
    churned_subscriptions = serializers.IntegerField()
    net_growth = serializers.IntegerField()
    active_at_start = serializers.IntegerField()
    monthly_churn = serializers.FloatField()
    monthly_growth = serializers.FloatField()
    revenue_by_tier = serializers.DictField(child=serializers.FloatField())


class RevenueMetricsSerializer(serializers.Serializer):
    monthly_revenue = RevenueMonthSerializer(many=True)
    total_revenue = serializers.FloatField()
    active_subscriptions = serializers.IntegerField()
    canceled_subscriptions = serializers.IntegerField()
    average_revenue_per_user = serializers.FloatField()
    monthly_churn = serializers.FloatField()
    monthly_growth = serializers.FloatField()
