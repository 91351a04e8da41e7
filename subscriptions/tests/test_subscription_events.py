from decimal import Decimal

import pytest

from subscriptions.models import SubscriptionEvent


@pytest.mark.django_db
def test_to_record(user):
    event = SubscriptionEvent.objects.create(
        user=user, event_type="payment", tier="essential", amount=Decimal("0.99")
    )
    record = event.to_record()

    assert record.user_id == user.pk
    assert record.event_type == "payment"
    assert record.tier == "essential"
    assert record.amount == Decimal("0.99")
    assert record.occurred_at == event.occurred_at


@pytest.mark.django_db
def test_amount_is_optional(user):
    event = SubscriptionEvent.objects.create(user=user, event_type="started")
    assert event.tier == "pro"
    assert event.to_record().amount is None
