# analytics/services/revenue.py
"""
Monthly subscription revenue, churn and growth for the admin dashboard.

Revenue-bearing events are "started", "renewed" and "payment"; an event
without an amount is charged at the configured monthly price. A user is
active from "started"/"renewed" until a later "canceled".
"""
from datetime import date, datetime, timezone, tzinfo
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
import logging

import pandas as pd

from analytics.services.scoring import round_half_up
from analytics.types import RevenueMetrics, RevenueMonth, SubscriptionEventRecord

logger = logging.getLogger(__name__)

PAYMENT_EVENTS = frozenset({"started", "renewed", "payment"})
ACTIVATING_EVENTS = frozenset({"started", "renewed"})
CANCEL_EVENTS = frozenset({"canceled"})

COLUMNS = ["user_id", "event_type", "tier", "amount", "month"]


def month_key(moment: datetime, tz: Optional[tzinfo] = None) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(tz or timezone.utc)
    return f"{moment.year:04d}-{moment.month:02d}"


def _subscription_states(
    events: Iterable[SubscriptionEventRecord], before_month: Optional[str], tz: Optional[tzinfo]
) -> Dict[int, bool]:
    """Replay lifecycle events to get each user's active flag"""
    states: Dict[int, bool] = {}
    for event in events:
        if before_month is not None and month_key(event.occurred_at, tz) >= before_month:
            continue
        if event.event_type in ACTIVATING_EVENTS:
            states[event.user_id] = True
        elif event.event_type in CANCEL_EVENTS:
            states[event.user_id] = False
    return states


def _percent_of(value: int, base: int) -> float:
    if not base:
        return 0.0
    return round_half_up(value / base * 100, 1)


def aggregate_revenue(
    events: Iterable[SubscriptionEventRecord],
    today: date,
    window_months: int = 12,
    default_price: Decimal = Decimal("1.99"),
    tz: Optional[tzinfo] = None,
) -> RevenueMetrics:
    """
    Bucket subscription events by calendar month and reduce each month.

    Args:
        events: Subscription lifecycle and payment events for all users
        today: Last day of the reporting window
        window_months: Number of trailing months reported, current month included
        default_price: Amount used for revenue events without one
        tz: Timezone whose calendar defines a month

    Returns:
        RevenueMetrics with one RevenueMonth per month, oldest first
    """
    end_month = pd.Period(year=today.year, month=today.month, freq="M")
    months = [str(period) for period in pd.period_range(end=end_month, periods=window_months, freq="M")]
    end_key = months[-1] if months else month_key(datetime(today.year, today.month, 1))

    events = sorted(
        (event for event in events if month_key(event.occurred_at, tz) <= end_key),
        key=lambda event: event.occurred_at,
    )

    rows = [
        {
            "user_id": event.user_id,
            "event_type": event.event_type,
            "tier": event.tier,
            "amount": float(event.amount if event.amount is not None else default_price)
            if event.event_type in PAYMENT_EVENTS
            else 0.0,
            "month": month_key(event.occurred_at, tz),
        }
        for event in events
    ]
    frame = pd.DataFrame(rows, columns=COLUMNS)

    monthly: List[RevenueMonth] = []
    for month in months:
        in_month = frame[frame["month"] == month]
        paid = in_month[in_month["event_type"].isin(PAYMENT_EVENTS)]
        by_tier = paid.groupby("tier")["amount"].sum()

        new_subscriptions = int((in_month["event_type"] == "started").sum())
        churned_subscriptions = int(in_month["event_type"].isin(CANCEL_EVENTS).sum())
        net_growth = new_subscriptions - churned_subscriptions
        active_at_start = sum(_subscription_states(events, month, tz).values())

        monthly.append(
            RevenueMonth(
                month=month,
                revenue=round_half_up(float(paid["amount"].sum()), 2),
                new_subscriptions=new_subscriptions,
                churned_subscriptions=churned_subscriptions,
                net_growth=net_growth,
                active_at_start=active_at_start,
                monthly_churn=_percent_of(churned_subscriptions, active_at_start),
                monthly_growth=_percent_of(net_growth, active_at_start),
                revenue_by_tier={
                    str(tier): round_half_up(float(amount), 2) for tier, amount in by_tier.items()
                },
            )
        )

    final_states = _subscription_states(events, None, tz)
    active = sum(1 for is_active in final_states.values() if is_active)
    canceled = sum(1 for is_active in final_states.values() if not is_active)
    total_revenue = round_half_up(sum(month.revenue for month in monthly), 2)
    latest = monthly[-1] if monthly else None

    logger.info(
        f"Revenue aggregated over {len(monthly)} months: total={total_revenue}, active={active}"
    )
    return RevenueMetrics(
        monthly_revenue=monthly,
        total_revenue=total_revenue,
        active_subscriptions=active,
        canceled_subscriptions=canceled,
        average_revenue_per_user=round_half_up(total_revenue / active, 2) if active else 0.0,
        monthly_churn=latest.monthly_churn if latest else 0.0,
        monthly_growth=latest.monthly_growth if latest else 0.0,
    )
