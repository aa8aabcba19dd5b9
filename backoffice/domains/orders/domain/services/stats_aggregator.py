"""
Dashboard statistics.

A pure computation over full snapshots of the orders, products, users,
categories, blogs and coupons collections. Nothing is cached; callers load
a fresh snapshot per request.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, tzinfo
from decimal import Decimal
from typing import Any
from uuid import UUID

from backoffice.core.domain import ensure_aware

from ..value_objects.order_status import BlogStatus, OrderStatus, PaymentMethod, UserRole

RECENT_ORDERS = 5
RECENT_PRODUCTS = 3
RECENT_BLOGS = 2
RECENT_ACTIVITIES = 10


@dataclass(frozen=True)
class OrderFact:
    id: UUID
    total_price: Decimal
    status: str | None
    payment_method: str | None
    created_at: datetime


@dataclass(frozen=True)
class ProductFact:
    id: UUID
    name: str
    category_id: UUID | None
    created_at: datetime


@dataclass(frozen=True)
class UserFact:
    role: str | None


@dataclass(frozen=True)
class CategoryFact:
    id: UUID
    name: str


@dataclass(frozen=True)
class BlogFact:
    id: UUID
    title: str
    status: str | None
    created_at: datetime


@dataclass(frozen=True)
class CouponFact:
    is_active: bool


@dataclass
class StatsSnapshot:
    orders: list[OrderFact] = field(default_factory=list)
    products: list[ProductFact] = field(default_factory=list)
    users: list[UserFact] = field(default_factory=list)
    categories: list[CategoryFact] = field(default_factory=list)
    blogs: list[BlogFact] = field(default_factory=list)
    coupons: list[CouponFact] = field(default_factory=list)


@dataclass
class DashboardStats:
    overview: dict[str, Any]
    order_status: dict[str, int]
    recent_activities: list[dict[str, Any]]
    user_stats: dict[str, int]
    product_stats: dict[str, Any]
    blog_stats: dict[str, int]
    payment_stats: dict[str, int]
    trends: dict[str, float]

    def to_dict(self) -> dict[str, Any]:
        return {
            "overview": self.overview,
            "orderStatus": self.order_status,
            "recentActivities": self.recent_activities,
            "userStats": self.user_stats,
            "productStats": self.product_stats,
            "blogStats": self.blog_stats,
            "paymentStats": self.payment_stats,
            "trends": self.trends,
        }


def growth(today: Decimal | int, weekly: Decimal | int) -> float:
    """
    Percent change of today against the trailing week's daily average.

    The average is floored at 1 so a quiet week cannot blow the ratio up,
    and a day with nothing yet reports 0 instead of -100.
    """
    if not today:
        return 0.0
    daily_average = max(float(weekly) / 7, 1.0)
    return (float(today) / daily_average - 1) * 100


class StatsAggregator:
    """
    Computes the admin dashboard from a StatsSnapshot.

    Day and month windows are evaluated in `timezone` (server local time when
    None): "today" starts at local midnight, "this month" means the same local
    calendar month and year, and "this week" is the trailing seven days.
    """

    def __init__(self, timezone: tzinfo | None = None):
        self.timezone = timezone

    def _localize(self, value: datetime) -> datetime:
        value = ensure_aware(value)
        return value.astimezone(self.timezone) if self.timezone else value.astimezone()

    def aggregate(self, snapshot: StatsSnapshot, now: datetime) -> DashboardStats:
        local_now = self._localize(now)
        start_of_today = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
        week_start = local_now - timedelta(days=7)

        total_revenue = Decimal("0")
        today_orders = monthly_orders = weekly_orders = 0
        today_revenue = monthly_revenue = weekly_revenue = Decimal("0")
        status_counts = {status.value: 0 for status in OrderStatus}
        payment_counts = {method.value: 0 for method in PaymentMethod}

        for order in snapshot.orders:
            amount = Decimal(str(order.total_price or 0))
            created = self._localize(order.created_at)
            total_revenue += amount

            if created >= start_of_today:
                today_orders += 1
                today_revenue += amount
            if created.year == local_now.year and created.month == local_now.month:
                monthly_orders += 1
                monthly_revenue += amount
            if created >= week_start:
                weekly_orders += 1
                weekly_revenue += amount

            if order.status in status_counts:
                status_counts[order.status] += 1
            method = order.payment_method or PaymentMethod.COD.value
            if method in payment_counts:
                payment_counts[method] += 1

        admins = sum(1 for user in snapshot.users if user.role == UserRole.ADMIN.value)
        published = sum(1 for blog in snapshot.blogs if blog.status == BlogStatus.PUBLISHED.value)
        drafts = sum(1 for blog in snapshot.blogs if blog.status == BlogStatus.DRAFT.value)

        return DashboardStats(
            overview={
                "totalProducts": len(snapshot.products),
                "totalOrders": len(snapshot.orders),
                "totalUsers": len(snapshot.users),
                "totalRevenue": float(total_revenue),
                "totalCategories": len(snapshot.categories),
                "totalBlogs": len(snapshot.blogs),
                "activeCoupons": sum(1 for coupon in snapshot.coupons if coupon.is_active),
                "todayOrders": today_orders,
                "todayRevenue": float(today_revenue),
                "monthlyOrders": monthly_orders,
                "monthlyRevenue": float(monthly_revenue),
                "weeklyOrders": weekly_orders,
                "weeklyRevenue": float(weekly_revenue),
            },
            order_status=status_counts,
            recent_activities=self._recent_activities(snapshot),
            user_stats={
                "total": len(snapshot.users),
                "admins": admins,
                "customers": len(snapshot.users) - admins,
            },
            product_stats={
                "total": len(snapshot.products),
                "categories": [
                    {
                        "name": category.name,
                        "count": sum(1 for p in snapshot.products if p.category_id == category.id),
                    }
                    for category in snapshot.categories
                ],
            },
            blog_stats={
                "total": len(snapshot.blogs),
                "published": published,
                "draft": drafts,
            },
            payment_stats=payment_counts,
            trends={
                "dailyGrowth": growth(today_orders, weekly_orders),
                "revenueGrowth": growth(today_revenue, weekly_revenue),
            },
        )

    @staticmethod
    def _recent_activities(snapshot: StatsSnapshot) -> list[dict[str, Any]]:
        def newest(items, limit):
            return sorted(items, key=lambda item: ensure_aware(item.created_at), reverse=True)[:limit]

        activities: list[tuple[datetime, dict[str, Any]]] = []
        for order in newest(snapshot.orders, RECENT_ORDERS):
            created = ensure_aware(order.created_at)
            activities.append((created, {
                "type": "order",
                "message": f"New order #{str(order.id)[-4:]} received",
                "time": created.isoformat(),
                "amount": float(order.total_price or 0),
            }))
        for product in newest(snapshot.products, RECENT_PRODUCTS):
            created = ensure_aware(product.created_at)
            activities.append((created, {
                "type": "product",
                "message": f"Product '{product.name}' added",
                "time": created.isoformat(),
            }))
        for blog in newest(snapshot.blogs, RECENT_BLOGS):
            created = ensure_aware(blog.created_at)
            activities.append((created, {
                "type": "blog",
                "message": f"Blog post '{blog.title}' published",
                "time": created.isoformat(),
            }))

        activities.sort(key=lambda pair: pair[0], reverse=True)
        return [activity for _, activity in activities[:RECENT_ACTIVITIES]]
