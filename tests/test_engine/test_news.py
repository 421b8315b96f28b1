"""Tests for news phase and instance queries."""

from datetime import timedelta, timezone

import pytest

from tradetime.engine.news import (
    active_news_instances,
    create_news_instance,
    news_phase,
    seconds_until_cooldown_ends,
    seconds_until_release,
    upcoming_news_instances,
)
from tradetime.models import NewsImpact, NewsPhase, NewsTemplate


class TestNewsPhase:
    @pytest.mark.parametrize(
        "offset,expected",
        [
            (-300, NewsPhase.COUNTDOWN),
            (-1, NewsPhase.COUNTDOWN),
            (0, NewsPhase.HAPPENING),
            (60, NewsPhase.HAPPENING),
            (61, NewsPhase.COOLDOWN),
            (899, NewsPhase.COOLDOWN),
        ],
    )
    def test_phase_boundaries(self, at, offset, expected):
        scheduled = at(10, 0)
        assert news_phase(scheduled, scheduled + timedelta(seconds=offset)) is expected

    def test_compares_absolute_instants(self, at):
        # 06:00 in UTC-4 is 10:00Z
        eastern = at(10, 0).astimezone(timezone(timedelta(hours=-4)))
        assert news_phase(eastern, at(10, 0, 30)) is NewsPhase.HAPPENING


class TestCreateNewsInstance:
    def test_inherits_template(self, at):
        template = NewsTemplate("gdp", "GDP Report", 5, 15, NewsImpact.MEDIUM, "Growth")
        instance = create_news_instance(template, at(12, 30))

        assert instance.template_id == "gdp"
        assert instance.name == "GDP Report"
        assert instance.impact is NewsImpact.MEDIUM
        assert instance.description == "Growth"
        assert instance.is_active is True
        assert instance.id == f"gdp_{int(at(12, 30).timestamp())}"

    def test_overrides(self, nfp_template, at):
        instance = create_news_instance(nfp_template, at(12, 30), name="NFP (June)", description="x")
        assert instance.name == "NFP (June)"
        assert instance.description == "x"


class TestActiveNewsInstances:
    def test_inside_window(self, nfp_template, news_at, at):
        active = active_news_instances([news_at(10, 0)], [nfp_template], at(9, 58))
        assert [(i.name, phase) for i, _, phase in active] == [("NFP", NewsPhase.COUNTDOWN)]

    def test_bounds_are_inclusive(self, nfp_template, news_at, at):
        assert active_news_instances([news_at(10, 0)], [nfp_template], at(9, 55))
        assert active_news_instances([news_at(10, 0)], [nfp_template], at(10, 15))
        assert not active_news_instances([news_at(10, 0)], [nfp_template], at(10, 15, 1))

    def test_earliest_first(self, nfp_template, news_at, at):
        instances = [news_at(10, 5, name="Later"), news_at(10, 0, name="Earlier")]
        names = [i.name for i, _, _ in active_news_instances(instances, [nfp_template], at(10, 3))]
        assert names == ["Earlier", "Later"]

    def test_inactive_and_orphaned_are_ignored(self, nfp_template, news_at, at):
        instances = [news_at(10, 0, is_active=False), news_at(10, 0, template_id="missing")]
        assert active_news_instances(instances, [nfp_template], at(10, 0)) == []


class TestUpcomingNewsInstances:
    def test_only_before_countdown(self, nfp_template, news_at, at):
        instances = [news_at(10, 0, name="Soon"), news_at(14, 0, name="Later")]
        upcoming = upcoming_news_instances(instances, [nfp_template], at(9, 56))
        assert [i.name for i, _ in upcoming] == ["Later"]

    def test_spans_days_and_limits(self, nfp_template, news_at, at):
        instances = [news_at(8, 0, day=18), news_at(8, 0, day=17), news_at(8, 0)]
        upcoming = upcoming_news_instances(instances, [nfp_template], at(0, 0), limit=2)
        assert [i.scheduled_time.day for i, _ in upcoming] == [16, 17]


class TestSecondsHelpers:
    def test_until_release(self, news_at, at):
        assert seconds_until_release(news_at(10, 0), at(9, 58)) == 120
        assert seconds_until_release(news_at(10, 0), at(10, 1)) == -60

    def test_until_cooldown_ends(self, nfp_template, news_at, at):
        assert seconds_until_cooldown_ends(news_at(10, 0), nfp_template, at(10, 5)) == 600

    def test_fractional_deltas_round_down(self, nfp_template, news_at, at):
        just_after = at(10, 0) + timedelta(milliseconds=500)
        assert seconds_until_release(news_at(10, 0), just_after) == -1
        assert seconds_until_release(news_at(10, 0), at(10, 0) - timedelta(milliseconds=500)) == 0
        past_cooldown = at(10, 15) + timedelta(milliseconds=500)
        assert seconds_until_cooldown_ends(news_at(10, 0), nfp_template, past_cooldown) == -1
