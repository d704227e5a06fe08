"""
Unit tests for the clinical risk grid (Step 7) and the composite risk trend (Step 9).
"""
import pytest
from packages.shared.models import Domain, GridRow, RiskDirection
from apps.worker.steps.scoring.tiers import DayContext, RiskCurve, Constant
from apps.worker.steps.step07_risk import extract_risk_trend_data, risk_tiers
from apps.worker.steps.step09_risk_trend import (
    calculate_risk_trend,
    composite_risk,
    summarize_risk_change,
)
from tests.fixtures.sample_note import MINIMAL_NOTE, SAMPLE_NOTE, note_with_dates


def _column(grid, domain: Domain) -> list:
    return [row.score(domain) for row in grid]


def _row(date: str, **scores) -> GridRow:
    base = {d: 0.0 for d in Domain}
    base.update({Domain(k): v for k, v in scores.items()})
    return GridRow.from_scores(date, base)


class TestDayContext:
    def test_risk_progress_runs_down(self):
        assert DayContext.risk(0, 5).progress == 1
        assert DayContext.risk(4, 5).progress == 0
        assert DayContext.risk(4, 5).is_discharge_day

    def test_near_discharge_fraction(self):
        day = DayContext.risk(6, 8)
        assert day.is_near_discharge
        assert not DayContext.risk(6, 8, near_discharge_fraction=0.1).is_near_discharge

    def test_discharge_value_overrides_course(self):
        curve = RiskCurve(Constant(2.5), on_discharge=1)
        assert curve(DayContext.risk(0, 3)) == 2.5
        assert curve(DayContext.risk(2, 3)) == 1


class TestRiskTiers:
    def test_tiers_follow_readiness_evidence(self):
        assert risk_tiers(SAMPLE_NOTE)["Mobility"] == "assisted_in_training"
        assert risk_tiers(MINIMAL_NOTE)["Swallowing"] == "fallback"


class TestExtractRiskTrendData:
    def test_sample_note_columns(self):
        grid = extract_risk_trend_data(SAMPLE_NOTE)
        assert len(grid) == 8
        assert _column(grid, Domain.MOBILITY) == [2.5, 2.5, 2.5, 2, 2, 1.5, 0.5, 0]
        assert _column(grid, Domain.WOUND_CARE) == [3, 3, 3, 2, 2, 1.5, 0.8, 0]

    def test_minimal_note(self):
        first, last = extract_risk_trend_data(MINIMAL_NOTE)
        assert first.scores() == {
            Domain.MOBILITY: 1.5,
            Domain.WOUND_CARE: 0,
            Domain.MEDICAL_STABILITY: 1.5,
            Domain.SWALLOWING: 2.5,
            Domain.EDUCATION: 1.5,
            Domain.SOCIAL_SUPPORT: 2,
        }
        assert last.score(Domain.EDUCATION) == 0.3
        assert last.score(Domain.MOBILITY) == 0

    def test_dependent_mobility_is_high_early_and_zero_at_discharge(self):
        note = note_with_dates("5/4", "5/11", "Mobility: bedbound, unsafe for ambulation")
        grid = extract_risk_trend_data(note)
        mobility = _column(grid, Domain.MOBILITY)
        assert mobility[0] == 3
        assert mobility[6] == 0.5
        assert mobility[-1] == 0

    def test_no_support_stays_elevated_at_discharge(self):
        note = note_with_dates("5/4", "5/6", "Self-care/Caregiving: lives alone")
        assert _column(extract_risk_trend_data(note), Domain.SOCIAL_SUPPORT) == [2.5, 2.5, 1]

    def test_one_decimal_and_in_range(self):
        for row in extract_risk_trend_data(SAMPLE_NOTE):
            for value in row.scores().values():
                assert 0 <= value <= 3
                assert round(value, 1) == value

    def test_same_dates_as_readiness(self):
        from apps.worker.steps.step06_readiness import extract_readiness_grid

        risk_dates = [r.date for r in extract_risk_trend_data(SAMPLE_NOTE)]
        assert risk_dates == [r.date for r in extract_readiness_grid(SAMPLE_NOTE)]

    def test_no_dates_gives_empty_grid(self):
        assert extract_risk_trend_data("Mobility: walker") == []

    def test_single_day_stay_is_discharge_day(self):
        (row,) = extract_risk_trend_data(note_with_dates("5/4", "5/4", "Self-care/Caregiving: lives alone"))
        assert row.score(Domain.SOCIAL_SUPPORT) == 1
        assert row.score(Domain.MOBILITY) == 0


class TestRiskTrend:
    def test_composite_uses_physical_domains(self):
        row = _row("5/4", Mobility=2, WoundCare=2, MedicalStability=2, Swallowing=2, Education=3, SocialSupport=3)
        assert composite_risk(row) == pytest.approx(2.0)

    def test_trend_deltas(self):
        grid = [_row("5/4", Mobility=2), _row("5/5", Mobility=1), _row("5/6", Mobility=1)]
        trend = calculate_risk_trend(grid)
        assert [p.day_number for p in trend] == [1, 2, 3]
        assert trend[0].delta_risk == 0
        assert trend[1].delta_risk == pytest.approx(-0.3)
        assert trend[2].delta_risk == pytest.approx(0)
        assert trend[0].components[Domain.MOBILITY] == 2

    def test_summary_minimal_note(self):
        summary = summarize_risk_change(extract_risk_trend_data(MINIMAL_NOTE))
        assert summary.initial_date == "5/4"
        assert summary.final_date == "5/5"
        assert summary.initial_score == pytest.approx(1.275)
        assert summary.final_score == pytest.approx(0)
        assert summary.direction == RiskDirection.DECREASED

    def test_summary_sample_note(self):
        summary = summarize_risk_change(extract_risk_trend_data(SAMPLE_NOTE))
        assert summary.initial_score == pytest.approx(2.85)
        assert summary.change == pytest.approx(-2.85)

    def test_summary_increase_and_no_change(self):
        up = summarize_risk_change([_row("5/4"), _row("5/5", Swallowing=2)])
        assert up.direction == RiskDirection.INCREASED
        flat = summarize_risk_change([_row("5/4", Mobility=1)])
        assert flat.direction == RiskDirection.NO_CHANGE

    def test_summary_empty_grid(self):
        assert summarize_risk_change([]) is None

    def test_custom_weights(self):
        row = _row("5/4", Education=3)
        assert composite_risk(row, {Domain.EDUCATION: 1.0}) == 3
