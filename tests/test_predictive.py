"""
Predictive Risk Tests
=====================

Base risk bucketing, momentum fold and vulnerability modifier.
"""

import pytest

from heatrisk_engine.engine.predictive import base_risk, predictive_risk, step_momentum


class TestBaseRisk:
    """Base risk uses tier boundaries on raw temperature."""

    @pytest.mark.parametrize(
        "temp,ordinal",
        [(20, 1), (26.9, 1), (27, 2), (31.9, 2), (32, 3), (40.9, 3), (41, 4)],
    )
    def test_buckets(self, temp, ordinal):
        assert base_risk(temp) == ordinal


class TestMomentum:
    """Momentum is folded in order and never negative."""

    def test_fold_rises_then_decays(self):
        result = predictive_risk([33, 33, 20, 20, 20])
        momenta = [p.momentum for p in result.points]
        assert momenta == pytest.approx([0.5, 1.0, 0.7, 0.4, 0.1])
        assert result.momentum == pytest.approx(0.1)

    def test_fold_floors_at_zero(self):
        result = predictive_risk([33, 20, 20, 20])
        momenta = [p.momentum for p in result.points]
        assert momenta == pytest.approx([0.5, 0.2, 0.0, 0.0])
        assert all(m >= 0 for m in momenta)

    def test_step(self):
        assert step_momentum(0.0, 32.0) == 0.5
        assert step_momentum(0.0, 31.9) == 0.0
        assert step_momentum(1.0, 25.0) == pytest.approx(0.7)

    def test_recomputed_from_zero_each_call(self):
        first = predictive_risk([40, 40, 40, 40, 40])
        second = predictive_risk([20])
        assert first.momentum == pytest.approx(2.5)
        assert second.momentum == 0.0


class TestPredictiveSeries:
    """Tests for the predictive score series."""

    def test_scores(self):
        result = predictive_risk([36, 36, 36, 36, 30])
        assert [p.day_offset for p in result.points] == [0, 1, 2, 3, 4]
        assert [p.score for p in result.points] == [3.5, 4.0, 4.5, 5.0, 3.7]
        assert result.momentum == pytest.approx(1.7)

    def test_only_first_five_days(self):
        result = predictive_risk([33, 33, 33, 33, 33, 33, 33])
        assert len(result.points) == 5
        assert result.momentum == pytest.approx(2.5)

    def test_vulnerable_modifier(self):
        result = predictive_risk([33], is_vulnerable=True)
        # (3 + 0.5) * 1.2
        assert result.points[0].score == 4.2

    def test_scores_are_one_decimal(self):
        result = predictive_risk([33, 20, 20], is_vulnerable=True)
        for point in result.points:
            assert point.score == round(point.score, 1)

    def test_empty_forecast(self):
        result = predictive_risk([])
        assert result.points == ()
        assert result.momentum == 0.0
