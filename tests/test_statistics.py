"""Tests for the statistics aggregator."""

from vlog_toolkit.analysis import StatisticsAggregator
from vlog_toolkit.models.signal import SignalDescriptor


class TestCompute:
    def test_basic(self):
        stats = StatisticsAggregator().compute([1, 2, 3, 4])
        assert stats.min == 1
        assert stats.max == 4
        assert stats.avg == 2.5
        assert stats.std_dev == 1.12

    def test_constant_series(self):
        stats = StatisticsAggregator().compute([7.5] * 10)
        assert stats.avg == 7.5
        assert stats.std_dev == 0

    def test_empty_series(self):
        stats = StatisticsAggregator().compute([])
        assert (stats.min, stats.max, stats.avg, stats.std_dev) == (0, 0, 0, 0)

    def test_rounding(self):
        stats = StatisticsAggregator().compute([0.001, 0.002, 1.0 / 3])
        assert stats.max == 0.33
        assert stats.min == 0.0


class TestAttach:
    def test_placeholder_unit_is_backfilled(self):
        descriptors = [SignalDescriptor(name="CoolantTemp"), SignalDescriptor(name="Mystery", unit="")]
        result = StatisticsAggregator().attach(descriptors, {"CoolantTemp": [80, 90], "Mystery": [1]})

        assert result[0].unit == "°C"
        assert result[0].statistics.avg == 85
        assert result[1].unit == "-"

    def test_backfill_can_be_disabled(self):
        descriptors = [SignalDescriptor(name="CoolantTemp")]
        result = StatisticsAggregator().attach(descriptors, {"CoolantTemp": [80]}, backfill_units=False)
        assert result[0].unit == "-"
        assert result[0].statistics.max == 80

    def test_declared_unit_is_kept(self):
        descriptors = [SignalDescriptor(name="CoolantTemp", unit="degC")]
        result = StatisticsAggregator().attach(descriptors, {"CoolantTemp": [80]})
        assert result[0].unit == "degC"

    def test_input_is_not_mutated(self):
        descriptor = SignalDescriptor(name="Speed")
        StatisticsAggregator().attach([descriptor], {"Speed": [1, 2]})
        assert descriptor.statistics is None
        assert descriptor.unit == "-"

    def test_missing_series(self):
        descriptor = SignalDescriptor(name="Speed")
        result = StatisticsAggregator().attach([descriptor], {})
        assert result[0].statistics is None

    def test_from_rows(self):
        rows = [{"timestamp": 0.0, "a": 1.0}, {"timestamp": 0.1, "a": 3.0}]
        result = StatisticsAggregator().attach_from_rows([SignalDescriptor(name="a")], rows)
        assert result[0].summary() == {
            "name": "a", "unit": "-", "min": 1.0, "max": 3.0, "avg": 2.0, "stdDev": 1.0,
        }
