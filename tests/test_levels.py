import pytest
from exam_scoring.models.exam import PerformanceLevel, TimeEfficiency
from exam_scoring.services.levels import (
    calculate_time_efficiency, get_performance_level, percentage, round_half_up,
)

@pytest.mark.parametrize("score,level", [
    (100, PerformanceLevel.EXCELLENT),
    (90, PerformanceLevel.EXCELLENT),
    (89, PerformanceLevel.GOOD),
    (75, PerformanceLevel.GOOD),
    (74, PerformanceLevel.NEEDS_IMPROVEMENT),
    (60, PerformanceLevel.NEEDS_IMPROVEMENT),
    (59, PerformanceLevel.POOR),
    (0, PerformanceLevel.POOR),
])
def test_performance_level_boundaries(score, level):
    assert get_performance_level(score) == level

@pytest.mark.parametrize("minutes,count,efficiency", [
    (1.0, 1, TimeEfficiency.EXCELLENT),
    (0.999, 1, TimeEfficiency.GOOD),
    (0.75, 1, TimeEfficiency.GOOD),
    (0.5, 1, TimeEfficiency.ADEQUATE),
    (0.49, 1, TimeEfficiency.RUSHED),
    (90, 60, TimeEfficiency.EXCELLENT),
    (1, 3, TimeEfficiency.RUSHED),
])
def test_time_efficiency_boundaries(minutes, count, efficiency):
    assert calculate_time_efficiency(minutes, count) == efficiency

def test_time_efficiency_without_questions_is_adequate():
    assert calculate_time_efficiency(0, 0) == TimeEfficiency.ADEQUATE
    assert calculate_time_efficiency(30, 0) == TimeEfficiency.ADEQUATE

def test_rounding_is_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert percentage(1, 8) == 13
    assert percentage(2, 3) == 67
    assert percentage(1, 3) == 33
    assert percentage(0, 0) == 0

def test_percentage_is_monotonic_in_correct_count():
    scores = [percentage(c, 17) for c in range(18)]
    assert scores == sorted(scores)
    assert scores[0] == 0 and scores[-1] == 100
