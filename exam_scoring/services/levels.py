import math
from exam_scoring.models.exam import PerformanceLevel, TimeEfficiency

# (minimum score, level), checked top-down
PERFORMANCE_THRESHOLDS = (
    (90, PerformanceLevel.EXCELLENT),
    (75, PerformanceLevel.GOOD),
    (60, PerformanceLevel.NEEDS_IMPROVEMENT),
)
# (minimum average minutes per question, efficiency); exams are designed around ~1.5 min/question
TIME_EFFICIENCY_THRESHOLDS = (
    (1.0, TimeEfficiency.EXCELLENT),
    (0.75, TimeEfficiency.GOOD),
    (0.5, TimeEfficiency.ADEQUATE),
)

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def percentage(correct: int, total: int) -> int:
    if total <= 0: return 0
    return round_half_up(correct / total * 100)

def get_performance_level(score_percentage: float) -> PerformanceLevel:
    for minimum, level in PERFORMANCE_THRESHOLDS:
        if score_percentage >= minimum: return level
    return PerformanceLevel.POOR

def calculate_time_efficiency(time_spent_minutes: float, question_count: int) -> TimeEfficiency:
    if question_count == 0: return TimeEfficiency.ADEQUATE
    average = time_spent_minutes / question_count
    for minimum, efficiency in TIME_EFFICIENCY_THRESHOLDS:
        if average >= minimum: return efficiency
    return TimeEfficiency.RUSHED
