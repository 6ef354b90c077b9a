"""
Study recommendations derived from a graded attempt.
"""
from typing import Optional
import logging

from exam_scoring.models.exam import (
    AreaRecommendation, DetailedExamResults, KnowledgeAreaScore,
    PerformanceLevel, StudyPlan, TimeEfficiency,
)

logger = logging.getLogger(__name__)

AREA_RECOMMENDATIONS = {
    PerformanceLevel.EXCELLENT: "Outstanding! You've mastered this area.",
    PerformanceLevel.GOOD: "Great job! Minor review recommended.",
    PerformanceLevel.NEEDS_IMPROVEMENT: "Focus more study time on this area.",
    PerformanceLevel.POOR: "Significant improvement needed. Consider additional resources.",
}

PERFORMANCE_MESSAGES = {
    PerformanceLevel.EXCELLENT: "Outstanding performance! You've mastered this material.",
    PerformanceLevel.GOOD: "Great job! You have a solid understanding of the material.",
    PerformanceLevel.NEEDS_IMPROVEMENT: "You're on the right track. Focus on areas where you struggled.",
    PerformanceLevel.POOR: "More study time is needed. Review the material and try again.",
}

TIME_EFFICIENCY_MESSAGES = {
    TimeEfficiency.EXCELLENT: "Perfect pacing! You used your time effectively.",
    TimeEfficiency.GOOD: "Good time management. You completed the exam comfortably.",
    TimeEfficiency.ADEQUATE: "Adequate pacing. Consider slowing down to review answers.",
    TimeEfficiency.RUSHED: "You moved very quickly. Take more time to consider each question.",
}

STRONG_LEVELS = {PerformanceLevel.EXCELLENT, PerformanceLevel.GOOD}
FOCUS_LEVELS = {PerformanceLevel.NEEDS_IMPROVEMENT, PerformanceLevel.POOR}

def recommend_for_area(area: KnowledgeAreaScore) -> AreaRecommendation:
    return AreaRecommendation(
        id=area.id,
        name=area.name,
        weight_percentage=area.weight_percentage,
        score_percentage=area.score_percentage,
        performance_level=area.performance_level,
        recommendation=AREA_RECOMMENDATIONS[area.performance_level],
    )

def build_study_plan(results: DetailedExamResults, limit: Optional[int] = 3) -> StudyPlan:
    """
    Summarize where to study next.

    Focus areas are the weak (poor or needs_improvement) knowledge areas,
    heaviest-weighted first, capped at ``limit``. ``limit=None`` keeps all.
    """
    areas = sorted(results.knowledge_area_scores, key=lambda a: a.weight_percentage, reverse=True)
    recs = [recommend_for_area(a) for a in areas]
    focus = [r for r in recs if r.performance_level in FOCUS_LEVELS]
    if limit is not None:
        focus = focus[:limit]

    levels = [a.performance_level for a in areas]
    plan = StudyPlan(
        overall_message=PERFORMANCE_MESSAGES[results.overall_performance_level],
        time_message=TIME_EFFICIENCY_MESSAGES[results.time_efficiency],
        total_areas=len(areas),
        strong_areas=sum(1 for lv in levels if lv in STRONG_LEVELS),
        review_areas=levels.count(PerformanceLevel.NEEDS_IMPROVEMENT),
        weak_areas=levels.count(PerformanceLevel.POOR),
        all_strong=all(lv in STRONG_LEVELS for lv in levels),
        areas=recs,
        focus_areas=focus,
    )
    logger.debug(f"Attempt {results.attempt_id}: {len(focus)} focus areas of {plan.total_areas}")
    return plan
