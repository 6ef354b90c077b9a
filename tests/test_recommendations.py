from exam_scoring.models.exam import KnowledgeArea, PerformanceLevel
from exam_scoring.services.recommendations import build_study_plan
from exam_scoring.services.scoring import calculate_exam_results
from factories import attempt, make_question, pick

def _areas(*weights):
    return [KnowledgeArea(id=f"ka{i}", name=f"Area {i}", weight_percentage=w) for i, w in enumerate(weights)]

def _results(per_area, minutes=90):
    """per_area: list of (area, n_questions, n_correct)"""
    questions, answers, n = [], [], 0
    for area, total, correct in per_area:
        for i in range(total):
            n += 1
            questions.append(make_question(f"q{n}", area=area, number=n))
            answers += pick(f"q{n}", "a" if i < correct else "b")
    return calculate_exam_results(questions, answers, attempt(minutes), 65)

def test_focus_areas_are_weak_areas_by_weight():
    a = _areas(10, 40, 20, 25, 5)
    results = _results([(a[0], 2, 0), (a[1], 4, 4), (a[2], 5, 3), (a[3], 2, 0), (a[4], 1, 0)])
    plan = build_study_plan(results)
    assert [f.id for f in plan.focus_areas] == ["ka3", "ka2", "ka0"]
    assert plan.total_areas == 5
    assert plan.strong_areas == 1
    assert plan.review_areas == 1
    assert plan.weak_areas == 3
    assert plan.all_strong is False

def test_limit_none_keeps_every_weak_area():
    a = _areas(10, 25, 5, 30)
    results = _results([(a[0], 1, 0), (a[1], 1, 0), (a[2], 1, 0), (a[3], 1, 0)])
    assert len(build_study_plan(results, limit=None).focus_areas) == 4
    assert len(build_study_plan(results, limit=2).focus_areas) == 2

def test_area_recommendation_text():
    a = _areas(50, 30, 15, 5)
    results = _results([(a[0], 10, 10), (a[1], 4, 3), (a[2], 5, 3), (a[3], 2, 0)])
    recs = {r.id: r for r in build_study_plan(results).areas}
    assert recs["ka0"].performance_level == PerformanceLevel.EXCELLENT
    assert recs["ka0"].recommendation == "Outstanding! You've mastered this area."
    assert recs["ka1"].recommendation == "Great job! Minor review recommended."
    assert recs["ka2"].recommendation == "Focus more study time on this area."
    assert recs["ka3"].recommendation.startswith("Significant improvement needed")

def test_all_strong_plan_has_no_focus_areas():
    a = _areas(60, 40)
    plan = build_study_plan(_results([(a[0], 4, 4), (a[1], 4, 3)]))
    assert plan.all_strong is True
    assert plan.focus_areas == []
    assert plan.overall_message.startswith("Great job!")

def test_messages_follow_overall_level_and_pacing():
    a = _areas(100)
    plan = build_study_plan(_results([(a[0], 10, 2)], minutes=2))
    assert plan.overall_message == "More study time is needed. Review the material and try again."
    assert plan.time_message.startswith("You moved very quickly")
