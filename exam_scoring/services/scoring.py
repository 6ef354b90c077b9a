"""
Exam scoring engine.

Turns a completed attempt (catalog questions + submitted selections) into a
graded report: per-question correctness, overall score, knowledge area scores,
difficulty breakdown, performance level and time efficiency. Pure and
deterministic; data problems are logged, never raised.
"""
from typing import Dict, Iterable, List, Sequence
import logging

from exam_scoring.models.exam import (
    DetailedExamResults, DifficultyBreakdown, DifficultyLevel, DifficultyStats,
    ExamAttempt, KnowledgeAreaScore, Question, QuestionResult, SimpleScore, UserAnswer,
)
from exam_scoring.services.levels import (
    calculate_time_efficiency, get_performance_level, percentage, round_half_up,
)

logger = logging.getLogger(__name__)

def group_selections(user_answers: Iterable[UserAnswer]) -> Dict[str, List[UserAnswer]]:
    """Map question id -> submitted selections. Records without an answer id are dropped."""
    grouped: Dict[str, List[UserAnswer]] = {}
    for ua in user_answers:
        if ua.question_id and ua.answer_id:
            grouped.setdefault(ua.question_id, []).append(ua)
    return grouped

def selected_answer_ids(selections: Sequence[UserAnswer]) -> List[str]:
    """Answer ids in selection order."""
    return [ua.answer_id for ua in selections if ua.answer_id]

def is_question_correct(question: Question, selected_ids: Sequence[str]) -> bool:
    """
    Decide whether a set of selections answers the question correctly.

    Single-choice questions need exactly one selection, and it must be a
    correct option. Multi-choice questions need the selected set to equal the
    correct set and to have exactly ``required_selections`` members; there is
    no partial credit. Repeated ids count once.
    """
    correct_ids = [a.id for a in question.correct_answers()]
    if not correct_ids:
        return False
    selected = list(dict.fromkeys(selected_ids))
    if question.required_selections == 1:
        return len(selected) == 1 and selected[0] in correct_ids
    return (
        all(sid in correct_ids for sid in selected)
        and all(cid in selected for cid in correct_ids)
        and len(selected) == question.required_selections
    )

def _check_consistency(question: Question) -> bool:
    """Log catalog problems. Returns False when the question cannot be scored."""
    n_correct = len(question.correct_answers())
    if n_correct != question.required_selections:
        logger.warning(
            f"Question {question.id}: required_selections ({question.required_selections}) "
            f"doesn't match correct answers count ({n_correct})"
        )
    if n_correct == 0:
        logger.warning(f"No correct answers found for question {question.id}; excluded from scoring")
        return False
    return True

def _count_correct(questions: Iterable[Question], selections: Dict[str, List[UserAnswer]]) -> int:
    return sum(
        1 for q in questions
        if is_question_correct(q, selected_answer_ids(selections.get(q.id, [])))
    )

def calculate_knowledge_area_scores(
    questions: Sequence[Question],
    selections: Dict[str, List[UserAnswer]],
) -> List[KnowledgeAreaScore]:
    """Score every knowledge area independently, heaviest-weighted first."""
    areas: Dict[str, list] = {}
    for q in questions:
        entry = areas.setdefault(q.knowledge_area.id, [q.knowledge_area, []])
        entry[1].append(q)

    scores = []
    for area, area_questions in areas.values():
        correct = _count_correct(area_questions, selections)
        score = percentage(correct, len(area_questions))
        scores.append(KnowledgeAreaScore(
            id=area.id,
            name=area.name,
            weight_percentage=area.weight_percentage,
            correct_answers=correct,
            total_questions=len(area_questions),
            score_percentage=score,
            performance_level=get_performance_level(score),
        ))
    # sorted() is stable, so equal weights keep first-seen order
    return sorted(scores, key=lambda s: s.weight_percentage, reverse=True)

def calculate_difficulty_breakdown(
    questions: Sequence[Question],
    selections: Dict[str, List[UserAnswer]],
) -> DifficultyBreakdown:
    by_level: Dict[DifficultyLevel, List[Question]] = {level: [] for level in DifficultyLevel}
    for q in questions:
        by_level[q.difficulty_level].append(q)

    tiers = {}
    for level, level_questions in by_level.items():
        correct = _count_correct(level_questions, selections)
        tiers[level] = DifficultyStats(
            correct=correct,
            total=len(level_questions),
            percentage=percentage(correct, len(level_questions)),
        )
    return DifficultyBreakdown(
        easy=tiers[DifficultyLevel.EASY],
        medium=tiers[DifficultyLevel.MEDIUM],
        hard=tiers[DifficultyLevel.HARD],
    )

def calculate_exam_results(
    questions: Sequence[Question],
    user_answers: Sequence[UserAnswer],
    exam_attempt: ExamAttempt,
    passing_threshold: float,
) -> DetailedExamResults:
    """
    Grade an exam attempt.

    Args:
        questions: catalog questions of the exam, with their options
        user_answers: selection events of the attempt (0..N per question)
        exam_attempt: the completed attempt; its time_spent_minutes is authoritative
        passing_threshold: minimum score percentage to pass

    Returns:
        DetailedExamResults. Unanswered questions count as wrong. Questions
        without a correct option are left out of question_results and the
        correct tally but still count toward total_questions.
    """
    selections = group_selections(user_answers)
    total_questions = len(questions)
    correct_answers = 0
    question_results: List[QuestionResult] = []

    for q in questions:
        if not _check_consistency(q):
            continue
        submitted = selections.get(q.id, [])
        is_correct = is_question_correct(q, selected_answer_ids(submitted))
        if is_correct:
            correct_answers += 1
        question_results.append(QuestionResult(
            question_id=q.id,
            question_number=q.question_number,
            user_answer_id=submitted[0].answer_id if submitted else None,
            correct_answer_id=q.correct_answers()[0].id,
            is_correct=is_correct,
            time_spent_seconds=sum(ua.time_spent_seconds for ua in submitted),
            knowledge_area=q.knowledge_area.name,
        ))

    score = percentage(correct_answers, total_questions)
    attempt_minutes = exam_attempt.time_spent_minutes or 0
    time_spent_minutes = attempt_minutes or round_half_up(
        sum(r.time_spent_seconds for r in question_results) / 60
    )

    logger.debug(
        f"Attempt {exam_attempt.id}: {correct_answers}/{total_questions} correct, "
        f"score={score} threshold={passing_threshold}"
    )
    return DetailedExamResults(
        attempt_id=exam_attempt.id,
        score_percentage=score,
        correct_answers=correct_answers,
        total_questions=total_questions,
        passed=score >= passing_threshold,
        time_spent_minutes=time_spent_minutes,
        question_results=question_results,
        knowledge_area_scores=calculate_knowledge_area_scores(questions, selections),
        overall_performance_level=get_performance_level(score),
        time_efficiency=calculate_time_efficiency(attempt_minutes, total_questions),
        difficulty_breakdown=calculate_difficulty_breakdown(questions, selections),
    )

def calculate_simple_score(
    questions: Sequence[Question],
    user_answers: Sequence[UserAnswer],
) -> SimpleScore:
    """Quick single-answer tally: the last answer per question against its first correct option."""
    last_answer = {ua.question_id: ua.answer_id for ua in user_answers if ua.question_id and ua.answer_id}
    correct = 0
    for q in questions:
        options = q.correct_answers()
        if options and last_answer.get(q.id) == options[0].id:
            correct += 1
    return SimpleScore(correct=correct, total=len(questions), percentage=percentage(correct, len(questions)))
