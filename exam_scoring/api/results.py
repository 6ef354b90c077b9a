from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from typing import List, Optional
from exam_scoring.core.config import Settings, get_settings
from exam_scoring.models.exam import (
    DetailedExamResults, ExamAttempt, Question, SimpleScore, StudyPlan, UserAnswer,
)
from exam_scoring.services.scoring import calculate_exam_results, calculate_simple_score
from exam_scoring.services.recommendations import build_study_plan

router = APIRouter()

class ScoreRequest(BaseModel):
    questions: List[Question]
    user_answers: List[UserAnswer] = Field(default_factory=list)
    exam_attempt: ExamAttempt
    passing_threshold: Optional[float] = Field(default=None, ge=0, le=100)

class SimpleScoreRequest(BaseModel):
    questions: List[Question]
    user_answers: List[UserAnswer] = Field(default_factory=list)

class StudyPlanRequest(BaseModel):
    results: DetailedExamResults
    limit: Optional[int] = Field(default=None, ge=1)

@router.post("/score", response_model=DetailedExamResults)
def score_attempt(payload: ScoreRequest, settings: Settings = Depends(get_settings)):
    threshold = payload.passing_threshold if payload.passing_threshold is not None else settings.DEFAULT_PASSING_THRESHOLD
    return calculate_exam_results(payload.questions, payload.user_answers, payload.exam_attempt, threshold)

@router.post("/simple-score", response_model=SimpleScore)
def simple_score(payload: SimpleScoreRequest):
    return calculate_simple_score(payload.questions, payload.user_answers)

@router.post("/recommendations", response_model=StudyPlan)
def recommendations(payload: StudyPlanRequest, settings: Settings = Depends(get_settings)):
    return build_study_plan(payload.results, limit=payload.limit or settings.STUDY_RECOMMENDATION_LIMIT)
