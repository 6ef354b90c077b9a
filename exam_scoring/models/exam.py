"""
Exam catalog, submission and result schemas.
"""
from typing import List, Optional, Union
import enum
from pydantic import BaseModel, ConfigDict, Field

class DifficultyLevel(str, enum.Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

class PerformanceLevel(str, enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"
    POOR = "poor"

class TimeEfficiency(str, enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ADEQUATE = "adequate"
    RUSHED = "rushed"

# ========== Catalog ==========

class KnowledgeArea(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    weight_percentage: float = Field(ge=0)
    description: Optional[str] = None

class Answer(BaseModel):
    """A selectable option of a question."""
    model_config = ConfigDict(frozen=True)

    id: str
    text: str = ""
    is_correct: bool = False
    answer_letter: Optional[str] = Field(default=None, pattern="^[A-E]$")

class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str = ""
    answers: List[Answer] = Field(default_factory=list)
    knowledge_area: KnowledgeArea
    difficulty_level: DifficultyLevel
    question_number: int
    required_selections: int = Field(default=1, ge=1)
    explanation: Optional[str] = None

    def correct_answers(self) -> List[Answer]:
        return [a for a in self.answers if a.is_correct]

# ========== Session ==========

class UserAnswer(BaseModel):
    """One selection event; multi-select questions produce one per option."""
    model_config = ConfigDict(frozen=True)

    question_id: str
    answer_id: Optional[str] = None
    time_spent_seconds: float = Field(default=0, ge=0)
    exam_attempt_id: Optional[str] = None

class ExamAttempt(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    time_spent_minutes: Optional[Union[int, float]] = Field(default=None, ge=0)
    correct_answers: int = 0
    total_questions: int = 0
    user_id: Optional[str] = None
    practice_exam_id: Optional[str] = None
    status: Optional[str] = None
    mode: Optional[str] = None

# ========== Results ==========

class QuestionResult(BaseModel):
    question_id: str
    question_number: int
    user_answer_id: Optional[str] = None
    correct_answer_id: str
    is_correct: bool
    time_spent_seconds: float
    knowledge_area: str

class KnowledgeAreaScore(BaseModel):
    id: str
    name: str
    weight_percentage: float
    correct_answers: int
    total_questions: int
    score_percentage: int
    performance_level: PerformanceLevel

class DifficultyStats(BaseModel):
    correct: int = 0
    total: int = 0
    percentage: int = 0

class DifficultyBreakdown(BaseModel):
    easy: DifficultyStats = Field(default_factory=DifficultyStats)
    medium: DifficultyStats = Field(default_factory=DifficultyStats)
    hard: DifficultyStats = Field(default_factory=DifficultyStats)

class DetailedExamResults(BaseModel):
    attempt_id: str
    score_percentage: int
    correct_answers: int
    total_questions: int
    passed: bool
    time_spent_minutes: Union[int, float]
    question_results: List[QuestionResult]
    knowledge_area_scores: List[KnowledgeAreaScore]
    overall_performance_level: PerformanceLevel
    time_efficiency: TimeEfficiency
    difficulty_breakdown: DifficultyBreakdown

class SimpleScore(BaseModel):
    correct: int
    total: int
    percentage: int

class AreaRecommendation(BaseModel):
    id: str
    name: str
    weight_percentage: float
    score_percentage: int
    performance_level: PerformanceLevel
    recommendation: str

class StudyPlan(BaseModel):
    overall_message: str
    time_message: str
    total_areas: int
    strong_areas: int
    review_areas: int
    weak_areas: int
    all_strong: bool
    areas: List[AreaRecommendation]
    focus_areas: List[AreaRecommendation]
