from exam_scoring.models.exam import Answer, ExamAttempt, KnowledgeArea, Question, UserAnswer

USER_MGMT = KnowledgeArea(id="ka_1", name="User Management", weight_percentage=40)
DATA_SECURITY = KnowledgeArea(id="ka_2", name="Data Security", weight_percentage=60)

def make_question(qid, correct=("a",), wrong=("b",), area=USER_MGMT, difficulty="easy", number=1, required=None):
    """Options are named f"{qid}{suffix}", e.g. q1a (correct) and q1b (wrong)."""
    answers = [Answer(id=f"{qid}{s}", text=s, is_correct=True) for s in correct]
    answers += [Answer(id=f"{qid}{s}", text=s, is_correct=False) for s in wrong]
    return Question(
        id=qid, text=f"Question {qid}", answers=answers, knowledge_area=area,
        difficulty_level=difficulty, question_number=number,
        required_selections=required if required is not None else max(1, len(correct)),
    )

def pick(qid, *suffixes, seconds=30):
    return [UserAnswer(question_id=qid, answer_id=f"{qid}{s}", time_spent_seconds=seconds) for s in suffixes]

def attempt(minutes=90, aid="attempt_1"):
    return ExamAttempt(id=aid, time_spent_minutes=minutes)

def sample_exam():
    return [
        make_question("q1", area=USER_MGMT, difficulty="easy", number=1),
        make_question("q2", correct=("b",), wrong=("a",), area=USER_MGMT, difficulty="medium", number=2),
        make_question("q3", area=DATA_SECURITY, difficulty="hard", number=3),
    ]
