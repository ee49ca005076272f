"""
Courses, enrollments and quiz grading.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from emplyo.db.models.course import Course, CourseEnrollment
from emplyo.db.models.quiz import QuizAttempt, QuizQuestion
from emplyo.schemas.course import (
    CourseCreate,
    QuizAnswer,
    QuizQuestionCreate,
    QuizResultItem,
)
from emplyo.services.scoring import percentage_score

logger = logging.getLogger(__name__)


def list_courses(db: Session) -> List[Course]:
    return db.query(Course).order_by(Course.title, Course.id).all()


def list_enrollments(db: Session, user_id: str) -> Dict[str, CourseEnrollment]:
    """The user's enrollments keyed by course id."""
    enrollments = db.query(CourseEnrollment).filter(CourseEnrollment.user_id == user_id).all()
    return {enrollment.course_id: enrollment for enrollment in enrollments}


def get_course(db: Session, course_id: str) -> Course:
    course = db.query(Course).filter(Course.id == course_id).first()
    if not course:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return course


def create_course(db: Session, data: CourseCreate) -> Course:
    course = Course(**data.model_dump())
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info(f"Course created: course_id={course.id}, title={course.title!r}")
    return course


def add_question(db: Session, course: Course, data: QuizQuestionCreate) -> QuizQuestion:
    question = QuizQuestion(course_id=course.id, **data.model_dump())
    db.add(question)
    db.commit()
    db.refresh(question)
    return question


def list_questions(db: Session, course_id: str) -> List[QuizQuestion]:
    return db.query(QuizQuestion).filter(
        QuizQuestion.course_id == course_id
    ).order_by(QuizQuestion.created_at, QuizQuestion.id).all()


def get_enrollment(db: Session, user_id: str, course_id: str) -> Optional[CourseEnrollment]:
    return db.query(CourseEnrollment).filter(
        CourseEnrollment.user_id == user_id,
        CourseEnrollment.course_id == course_id,
    ).first()


def require_enrollment(db: Session, user_id: str, course_id: str) -> CourseEnrollment:
    enrollment = get_enrollment(db, user_id, course_id)
    if enrollment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not enrolled in this course")
    return enrollment


def enroll(db: Session, user_id: str, course_id: str) -> CourseEnrollment:
    """
    Enroll the user in a course, once.

    Raises:
        HTTPException: 404 for an unknown course, 409 if already enrolled
    """
    get_course(db, course_id)
    if get_enrollment(db, user_id, course_id) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already enrolled in this course")

    enrollment = CourseEnrollment(user_id=user_id, course_id=course_id)
    db.add(enrollment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already enrolled in this course")
    db.refresh(enrollment)

    logger.info(f"Enrolled: user_id={user_id}, course_id={course_id}")
    return enrollment


def grade_answers(
    questions: Sequence[QuizQuestion],
    answers: Sequence[QuizAnswer],
) -> Tuple[int, int, List[QuizResultItem]]:
    """
    Grade a complete answer sheet.

    Every question must be answered exactly once.

    Returns:
        (score, correct_count, per-question results in question order)

    Raises:
        ValueError: empty question set, unknown, missing or repeated answers
    """
    if not questions:
        raise ValueError("This course has no quiz questions")

    selected: Dict[str, str] = {}
    for answer in answers:
        if answer.question_id in selected:
            raise ValueError(f"Question {answer.question_id} answered more than once")
        selected[answer.question_id] = answer.selected_answer

    question_ids = {question.id for question in questions}
    unknown = set(selected) - question_ids
    if unknown:
        raise ValueError(f"Unknown question(s): {', '.join(sorted(unknown))}")
    missing = question_ids - set(selected)
    if missing:
        raise ValueError(f"Missing answer(s) for {len(missing)} question(s)")

    results = [
        QuizResultItem(
            question_id=question.id,
            selected_answer=selected[question.id],
            correct_answer=question.correct_answer,
            is_correct=selected[question.id] == question.correct_answer,
        )
        for question in questions
    ]
    correct_count = sum(1 for result in results if result.is_correct)
    return percentage_score(correct_count, len(questions)), correct_count, results


def submit_quiz(
    db: Session,
    user_id: str,
    course_id: str,
    answers: Sequence[QuizAnswer],
) -> Tuple[CourseEnrollment, int, int, List[QuizResultItem]]:
    """
    Grade and record a quiz.

    Attempt rows and the enrollment update are committed together.
    """
    get_course(db, course_id)
    enrollment = require_enrollment(db, user_id, course_id)
    if enrollment.completed_at is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Quiz already completed")

    questions = list_questions(db, course_id)
    try:
        score, correct_count, results = grade_answers(questions, answers)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    db.add_all([
        QuizAttempt(
            enrollment_id=enrollment.id,
            question_id=result.question_id,
            selected_answer=result.selected_answer,
            is_correct=result.is_correct,
        )
        for result in results
    ])
    enrollment.quiz_score = score
    enrollment.completed_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(enrollment)

    logger.info(f"Quiz submitted: user_id={user_id}, course_id={course_id}, score={score}")
    return enrollment, score, correct_count, results
