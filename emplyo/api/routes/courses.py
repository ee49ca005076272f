"""
Course catalogue, enrollment and quiz endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emplyo.core.auth_dependency import get_auth_session, get_db, require_admin
from emplyo.core.roles import AuthSession
from emplyo.schemas.course import (
    CourseCreate,
    CourseResponse,
    CourseWithEnrollment,
    EnrollmentResponse,
    QuizQuestionCreate,
    QuizQuestionPublic,
    QuizQuestionResponse,
    QuizResult,
    QuizSubmission,
    QuizView,
)
from emplyo.services import course_service

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.get("", response_model=List[CourseWithEnrollment])
def list_courses(
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    """Courses by title, each with the caller's enrollment if any."""
    enrollments = course_service.list_enrollments(db, session.user_id)
    return [
        CourseWithEnrollment(
            course=CourseResponse.model_validate(course),
            enrollment=EnrollmentResponse.model_validate(enrollments[course.id]) if course.id in enrollments else None,
        )
        for course in course_service.list_courses(db)
    ]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CourseResponse)
def create_course(
    data: CourseCreate,
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return CourseResponse.model_validate(course_service.create_course(db, data))


@router.post("/{course_id}/questions", status_code=status.HTTP_201_CREATED, response_model=QuizQuestionResponse)
def add_question(
    course_id: str,
    data: QuizQuestionCreate,
    admin: AuthSession = Depends(require_admin),
    db: Session = Depends(get_db)
):
    course = course_service.get_course(db, course_id)
    return QuizQuestionResponse.model_validate(course_service.add_question(db, course, data))


@router.post("/{course_id}/enroll", status_code=status.HTTP_201_CREATED, response_model=EnrollmentResponse)
def enroll(
    course_id: str,
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    return EnrollmentResponse.model_validate(course_service.enroll(db, session.user_id, course_id))


@router.get("/{course_id}/quiz", response_model=QuizView)
def get_quiz(
    course_id: str,
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    course = course_service.get_course(db, course_id)
    enrollment = course_service.require_enrollment(db, session.user_id, course_id)
    return QuizView(
        course=CourseResponse.model_validate(course),
        questions=[QuizQuestionPublic.model_validate(q) for q in course_service.list_questions(db, course_id)],
        enrollment=EnrollmentResponse.model_validate(enrollment),
    )


@router.post("/{course_id}/quiz", response_model=QuizResult)
def submit_quiz(
    course_id: str,
    submission: QuizSubmission,
    session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db)
):
    enrollment, score, correct_count, results = course_service.submit_quiz(
        db, session.user_id, course_id, submission.answers
    )
    return QuizResult(
        score=score,
        correct_count=correct_count,
        total=len(results),
        results=results,
        enrollment=EnrollmentResponse.model_validate(enrollment),
    )
