"""
Tests for the persisted interview endpoints.
"""
import pytest

from emplyo.db.models.interview_question import InterviewQuestion
from emplyo.db.models.interview_response import InterviewResponse
from emplyo.db.models.interview_session import InterviewSession
from emplyo.llm.errors import LLMGenerationError, LLMRateLimitError

CANDIDATE = {
    "candidate_name": "Jane Doe",
    "candidate_email": "jane@example.com",
    "position": "Backend Engineer",
    "department": "Engineering",
}


@pytest.fixture
def interview(client, admin_headers):
    response = client.post("/interviews", headers=admin_headers, json=CANDIDATE)
    assert response.status_code == 201
    return response.json()


def test_start_interview_stores_questions(client, db, admin_user, interview):
    assert interview["status"] == "pending"
    assert interview["created_by"] == admin_user.id
    assert [q["question_text"] for q in interview["questions"]] == [f"Question {i}?" for i in range(1, 6)]
    assert interview["questions"][0]["expected_points"] == ["point 1a", "point 1b"]
    assert db.query(InterviewQuestion).count() == 5


def test_start_interview_is_admin_only(client, employee_headers):
    response = client.post("/interviews", headers=employee_headers, json=CANDIDATE)
    assert response.status_code == 403


def test_failed_generation_writes_nothing(client, db, admin_headers, provider):
    provider.tool_arguments["return_questions"] = None

    response = client.post("/interviews", headers=admin_headers, json=CANDIDATE)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate questions"}
    assert db.query(InterviewSession).count() == 0
    assert db.query(InterviewQuestion).count() == 0


def test_list_and_get_interviews(client, admin_headers, interview):
    listing = client.get("/interviews", headers=admin_headers)
    assert [s["id"] for s in listing.json()] == [interview["id"]]

    detail = client.get(f"/interviews/{interview['id']}", headers=admin_headers)
    assert detail.status_code == 200
    assert len(detail.json()["questions"]) == 5

    assert client.get("/interviews/missing", headers=admin_headers).status_code == 404


def test_complete_interview(client, db, admin_headers, interview):
    questions = interview["questions"]
    answers = [
        {"question_id": questions[0]["id"], "response": "I would profile first 7"},
        {"question_id": questions[1]["id"], "response": "I would write a test 8"},
    ]

    response = client.post(f"/interviews/{interview['id']}/complete", headers=admin_headers, json={"responses": answers})

    assert response.status_code == 200
    body = response.json()
    assert [e["score"] for e in body["evaluations"]] == [7, 8]
    assert body["overall_score"] == 8
    assert body["session"]["status"] == "completed"
    assert body["session"]["overall_score"] == 8
    assert body["session"]["recommendation"] == body["recommendation"]
    assert body["session"]["completed_at"] is not None

    detail = client.get(f"/interviews/{interview['id']}", headers=admin_headers).json()
    stored = {q["id"]: q["response"] for q in detail["questions"]}
    assert stored[questions[0]["id"]]["score"] == 7
    assert stored[questions[1]["id"]]["response_text"] == "I would write a test 8"
    assert stored[questions[2]["id"]] is None


def test_complete_twice_conflicts(client, admin_headers, interview):
    answers = [{"question_id": interview["questions"][0]["id"], "response": "answer"}]
    client.post(f"/interviews/{interview['id']}/complete", headers=admin_headers, json={"responses": answers})

    response = client.post(f"/interviews/{interview['id']}/complete", headers=admin_headers, json={"responses": answers})

    assert response.status_code == 409


def test_complete_rejects_foreign_question(client, admin_headers, interview):
    answers = [{"question_id": "not-in-this-interview", "response": "answer"}]

    response = client.post(f"/interviews/{interview['id']}/complete", headers=admin_headers, json={"responses": answers})

    assert response.status_code == 400


def test_complete_rejects_empty_responses(client, admin_headers, interview):
    response = client.post(f"/interviews/{interview['id']}/complete", headers=admin_headers, json={"responses": []})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "error, status_code",
    [
        (LLMRateLimitError("Rate limit exceeded. Please try again later."), 429),
        (LLMGenerationError("AI gateway returned status 503"), 500),
    ],
)
def test_failed_evaluation_leaves_interview_pending(client, db, admin_headers, provider, interview, error, status_code):
    provider.errors["return_evaluation"] = error
    answers = [{"question_id": q["id"], "response": "answer"} for q in interview["questions"]]

    response = client.post(f"/interviews/{interview['id']}/complete", headers=admin_headers, json={"responses": answers})

    assert response.status_code == status_code
    assert "error" in response.json()
    assert db.query(InterviewResponse).count() == 0
    session = db.query(InterviewSession).filter(InterviewSession.id == interview["id"]).first()
    assert session.status == "pending"
    assert session.overall_score is None
