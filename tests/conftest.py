"""
Shared fixtures: in-memory database, fake model gateway and signed-in users.
"""
import json
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LLM_GATEWAY_API_KEY", "test-gateway-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from emplyo.core.auth_dependency import get_db
from emplyo.core.security import create_access_token
from emplyo.db.base import Base
from emplyo.db.models.enums import AppRole, Department
from emplyo.llm.openai_provider import get_llm_provider
from emplyo.llm.provider import LLMProvider, LLMResponse
from emplyo.main import app
from emplyo.schemas.employee import EmployeeCreate
from emplyo.services import employee_service

import emplyo.db.models  # noqa: F401  (register tables)


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def question_set(count=5):
    categories = ["technical", "behavioral", "situational"]
    return {
        "questions": [
            {
                "question": f"Question {i + 1}?",
                "category": categories[i % len(categories)],
                "expected_points": [f"point {i + 1}a", f"point {i + 1}b"],
            }
            for i in range(count)
        ]
    }


def score_from_response(messages):
    """Score an answer by its text: a trailing number is the score, otherwise 8."""
    content = messages[-1]["content"]
    answer = content.split("Candidate's response: ", 1)[1].split("\n", 1)[0]
    last = answer.rsplit(" ", 1)[-1]
    score = int(last) if last.isdigit() else 8
    return json.dumps({"score": score, "feedback": f"Feedback for: {answer}"})


class FakeProvider(LLMProvider):
    """
    Stand-in for the model gateway.

    ``tool_arguments`` maps a tool name to the raw arguments string (or a
    callable taking the messages); ``errors`` maps a tool name, or "chat" for
    plain completions, to an exception to raise.
    """

    def __init__(self):
        self.calls = []
        self.tool_arguments = {
            "return_questions": json.dumps(question_set()),
            "return_evaluation": score_from_response,
        }
        self.errors = {}
        self.recommendation = "Strong candidate. Recommend a follow-up interview."

    async def chat(self, messages, model, temperature=None, max_tokens=None, tools=None, tool_choice=None):
        name = tool_choice["function"]["name"] if tool_choice else "chat"
        self.calls.append(name)
        if name in self.errors:
            raise self.errors[name]
        if name == "chat":
            return LLMResponse(content=self.recommendation, model=model)

        arguments = self.tool_arguments.get(name)
        if callable(arguments):
            arguments = arguments(messages)
        return LLMResponse(tool_arguments=arguments, model=model)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=test_engine)
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def client(db, provider):
    """Test client wired to the test database and the fake gateway."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_provider] = lambda: provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _create_profile(db, email, role, full_name, department=None):
    return employee_service.create_employee(
        db,
        EmployeeCreate(email=email, password="testpass123", full_name=full_name, department=department),
        role=role,
    )


def auth_headers(profile):
    return {"Authorization": f"Bearer {create_access_token({'sub': profile.id})}"}


@pytest.fixture
def admin_user(db):
    return _create_profile(db, "admin@example.com", AppRole.ADMIN, "Ada Admin", Department.HUMAN_RESOURCES)


@pytest.fixture
def employee_user(db):
    return _create_profile(db, "employee@example.com", AppRole.EMPLOYEE, "Eve Employee", Department.ENGINEERING)


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def employee_headers(employee_user):
    return auth_headers(employee_user)
