"""
Enumerations shared by the ORM models and the API schemas.
"""
import enum

from sqlalchemy import Enum


class AppRole(str, enum.Enum):
    """Roles a profile can hold."""
    ADMIN = "admin"
    EMPLOYEE = "employee"


class Department(str, enum.Enum):
    """Departments an employee or course can belong to."""
    ENGINEERING = "Engineering"
    HUMAN_RESOURCES = "Human Resources"
    MARKETING = "Marketing"
    SALES = "Sales"
    FINANCE = "Finance"
    OPERATIONS = "Operations"
    CUSTOMER_SUPPORT = "Customer Support"
    PRODUCT_MANAGEMENT = "Product Management"


class InterviewStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class QuestionCategory(str, enum.Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    SITUATIONAL = "situational"


def _values(enum_cls):
    return [member.value for member in enum_cls]


# Column types store the enum *values* ("Human Resources"), not member names
AppRoleType = Enum(AppRole, name="app_role", values_callable=_values)
DepartmentType = Enum(Department, name="department_type", values_callable=_values)
