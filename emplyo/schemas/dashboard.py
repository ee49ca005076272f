from pydantic import BaseModel


class AdminStats(BaseModel):
    employees: int
    present_today: int


class EmployeeStats(BaseModel):
    attendance_this_month: int
