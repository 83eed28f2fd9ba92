"""Initial dataset loaded into a freshly constructed RecordStore."""

from __future__ import annotations

from datetime import date

from staffboard.models.department import Department
from staffboard.models.employee import Employee, EmployeeStatus
from staffboard.models.review import PerformanceReview
from staffboard.models.role import Role


def seed_employees() -> list[Employee]:
    return [
        Employee(
            id="1",
            first_name="John",
            last_name="Doe",
            email="john.doe@company.com",
            phone="(555) 123-4567",
            avatar="https://i.pravatar.cc/150?img=1",
            role_id="1",
            department_id="1",
            hire_date=date(2020, 1, 15),
            status=EmployeeStatus.ACTIVE,
        ),
        Employee(
            id="2",
            first_name="Jane",
            last_name="Smith",
            email="jane.smith@company.com",
            phone="(555) 987-6543",
            avatar="https://i.pravatar.cc/150?img=5",
            role_id="2",
            department_id="1",
            hire_date=date(2019, 3, 22),
            status=EmployeeStatus.ACTIVE,
        ),
        Employee(
            id="3",
            first_name="Michael",
            last_name="Johnson",
            email="michael.johnson@company.com",
            phone="(555) 555-1212",
            avatar="https://i.pravatar.cc/150?img=3",
            role_id="3",
            department_id="2",
            hire_date=date(2021, 7, 10),
            status=EmployeeStatus.ACTIVE,
        ),
        Employee(
            id="4",
            first_name="Emily",
            last_name="Williams",
            email="emily.williams@company.com",
            phone="(555) 444-3333",
            avatar="https://i.pravatar.cc/150?img=9",
            role_id="4",
            department_id="3",
            hire_date=date(2018, 11, 5),
            status=EmployeeStatus.ON_LEAVE,
        ),
        Employee(
            id="5",
            first_name="Robert",
            last_name="Brown",
            email="robert.brown@company.com",
            phone="(555) 222-1111",
            avatar="https://i.pravatar.cc/150?img=8",
            role_id="2",
            department_id="4",
            hire_date=date(2022, 2, 18),
            status=EmployeeStatus.ACTIVE,
        ),
    ]


def seed_roles() -> list[Role]:
    return [
        Role(
            id="1",
            title="CEO",
            description="Chief Executive Officer",
            responsibilities=["Company strategy", "Executive leadership", "Board management"],
            department_id="1",
            level=5,
            is_manager=True,
        ),
        Role(
            id="2",
            title="CTO",
            description="Chief Technology Officer",
            responsibilities=["Technology strategy", "Engineering leadership", "Product vision"],
            department_id="2",
            level=4,
            is_manager=True,
        ),
        Role(
            id="3",
            title="Senior Developer",
            description="Experienced software engineer",
            responsibilities=["Code architecture", "Mentoring", "Technical decisions"],
            department_id="2",
            level=3,
            is_manager=False,
        ),
        Role(
            id="4",
            title="HR Manager",
            description="Human Resources Manager",
            responsibilities=["Recruitment", "Employee relations", "Policy development"],
            department_id="3",
            level=4,
            is_manager=True,
        ),
        Role(
            id="5",
            title="Marketing Director",
            description="Head of Marketing",
            responsibilities=["Brand strategy", "Campaign management", "Market analysis"],
            department_id="4",
            level=4,
            is_manager=True,
        ),
    ]


def seed_departments() -> list[Department]:
    return [
        Department(
            id="1",
            name="Executive",
            description="Company leadership and strategy",
            manager_id="1",
            created_at=date(2015, 1, 1),
        ),
        Department(
            id="2",
            name="Engineering",
            description="Software development and technical operations",
            manager_id="2",
            created_at=date(2015, 2, 15),
        ),
        Department(
            id="3",
            name="Human Resources",
            description="Employee management and development",
            manager_id="4",
            created_at=date(2015, 3, 10),
        ),
        Department(
            id="4",
            name="Marketing",
            description="Brand management and customer acquisition",
            manager_id="5",
            created_at=date(2016, 1, 20),
        ),
    ]


def seed_reviews() -> list[PerformanceReview]:
    return [
        PerformanceReview(
            id="1",
            employee_id="2",
            reviewer_id="1",
            date=date(2023, 1, 15),
            rating=4.5,
            comments="Exceptional performance and leadership",
            strengths=["Communication", "Problem solving", "Team leadership"],
            areas_to_improve=["Work-life balance"],
            goals=["Lead a major project", "Mentor junior employees"],
        ),
        PerformanceReview(
            id="2",
            employee_id="3",
            reviewer_id="2",
            date=date(2023, 2, 5),
            rating=4.2,
            comments="Strong technical skills and contributions",
            strengths=["Technical expertise", "Code quality", "Innovation"],
            areas_to_improve=["Documentation", "Meeting deadlines"],
            goals=["Improve documentation practices", "Learn a new technology"],
        ),
        PerformanceReview(
            id="3",
            employee_id="4",
            reviewer_id="1",
            date=date(2023, 1, 20),
            rating=3.8,
            comments="Good performer with room for growth",
            strengths=["Organization", "Process improvement", "Employee advocacy"],
            areas_to_improve=["Assertiveness", "Strategic thinking"],
            goals=["Develop leadership skills", "Implement new HR process"],
        ),
        PerformanceReview(
            id="4",
            employee_id="5",
            reviewer_id="1",
            date=date(2023, 3, 10),
            rating=4.0,
            comments="Consistent performer with creative ideas",
            strengths=["Creativity", "Market knowledge", "Project management"],
            areas_to_improve=["Analytics", "Technical skills"],
            goals=["Improve data analysis skills", "Lead a successful campaign"],
        ),
    ]
