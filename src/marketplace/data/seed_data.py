"""Static marketplace dataset.

Used to populate the database through the seed endpoint and as the
response fallback when the projects table is empty or unreachable.
Company ids equal ``company_id_from_name(name)``.
"""

from typing import Any, Final

COMPANIES: Final[list[dict[str, Any]]] = [
    {"id": "slack", "name": "Slack", "email": "careers@slack.example.com", "image": ""},
    {"id": "samsung", "name": "Samsung", "email": "careers@samsung.example.com", "image": ""},
    {"id": "microsoft", "name": "Microsoft", "email": "careers@microsoft.example.com", "image": ""},
    {"id": "amazon", "name": "Amazon", "email": "careers@amazon.example.com", "image": ""},
    {"id": "walmart", "name": "Walmart", "email": "careers@walmart.example.com", "image": ""},
    {"id": "adobe", "name": "Adobe", "email": "careers@adobe.example.com", "image": ""},
]

PROJECTS: Final[list[dict[str, Any]]] = [
    {
        "id": "65f1a0000000000000000001",
        "title": "Full Stack Developer",
        "description": "Build a team messaging dashboard with real-time notifications.",
        "location": "Bangalore",
        "category": "Programming",
        "level": "Intermediate Level",
        "date": "2025-03-01",
        "company_id": "slack",
    },
    {
        "id": "65f1a0000000000000000002",
        "title": "Data Scientist",
        "description": "Forecast device demand from historical sales and usage data.",
        "location": "Washington",
        "category": "Data Science",
        "level": "Senior Level",
        "date": "2025-03-03",
        "company_id": "samsung",
    },
    {
        "id": "65f1a0000000000000000003",
        "title": "Frontend Developer",
        "description": "Design an accessible component library for internal tools.",
        "location": "Hyderabad",
        "category": "Designing",
        "level": "Beginner Level",
        "date": "2025-03-05",
        "company_id": "microsoft",
    },
    {
        "id": "65f1a0000000000000000004",
        "title": "Backend Engineer",
        "description": "Scale an order-tracking API to handle seasonal traffic peaks.",
        "location": "Bangalore",
        "category": "Programming",
        "level": "Senior Level",
        "date": "2025-03-07",
        "company_id": "amazon",
    },
    {
        "id": "65f1a0000000000000000005",
        "title": "Marketing Analyst",
        "description": "Measure the impact of regional promotions on store traffic.",
        "location": "California",
        "category": "Marketing",
        "level": "Intermediate Level",
        "date": "2025-03-09",
        "company_id": "walmart",
    },
    {
        "id": "65f1a0000000000000000006",
        "title": "UI/UX Designer",
        "description": "Prototype a new onboarding flow for creative cloud apps.",
        "location": "Mumbai",
        "category": "Designing",
        "level": "Intermediate Level",
        "date": "2025-03-11",
        "company_id": "adobe",
    },
]

MANAGE_PROJECTS: Final[list[dict[str, Any]]] = [
    {
        "id": "65f1b0000000000000000001",
        "title": "Full Stack Developer",
        "date": "2025-03-01",
        "location": "Bangalore",
        "applicants": 20,
        "visible": True,
        "company_id": "slack",
    },
    {
        "id": "65f1b0000000000000000002",
        "title": "Data Scientist",
        "date": "2025-03-03",
        "location": "Washington",
        "applicants": 15,
        "visible": True,
        "company_id": "samsung",
    },
    {
        "id": "65f1b0000000000000000003",
        "title": "Frontend Developer",
        "date": "2025-03-05",
        "location": "Hyderabad",
        "applicants": 8,
        "visible": False,
        "company_id": "microsoft",
    },
]

# user_id is filled in at seed time with an existing user
PROJECTS_JOINED: Final[list[dict[str, Any]]] = [
    {
        "id": "65f1c0000000000000000001",
        "company_id": "slack",
        "title": "Full Stack Developer",
        "location": "Bangalore",
        "date": "2025-03-12",
        "status": "Pending",
    },
    {
        "id": "65f1c0000000000000000002",
        "company_id": "samsung",
        "title": "Data Scientist",
        "location": "Washington",
        "date": "2025-03-14",
        "status": "Accepted",
    },
    {
        "id": "65f1c0000000000000000003",
        "company_id": "adobe",
        "title": "UI/UX Designer",
        "location": "Mumbai",
        "date": "2025-03-16",
        "status": "Rejected",
    },
]

VIEW_APPLICATIONS: Final[list[dict[str, Any]]] = [
    {
        "id": "65f1d0000000000000000001",
        "name": "Richard Sanford",
        "project_title": "Full Stack Developer",
        "location": "Bangalore",
        "image": "",
        "company_id": "slack",
    },
    {
        "id": "65f1d0000000000000000002",
        "name": "Enrique Murphy",
        "project_title": "Data Scientist",
        "location": "San Francisco",
        "image": "",
        "company_id": "samsung",
    },
    {
        "id": "65f1d0000000000000000003",
        "name": "Alison Powell",
        "project_title": "Frontend Developer",
        "location": "London",
        "image": "",
        "company_id": "microsoft",
    },
]
