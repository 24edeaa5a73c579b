# canonical CV shape + sample content shown on first load and after reset
import copy
import uuid

from config import DEFAULT_TEMPLATE
from themes import TEMPLATES

INITIAL_DATA = {
    "personal": {
        "name": "Mario Rossi",
        "title": "Digital Marketing Manager",
        "email": "mario.rossi@example.com",
        "phone": "+39 333 1234567",
        "location": "Milan, Italy",
        "summary": "Professional with over 5 years of experience running digital "
                   "campaigns and creative teams. Passionate about data, ROI and "
                   "innovative growth strategies.",
        "photo": None,
    },
    "experience": [
        {"id": "1", "role": "Senior Manager", "company": "Tech Agency",
         "start": "2020", "end": "Present",
         "desc": "Managed a 50k/month budget. Coordinated a team of 5 people "
                 "and quarterly strategic planning."},
    ],
    "education": [
        {"id": "1", "degree": "Degree in Economics", "school": "Bocconi University",
         "year": "2019"},
    ],
    "skills": "SEO, SEM, Google Analytics, Leadership, English C1, React Basic, "
              "Project Management",
}

INITIAL_CONFIG = {
    "template": DEFAULT_TEMPLATE if DEFAULT_TEMPLATE in TEMPLATES else "modern",
    "color": "#2563eb",
    "font": "inter",
    "scale": 1.0,
}

# field defaults for freshly added entries
ENTRY_SCHEMA = {
    "experience": {"role": "New Role", "company": "Company", "start": "", "end": "", "desc": ""},
    "education": {"degree": "Degree", "school": "School", "year": ""},
}

PERSONAL_FIELDS = tuple(INITIAL_DATA["personal"])


def initial_data() -> dict:
    return copy.deepcopy(INITIAL_DATA)


def initial_config() -> dict:
    return copy.deepcopy(INITIAL_CONFIG)


def new_entry(section: str, existing_ids=()) -> dict:
    """Default entry for `section` with an id not present in `existing_ids`."""
    if section not in ENTRY_SCHEMA:
        raise ValueError(f"Unknown section: {section}")
    taken = set(existing_ids)
    entry_id = uuid.uuid4().hex[:12]
    while entry_id in taken:
        entry_id = uuid.uuid4().hex[:12]
    return {"id": entry_id, **ENTRY_SCHEMA[section]}
