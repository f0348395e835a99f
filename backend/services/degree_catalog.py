"""Known degree catalog used for autocomplete and normalization of free text.

The scoring engine never consults this table: an unknown degree still gets
an assessment.
"""

import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)


class Degree(NamedTuple):
    name: str
    category: str  # Technology, Engineering, Business, Sciences, Health, ...
    market_value: str  # High, Medium, Standard


DEGREES: tuple[Degree, ...] = (
    Degree("Computer Science", "Technology", "High"),
    Degree("Software Engineering", "Technology", "High"),
    Degree("Computer Engineering", "Technology", "High"),
    Degree("Information Technology", "Technology", "High"),
    Degree("Data Science", "Technology", "High"),
    Degree("Data Analytics", "Technology", "High"),
    Degree("Artificial Intelligence", "Technology", "High"),
    Degree("Machine Learning", "Technology", "High"),
    Degree("Cybersecurity", "Technology", "High"),
    Degree("Network Engineering", "Technology", "High"),
    Degree("Cloud Computing", "Technology", "High"),
    Degree("Information Systems", "Technology", "Medium"),
    Degree("Web Development", "Technology", "High"),
    Degree("Game Design", "Technology", "Medium"),
    Degree("User Experience Design", "Technology", "High"),
    Degree("Human-Computer Interaction", "Technology", "High"),
    Degree("Electrical Engineering", "Engineering", "High"),
    Degree("Mechanical Engineering", "Engineering", "High"),
    Degree("Civil Engineering", "Engineering", "High"),
    Degree("Chemical Engineering", "Engineering", "High"),
    Degree("Biomedical Engineering", "Engineering", "High"),
    Degree("Aerospace Engineering", "Engineering", "High"),
    Degree("Industrial Engineering", "Engineering", "High"),
    Degree("Environmental Engineering", "Engineering", "High"),
    Degree("Materials Engineering", "Engineering", "Medium"),
    Degree("Petroleum Engineering", "Engineering", "Medium"),
    Degree("Nuclear Engineering", "Engineering", "Medium"),
    Degree("Systems Engineering", "Engineering", "High"),
    Degree("Robotics Engineering", "Engineering", "High"),
    Degree("Business Administration", "Business", "Medium"),
    Degree("Business Management", "Business", "Medium"),
    Degree("Finance", "Business", "High"),
    Degree("Accounting", "Business", "High"),
    Degree("Marketing", "Business", "Medium"),
    Degree("Management", "Business", "Medium"),
    Degree("Economics", "Business", "High"),
    Degree("Supply Chain Management", "Business", "Medium"),
    Degree("Operations Management", "Business", "Medium"),
    Degree("International Business", "Business", "Medium"),
    Degree("Entrepreneurship", "Business", "Medium"),
    Degree("Business Analytics", "Business", "High"),
    Degree("Real Estate", "Business", "Medium"),
    Degree("Insurance", "Business", "Medium"),
    Degree("Human Resources", "Business", "Medium"),
    Degree("Public Relations", "Business", "Medium"),
    Degree("Biology", "Sciences", "Medium"),
    Degree("Chemistry", "Sciences", "Medium"),
    Degree("Physics", "Sciences", "High"),
    Degree("Mathematics", "Sciences", "High"),
    Degree("Statistics", "Sciences", "High"),
    Degree("Biochemistry", "Sciences", "Medium"),
    Degree("Biophysics", "Sciences", "Medium"),
    Degree("Molecular Biology", "Sciences", "Medium"),
    Degree("Genetics", "Sciences", "Medium"),
    Degree("Astrophysics", "Sciences", "Medium"),
    Degree("Environmental Science", "Sciences", "Medium"),
    Degree("Geology", "Sciences", "Medium"),
    Degree("Marine Science", "Sciences", "Standard"),
    Degree("Astronomy", "Sciences", "Standard"),
    Degree("Neuroscience", "Sciences", "High"),
    Degree("Bioinformatics", "Sciences", "High"),
    Degree("Medicine", "Health", "High"),
    Degree("Nursing", "Health", "High"),
    Degree("Pharmacy", "Health", "High"),
    Degree("Public Health", "Health", "Medium"),
    Degree("Health Administration", "Health", "Medium"),
    Degree("Physical Therapy", "Health", "High"),
    Degree("Occupational Therapy", "Health", "High"),
    Degree("Physician Assistant", "Health", "High"),
    Degree("Dentistry", "Health", "High"),
    Degree("Veterinary Science", "Health", "High"),
    Degree("Nutrition", "Health", "Medium"),
    Degree("Kinesiology", "Health", "Medium"),
    Degree("Medical Laboratory Science", "Health", "Medium"),
    Degree("Psychology", "Social Sciences", "Medium"),
    Degree("Sociology", "Social Sciences", "Standard"),
    Degree("Anthropology", "Social Sciences", "Standard"),
    Degree("Political Science", "Social Sciences", "Medium"),
    Degree("International Relations", "Social Sciences", "Medium"),
    Degree("Criminal Justice", "Social Sciences", "Medium"),
    Degree("Criminology", "Social Sciences", "Standard"),
    Degree("Social Work", "Social Sciences", "Medium"),
    Degree("Communication", "Social Sciences", "Medium"),
    Degree("Journalism", "Social Sciences", "Standard"),
    Degree("Media Studies", "Social Sciences", "Standard"),
    Degree("Public Policy", "Social Sciences", "Medium"),
    Degree("English", "Arts", "Standard"),
    Degree("History", "Arts", "Standard"),
    Degree("Philosophy", "Arts", "Standard"),
    Degree("Literature", "Arts", "Standard"),
    Degree("Creative Writing", "Arts", "Standard"),
    Degree("Fine Arts", "Arts", "Standard"),
    Degree("Art History", "Arts", "Standard"),
    Degree("Music", "Arts", "Standard"),
    Degree("Theater", "Arts", "Standard"),
    Degree("Film Studies", "Arts", "Standard"),
    Degree("Graphic Design", "Arts", "Medium"),
    Degree("Industrial Design", "Arts", "Medium"),
    Degree("Fashion Design", "Arts", "Standard"),
    Degree("Architecture", "Arts", "High"),
    Degree("Languages", "Arts", "Standard"),
    Degree("Linguistics", "Arts", "Medium"),
    Degree("Religious Studies", "Arts", "Standard"),
    Degree("Classical Studies", "Arts", "Standard"),
    Degree("Education", "Education", "Medium"),
    Degree("Elementary Education", "Education", "Medium"),
    Degree("Secondary Education", "Education", "Medium"),
    Degree("Special Education", "Education", "Medium"),
    Degree("Educational Leadership", "Education", "Medium"),
    Degree("Agriculture", "Other", "Medium"),
    Degree("Food Science", "Other", "Medium"),
    Degree("Hospitality Management", "Other", "Medium"),
    Degree("Tourism", "Other", "Standard"),
    Degree("Sports Management", "Other", "Standard"),
    Degree("Aviation", "Other", "Medium"),
    Degree("Urban Planning", "Other", "Medium"),
    Degree("Library Science", "Other", "Standard"),
    Degree("Blockchain Technology", "Technology", "High"),
    Degree("Quantum Computing", "Technology", "High"),
    Degree("Internet of Things", "Technology", "High"),
    Degree("Mobile App Development", "Technology", "High"),
    Degree("DevOps Engineering", "Technology", "High"),
    Degree("Full Stack Development", "Technology", "High"),
    Degree("Database Administration", "Technology", "Medium"),
    Degree("IT Project Management", "Technology", "Medium"),
    Degree("Automotive Engineering", "Engineering", "High"),
    Degree("Marine Engineering", "Engineering", "Medium"),
    Degree("Mining Engineering", "Engineering", "Medium"),
    Degree("Agricultural Engineering", "Engineering", "Medium"),
    Degree("Telecommunications Engineering", "Engineering", "High"),
    Degree("Software Systems Engineering", "Engineering", "High"),
    Degree("Biochemical Engineering", "Engineering", "High"),
    Degree("Optical Engineering", "Engineering", "Medium"),
    Degree("Investment Banking", "Business", "High"),
    Degree("Financial Planning", "Business", "Medium"),
    Degree("Digital Marketing", "Business", "High"),
    Degree("E-Commerce", "Business", "High"),
    Degree("Project Management", "Business", "Medium"),
    Degree("Organizational Leadership", "Business", "Medium"),
    Degree("Risk Management", "Business", "High"),
    Degree("Commodities Trading", "Business", "High"),
    Degree("Computational Biology", "Sciences", "High"),
    Degree("Quantum Physics", "Sciences", "High"),
    Degree("Materials Science", "Sciences", "High"),
    Degree("Nanotechnology", "Sciences", "High"),
    Degree("Climate Science", "Sciences", "Medium"),
    Degree("Forensic Science", "Sciences", "Medium"),
    Degree("Pharmacology", "Sciences", "High"),
    Degree("Toxicology", "Sciences", "Medium"),
    Degree("Radiology", "Health", "High"),
    Degree("Anesthesiology", "Health", "High"),
    Degree("Surgery", "Health", "High"),
    Degree("Psychiatry", "Health", "High"),
    Degree("Pediatrics", "Health", "High"),
    Degree("Epidemiology", "Health", "High"),
    Degree("Health Informatics", "Health", "High"),
    Degree("Medical Imaging", "Health", "High"),
    Degree("Behavioral Economics", "Social Sciences", "High"),
    Degree("Cognitive Science", "Social Sciences", "High"),
    Degree("Data Journalism", "Social Sciences", "Medium"),
    Degree("Public Administration", "Social Sciences", "Medium"),
    Degree("Urban Studies", "Social Sciences", "Medium"),
    Degree("Gender Studies", "Social Sciences", "Standard"),
    Degree("Ethnic Studies", "Social Sciences", "Standard"),
    Degree("Peace and Conflict Studies", "Social Sciences", "Standard"),
    Degree("Digital Arts", "Arts", "Medium"),
    Degree("Animation", "Arts", "Medium"),
    Degree("Game Art", "Arts", "Medium"),
    Degree("Interior Design", "Arts", "Medium"),
    Degree("Landscape Architecture", "Arts", "High"),
    Degree("Photography", "Arts", "Standard"),
    Degree("Illustration", "Arts", "Standard"),
    Degree("Music Production", "Arts", "Medium"),
)

# Common shorthand seen in the major field
ABBREVIATIONS: dict[str, str] = {
    "cs": "Computer Science",
    "comp sci": "Computer Science",
    "software": "Software Engineering",
    "data": "Data Science",
    "ai": "Artificial Intelligence",
    "ml": "Machine Learning",
    "cyber security": "Cybersecurity",
    "network": "Network Engineering",
    "cloud": "Cloud Computing",
    "it": "Information Technology",
    "is": "Information Systems",
    "ux": "User Experience Design",
    "hci": "Human-Computer Interaction",
    "ee": "Electrical Engineering",
    "me": "Mechanical Engineering",
    "ce": "Civil Engineering",
    "chem e": "Chemical Engineering",
    "biomedical": "Biomedical Engineering",
    "aerospace": "Aerospace Engineering",
    "industrial": "Industrial Engineering",
    "environmental": "Environmental Engineering",
    "systems": "Systems Engineering",
    "robotics": "Robotics Engineering",
    "business": "Business Administration",
    "business mgmt": "Business Management",
    "mba": "Business Administration",
    "econ": "Economics",
    "bio": "Biology",
    "chem": "Chemistry",
    "math": "Mathematics",
    "stats": "Statistics",
    "neuro": "Neuroscience",
    "psych": "Psychology",
    "arch": "Architecture",
}

MIN_PARTIAL_LENGTH = 4

_BY_NAME: dict[str, Degree] = {d.name.lower(): d for d in DEGREES}


def find_degree(text: str) -> Degree | None:
    """Resolve free text to a catalog degree.

    Exact name first, then containment in either direction, then shorthand.
    Shorthand keys must match a whole word so "me" does not hit "Game Design".
    """
    query = " ".join(text.lower().split())
    if not query:
        return None

    exact = _BY_NAME.get(query)
    if exact is not None:
        return exact

    # Short queries are shorthand, not fragments ("cs" is inside "Economics")
    if len(query) >= MIN_PARTIAL_LENGTH:
        for degree in DEGREES:
            name = degree.name.lower()
            if query in name or name in query:
                return degree

    words = query.split()
    for key, full_name in ABBREVIATIONS.items():
        key_words = key.split()
        if any(words[i:i + len(key_words)] == key_words for i in range(len(words))):
            return _BY_NAME[full_name.lower()]

    logger.debug("No catalog degree for %r", text)
    return None


def suggest(query: str, limit: int = 10) -> list[Degree]:
    """Catalog degrees whose name contains the query; prefix matches first."""
    q = query.strip().lower()
    if not q:
        return list(DEGREES[:limit])
    hits = [d for d in DEGREES if q in d.name.lower()]
    hits.sort(key=lambda d: (not d.name.lower().startswith(q), d.name))
    return hits[:limit]
