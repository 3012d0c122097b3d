# canonical schema (one placeholder entry per list section)
PERSONAL_INFO_FIELDS = ("name", "email", "phone", "linkedin", "github", "portfolio")
EDUCATION_FIELDS = ("college", "degree", "cgpa", "year", "coursework")
EXPERIENCE_FIELDS = ("company", "role", "duration")
PROJECT_FIELDS = ("title", "technologies", "description", "githubLink")
TEXT_FIELDS = ("achievements", "extracurriculars", "targetRole")

EMPTY_EDUCATION = {"college": "", "degree": "", "cgpa": "", "year": "", "coursework": ""}
EMPTY_EXPERIENCE = {"company": "", "role": "", "duration": "", "description": [""]}
EMPTY_PROJECT = {"title": "", "technologies": "", "description": "", "githubLink": ""}

PRIORITIES = ("High", "Medium", "Low")
DEFAULT_PRIORITY = "Medium"

GRADE_KEYS = ("overallScore", "atsScore", "contentScore", "designScore", "completenessScore")
