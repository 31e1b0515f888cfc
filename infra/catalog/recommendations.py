"""Hand-curated certifications and opportunities.

Served by ``GET /api/recommendations/details`` and substituted for live
course discovery when the generation service cannot be used.
"""
import copy
from typing import Dict, List

from domain.errors import InvalidInputError
from domain.schemas import Course, LearningResult, Opportunity

FALLBACK_MESSAGE = (
    "Live course discovery is temporarily unavailable. "
    "Showing our curated list of certifications and opportunities instead."
)

RECOMMENDATIONS: Dict[str, List[Dict[str, str]]] = {
    "certifications": [
        {
            "name": "Google IT Support Professional Certificate",
            "provider": "Coursera / Google",
            "cost": "$49/month (Coursera subscription)",
            "length": "3–6 months",
            "link": "https://www.coursera.org/professional-certificates/google-it-support",
        },
        {
            "name": "Google Data Analytics Professional Certificate",
            "provider": "Coursera / Google",
            "cost": "$49/month (Coursera subscription)",
            "length": "6 months",
            "link": "https://www.coursera.org/professional-certificates/google-data-analytics",
        },
        {
            "name": "Google Cybersecurity Professional Certificate",
            "provider": "Coursera / Google",
            "cost": "$49/month (Coursera subscription)",
            "length": "6 months",
            "link": "https://www.coursera.org/professional-certificates/google-cybersecurity",
        },
        {
            "name": "AWS Cloud Practitioner Essentials",
            "provider": "AWS Skill Builder",
            "cost": "Free (course), exam ~$100",
            "length": "20+ hours",
            "link": "https://www.aws.training/Details/Curriculum?id=20685",
        },
        {
            "name": "IBM Data Science Professional Certificate",
            "provider": "Coursera / IBM",
            "cost": "$49/month (Coursera subscription)",
            "length": "6–9 months",
            "link": "https://www.coursera.org/professional-certificates/ibm-data-science",
        },
        {
            "name": "The Complete Python Bootcamp",
            "provider": "Udemy",
            "cost": "Varies (often ~$15–$20 on sale)",
            "length": "22+ hours video",
            "link": "https://www.udemy.com/course/complete-python-bootcamp/",
        },
    ],
    "opportunities": [
        {
            "name": "Major League Hacking Hackathons",
            "link": "https://mlh.io",
            "difficulty": "Beginner-friendly",
            "description": "Hands-on real project exposure.",
        },
        {
            "name": "Kaggle Competitions",
            "link": "https://www.kaggle.com/competitions",
            "difficulty": "Beginner to advanced",
            "description": "Data science and ML challenges with real datasets.",
        },
        {
            "name": "Google Summer of Code (open-source)",
            "link": "https://summerofcode.withgoogle.com/",
            "difficulty": "Intermediate",
            "description": "Paid open-source contributions with real-world mentorship.",
        },
        {
            "name": "Hack The Box (Cybersecurity Labs)",
            "link": "https://www.hackthebox.com/",
            "difficulty": "Intermediate",
            "description": "Hands-on penetration testing labs and challenges.",
        },
    ],
}


def catalog_slice(kind: str) -> List[Dict[str, str]]:
    if kind not in RECOMMENDATIONS:
        raise InvalidInputError(
            "type must be one of: " + ", ".join(sorted(RECOMMENDATIONS)),
            detail=f"Unknown recommendation type: {kind!r}",
        )
    return copy.deepcopy(RECOMMENDATIONS[kind])


def static_learning_catalog() -> LearningResult:
    courses = [
        Course(
            title=c["name"],
            provider=c["provider"],
            link=c["link"],
            cost=c.get("cost"),
            duration=c.get("length"),
        )
        for c in RECOMMENDATIONS["certifications"]
    ]
    opportunities = [Opportunity(**o) for o in RECOMMENDATIONS["opportunities"]]
    return LearningResult(
        courses=courses,
        opportunities=opportunities,
        sources=[],
        fallback=True,
        message=FALLBACK_MESSAGE,
    )
