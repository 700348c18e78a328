"""
Default role recommendations.

Served whenever a fresh set cannot be generated: no profile, no discovery
data, model timeout or error, or an unparseable reply. The set is identical
for every user and every failure type and is never persisted.
"""

from typing import List

from career_backend.schemas.recommendations import RoleRecommendation

DEFAULT_RECOMMENDATIONS = (
    {
        "role_title": "Software Developer",
        "description": "Software developers create applications and systems that run on computers and other devices. They design, code, test, and maintain software solutions for various problems and needs.",
        "why_it_fits_professionally": "Your technical skills and problem-solving abilities would make you a strong candidate for software development roles. Your experience with analytical thinking aligns well with the core competencies needed.",
        "why_it_fits_personally": "Your interest in creating solutions and solving complex problems makes software development a fulfilling career path that matches your personal interests.",
    },
    {
        "role_title": "Data Analyst",
        "description": "Data analysts examine datasets to identify trends and draw conclusions. They present findings to help organizations make better business decisions.",
        "why_it_fits_professionally": "Your analytical thinking skills and attention to detail would serve you well as a data analyst. This role leverages your abilities to find patterns and insights in complex information.",
        "why_it_fits_personally": "Your curiosity and interest in uncovering insights from information makes data analysis a personally satisfying career that aligns with your values.",
    },
    {
        "role_title": "Product Manager",
        "description": "Product managers oversee the development of products from conception to launch. They define product strategy, gather requirements, and coordinate with different teams to ensure successful delivery.",
        "why_it_fits_professionally": "Your combination of technical understanding and strategic planning abilities makes product management a good professional fit. This role utilizes both your analytical and communication skills.",
        "why_it_fits_personally": "Your interest in both the business and technical aspects of products, along with your desire to create meaningful solutions, aligns well with product management.",
    },
)


def get_default_recommendations() -> List[RoleRecommendation]:
    """Return a fresh copy of the default set (callers may mutate it)."""
    return [RoleRecommendation(**item) for item in DEFAULT_RECOMMENDATIONS]
