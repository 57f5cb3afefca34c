"""
Default values for resumekit drafts.

Provides shared defaults used by:
- hydrator.py (fallback document, blank list elements)
- session.py (new entries/projects, sample data, skill suggestions)
- store.py (storage keys, template and accent color options)
"""

from typing import Dict, List

from resumekit.contexts.drafting.resume_data_structure import (
    Entry,
    Links,
    PersonalInfo,
    Project,
    ResumeDocument,
    SkillGroups,
)

# Keys in the editor's key-value store
STORAGE_KEY = "resumeBuilderData"
TEMPLATE_STORAGE_KEY = "resumeBuilderTemplate"
ACCENT_COLOR_STORAGE_KEY = "resumeBuilderAccentColor"

TEMPLATE_OPTIONS = ["Classic", "Modern", "Minimal"]
DEFAULT_TEMPLATE = "Classic"

# Accent colors offered by the preview (name -> CSS color token)
ACCENT_OPTIONS: Dict[str, str] = {
    "Teal": "hsl(168, 60%, 40%)",
    "Navy": "hsl(220, 60%, 35%)",
    "Burgundy": "hsl(345, 60%, 35%)",
    "Forest": "hsl(150, 50%, 30%)",
    "Charcoal": "hsl(0, 0%, 25%)",
}
DEFAULT_ACCENT_COLOR = ACCENT_OPTIONS["Teal"]

PROJECT_DESCRIPTION_MAX_LENGTH = 200

# Skills merged in by "Suggest Skills"
SUGGESTED_SKILLS: Dict[str, List[str]] = {
    "technical": ["TypeScript", "React", "Node.js", "PostgreSQL", "GraphQL"],
    "soft": ["Team Leadership", "Problem Solving"],
    "tools": ["Git", "Docker", "AWS"],
}


def create_blank_entry() -> Entry:
    return Entry()


def create_blank_project() -> Project:
    return Project()


def create_default_document() -> ResumeDocument:
    """Empty draft: blank fields, one blank entry per list, one blank project."""
    return ResumeDocument(
        education=[create_blank_entry()],
        experience=[create_blank_entry()],
        projects=[create_blank_project()],
    )


def create_sample_document() -> ResumeDocument:
    """Filled-in draft loaded by "Load Sample Data"."""
    return ResumeDocument(
        personal=PersonalInfo(
            name="Alex Carter",
            email="alex.carter@email.com",
            phone="+1 (555) 231-0098",
            location="San Francisco, CA",
        ),
        summary=(
            "Frontend engineer building premium and accessible product interfaces. "
            "Increased form completion by 32% and reduced bounce rate by 18% through content "
            "hierarchy, design tokens, and performance-driven React architecture across "
            "multiple product surfaces."
        ),
        education=[
            Entry(
                title="B.Tech in Computer Science",
                subtitle="KodNest Institute",
                date_range="2019 - 2023",
                details="Focused on software engineering, systems design, and frontend architecture.",
            )
        ],
        experience=[
            Entry(
                title="Frontend Developer",
                subtitle="Nova Labs",
                date_range="2023 - Present",
                details="Shipped 14 production features and improved Lighthouse performance from 72 to 94.",
            )
        ],
        projects=[
            Project(
                title="AI Resume Builder",
                description="Built guided resume authoring flow used by 1.2k+ learners.",
                tech_stack=["React", "Vite"],
                live_url="https://example.com/resume-builder",
                github_url="https://github.com/alexcarter/resume-builder",
            ),
            Project(
                title="Portfolio CMS",
                description="Reduced content publishing time by 45% with reusable templates.",
                tech_stack=["Node.js", "React"],
                github_url="https://github.com/alexcarter/portfolio-cms",
            ),
        ],
        skills=SkillGroups(
            technical=["React", "JavaScript", "TypeScript", "GraphQL", "PostgreSQL"],
            soft=["Problem Solving", "Team Leadership"],
            tools=["Git", "Docker", "AWS"],
        ),
        links=Links(github="github.com/alexcarter", linkedin="linkedin.com/in/alexcarter"),
    )
