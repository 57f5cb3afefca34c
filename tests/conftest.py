"""Shared fixtures for resumekit tests."""

import pytest

from resumekit.contexts.drafting.resume_data_structure import (
    Entry,
    Links,
    PersonalInfo,
    Project,
    ResumeDocument,
    SkillGroups,
)
from resumekit.contexts.drafting.store import InMemoryStore

FULL_SUMMARY = "Built accessible React apps for 3 fintech teams over 4 years."


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def complete_document():
    """Document that satisfies every ATS check."""
    return ResumeDocument(
        personal=PersonalInfo(
            name="Alex Carter",
            email="alex@example.com",
            phone="+1 555 0100",
            location="Austin, TX",
        ),
        summary=FULL_SUMMARY,
        education=[Entry("BSc Computer Science", "State University", "2016 - 2020", "Graduated with honors")],
        experience=[Entry("Frontend Developer", "Nova Labs", "2020 - Present", "Built checkout flow used by 10k users")],
        projects=[Project(title="Portfolio CMS", description="Reduced publishing time by 45%", tech_stack=["React"])],
        skills=SkillGroups(technical=["React", "TypeScript", "GraphQL"], soft=["Mentoring"], tools=["Git"]),
        links=Links(github="github.com/alex", linkedin="linkedin.com/in/alex"),
    )
