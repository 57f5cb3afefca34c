"""Unit tests for draft hydration and serialization."""

import json

import pytest

from resumekit.contexts.drafting.defaults import create_default_document, create_sample_document
from resumekit.contexts.drafting.hydrator import hydrate, serialize
from resumekit.contexts.drafting.resume_data_structure import Entry, Project, SkillGroups

MALFORMED_PAYLOADS = [
    "{",
    "not json",
    "{'single': 'quotes'}",
    "[1, 2, 3]",
    '"just a string"',
    "42",
    "null",
    "true",
    "[" * 100000,
]


@pytest.mark.unit
@pytest.mark.parametrize("raw_value", [None, ""])
def test_absent_payload_gives_default_document(raw_value):
    document = hydrate(raw_value)
    assert document == create_default_document()
    assert document.education == [Entry()]
    assert document.experience == [Entry()]
    assert document.projects == [Project()]
    assert document.skills == SkillGroups()


@pytest.mark.unit
@pytest.mark.parametrize("raw_value", MALFORMED_PAYLOADS)
def test_malformed_payload_gives_default_document(raw_value):
    assert hydrate(raw_value) == hydrate(None)


@pytest.mark.unit
def test_default_documents_do_not_share_lists():
    first = hydrate(None)
    first.education.append(Entry(title="Added"))
    assert len(hydrate(None).education) == 1


@pytest.mark.unit
def test_personal_and_links_are_merged_onto_defaults():
    document = hydrate(json.dumps({"personal": {"name": "Alex"}, "links": {"github": "gh/alex"}}))
    assert document.personal.name == "Alex"
    assert document.personal.email == ""
    assert document.personal.location == ""
    assert document.links.github == "gh/alex"
    assert document.links.linkedin == ""


@pytest.mark.unit
def test_wrong_types_fall_back_per_field():
    payload = {
        "personal": {"name": 42, "email": "a@b.c"},
        "summary": ["not", "text"],
        "education": "oops",
        "experience": [],
        "projects": {"title": "not a list"},
        "skills": 17,
        "links": "github.com/x",
    }
    document = hydrate(json.dumps(payload))
    assert document.personal.name == ""
    assert document.personal.email == "a@b.c"
    assert document.summary == ""
    assert document.education == [Entry()]
    assert document.experience == [Entry()]
    assert document.projects == [Project()]
    assert document.skills == SkillGroups()
    assert document.links.github == ""


@pytest.mark.unit
def test_entries_are_kept_in_order():
    payload = {
        "experience": [
            {"title": "Engineer", "subtitle": "Acme", "dateRange": "2020 - 2022", "details": "Built X"},
            {"title": "Intern"},
        ]
    }
    document = hydrate(json.dumps(payload))
    assert document.experience == [
        Entry("Engineer", "Acme", "2020 - 2022", "Built X"),
        Entry(title="Intern"),
    ]


@pytest.mark.unit
def test_non_object_list_items_become_blank_elements():
    document = hydrate(json.dumps({"education": ["BSc", None], "projects": [7]}))
    assert document.education == [Entry(), Entry()]
    assert document.projects == [Project()]


@pytest.mark.unit
def test_legacy_project_shape_is_upgraded():
    payload = {"projects": [{"title": "CMS", "subtitle": "React, Node", "details": "Reduced time by 45%"}]}
    project = hydrate(json.dumps(payload)).projects[0]
    assert project == Project(
        title="CMS",
        description="Reduced time by 45%",
        tech_stack=["React", "Node"],
        live_url="",
        github_url="",
    )


@pytest.mark.unit
def test_current_project_fields_win_over_legacy_ones():
    payload = {
        "projects": [
            {
                "title": "CMS",
                "description": "New text",
                "details": "Old text",
                "techStack": ["Go"],
                "subtitle": "React",
                "liveUrl": "https://cms.example.com",
                "githubUrl": "https://github.com/x/cms",
            }
        ]
    }
    project = hydrate(json.dumps(payload)).projects[0]
    assert project.description == "New text"
    assert project.tech_stack == ["Go"]
    assert project.live_url == "https://cms.example.com"
    assert project.github_url == "https://github.com/x/cms"


@pytest.mark.unit
def test_explicit_empty_tech_stack_is_not_replaced_by_subtitle():
    payload = {"projects": [{"title": "CMS", "techStack": [], "subtitle": "React"}]}
    assert hydrate(json.dumps(payload)).projects[0].tech_stack == []


@pytest.mark.unit
def test_tech_stack_string_is_normalized():
    payload = {"projects": [{"techStack": "React, , Vite "}]}
    assert hydrate(json.dumps(payload)).projects[0].tech_stack == ["React", "Vite"]


@pytest.mark.unit
def test_legacy_skills_string_becomes_technical_group():
    document = hydrate(json.dumps({"skills": "React, Node"}))
    assert document.skills == SkillGroups(technical=["React", "Node"], soft=[], tools=[])


@pytest.mark.unit
def test_unknown_keys_are_dropped():
    payload = {"personal": {"name": "Alex", "age": 30}, "theme": "dark"}
    document = hydrate(json.dumps(payload))
    assert "age" not in document.to_dict()["personal"]
    assert "theme" not in document.to_dict()


@pytest.mark.unit
def test_serialize_uses_persisted_key_names():
    data = json.loads(serialize(create_sample_document()))
    assert set(data) == {"personal", "summary", "education", "experience", "projects", "skills", "links"}
    assert set(data["education"][0]) == {"title", "subtitle", "dateRange", "details"}
    assert set(data["projects"][0]) == {"title", "description", "techStack", "liveUrl", "githubUrl"}
    assert set(data["skills"]) == {"technical", "soft", "tools"}


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw_value",
    [
        None,
        "{",
        json.dumps({"skills": "React, , Node", "projects": [{"subtitle": "Go, Rust", "details": "Old"}]}),
        json.dumps({"personal": {"name": " Alex "}, "education": [{"title": "BSc", "extra": True}]}),
        serialize(create_sample_document()),
    ],
)
def test_hydration_is_idempotent(raw_value):
    once = hydrate(raw_value)
    assert hydrate(serialize(once)) == once


@pytest.mark.unit
def test_sample_document_round_trips():
    sample = create_sample_document()
    assert hydrate(serialize(sample)) == sample
