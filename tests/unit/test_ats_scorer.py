"""Unit tests for the ATS readiness score."""

from dataclasses import replace

import pytest

from resumekit.contexts.drafting.defaults import create_default_document, create_sample_document
from resumekit.contexts.drafting.resume_data_structure import Entry, Links, PersonalInfo, Project, SkillGroups
from resumekit.contexts.scoring.ats_scorer import calculate_ats_score, get_band
from resumekit.contexts.scoring.rules import InvalidRulesError, load_ats_rules

ALL_SUGGESTIONS = [
    "Add your name (+10 points).",
    "Add your email (+10 points).",
    "Add a professional summary (+10 points).",
    "Add experience with bullet points (+15 points).",
    "Add at least one education entry (+10 points).",
    "Add at least 5 skills (+10 points).",
    "Add at least one project (+10 points).",
    "Add your phone number (+5 points).",
    "Add your LinkedIn URL (+5 points).",
    "Add your GitHub URL (+5 points).",
    "Use action verbs in summary (+10 points).",
]


@pytest.mark.unit
def test_empty_document_scores_zero():
    result = calculate_ats_score(create_default_document())
    assert result.score == 0
    assert result.label == "Needs Work"
    assert result.band == "needs-work"
    assert result.suggestions == ALL_SUGGESTIONS


@pytest.mark.unit
def test_complete_document_scores_100(complete_document):
    result = calculate_ats_score(complete_document)
    assert result.score == 100
    assert result.label == "Strong Resume"
    assert result.band == "strong"
    assert result.suggestions == []


@pytest.mark.unit
def test_sample_document_only_misses_summary_action_verb():
    result = calculate_ats_score(create_sample_document())
    assert result.score == 90
    assert result.suggestions == ["Use action verbs in summary (+10 points)."]


@pytest.mark.unit
def test_rule_points_sum_to_100():
    assert sum(check["points"] for check in load_ats_rules()["checks"]) == 100


@pytest.mark.unit
@pytest.mark.parametrize(
    "score, band, label",
    [
        (0, "needs-work", "Needs Work"),
        (40, "needs-work", "Needs Work"),
        (41, "getting-there", "Getting There"),
        (70, "getting-there", "Getting There"),
        (71, "strong", "Strong Resume"),
        (100, "strong", "Strong Resume"),
    ],
)
def test_band_boundaries(score, band, label):
    assert get_band(score) == {"band": band, "label": label}


@pytest.mark.unit
def test_name_and_email_only():
    document = replace(create_default_document(), personal=PersonalInfo(name="Alex", email="a@b.c"))
    result = calculate_ats_score(document)
    assert result.score == 20
    assert result.suggestions == ALL_SUGGESTIONS[2:]
    assert result.top_improvements == ALL_SUGGESTIONS[2:5]


@pytest.mark.unit
def test_whitespace_only_fields_do_not_count():
    document = replace(
        create_default_document(),
        personal=PersonalInfo(name="   ", email="\t", phone=" "),
        links=Links(github=" ", linkedin="  "),
    )
    assert calculate_ats_score(document).score == 0


class TestSummaryChecks:
    """Test summary length and action-verb checks."""

    @pytest.mark.unit
    def test_summary_must_exceed_50_characters_after_trim(self):
        exactly_50 = replace(create_default_document(), summary="  " + "a" * 50 + "  ")
        assert "Add a professional summary (+10 points)." in calculate_ats_score(exactly_50).suggestions

        longer = replace(create_default_document(), summary="a" * 51)
        assert "Add a professional summary (+10 points)." not in calculate_ats_score(longer).suggestions

    @pytest.mark.unit
    def test_action_verb_is_case_insensitive_whole_word(self):
        with_verb = replace(create_default_document(), summary="Engineer who LED migrations")
        assert calculate_ats_score(with_verb).score == 10

    @pytest.mark.unit
    @pytest.mark.parametrize("summary", ["Rebuilt the platform", "Builder of tools", "Leader of teams"])
    def test_action_verb_inside_other_words_does_not_count(self, summary):
        document = replace(create_default_document(), summary=summary)
        assert calculate_ats_score(document).score == 0


class TestContentChecks:
    """Test experience, education, skills and project checks."""

    @pytest.mark.unit
    def test_experience_needs_a_detail_line(self):
        no_details = replace(create_default_document(), experience=[Entry(title="Engineer", subtitle="Acme")])
        assert "Add experience with bullet points (+15 points)." in calculate_ats_score(no_details).suggestions

        with_details = replace(create_default_document(), experience=[Entry(details="\n  Shipped it\n")])
        assert calculate_ats_score(with_details).score == 15

    @pytest.mark.unit
    def test_any_filled_education_entry_counts(self):
        document = replace(create_default_document(), education=[Entry(), Entry(subtitle="State U")])
        assert calculate_ats_score(document).score == 10

    @pytest.mark.unit
    def test_skills_are_counted_across_groups(self):
        four = SkillGroups(technical=["A", "B"], soft=["C"], tools=["D"])
        five = SkillGroups(technical=["A", "B"], soft=["C"], tools=["D", "E"])
        assert calculate_ats_score(replace(create_default_document(), skills=four)).score == 0
        assert calculate_ats_score(replace(create_default_document(), skills=five)).score == 10

    @pytest.mark.unit
    def test_project_with_only_tech_stack_counts(self):
        document = replace(create_default_document(), projects=[Project(tech_stack=["Go"])])
        assert calculate_ats_score(document).score == 10


class TestProperties:
    """Determinism, bounds and monotonicity."""

    @pytest.mark.unit
    def test_deterministic(self, complete_document):
        document = replace(complete_document, links=Links())
        assert calculate_ats_score(document) == calculate_ats_score(document)

    @pytest.mark.unit
    def test_score_is_bounded_integer(self, complete_document):
        for document in (create_default_document(), complete_document, create_sample_document()):
            result = calculate_ats_score(document)
            assert isinstance(result.score, int)
            assert 0 <= result.score <= 100

    @pytest.mark.unit
    def test_adding_content_never_lowers_the_score(self, complete_document):
        steps = [
            lambda d: replace(d, personal=replace(d.personal, phone="+1 555 0100")),
            lambda d: replace(d, personal=replace(d.personal, name="Alex")),
            lambda d: replace(d, summary="Built and led things " * 3),
            lambda d: replace(d, experience=[*d.experience, Entry(details="Built X")]),
            lambda d: replace(d, education=[Entry(title="BSc")]),
            lambda d: replace(d, skills=SkillGroups(technical=list("ABCDE"))),
            lambda d: replace(d, projects=[Project(title="CMS")]),
            lambda d: replace(d, links=Links(github="gh", linkedin="li")),
            lambda d: replace(d, personal=replace(d.personal, email="a@b.c")),
        ]
        document = create_default_document()
        previous = calculate_ats_score(document).score
        for step in steps:
            document = step(document)
            current = calculate_ats_score(document).score
            assert current >= previous
            previous = current
        assert previous == 100


@pytest.mark.unit
def test_unknown_check_in_rules_raises():
    rules = dict(load_ats_rules())
    rules["checks"] = [{"key": "photo", "points": 5, "suggestion": "Add a photo."}]
    with pytest.raises(InvalidRulesError):
        calculate_ats_score(create_default_document(), rules)


@pytest.mark.unit
def test_result_to_dict(complete_document):
    assert calculate_ats_score(complete_document).to_dict() == {
        "score": 100,
        "label": "Strong Resume",
        "band": "strong",
        "suggestions": [],
    }
