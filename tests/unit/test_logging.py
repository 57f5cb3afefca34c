"""Unit tests for context logger setup and prefixed log records."""

import pytest
from loguru import logger

from resumekit.contexts.drafting.hydrator import hydrate
from resumekit.contexts.drafting.logger import setup_drafting_logger
from resumekit.contexts.drafting.resume_data_structure import ResumeDocument
from resumekit.contexts.exporting.plaintext import build_plaintext_resume, export_warning, render
from resumekit.contexts.scoring.ats_scorer import calculate_ats_score, score


@pytest.fixture
def captured():
    messages = []
    sink_id = logger.add(messages.append, format="{level} {message}", level="DEBUG")
    yield messages
    logger.remove(sink_id)


@pytest.mark.unit
def test_setup_drafting_logger_writes_provenance(tmp_path):
    store_path = tmp_path / "resume_store.json"
    log_file = setup_drafting_logger(tmp_path / "logs", store_path=store_path)
    logger.complete()
    try:
        assert log_file == tmp_path / "logs" / "draft.log"
        content = log_file.read_text(encoding="utf-8")
        assert f"Store: {store_path}" in content
        assert "Working directory:" in content
        assert "ATS rules:" in content
    finally:
        logger.remove()


@pytest.mark.unit
def test_hydration_fallback_is_logged_with_draft_prefix(captured):
    hydrate("{not json")
    assert any(message.startswith("WARNING [draft] Stored draft unusable") for message in captured)


@pytest.mark.unit
def test_export_warning_is_logged_with_export_prefix(captured):
    export_warning(ResumeDocument())
    assert any("[export]" in message and "incomplete" in message for message in captured)


@pytest.mark.unit
def test_scoring_logs_with_score_prefix(captured):
    calculate_ats_score(ResumeDocument())
    assert any("[score]" in message for message in captured)


@pytest.mark.unit
def test_short_aliases():
    assert render is build_plaintext_resume
    assert score is calculate_ats_score
