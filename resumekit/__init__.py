"""
resumekit - drafting core for a form-driven resume builder

Turns the raw draft persisted by the editor into a canonical resume document,
scores it for ATS readiness and renders it as plain text.

Architecture:
- Drafting Context: Resume data model, hydration of stored drafts, editing session
- Scoring Context: ATS readiness score, suggestions and per-line authoring guidance
- Exporting Context: Plain-text resume and the incomplete-resume export gate
"""

__version__ = "0.1.0"
