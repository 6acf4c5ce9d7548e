"""
Tests for the AI collaborator boundary: reply parsing, shape validation and the Gemini-backed analyzer.
"""
import copy
import json

import pytest

from conftest import MODEL_ANALYSIS_REPLY, fenced
from resume_interview.core.exceptions import InvalidAnalysisFormatError, NetworkFailureError
from resume_interview.services.analysis import (
    AnalysisInvalid, AnalysisValid, parse_llm_json, strip_code_fences, validate_analysis
)


# --- Reply parsing ---

@pytest.mark.parametrize("raw", [
    '```json\n{"a": 1}\n```',
    '```\n{"a": 1}\n```',
    '  {"a": 1}  ',
    'Here is the analysis:\n{"a": 1}\nGood luck!',
])
def test_parse_llm_json_recovers_the_object(raw):
    assert parse_llm_json(raw) == {"a": 1}


def test_strip_code_fences_leaves_plain_json_alone():
    assert strip_code_fences('{"a": "```"}') == '{"a": "```"}'


@pytest.mark.parametrize("raw", ["", "   ", "not json at all", "```json\n{broken\n```"])
def test_parse_llm_json_rejects_garbage(raw):
    with pytest.raises(InvalidAnalysisFormatError):
        parse_llm_json(raw)


# --- Shape validation ---

def test_valid_payload_returns_typed_analysis():
    result = validate_analysis(MODEL_ANALYSIS_REPLY)
    assert isinstance(result, AnalysisValid)
    analysis = result.analysis
    assert analysis.technical_skills[0] == "Python"
    assert analysis.years_experience == 5
    assert analysis.key_projects[1].name == "Metrics Pipeline"
    assert [q.question for q in analysis.behavioral_questions][0] == "Tell me about a time you led a team."


def test_missing_context_is_allowed():
    payload = copy.deepcopy(MODEL_ANALYSIS_REPLY)
    del payload["technical_questions"][0]["context"]
    result = validate_analysis(payload)
    assert isinstance(result, AnalysisValid)
    assert result.analysis.technical_questions[0].context is None


def _broken(mutate):
    payload = copy.deepcopy(MODEL_ANALYSIS_REPLY)
    mutate(payload)
    return payload


@pytest.mark.parametrize("payload, field", [
    (["not", "an", "object"], "analysis"),
    (_broken(lambda p: p.pop("technical_skills")), "technical_skills"),
    (_broken(lambda p: p.update(technical_skills="Python, Go")), "technical_skills"),
    (_broken(lambda p: p["technical_skills"].append(3)), "technical_skills[5]"),
    (_broken(lambda p: p.update(years_experience="5")), "years_experience"),
    (_broken(lambda p: p.update(years_experience=True)), "years_experience"),
    (_broken(lambda p: p.update(key_projects={"name": "x"})), "key_projects"),
    (_broken(lambda p: p["key_projects"][0].pop("name")), "key_projects[0].name"),
    (_broken(lambda p: p["technical_questions"].append("Why?")), "technical_questions[3]"),
    (_broken(lambda p: p["behavioral_questions"][2].update(context=7)), "behavioral_questions[2].context"),
])
def test_malformed_payload_names_the_field(payload, field):
    result = validate_analysis(payload)
    assert isinstance(result, AnalysisInvalid)
    assert result.field == field
    assert result.message.startswith(field)


def test_fractional_years_are_accepted():
    result = validate_analysis(_broken(lambda p: p.update(years_experience=2.5)))
    assert isinstance(result, AnalysisValid)
    assert result.analysis.years_experience == 2.5


# --- ResumeAnalyzer ---

async def test_analyze_sends_resume_and_parses_fenced_reply(make_analyzer, settings):
    analyzer = make_analyzer(fenced(MODEL_ANALYSIS_REPLY))
    analysis = await analyzer.analyze("Jane Doe. Worked with React. Built APIs.")

    assert len(analysis.technical_skills) == 5
    assert len(analysis.technical_questions) == 3
    call = analyzer.client.models.calls[0]
    assert call["model"] == settings.GEMINI_MODEL
    assert "Worked with React. Built APIs." in call["contents"]
    assert "exactly 5" in call["contents"]


async def test_analyze_rejects_wrong_shape(make_analyzer):
    analyzer = make_analyzer(json.dumps({**MODEL_ANALYSIS_REPLY, "key_projects": "none"}))
    with pytest.raises(InvalidAnalysisFormatError) as exc_info:
        await analyzer.analyze("resume")
    assert exc_info.value.details == {"field": "key_projects", "reason": "must be an array"}


async def test_provider_errors_become_network_failures(make_analyzer):
    analyzer = make_analyzer(RuntimeError("503 Service Unavailable"))
    with pytest.raises(NetworkFailureError):
        await analyzer.analyze("resume")


async def test_guide_returns_trimmed_text(make_analyzer):
    analyzer = make_analyzer("\n## Key points\nTalk about pagination.\n")
    guidance = await analyzer.guide("How do you paginate?", "Question Context: APIs\nUser's Answer: offsets")
    assert guidance == "## Key points\nTalk about pagination."
    prompt = analyzer.client.models.calls[0]["contents"]
    assert "Question: How do you paginate?" in prompt
    assert "User's Answer: offsets" in prompt


async def test_guide_rejects_empty_reply(make_analyzer):
    analyzer = make_analyzer("   ")
    with pytest.raises(InvalidAnalysisFormatError):
        await analyzer.guide("Q", "C")
