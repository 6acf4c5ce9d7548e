"""
Strict shape validation of the AI's resume analysis.

The model answers with snake_case keys (see core/prompts.py). validate_analysis
checks field presence and container/element types explicitly and returns a
tagged result rather than raising, so callers decide how a bad reply surfaces.
"""
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from resume_interview.schemas.resume import ResumeAnalysis


@dataclass(frozen=True)
class AnalysisValid:
    analysis: ResumeAnalysis


@dataclass(frozen=True)
class AnalysisInvalid:
    field: str
    reason: str

    @property
    def message(self) -> str:
        return f"{self.field} {self.reason}"


AnalysisValidation = Union[AnalysisValid, AnalysisInvalid]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_string_list(payload: dict, field: str) -> Optional[AnalysisInvalid]:
    value = payload.get(field)
    if not isinstance(value, list):
        return AnalysisInvalid(field, "must be an array")
    for index, item in enumerate(value):
        if not isinstance(item, str):
            return AnalysisInvalid(f"{field}[{index}]", "must be a string")
    return None


def _check_object_list(
    payload: dict, field: str, required: Sequence[str], optional: Sequence[str] = ()
) -> Optional[AnalysisInvalid]:
    value = payload.get(field)
    if not isinstance(value, list):
        return AnalysisInvalid(field, "must be an array")
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            return AnalysisInvalid(f"{field}[{index}]", "must be an object")
        for key in required:
            if not isinstance(item.get(key), str):
                return AnalysisInvalid(f"{field}[{index}].{key}", "must be a string")
        for key in optional:
            if item.get(key) is not None and not isinstance(item[key], str):
                return AnalysisInvalid(f"{field}[{index}].{key}", "must be a string")
    return None


def validate_analysis(payload: Any) -> AnalysisValidation:
    """
    Validates a decoded AI reply against the analysis schema.

    Args:
        payload: The JSON value decoded from the model output.

    Returns:
        AnalysisValid carrying the typed analysis, or AnalysisInvalid naming
        the first offending field and why it was rejected.
    """
    if not isinstance(payload, dict):
        return AnalysisInvalid("analysis", "must be an object")

    error = _check_string_list(payload, "technical_skills")
    if error:
        return error

    if not _is_number(payload.get("years_experience")):
        return AnalysisInvalid("years_experience", "must be a number")

    for field, required, optional in (
        ("key_projects", ["name", "description"], []),
        ("technical_questions", ["question"], ["context"]),
        ("behavioral_questions", ["question"], ["context"]),
    ):
        error = _check_object_list(payload, field, required, optional)
        if error:
            return error

    analysis = ResumeAnalysis(
        technical_skills=payload["technical_skills"],
        years_experience=payload["years_experience"],
        key_projects=payload["key_projects"],
        technical_questions=payload["technical_questions"],
        behavioral_questions=payload["behavioral_questions"],
    )
    return AnalysisValid(analysis)
