"""
Resume analysis package (AI collaborator boundary).

- llm_service.py: ResumeAnalyzer (analyze / guide via Gemini)
- llm_parser.py: Code-fence stripping and JSON recovery
- validator.py: Tagged shape validation of the analysis payload
"""

from .llm_service import ResumeAnalyzer
from .llm_parser import parse_llm_json, strip_code_fences
from .validator import AnalysisInvalid, AnalysisValid, validate_analysis

__all__ = [
    'ResumeAnalyzer',
    'parse_llm_json',
    'strip_code_fences',
    'AnalysisInvalid',
    'AnalysisValid',
    'validate_analysis',
]
