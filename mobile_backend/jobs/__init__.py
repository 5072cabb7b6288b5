"""
Mobile backend jobs.

- analysis_memo: Plain-text report rendered from an AnalysisResult
"""

from mobile_backend.jobs.analysis_memo import generate_memo_content

__all__ = [
    'generate_memo_content',
]
