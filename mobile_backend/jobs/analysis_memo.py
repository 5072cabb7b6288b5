"""
Plain-text analysis memo for the mobile backend analytics component.

Renders an AnalysisResult as a fixed-layout text report with a summary
section, category insights, recommendations and a footer.

Usage:
    from mobile_backend.jobs.analysis_memo import generate_memo_content

    result = await analyzer.process_data()
    print(generate_memo_content(result))
"""

from datetime import datetime
from typing import List, Optional

from mobile_backend.models import AnalysisResult, SummaryStatistic


# =============================================================================
# Constants
# =============================================================================

MEMO_TITLE = "Mobile Backend Analysis Report"

# Width of the "=" separator lines
MEMO_WIDTH = 70


def generate_memo_content(
    result: AnalysisResult,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Generate the memo text for one analysis.

    Args:
        result: Analysis to render
        generated_at: Timestamp printed in the footer; defaults to now

    Returns:
        str: Formatted memo text

    Example:
        >>> content = generate_memo_content(result)
        >>> print(content.splitlines()[1])
        Mobile Backend Analysis Report
    """
    if generated_at is None:
        generated_at = datetime.now()

    summary = result.summary
    lines: List[str] = []

    # Header
    lines.append("=" * MEMO_WIDTH)
    lines.append(MEMO_TITLE)
    lines.append("=" * MEMO_WIDTH)
    lines.append("")

    # Summary
    total = int(summary.get(SummaryStatistic.TOTAL_RECORDS.value, 0))
    lines.append("SUMMARY")
    lines.append("-" * 40)
    lines.append(f"Total Records: {total:,}")
    if total > 0:
        lines.append(f"Average Value: {summary[SummaryStatistic.AVERAGE_VALUE.value]:,.2f}")
        lines.append(f"Max Value:     {summary[SummaryStatistic.MAX_VALUE.value]:,.2f}")
        lines.append(f"Min Value:     {summary[SummaryStatistic.MIN_VALUE.value]:,.2f}")
    else:
        lines.append("No data available.")
    lines.append("")

    # Insights
    lines.append("=" * MEMO_WIDTH)
    lines.append("INSIGHTS")
    lines.append("-" * 40)
    if result.insights:
        for insight in result.insights:
            lines.append(f"  • {insight}")
    else:
        lines.append("No category insights available.")
    lines.append("")

    # Recommendations
    lines.append("=" * MEMO_WIDTH)
    lines.append("RECOMMENDATIONS")
    lines.append("-" * 40)
    if result.recommendations:
        for i, recommendation in enumerate(result.recommendations, 1):
            lines.append(f"{i:>2}. {recommendation}")
    else:
        lines.append("No recommendations at this time.")
    lines.append("")

    # Footer
    lines.append("=" * MEMO_WIDTH)
    lines.append(f"Processing Time: {result.processingTimeMs:.2f} ms")
    lines.append(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("=" * MEMO_WIDTH)

    return "\n".join(lines)
