"""
Mobile Backend Analytics Test Suite

Test Modules:
-------------
- test_statistics.py: Summary statistics and coefficient of variation
- test_insights.py: Category insights and recommendation thresholds
- test_synthetic.py: Synthetic record generation
- test_schemas.py: DataRecord, AnalysisResult and ExportSnapshot validation
- test_analyzer.py: DataAnalyzer lifecycle, async dispatch and export
- test_memo.py: Plain-text analysis memo
- test_config.py: Settings loading from the environment
- test_main.py: Command entry point

Running Tests:
--------------
    pip install -e ".[test]"
    pytest mobile_backend/tests/ -v

Configuration:
--------------
See conftest.py for shared fixtures.
"""

__all__ = []
