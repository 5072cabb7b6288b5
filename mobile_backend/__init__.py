"""
Mobile Backend Analytics Package.

In-memory analysis component for the mobile backend: synthetic record
generation, summary statistics, category insights, heuristic recommendations
and export snapshots.

Subpackages:
    - core: Configuration
    - models: Pydantic schemas and enums
    - services: Statistics, insights and the DataAnalyzer
    - jobs: Plain-text analysis memo
"""

__version__ = "1.0.0"
