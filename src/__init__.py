"""
Chart Pipeline - declarative chart data transformation.

Architecture:
    src/
    └── chart_pipeline/
        ├── core/            # Settings
        ├── models/          # Input schemas and output props
        ├── views/           # Active view resolution
        ├── transformers/    # Derived metrics
        ├── mappers/         # One mapper per chart family + router
        ├── utils/           # Colors, formatting, defaults, logging
        └── chart_dispatcher.py  # Pipeline entry point
"""

__version__ = "1.0.0"
