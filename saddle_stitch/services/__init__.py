"""
Service layer for the booklet maker.

Services wrap the pure imposition and layout code with the collaborators
it needs: image measurement, PDF rendering and settings persistence.
"""

from .booklet_service import BookletResult, BookletService
from .config_service import ConfigService
from .metrics_service import MetricsReport, MetricsService
from .render_service import DocumentRenderer

__all__ = ['BookletResult', 'BookletService', 'ConfigService', 'DocumentRenderer',
           'MetricsReport', 'MetricsService']
