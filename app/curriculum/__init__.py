"""
Curriculum module for catalog browsing and grade derivation.
"""

from .routes import create_curriculum_routes
from .factory import create_curriculum_module

__all__ = ['create_curriculum_routes', 'create_curriculum_module']
