"""
Exam cell persistence layer: schema models and CRUD access for a university
exam-paper management system.
"""

from .app import create_app

__all__ = ['create_app']
