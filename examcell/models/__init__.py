"""
SQLAlchemy ORM Models for the Exam Cell

Usage:
    from examcell.models import db, User, Department, CourseOffering, QuestionBank

    # Initialize with Flask app
    db.init_app(app)
"""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Import all models to make them available from the package
from .user import User, UserRole
from .department import Department, DepartmentReviewer
from .program import Program
from .regulation import Regulation, SectionRules
from .course import Course, CourseOffering, Module
from .question import QuestionBank, Question, Subquestion, ReviewStatus

__all__ = [
    'db',
    # User
    'User', 'UserRole',
    # Department
    'Department', 'DepartmentReviewer',
    # Program
    'Program',
    # Regulation
    'Regulation', 'SectionRules',
    # Course
    'Course', 'CourseOffering', 'Module',
    # Question bank
    'QuestionBank', 'Question', 'Subquestion', 'ReviewStatus',
]
