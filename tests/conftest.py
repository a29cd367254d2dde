import pytest

from examcell import create_app
from examcell import store
from examcell.config import TestingConfig
from examcell.models import (
    db, User, UserRole, Department, Program, Course, Regulation, CourseOffering, QuestionBank,
)


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def faculty(app):
    user = store.create(User, username='asha', name='Asha Menon', role=UserRole.FACULTY)
    user.set_password('secret')
    store.save(user)
    return user


@pytest.fixture
def reviewer(app):
    return store.create(User, username='ravi', name='Ravi Kumar', role=UserRole.EXAM_CELL)


@pytest.fixture
def department(app):
    return store.create(Department, id=1, department_name='Computer Science', abbreviation='CSE')


@pytest.fixture
def course(app):
    return store.create(Course, course_code='CS301', course_title='Operating Systems', credits=4.0)


@pytest.fixture
def regulation(app):
    return store.create(Regulation, regulation='R2021', section_count=2)


@pytest.fixture
def program(app, faculty):
    return store.create(
        Program,
        program_name='B.Tech CSE',
        year_of_study=3,
        department='CSE',
        academic_year='2024-25',
        semester=5,
        chief_faculty=faculty,
    )


@pytest.fixture
def offering(app, department, course, program, regulation, faculty):
    offering = CourseOffering.create_with_modules(
        academic_year='2024-25',
        semester='5',
        year_of_study='3',
        department=department,
        course=course,
        program=program,
        regulation=regulation,
        submitter=faculty,
        instructors=[faculty],
        module_infos=[
            {'module_no': 1, 'module_name': 'Processes'},
            {'module_no': 2, 'module_name': 'Memory'},
        ],
    )
    return store.save(offering)


@pytest.fixture
def bank(app, offering):
    return store.create(QuestionBank, course_offering=offering)
