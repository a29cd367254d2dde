import io

import pytest

from examcell import store
from examcell.errors import ConstraintViolation, ImportFormatError
from examcell.importer import import_questions
from examcell.models import Course, Question, Subquestion

QUESTIONS_CSV = """module_no,question_no,course_outcome,marks,content,blooms_level
1,1,1,2,Define a process.,1
1,2,1,4,Differentiate a process from a thread.,2
1,2,1,6,Explain the process control block.,2
2,1,3,10,Explain demand paging with an example.,3
"""


def test_import_groups_subquestions(bank, offering):
    counts = import_questions(bank, io.StringIO(QUESTIONS_CSV))

    assert counts == {'questions': 3, 'subquestions': 4}
    questions = bank.questions.order_by(Question.id).all()
    assert [q.marks for q in questions] == [2, 10, 10]
    assert [q.module.module_no for q in questions] == [1, 1, 2]
    assert questions[1].subquestions.count() == 2
    assert questions[1].total_marks() == 10
    assert questions[2].course_outcome == 3
    assert all(q.course_code == 'CS301' for q in questions)


def test_import_uses_course_code_column(bank, course):
    csv = ("module_no,question_no,course_outcome,marks,content,blooms_level,course_code\n"
           "1,1,2,5,State Belady's anomaly.,1,CS301\n")
    import_questions(bank, io.StringIO(csv))
    assert course.questions.count() == 1


def test_import_rejects_missing_columns(bank):
    csv = "module_no,question_no,marks,content\n1,1,2,Define a process.\n"
    with pytest.raises(ImportFormatError) as excinfo:
        import_questions(bank, io.StringIO(csv))
    assert 'course_outcome' in str(excinfo.value)
    assert 'blooms_level' in str(excinfo.value)


def test_import_rejects_unknown_module(bank):
    csv = QUESTIONS_CSV + "7,1,4,5,Describe RAID levels.,2\n"
    with pytest.raises(ImportFormatError) as excinfo:
        import_questions(bank, io.StringIO(csv))
    assert '[7]' in str(excinfo.value)
    assert store.list_all(Question) == []


def test_import_is_all_or_nothing(bank):
    csv = ("module_no,question_no,course_outcome,marks,content,blooms_level,course_code\n"
           "1,1,2,5,State Belady's anomaly.,1,CS301\n"
           "1,2,2,5,Explain thrashing.,2,NOPE\n")
    with pytest.raises(ConstraintViolation):
        import_questions(bank, io.StringIO(csv))
    assert store.list_all(Question) == []
    assert store.list_all(Subquestion) == []


def test_import_skips_blank_rows(bank):
    csv = QUESTIONS_CSV + ",,,,,\n"
    counts = import_questions(bank, io.StringIO(csv))
    assert counts['questions'] == 3


def test_import_rejects_non_numeric_values(bank):
    csv = ("module_no,question_no,course_outcome,marks,content,blooms_level\n"
           "1,1,1,2,Define a process.,1\n"
           "1,2,CO1,2,Define a thread.,L1\n")
    with pytest.raises(ImportFormatError) as excinfo:
        import_questions(bank, io.StringIO(csv))
    message = str(excinfo.value)
    assert 'course_outcome (rows [2])' in message
    assert 'blooms_level (rows [2])' in message
    assert 'marks' not in message
    assert store.list_all(Question) == []


def test_import_rejects_blank_marks(bank):
    csv = ("module_no,question_no,course_outcome,marks,content,blooms_level\n"
           "1,1,1,,Define a process.,1\n"
           "1,2,1,4,Define a thread.,\n")
    with pytest.raises(ImportFormatError) as excinfo:
        import_questions(bank, io.StringIO(csv))
    assert 'marks (rows [1])' in str(excinfo.value)
    assert 'blooms_level (rows [2])' in str(excinfo.value)
    assert store.list_all(Subquestion) == []


def test_import_keeps_numeric_course_code_as_text(bank):
    store.create(Course, course_code='101', course_title='Engineering Mathematics', credits=3)
    csv = ("module_no,question_no,course_outcome,marks,content,blooms_level,course_code\n"
           "1,1,2,5,State Rolle's theorem.,1,101\n")
    import_questions(bank, io.StringIO(csv))
    question = store.list_all(Question)[0]
    assert question.course_code == '101'
    assert store.get(Course, '101').questions.count() == 1
