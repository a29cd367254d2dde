"""
Bulk import of questions into a question bank from CSV.

One row per subquestion. Rows sharing ``module_no`` and ``question_no`` become
one Question whose marks are the sum of its subquestion marks.
"""

import pandas as pd
from flask import current_app

from . import store
from .errors import ImportFormatError
from .models import db, Question, Subquestion

REQUIRED_COLUMNS = ['module_no', 'question_no', 'course_outcome', 'marks', 'content', 'blooms_level']
INTEGER_COLUMNS = ['module_no', 'question_no', 'course_outcome', 'marks', 'blooms_level']


def _row_numbers(df, mask):
    """1-based data row numbers where ``mask`` is true."""
    return [int(i) + 1 for i in df.index[mask.to_numpy()]]


def read_question_rows(source):
    """
    Load and validate the CSV at ``source`` (path or file-like).

    Every cell is read as text so codes like ``101`` stay strings. Rows that
    are entirely blank are skipped; a blank or non-integer value in any other
    row raises ``ImportFormatError`` naming the column and row numbers.
    """
    df = pd.read_csv(source, dtype=str)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ImportFormatError(f'Missing columns: {missing}')

    df = df.dropna(how='all', subset=REQUIRED_COLUMNS).copy()

    problems = []
    blank_content = df['content'].isna() | (df['content'].str.strip() == '')
    if blank_content.any():
        problems.append(f"content (rows {_row_numbers(df, blank_content)})")
    for col in INTEGER_COLUMNS:
        values = pd.to_numeric(df[col], errors='coerce')
        invalid = values.isna() | (values % 1 != 0)
        if invalid.any():
            problems.append(f'{col} (rows {_row_numbers(df, invalid)})')
        else:
            df[col] = values.astype(int)
    if problems:
        raise ImportFormatError(f"Invalid values: {', '.join(problems)}")

    if 'course_code' not in df.columns:
        df['course_code'] = None
    return df


def import_questions(bank, source):
    """
    Add the questions described in ``source`` to ``bank``.

    Either every question is written or none is. Returns counts of the
    questions and subquestions created.
    """
    df = read_question_rows(source)
    offering = bank.course_offering
    modules = {m.module_no: m for m in offering.modules}

    unknown = sorted(set(df['module_no']) - set(modules))
    if unknown:
        raise ImportFormatError(
            f'Course offering {offering.id} has no module(s) {[int(n) for n in unknown]}'
        )

    questions = []
    subquestion_count = 0
    for (module_no, _question_no), rows in df.groupby(['module_no', 'question_no'], sort=True):
        first = rows.iloc[0]
        if pd.notna(first['course_code']) and str(first['course_code']).strip():
            course_code = str(first['course_code']).strip()
        else:
            course_code = offering.course_id
        question = Question(
            marks=int(rows['marks'].sum()),
            course_outcome=int(first['course_outcome']),
            course_code=course_code,
            module=modules[module_no],
            question_bank=bank,
        )
        for _, row in rows.iterrows():
            question.subquestions.append(Subquestion(
                marks=int(row['marks']),
                content=str(row['content']),
                blooms_level=int(row['blooms_level']),
            ))
            subquestion_count += 1
        db.session.add(question)
        questions.append(question)

    if questions:
        store.save(*questions)
    current_app.logger.info('[Import] Added %d questions (%d subquestions) to question bank %s',
                            len(questions), subquestion_count, bank.id)
    return {'questions': len(questions), 'subquestions': subquestion_count}
