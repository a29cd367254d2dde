"""
Flask CLI commands for schema management and question import.

    flask --app examcell.app init-db
    flask --app examcell.app import-questions 3 data/questions.csv
"""

import click
from flask import current_app
from flask.cli import with_appcontext

from . import store
from .errors import ExamCellError
from .importer import import_questions
from .models import db, QuestionBank


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all tables."""
    db.create_all()
    current_app.logger.info('[Schema] Tables created')
    click.echo('[Schema] Tables created')


@click.command('drop-db')
@click.confirmation_option(prompt='This deletes every exam cell table. Continue?')
@with_appcontext
def drop_db_command():
    """Drop all tables."""
    db.drop_all()
    current_app.logger.info('[Schema] Tables dropped')
    click.echo('[Schema] Tables dropped')


@click.command('import-questions')
@click.argument('bank_id', type=int)
@click.argument('csv_path', type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def import_questions_command(bank_id, csv_path):
    """Import questions from CSV_PATH into question bank BANK_ID."""
    try:
        bank = store.get(QuestionBank, bank_id)
        counts = import_questions(bank, csv_path)
    except ExamCellError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"[Import] Added {counts['questions']} questions "
               f"({counts['subquestions']} subquestions) to question bank {bank_id}")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(drop_db_command)
    app.cli.add_command(import_questions_command)
