# paywall_app/extensions.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_migrate import Migrate
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .errors import PersistenceError


db = SQLAlchemy()
bcrypt = Bcrypt()
migrate = Migrate()

def init_extensions(app):
    # DB/Bcrypt/Migrate
    db.init_app(app)
    bcrypt.init_app(app)
    migrate.init_app(app, db)

def init_schema(app):
    """Cria a tabela de usuários se ainda não existir (idempotente)."""
    from . import models  # noqa: F401  registra os modelos no metadata

    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError as e:
            app.logger.exception("DB init error")
            raise PersistenceError("DB init error") from e
    app.logger.info("Users table ready")

def register_cli(app):
    @app.cli.command("init-db")
    def init_db_cmd():
        """Cria as tabelas (DEV/MVP). Para produção: use flask db upgrade."""
        with app.app_context():
            # sanity check
            db.session.execute(text("SELECT 1"))
            db.create_all()
            print("Tabelas criadas.")
