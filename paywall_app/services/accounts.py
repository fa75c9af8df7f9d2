# paywall_app/services/accounts.py
# -*- coding: utf-8 -*-
"""Ciclo de vida da conta: anônimo -> registrado -> autenticado (sem/com pagamento)."""
from __future__ import annotations

from flask import current_app, session
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import AuthenticationError, ConflictError, PersistenceError
from ..extensions import db
from ..forms import LoginForm, RegisterForm
from ..models import User

# resultados do gate do dashboard
UNAUTHENTICATED = "unauthenticated"
UNPAID = "unpaid"
ALLOWED = "ok"


def register_user(form: RegisterForm) -> User:
    u = User(name=form.name, email=form.email, has_paid=False)
    u.set_password(form.password)
    db.session.add(u)
    try:
        db.session.commit()
    except IntegrityError as e:
        # a constraint unique do banco decide, inclusive em cadastros concorrentes
        db.session.rollback()
        raise ConflictError() from e
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError("insert user failed") from e
    current_app.logger.info("Usuário %s registrado", u.id)
    return u


def authenticate(form: LoginForm) -> User:
    try:
        u = User.query.filter_by(email=form.email).first()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError("user lookup failed") from e
    # mesma resposta para e-mail inexistente e senha errada
    if not u or not u.check_password(form.password):
        current_app.logger.info("Login recusado")
        raise AuthenticationError()
    return u


def start_session(user: User) -> dict:
    session.clear()
    session["user"] = {"id": user.id, "has_paid": bool(user.has_paid)}
    return session["user"]


def end_session() -> None:
    session.clear()


def session_user() -> dict | None:
    return session.get("user") or None


def dashboard_outcome() -> str:
    """Só lê a sessão; não consulta o banco."""
    user = session_user()
    if not user or not user.get("id"):
        return UNAUTHENTICATED
    if not user.get("has_paid"):
        return UNPAID
    return ALLOWED


def mark_paid(user_id: int) -> None:
    stmt = update(User).where(User.id == user_id).values(has_paid=True)
    try:
        result = db.session.execute(stmt)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError("update has_paid failed") from e
    if result.rowcount == 0:
        # sessão aponta para uma conta que não existe mais
        raise AuthenticationError("Login required")


def mark_session_paid() -> None:
    user = dict(session["user"])
    user["has_paid"] = True
    session["user"] = user
