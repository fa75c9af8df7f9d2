# paywall_app/decorators.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from functools import wraps
from flask import redirect, url_for, request

from .errors import AuthenticationError
from .services.accounts import UNAUTHENTICATED, UNPAID, dashboard_outcome, session_user

def login_required(view_func):
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        if dashboard_outcome() == UNAUTHENTICATED:
            return redirect(url_for("auth.login", next=request.path))
        return view_func(*args, **kwargs)
    return wrapper

def paid_required(view_func):
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        outcome = dashboard_outcome()
        if outcome == UNAUTHENTICATED:
            return redirect(url_for("auth.login", next=request.path))
        if outcome == UNPAID:
            return redirect(url_for("billing.payment_page"))
        return view_func(*args, **kwargs)
    return wrapper

def api_login_required(view_func):
    """Para endpoints chamados via fetch: 401 em vez de redirect."""
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        user = session_user()
        if not user or not user.get("id"):
            raise AuthenticationError("Login required")
        return view_func(*args, **kwargs)
    return wrapper
