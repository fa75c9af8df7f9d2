# paywall_app/blueprints/auth.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from flask import Blueprint, render_template, redirect, url_for, request

from paywall_app.forms import LoginForm, RegisterForm
from paywall_app.services.accounts import (
    authenticate, end_session, register_user, session_user, start_session,
)

bp = Blueprint("auth", __name__)

@bp.route("/register", methods=["GET"])
@bp.route("/register.html", methods=["GET"])
def register_page():
    return render_template("register.html")

@bp.route("/register", methods=["POST"])
def register():
    form = RegisterForm.from_request()
    register_user(form)
    return "Registration successful. Please proceed to payment."

def _safe_next(target: str | None) -> str:
    # só caminhos deste site: nada de esquema, host ou "//"
    if not target or not target.startswith("/") or target.startswith("//") or "\\" in target:
        return url_for("core.dashboard")
    return target

@bp.route("/login", methods=["GET"])
@bp.route("/login.html", methods=["GET"])
def login():
    return render_template("login.html", next_url=_safe_next(request.args.get("next")), user=session_user())

@bp.route("/login", methods=["POST"])
def login_submit():
    form = LoginForm.from_request()
    user = authenticate(form)
    start_session(user)
    return "Login successful"

@bp.route("/logout", methods=["GET", "POST"])
def logout():
    end_session()
    return redirect(url_for("auth.login"))
