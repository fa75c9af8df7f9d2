# paywall_app/blueprints/core.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint, render_template, jsonify

from paywall_app.decorators import paid_required
from paywall_app.services.accounts import session_user

bp = Blueprint("core", __name__)

@bp.route("/")
def index():
    return render_template("index.html", user=session_user())

@bp.route("/dashboard")
@paid_required
def dashboard():
    return render_template("dashboard.html", user=session_user())

@bp.route("/healthz")
def healthz():
    return jsonify(status="ok")
