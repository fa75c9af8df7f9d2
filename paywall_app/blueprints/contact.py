# paywall_app/blueprints/contact.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint, render_template

from ..forms import ContactForm
from ..services.mailer import send_contact_message

bp = Blueprint("contact", __name__)

@bp.route("/contact", methods=["GET"])
@bp.route("/contact.html", methods=["GET"])
def contact_page():
    return render_template("contact.html")

@bp.route("/contact", methods=["POST"])
def contact():
    form = ContactForm.from_request()
    send_contact_message(form)
    return "Message sent"
