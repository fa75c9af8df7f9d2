# paywall_app/blueprints/billing.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from flask import Blueprint, current_app, jsonify, render_template

from ..decorators import api_login_required, login_required
from ..forms import PaymentCallback
from ..services.accounts import session_user
from ..services.payments import confirm_payment, create_order

bp = Blueprint("billing", __name__)

@bp.route("/payment", methods=["GET"])
@bp.route("/payment.html", methods=["GET"])
@login_required
def payment_page():
    cfg = current_app.config
    return render_template(
        "payment.html",
        key_id=cfg["RAZORPAY_KEY_ID"],
        amount=cfg["ORDER_AMOUNT"],
        currency=cfg["ORDER_CURRENCY"],
        user=session_user(),
    )

@bp.route("/create-order", methods=["POST"])
def create_order_view():
    # o valor nunca vem do cliente; notes só ajuda na conciliação
    user = session_user()
    notes = {"user_id": user["id"]} if user and user.get("id") else None
    order = create_order(notes=notes)
    return jsonify(order)

@bp.route("/payment-success", methods=["POST"])
@api_login_required
def payment_success():
    callback = PaymentCallback.from_request()
    confirm_payment(callback)
    return jsonify(ok=True)
