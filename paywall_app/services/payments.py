# paywall_app/services/payments.py
# -*- coding: utf-8 -*-
"""Razorpay: criação de pedido (valor fixo) e verificação do callback de pagamento."""
from __future__ import annotations

import hashlib
import hmac
import time

import razorpay
import requests
from flask import current_app
from razorpay.errors import BadRequestError, GatewayError as RazorpayGatewayError, ServerError

from ..errors import AuthenticationError, GatewayError, InvalidSignatureError, PaymentVerificationError
from ..forms import PaymentCallback
from .accounts import mark_paid, mark_session_paid, session_user

_SDK_ERRORS = (BadRequestError, RazorpayGatewayError, ServerError, requests.RequestException)


def _build_client(app) -> razorpay.Client:
    return razorpay.Client(auth=(app.config["RAZORPAY_KEY_ID"], app.config["RAZORPAY_KEY_SECRET"]))

def init_gateway(app):
    """Cliente fica em app.extensions["razorpay"] (um por processo)."""
    app.extensions["razorpay"] = _build_client(app)

def get_gateway() -> razorpay.Client:
    client = current_app.extensions.get("razorpay")
    if client is None:
        client = _build_client(current_app)
        current_app.extensions["razorpay"] = client
    return client


def _receipt() -> str:
    return f"{current_app.config['ORDER_RECEIPT_PREFIX']}{int(time.time() * 1000)}"

def create_order(notes: dict | None = None) -> dict:
    """Cria o pedido com o valor fixo da configuração; devolve o objeto do gateway sem alterações."""
    cfg = current_app.config
    data = {
        "amount": cfg["ORDER_AMOUNT"],
        "currency": cfg["ORDER_CURRENCY"],
        "receipt": _receipt(),
    }
    if notes:
        data["notes"] = {k: str(v) for k, v in notes.items()}
    try:
        order = get_gateway().order.create(data=data, timeout=cfg["GATEWAY_TIMEOUT"])
    except _SDK_ERRORS as e:
        raise GatewayError("order create failed") from e
    current_app.logger.info("Pedido %s criado (receipt=%s)", order.get("id"), data["receipt"])
    return order


def compute_signature(secret: str, order_id: str, payment_id: str) -> str:
    msg = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), msg, hashlib.sha256).hexdigest()

def verify_payment_signature(order_id: str, payment_id: str, signature: str, secret: str | None = None) -> None:
    secret = current_app.config["RAZORPAY_KEY_SECRET"] if secret is None else secret
    if not secret:
        raise PaymentVerificationError("RAZORPAY_KEY_SECRET not configured")
    expected = compute_signature(secret, order_id, payment_id)
    if not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        raise InvalidSignatureError()


def confirm_payment(callback: PaymentCallback) -> None:
    """
    Ordem fixa: sessão autenticada -> assinatura -> UPDATE no banco -> sessão.
    Se o UPDATE falhar, a sessão continua sem pagamento.
    """
    user = session_user()
    if not user or not user.get("id"):
        raise AuthenticationError("Login required")

    try:
        verify_payment_signature(
            callback.razorpay_order_id, callback.razorpay_payment_id, callback.razorpay_signature
        )
    except InvalidSignatureError:
        current_app.logger.warning(
            "Assinatura inválida para o pedido %s (usuário %s)", callback.razorpay_order_id, user["id"]
        )
        raise

    mark_paid(user["id"])
    mark_session_paid()
    current_app.logger.info(
        "Pagamento %s confirmado para o usuário %s", callback.razorpay_payment_id, user["id"]
    )
