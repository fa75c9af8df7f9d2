# paywall_app/errors.py
# -*- coding: utf-8 -*-
"""Erros de domínio e a tradução única deles para respostas HTTP.

4xx: mensagem legível devolvida ao cliente.
5xx: causa registrada no log do servidor; o cliente recebe mensagem genérica.
"""
from __future__ import annotations

from flask import current_app, jsonify, request


class AppError(Exception):
    status_code = 500
    public_message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class ValidationError(AppError):
    status_code = 400
    public_message = "All fields required"


class ConflictError(AppError):
    # o contrato HTTP responde duplicidade de e-mail como 500
    status_code = 500
    public_message = "User exists or DB error"


class AuthenticationError(AppError):
    status_code = 401
    public_message = "Invalid"


class InvalidSignatureError(AppError):
    status_code = 400
    public_message = "Invalid signature"


class GatewayError(AppError):
    public_message = "Order creation failed"


class PaymentVerificationError(GatewayError):
    public_message = "Payment verification failed"


class DeliveryError(AppError):
    public_message = "Mail failed"


class PersistenceError(AppError):
    public_message = "DB error"


class ConfigurationError(RuntimeError):
    """Configuração de deploy inválida (ex.: SESSION_SECRET ausente)."""


def _wants_json() -> bool:
    return request.is_json or request.accept_mimetypes.best == "application/json"


def _respond(message: str, status: int):
    if _wants_json():
        return jsonify(ok=False, error=message), status
    return message, status


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def _handle_app_error(err: AppError):
        if err.status_code >= 500:
            # detalhe fica no log; o cliente só vê a mensagem pública
            current_app.logger.exception(
                "%s em %s %s: %s", type(err).__name__, request.method, request.path, err.message
            )
            return _respond(err.public_message, err.status_code)
        return _respond(err.message, err.status_code)
