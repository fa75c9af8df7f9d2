# paywall_app/forms.py
# -*- coding: utf-8 -*-
"""Entradas explícitas por endpoint.

Aceitam JSON ou form-urlencoded; a validação de obrigatórios roda antes de
qualquer efeito colateral.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from flask import request

from .errors import ValidationError

# senhas não são aparadas: espaços fazem parte da credencial
_RAW_FIELDS = {"password"}

# limite do bcrypt
MAX_PASSWORD_BYTES = 72


def request_data() -> Mapping[str, Any]:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def _clean(name: str, value: Any) -> str:
    if value is None:
        return ""
    value = str(value)
    return value if name in _RAW_FIELDS else value.strip()


class _Form:
    message = "All fields required"

    @classmethod
    def from_request(cls, data: Mapping[str, Any] | None = None):
        data = request_data() if data is None else data
        values = {f.name: _clean(f.name, data.get(f.name)) for f in fields(cls)}
        missing = [k for k, v in values.items() if not v]
        if missing:
            raise ValidationError(cls.message)
        form = cls(**values)
        form.validate()
        return form

    def validate(self) -> None:
        pass


@dataclass(frozen=True)
class RegisterForm(_Form):
    name: str
    email: str
    password: str

    def validate(self) -> None:
        if len(self.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


@dataclass(frozen=True)
class LoginForm(_Form):
    message = "Email and password required"

    email: str
    password: str


@dataclass(frozen=True)
class PaymentCallback(_Form):
    message = "Missing payment fields"

    razorpay_payment_id: str
    razorpay_order_id: str
    razorpay_signature: str


@dataclass(frozen=True)
class ContactForm(_Form):
    message = "All required"

    name: str
    email: str
    message_body: str

    @classmethod
    def from_request(cls, data: Mapping[str, Any] | None = None):
        data = request_data() if data is None else data
        name = _clean("name", data.get("name"))
        email = _clean("email", data.get("email"))
        body = _clean("message", data.get("message"))
        if not name or not email or not body:
            raise ValidationError(cls.message)
        # name e email viram cabeçalhos do e-mail
        if any(c in v for v in (name, email) for c in "\r\n"):
            raise ValidationError("Invalid name or email")
        return cls(name=name, email=email, message_body=body)
