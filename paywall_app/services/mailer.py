# paywall_app/services/mailer.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from flask import current_app

from ..errors import DeliveryError, ValidationError
from ..forms import ContactForm


def is_mail_configured() -> bool:
    cfg = current_app.config
    return bool(cfg.get("MAIL_SMTP_HOST") and cfg.get("MAIL_USER"))


def build_contact_message(form: ContactForm, operator: str) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = f"Contact: {form.name}"
    # remetente autenticado é o operador; o visitante vai no Reply-To
    msg["From"] = operator
    msg["To"] = operator
    msg["Reply-To"] = formataddr((form.name, form.email))
    msg.set_content(f"From: {form.name} <{form.email}>\n\n{form.message_body}")
    return msg


def send_contact_message(form: ContactForm) -> None:
    """Envio síncrono para o endereço do operador. Falha -> DeliveryError."""
    if not is_mail_configured():
        raise DeliveryError("SMTP not configured")

    cfg = current_app.config
    operator = cfg["MAIL_USER"]
    try:
        msg = build_contact_message(form, operator)
    except (ValueError, UnicodeError) as e:
        # endereço fora do ASCII ou cabeçalho inválido
        raise ValidationError("Invalid name or email") from e
    try:
        with smtplib.SMTP(cfg["MAIL_SMTP_HOST"], cfg["MAIL_SMTP_PORT"], timeout=cfg["MAIL_TIMEOUT"]) as smtp:
            if cfg.get("MAIL_USE_TLS", True):
                smtp.starttls()
            if cfg.get("MAIL_PASSWORD"):
                smtp.login(operator, cfg["MAIL_PASSWORD"])
            smtp.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        raise DeliveryError("send failed") from e
    current_app.logger.info("Contato de %s encaminhado", form.email)
