# paywall_app/__init__.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import os

from flask import Flask
from config import Config, TestingConfig, StagingConfig, ProductionConfig
from .errors import ConfigurationError, register_error_handlers
from .extensions import db, init_extensions, init_schema, register_cli
from .services.payments import init_gateway
from .blueprints.core import bp as core_bp
from .blueprints.auth import bp as auth_bp
from .blueprints.billing import bp as billing_bp
from .blueprints.contact import bp as contact_bp

_CONFIGS = {
    "testing": TestingConfig,
    "staging": StagingConfig,
    "production": ProductionConfig,
}

def create_app(config_object: type[Config] | None = None) -> Flask:
    app = Flask(__name__, template_folder="../templates")

    if config_object is None:
        config_object = _CONFIGS.get(os.getenv("APP_ENV", "").lower(), Config)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # SESSION_SECRET é obrigatório em todo ambiente
    if not app.config.get("SECRET_KEY"):
        raise ConfigurationError("SESSION_SECRET não definido; defina-o no ambiente.")

    # Extensões (DB/Bcrypt/Migrate) e cliente Razorpay em app.extensions
    init_extensions(app)
    init_gateway(app)
    register_error_handlers(app)

    # Blueprints
    app.register_blueprint(core_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(billing_bp)
    app.register_blueprint(contact_bp)
    # CLI (ex.: flask init-db)
    register_cli(app)

    init_schema(app)
    return app
