# paywall_app/models/__init__.py
# -*- coding: utf-8 -*-
from .user import User


__all__ = [
    "User",
]
