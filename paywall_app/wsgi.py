# paywall_app/wsgi.py
# -*- coding: utf-8 -*-
from paywall_app import create_app

app = create_app()
