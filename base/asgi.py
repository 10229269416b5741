"""
ASGI config for the UML code generation backend.

This module contains the ASGI application used by ASGI servers. It exposes
the ASGI callable as a module-level variable named ``application``.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'base.settings')

application = get_asgi_application()
