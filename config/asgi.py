"""
ASGI config for realtime_sandbox project.

It exposes the ASGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/dev/howto/deployment/asgi/

"""

import os

from django.core.asgi import get_asgi_application

# If DJANGO_SETTINGS_MODULE is unset, select a sensible default based on BUILD_ENV
# Default to local settings for the local dev image, production otherwise.
if "DJANGO_SETTINGS_MODULE" not in os.environ:
    build_env = os.environ.get("BUILD_ENV", "production").lower()
    default_settings = (
        "config.settings.local"
        if build_env == "local"
        else "config.settings.production"
    )
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", default_settings)

django_application = get_asgi_application()

from socketio import ASGIApp  # noqa: E402

from realtime_sandbox.realtime.socketio import build_server  # noqa: E402

sio = build_server()

# Socket.IO sits in front of Django: Engine.IO traffic (long-polling and
# WebSocket upgrades) on `/socket.io/` goes to `sio`, everything else to Django.
application = ASGIApp(sio, other_asgi_app=django_application)
