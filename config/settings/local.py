# ruff: noqa: E501
from .base import *  # noqa: F403
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = True
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="q3Nf0XbV8pTzYk1cHwR6mLs2uEa9dJo4gIi7rKx5vCt0nBeZyPhQlUfWjMsDaO8",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#allowed-hosts
# runrealtime binds every interface, so accept any Host header by default.
ALLOWED_HOSTS = env.list("DJANGO_ALLOWED_HOSTS", default=["*"])

# Your stuff...
# ------------------------------------------------------------------------------
