# zzz/main.py
# Console script entry point

from .cli.app import app

__all__ = ["app"]
