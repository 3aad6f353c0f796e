# Serverless entry point: the platform imports `app` from this module.
from ataxx.main import app

__all__ = ["app"]
