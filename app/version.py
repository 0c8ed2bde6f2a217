from __future__ import annotations
import os

APP_VERSION = os.getenv("APP_VERSION", "1.0.0-dev")
GIT_SHA = os.getenv("GIT_SHA", "local")
