from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .shifts.controller import register as register_shifts


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = build_container(settings)

    if app.config["DEBUG"]:
        print(
            "[shift-tracker] settings=", settings_module,
            " storage=", getattr(settings, "STORAGE_BACKEND", "json"),
            f" shifts={len(container.shifts_repo.list_all())}",
        )

    register_shifts(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
