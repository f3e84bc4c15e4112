"""WSGI entry point for the TaskHub backend."""

import os

from taskhub_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))

if __name__ == "__main__":
    app.run(port=app.config["PORT"])
