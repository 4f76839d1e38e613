"""WSGI entrypoint, e.g. ``gunicorn -w 1 wsgi:app``."""

from lotto_api.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=3000)
