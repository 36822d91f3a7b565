import os
import logging
from urllib.parse import unquote

from flask import Flask, abort, redirect, request, send_from_directory, url_for

from file_page import render_index
from file_store import FileStore

DEFAULT_UPLOAD_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "uploads")
DEFAULT_PORT = 3000

logger = logging.getLogger(__name__)


def create_app(upload_dir=None):
    if upload_dir is None:
        upload_dir = os.environ.get("UPLOAD_DIR") or DEFAULT_UPLOAD_DIR
    store = FileStore(upload_dir)
    store.ensure_directory()

    app = Flask(__name__)
    app.config["FILE_STORE"] = store

    @app.route("/", methods=["GET"])
    def index():
        return render_index(store.list_files())

    @app.route("/upload", methods=["POST"])
    def upload():
        f = request.files.get("file")
        if f is not None and f.filename:
            store.save(f.filename, f)
        return redirect(url_for("index"))

    @app.route("/delete", methods=["POST"])
    def delete():
        filename = request.form.get("filename")
        if filename:
            store.delete(unquote(filename))
        return redirect(url_for("index"))

    @app.route("/uploads/<path:filename>", methods=["GET"])
    def download(filename):
        if store.resolve(filename) is None:
            abort(404)
        return send_from_directory(store.directory, filename)

    return app


def main():
    logging.basicConfig(level=logging.INFO)
    port = int(os.environ.get("PORT") or DEFAULT_PORT)
    app = create_app()
    logger.info("Serving files from %s", app.config["FILE_STORE"].directory)
    logger.info("Server started on http://localhost:%d", port)
    app.run(host="0.0.0.0", port=port, threaded=True)


if __name__ == "__main__":
    # run with: python file_server.py
    main()
