import logging

from flask import Flask, jsonify

from tinydb import TinyDB
from tinydb.storages import MemoryStorage

from gs_config import config
from gs_routes import gs_bp, init_gs_bp


def create_app(db_path=None):
    """Flask 앱을 만든다.

    db_path 가 ":memory:" 이면 MemoryStorage, 아니면 TinyDB 파일을 쓴다.
    """
    logging.basicConfig(level=config.log_level)

    db_path = db_path or config.db_path
    if db_path == ":memory:":
        DB = TinyDB(storage=MemoryStorage)  # Memory DB
    else:
        DB = TinyDB(db_path)                # Storage DB

    app = Flask(__name__)
    app.secret_key = config.secret_key

    init_gs_bp(DB.table("gs"))
    app.register_blueprint(gs_bp)

    @app.route("/")
    def main():
        return jsonify({"service": "groth-sahai", "endpoints": "/gs"})

    app.logger.info("TinyDB: %s", db_path)
    return app


if __name__ == "__main__":
    create_app().run(host=config.host, port=config.port, debug=True)
