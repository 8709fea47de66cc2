"""Data server storing the progress CSV file next to the project."""
import logging
from pathlib import Path
from typing import Optional, Union

from flask import Flask, Response, jsonify, request

from suomiarena.config import settings

logger = logging.getLogger(__name__)


def create_app(csv_path: Optional[Union[str, Path]] = None) -> Flask:
    """Create and configure the data server application."""
    app = Flask(__name__)
    app.config["CSV_PATH"] = Path(csv_path) if csv_path is not None else settings.paths.csv_file

    def _csv_path() -> Path:
        path = app.config["CSV_PATH"]
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @app.after_request
    def add_cors_headers(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        return response

    @app.route("/api/data", methods=["GET"])
    def read_data():
        try:
            path = _csv_path()
            if not path.exists():
                return jsonify({"message": "No data file found"}), 404
            data = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Error reading CSV: {e}")
            return jsonify({"error": "Failed to read data"}), 500
        return Response(data, mimetype="text/csv")

    @app.route("/api/data", methods=["POST"])
    def write_data():
        csv_data = request.get_data(as_text=True)
        if not csv_data or not csv_data.strip():
            return jsonify({"error": "Invalid CSV data"}), 400
        try:
            path = _csv_path()
            path.write_text(csv_data, encoding="utf-8")
        except OSError as e:
            logger.error(f"Error writing CSV: {e}")
            return jsonify({"error": "Failed to save data"}), 500
        logger.info(f"Saved progress to {path}")
        return jsonify({"success": True, "message": "Data saved successfully"})

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "csvPath": str(app.config["CSV_PATH"])})

    return app
