"""Web app: a form page and the JSON endpoint that generates a video.

Run as a module: `python -m src.main`
"""
import os
import logging
from typing import Optional

from flask import Flask, jsonify, render_template, request

from .config import configure_logging, env_flag, load_env, server_address
from .handler import GenerateHandler
from .normalizer import DEFAULT_PROMPT, VALID_ASPECT_RATIOS
from .video_gen import VideoGenerator

logger = logging.getLogger(__name__)

ASPECT_RATIO_LABELS = {
    "16:9": "Cinematic 16:9",
    "9:16": "Vertical 9:16",
    "1:1": "Square 1:1",
    "4:3": "Classic 4:3",
}
DURATION_CHOICES = (4, 6, 8, 10)


def create_app(generator: Optional[VideoGenerator] = None) -> Flask:
    """Build the Flask app. The generator is created once here and shared by all requests."""
    app = Flask(__name__)

    if generator is None:
        generator = VideoGenerator(dry_run=env_flag("DRY_RUN"))
    handler = GenerateHandler(generator)

    @app.route("/", methods=["GET"])
    def index():
        return render_template(
            "index.html",
            default_prompt=DEFAULT_PROMPT,
            aspect_ratios=[(value, ASPECT_RATIO_LABELS[value]) for value in VALID_ASPECT_RATIOS],
            durations=DURATION_CHOICES,
        )

    @app.route("/api/generate", methods=["POST"])
    def generate():
        # Unparseable bodies become None and are normalized like an empty payload
        payload = request.get_json(force=True, silent=True)
        status, body = handler.handle(payload)
        return jsonify(body), status

    return app


if __name__ == "__main__":
    import argparse

    load_env()
    configure_logging()
    host, port = server_address()

    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default=host, help="Interface to bind (default: APP_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, default=port, help="Port to listen on (default: APP_PORT or 5000)")
    parser.add_argument("--dry-run", dest="dry_run", action="store_true", help="Return placeholder videos without calling the model")
    parser.add_argument("--no-dry-run", dest="dry_run", action="store_false", help="Call the hosted model")
    parser.set_defaults(dry_run=env_flag("DRY_RUN"))
    args = parser.parse_args()

    if not args.dry_run and not os.getenv("REPLICATE_API_TOKEN"):
        logger.warning("REPLICATE_API_TOKEN is not set; generate requests will fail until it is configured.")

    app = create_app(VideoGenerator(dry_run=args.dry_run))
    print(f"Serving on http://{args.host}:{args.port} (dry_run={args.dry_run})")
    app.run(host=args.host, port=args.port)
