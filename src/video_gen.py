import os
import hashlib
import logging
from typing import Any, Optional

import replicate

from .normalizer import GenerationRequest

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "luma-ai/dream-machine"


class ConfigurationError(RuntimeError):
    """A setting the provider needs is missing."""


class VideoGenerator:
    """Video generator client backed by a hosted model on Replicate.

    Behavior:
    - `REPLICATE_API_TOKEN` is required for real runs. It is checked on every
      `run`, so the app can start without it and report the problem per request.
    - `REPLICATE_MODEL_ID` selects the model (default `luma-ai/dream-machine`).
    - The Replicate client is built on the first real run and reused after that.
    - In `dry_run=True` mode no network call is made and a placeholder output in
      the provider's shape is returned.

    `run` returns the provider output untouched; it can be a string, a list or
    a dict depending on the model. See `extractor.extract_video_url`.
    """

    def __init__(self, api_token: Optional[str] = None, model_id: Optional[str] = None, dry_run: bool = False, client=None):
        self.api_token = api_token or os.getenv("REPLICATE_API_TOKEN")
        self.model_id = model_id or os.getenv("REPLICATE_MODEL_ID") or DEFAULT_MODEL_ID
        self.dry_run = dry_run
        self._client = client

    def _get_client(self):
        if not self.api_token:
            raise ConfigurationError("Missing REPLICATE_API_TOKEN. Add it to your environment configuration.")

        if self._client is None:
            logger.debug("Creating Replicate client for model %s", self.model_id)
            self._client = replicate.Client(api_token=self.api_token)
        return self._client

    def _dry_run_output(self, request: GenerationRequest) -> dict:
        # Deterministic URL per parameter set so repeated UI runs are stable
        key = f"{request.prompt}|{request.aspect_ratio}|{request.duration}".encode("utf-8")
        h = hashlib.sha1(key).hexdigest()[:12]
        return {"video": f"https://videos.example/{h}.mp4"}

    def run(self, request: GenerationRequest) -> Any:
        """Run the model with the normalized request. Blocks until the prediction finishes."""
        if self.dry_run:
            logger.info("[DRY RUN] Would run %s with %s", self.model_id, request.to_provider_input())
            return self._dry_run_output(request)

        client = self._get_client()
        logger.info("Running %s (aspect_ratio=%s, duration=%ss)", self.model_id, request.aspect_ratio, request.duration)
        # Plain URLs instead of FileOutput objects, so the output stays JSON-like
        return client.run(self.model_id, input=request.to_provider_input(), use_file_output=False)
