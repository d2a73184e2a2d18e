import logging
from dataclasses import dataclass
from typing import Any, Tuple

from .extractor import extract_video_url
from .normalizer import GenerationPayload, GenerationRequest, normalize
from .video_gen import ConfigurationError, VideoGenerator

logger = logging.getLogger(__name__)

UPSTREAM_DATA_MESSAGE = "Unable to read a video URL from the model output."
FALLBACK_ERROR_MESSAGE = "Video generation failed unexpectedly."


class UpstreamDataError(RuntimeError):
    """The provider call succeeded but its output held no usable video URL."""

    def __init__(self, message: str = UPSTREAM_DATA_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class GenerationResult:
    video_url: str
    prompt: str
    aspect_ratio: str
    duration: int

    def to_dict(self) -> dict:
        return {
            "videoUrl": self.video_url,
            "prompt": self.prompt,
            "aspectRatio": self.aspect_ratio,
            "duration": self.duration,
        }


class GenerateHandler:
    """Turns one request body into one (status, body) response.

    Provider failures map to 500 and unusable provider output maps to 502, so
    callers can tell "the call failed" from "the call returned junk". Invalid
    input never fails; it is normalized to defaults.
    """

    def __init__(self, generator: VideoGenerator):
        self.generator = generator

    def generate(self, request: GenerationRequest) -> GenerationResult:
        output = self.generator.run(request)
        video_url = extract_video_url(output)
        if not video_url:
            raise UpstreamDataError()
        return GenerationResult(
            video_url=video_url,
            prompt=request.prompt,
            aspect_ratio=request.aspect_ratio,
            duration=request.duration,
        )

    def handle(self, data: Any) -> Tuple[int, dict]:
        request = normalize(GenerationPayload.from_json(data))
        logger.info("Generating video: aspect_ratio=%s duration=%ss prompt=%r", request.aspect_ratio, request.duration, request.prompt)

        try:
            result = self.generate(request)
        except UpstreamDataError as e:
            logger.warning("Model output had no video URL (model=%s)", self.generator.model_id)
            return 502, {"error": str(e)}
        except ConfigurationError as e:
            logger.error("Video generation is not configured: %s", e)
            return 500, {"error": str(e)}
        except Exception as e:
            logger.exception("Video generation failed")
            return 500, {"error": str(e) or FALLBACK_ERROR_MESSAGE}

        return 200, result.to_dict()
