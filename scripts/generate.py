#!/usr/bin/env python3
"""CLI: ask a running server for one video and print the JSON result.

Start the server first (`python -m src.main --dry-run` for a placeholder run), then:
    python scripts/generate.py "Your prompt here"
    python scripts/generate.py "Your prompt" --aspect-ratio 9:16 --duration 8
    python scripts/generate.py --url http://localhost:5000
"""
import os
import sys
import json
import argparse

import requests


def request_video(base_url: str, prompt=None, aspect_ratio=None, duration=None, timeout: int = 600) -> requests.Response:
    payload = {}
    if prompt is not None:
        payload["prompt"] = prompt
    if aspect_ratio is not None:
        payload["aspectRatio"] = aspect_ratio
    if duration is not None:
        payload["duration"] = duration
    return requests.post(f"{base_url.rstrip('/')}/api/generate", json=payload, timeout=timeout)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate one video through the studio API.")
    parser.add_argument("prompt", nargs="?", default=None, help="Text prompt (server default when omitted).")
    parser.add_argument("--aspect-ratio", "-a", default=None, help="16:9, 9:16, 1:1 or 4:3.")
    parser.add_argument("--duration", "-d", type=float, default=None, help="Seconds; the server clamps to 4-12.")
    parser.add_argument(
        "--url",
        default=os.getenv("STUDIO_URL", "http://127.0.0.1:5000"),
        help="Server base URL (default: STUDIO_URL or http://127.0.0.1:5000).",
    )
    args = parser.parse_args(argv)

    try:
        resp = request_video(args.url, args.prompt, args.aspect_ratio, args.duration)
    except requests.RequestException as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1

    try:
        body = resp.json()
    except ValueError:
        body = {"error": resp.text}

    print(json.dumps(body, indent=2))
    return 0 if resp.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
