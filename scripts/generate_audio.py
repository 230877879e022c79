#!/usr/bin/env python3
"""
generate_audio.py - Pre-render German TTS audio using Google Cloud TTS.

Synthesizes every text the app plays aloud (listen steps and the listening
section of the mock exam) into the audio cache, so the app never waits on
the TTS API during a lesson.

Usage:
  python scripts/generate_audio.py
  python scripts/generate_audio.py --voice de-DE-Neural2-C   # Use another voice
  python scripts/generate_audio.py --dry-run                 # Only list the texts

Prerequisites:
  Set GOOGLE_APPLICATION_CREDENTIALS to a service account JSON file path
  OR run `gcloud auth application-default login`
"""

import argparse
import logging
import sys
import time
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from deutschpfad.classroom import ContentLoader
from deutschpfad.config import configure_logging, get_settings
from deutschpfad.schemas import ListenStep
from deutschpfad.speech import GoogleCloudSynthesizer

logger = logging.getLogger(__name__)


def collect_spoken_texts(loader: ContentLoader) -> list[str]:
    """Texts played aloud, in content order, without duplicates."""
    texts = []
    for lesson in loader.all_lessons():
        for step in lesson.steps:
            if isinstance(step, ListenStep) and step.prompt_target:
                texts.append(step.prompt_target)
    texts.extend(question.prompt for question in loader.mock_exam.listening)
    return list(dict.fromkeys(t.strip() for t in texts if t.strip()))


def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(
        description="Pre-render German TTS audio for lessons and the mock exam",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Content directory (lessons, curriculum, b1_mock)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.resolved_audio_dir,
        help="Audio cache directory"
    )
    parser.add_argument(
        "--voice",
        type=str,
        default=settings.tts_voice,
        help=f"Google Cloud TTS voice name (default: {settings.tts_voice})"
    )
    parser.add_argument(
        "--speaking-rate",
        type=float,
        default=0.9,
        help="Speaking rate, 0.25-4.0 (default: 0.9 for learners)"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.1,
        help="Delay between API calls in seconds (default: 0.1)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List texts and cache paths without calling the API"
    )

    args = parser.parse_args()

    if not args.data_dir.is_dir():
        logger.error(f"Content directory not found: {args.data_dir}")
        sys.exit(1)

    loader = ContentLoader(args.data_dir)
    texts = collect_spoken_texts(loader)
    logger.info(f"Found {len(texts)} texts to synthesize")

    synthesizer = GoogleCloudSynthesizer(
        args.output,
        voice_name=args.voice,
        speaking_rate=args.speaking_rate,
    )

    success_count = 0
    skip_count = 0
    fail_count = 0

    for i, text in enumerate(texts, 1):
        clip = synthesizer.clip_path(text, settings.target_language)
        if clip.exists():
            skip_count += 1
            continue
        if args.dry_run:
            logger.info(f"[{i}/{len(texts)}] {clip.name}: {text}")
            continue

        logger.info(f"[{i}/{len(texts)}] Synthesizing {text!r}...")
        if synthesizer.synthesize(text, settings.target_language):
            success_count += 1
        else:
            fail_count += 1

        if args.delay > 0:
            time.sleep(args.delay)

    logger.info("=" * 50)
    logger.info("AUDIO GENERATION COMPLETE")
    logger.info("=" * 50)
    logger.info(f"Total texts: {len(texts)}")
    logger.info(f"Generated: {success_count}")
    logger.info(f"Skipped (cached): {skip_count}")
    logger.info(f"Failed: {fail_count}")
    logger.info(f"Output directory: {args.output}")

    if fail_count:
        sys.exit(1)


if __name__ == "__main__":
    main()
