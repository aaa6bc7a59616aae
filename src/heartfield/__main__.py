#!/usr/bin/env python3
"""
Falling Hearts CLI Tool
=======================

Renders a field of falling hearts that react to the pointer: a brief
orbit after every move, a burst on each tap, and a gathering "hug" while the
pointer is held down, released into a big burst.

Two front-ends drive the same engine:
- export (default): plays a scripted gesture tour and writes a video with
  MoviePy, optionally with a soundtrack whose tempo sets the heartbeat.
- live: an OpenCV window; move, click and hold with the mouse.
  Keys: p = pause/resume, q / Esc = quit.

Usage:
    python -m heartfield --output hearts.mp4 --music song.mp3
    python -m heartfield --live
"""

import argparse
import logging
import os
import sys

import cv2
from moviepy import AudioFileClip, VideoClip

from heartfield.audio_analyser import AudioAnalyser
from heartfield.constants import (
    DEFAULT_BPM,
    DEFAULT_DPR,
    DEFAULT_DURATION,
    DEFAULT_FPS,
    DEFAULT_RESOLUTION,
    TRAIL_ALPHA,
)
from heartfield.engine import EngineSettings, HeartFieldEngine
from heartfield.errors import AudioLoadError, HeartFieldError
from heartfield.gestures import GestureScript
from heartfield.renderer import Surface
from heartfield.scheduler import FrameScheduler

logger = logging.getLogger("heartfield")

WINDOW_NAME = "heartfield"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render an interactive field of falling hearts."
    )
    parser.add_argument(
        "--output", "-o", default="hearts.mp4", help="Path to output video file"
    )
    parser.add_argument(
        "--live", action="store_true", help="Open an interactive window instead of exporting"
    )
    parser.add_argument("--width", type=int, default=DEFAULT_RESOLUTION[0], help="Surface width")
    parser.add_argument("--height", type=int, default=DEFAULT_RESOLUTION[1], help="Surface height")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Frames per second")
    parser.add_argument(
        "--duration", type=float, help="Length in seconds (export defaults to the gesture tour)"
    )
    parser.add_argument("--dpr", type=float, default=DEFAULT_DPR, help="Device pixel ratio")
    parser.add_argument("--bpm", type=float, default=DEFAULT_BPM, help="Heartbeat tempo")
    parser.add_argument("--music", help="Soundtrack (WAV/MP3); its tempo overrides --bpm")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")
    parser.add_argument(
        "--calm", action="store_true", help="Disable pointer forces and bursts"
    )
    parser.add_argument(
        "--trail-alpha", type=float, default=TRAIL_ALPHA, help="White veil per frame (0.12-0.18)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def build_settings(args, bpm):
    return EngineSettings(
        dpr=args.dpr,
        bpm=bpm,
        interactive=not args.calm,
        trail_alpha=args.trail_alpha,
        seed=args.seed,
    )


def export(args, settings, analyzer=None):
    duration = args.duration or DEFAULT_DURATION
    if analyzer and analyzer.duration < duration:
        duration = analyzer.duration
        logger.info(f"[i] Truncating duration to {duration:.2f} seconds.")

    logger.info(f"[+] Preparing render: {args.width}x{args.height} @ {args.fps}fps")
    logger.info(f"[+] Duration: {duration:.2f} seconds, heartbeat {settings.bpm:.0f} bpm")

    surface = Surface(args.width, args.height)
    engine = HeartFieldEngine(surface, settings)
    scheduler = FrameScheduler(engine)
    script = GestureScript()
    scheduler.start()

    def make_frame(t):
        script.play(engine.state.gestures, t, surface.width, surface.height)
        scheduler.pump(now=t)
        # MoviePy expects RGB
        return cv2.cvtColor(surface.frame, cv2.COLOR_BGR2RGB)

    video_clip = VideoClip(make_frame, duration=duration)

    if analyzer:
        audio_clip = AudioFileClip(args.music)
        audio_clip = audio_clip.subclipped(0, duration)
        video_clip = video_clip.with_audio(audio_clip)

    logger.info("[+] Rendering video... (This may take a while)")
    video_clip.write_videofile(
        args.output,
        fps=args.fps,
        codec="libx264",
        audio_codec="aac",
        threads=4,
        preset="medium",
        logger="bar",
    )
    scheduler.deactivate()
    logger.info(f"[+] Done! Saved to {args.output}")


def handle_mouse(tracker, event, x, y, width, height):
    """Feed one OpenCV mouse event into the gesture tracker."""
    # A release dragged outside the window still ends the hold
    if event == cv2.EVENT_LBUTTONUP:
        tracker.up()
    if not (0 <= x < width and 0 <= y < height):
        tracker.leave()
        return
    if event == cv2.EVENT_MOUSEMOVE:
        tracker.move(x, y)
    elif event == cv2.EVENT_LBUTTONDOWN:
        tracker.move(x, y)
        tracker.down()


def live(args, settings):
    surface = Surface(args.width, args.height)
    engine = HeartFieldEngine(surface, settings)
    scheduler = FrameScheduler(engine)
    tracker = engine.state.gestures

    def on_mouse(event, x, y, flags, param):
        handle_mouse(tracker, event, x, y, surface.width, surface.height)

    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
    cv2.resizeWindow(WINDOW_NAME, args.width, args.height)
    cv2.setMouseCallback(WINDOW_NAME, on_mouse)

    logger.info("[+] Live mode: move, click or hold the mouse. p = pause, q = quit")
    scheduler.start()
    started_at = scheduler.clock()
    delay_ms = max(1, int(1000 / args.fps))

    while True:
        _, _, win_w, win_h = cv2.getWindowImageRect(WINDOW_NAME)
        if win_w >= 0 and win_h >= 0 and (win_w, win_h) != (surface.width, surface.height):
            surface.resize(win_w, win_h)

        scheduler.pump()
        if not surface.is_empty:
            cv2.imshow(WINDOW_NAME, surface.frame)

        key = cv2.waitKey(delay_ms) & 0xFF
        if key in (27, ord("q")):
            break
        if key == ord("p"):
            scheduler.set_visible(not scheduler.visible)
        if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
            break
        if args.duration and scheduler.clock() - started_at > args.duration:
            break

    scheduler.deactivate()
    cv2.destroyAllWindows()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    # 1. Validation
    if args.music and not os.path.exists(args.music):
        sys.exit(f"[!] Music file not found: {args.music}")

    # 2. Analyze Audio
    analyzer = None
    bpm = args.bpm
    if args.music:
        try:
            analyzer = AudioAnalyser(args.music)
        except AudioLoadError as e:
            sys.exit(f"[!] {e}")
        bpm = analyzer.bpm
        logger.info(f"[i] Heartbeat follows the music at {bpm:.0f} bpm")

    settings = build_settings(args, bpm)

    try:
        if args.live:
            live(args, settings)
        else:
            export(args, settings, analyzer)
    except HeartFieldError as e:
        sys.exit(f"[!] {e}")


if __name__ == "__main__":
    main()
