import logging
from pathlib import Path
from typing import Optional
from playwright.sync_api import BrowserContext, Page
from utils.text_utils import safe_filename

# Same mode names pytest-playwright uses for --video and --tracing
ARTIFACT_MODES = ("on", "off", "retain-on-failure")

VIDEO_DIR = Path.cwd() / "reports" / "videos"
TRACE_DIR = Path.cwd() / "reports" / "traces"

logger = logging.getLogger(__name__)


def artifact_mode(value) -> str:
    mode = str(value or "off").strip().lower()
    if mode not in ARTIFACT_MODES:
        raise ValueError(f"Unknown artifact mode '{value}', expected one of {', '.join(ARTIFACT_MODES)}")
    return mode


def should_keep(mode: str, failed: bool) -> bool:
    return mode == "on" or (mode == "retain-on-failure" and failed)


def video_options(mode: str, directory: Path = VIDEO_DIR) -> dict:
    """Extra ``browser.new_context()`` arguments that turn on recording."""
    if mode == "off":
        return {}
    directory.mkdir(parents=True, exist_ok=True)
    return {"record_video_dir": str(directory)}


def start_tracing(context: BrowserContext, mode: str):
    if mode != "off":
        context.tracing.start(screenshots=True, snapshots=True, sources=True)


def stop_tracing(context: BrowserContext, mode: str, failed: bool, name: str,
                 directory: Path = TRACE_DIR) -> Optional[Path]:
    """
    Stop a running trace, writing it to {name}.zip only when it is kept.

    Returns:
        Optional[Path]: The trace file, or None when nothing was saved.
    """
    if mode == "off":
        return None

    if not should_keep(mode, failed):
        context.tracing.stop()
        return None

    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{safe_filename(name)}.zip"
    context.tracing.stop(path=str(path))
    logger.info("Trace saved: %s", path)
    return path


def finish_video(page: Page, mode: str, failed: bool, name: str,
                 directory: Path = VIDEO_DIR) -> Optional[Path]:
    """
    Keep or discard the recording of a closed page.

    A kept recording is copied to {name}.webm. The raw file Playwright
    wrote is always removed.
    """
    video = page.video
    if mode == "off" or video is None:
        return None

    if not should_keep(mode, failed):
        video.delete()
        return None

    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{safe_filename(name)}.webm"
    video.save_as(str(path))
    video.delete()
    logger.info("Video saved: %s", path)
    return path
