"""Preview command - re-renders HTML whenever the markdown source changes."""

import logging
import time
from pathlib import Path
from typing import Optional

from src.cli.config import Config
from src.export import render_html_document
from src.utils.scheduling import Debouncer, Scheduler

logger = logging.getLogger(__name__)


class PreviewWatcher:
    """Polls a markdown file and writes a debounced HTML preview of it."""

    def __init__(
        self,
        source: Path,
        output: Path,
        debounce_ms: int = 300,
        title: str = "Preview",
        scheduler: Optional[Scheduler] = None,
    ):
        self.source = Path(source)
        self.output = Path(output)
        self.title = title
        self.debouncer = Debouncer(self.render, delay_ms=debounce_ms, scheduler=scheduler)
        self.render_count = 0
        self._last_text: Optional[str] = None

    def check(self) -> bool:
        """Read the source and schedule a render if it changed. Returns True on change."""
        try:
            text = self.source.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"⚠️ Could not read {self.source}: {e}")
            return False

        if text == self._last_text:
            return False

        self._last_text = text
        self.debouncer.trigger(text)
        return True

    def render(self, markdown: str):
        """Write the HTML preview for markdown."""
        self.output.write_text(render_html_document(markdown, self.title), encoding="utf-8")
        self.render_count += 1
        logger.info(f"🔄 Preview updated: {self.output}")

    def stop(self):
        self.debouncer.flush()


def preview_command(
    config: Config,
    input_path: str,
    output_path: Optional[str] = None,
    poll_interval: float = 0.2,
) -> int:
    """Watch input_path until interrupted. Returns the exit status."""
    source = Path(input_path)
    if not source.is_file():
        logger.error(f"❌ File not found: {source}")
        return 1

    output = Path(output_path) if output_path else source.with_suffix(".html")
    watcher = PreviewWatcher(
        source,
        output,
        debounce_ms=config.preview_debounce_ms,
        title=config.export_html_title,
    )

    logger.info(f"👀 Watching {source} (preview: {output}, Ctrl+C to stop)")
    try:
        while True:
            watcher.check()
            time.sleep(poll_interval)
    except KeyboardInterrupt:
        logger.info("⏹️ Stopping preview")
    finally:
        watcher.stop()

    return 0
