"""Configuration management for the markdown transcoder CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Preview
        self.preview_debounce_ms = int(os.getenv("PREVIEW_DEBOUNCE_MS", "300"))

        # Text statistics
        self.reading_words_per_minute = int(os.getenv("READING_WORDS_PER_MINUTE", "200"))

        # Conversion
        self.extract_frontmatter = os.getenv("EXTRACT_FRONTMATTER", "false").lower() == "true"

        # Export
        self.export_dir = os.getenv("EXPORT_DIR", "./exports")
        self.export_html_title = os.getenv("EXPORT_HTML_TITLE", "Exported Markdown Document")
