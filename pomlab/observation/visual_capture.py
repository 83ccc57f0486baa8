from playwright.sync_api import Page
from PIL import Image
from pathlib import Path
from typing import Optional, Union
import io

class VisualCapture:
    def __init__(self, page: Page):
        self.page = page

    def capture(self, path: Optional[Union[str, Path]] = None, full_page: bool = False) -> Image.Image:
        """Captures a screenshot, optionally writing it to ``path``, and returns it as a PIL Image."""
        if path is not None:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        screenshot_bytes = self.page.screenshot(path=path, full_page=full_page)
        return Image.open(io.BytesIO(screenshot_bytes))
