"""Upload and download pages of the-internet demo app."""

from pathlib import Path
from typing import List, Optional, Union

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from pomlab.pages.base import compose
from pomlab.shared.errors import ActionTimeout
from pomlab.utils.config import SuiteConfig
from pomlab.utils.file_download import save_download


class UploadPage:
    PATH = "/upload"

    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        self.file_input = page.locator("#file-upload")
        self.submit_button = page.locator("#file-submit")
        self.heading = page.locator("h3")
        self.uploaded_files = page.locator("#uploaded-files")

    def navigate(self):
        self.actions.navigate(self.config.the_internet_url + self.PATH, ready=self.file_input)

    def upload_file(self, path: Union[str, Path]):
        self.actions.set_files(self.file_input, path)
        self.actions.click(self.submit_button)

    def upload_content(self, name: str, content: Union[str, bytes], mime_type: str = "text/plain"):
        """Uploads an in-memory file without touching disk."""
        buffer = content.encode("utf-8") if isinstance(content, str) else content
        self.actions.set_files(self.file_input, {"name": name, "mimeType": mime_type, "buffer": buffer})
        self.actions.click(self.submit_button)

    def get_result_heading(self) -> str:
        self.actions.wait_for(self.uploaded_files)
        return self.actions.text_of(self.heading)

    def get_uploaded_files(self) -> str:
        self.actions.wait_for(self.uploaded_files)
        return self.actions.text_of(self.uploaded_files)


class DownloadPage:
    PATH = "/download"

    def __init__(self, page: Page, config: Optional[SuiteConfig] = None):
        self.page = page
        self.config, self.utils, self.actions = compose(page, config)
        self.heading = page.locator(".example h3")
        self.links = page.locator(".example a")

    def navigate(self):
        self.actions.navigate(self.config.the_internet_url + self.PATH, ready=self.heading)

    def list_files(self) -> List[str]:
        return [t.strip() for t in self.links.all_text_contents()]

    def download(self, filename: str, dest_dir: Optional[Union[str, Path]] = None) -> Path:
        """Clicks the link for ``filename`` and saves what the browser downloads."""
        link = self.links.filter(has_text=filename).first
        try:
            with self.page.expect_download(timeout=self.config.action_timeout_ms) as download_info:
                self.actions.click(link)
            download = download_info.value
        except PlaywrightTimeoutError as err:
            raise ActionTimeout(f"No download started for '{filename}'", action="download") from err
        return save_download(download, dest_dir or self.config.download_dir)
