"""Downloads and unpacks Go SDK archives."""

from __future__ import annotations

import logging
import os
import posixpath
import shutil
import tarfile
import zipfile
from pathlib import Path

import requests

from .base_plugin import BasePlugin
from .errors import DownloadFailedError
from .http_client import HTTPClient

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT = 60.0


def _extract_tar_gz(archive: str, target: str) -> None:
    with tarfile.open(archive, "r:gz") as tar:
        if hasattr(tarfile, "data_filter"):
            tar.extractall(target, filter="data")
        else:
            tar.extractall(target)


def _extract_zip(archive: str, target: str) -> None:
    with zipfile.ZipFile(archive) as zipped:
        zipped.extractall(target)


class Downloader:
    """Fetches the archive of a Go version for one OS and architecture."""

    def __init__(
        self,
        os_name: str,
        arch: str,
        url_releases: str,
        base_plugin: BasePlugin,
        http_client: HTTPClient | None = None,
    ) -> None:
        self.os_name = os_name
        self.arch = arch
        self.url_releases = url_releases
        self._base_plugin = base_plugin
        self._http = http_client or HTTPClient(timeout=DOWNLOAD_TIMEOUT)

    def __repr__(self) -> str:
        return (
            f"downloader{{os={self.os_name}; arch={self.arch}; "
            f"urlReleases: {self.url_releases}}}"
        )

    def url_for_download(self, version: str) -> str:
        """The archive URL of a version."""
        extension = "zip" if self.os_name == "windows" else "tar.gz"
        return f"{self.url_releases}/go{version}.{self.os_name}-{self.arch}.{extension}"

    def download(self, version: str) -> str:
        """Download the archive of a version and return its local path."""
        url = self.url_for_download(version)
        out_path = Path(self._base_plugin.get_sdk_dir()) / ".download" / posixpath.basename(url)

        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DownloadFailedError(f"fail make directories: {exc}") from exc

        try:
            out_file = open(out_path, "wb")
        except OSError as exc:
            raise DownloadFailedError(f"fail create output file: {exc}") from exc

        with out_file:
            logger.info("downloading '%s' to '%s'", url, out_path)
            try:
                response = self._http.get(url)
            except requests.RequestException as exc:
                raise DownloadFailedError(str(exc)) from exc

            if response.status_code != 200:
                raise DownloadFailedError(f"status code {response.status_code}")

            try:
                out_file.write(response.content)
            except OSError as exc:
                raise DownloadFailedError(f"failed copy file: {exc}") from exc

        logger.info("downloaded '%s' to '%s'", url, out_path)
        return str(out_path)

    def unpack(self, archive_file_path: str, target_dir: str) -> None:
        """Extract an archive and move its top-level 'go' directory to target_dir."""
        logger.debug("unpacking '%s' to '%s'", archive_file_path, target_dir)

        tmp_dir = os.path.normpath(target_dir + ".tmp")
        try:
            os.makedirs(tmp_dir, exist_ok=True)
        except OSError as exc:
            raise DownloadFailedError(f"fail create temporary dir: {exc}") from exc
        logger.debug("creating tmp dir for unpack: %s", tmp_dir)

        try:
            extract = (
                _extract_zip if os.path.splitext(archive_file_path)[1] == ".zip" else _extract_tar_gz
            )
            try:
                extract(archive_file_path, tmp_dir)
            except (zipfile.BadZipFile, tarfile.TarError, OSError, EOFError) as exc:
                raise DownloadFailedError(f"extracting {archive_file_path} failed") from exc

            try:
                os.rename(os.path.join(tmp_dir, "go"), os.path.normpath(target_dir))
            except OSError as exc:
                raise DownloadFailedError(f"failed rename: {exc}") from exc
        finally:
            shutil.rmtree(tmp_dir)