import re
import shutil
from typing import BinaryIO, Optional

import fsspec

from kioskmap.config import get_config
from kioskmap.exceptions import InputNotFoundError

from .adapter import Adapter


class FSSpecAdapter(Adapter):
    """Reads local files through fsspec. Subclasses override `supports` and
    `_get_filesystem` for remote protocols."""

    def _infer_protocol(self, url: str) -> str:
        """
        Infer the protocol based on the URL prefix.
        """
        protocol_pattern = re.compile(r"^[a-zA-Z\d]+://")
        match = protocol_pattern.match(url)
        if match:
            return match.group(0)[:-3]  # Remove '://' from the matched protocol
        return "file"  # Default to 'file' for local paths

    def _get_filesystem(
        self, url: str, no_cache: bool = False
    ) -> fsspec.AbstractFileSystem:
        """
        Get the appropriate fsspec filesystem for the given URL. Caching is
        only used for remote files, and only when a cache directory is
        configured.
        """
        protocol = self._infer_protocol(url)
        cache_storage = get_config("cache")
        if no_cache or not cache_storage or protocol == "file":
            return fsspec.filesystem(protocol)

        return fsspec.filesystem(
            "simplecache",
            target_protocol=protocol,
            cache_storage=cache_storage,
        )

    def _detect_compression(self, url: str) -> Optional[str]:
        compression_map = {
            ".gz": "gzip",
            ".bz2": "bz2",
            ".xz": "xz",
        }
        for ext, comp in compression_map.items():
            if url.endswith(ext):
                return comp
        return None

    def supports(self, url: str) -> bool:
        """
        Check if the adapter can handle the URL.
        """
        return self._infer_protocol(url) == "file"

    def read_to_stream(self, url: str, output: BinaryIO):
        """
        Reads content from the given URL and writes it to the provided stream.
        """
        fs = self._get_filesystem(url)
        compression = self._detect_compression(url)

        try:
            with fs.open(url, "rb", compression=compression) as source_file:
                shutil.copyfileobj(source_file, output)
        except FileNotFoundError as e:
            raise InputNotFoundError(f"Input file not found: {url}") from e
