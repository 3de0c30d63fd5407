import fsspec

from kioskmap.config import get_config
from kioskmap.exceptions import AdapterError

from .fsspec import FSSpecAdapter


class HTTPAdapter(FSSpecAdapter):
    def supports(self, url: str) -> bool:
        return url.startswith("http://") or url.startswith("https://")

    def _get_filesystem(
        self, url: str, no_cache: bool = False
    ) -> fsspec.AbstractFileSystem:
        try:
            import aiohttp
        except ImportError:
            raise AdapterError(
                "Seems like you don't have `aiohttp` installed, which is required to make http requests. "
                "Please install it using: pip install aiohttp"
            )

        basic_authentication = get_config("adapters.http.basic_authentication")

        client_kwargs = {}
        if basic_authentication:
            client_kwargs["auth"] = aiohttp.BasicAuth(*basic_authentication)

        cache_storage = get_config("cache")
        if no_cache or not cache_storage:
            return fsspec.filesystem("http", client_kwargs=client_kwargs)
        else:
            return fsspec.filesystem(
                "simplecache",
                target_protocol="http",
                target_options={"client_kwargs": client_kwargs},
                cache_storage=cache_storage,
            )
