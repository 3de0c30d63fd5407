from typing import Optional

from .adapter import Adapter
from .fsspec import FSSpecAdapter
from .http import HTTPAdapter

adapters = [FSSpecAdapter(), HTTPAdapter()]


def get_adapter(url: str) -> Optional[Adapter]:
    for adapter in adapters:
        if adapter.supports(url):
            return adapter
