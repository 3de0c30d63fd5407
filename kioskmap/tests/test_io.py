import gzip
import json
from io import BytesIO
from pathlib import Path

import pytest

from kioskmap.config import config_context
from kioskmap.exceptions import AdapterError, InputNotFoundError
from kioskmap.infra.io.adapters import (
    FSSpecAdapter,
    HTTPAdapter,
    get_adapter,
)
from kioskmap.io import Source, open_as_file


@pytest.fixture()
def filesystem_content(tmp_path: Path) -> Path:
    """Set up the content to be read from a local filesystem."""
    content = '[{"id": "f1"}]'

    text_file = tmp_path / "floor_plans.json"
    text_file.write_text(content)

    gz_file = tmp_path / "floor_plans.json.gz"
    with gzip.open(gz_file, "wb") as f_out:
        f_out.write(content.encode("utf-8"))

    return tmp_path


class TestOpenAsFile:
    """Tests for the open_as_file function."""

    def test_bytes(self):
        with open_as_file(b"Hello, world!") as fp:
            assert fp is not None
            assert fp.read() == b"Hello, world!"

    def test_data_string(self):
        with open_as_file('{"msg": "Hello, world!"}') as fp:
            assert fp is not None
            assert json.load(fp) == {"msg": "Hello, world!"}

    def test_stream(self):
        data = b"Hello, world!"
        with open_as_file(BytesIO(data)) as fp:
            assert fp is not None
            assert fp.read() == data

    def test_path_str(self, filesystem_content: Path):
        path = str(filesystem_content / "floor_plans.json")
        with open_as_file(path) as fp:
            assert json.load(fp) == [{"id": "f1"}]

    def test_path_compressed(self, filesystem_content: Path):
        path = filesystem_content / "floor_plans.json.gz"
        with open_as_file(path) as fp:
            assert json.load(fp) == [{"id": "f1"}]

    def test_path_missing(self, filesystem_content: Path):
        path = filesystem_content / "missing.json"
        with pytest.raises(InputNotFoundError):
            with open_as_file(path) as _:
                pass

    def test_unsupported_protocol(self):
        with pytest.raises(AdapterError):
            open_as_file("ftp://example.com/places.json")

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            open_as_file(12)


class TestSource:
    def test_optional_missing(self):
        with open_as_file(Source.create(None, optional=True)) as fp:
            assert fp is None

    def test_required_missing(self):
        with pytest.raises(ValueError):
            open_as_file(Source.create(None))

    def test_skip_if_missing(self, filesystem_content: Path):
        source = Source.create(
            filesystem_content / "missing.json", skip_if_missing=True
        )
        with open_as_file(source) as fp:
            assert fp is None


class TestHTTPAdapter:
    def test_open_as_file(self, httpserver):
        httpserver.expect_request("/floor-plans").respond_with_data(
            '[{"id": "f1"}]', content_type="application/json"
        )

        with open_as_file(httpserver.url_for("/floor-plans")) as fp:
            assert json.load(fp) == [{"id": "f1"}]

    def test_not_found(self, httpserver):
        httpserver.expect_request("/missing").respond_with_data(
            "Not found", status=404
        )

        with pytest.raises(InputNotFoundError):
            open_as_file(httpserver.url_for("/missing"))


class TestGetAdapter:
    def test_local_paths(self, tmp_path: Path):
        assert type(get_adapter(str(tmp_path / "places.json"))) is FSSpecAdapter
        assert type(get_adapter("file:///tmp/places.json")) is FSSpecAdapter

    def test_http(self):
        assert isinstance(get_adapter("https://example.com/places"), HTTPAdapter)

    def test_unsupported(self):
        assert get_adapter("ftp://example.com/places.json") is None

    def test_local_files_skip_cache(self, tmp_path: Path):
        with config_context("cache", str(tmp_path / "cache")):
            fs = FSSpecAdapter()._get_filesystem(str(tmp_path / "places.json"))

        assert "file" in fs.protocol
