"""I/O utilities for reading raw data."""

import contextlib
import logging
import os
from dataclasses import dataclass, replace
from io import BytesIO, TextIOWrapper
from typing import IO, BinaryIO, ContextManager, Generator, Optional, Union

from kioskmap.exceptions import AdapterError, InputNotFoundError
from kioskmap.infra.io.adapters import get_adapter

logger = logging.getLogger(__name__)

FilePath = Union[str, bytes, os.PathLike]
FileOrPath = Union[FilePath, IO]


@dataclass(frozen=True)
class Source:
    """A wrapper around a file-like object to enable optional inputs.

    Args:
        data (FileLike): The file-like object.
        optional (bool): Whether the file is optional. Defaults to False.
        skip_if_missing (bool): Whether to skip the file if it is missing. Defaults to False.

    Example:

        >>> open_as_file(Source.create("categories.json", optional=True))
    """

    data: Optional[FileOrPath]
    optional: bool = False
    skip_if_missing: bool = False

    @classmethod
    def create(cls, input_: Optional[FileOrPath], **kwargs):
        if isinstance(input_, Source):
            return replace(input_, **kwargs)
        return Source(data=input_, **kwargs)


FileLike = Union[FileOrPath, Source]


def _filepath_from_path_or_filelike(file_or_path: FileOrPath) -> str:
    try:
        path = os.fspath(file_or_path)  # type: ignore
    except TypeError:
        path = None

    if isinstance(path, bytes):
        return path.decode()
    if isinstance(path, str):
        return path

    if hasattr(file_or_path, "name"):
        name = file_or_path.name
        if isinstance(name, str):
            return name
        elif isinstance(name, bytes):
            return name.decode()

    return ""


@contextlib.contextmanager
def dummy_context_mgr() -> Generator[None, None, None]:
    yield


def open_as_file(input_: FileLike) -> ContextManager[Optional[BinaryIO]]:
    """Open a byte stream to the given input object.

    The following input types are supported:
        - A string or `pathlib.Path` object representing a local file path.
        - A string representing a URL. It should start with 'http://' or
          'https://'.
        - A json string containing the data. The string should contain
          a '{' or '[' character. Otherwise, it will be treated as a file path.
        - A bytes object containing the data.
        - A buffered binary stream.
        - A [Source](`kioskmap.io.Source`) object that wraps any of the above
          input types.

    Args:
        input_ (FileLike): The input object to be opened.

    Returns:
        BinaryIO: A binary stream to the input object.

    Raises:
        ValueError: If the input is required but not provided.
        InputNotFoundError: If the input file is not found and should not be skipped.
        AdapterError: If no adapter supports the given URI.
        TypeError: If the input type is not supported.

    Example:

        >>> with open_as_file("places.json") as f:
        ...     contents = f.read()
    """
    if isinstance(input_, Source):
        if input_.data is None and input_.optional:
            return dummy_context_mgr()
        elif input_.data is None:
            raise ValueError("Input required but not provided.")
        else:
            try:
                return open_as_file(input_.data)
            except InputNotFoundError as exc:
                if input_.skip_if_missing:
                    logger.info(f"Input {input_.data} not found. Skipping")
                    return dummy_context_mgr()
                else:
                    raise exc

    if isinstance(input_, str) and ("{" in input_ or "[" in input_):
        # If input_ is a JSON string, return it as a binary stream
        return BytesIO(input_.encode("utf8"))

    if isinstance(input_, bytes):
        return BytesIO(input_)

    if isinstance(input_, str) or hasattr(input_, "__fspath__"):
        uri = _filepath_from_path_or_filelike(input_)

        adapter = get_adapter(uri)
        if adapter:
            stream = BytesIO()
            adapter.read_to_stream(uri, stream)
            stream.seek(0)
        else:
            raise AdapterError(f"No adapter found for {uri}")
        return stream

    if isinstance(input_, TextIOWrapper):
        return input_.buffer

    if hasattr(input_, "readinto") or hasattr(input_, "read"):
        return input_  # type: ignore

    raise TypeError(f"Unsupported input type: {type(input_)}")
