"""Temp-file provisioning and lazy line streaming over byte streams."""

from __future__ import annotations

import atexit
import codecs
import io
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import BinaryIO

from mlnutils.constants import (
    DEFAULT_ENCODING,
    DEFAULT_TEMP_SUFFIX,
    TEMP_PREFIX_MIN_LENGTH,
)
from mlnutils.exceptions import StreamDecodeError

logger = logging.getLogger(__name__)

_REGISTERED_PATHS: set[str] = set()
_REGISTRY_LOCK = threading.Lock()


def _register_for_removal(path: str) -> None:
    with _REGISTRY_LOCK:
        _REGISTERED_PATHS.add(path)
    logger.debug("Registered %s for removal at exit", path)


def _remove_registered_files() -> None:
    """Remove every registered temp file, best effort."""
    with _REGISTRY_LOCK:
        paths = sorted(_REGISTERED_PATHS)
        _REGISTERED_PATHS.clear()

    for path in paths:
        try:
            os.remove(path)
        except FileNotFoundError:
            continue
        except OSError as exc:
            logger.warning("Could not remove temp file %s: %s", path, exc)
        else:
            logger.debug("Removed temp file %s", path)


atexit.register(_remove_registered_files)


def create_temp_file(
    prefix: str,
    suffix: str | None = None,
    dir: str | os.PathLike | None = None,
) -> str:
    """Create an empty temp file that is removed when the interpreter exits.

    Parameters
    ----------
    prefix : str
        Start of the file name; must be at least three characters long.
    suffix : str, optional
        End of the file name. ``None`` means ``".tmp"``.
    dir : str or path-like, optional
        Directory to create the file in. Defaults to
        :func:`tempfile.gettempdir`.

    Returns
    -------
    str
        Absolute path of a file that did not exist before the call.

    Raises
    ------
    ValueError
        If ``prefix`` has fewer than three characters.
    OSError
        If the file could not be created.

    Examples
    --------
    >>> path = create_temp_file("weights", ".mln")
    >>> os.path.getsize(path)
    0
    """
    if len(prefix) < TEMP_PREFIX_MIN_LENGTH:
        raise ValueError(
            f"prefix must be at least {TEMP_PREFIX_MIN_LENGTH} characters long, "
            f"got {prefix!r}"
        )
    if suffix is None:
        suffix = DEFAULT_TEMP_SUFFIX

    fd, path = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=dir)
    os.close(fd)
    path = os.path.abspath(path)

    logger.debug("Created temp file %s", path)
    _register_for_removal(path)
    return path


def create_temp_path(
    prefix: str,
    suffix: str | None = None,
    dir: str | os.PathLike | None = None,
) -> Path:
    """Same as :func:`create_temp_file`, returning a :class:`pathlib.Path`."""
    return Path(create_temp_file(prefix, suffix, dir=dir))


class LineStream:
    """Lazy, single-pass iterator over the decoded lines of a byte stream.

    Lines may end in ``\\n``, ``\\r`` or ``\\r\\n``; terminators are stripped.
    The underlying stream is closed exactly once: when iteration is
    exhausted, when reading fails, when :meth:`close` is called or when a
    ``with`` block is left.

    Decoding failures are raised from :func:`next` as
    :class:`~mlnutils.exceptions.StreamDecodeError`, read failures as
    :class:`OSError`.
    """

    def __init__(self, stream: BinaryIO, encoding: str = DEFAULT_ENCODING) -> None:
        self._stream = stream
        self._reader: io.TextIOWrapper | None = None
        self._closed = False
        self.encoding = encoding

        try:
            codecs.lookup(encoding)
            self._reader = io.TextIOWrapper(stream, encoding=encoding, newline=None)
        except Exception as exc:
            self._close_after_failure(exc)
            raise

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> LineStream:
        return self

    def __next__(self) -> str:
        if self._closed:
            raise ValueError("I/O operation on closed line stream")

        try:
            line = self._reader.readline()
        except UnicodeDecodeError as exc:
            error = StreamDecodeError(
                f"malformed input for encoding {self.encoding!r}: {exc.reason}"
            )
            self._close_after_failure(error)
            raise error from exc
        except OSError as exc:
            self._close_after_failure(exc)
            raise

        if not line:
            self.close()
            raise StopIteration
        return line[:-1] if line.endswith("\n") else line

    def close(self) -> None:
        """Release the underlying stream. Further calls do nothing."""
        if self._closed:
            return
        self._closed = True

        # the text wrapper closes the byte stream it wraps
        if self._reader is not None:
            self._reader.close()
        else:
            self._stream.close()

    def _close_after_failure(self, exc: BaseException) -> None:
        try:
            self.close()
        except OSError as close_exc:
            logger.warning("Error while closing line stream after failure: %s", close_exc)
            exc.add_note(f"error while closing the stream: {close_exc!r}")

    def __enter__(self) -> LineStream:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_val is not None:
            self._close_after_failure(exc_val)
        else:
            self.close()


def lines(stream: BinaryIO, encoding: str = DEFAULT_ENCODING) -> LineStream:
    """Read the lines of a byte stream lazily.

    Parameters
    ----------
    stream : binary file-like
        Readable byte stream. Ownership passes to the returned
        :class:`LineStream`, which closes it.
    encoding : str, default="utf-8"
        Codec used to decode the bytes.

    Returns
    -------
    LineStream
        Iterator over the lines, usable as a context manager.

    Raises
    ------
    LookupError
        If ``encoding`` is unknown. The stream is closed first.

    Examples
    --------
    >>> with lines(io.BytesIO(b"a\\r\\nb\\rc")) as it:
    ...     list(it)
    ['a', 'b', 'c']
    """
    return LineStream(stream, encoding)
