"""Error types raised throughout the kernel."""

from __future__ import annotations

from typing import Iterable


class Fault(Exception):
    """A validation problem tied to one field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(field, message)
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return f"lỗi trường '{self.field}': {self.message}"

    def __repr__(self) -> str:
        return f"Fault(field={self.field!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fault):
            return NotImplemented
        return (self.field, self.message) == (other.field, other.message)

    def __hash__(self) -> int:
        return hash((self.field, self.message))


class KernelError(Exception):
    """Base class of every error the kernel raises."""

    default_message = "lỗi hệ thống"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class _WrappedError(KernelError):
    """An error that carries the underlying cause in its message."""

    prefix = ""

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(f"{self.prefix}: {source}")


class MissingError(KernelError):
    """A requested item does not exist."""

    default_message = "mục không tìm thấy"


class ValidationError(KernelError):
    """Input was rejected; holds the faults found."""

    default_message = "dữ liệu không hợp lệ"

    def __init__(self, faults: Iterable[Fault] = ()) -> None:
        super().__init__()
        self.faults = list(faults)


class StoreError(_WrappedError):
    """Failure in the storage backend."""

    prefix = "lỗi lưu trữ"


class FormatError(_WrappedError):
    """Failure while encoding or decoding binary data."""

    prefix = "lỗi định dạng"


class AbortedError(KernelError):
    """A transaction was aborted."""

    default_message = "giao dịch bị hủy bỏ"


class JoinError(_WrappedError):
    """A background task failed to complete."""

    prefix = "lỗi tác vụ bất đồng bộ"


class ConnectionTimeout(KernelError, TimeoutError):
    """An operation did not finish in time."""

    default_message = "kết nối bị timeout"


class PoolError(KernelError):
    """No connection could be taken from the pool."""

    default_message = "không thể lấy kết nối từ pool"


class CacheError(KernelError):
    """The cache is full."""

    default_message = "cache bị đầy"


class MetricError(KernelError):
    """A metric operation was invalid."""

    default_message = "metric không hợp lệ"


class IoError(_WrappedError):
    """Operating-system input/output failure."""

    prefix = "lỗi io"


class CsvError(_WrappedError):
    """Failure while reading or writing CSV."""

    prefix = "lỗi csv"


class JsonError(_WrappedError):
    """Failure while reading or writing JSON."""

    prefix = "lỗi json"


class ParseError(_WrappedError):
    """Failure while parsing text."""

    prefix = "lỗi phân tích cú pháp"


def parse_error(err: object) -> ParseError:
    """Turn an external parsing error into a :class:`ParseError`."""
    error = ParseError(str(err))
    if isinstance(err, BaseException):
        error.__cause__ = err
    return error