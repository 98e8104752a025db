"""Standard-library :mod:`json` hooks for epoch timestamps.

Encoding writes :class:`~pyepoch.Instant` values as bare millisecond
numerals. Decoding captures every number as its literal text so timestamp
fields reach the codec exactly as written; all other numbers come back as
``json`` would have produced them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from typing import IO, Any

from pyepoch._codec import DEFAULT_CODEC, TimestampCodec, encode_int
from pyepoch._errors import (
    ERR_MSG_INVALID_SYNTAX,
    ERR_MSG_NOT_A_NUMERAL,
    DocumentDecodeError,
    EpochError,
    NumeralParseError,
)
from pyepoch._instant import Instant

__all__ = [
    "EpochJSONDecoder",
    "EpochJSONEncoder",
    "dump",
    "dumps",
    "load",
    "loads",
]

logger = logging.getLogger(__name__)


class _IntLiteral(str):
    """Raw text of a JSON integer literal."""


class _FloatLiteral(str):
    """Raw text of a JSON number with a fraction or exponent."""


class EpochJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes instants as bare epoch numerals."""

    def __init__(self, *, codec: TimestampCodec = DEFAULT_CODEC, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.codec = codec

    def default(self, o: Any) -> Any:
        if isinstance(o, Instant):
            # json renders ints verbatim, so the codec's numeral passes through
            return encode_int(self.codec, o)
        return super().default(o)


class EpochJSONDecoder(json.JSONDecoder):
    """JSON decoder that decodes the values of ``fields`` as timestamps.

    Args:
        fields: Object keys whose values are epoch numerals.
        codec: Codec used for those values. Defaults to the standard codec.
        **kwargs: Forwarded to :class:`json.JSONDecoder`. ``parse_int``,
            ``parse_float``, ``object_hook`` and ``object_pairs_hook`` are
            honored for non-timestamp values.
    """

    def __init__(
        self,
        *,
        fields: Iterable[str],
        codec: TimestampCodec = DEFAULT_CODEC,
        **kwargs: Any,
    ) -> None:
        self.fields = frozenset(fields)
        self.codec = codec
        self._parse_int: Callable[[str], Any] = kwargs.pop("parse_int", None) or int
        self._parse_float: Callable[[str], Any] = kwargs.pop("parse_float", None) or float
        self._object_hook: Callable[[dict[str, Any]], Any] | None = kwargs.pop("object_hook", None)
        self._object_pairs_hook: Callable[[list[tuple[str, Any]]], Any] | None = kwargs.pop(
            "object_pairs_hook", None
        )
        super().__init__(
            parse_int=_IntLiteral,
            parse_float=_FloatLiteral,
            object_pairs_hook=self._build_object,
            **kwargs,
        )

    def raw_decode(self, s: str, idx: int = 0) -> tuple[Any, int]:
        # decode() goes through here too
        obj, end = super().raw_decode(s, idx)
        return self._restore(obj), end

    def _build_object(self, pairs: list[tuple[str, Any]]) -> Any:
        converted = [
            (key, self._decode_field(key, value) if key in self.fields else self._restore(value))
            for key, value in pairs
        ]
        if self._object_pairs_hook is not None:
            return self._object_pairs_hook(converted)
        obj = dict(converted)
        if self._object_hook is not None:
            return self._object_hook(obj)
        return obj

    def _decode_field(self, key: str, value: Any) -> Instant | None:
        if value is None:
            return None
        if not isinstance(value, (_IntLiteral, _FloatLiteral)):
            cause = NumeralParseError(
                ERR_MSG_INVALID_SYNTAX,
                f"expected a bare numeral, got {type(value).__name__}",
            )
            raise DocumentDecodeError(
                ERR_MSG_NOT_A_NUMERAL,
                f"field {key!r}: {cause.internal()}",
                wrapped=cause,
                field=key,
            ) from cause
        try:
            return self.codec.decode(str(value).encode("ascii"))
        except EpochError as e:
            logger.debug("field %r failed to decode: %s", key, e.internal())
            raise DocumentDecodeError(
                e.user_message,
                f"field {key!r}: {e.internal()}",
                wrapped=e,
                field=key,
            ) from e

    def _restore(self, value: Any) -> Any:
        if isinstance(value, _IntLiteral):
            return self._parse_int(str(value))
        if isinstance(value, _FloatLiteral):
            return self._parse_float(str(value))
        if isinstance(value, list):
            return [self._restore(item) for item in value]
        # objects were restored as they were built
        return value


def dumps(obj: Any, *, codec: TimestampCodec = DEFAULT_CODEC, **kwargs: Any) -> str:
    """Serialize ``obj`` to JSON, writing instants as epoch numerals."""
    kwargs.setdefault("cls", EpochJSONEncoder)
    return json.dumps(obj, codec=codec, **kwargs)


def dump(obj: Any, fp: IO[str], *, codec: TimestampCodec = DEFAULT_CODEC, **kwargs: Any) -> None:
    kwargs.setdefault("cls", EpochJSONEncoder)
    json.dump(obj, fp, codec=codec, **kwargs)


def loads(
    s: str | bytes | bytearray,
    *,
    fields: Iterable[str],
    codec: TimestampCodec = DEFAULT_CODEC,
    **kwargs: Any,
) -> Any:
    """Deserialize JSON, decoding the values of ``fields`` as timestamps.

    Raises:
        DocumentDecodeError: If a timestamp field is not a valid numeral.
        json.JSONDecodeError: If the document itself is malformed.
    """
    kwargs.setdefault("cls", EpochJSONDecoder)
    return json.loads(s, fields=fields, codec=codec, **kwargs)


def load(
    fp: IO[str],
    *,
    fields: Iterable[str],
    codec: TimestampCodec = DEFAULT_CODEC,
    **kwargs: Any,
) -> Any:
    return loads(fp.read(), fields=fields, codec=codec, **kwargs)
