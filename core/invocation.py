"""
Invocation request and result types for scripts.run.

InvocationRequest builds the exact URL and query string sent to the
Apps Script API. RunResult is an explicit success/failure union; the
tool surface converts it to the wire shape with to_payload().
"""
from dataclasses import dataclass, field
from typing import Any, ClassVar

from config import (
    SCRIPT_API_BASE_URL,
    SCRIPT_RUN_PATH,
    FIXED_QUERY_PARAMS,
    OPTIONAL_QUERY_PARAMS,
    DEFAULT_ALT,
    DEFAULT_PRETTY_PRINT,
)
from lib.common import stringify_bool
from lib.types import ErrorDetails, ErrorRecord, QueryParams, RawError, ResponseBody


@dataclass(frozen=True)
class InvocationRequest:
    """Parameters of one scripts.run call. Only script_id is required."""

    script_id: str
    fields: str | None = None
    alt: str = DEFAULT_ALT
    key: str | None = None
    access_token: str | None = None
    oauth_token: str | None = None
    quota_user: str | None = None
    pretty_print: bool = DEFAULT_PRETTY_PRINT

    # wire name -> attribute name
    WIRE_NAMES: ClassVar[dict[str, str]] = {
        "scriptId": "script_id",
        "fields": "fields",
        "alt": "alt",
        "key": "key",
        "access_token": "access_token",
        "oauth_token": "oauth_token",
        "quotaUser": "quota_user",
        "prettyPrint": "pretty_print",
    }

    @classmethod
    def from_args(cls, **kwargs: Any) -> "InvocationRequest":
        """
        Build a request from tool arguments using the wire (camelCase) names.
        Snake_case attribute names are accepted too. Unknown keys raise TypeError.
        """
        attrs: dict[str, Any] = {}
        for name, value in kwargs.items():
            attr = cls.WIRE_NAMES.get(name, name)
            if attr not in cls.WIRE_NAMES.values():
                raise TypeError(f"unexpected argument: {name}")
            attrs[attr] = value
        if attrs.get("alt") is None:
            attrs.pop("alt", None)
        if attrs.get("pretty_print") is None:
            attrs.pop("pretty_print", None)
        return cls(**attrs)

    @property
    def url(self) -> str:
        """Target URL without query string."""
        return SCRIPT_API_BASE_URL + SCRIPT_RUN_PATH.format(script_id=self.script_id)

    def query_params(self, omit_unset: bool = False) -> QueryParams:
        """
        Ordered query parameters.

        Unset optional values are sent as empty strings so that every key is
        always present, unless omit_unset is True. The fixed parameters are
        appended regardless of input.
        """
        params: QueryParams = []
        for name in OPTIONAL_QUERY_PARAMS:
            value = getattr(self, self.WIRE_NAMES[name])
            if value is None:
                if omit_unset:
                    continue
                value = ""
            params.append((name, value))
        params.append(("prettyPrint", stringify_bool(self.pretty_print)))
        params.extend(FIXED_QUERY_PARAMS)
        return params


@dataclass(frozen=True)
class ScriptRunSuccess:
    """Decoded response body, untouched."""

    data: ResponseBody
    status_code: int = 200
    ok: ClassVar[bool] = True

    def to_payload(self) -> ResponseBody:
        return self.data


@dataclass(frozen=True)
class ScriptRunFailure:
    """Structured failure. to_payload() yields the Error Record."""

    message: str
    details: ErrorDetails
    raw_error: RawError
    exception: BaseException | None = field(default=None, compare=False, repr=False)
    ok: ClassVar[bool] = False

    @property
    def error_type(self) -> str:
        return self.details["errorType"]

    def to_payload(self) -> ErrorRecord:
        return {
            "error": True,
            "message": self.message,
            "details": dict(self.details),  # type: ignore[typeddict-item]
            "rawError": dict(self.raw_error),  # type: ignore[typeddict-item]
        }


RunResult = ScriptRunSuccess | ScriptRunFailure
