"""Message values and their English rendering.

Help text and failures are described as :class:`MessageValue` objects: a
message key plus typed parameters. Rendering to text is done separately by
a :class:`MessageFormatter`, so callers that localize can supply their own
catalog.

Example:
    >>> msg = (
    ...     MessageValue.new("paramvalidator-help-type-user")
    ...     .params(1)
    ...     .text_list_params([MessageValue.new("paramvalidator-help-type-user-subtype-ip")])
    ...     .num_params(1)
    ... )
    >>> MessageFormatter().format(msg)
    'Type: user, by IP'
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from pydantic import Field

from userparam.models import UserParamBaseModel

ParamKind = Literal["text", "num", "list"]


class MessageParam(UserParamBaseModel):
    """A single message parameter.

    ``value`` is a scalar for ``text`` and ``num`` parameters, and a list of
    strings or nested messages for ``list`` parameters.
    """

    kind: ParamKind
    value: Any


class MessageValue(UserParamBaseModel):
    """A message key with its parameters.

    Instances are immutable; the builder methods return new instances.
    """

    key: str
    params_list: list[MessageParam] = Field(default_factory=list)

    @classmethod
    def new(cls, key: str, params: Iterable[Any] = ()) -> MessageValue:
        return cls(key=key).params(*params)

    def _with(self, kind: ParamKind, values: Iterable[Any]) -> MessageValue:
        added = [MessageParam(kind=kind, value=v) for v in values]
        return self.model_copy(update={"params_list": [*self.params_list, *added]})

    def params(self, *values: Any) -> MessageValue:
        return self._with("text", values)

    def num_params(self, *values: int | float) -> MessageValue:
        return self._with("num", values)

    def text_list_params(self, *lists: Iterable[str | MessageValue]) -> MessageValue:
        return self._with("list", [list(items) for items in lists])


class DataMessageValue(MessageValue):
    """A message that also carries a machine-readable code and data."""

    code: str
    data: dict[str, Any] | None = None

    @classmethod
    def new_failure(
        cls, code: str, params: Iterable[Any] = (), data: Mapping[str, Any] | None = None
    ) -> DataMessageValue:
        msg = cls(
            key=f"paramvalidator-{code}",
            code=code,
            data=dict(data) if data is not None else None,
        )
        return msg.params(*params)  # type: ignore[return-value]


# English catalog. $N refers to the Nth message parameter.
ENGLISH_MESSAGES: dict[str, str] = {
    "paramvalidator-help-type-user": (
        "{{PLURAL:$1|Type: user|Type: list of users}}, by {{PLURAL:$3|$2|any of $2}}"
    ),
    "paramvalidator-help-type-user-subtype-name": "user name",
    "paramvalidator-help-type-user-subtype-ip": "IP",
    "paramvalidator-help-type-user-subtype-cidr": "IP range",
    "paramvalidator-help-type-user-subtype-interwiki": 'interwiki name (e.g. "prefix>ExampleName")',
    "paramvalidator-help-type-user-subtype-id": 'user ID (e.g. "#12345")',
    "paramvalidator-help-multi-sep": "Separate values with | or alternative.",
    "paramvalidator-help-multi-max": "Maximum number of values is $1 ($2 for clients that are allowed higher limits).",
    "paramvalidator-baduser": 'Invalid value "$2" for user parameter "$1".',
    "paramvalidator-badvalue": 'Invalid value "$2" for parameter "$1".',
    "paramvalidator-missingparam": 'The "$1" parameter must be set.',
    "paramvalidator-toomanyvalues": 'Too many values supplied for parameter "$1". The limit is $2.',
}

_PLACEHOLDER = re.compile(r"\$(\d+)")
_PLURAL = re.compile(r"\{\{PLURAL:\$(\d+)\|([^|}]*)\|([^}]*)\}\}")


class MessageFormatter:
    """Render :class:`MessageValue` objects using a message catalog.

    Args:
        messages: Key to template mapping. Defaults to :data:`ENGLISH_MESSAGES`.
    """

    def __init__(self, messages: Mapping[str, str] | None = None):
        self.messages = dict(ENGLISH_MESSAGES if messages is None else messages)

    def format(self, message: MessageValue) -> str:
        template = self.messages.get(message.key)
        if template is None:
            return f"⧼{message.key}⧽"

        rendered = [self._render_param(p) for p in message.params_list]
        raw = [p.value for p in message.params_list]

        def plural(match: re.Match[str]) -> str:
            index = int(match.group(1)) - 1
            count = raw[index] if 0 <= index < len(raw) else None
            return match.group(2) if _as_number(count) == 1 else match.group(3)

        text = _PLURAL.sub(plural, template)

        def substitute(match: re.Match[str]) -> str:
            index = int(match.group(1)) - 1
            return rendered[index] if 0 <= index < len(rendered) else match.group(0)

        return _PLACEHOLDER.sub(substitute, text)

    def _render_param(self, param: MessageParam) -> str:
        if param.kind == "num":
            return f"{param.value:,}"
        if param.kind == "list":
            return self.list_to_text(
                self.format(v) if isinstance(v, MessageValue) else str(v) for v in param.value
            )
        if isinstance(param.value, MessageValue):
            return self.format(param.value)
        return str(param.value)

    @staticmethod
    def list_to_text(items: Iterable[str]) -> str:
        """Join items as English prose: ``a``, ``a and b``, ``a, b and c``."""
        items = list(items)
        if len(items) <= 1:
            return "".join(items)
        return f"{', '.join(items[:-1])} and {items[-1]}"


def _as_number(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
