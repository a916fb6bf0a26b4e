"""Transformer that stamps a parse mode into outgoing API payloads.

Callers configure the parse mode once and every eligible call gets it,
instead of passing ``parse_mode`` on each request. Most methods take a
top-level ``parse_mode`` field, but a few need special handling:

- sendPoll uses ``question_parse_mode`` and ``explanation_parse_mode``.
- answerInlineQuery carries one parse mode per inline result, plus one on
  each result's ``input_message_content`` when it holds text.
- editMessageMedia and sendMediaGroup only take a parse mode on media
  objects that actually carry a caption.

The caller's payload is never written to. Each rule copies whatever it
modifies, so other holders of the original payload see no changes.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from parse_mode_setter.enums import APIMethod
from parse_mode_setter.telegram.payload import Payload
from parse_mode_setter.transformers.base import APICaller, Transformer
from parse_mode_setter.transformers.config import ParseModeSetterConfig

logger = logging.getLogger(__name__)

PARSE_MODE_FIELD = "parse_mode"
QUESTION_PARSE_MODE_FIELD = "question_parse_mode"
EXPLANATION_PARSE_MODE_FIELD = "explanation_parse_mode"

# Inline query result types that accept a caption parse mode
INLINE_RESULT_TYPES_WITH_CAPTION = frozenset(
    {"voice", "audio", "video", "photo", "mpeg4_gif", "gif", "document"}
)

Rule = Callable[[dict[str, Any], ParseModeSetterConfig], None]


def _set_poll_parse_modes(params: dict[str, Any], config: ParseModeSetterConfig) -> None:
    if config.set_explanation_parse_mode:
        params[EXPLANATION_PARSE_MODE_FIELD] = config.parse_mode.value
    if config.set_question_parse_mode:
        params[QUESTION_PARSE_MODE_FIELD] = config.parse_mode.value


def _stamp_inline_result(result: Any, parse_mode: str) -> Any:
    """Return a copy of one inline query result with its parse modes set.

    Results that are not mappings, or that need no change, are returned as-is.
    """
    if not isinstance(result, Mapping):
        return result

    stamped = result
    result_type = result.get("type")
    if isinstance(result_type, str) and result_type in INLINE_RESULT_TYPES_WITH_CAPTION:
        stamped = dict(result)
        stamped[PARSE_MODE_FIELD] = parse_mode

    content = result.get("input_message_content")
    if isinstance(content, Mapping) and content.get("message_text") is not None:
        if stamped is result:
            stamped = dict(result)
        stamped["input_message_content"] = {**content, PARSE_MODE_FIELD: parse_mode}

    return stamped


def _set_inline_query_parse_modes(
    params: dict[str, Any], config: ParseModeSetterConfig
) -> None:
    results = params.get("results")
    if not isinstance(results, list):
        return
    params["results"] = [
        _stamp_inline_result(result, config.parse_mode.value) for result in results
    ]


def _has_caption(media: Any) -> bool:
    return isinstance(media, Mapping) and media.get("caption") is not None


def _set_edit_media_parse_mode(params: dict[str, Any], config: ParseModeSetterConfig) -> None:
    media = params.get("media")
    # Without a caption there is nothing for the parse mode to apply to
    if _has_caption(media):
        params["media"] = {**media, PARSE_MODE_FIELD: config.parse_mode.value}


def _set_media_group_parse_modes(
    params: dict[str, Any], config: ParseModeSetterConfig
) -> None:
    media = params.get("media")
    if not isinstance(media, list):
        return
    params["media"] = [
        {**item, PARSE_MODE_FIELD: config.parse_mode.value} if _has_caption(item) else item
        for item in media
    ]


def _set_parse_mode(params: dict[str, Any], config: ParseModeSetterConfig) -> None:
    params[PARSE_MODE_FIELD] = config.parse_mode.value


RULES: dict[APIMethod, Rule] = {
    APIMethod.SEND_POLL: _set_poll_parse_modes,
    APIMethod.ANSWER_INLINE_QUERY: _set_inline_query_parse_modes,
    APIMethod.EDIT_MESSAGE_MEDIA: _set_edit_media_parse_mode,
    APIMethod.SEND_MEDIA_GROUP: _set_media_group_parse_modes,
}


class ParseModeSetter(Transformer):
    """Sets the configured parse mode on eligible outgoing API calls."""

    def __init__(self, config: ParseModeSetterConfig) -> None:
        """Initialise the transformer.

        :param config: Parse mode and method eligibility settings.
        """
        self._config = config

    @property
    def config(self) -> ParseModeSetterConfig:
        """Get the transformer configuration."""
        return self._config

    @property
    def description(self) -> str:
        """Human-readable summary used in logs and registry errors."""
        return f"Sets parse mode {self._config.parse_mode} for text formatting in API calls"

    def apply(self, method: APIMethod, payload: Payload | None) -> Payload | None:
        """Return the payload with the parse mode applied for this method.

        :param method: The API method being invoked.
        :param payload: The outgoing payload. Never modified in place.
        :returns: The original payload when the method is not eligible,
            otherwise a new payload carrying the parse mode.
        """
        if not self._config.is_eligible(method):
            logger.debug(f"Skipping parse mode: method={method} is not eligible")
            return payload

        if payload is None:
            return payload

        modified = payload.copy()
        rule = RULES.get(method, _set_parse_mode)
        rule(modified.params, self._config)
        logger.debug(
            f"Applied parse mode: method={method}, rule={rule.__name__}, "
            f"parse_mode={self._config.parse_mode}"
        )
        return modified

    def transform(
        self,
        call: APICaller,
        method: APIMethod,
        payload: Payload | None = None,
    ) -> dict[str, Any]:
        """Apply the parse mode and forward the call.

        :param call: The next link of the chain.
        :param method: The API method being invoked.
        :param payload: The request payload, if any.
        :returns: The result of ``call``, unmodified.
        """
        return call(method, self.apply(method, payload))
