"""
log.py.

Does: Topic-gated trace lines for the hot paths (parser, registry, completion).
Lines go to the `css_var_index.trace` logger, so they reach whatever handlers
the host configured. Topics come from CSS_VAR_INDEX_TRACE (comma-sep or 'all')
or from enable_topics() (the CLI's --trace flag).
"""

import logging
import os

__all__ = ["TRACE_LOGGER", "trace", "enable_topics", "reload_topics", "topic_enabled"]

ENV_VAR = "CSS_VAR_INDEX_TRACE"
TRACE_LOGGER = logging.getLogger("css_var_index.trace")

_topics: frozenset[str] = frozenset()


def _split(raw: str) -> frozenset[str]:
    return frozenset(t.strip().lower() for t in raw.split(",") if t.strip())


def _apply(topics: frozenset[str]) -> None:
    global _topics
    _topics = topics
    # NOTSET defers to the parent chain; an explicit DEBUG lets traces through a WARNING root
    TRACE_LOGGER.setLevel(logging.DEBUG if topics else logging.NOTSET)


def reload_topics() -> None:
    """Does: Replace the active topics with those in CSS_VAR_INDEX_TRACE."""
    _apply(_split(os.getenv(ENV_VAR, "")))


def enable_topics(*topics: str) -> None:
    """Does: Switch extra topics on (accepts comma-joined strings too)."""
    _apply(_topics | _split(",".join(topics)))


def topic_enabled(topic: str) -> bool:
    return "all" in _topics or topic.lower() in _topics


def trace(topic: str, msg: str, *args: object) -> None:
    """Does: Log `msg % args` at DEBUG, prefixed with the topic, when that topic is on."""
    if topic_enabled(topic):
        TRACE_LOGGER.debug("[%s] " + msg, topic, *args)


reload_topics()
