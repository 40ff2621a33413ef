import logging
import sys
from typing import Any, Optional, TextIO

from .config import RenderConfig, get_render_config
from .enumerable import IEnum

logger = logging.getLogger(__name__)


def render(enum: IEnum, config: Optional[RenderConfig] = None) -> str:
    """
    write the elements out as "[e0, e1, ...]", or "[]" when there are none.
    this drains `enum`; render a copy if you still need the sequence.
    """
    cfg = config or get_render_config()
    if enum.over():
        return cfg.empty
    parts = [str(enum.current())]
    enum.advance()
    while not enum.over():
        parts.append(str(enum.current()))
        enum.advance()
    return f"{cfg.open}{cfg.separator.join(parts)}{cfg.close}"


def dump(enum: IEnum, stream: Optional[TextIO] = None, config: Optional[RenderConfig] = None) -> str:
    """render to a stream (stdout by default) followed by a newline"""
    text = render(enum, config)
    out = stream if stream is not None else sys.stdout
    out.write(text + '\n')
    return text


def log_enum(enum: IEnum, log: Optional[logging.Logger] = None, level: int = logging.DEBUG,
             label: Optional[str] = None, config: Optional[RenderConfig] = None) -> str:
    """render and send the text through logging"""
    text = render(enum, config)
    target = log or logger
    if label:
        target.log(level, f"{label}: {text}")
    else:
        target.log(level, text)
    return text
