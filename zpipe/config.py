from dataclasses import dataclass, replace, asdict
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    """how an enumerator is written out as text"""
    open: str = '['
    close: str = ']'
    separator: str = ', '
    empty: str = '[]'


_render_config = RenderConfig()


def get_render_config() -> RenderConfig:
    return _render_config


def configure_render(**changes) -> RenderConfig:
    """replace fields of the module-wide render config; returns the new config."""
    global _render_config
    _render_config = replace(_render_config, **changes)
    logger.debug(f"render config: {asdict(_render_config)}")
    return _render_config


def reset_render() -> RenderConfig:
    """back to the defaults"""
    global _render_config
    _render_config = RenderConfig()
    return _render_config
