import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for storing short URL mappings.

    An optional prefix can be provided to namespace all generated keys.
    It is highly encouraged to set a custom prefix for each app and environment,
    e.g. "boltshortener:prod" or "boltshortener:dev".

    Keys:
        links:<shortcode>   hash {target, created_at} for a single mapping
        links:targets       hash {<original url>: <shortcode>} (uniqueness index)
        links:index         sorted set of shortcodes (score = shortcode)
        links:counter       highest shortcode assigned so far
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def link_key(self, shortcode: int) -> str:
        return f'links:{shortcode}'

    @prefix_key
    def link_targets_key(self) -> str:
        return 'links:targets'

    @prefix_key
    def link_index_key(self) -> str:
        return 'links:index'

    @prefix_key
    def counter_key(self) -> str:
        return 'links:counter'
