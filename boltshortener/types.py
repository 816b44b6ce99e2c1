from typing import Any
from collections.abc import Callable


# Per-lambda configuration section, keyed by the active backend
type LambdaConfiguration = dict[str, Any]

# Hostname resolution capability: returns True if the hostname resolves
type HostnameResolverFn = Callable[[str], bool]
