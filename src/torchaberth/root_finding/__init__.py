from ._aberth import aberth
from ._aberth_parallel import aberth_parallel
from ._aberth_update import aberth_update
from ._initial_aberth import initial_aberth
from ._options import AberthOptions

__all__ = [
    "AberthOptions",
    "aberth",
    "aberth_parallel",
    "aberth_update",
    "initial_aberth",
]
