r"""
'  ____ ___ ___ ___ ___
'   / /| _ \_ _| _ \ __|
'  / /_|  _/| ||  _/ _|
' /___|_| |___|_| |___|
'
' lazy, single-pass enumerators you pull from and pipe together:
'     irange(10) | iwhere(is_even) | iselect(square) | isum()
"""

# expose the protocol and chaining
from .enumerable import IEnum, pipe

# expose the sources
from .factories import (
    StdEnum,
    IterEnum,
    RepeatEnum,
    RangeEnum,
    ifrom,
    irepeat,
    irange,
)

# expose the transformations
from .transforms import (
    SelectEnum,
    WhereEnum,
    Select,
    Where,
    iselect,
    iwhere,
)

# expose the terminals
from .extensions.terminal import (
    ToVector,
    ToArray,
    ToSeries,
    to_vector,
    to_array,
    to_series,
    Aggregate,
    Aggregate2,
    iaggregate,
    iaggregate2,
    Max,
    Min,
    Sum,
    Count,
    Concat,
    All,
    Any,
    imax,
    imin,
    isum,
    icount,
    iconcat,
    iall,
    iany,
)

# expose rendering, config and errors
from .render import render, dump, log_enum
from .config import RenderConfig, configure_render, get_render_config, reset_render
from .errors import ZPipeError, PreconditionViolation, ContractViolation, require

# define what `import *` does
__all__ = [
    "IEnum", "pipe",
    "StdEnum", "IterEnum", "RepeatEnum", "RangeEnum",
    "ifrom", "irepeat", "irange",
    "SelectEnum", "WhereEnum", "Select", "Where", "iselect", "iwhere",
    "ToVector", "ToArray", "ToSeries", "to_vector", "to_array", "to_series",
    "Aggregate", "Aggregate2", "iaggregate", "iaggregate2",
    "Max", "Min", "Sum", "Count", "Concat", "All", "Any",
    "imax", "imin", "isum", "icount", "iconcat", "iall", "iany",
    "render", "dump", "log_enum",
    "RenderConfig", "configure_render", "get_render_config", "reset_render",
    "ZPipeError", "PreconditionViolation", "ContractViolation", "require",
]
