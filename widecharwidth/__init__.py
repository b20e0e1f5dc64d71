"""
widecharwidth module.

Classify Unicode codepoints by display width.
"""
# re-export all public functions & definitions, and the private helpers
# used by the lookup table and the tests, from the top-level module path.
#
# This flattens the statement, 'from widecharwidth.widecharwidth import
# classify' into 'from widecharwidth import classify'.

# local
from .widecharwidth import (
    WcWidth,
    classify,
    width_for_version,
    wcwidth,
    UNICODE_VERSION,
    UNICODE_8,
    UNICODE_9,
    PROBE_ORDER,
    _bisearch,
    _classify,
    _wcmatch_version,
    _wcversion_value)
from .lookup import (
    WcLookupTable,
    build_dense_table,
    classify_dense,
    default_table)

# The __all__ attribute defines the items exported from statement,
# 'from widecharwidth import *', but also to say, "This is the public API".
__all__ = ('WcWidth', 'classify', 'width_for_version', 'wcwidth',
           'WcLookupTable', 'build_dense_table', 'classify_dense',
           'default_table', 'UNICODE_8', 'UNICODE_9')
__version__ = '1.0.0'
