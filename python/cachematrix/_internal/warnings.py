"""cachematrix warning categories.

A CachedMatrix accepts non-square input and only warns about it; the
inversion itself fails later. ``CacheMatrixShapeWarning`` carries that
notice, and ``CacheMatrixWarning`` lets callers filter everything the
package emits in one go.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixShapeWarning(CacheMatrixWarning):
    """Stored matrix is not square; resolving its inverse will fail."""
