class FieldError(Exception):
    pass


class ShapeError(FieldError, ValueError):
    """Coefficient count does not match the degree of the extension field."""


class FieldTypeMismatch(FieldError, TypeError):
    """Operands belong to different field types."""


class NonResidueError(FieldError, ValueError):
    """Square root requested for a quadratic non-residue."""
