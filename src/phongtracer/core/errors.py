# core/errors.py


class GeometryError(ValueError):
    """
    Base class for precondition violations of the geometry types.
    These are programmer errors: the caller passed invalid input.
    """


class InvalidTupleCombinationError(GeometryError):
    """Adding two points, or subtracting a point from a vector."""


class DegenerateVectorError(GeometryError):
    """Normalizing a tuple whose magnitude is zero."""


class WrongOperandKindError(GeometryError):
    """A vector-only operation (cross, reflect) received a point."""


class DimensionMismatchError(GeometryError):
    """Matrix rows don't match the declared size of the matrix."""


class MalformedPointLightError(GeometryError):
    """A point light positioned at something other than a point."""


class MalformedRayError(GeometryError):
    """A ray whose origin isn't a point or whose direction isn't a vector."""


class SingularMatrixError(ArithmeticError):
    """Raised by the checked inversion when the determinant is zero."""
