import numbers


class GHNormError(Exception):
    pass


class InvalidArgumentError(GHNormError, ValueError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def validate_order(order: object) -> int:
    """Return ``order`` as a plain int, or raise if it is not a positive integer."""
    # bool is an Integral subclass but never a meaningful order
    if isinstance(order, bool) or not isinstance(order, numbers.Integral):
        raise InvalidArgumentError(
            f"Quadrature order must be an integer, got {order!r}"
        )
    if order < 1:
        raise InvalidArgumentError(
            f"Quadrature order must be >= 1, got {order}"
        )
    return int(order)
