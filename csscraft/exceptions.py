"""Custom exceptions for csscraft."""


class CsscraftError(Exception):
    """Base class for all csscraft exceptions."""

    pass


class SelectorBuildError(CsscraftError):
    """Raised when a selector part cannot be added to a compound selector."""

    def __init__(self, message: str, part: int):
        """Initialize builder error.

        Args:
            message: Human readable description of the violated rule
            part: Ordinal of the selector part that was rejected

        """
        self.part = part
        super().__init__(message)


class OccurrenceError(SelectorBuildError):
    """Raised when element, id or pseudo-element is set a second time."""

    MESSAGE = 'Element, id and pseudo-element should not occur more than one time inside the selector.'

    def __init__(self, part: int):
        super().__init__(self.MESSAGE, part)


class OrderError(SelectorBuildError):
    """Raised when a selector part is added after a part that must follow it."""

    MESSAGE = (
        'Selector parts should be arranged in the following order: '
        'element, id, class, attribute, pseudo-class, pseudo-element.'
    )

    def __init__(self, part: int, current: int):
        """Initialize order error.

        Args:
            part: Ordinal of the requested selector part
            current: Highest ordinal already reached by the selector

        """
        self.current = current
        super().__init__(self.MESSAGE, part)


class SerializationError(CsscraftError, TypeError):
    """Raised when an object has no JSON representation."""

    pass


class DeserializationError(CsscraftError, ValueError):
    """Raised when JSON text cannot be turned into the requested type."""

    def __init__(self, target: type, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f'Cannot load {target.__name__} from JSON: {reason}')
