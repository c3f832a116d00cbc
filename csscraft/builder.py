"""CSS selector builder.

A compound selector is built one part at a time:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              can occur several times

Each call returns a new frozen ``CompoundSelector`` so a partially built
selector can be reused as the base of several others. Compound selectors are
joined into chains with ``combine``.

Example:
    >>> builder = css_selector_builder
    >>> builder.id('main').class_('container').class_('editable').stringify()
    '#main.container.editable'
    >>> builder.combine(
    ...     builder.element('div').id('main'),
    ...     '+',
    ...     builder.element('table').id('data'),
    ... ).stringify()
    'div#main + table#data'

"""

import logging
from enum import Enum, IntEnum
from typing import Any

import logfire
from pydantic import BaseModel, ConfigDict, Field

from csscraft.exceptions import OccurrenceError, OrderError

logger = logging.getLogger(__name__)


class SelectorPart(IntEnum):
    """Categories of a compound selector, in the order CSS requires them."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def singleton(self) -> bool:
        """Whether the part may appear at most once in a compound selector."""
        return self in (SelectorPart.ELEMENT, SelectorPart.ID, SelectorPart.PSEUDO_ELEMENT)

    @property
    def label(self) -> str:
        """Human readable name used in error logs and tables."""
        return self.name.lower().replace('_', '-')

    def render(self, value: Any) -> str:
        """Render a single value as this part's selector token."""
        return _TEMPLATES[self].format(value)


_TEMPLATES = {
    SelectorPart.ELEMENT: '{}',
    SelectorPart.ID: '#{}',
    SelectorPart.CLASS: '.{}',
    SelectorPart.ATTRIBUTE: '[{}]',
    SelectorPart.PSEUDO_CLASS: ':{}',
    SelectorPart.PSEUDO_ELEMENT: '::{}',
}


class Combinator(str, Enum):
    """Standard combinators between two selectors."""

    DESCENDANT = ' '
    CHILD = '>'
    NEXT_SIBLING = '+'
    SUBSEQUENT_SIBLING = '~'


class CompoundSelector(BaseModel):
    """Immutable snapshot of a (possibly partially built) selector.

    Attributes:
        parts: Accumulated selector text per part
        last_part: Highest part ordinal populated so far (0 if none)
        prefix: Text finalized by earlier ``combine`` calls, rendered first
        combined: True once this value was produced by ``combine``

    """

    model_config = ConfigDict(frozen=True)

    parts: dict[SelectorPart, str] = Field(default_factory=dict)
    last_part: int = 0
    prefix: str = ''
    combined: bool = False

    def element(self, value: Any) -> 'CompoundSelector':
        """Return a copy with the element (type) selector set."""
        return self._add(SelectorPart.ELEMENT, value)

    def id(self, value: Any) -> 'CompoundSelector':
        """Return a copy with the id selector set."""
        return self._add(SelectorPart.ID, value)

    def class_(self, value: Any) -> 'CompoundSelector':
        """Return a copy with one more class selector appended."""
        return self._add(SelectorPart.CLASS, value)

    def attr(self, value: Any) -> 'CompoundSelector':
        """Return a copy with one more attribute selector appended.

        Args:
            value: Attribute expression without brackets, e.g. ``'href$=".png"'``

        """
        return self._add(SelectorPart.ATTRIBUTE, value)

    def pseudo_class(self, value: Any) -> 'CompoundSelector':
        """Return a copy with one more pseudo-class appended."""
        return self._add(SelectorPart.PSEUDO_CLASS, value)

    def pseudo_element(self, value: Any) -> 'CompoundSelector':
        """Return a copy with the pseudo-element set."""
        return self._add(SelectorPart.PSEUDO_ELEMENT, value)

    def check_occurrence(self, part: SelectorPart) -> None:
        """Reject a second element, id or pseudo-element.

        Raises:
            OccurrenceError: If ``part`` is a singleton that is already set.

        """
        if part.singleton and part in self.parts:
            logfire.warn('Selector part repeated', part=part.label, selector=self.stringify())
            logger.warning(f'Rejected repeated {part.label} in "{self.stringify()}"')
            raise OccurrenceError(part)

    def check_order(self, part: SelectorPart) -> None:
        """Reject a part that belongs before the highest part reached so far.

        Repeating the current part is allowed; accumulating parts rely on it.

        Raises:
            OrderError: If ``part`` ranks below ``last_part``.

        """
        if part < self.last_part:
            logfire.warn(
                'Selector part out of order',
                part=part.label,
                current=SelectorPart(self.last_part).label,
                selector=self.stringify(),
            )
            logger.warning(
                f'Rejected {part.label} after {SelectorPart(self.last_part).label} in "{self.stringify()}"'
            )
            raise OrderError(part, self.last_part)

    def _add(self, part: SelectorPart, value: Any) -> 'CompoundSelector':
        self.check_occurrence(part)
        self.check_order(part)

        parts = dict(self.parts)
        parts[part] = parts.get(part, '') + part.render(value)
        return self.model_copy(update={'parts': parts, 'last_part': int(part)})

    def stringify(self) -> str:
        """Render the selector, including any text attached by ``combine``."""
        own = ''.join(self.parts.get(part, '') for part in SelectorPart)
        return f'{self.prefix}{own}'

    def __str__(self) -> str:
        return self.stringify()

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.parts.items())), self.last_part, self.prefix, self.combined))

    @staticmethod
    def combine(left: 'CompoundSelector', combinator: Combinator | str, right: 'CompoundSelector') -> 'CompoundSelector':
        """Join two selectors with a combinator. See :func:`combine`."""
        return combine(left, combinator, right)


def combine(left: CompoundSelector, combinator: Combinator | str, right: CompoundSelector) -> CompoundSelector:
    """Join two selectors with a combinator.

    ``left`` is rendered immediately and the text ``'<left> <combinator> '`` is
    attached to the prefix of ``right``. When ``right`` is itself the result of
    an earlier combine the new text goes in front of its prefix, so nesting
    combine calls on the right reads left to right:

        combine(a, '+', combine(b, '~', c))  ->  'a + b ~ c'

    Args:
        left: Selector rendered before the combinator
        combinator: A ``Combinator`` or any combinator token
        right: Selector rendered after the combinator

    Returns:
        A copy of ``right`` carrying the extended prefix. ``left`` and
        ``right`` are not modified.

    """
    token = combinator.value if isinstance(combinator, Combinator) else str(combinator)
    link = f'{left.stringify()} {token} '

    if not right.prefix:
        prefix = link
    elif not right.combined:
        prefix = right.prefix + link
    else:
        prefix = link + right.prefix

    result = right.model_copy(update={'prefix': prefix, 'combined': True})
    logfire.debug('Combined selectors', combinator=token, selector=result.stringify())
    logger.debug(f'Combined selectors with {token!r}: "{result.stringify()}"')
    return result


# Zero-state entry point shared by all selector chains
css_selector_builder = CompoundSelector()
