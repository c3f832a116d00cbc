"""Pydantic models describing selectors as plain data."""

from pydantic import BaseModel, ConfigDict, Field

from csscraft.builder import Combinator, CompoundSelector, SelectorPart, combine, css_selector_builder


class SelectorSpec(BaseModel):
    """Parts of one compound selector.

    Attributes:
        element: Element (type) name
        id: Id without the leading '#'
        classes: Class names without the leading '.'
        attributes: Attribute expressions without brackets
        pseudo_classes: Pseudo-classes without the leading ':'
        pseudo_element: Pseudo-element without the leading '::'

    """

    model_config = ConfigDict(extra='forbid')

    element: str | None = Field(default=None, description='Element name')
    id: str | None = Field(default=None, description='Id selector')
    classes: list[str] = Field(default_factory=list, description='Class selectors')
    attributes: list[str] = Field(default_factory=list, description='Attribute expressions')
    pseudo_classes: list[str] = Field(default_factory=list, description='Pseudo-classes')
    pseudo_element: str | None = Field(default=None, description='Pseudo-element')

    def build(self, base: CompoundSelector = css_selector_builder) -> CompoundSelector:
        """Apply every part to ``base`` in canonical order.

        Raises:
            OccurrenceError: If ``base`` already has a singleton part set here.
            OrderError: If ``base`` already reached a later part.

        """
        selector = base
        if self.element is not None:
            selector = selector.element(self.element)
        if self.id is not None:
            selector = selector.id(self.id)
        for name in self.classes:
            selector = selector.class_(name)
        for expr in self.attributes:
            selector = selector.attr(expr)
        for name in self.pseudo_classes:
            selector = selector.pseudo_class(name)
        if self.pseudo_element is not None:
            selector = selector.pseudo_element(self.pseudo_element)
        return selector

    def rows(self) -> list[tuple[str, str]]:
        """Return (part label, rendered token) pairs in canonical order."""
        values: list[tuple[SelectorPart, str | None]] = [
            (SelectorPart.ELEMENT, self.element),
            (SelectorPart.ID, self.id),
            *((SelectorPart.CLASS, name) for name in self.classes),
            *((SelectorPart.ATTRIBUTE, expr) for expr in self.attributes),
            *((SelectorPart.PSEUDO_CLASS, name) for name in self.pseudo_classes),
            (SelectorPart.PSEUDO_ELEMENT, self.pseudo_element),
        ]
        return [(part.label, part.render(value)) for part, value in values if value is not None]


class SelectorLink(BaseModel):
    """A combinator and the selector it leads to."""

    combinator: str = Field(default=Combinator.DESCENDANT.value, description='Combinator token')
    selector: SelectorSpec


class SelectorChain(BaseModel):
    """A compound selector followed by any number of combinator links.

    Example:
        >>> chain = SelectorChain(
        ...     head=SelectorSpec(element='ul'),
        ...     links=[SelectorLink(combinator='>', selector=SelectorSpec(element='li'))],
        ... )
        >>> chain.build().stringify()
        'ul > li'

    """

    head: SelectorSpec
    links: list[SelectorLink] = Field(default_factory=list)

    @property
    def selectors(self) -> list[SelectorSpec]:
        """All compound selectors of the chain, head first."""
        return [self.head] + [link.selector for link in self.links]

    def build(self) -> CompoundSelector:
        """Combine the chain, nesting from the right."""
        built = [spec.build() for spec in self.selectors]

        result = built[-1]
        for left, link in zip(reversed(built[:-1]), reversed(self.links)):
            result = combine(left, link.combinator, result)
        return result
