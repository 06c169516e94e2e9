"""View construction snippets.

Maps a ViewSpec to the Swift expression that constructs the view. Bare
constructors are used when there is nothing to configure; otherwise the
view is built inside an immediately-invoked closure:

    {
        let label = UILabel()
        label.text = "Hello"
        return label
    }()

Text content is inserted verbatim. Callers must supply content that is
already valid inside a Swift string literal.
"""

import logging
from typing import Any

from src.model import ViewSpec
from src.schema import ContentSlot, ViewKindMeta, get_view_meta

logger = logging.getLogger(__name__)

INDENT = "    "

# Image references with one of these prefixes name an SF Symbol.
SYSTEM_IMAGE_PREFIXES: tuple[str, ...] = ("systemName:", "system:")

# Local name used in the construction block of classes outside the registry.
FALLBACK_LOCAL_NAME = "view"


def create_view(spec: ViewSpec) -> str:
    """Build the Swift expression constructing a view.

    Never fails: unknown classes degrade to a generic no-argument
    constructor wrapped in a construction block.

    Args:
        spec: The view description.

    Returns:
        str: A Swift expression (possibly multi-line) creating the view.

    Example:
        >>> create_view(ViewSpec(name="title", kind="UILabel"))
        'UILabel()'
    """
    meta = get_view_meta(spec.kind)
    if meta is None:
        logger.debug(f"Unknown view kind '{spec.kind}', using generic constructor")
        return construction_block(
            f"{spec.kind}()",
            FALLBACK_LOCAL_NAME,
            property_lines(FALLBACK_LOCAL_NAME, spec.properties),
        )

    configure = content_lines(meta, spec) + property_lines(
        meta.local_name, spec.properties
    )
    if not configure:
        return meta.constructor

    return construction_block(meta.constructor, meta.local_name, configure)


def construction_block(constructor: str, local_name: str, configure: list[str]) -> str:
    """Wrap construction and configuration in an immediately-invoked closure.

    Args:
        constructor: Swift expression creating the instance.
        local_name: Variable name inside the closure.
        configure: Configuration statements referencing `local_name`.

    Returns:
        str: The closure expression.
    """
    lines = ["{", f"{INDENT}let {local_name} = {constructor}"]
    lines.extend(f"{INDENT}{line}" for line in configure)
    lines.append(f"{INDENT}return {local_name}")
    lines.append("}()")
    return "\n".join(lines)


def content_lines(meta: ViewKindMeta, spec: ViewSpec) -> list[str]:
    """Configuration statements for a view's natural content."""
    local = meta.local_name

    if meta.content == ContentSlot.IMAGE:
        if spec.image:
            return [f"{local}.image = {image_expression(spec.image)}"]
        return []

    if not spec.text:
        return []

    if meta.content == ContentSlot.TEXT:
        return [f'{local}.text = "{spec.text}"']
    if meta.content == ContentSlot.TITLE:
        return [f'{local}.setTitle("{spec.text}", for: .normal)']
    if meta.content == ContentSlot.PLACEHOLDER:
        return [f'{local}.placeholder = "{spec.text}"']

    return []


def image_expression(reference: str) -> str:
    """Pick the UIImage initializer for an image reference.

    Args:
        reference: Asset name, or an SF Symbol name with a system prefix.

    Returns:
        str: `UIImage(systemName: ...)` or `UIImage(named: ...)`.

    Example:
        >>> image_expression("systemName: star.fill")
        'UIImage(systemName: "star.fill")'
    """
    for prefix in SYSTEM_IMAGE_PREFIXES:
        if reference.startswith(prefix):
            symbol = reference[len(prefix) :].strip()
            return f'UIImage(systemName: "{symbol}")'
    return f'UIImage(named: "{reference}")'


def property_lines(local_name: str, properties: dict[str, Any]) -> list[str]:
    """Assignment statements for extra properties, in insertion order."""
    return [
        f"{local_name}.{key} = {swift_literal(value)}"
        for key, value in properties.items()
    ]


def swift_literal(value: Any) -> str:
    """Render a property value as Swift source.

    Strings are treated as Swift expressions and inserted verbatim
    (".systemBlue", "UIColor.red"); booleans and None map to Swift
    keywords.
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = [
    "SYSTEM_IMAGE_PREFIXES",
    "create_view",
    "construction_block",
    "content_lines",
    "image_expression",
    "property_lines",
    "swift_literal",
]
