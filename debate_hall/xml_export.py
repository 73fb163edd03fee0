"""XML export of a debate and its arguments."""

from collections.abc import Iterable
from xml.sax.saxutils import escape

from .models import Argument, Debate

_EXTRA_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value: str) -> str:
    """Escape &, <, >, double and single quotes for XML text and attributes."""
    return escape(value, _EXTRA_ENTITIES)


def export_debate_xml(debate: Debate, arguments: Iterable[Argument]) -> str:
    """Serialize a debate with its arguments to an XML document string."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<debate id="{debate.id}">',
        f"  <title>{escape_xml(debate.title)}</title>",
        f"  <description>{escape_xml(debate.description or '')}</description>",
        "  <arguments>",
    ]

    for argument in arguments:
        lines.extend(
            [
                f'    <argument side="{argument.side.value}" author="{escape_xml(argument.author_name)}">',
                f"      <text>{escape_xml(argument.text)}</text>",
                f"      <createdAt>{argument.created_at.isoformat()}</createdAt>",
                "    </argument>",
            ]
        )

    lines.extend(["  </arguments>", "</debate>"])
    return "\n".join(lines) + "\n"
