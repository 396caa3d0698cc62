"""Apply annotation instructions to plain text for terminal display."""

from __future__ import annotations

from collections import defaultdict

from rich.text import Text

from tasktime.models.annotation import Annotation, Highlight, Label

HIGHLIGHT_STYLE = "bold cyan"
LABEL_STYLE = "grey50"


def render_text(
    document: str,
    annotations: list[Annotation],
    *,
    highlight_style: str = HIGHLIGHT_STYLE,
    label_style: str = LABEL_STYLE,
) -> Text:
    """Return `document` with highlights styled and labels inserted.

    Label text is inserted at its anchor without shifting the offsets of any other
    instruction, since every offset refers to the original document.
    """

    base = Text(document)
    labels: dict[int, list[str]] = defaultdict(list)
    for annotation in annotations:
        if isinstance(annotation, Highlight):
            base.stylize(highlight_style, annotation.start, annotation.end)
        elif isinstance(annotation, Label):
            labels[annotation.position].append(annotation.text)

    positions = sorted(p for p in labels if 0 < p < len(document))
    parts = base.divide(positions)
    bounds = [0, *positions]

    out = Text()
    for label_text in labels.get(0, []):
        out.append(label_text, style=label_style)
    for start, part in zip(bounds, parts):
        out.append_text(part)
        end = start + len(part)
        if end in labels and end != 0:
            for label_text in labels[end]:
                out.append(label_text, style=label_style)
    return out
