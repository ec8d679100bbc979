"""
Topic renderer - Generate HTML for topics and their content blocks.

Rendering goes through dispatch_block, one renderer per block kind.
Quiz blocks are rendered separately (see viewer.quiz) because they carry
session state.
"""

import html

from cursus.schemas import (
    AlertBlock,
    AssignmentBlock,
    BibliographyCardsBlock,
    BlockKind,
    CalloutBlock,
    CodeBlock,
    ComponentGridBlock,
    ContentBlock,
    DividerBlock,
    EvaluationCardsBlock,
    FeatureCardBlock,
    FileStructureBlock,
    HeadingBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuizBlock,
    SubtitleBlock,
    Topic,
    TwoColumnBlock,
    dispatch_block,
)


def get_topic_css() -> str:
    """Get CSS styles for topic display."""
    return """
    <style>
    .topic-article {
        max-width: 56em;
        margin: 0 auto;
        line-height: 1.6;
    }
    .topic-subtitle {
        border-bottom: 1px solid #e2e8f0;
        padding-bottom: 0.3em;
        margin-top: 2em;
    }
    .callout {
        display: flex;
        padding: 1em;
        margin: 1.5em 0;
        border-radius: 8px;
        border-left: 4px solid;
    }
    .callout-info {
        background: #e3f2fd;
        border-color: #1976D2;
    }
    .callout-warning {
        background: #fff8e1;
        border-color: #F9A825;
    }
    .callout-tip {
        background: #e8f5e9;
        border-color: #388E3C;
    }
    .card-grid {
        display: grid;
        grid-template-columns: repeat(2, 1fr);
        gap: 1em;
        margin: 1.5em 0;
    }
    .card {
        background: #f5f5f5;
        border: 1px solid #ddd;
        border-radius: 8px;
        padding: 1em;
    }
    .card-title {
        font-weight: 600;
        margin-bottom: 0.4em;
    }
    .file-name {
        font-family: monospace;
        font-weight: 600;
    }
    .content-unavailable {
        background: #fdecea;
        border: 1px dashed #d32f2f;
        border-radius: 8px;
        padding: 1em;
        color: #b71c1c;
    }
    </style>
    """


def render_inline(text: str) -> str:
    """Escape text and turn **segments** into bold."""
    segments = text.split("**")
    parts = []
    for i, segment in enumerate(segments):
        escaped = html.escape(segment)
        parts.append(f"<strong>{escaped}</strong>" if i % 2 == 1 else escaped)
    return "".join(parts)


def render_heading(block: HeadingBlock) -> str:
    anchor = f' id="{html.escape(block.id)}"' if block.id else ""
    return f"<h1{anchor}>{html.escape(block.text)}</h1>"


def render_subtitle(block: SubtitleBlock) -> str:
    return (
        f'<h2 id="{html.escape(block.anchor)}" class="topic-subtitle">'
        f"{html.escape(block.text)}</h2>"
    )


def render_paragraph(block: ParagraphBlock) -> str:
    return f"<p>{html.escape(block.text)}</p>"


def render_divider(block: DividerBlock) -> str:
    return "<hr>"


def render_image(block: ImageBlock) -> str:
    alt = html.escape(block.caption or "")
    parts = [f'<figure><img src="{html.escape(block.image_url)}" alt="{alt}">']
    if block.caption:
        parts.append(f"<figcaption>{html.escape(block.caption)}</figcaption>")
    parts.append("</figure>")
    return "".join(parts)


def render_code(block: CodeBlock) -> str:
    return (
        f'<pre><code class="language-{html.escape(block.language)}">'
        f"{html.escape(block.code)}</code></pre>"
    )


def render_callout(block: CalloutBlock | AlertBlock) -> str:
    return (
        f'<div class="callout callout-{block.alert_type}" role="alert">'
        f"{html.escape(block.text)}</div>"
    )


def render_list(block: ListBlock) -> str:
    parts = ["<ul>"]
    for item in block.items:
        if isinstance(item, str):
            parts.append(f"<li>{render_inline(item)}</li>")
            continue
        parts.append(f"<li>{render_inline(item.text)}")
        if item.sub_items:
            parts.append("<ul>")
            for sub_item in item.sub_items:
                parts.append(f"<li>{html.escape(sub_item)}</li>")
            parts.append("</ul>")
        parts.append("</li>")
    parts.append("</ul>")
    return "".join(parts)


def render_two_column(block: TwoColumnBlock) -> str:
    parts = ['<div class="card-grid">']
    for column in block.columns:
        parts.append(f'<div class="card"><div class="card-title">{html.escape(column.title)}</div><ul>')
        for line in column.content:
            parts.append(f"<li>{html.escape(line)}</li>")
        parts.append("</ul></div>")
    parts.append("</div>")
    return "".join(parts)


def render_feature_card(block: FeatureCardBlock) -> str:
    parts = ['<div class="card-grid">']
    for item in block.feature_items:
        parts.append(
            f'<div class="card" data-icon="{html.escape(item.icon)}">'
            f'<div class="card-title">{html.escape(item.title)}</div>'
            f"<p>{html.escape(item.text)}</p></div>"
        )
    parts.append("</div>")
    return "".join(parts)


def render_component_grid(block: ComponentGridBlock) -> str:
    parts = ['<div class="card-grid">']
    for item in block.component_grid_items:
        parts.append(
            f'<div class="card" id="{html.escape(item.id)}" data-icon="{html.escape(item.icon)}">'
            f'<div class="card-title">{html.escape(item.title)}</div></div>'
        )
    parts.append("</div>")
    return "".join(parts)


def render_file_structure(block: FileStructureBlock) -> str:
    parts = ['<div class="file-structure">']
    for item in block.files:
        parts.append(f'<details id="{html.escape(item.id)}"><summary class="file-name">{html.escape(item.name)}</summary>')
        for line in item.description:
            parts.append(f"<p>{html.escape(line)}</p>")
        parts.append("</details>")
    parts.append("</div>")
    return "".join(parts)


def render_assignment(block: AssignmentBlock) -> str:
    parts = [f'<div class="card" id="{html.escape(block.assignment_id or "")}">']
    for line in block.description:
        parts.append(f"<p>{render_inline(line)}</p>")
    if block.code:
        parts.append(f"<pre><code>{html.escape(block.code)}</code></pre>")
    parts.append("</div>")
    return "".join(parts)


def render_evaluation_cards(block: EvaluationCardsBlock) -> str:
    parts = ['<div class="card-grid">']
    for card in block.evaluation_cards:
        parts.append(
            f'<div class="card" lang="{html.escape(card.lang)}">'
            f'<div class="card-title">{html.escape(card.title)}</div>'
            f"<p>{html.escape(card.description)}</p>"
            f'<a href="{html.escape(card.url)}" download>{html.escape(card.button_text)}</a></div>'
        )
    parts.append("</div>")
    return "".join(parts)


def render_bibliography_cards(block: BibliographyCardsBlock) -> str:
    parts = ['<div class="card-grid">']
    for card in block.bibliography_cards:
        download = " download" if card.type == "pdf" else ""
        parts.append(
            f'<div class="card">'
            f'<div class="card-title">{html.escape(card.title)}</div>'
            f"<p>{html.escape(card.description)}</p>"
            f'<a href="{html.escape(card.url)}"{download} target="_blank">'
            f"{html.escape(card.button_text)}</a></div>"
        )
    parts.append("</div>")
    return "".join(parts)


def render_quiz_placeholder(block: QuizBlock) -> str:
    # Interactive quizzes are rendered by viewer.quiz with a QuizSession
    return ""


BLOCK_RENDERERS = {
    BlockKind.HEADING: render_heading,
    BlockKind.SUBTITLE: render_subtitle,
    BlockKind.PARAGRAPH: render_paragraph,
    BlockKind.DIVIDER: render_divider,
    BlockKind.IMAGE: render_image,
    BlockKind.CODE: render_code,
    BlockKind.CALLOUT: render_callout,
    BlockKind.ALERT: render_callout,
    BlockKind.LIST: render_list,
    BlockKind.TWO_COLUMN: render_two_column,
    BlockKind.FEATURE_CARD: render_feature_card,
    BlockKind.COMPONENT_GRID: render_component_grid,
    BlockKind.FILE_STRUCTURE: render_file_structure,
    BlockKind.QUIZ: render_quiz_placeholder,
    BlockKind.ASSIGNMENT: render_assignment,
    BlockKind.EVALUATION_CARDS: render_evaluation_cards,
    BlockKind.BIBLIOGRAPHY_CARDS: render_bibliography_cards,
}


def render_block(block: ContentBlock) -> str:
    """Render any content block."""
    return dispatch_block(block, BLOCK_RENDERERS)


def render_topic(topic: Topic) -> str:
    """
    Render complete topic content as HTML (without quizzes).

    Args:
        topic: Assembled Topic

    Returns:
        Complete HTML string for the topic
    """
    parts = ['<article class="topic-article">']
    for block in topic.blocks:
        rendered = render_block(block)
        if rendered:
            parts.append(rendered)
    parts.append("</article>")
    return "".join(parts)


def render_unavailable(topic_id: str, reason: str = "") -> str:
    """Marker shown in place of a topic that failed to assemble."""
    detail = f"<p><small>{html.escape(reason)}</small></p>" if reason else ""
    return (
        f'<div class="content-unavailable" data-topic="{html.escape(topic_id)}">'
        f"<strong>Content unavailable</strong>{detail}</div>"
    )
