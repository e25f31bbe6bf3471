"""Post templates.

Each template fills all three fields at once; the composer loads it with
``HistoryManager.set_all`` so that one undo brings the previous draft back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .document import PostDocument
from .unicode_style import to_bold

_POINT_DOWN = "\U0001F447"
_BOOKMARK = "\U0001F516"
_RECYCLE = "\u267b\ufe0f"


@dataclass(frozen=True)
class PostTemplate:
    id: str
    name: str
    description: str
    hook: str
    content: str
    cta: str

    def document(self) -> PostDocument:
        return PostDocument(hook=self.hook, content=self.content, cta=self.cta)


TEMPLATES: Tuple[PostTemplate, ...] = (
    PostTemplate(
        id="empty",
        name="Empty post",
        description="Clear all fields",
        hook="",
        content="",
        cta="",
    ),
    PostTemplate(
        id="aida",
        name="AIDA",
        description="Attention, interest, desire, action",
        hook="Did you know that [surprising fact]?\n\nMost [audience] miss it completely.",
        content=(
            "Here is why it matters:\n\n[Explain the fact and why it is relevant]\n\n"
            "Imagine you could [desired outcome].\n\n"
            "That is exactly what I achieved in the last [time span] by [method].\n\n"
            "The result?\n→ [Result 1]\n→ [Result 2]\n→ [Result 3]"
        ),
        cta='Want to know how to get there too?\n\nComment "YES" and I will send you [resource].',
    ),
    PostTemplate(
        id="pas",
        name="PAS",
        description="Problem, agitate, solve",
        hook="[Problem] is the reason [audience] never reach [goal].",
        content=(
            "And the worst part?\n\nThe longer you wait, the more [negative consequence].\n\n"
            "I went through it myself:\n• [Experience]\n• [Consequence]\n• [Turning point]\n\n"
            "The fix is simpler than you think:\n\n1. [Step 1]\n2. [Step 2]\n3. [Step 3]\n\n"
            "Since I did this, [positive result]."
        ),
        cta=f"What is your biggest challenge with [topic]?\n\nShare it in the comments {_POINT_DOWN}",
    ),
    PostTemplate(
        id="storytelling",
        name="Storytelling",
        description="Situation, turning point, insight",
        hook="[Time span] ago I faced a decision that changed everything.",
        content=(
            "The situation:\n[Describe the starting point]\n\n"
            "I had two options:\na) [Safe option]\nb) [Risky option]\n\nI chose b).\n\n"
            "Then something unexpected happened:\n[Turning point]\n\n"
            "The most important lesson I learned:\n\n[Insight in one sentence]\n\n"
            "Today I know: [Closing thought]"
        ),
        cta=f"What was the boldest decision of your career?\n\n{_RECYCLE} Repost if this helps.",
    ),
    PostTemplate(
        id="listicle",
        name="Listicle",
        description="Numbered list behind a strong hook",
        hook="[Number] things I wish I had known before I started [role]:",
        content="\n\n".join(
            f"{n}. [Point {n}]\n→ [Short explanation]" for n in range(1, 6)
        ) + "\n\nNumber [X] made the biggest difference.",
        cta=f"Which point would you add?\n\nSave this post for later {_BOOKMARK}",
    ),
    PostTemplate(
        id="contrarian",
        name="Contrarian take",
        description="Provocative claim, reasoning, discussion",
        hook="Unpopular opinion: [controversial claim].\n\nAnd I stand by it.",
        content=(
            "Why?\n\nBecause [reason 1].\n\n"
            "Most [audience] believe that [common assumption].\n\n"
            "But reality looks different:\n\n• [Counterpoint 1]\n• [Counterpoint 2]\n• [Counterpoint 3]\n\n"
            "I am not saying that [caveat].\n\nBut I am saying: [core message]."
        ),
        cta=f"Do you agree or am I wrong?\n\nCurious to hear your take {_POINT_DOWN}",
    ),
    PostTemplate(
        id="howto",
        name="How-to",
        description="Problem, steps, result",
        hook="How to [reach result] in [time span], step by step:",
        content=(
            "The problem:\n[Why most people fail at it]\n\n"
            "The solution in [number] steps:\n\n"
            + "\n\n".join(f"{to_bold(f'Step {n}')}: [Title]\n[Description]" for n in range(1, 4))
            + "\n\nPro tip: [Extra tip]"
        ),
        cta=f"Save this post and try it this week.\n\nWhich step will you start with? {_POINT_DOWN}",
    ),
)

_BY_ID: Dict[str, PostTemplate] = {template.id: template for template in TEMPLATES}


def get_template(template_id: str) -> PostTemplate:
    """Look up a template by id.

    Raises:
        KeyError: If no template has that id.
    """
    try:
        return _BY_ID[template_id]
    except KeyError:
        raise KeyError(f"Unknown template: {template_id!r}") from None


def template_ids() -> Tuple[str, ...]:
    return tuple(_BY_ID)
