"""Visual content strategy consultation prompt.

Builds the text of a consultation request that a caller can hand to a
language model to plan which visuals to generate first.  The text is fixed
apart from the business details, which are inserted as given.

Usage
-----
::

    text = build_strategy_prompt(
        business_type="Neighbourhood bakery",
        goals="more weekend footfall, catering orders",
        target_audience="Local families and office workers",
        budget="small-business",
    )
"""

from __future__ import annotations

_INTRO = "Create a comprehensive visual content strategy for:"

_DELIVERABLES = """**Please provide:**
1. **Visual Content Audit**: What types of images will have the highest impact
2. **Priority Recommendations**: Which visuals to create first based on ROI
3. **Content Calendar**: Suggested schedule for visual content creation
4. **Platform Strategy**: Optimal visual formats for different channels
5. **Brand Consistency**: Guidelines for maintaining visual coherence
6. **Success Metrics**: How to measure visual content performance
7. **Specific Prompts**: Ready-to-use prompts for the image generation tools"""

_CLOSING = (
    "Focus on actionable recommendations with expected business impact and ROI estimates."
)


def build_strategy_prompt(
    business_type: str,
    goals: str,
    target_audience: str,
    *,
    budget: str | None = None,
    timeline: str | None = None,
) -> str:
    """Compile the strategy consultation prompt.

    Args:
        business_type: Kind of business.
        goals: Primary goals, comma-separated.
        target_audience: Who the visuals are for.
        budget: Optional budget category; omitted from the text when None.
        timeline: Optional timeline; omitted from the text when None.

    Returns:
        The prompt, with sections separated by blank lines.
    """
    details = [
        "**Business Details:**",
        f"- Type: {business_type}",
        f"- Goals: {goals}",
        f"- Target Audience: {target_audience}",
    ]
    if budget:
        details.append(f"- Budget Category: {budget}")
    if timeline:
        details.append(f"- Timeline: {timeline}")

    return "\n\n".join([_INTRO, "\n".join(details), _DELIVERABLES, _CLOSING])
