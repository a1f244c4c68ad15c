"""
Prompt templates for common Figma workflows.
"""
from .mcp_instance import mcp


@mcp.prompt(
    name="analyze-design-system",
    description="Analyze design system components and styles for consistency",
)
def analyze_design_system(fileKey: str) -> str:
    return (
        f"Please analyze the design system in this Figma file ({fileKey}). "
        "Focus on color consistency, typography usage, component variations, and "
        "any inconsistencies or opportunities for improvement. First list the components "
        "and styles using the appropriate tools, then provide your analysis."
    )


@mcp.prompt(
    name="extract-ui-copy",
    description="Extract and organize all UI copy from designs",
)
def extract_ui_copy(fileKey: str) -> str:
    return (
        f"Please extract all UI copy from this Figma file ({fileKey}). "
        "Organize the text by screens or components, and identify any potential "
        "inconsistencies in tone, terminology, or language. "
        "Use the extract-text tool to get the content."
    )


@mcp.prompt(
    name="generate-dev-handoff",
    description="Generate development handoff documentation based on designs",
)
def generate_dev_handoff(fileKey: str) -> str:
    return (
        f"Please create comprehensive development handoff documentation for this Figma file ({fileKey}). "
        "Include component specifications, style guides, interaction patterns, and responsive behavior descriptions. "
        "Use the appropriate tools to gather file data, components, and styles."
    )
