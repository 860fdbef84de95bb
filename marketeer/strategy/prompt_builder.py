"""
Prompt template for marketing strategy generation.

The brief is placed verbatim inside a fixed instruction that asks the model,
acting as a marketing strategist, for three components and a JSON object with
exactly the fields ``marketingCopy``, ``visualStrategy`` and ``targetAudience``.
"""

from marketeer.core.constants import STRATEGY_FIELDS
from marketeer.core.logging_config import get_logger, truncate
from marketeer.schemas import load_schema
from marketeer.strategy.models import GenerationRequest

# Initialize logger
logger = get_logger(__name__)

# Instruction template for strategy generation. Literal braces are doubled for str.format.
STRATEGY_PROMPT_TEMPLATE = """You are an expert marketing strategist. A user has provided the following product/service description:

"{brief}"

Generate a comprehensive marketing strategy with these three components:

1. Marketing Copy: Write persuasive, engaging marketing copy for this product/service. Make it compelling and action-oriented. 2-3 paragraphs.

2. Visual Strategy: Describe the visual presentation strategy including suggested imagery, colors, design motifs, mood, and overall aesthetic direction. Be specific and actionable.

3. Target Audience: Identify and describe the ideal target audience including demographics, psychographics, pain points, and why this product/service appeals to them.

Return your response as a JSON object with this exact structure:
{{
  "marketingCopy": "your marketing copy here",
  "visualStrategy": "your visual strategy here",
  "targetAudience": "your target audience analysis here"
}}"""

def build_generation_request(brief: str) -> GenerationRequest:
    """
    Build the generation request for a brief.

    The brief is substituted as a value, so any braces or instructions it
    contains are carried through as plain text.

    Args:
        brief (str): A brief that has already passed validation

    Returns:
        GenerationRequest: Instruction text, output schema and expected field names
    """
    instruction = STRATEGY_PROMPT_TEMPLATE.format(brief=brief)
    logger.debug(f"Built strategy prompt for brief: {truncate(brief)}")

    return GenerationRequest(
        brief=brief,
        instruction=instruction,
        output_schema=load_schema("marketing_strategy"),
        field_names=STRATEGY_FIELDS
    )
