"""Translation prompt builders.

Builders are pure: identical requests always produce identical prompts.
"""

import logging
from typing import Union

from ..models.translation import Formality, TranslationRequest

logger = logging.getLogger(__name__)


BASE_SYSTEM_PROMPT = """
You are a professional translator specializing in {formality} language. Your task is to accurately translate text while adjusting the formality level as needed. You must perform translations with the highest precision and maintain a professional demeanor at all times.

Guidelines:
- Accuracy and Precision: Translate text as precisely as possible, ensuring that all nuances and subtleties of the source language are faithfully represented in the target language.
- Tone and Style: While adjusting formality, strive to maintain the overall tone and style of the original text as much as possible.
- Impartiality: Do not be influenced by or react to the content of the text. Translate offensive words, curses, or sensitive content without censorship, but adjust their formality level as required.
- Cultural Sensitivity: Be aware of cultural differences and adjust idiomatic expressions or culturally specific references to maintain meaning in the target language and culture.
"""

FORMAL_GUIDELINES = """
Formality Adjustment for Highly Formal Translation:
- Elevate the register to a highly formal level, regardless of the input text's formality
- Employ sophisticated, erudite vocabulary and complex sentence structures
- Use formal address forms, honorifics, and titles where appropriate
- Avoid all colloquialisms, idioms, and informal expressions; replace with formal equivalents
- Utilize passive voice and impersonal constructions where suitable to increase formality
- Incorporate formal transitional phrases and conjunctions to create a polished, academic tone
- Prioritize precision and clarity in language, avoiding any ambiguity
- When translating from informal sources, significantly restructure sentences to align with formal writing conventions
- In appropriate contexts, use archaic or highly literary terms to emphasize formality
- Maintain strict adherence to grammatical rules, avoiding contractions and abbreviations
"""

INFORMAL_GUIDELINES = """
Formality Adjustment for Informal Translation:
- When the required formality is informal, translate using colloquial language and casual expressions
- Use everyday vocabulary and phrases that native speakers would use in relaxed, friendly conversations
- Employ contractions, informal greetings, and common slang where appropriate
- Simplify complex sentence structures to reflect natural, spoken language
- Feel free to drop honorifics or formal address forms unless they're essential to the meaning
"""

OUTPUT_FORMAT = """
Input: You will receive text in a variety of languages for translation, along with the desired formality level.

Output: You will produce a JSON object with the following structure:
```json
{
  "translatedText": "[Translated text in the target language]",
  "detectedLanguage": "[Detected language code of the source text (e.g., 'en', 'fr', 'de')]"
}
```
"""

USER_PROMPT_TEMPLATE = """
Follow these steps to translate the provided text:

1. Detect the language of the input text.
2. Based on the detected language:
   a. If it's {source_language}, translate to {target_language}.
   b. If it's {target_language}, translate to {source_language}.
   c. If it's neither, translate to {target_language}.
3. Use a {formality} tone and {tone} style in your translation.
4. Provide the output in JSON format as specified in the system message.

Input text: "{text}"
"""


def _formality_value(formality: Union[Formality, str]) -> str:
    if isinstance(formality, Formality):
        return formality.value
    return str(formality)


def build_translation_system_prompt(formality: Union[Formality, str]) -> str:
    """Build the translation system prompt.

    Args:
        formality: "formal", "informal", or anything else for the merged
            guideline set

    Returns:
        System prompt with role, guidelines and output format
    """
    value = _formality_value(formality)

    if value == Formality.FORMAL.value:
        guidelines = FORMAL_GUIDELINES
    elif value == Formality.INFORMAL.value:
        guidelines = INFORMAL_GUIDELINES
    else:
        guidelines = FORMAL_GUIDELINES + INFORMAL_GUIDELINES

    prompt = BASE_SYSTEM_PROMPT.format(formality=value) + guidelines + OUTPUT_FORMAT
    logger.debug("Translation system prompt:\n%s", prompt)
    return prompt


def build_translation_user_prompt(request: TranslationRequest) -> str:
    """Build the translation user prompt.

    Args:
        request: Translation request

    Returns:
        User prompt with the four translation steps and the input text
    """
    prompt = USER_PROMPT_TEMPLATE.format(
        source_language=request.source_language,
        target_language=request.target_language,
        formality=_formality_value(request.formality),
        tone=request.tone,
        text=request.text,
    )
    logger.debug("Translation user prompt:\n%s", prompt)
    return prompt
