"""Sentence chunking prompt builders."""

import json
import logging

logger = logging.getLogger(__name__)


EXAMPLE_INPUT = {
    "fr-en": [
        {
            "sourceText": "Alors que la pluie tombait sans cesse sur Paris, j'ai décidé de me rendre dans un café pittoresque.",
            "translatedText": "As the rain poured relentlessly over Paris, I decided to head to a quaint café.",
        }
    ]
}

EXAMPLE_OUTPUT = {
    "fr-en": [
        {
            "chunks": [
                {
                    "sourceText": "Alors que la pluie tombait sans cesse sur Paris,",
                    "translatedText": "As the rain poured relentlessly over Paris,",
                },
                {
                    "sourceText": "j'ai décidé de me rendre",
                    "translatedText": "I decided to head",
                },
                {
                    "sourceText": "dans un café pittoresque.",
                    "translatedText": "to a quaint café.",
                },
            ]
        }
    ]
}

SENTENCE_SPLIT_SYSTEM_PROMPT = """
You are a language processing expert. You split sentence pairs into short, aligned chunks for language learners.

Input: A JSON object whose keys are language-pair codes (for example "fr-en", source language first). Each value is an array of objects with the fields "sourceText" (a sentence in the source language) and "translatedText" (its translation).

Task:
- Split every sourceText into meaningful chunks (clauses or phrases) of a few words each.
- Pair each source chunk with the part of translatedText that expresses the same meaning.
- Keep the chunks in the original order of the source sentence. Concatenating the chunks must reproduce the sentence.
- Preserve the original punctuation and capitalization.

Output: A JSON object with the same language-pair keys. Each value is an array with one object per input sentence, in input order. Each object has a single field "chunks": an array of {{"sourceText", "translatedText"}} objects.
Return only the JSON object, without commentary.

Example input:
```json
{example_input}
```

Example output:
```json
{example_output}
```
"""


def build_sentence_split_system_prompt() -> str:
    """Build the sentence chunking system prompt.

    Returns:
        System prompt describing the nested input and output shape, with one
        worked example
    """
    prompt = SENTENCE_SPLIT_SYSTEM_PROMPT.format(
        example_input=json.dumps(EXAMPLE_INPUT, ensure_ascii=False, indent=2),
        example_output=json.dumps(EXAMPLE_OUTPUT, ensure_ascii=False, indent=2),
    )
    logger.debug("Sentence split system prompt:\n%s", prompt)
    return prompt


def build_sentence_split_user_prompt(text: str) -> str:
    """Build the sentence chunking user prompt.

    The request text is already the JSON payload, so it is sent verbatim.
    """
    return text
