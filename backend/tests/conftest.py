# backend/tests/conftest.py
import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from lingua.core.llm import TextGenerator

MOCK_SENTENCES = {
    "fr-en": [
        {
            "sourceText": "Alors que la pluie tombait sans cesse sur Paris, créant une atmosphère mélancolique, j'ai décidé de me rendre dans un café pittoresque et de profiter d'un bon livre tout en dégustant un café chaud.",
            "translatedText": "As the rain poured relentlessly over Paris, creating a melancholic atmosphere, I decided to head to a quaint café and enjoy a good book while sipping a hot coffee.",
        },
        {
            "sourceText": "Après avoir passé des heures à explorer les rues sinueuses de Rome, j'ai trouvé un petit restaurant familial où j'ai dégusté un délicieux plat de pâtes fraîches, accompagné d'un verre de vin rouge local.",
            "translatedText": "After spending hours exploring the winding streets of Rome, I found a small family-run restaurant where I enjoyed a delicious plate of fresh pasta, paired with a glass of local red wine.",
        },
    ],
    "de-en": [
        {
            "sourceText": "Während ich durch den geschäftigen Berliner Weihnachtsmarkt schlenderte, wurde ich von dem Duft frisch gebackener Lebkuchen und Glühwein verführt.",
            "translatedText": "As I strolled through the bustling Berlin Christmas market, I was enticed by the aroma of freshly baked gingerbread and mulled wine.",
        },
    ],
    "pt-es": [
        {
            "sourceText": "Enquanto a brisa suave acariciava as folhas das árvores, eu me sentei à beira da praia e observei o pôr do sol.",
            "translatedText": "Mientras la suave brisa acariciaba las hojas de los árboles, me senté a la orilla de la playa y contemplé la puesta de sol.",
        },
    ],
}


@pytest.fixture(scope="function")
def mock_generator():
    """Returns a mock text generator; set generate_text.return_value per test."""
    generator = MagicMock(spec=TextGenerator)
    generator.provider = "mock"
    generator.model = "mock-model"
    generator.generate_text = AsyncMock(return_value="")
    return generator


@pytest.fixture
def mock_sentences():
    """Mock sentence pairs keyed by language pair."""
    return MOCK_SENTENCES


@pytest.fixture
def sentence_split_text():
    """JSON-encoded request text for the fr-en pair."""
    return json.dumps({"fr-en": MOCK_SENTENCES["fr-en"]}, ensure_ascii=False)


@pytest.fixture
def chunked_reply():
    """A well-formed model reply for the fr-en sentence split."""
    return {
        "fr-en": [
            {
                "chunks": [
                    {
                        "sourceText": "Alors que la pluie tombait sans cesse sur Paris,",
                        "translatedText": "As the rain poured relentlessly over Paris,",
                    },
                    {
                        "sourceText": "créant une atmosphère mélancolique,",
                        "translatedText": "creating a melancholic atmosphere,",
                    },
                ]
            },
            {
                "chunks": [
                    {
                        "sourceText": "Après avoir passé des heures à explorer les rues sinueuses de Rome,",
                        "translatedText": "After spending hours exploring the winding streets of Rome,",
                    },
                ]
            },
        ]
    }
